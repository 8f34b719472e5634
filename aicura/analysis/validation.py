"""Normalization of untrusted analysis payloads returned by the external model."""

from __future__ import annotations

import logging
import math
from typing import Any

from aicura.models import AnalysisCondition, AnalysisResult, SeverityTier

logger = logging.getLogger(__name__)

MIN_CONFIDENCE = 60
MAX_CONFIDENCE = 95
DEFAULT_CONFIDENCE = 50

UNKNOWN_CONDITION_NAME = "Unknown Condition"
UNKNOWN_CONDITION_DESCRIPTION = "No description available"
DEFAULT_RECOMMENDATIONS = ["Consult a healthcare professional"]
DEFAULT_SUMMARY = "Analysis completed. Please review the results below."
DEFAULT_NEXT_STEPS = ["Consult a healthcare professional for proper evaluation."]

DEFAULT_ANALYSIS_SUMMARY = "Unable to provide detailed analysis at this time."


def default_analysis() -> AnalysisResult:
    """Analysis returned when validation itself breaks down."""
    return AnalysisResult(
        conditions=[],
        summary=DEFAULT_ANALYSIS_SUMMARY,
        next_steps=list(DEFAULT_NEXT_STEPS),
    )


def _default_applied(field: str) -> None:
    logger.info("Validation default applied: %s", field)


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _text_list(value: list) -> list[str]:
    return [text for text in (_text(item) for item in value) if text]


def _confidence(value: Any, field: str) -> int:
    number: int | float | None = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        # Compared as-is; JSON integers can exceed float range.
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip().rstrip("%"))
        except ValueError:
            number = None
    if number is None or number != number or number == 0:
        _default_applied(field)
        number = DEFAULT_CONFIDENCE
    clamped = min(MAX_CONFIDENCE, max(MIN_CONFIDENCE, number))
    if clamped != number:
        _default_applied(field)
    # Round half up, matching the local matcher.
    return math.floor(clamped + 0.5)


def _severity(value: Any, field: str) -> SeverityTier:
    if isinstance(value, str):
        try:
            return SeverityTier(value.strip().lower())
        except ValueError:
            pass
    _default_applied(field)
    return SeverityTier.MEDIUM


def _clean_condition(item: Any, index: int) -> AnalysisCondition:
    prefix = f"conditions[{index}]"
    if not isinstance(item, dict):
        _default_applied(prefix)
        item = {}

    name = _text(item.get("name"))
    if not name:
        _default_applied(f"{prefix}.name")
        name = UNKNOWN_CONDITION_NAME

    description = _text(item.get("description"))
    if not description:
        _default_applied(f"{prefix}.description")
        description = UNKNOWN_CONDITION_DESCRIPTION

    symptoms = item.get("symptoms")
    if isinstance(symptoms, list):
        symptoms = _text_list(symptoms)
    else:
        _default_applied(f"{prefix}.symptoms")
        symptoms = []

    recommendations = item.get("recommendations")
    if isinstance(recommendations, list):
        recommendations = _text_list(recommendations)
    else:
        _default_applied(f"{prefix}.recommendations")
        recommendations = list(DEFAULT_RECOMMENDATIONS)

    return AnalysisCondition(
        name=name,
        confidence=_confidence(item.get("confidence"), f"{prefix}.confidence"),
        description=description,
        severity=_severity(item.get("severity"), f"{prefix}.severity"),
        symptoms=symptoms,
        recommendations=recommendations,
    )


def _clean(raw: Any) -> AnalysisResult:
    if not isinstance(raw, dict):
        _default_applied("analysis")
        raw = {}

    conditions_raw = raw.get("conditions")
    if not isinstance(conditions_raw, list):
        _default_applied("conditions")
        conditions_raw = []
    conditions = [_clean_condition(item, i) for i, item in enumerate(conditions_raw)]

    summary = raw.get("summary")
    if not isinstance(summary, str):
        _default_applied("summary")
        summary = DEFAULT_SUMMARY

    next_steps_raw = raw.get("nextSteps", raw.get("next_steps"))
    next_steps = _text_list(next_steps_raw) if isinstance(next_steps_raw, list) else []
    if not next_steps:
        _default_applied("nextSteps")
        next_steps = list(DEFAULT_NEXT_STEPS)

    return AnalysisResult(conditions=conditions, summary=summary, next_steps=next_steps)


def validate_and_clean(raw: Any) -> AnalysisResult:
    """Coerce a decoded model reply into a well-formed AnalysisResult.

    Never raises: every malformed field is replaced by its default, and any
    unexpected failure while cleaning yields the default analysis.
    """
    try:
        return _clean(raw)
    except Exception:
        logger.exception("Analysis validation failed; returning default analysis.")
        return default_analysis()
