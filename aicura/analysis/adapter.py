"""External symptom analysis with validation and a local fallback."""

import json
import logging
from collections.abc import Mapping

from aicura.analysis.client import chat_completion
from aicura.analysis.fallback import fallback_analysis
from aicura.analysis.validation import validate_and_clean
from aicura.config import settings
from aicura.errors import AnalysisError, ResponseParseError
from aicura.models import AnalysisOutcome, AnalysisResult
from aicura.prompts import ANALYSIS_SYSTEM, build_prompt

logger = logging.getLogger(__name__)

Demographics = Mapping[str, object]


def strip_code_fences(text: str) -> str:
    """Strip markdown code fences and surrounding whitespace from JSON-like text."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        first_newline = cleaned.find("\n")
        cleaned = cleaned[first_newline + 1 :] if first_newline != -1 else cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def _parse_json_payload(raw: str) -> dict:
    try:
        data = json.loads(strip_code_fences(raw))
    except ValueError as exc:
        # JSONDecodeError, or an integer literal past the digit limit.
        raise ResponseParseError(f"Analysis response is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ResponseParseError("Analysis response must be a JSON object.")
    return data


async def request_analysis(
    symptoms: str,
    demographics: Demographics | None = None,
) -> AnalysisResult:
    """Ask the external model for an analysis.

    Raises ExternalServiceError when the call fails and ResponseParseError when
    the reply cannot be decoded.
    """
    demographics = demographics or {}
    prompt = build_prompt(
        symptoms,
        age=demographics.get("age"),
        gender=demographics.get("gender"),
        weight=demographics.get("weight"),
        height=demographics.get("height"),
    )
    raw = await chat_completion(
        system_prompt=ANALYSIS_SYSTEM,
        user_prompt=prompt,
        call_type="symptom_analysis",
    )
    return validate_and_clean(_parse_json_payload(raw))


async def analyze_with_outcome(
    symptoms: str,
    demographics: Demographics | None = None,
) -> AnalysisOutcome:
    """Run one analysis attempt and report where the result came from.

    Never raises. Any failure is replaced by the offline fallback analysis.
    """
    if not settings.analysis_enabled:
        return AnalysisOutcome(
            result=fallback_analysis(symptoms),
            source="fallback",
            error="Analysis service disabled.",
        )

    try:
        result = await request_analysis(symptoms, demographics)
    except AnalysisError as e:
        logger.warning("Analysis failed, using fallback (%s): %s", e.__class__.__name__, e)
        return AnalysisOutcome(
            result=fallback_analysis(symptoms),
            source="fallback",
            error=f"{e.__class__.__name__}: {e}",
        )
    except Exception as e:
        logger.exception("Unexpected analysis failure, using fallback.")
        return AnalysisOutcome(
            result=fallback_analysis(symptoms),
            source="fallback",
            error=f"{e.__class__.__name__}: {e}",
        )
    return AnalysisOutcome(result=result, source="model")


async def analyze(
    symptoms: str,
    demographics: Demographics | None = None,
) -> AnalysisResult:
    """Return an analysis for the symptoms; falls back locally instead of raising."""
    outcome = await analyze_with_outcome(symptoms, demographics)
    return outcome.result
