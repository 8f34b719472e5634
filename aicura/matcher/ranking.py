"""Severity-weighted ranking of catalog entries against matched symptoms."""

from __future__ import annotations

import math
from collections.abc import Iterable

from aicura.matcher.catalog import SymptomCatalog
from aicura.matcher.tokenizer import match_known_symptoms, tokenize
from aicura.models import MatchResult, SeverityTier

DEFAULT_TOP_N = 5

_SEVERITY_DISCOUNTS = {
    SeverityTier.LOW: 0.70,
    SeverityTier.MEDIUM: 0.85,
    SeverityTier.HIGH: 1.00,
}


def severity_discount(severity: SeverityTier) -> float:
    return _SEVERITY_DISCOUNTS.get(SeverityTier(severity), _SEVERITY_DISCOUNTS[SeverityTier.MEDIUM])


def discounted_score(raw_score: float, severity: SeverityTier) -> float:
    # High-severity conditions are never discounted.
    return raw_score * severity_discount(severity)


def _to_percent(score: float) -> int:
    # Round half up so 0.125 reports as 13, not banker's 12.
    return min(100, max(0, math.floor(score * 100 + 0.5)))


def rank(
    matched_symptoms: Iterable[str],
    catalog: SymptomCatalog,
    top_n: int = DEFAULT_TOP_N,
) -> list[MatchResult]:
    """Rank catalog entries by the share of their symptoms that were matched.

    Entries with no overlap are left out. Ties keep catalog order.
    """
    matched = set(matched_symptoms)
    if not matched or top_n <= 0:
        return []

    scored: list[tuple[float, MatchResult]] = []
    for entry in catalog:
        known = set(entry.known_symptoms)
        if not known:
            continue
        score = discounted_score(len(known & matched) / len(known), entry.severity)
        if score <= 0:
            continue
        scored.append(
            (
                score,
                MatchResult(
                    disease_name=entry.disease_name,
                    confidence=_to_percent(score),
                    description=entry.description,
                    severity=entry.severity,
                ),
            )
        )

    scored.sort(key=lambda item: item[0], reverse=True)
    return [result for _, result in scored[:top_n]]


def predict(
    text: object,
    catalog: SymptomCatalog,
    top_n: int = DEFAULT_TOP_N,
) -> list[MatchResult]:
    """Tokenize free text, match it against the catalog and rank the results."""
    matched = match_known_symptoms(tokenize(text), catalog.all_symptoms())
    return rank(matched, catalog, top_n=top_n)
