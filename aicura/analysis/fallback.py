"""Offline keyword-triggered analysis used when the external model is unavailable."""

from __future__ import annotations

from aicura.models import AnalysisCondition, AnalysisResult, SeverityTier

FALLBACK_SUMMARY = "Preliminary analysis based on your symptoms. This is not a medical diagnosis."

FALLBACK_NEXT_STEPS = [
    "Monitor your symptoms for changes",
    "Get adequate rest and stay hydrated",
    "Consult a healthcare professional for proper evaluation",
    "Seek immediate medical attention if symptoms worsen",
]

# (trigger substrings, canned condition), checked in order.
# Sequences are tuples; each result builds fresh lists.
_KEYWORD_CONDITIONS: list[tuple[tuple[str, ...], dict]] = [
    (
        ("headache", "head"),
        {
            "name": "Tension Headache",
            "confidence": 75,
            "description": (
                "A common type of headache that causes mild to moderate pain and pressure "
                "around the forehead, back of the eyes and neck."
            ),
            "severity": SeverityTier.LOW,
            "symptoms": ("headache", "pressure", "discomfort"),
            "recommendations": (
                "Rest in a quiet, dark room",
                "Apply a warm or cold compress",
                "Stay hydrated",
                "Consider over-the-counter pain relievers",
            ),
        },
    ),
    (
        ("fever", "temperature"),
        {
            "name": "Viral Infection",
            "confidence": 70,
            "description": "A common viral infection that can cause fever, fatigue, and other symptoms.",
            "severity": SeverityTier.MEDIUM,
            "symptoms": ("fever", "fatigue", "body aches"),
            "recommendations": (
                "Rest and stay hydrated",
                "Monitor temperature",
                "Use fever-reducing medication if needed",
                "Consult doctor if fever persists",
            ),
        },
    ),
    (
        ("cough", "throat"),
        {
            "name": "Upper Respiratory Infection",
            "confidence": 65,
            "description": "An infection of the nose, sinuses, throat, or large airways.",
            "severity": SeverityTier.LOW,
            "symptoms": ("cough", "sore throat", "congestion"),
            "recommendations": (
                "Stay hydrated",
                "Use throat lozenges",
                "Use saline nasal spray",
                "Rest as needed",
            ),
        },
    ),
]

_GENERAL_DISCOMFORT = {
    "name": "General Discomfort",
    "confidence": 60,
    "description": "General symptoms that may indicate various mild conditions.",
    "severity": SeverityTier.LOW,
    "symptoms": ("discomfort", "fatigue"),
    "recommendations": (
        "Monitor symptoms",
        "Get adequate rest",
        "Stay hydrated",
        "Consult healthcare provider if symptoms worsen",
    ),
}


def fallback_analysis(symptoms_text: str | None) -> AnalysisResult:
    """Build a canned analysis from keyword hits in the symptom text.

    Always returns at least one condition.
    """
    lowered = symptoms_text.lower() if isinstance(symptoms_text, str) else ""

    conditions = [
        AnalysisCondition(**template)
        for triggers, template in _KEYWORD_CONDITIONS
        if any(trigger in lowered for trigger in triggers)
    ]
    if not conditions:
        conditions.append(AnalysisCondition(**_GENERAL_DISCOMFORT))

    return AnalysisResult(
        conditions=conditions,
        summary=FALLBACK_SUMMARY,
        next_steps=list(FALLBACK_NEXT_STEPS),
    )
