"""Plain-language guidance shown next to each severity tier."""

from aicura.models import SeverityTier

_GUIDANCE_BY_SEVERITY = {
    SeverityTier.LOW: "This condition is typically mild and often resolves on its own.",
    SeverityTier.MEDIUM: "This condition may require some attention but is usually manageable.",
    SeverityTier.HIGH: "This condition requires medical attention. Please consult a doctor soon.",
}

DEFAULT_GUIDANCE = "Please consult a healthcare professional for proper evaluation."


def severity_guidance(severity: SeverityTier | str | None) -> str:
    """Return the reassurance sentence for a severity tier."""
    try:
        tier = SeverityTier(severity)
    except ValueError:
        return DEFAULT_GUIDANCE
    return _GUIDANCE_BY_SEVERITY.get(tier, DEFAULT_GUIDANCE)
