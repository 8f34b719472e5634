"""Exception hierarchy for the matcher and the external analysis adapter."""


class AicuraError(Exception):
    """Base class for all AIcura errors."""


class ParseError(AicuraError):
    """Raw symptom input could not be read as text."""


class AnalysisError(AicuraError):
    """Base class for failures on the external analysis path."""


class ExternalServiceError(AnalysisError):
    """The call to the generative text service failed at transport level."""


class ResponseParseError(AnalysisError):
    """The generative text service replied with something that is not a JSON object."""
