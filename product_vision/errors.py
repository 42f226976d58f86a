"""
Exceptions raised by the pipeline.

Only the vision stage raises past the pipeline boundary. Callers should catch
``VisionConfigurationError`` separately to show a "feature not configured"
message instead of a generic failure.
"""


class PipelineError(Exception):
    """Base class for all pipeline errors."""


class VisionError(PipelineError):
    """Base class for failures of the mandatory vision stage."""


class VisionConfigurationError(VisionError):
    """Vision credentials are missing, unreadable or rejected by the provider."""


class VisionTransportError(VisionError):
    """The vision provider could not be reached or could not fetch the image."""


class VisionAnalysisError(VisionError):
    """The vision provider rejected the image itself (bad format, not found)."""


class GenerativeConfigurationError(PipelineError):
    """No credentials for the generative provider.

    The pipeline treats this as "provider not configured" and skips the stage.
    """
