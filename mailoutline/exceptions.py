"""Custom exceptions for the outline pipeline."""

class OutlineError(Exception):
    """Base exception for pipeline errors."""
    pass

class ExtractionError(OutlineError):
    """Exception for unreadable input files and decoder failures."""
    pass

class GenerationError(OutlineError):
    """Exception for language model failures."""
    pass

class MalformedOutlineError(OutlineError):
    """Exception for model responses that are not a JSON array of sections."""

    def __init__(self, message: str, raw_text: str = ""):
        super().__init__(message)
        self.raw_text = raw_text

class RenderError(OutlineError):
    """Exception for outlines that cannot be rendered."""
    pass

class ConfigurationError(OutlineError):
    """Exception for invalid environment or .env settings."""
    pass
