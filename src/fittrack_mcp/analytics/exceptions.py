"""Analytics exceptions."""


class AnalyticsError(Exception):
    """Base exception for analytics errors."""
    pass


class InvalidInputError(AnalyticsError, ValueError):
    """Raised when a calculation receives a non-positive value it cannot use."""
    pass


class InsightServiceError(AnalyticsError):
    """Raised when Gemini fails or returns something unusable.

    ``status_code`` is the HTTP code reported by the service, if it answered at all.
    """
    status_code: int | None = None

    def __init__(self, reason: str, *, status_code: int | None = None):
        super().__init__(reason)
        if status_code is not None:
            self.status_code = status_code


class AIUnavailableError(InsightServiceError):
    """Raised when no API key is configured for the text-generation service."""
    pass
