"""Exceptions raised while validating and submitting a mileage record."""


class ValidationError(ValueError):
    """A form field failed validation. Raised before any network call."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class SubmissionError(Exception):
    """Base class for transport failures."""


class NetworkError(SubmissionError):
    """The connection could not be established."""


class RequestTimeout(SubmissionError):
    """No response arrived within the configured bound."""


class HTTPStatusFailure(SubmissionError):
    """The endpoint answered with a status the transport does not accept."""

    def __init__(self, status_code: int, reason: str = ""):
        super().__init__(f"HTTP {status_code}: {reason}" if reason else f"HTTP {status_code}")
        self.status_code = status_code


class MalformedResponse(SubmissionError):
    """The body was neither JSON nor carried a recognizable success marker."""
