"""Car mileage tracker: validation and submission to the mileage sheet."""

from .config import Settings, load_settings
from .errors import (
    HTTPStatusFailure,
    MalformedResponse,
    NetworkError,
    RequestTimeout,
    SubmissionError,
    ValidationError,
)
from .form import Alert, FormState, submit_form
from .records import MileageRecord, validate_form
from .submission import FailureKind, MileageSubmitter, SubmissionResult

__all__ = [
    "Alert",
    "FailureKind",
    "FormState",
    "HTTPStatusFailure",
    "MalformedResponse",
    "MileageRecord",
    "MileageSubmitter",
    "NetworkError",
    "RequestTimeout",
    "Settings",
    "SubmissionError",
    "SubmissionResult",
    "ValidationError",
    "load_settings",
    "submit_form",
    "validate_form",
]
