"""Form state and the submit flow behind the Submit Mileage button."""

from dataclasses import dataclass
from datetime import date as date_cls

from .errors import ValidationError
from .records import MileageRecord
from .submission import FailureKind, MileageSubmitter

SUCCESS_MESSAGE = "Mileage data submitted successfully"
CONNECT_FAILED_MESSAGE = (
    "Cannot connect to server. Please check:\n"
    "• Internet connection\n"
    "• Google Apps Script URL\n"
    "• Script permissions"
)
TIMEOUT_MESSAGE = "Request timed out. Please try again."
GENERIC_NETWORK_MESSAGE = "Network error. Please check your connection and try again."


@dataclass
class FormState:
    date: str = ""
    car_plate: str = ""
    mileage: str = ""
    agent: str = ""
    is_submitting: bool = False

    def __post_init__(self):
        if not self.date:
            self.date = date_cls.today().isoformat()

    def reset_vehicle_fields(self) -> None:
        """Clear plate and mileage; the agent usually logs several cars on the same day."""
        self.car_plate = ""
        self.mileage = ""


@dataclass(frozen=True)
class Alert:
    title: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.title == "Error"


def failure_message(kind: FailureKind | None, remote_message: str) -> str:
    if kind == FailureKind.REMOTE_REJECTED:
        return remote_message
    if kind == FailureKind.NETWORK:
        return CONNECT_FAILED_MESSAGE
    if kind == FailureKind.TIMEOUT:
        return TIMEOUT_MESSAGE
    return GENERIC_NETWORK_MESSAGE


def submit_form(state: FormState, submitter: MileageSubmitter) -> Alert:
    """Validate, submit and describe the outcome. Mutates state in place."""
    try:
        record = MileageRecord.from_form(state.date, state.car_plate, state.mileage, state.agent)
    except ValidationError as e:
        return Alert("Error", e.message)

    state.is_submitting = True
    try:
        result = submitter.submit(record)
    finally:
        state.is_submitting = False

    if result.ok:
        state.reset_vehicle_fields()
        return Alert("Success!", SUCCESS_MESSAGE)

    return Alert("Error", failure_message(result.kind, result.message))
