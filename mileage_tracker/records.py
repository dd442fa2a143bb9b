"""Mileage record and form validation."""

from dataclasses import dataclass

from .errors import ValidationError


def validate_form(car_plate: str, mileage: str, agent: str) -> int:
    """Check the required fields and return the parsed mileage.

    Raises ValidationError for the first rule that fails. Mileage must be a
    whole number above zero; decimals are rejected.
    """
    if not car_plate.strip():
        raise ValidationError("car_plate", "Please enter car plate number")
    if not mileage.strip():
        raise ValidationError("mileage", "Please enter mileage")
    if not agent.strip():
        raise ValidationError("agent", "Please enter agent name")

    digits = mileage.strip()
    if not (digits.isascii() and digits.isdigit()) or int(digits) <= 0:
        raise ValidationError("mileage", "Please enter a valid mileage number")

    return int(digits)


@dataclass(frozen=True)
class MileageRecord:
    date: str
    car_plate: str
    mileage: int
    agent: str

    @classmethod
    def from_form(cls, date: str, car_plate: str, mileage: str, agent: str) -> "MileageRecord":
        """Validate raw form strings and normalize them into a record."""
        parsed_mileage = validate_form(car_plate, mileage, agent)
        return cls(
            date=date,
            car_plate=car_plate.strip().upper(),
            mileage=parsed_mileage,
            agent=agent.strip(),
        )

    def to_payload(self) -> dict:
        """Wire format expected by the sheet script."""
        return {
            "Date": self.date,
            "CarPlate": self.car_plate,
            "Mileage": self.mileage,
            "Agent": self.agent,
        }
