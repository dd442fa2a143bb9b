"""Endpoint and timeout settings."""

import os
from dataclasses import dataclass, replace

from dotenv import load_dotenv

# Apps Script web app in front of the mileage sheet
DEFAULT_ENDPOINT_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbxYpcOt5uGNB6F2Be5OMfXgNdUevW3Nva7yUDz5qJhBZfLjMUaraobiRR9NkA2_Jbl9/exec"
)
DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_CHECK_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Settings:
    endpoint_url: str = DEFAULT_ENDPOINT_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    connection_check_timeout_seconds: float = DEFAULT_CHECK_TIMEOUT_SECONDS


def _seconds(name: str, raw) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None


def load_settings(overrides: dict | None = None) -> Settings:
    """Build settings from .env / environment, then apply explicit overrides."""
    load_dotenv()

    settings = Settings(
        endpoint_url=os.getenv("MILEAGE_ENDPOINT_URL", DEFAULT_ENDPOINT_URL),
        timeout_seconds=_seconds(
            "MILEAGE_TIMEOUT_SECONDS", os.getenv("MILEAGE_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
        ),
        connection_check_timeout_seconds=_seconds(
            "MILEAGE_CHECK_TIMEOUT_SECONDS",
            os.getenv("MILEAGE_CHECK_TIMEOUT_SECONDS", DEFAULT_CHECK_TIMEOUT_SECONDS),
        ),
    )

    if overrides:
        known = {k: v for k, v in overrides.items() if k in Settings.__dataclass_fields__ and v not in (None, "")}
        for key in ("timeout_seconds", "connection_check_timeout_seconds"):
            if key in known:
                known[key] = _seconds(key, known[key])
        settings = replace(settings, **known)

    return settings
