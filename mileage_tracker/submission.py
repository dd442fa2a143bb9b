"""Deliver a mileage record, falling back to the next transport on network trouble."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol

from loguru import logger

from .config import Settings
from .errors import (
    HTTPStatusFailure,
    MalformedResponse,
    NetworkError,
    RequestTimeout,
    SubmissionError,
)
from .records import MileageRecord
from .transports import PrimaryTransport, SecondaryTransport

SUCCESS_SENTINEL = "success"
DEFAULT_FAILURE_MESSAGE = "Failed to submit data"


class FailureKind(str, Enum):
    NETWORK = "network"
    TIMEOUT = "timeout"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"
    REMOTE_REJECTED = "remote_rejected"


# Only these let the next transport have a go.
FALLBACK_KINDS = (FailureKind.NETWORK, FailureKind.TIMEOUT)


class Transport(Protocol):
    name: str

    def send(self, payload: dict) -> Any: ...

    def close(self) -> None: ...


@dataclass(frozen=True)
class SubmissionResult:
    ok: bool
    message: str
    kind: FailureKind | None = None
    transport: str | None = None
    payload: dict = field(default_factory=dict)


def classify(error: SubmissionError) -> FailureKind:
    if isinstance(error, RequestTimeout):
        return FailureKind.TIMEOUT
    if isinstance(error, NetworkError):
        return FailureKind.NETWORK
    if isinstance(error, HTTPStatusFailure):
        return FailureKind.HTTP_STATUS
    if isinstance(error, MalformedResponse):
        return FailureKind.MALFORMED_RESPONSE
    return FailureKind.NETWORK


def normalize_response(data: Any, transport: str) -> SubmissionResult:
    """Turn a decoded reply into a result. Only {"result": "success"} counts."""
    if not isinstance(data, dict):
        return SubmissionResult(
            ok=False,
            message="Invalid response format",
            kind=FailureKind.MALFORMED_RESPONSE,
            transport=transport,
        )

    if data.get("result") == SUCCESS_SENTINEL:
        return SubmissionResult(
            ok=True,
            message=data.get("message") or "Mileage data submitted successfully",
            transport=transport,
            payload=data,
        )

    return SubmissionResult(
        ok=False,
        message=data.get("message") or DEFAULT_FAILURE_MESSAGE,
        kind=FailureKind.REMOTE_REJECTED,
        transport=transport,
        payload=data,
    )


class MileageSubmitter:
    """Tries each transport in order; moves on only after a network or timeout failure."""

    def __init__(self, settings: Settings, transports: list[Transport] | None = None):
        self.settings = settings
        self.transports = transports if transports is not None else [
            PrimaryTransport(settings),
            SecondaryTransport(settings),
        ]

    def submit(self, record: MileageRecord) -> SubmissionResult:
        payload = record.to_payload()
        logger.info(f"Sending data: {payload}")
        logger.info(f"To URL: {self.settings.endpoint_url}")

        result = SubmissionResult(ok=False, message="No transport configured", kind=FailureKind.NETWORK)
        for transport in self.transports:
            try:
                data = transport.send(payload)
            except SubmissionError as e:
                kind = classify(e)
                logger.warning(f"{transport.name} failed ({kind.value}): {e}")
                result = SubmissionResult(ok=False, message=str(e), kind=kind, transport=transport.name)
                if kind in FALLBACK_KINDS:
                    continue
                break

            logger.info(f"{transport.name} response: {data}")
            result = normalize_response(data, transport.name)
            break

        if not result.ok:
            logger.error(f"Submission failed ({result.kind.value}): {result.message}")
        return result

    def close(self) -> None:
        for transport in self.transports:
            transport.close()

    def __enter__(self) -> "MileageSubmitter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
