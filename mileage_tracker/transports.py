"""
HTTP transports for posting a mileage payload to the sheet script.

Two mechanisms are available:
- PrimaryTransport: requests, redirects followed, final 200 or 302 accepted,
  with a plain-text success marker scan when the body is not JSON
- SecondaryTransport: httpx, redirects followed, any 2xx accepted, JSON only

Both raise SubmissionError subclasses so the submitter can decide whether the
next transport should be tried.
"""

from dataclasses import dataclass
from typing import Any

import httpx
import requests
from loguru import logger

from .config import Settings
from .errors import HTTPStatusFailure, MalformedResponse, NetworkError, RequestTimeout

JSON_HEADERS = {"Content-Type": "application/json"}

# Apps Script sometimes answers with plain text instead of JSON. Scanning for
# these markers is a weak contract and only runs after JSON decoding failed.
SUCCESS_MARKERS = ("success", "✅")
ACCEPTED_STATUSES = (200, 302)


class PrimaryTransport:
    """POST through a requests session.

    Apps Script answers doPost with a 302 to an echo URL carrying the reply;
    requests follows it as a GET.
    """

    name = "requests"

    def __init__(self, settings: Settings, session: requests.Session | None = None):
        self.settings = settings
        self.session = session or requests.Session()
        self.session.headers.update(JSON_HEADERS)

    def send(self, payload: dict) -> Any:
        try:
            resp = self.session.post(
                self.settings.endpoint_url,
                json=payload,
                timeout=self.settings.timeout_seconds,
            )
        except requests.Timeout as e:
            raise RequestTimeout("Request timed out") from e
        except requests.RequestException as e:
            raise NetworkError("Network request failed") from e

        if resp.status_code not in ACCEPTED_STATUSES:
            raise HTTPStatusFailure(resp.status_code, resp.reason or "")

        try:
            return resp.json()
        except ValueError:
            if any(marker in resp.text for marker in SUCCESS_MARKERS):
                logger.info("Non-JSON reply carried a success marker, treating as success")
                return {"result": "success", "message": "Data submitted successfully"}
            raise MalformedResponse("Invalid response format")

    def close(self) -> None:
        self.session.close()


class SecondaryTransport:
    """POST through a short-lived httpx client that follows redirects."""

    name = "httpx"

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None):
        self.settings = settings
        self._transport = transport

    def send(self, payload: dict) -> Any:
        timeout = httpx.Timeout(timeout=self.settings.timeout_seconds)
        try:
            with httpx.Client(timeout=timeout, follow_redirects=True, transport=self._transport) as client:
                resp = client.post(
                    self.settings.endpoint_url,
                    json=payload,
                    headers={**JSON_HEADERS, "Accept": "application/json"},
                )
        except httpx.TimeoutException as e:
            raise RequestTimeout("Request timed out") from e
        except httpx.RequestError as e:
            raise NetworkError("Network request failed") from e

        if not resp.is_success:
            raise HTTPStatusFailure(resp.status_code, resp.reason_phrase)

        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponse("Invalid response format") from e

    def close(self) -> None:
        """Nothing to release; the httpx client only lives for the length of send()."""


# --- Connection Check ---

@dataclass(frozen=True)
class ConnectionReport:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


def check_connection(settings: Settings, session: requests.Session | None = None) -> ConnectionReport | None:
    """GET the endpoint and report what came back. Returns None if unreachable."""
    logger.info(f"Testing connection to: {settings.endpoint_url}")
    owns_session = session is None
    session = session or requests.Session()
    try:
        resp = session.get(settings.endpoint_url, timeout=settings.connection_check_timeout_seconds)
    except requests.RequestException as e:
        logger.warning(f"Connection test failed: {e}")
        return None
    finally:
        if owns_session:
            session.close()

    logger.info(f"GET response status: {resp.status_code}")
    logger.info(f"GET response text: {resp.text[:500]}")
    return ConnectionReport(status_code=resp.status_code, text=resp.text)
