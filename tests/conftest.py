from __future__ import annotations

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from mileage_tracker import Settings

ENDPOINT = "https://sheet.example/exec"


def make_response(status_code: int = 200, body: bytes = b"", reason: str = "OK") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp._content = body
    resp.encoding = "utf-8"
    resp.url = ENDPOINT
    return resp


class FakeSession:
    """Stands in for requests.Session; returns a canned response or raises."""

    def __init__(self, response: requests.Response | None = None, error: Exception | None = None) -> None:
        self.headers: dict[str, str] = {}
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str, dict]] = []
        self.closed = False

    def _respond(self, method: str, url: str, kwargs: dict) -> requests.Response:
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response

    def post(self, url: str, **kwargs) -> requests.Response:
        return self._respond("POST", url, kwargs)

    def get(self, url: str, **kwargs) -> requests.Response:
        return self._respond("GET", url, kwargs)

    def close(self) -> None:
        self.closed = True


class FakeTransport:
    """Transport double for submitter tests."""

    def __init__(self, name: str, reply=None, error: Exception | None = None) -> None:
        self.name = name
        self.reply = reply
        self.error = error
        self.payloads: list[dict] = []

    def send(self, payload: dict):
        self.payloads.append(payload)
        if self.error is not None:
            raise self.error
        return self.reply

    def close(self) -> None:
        pass


@pytest.fixture
def settings() -> Settings:
    return Settings(endpoint_url=ENDPOINT, timeout_seconds=15, connection_check_timeout_seconds=10)


class ScriptedAdapter(BaseAdapter):
    """Mounted on a real requests.Session; answers each URL from a script so redirects run for real."""

    def __init__(self, routes: dict[str, tuple[int, bytes, dict[str, str]]]) -> None:
        super().__init__()
        self.routes = routes
        self.requests: list[requests.PreparedRequest] = []

    def send(self, request, **kwargs) -> requests.Response:
        self.requests.append(request)
        status_code, body, headers = self.routes[request.url]
        resp = make_response(status_code, body)
        resp.headers = CaseInsensitiveDict(headers)
        resp.url = request.url
        resp.request = request
        resp._content_consumed = True
        return resp

    def close(self) -> None:
        pass


def scripted_session(routes: dict[str, tuple[int, bytes, dict[str, str]]]) -> tuple[requests.Session, ScriptedAdapter]:
    session = requests.Session()
    adapter = ScriptedAdapter(routes)
    session.mount("https://", adapter)
    return session, adapter
