"""Shared test fixtures for the ouraring test suite."""

from datetime import date

import httpx
import pytest

from ouraring.services.oura import OuraClient


TODAY = date(2023, 1, 10)


def _sleep_payload(**overrides) -> dict:
    """A complete, valid sleep record as the API sends it."""
    record = {
        "summary_date": "2023-01-01",
        "period_id": 0,
        "is_longest": 1,
        "timezone": 180,
        "bedtime_start": "2023-01-01T23:00:00",
        "bedtime_end": "2023-01-02T07:00:00",
        "score": 80,
        "score_total": 85,
        "score_disturbances": 70,
        "score_efficiency": 90,
        "score_latency": 66,
        "score_rem": 81,
        "score_deep": 95,
        "score_alignment": 74,
        "total": 25200,
        "duration": 28800,
        "awake": 3600,
        "light": 14400,
        "rem": 5400,
        "deep": 5400,
        "onset_latency": 600,
        "restless": 30,
        "efficiency": 87,
        "midpoint_time": 14400,
        "hr_lowest": 50,
        "hr_average": 55.5,
        "rmssd": 33,
        "breath_average": 14.5,
        "temperature_delta": -0.1,
        "hypnogram_5min": "112233",
        "hr_5min": [55, 56, 57, 58, 59, 60],
        "rmssd_5min": [30, 31, 32, 33, 34, 35],
    }
    record.update(overrides)
    return record


@pytest.fixture
def sleep_payload():
    """Builder for valid sleep records; keyword arguments override fields."""
    return _sleep_payload


class StubServer:
    """Records requests and answers each one with the configured response."""

    def __init__(
        self,
        status_code: int = 200,
        json_body=None,
        content: bytes | None = None,
        exc: Exception | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.status_code = status_code
        self.headers = headers or {}
        self.json_body = json_body
        self.content = content
        self.exc = exc
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, headers=self.headers, content=self.content)
        return httpx.Response(self.status_code, headers=self.headers, json=self.json_body)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def today() -> date:
    """The fixed 'current date' injected into test clients."""
    return TODAY


@pytest.fixture
def make_client():
    """
    Factory for an OuraClient wired to a StubServer.

    Takes the StubServer arguments plus OuraClient keyword overrides and
    returns (client, server). Clients are closed after the test.
    """
    clients = []

    def _make(
        status_code: int = 200,
        json_body=None,
        content: bytes | None = None,
        exc: Exception | None = None,
        headers: dict[str, str] | None = None,
        access_token: str = "test-token",
        **kwargs,
    ) -> tuple[OuraClient, StubServer]:
        server = StubServer(status_code, json_body, content, exc, headers)
        kwargs.setdefault("today", lambda: TODAY)
        client = OuraClient(access_token, transport=httpx.MockTransport(server), **kwargs)
        clients.append(client)
        return client, server

    yield _make

    for client in clients:
        client.close()
