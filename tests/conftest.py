"""Shared fixtures: a recording mock transport for httpx."""

import json
from typing import List, Optional
from urllib.parse import parse_qs

import httpx
import pytest

from nexmo.config import reset_endpoint_url

API_KEY = "test-key"
API_SECRET = "test-secret"


class RecordingTransport(httpx.MockTransport):
    """Mock transport that records requests and replays one canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.content = b"{}"
        self.headers = {"Content-Type": "application/json"}
        super().__init__(self._handle)

    def respond(
        self,
        status_code: int = 200,
        json_data: object = None,
        content: bytes = b"",
        content_type: Optional[str] = None,
    ) -> None:
        if json_data is not None:
            content = json.dumps(json_data).encode()
            content_type = content_type or "application/json"
        self.status_code = status_code
        self.content = content
        self.headers = {"Content-Type": content_type} if content_type else {}

    def _handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def form(self) -> dict:
        return parse_qs(self.last.content.decode(), keep_blank_values=True)

    def query(self) -> dict:
        return parse_qs(self.last.url.query.decode(), keep_blank_values=True)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture(autouse=True)
def _default_endpoint():
    reset_endpoint_url()
    yield
    reset_endpoint_url()
