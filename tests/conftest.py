"""Shared fixtures: a client wired to an in-memory recording transport."""

import json
from typing import Any, Callable, Optional, Union
from urllib.parse import parse_qs

import httpx
import pytest

from rongcloud_sdk import AsyncRongCloud, ClientOptions

APP_KEY = "app-key"
APP_SECRET = "app-secret"
BASE_URL = "http://example.test"


class Recorder:
    """httpx.MockTransport handler that records requests and replays queued bodies."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._replies: list[Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]] = []

    def reply(self, body: Any = None, status: int = 200) -> None:
        self._replies.append(httpx.Response(status, json={"code": 200} if body is None else body))

    def reply_raw(self, content: bytes, status: int = 200, headers: Optional[dict[str, str]] = None) -> None:
        # streamed so the body is read and decoded by the client, not here
        self._replies.append(lambda request: httpx.Response(status, headers=headers, stream=httpx.ByteStream(content)))

    def fail(self, exc: Exception) -> None:
        def raise_(request: httpx.Request) -> httpx.Response:
            raise exc
        self._replies.append(raise_)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._replies:
            return httpx.Response(200, json={"code": 200})
        reply = self._replies.pop(0)
        return reply(request) if callable(reply) else reply

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def form(request: httpx.Request) -> dict[str, list[str]]:
    return parse_qs(request.content.decode(), keep_blank_values=True)


def body(request: httpx.Request) -> Any:
    return json.loads(request.content) if request.content else None


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(recorder: Recorder) -> Callable[..., AsyncRongCloud]:
    def make(options: Optional[ClientOptions] = None) -> AsyncRongCloud:
        return AsyncRongCloud(
            APP_KEY, APP_SECRET,
            options=options or ClientOptions(base_url=BASE_URL),
            transport=httpx.MockTransport(recorder),
        )
    return make


@pytest.fixture
def client(make_client: Callable[..., AsyncRongCloud]) -> AsyncRongCloud:
    return make_client()
