from typing import Any, Callable, List, Optional, Union

import httpx
import pytest

from coincheck_client import Coincheck, Credentials
from coincheck_client.auth.nonce import NonceGenerator
from coincheck_client.core.config import ClientSettings

ACCESS_KEY = "test-access-key"
SECRET_KEY = "test-secret-key"

Reply = Union[httpx.Response, Exception, Callable[[httpx.Request], httpx.Response]]


class WireRecorder:
    """httpx.MockTransport handler that records requests and replays canned replies in order."""

    def __init__(self, replies: Optional[List[Reply]] = None):
        self.replies = list(replies or [])
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            raise AssertionError(f"unexpected extra request: {request.method} {request.url}")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if callable(reply):
            return reply(request)
        return reply


def ok(payload: Any, status: int = 200) -> httpx.Response:
    return httpx.Response(status, json=payload)


@pytest.fixture
def make_client():
    """Build a Coincheck client wired to a WireRecorder instead of the network."""

    def _make(
        replies: Optional[List[Reply]] = None,
        with_keys: bool = True,
        nonce_generator: Optional[NonceGenerator] = None,
        **kwargs,
    ):
        recorder = WireRecorder(replies)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
        credentials = Credentials.from_values(ACCESS_KEY, SECRET_KEY) if with_keys else None
        client = Coincheck(
            credentials=credentials,
            settings=ClientSettings(),
            http_client=http_client,
            nonce_generator=nonce_generator,
            **kwargs,
        )
        return client, recorder

    return _make
