import json
from typing import Callable, List

import httpx
import pytest

from conversations_client.api.conversations import ConversationsClient
from conversations_client.core.http_transport import HTTPTransport

BASE_URL = "https://api.test"


class FakeAPI:
    """Risponde alle request con le response registrate e le memorizza."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(500)

    def respond(self, status_code: int, body=None, *, text: str | None = None) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if text is not None:
                return httpx.Response(status_code, text=text)
            if body is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=body)

        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def transport(api):
    http = httpx.Client(transport=httpx.MockTransport(api))
    with HTTPTransport(BASE_URL, token="secret-token", client=http) as t:
        yield t
    http.close()


@pytest.fixture
def client(transport) -> ConversationsClient:
    return ConversationsClient(transport)
