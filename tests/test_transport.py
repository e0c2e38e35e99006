import httpx

from conversations_client.core.config import Settings
from conversations_client.core.http_transport import HTTPTransport
from conversations_client.main import close_client, get_client


def test_headers_and_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(204)

    http = httpx.Client(transport=httpx.MockTransport(handler))
    transport = HTTPTransport("https://api.test/", token=None, client=http)

    resp = transport.request("DELETE", "/v0.1/conversations/CON-1")

    assert resp.status_code == 204
    assert str(seen[0].url) == "https://api.test/v0.1/conversations/CON-1"
    assert seen[0].headers["content-type"] == "application/json"
    assert "authorization" not in seen[0].headers


def test_external_client_is_not_closed():
    http = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(200)))

    with HTTPTransport("https://api.test", client=http):
        pass

    assert not http.is_closed
    http.close()


def test_defaults_from_settings():
    cfg = Settings(CONVERSATIONS_API_URL="https://conv.example", CONVERSATIONS_API_TOKEN="t0k")
    transport = HTTPTransport(settings=cfg)

    assert transport.url("/v0.1/conversations") == "https://conv.example/v0.1/conversations"
    assert transport._headers["Authorization"] == "Bearer t0k"
    transport.close()


def test_shared_client_is_a_singleton():
    try:
        assert get_client() is get_client()
    finally:
        close_client()


def test_configure_logging_uses_settings_level(monkeypatch):
    import logging

    from conversations_client import main

    calls = []
    monkeypatch.setattr(main.settings, "log_level", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    main.configure_logging()

    assert calls == [{"level": logging.DEBUG}]
