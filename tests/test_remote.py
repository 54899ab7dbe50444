import asyncio

import httpx
import pytest

from editor.errors import EditorError
from editor.modules.remote import RemoteConfig, RemoteError, RemoteTimeout, RepoClient


def _fetch(client, url):
    return asyncio.run(client.fetch(url))


def test_fetch_returns_size(transport):
    assert _fetch(RepoClient(transport=transport), "https://example.org/repo.git") == 8


def test_fetch_sends_user_agent():
    seen = {}

    def handler(request):
        seen["ua"] = request.headers.get("user-agent")
        return httpx.Response(200, content=b"")

    client = RepoClient(RemoteConfig(user_agent="tester/1"), transport=httpx.MockTransport(handler))
    assert _fetch(client, "https://example.org/r.git") == 0
    assert seen["ua"] == "tester/1"


def test_http_error_status(transport):
    with pytest.raises(RemoteError) as exc:
        _fetch(RepoClient(transport=transport), "https://example.org/missing.git")
    assert "HTTP 404" in str(exc.value)


def test_timeout(transport):
    with pytest.raises(RemoteTimeout):
        _fetch(RepoClient(transport=transport), "https://example.org/slow.git")


def test_transport_error(transport):
    with pytest.raises(RemoteError) as exc:
        _fetch(RepoClient(transport=transport), "https://example.org/down.git")
    assert "connection refused" in str(exc.value)


def test_empty_url(transport):
    with pytest.raises(RemoteError):
        _fetch(RepoClient(transport=transport), "  ")


def test_remote_errors_are_editor_errors():
    assert issubclass(RemoteError, EditorError)
    assert issubclass(RemoteTimeout, RemoteError)


def test_config_from_dict():
    assert RemoteConfig.from_dict(None) == RemoteConfig()
    cfg = RemoteConfig.from_dict({"timeout_ms": -5, "user_agent": "  "})
    assert cfg.timeout_ms == 0
    assert cfg.user_agent == "cmdedit/0.1"
    with pytest.raises(ValueError):
        RemoteConfig.from_dict(["nope"])
