import httpx
import pytest

from editor.core import init_core
from editor.lib.editor import Editor


@pytest.fixture
def out():
    return []


@pytest.fixture
def editor(out):
    return Editor(emit=out.append)


def _repo_handler(request: httpx.Request) -> httpx.Response:
    if request.url.path.endswith("/missing.git"):
        return httpx.Response(404, text="not found")
    if request.url.path.endswith("/slow.git"):
        raise httpx.ReadTimeout("read timed out", request=request)
    if request.url.path.endswith("/down.git"):
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(200, content=b"PACK0123")


@pytest.fixture
def transport():
    return httpx.MockTransport(_repo_handler)


@pytest.fixture
def core(tmp_path, out, transport):
    return init_core(config_path=tmp_path / "core.json", emit=out.append, transport=transport)
