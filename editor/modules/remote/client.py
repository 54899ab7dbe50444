# modules/remote/client.py
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from editor.errors import EditorError


DEFAULT_USER_AGENT = "cmdedit/0.1"


@dataclass(frozen=True)
class RemoteConfig:
    timeout_ms: int = 8000
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_dict(cls, raw: Optional[Dict[str, Any]]) -> "RemoteConfig":
        raw = raw or {}
        if not isinstance(raw, dict):
            raise ValueError("config.remote must be an object")

        # a bad value only resets its own key
        try:
            timeout_ms = int(raw.get("timeout_ms", 8000))
        except (TypeError, ValueError, OverflowError):
            timeout_ms = 8000

        user_agent = raw.get("user_agent")
        user_agent = user_agent.strip() if isinstance(user_agent, str) else ""

        if timeout_ms < 0:
            timeout_ms = 0

        return cls(timeout_ms=timeout_ms, user_agent=user_agent or DEFAULT_USER_AGENT)


class RemoteError(EditorError):
    pass


class RemoteTimeout(RemoteError):
    pass


class RepoClient:
    """
    Minimal repository fetcher used by `clone <url>`.
    Returns ONLY the number of bytes received on success.

    Usage:
        client = RepoClient(RemoteConfig())
        size = await client.fetch("https://example.org/repo.git")
    """

    def __init__(self, cfg: RemoteConfig | None = None, *, transport: httpx.AsyncBaseTransport | None = None):
        self.cfg = cfg or RemoteConfig()
        # tests inject httpx.MockTransport here
        self._transport = transport

    def _timeout(self) -> httpx.Timeout:
        if self.cfg.timeout_ms > 0:
            return httpx.Timeout(self.cfg.timeout_ms / 1000.0)
        return httpx.Timeout(None)

    async def fetch(self, url: str) -> int:
        url = (url or "").strip()
        if not url:
            raise RemoteError("clone failed: empty url")

        t0 = time.monotonic()
        headers = {"User-Agent": self.cfg.user_agent}

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout(),
                headers=headers,
                follow_redirects=True,
            ) as client:
                r = await client.get(url)
        except httpx.TimeoutException as e:
            raise RemoteTimeout(f"clone timeout after {time.monotonic() - t0:.1f}s: {url}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteError(f"clone failed: {e}") from e

        if not 200 <= r.status_code < 300:
            raise RemoteError(f"clone failed: HTTP {r.status_code} :: {url}")

        return len(r.content)
