# editor/lib/editor.py
#
# Receiver: the object actions delegate to.
# Operations are stubs that only describe what they would do, except
# clone_repository, which goes over the network and may fail.

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from editor.errors import EditorError


def _echo(msg: str) -> None:
    print(msg)


class Editor:
    def __init__(self, path: str = "", emit: Optional[Callable[[str], None]] = None, remote=None):
        self.current_path = path
        self._emit = emit if emit is not None else _echo
        self.remote = remote  # RepoClient or None

    # ---- path field ----
    def get_path(self) -> str:
        return self.current_path

    def set_path(self, path: str) -> None:
        self.current_path = path

    # ---- capability surface ----
    def save(self) -> None:
        self._emit(f"Saving {self.current_path or '<untitled>'}")

    def save_as(self, new_path: str) -> None:
        self.current_path = new_path
        self._emit(f"Saving as {new_path}")

    def open(self, path: str) -> None:
        self.current_path = path
        self._emit(f"Opening {path}")

    def print(self) -> None:
        self._emit(f"Printing {self.current_path or '<untitled>'}")

    def close(self) -> None:
        self._emit(f"Closing {self.current_path or '<untitled>'}")

    def revert(self) -> None:
        self._emit("Reverting last change")

    def create_new(self) -> None:
        self._emit("Creating new file")

    def clone_repository(self, url: str) -> None:
        if self.remote is None:
            raise EditorError("remote access not configured")
        # The loop is synchronous; bridge to the async client.
        size = asyncio.run(self.remote.fetch(url))
        self._emit(f"Cloned repository {url} ({size} bytes)")
