# editor/topics/dispatch.py
#
# Raw line -> constructed action. Pure parse: the only effect is building the
# action, which may read receiver state (SaveAs/Close snapshots).

from __future__ import annotations

from typing import List

from editor.errors import EmptyInput, MissingArgument, UnrecognizedCommand
from editor.topics.actions import COMMANDS


def tokenize(line: str) -> List[str]:
    return (line or "").split()


def dispatch(editor, line: str, table=None):
    table = COMMANDS if table is None else table

    parts = tokenize(line)
    if not parts:
        raise EmptyInput()

    name, *args = parts
    entry = table.get(name)
    if entry is None:
        raise UnrecognizedCommand(name)

    cls = entry[0]
    required = cls.args
    if len(args) < len(required):
        raise MissingArgument(name, required[len(args)])

    # extra tokens are ignored
    return cls(editor, *args[:len(required)])
