"""editor/core.py

Core runtime + init_core() wiring.

Core owns the receiver, the history stack and the session log. Every input
line goes through execute(): control commands (undo/history/help) run
directly, everything else is dispatch -> apply -> push.
"""

from __future__ import annotations

import json
from pathlib import Path

from editor.errors import DispatchError, EditorError, EmptyHistoryError
from editor.lib.editor import Editor
from editor.lib.history import History
from editor.modules.remote import RemoteConfig, RepoClient
from editor.topics import ALL_COMMANDS
from editor.topics.dispatch import dispatch, tokenize

DEFAULT_PROMPT = "> "


class Core:
    def __init__(self, editor=None, actions=None):
        self.editor = editor if editor is not None else Editor()
        self.history = History()

        self.actions = dict(ALL_COMMANDS if actions is None else actions)   # name -> (ActionClass, help, usage)
        self.controls = {}                   # name -> {handler, help, usage}
        self.log = []
        self.prompt = DEFAULT_PROMPT

    def register(self, name, handler, help_text="", usage=""):
        self.controls[name] = {"handler": handler, "help": help_text, "usage": usage}

    def dispatch(self, raw):
        return dispatch(self.editor, raw, self.actions)

    def apply(self, action):
        # push only after apply() returned; a failing action is dropped
        action.apply()
        self.history.push(action)
        return action

    def undo(self):
        action = self.history.pop()
        action.reverse()
        return action

    def _out(self, out):
        self.log.append({"out": out})
        return out

    def execute(self, raw):
        self.log.append({"in": raw})

        parts = tokenize(raw)
        entry = self.controls.get(parts[0]) if parts else None
        try:
            if entry:
                out = entry["handler"](self, *parts[1:])
            else:
                self.apply(self.dispatch(raw))
                out = None
        except (DispatchError, EmptyHistoryError, EditorError) as e:
            return self._out(f"Error: {e}")

        if out is None:
            return None
        return self._out(out)


# ---------- control commands (never recorded in history) ----------
def undo_cmd(core, *_):
    action = core.undo()
    return f"Undone: {action.describe()}"


def history_cmd(core, *_):
    if not len(core.history):
        return "(empty)"
    return "\n".join(f"{i}. {a.describe()}" for i, a in enumerate(core.history, 1))


def help_cmd(core, name=None, *_):
    if name:
        if name in core.actions:
            _, help_text, usage = core.actions[name]
        elif name in core.controls:
            help_text, usage = core.controls[name]["help"], core.controls[name]["usage"]
        else:
            return "Command not found"
        return (
            "Command: " + name + "\n"
            "Usage:   " + usage + "\n"
            "Help:    " + help_text
        )

    lines = []
    lines.append("Editor Command Surface")
    lines.append("----------------------------------------")
    lines.append("")
    lines.append("Commands:")
    for cmd, (_, help_text, _) in core.actions.items():
        lines.append(f"  - {cmd:<8} {help_text}")
    lines.append("")
    lines.append("Control:")
    for cmd, entry in core.controls.items():
        lines.append(f"  - {cmd:<8} {entry['help']}")
    lines.append("")
    lines.append("Examples:")
    lines.append("  open notes.txt")
    lines.append("  saveas notes-v2.txt")
    lines.append("  undo")
    return "\n".join(lines)


def _load_core_config(path):
    p = Path(path)
    if not p.exists():
        return {}
    try:
        cfg = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return cfg if isinstance(cfg, dict) else {}


def init_core(config_path="config/core.json", emit=None, transport=None):
    cfg = _load_core_config(config_path)

    try:
        remote_cfg = RemoteConfig.from_dict(cfg.get("remote"))
    except (TypeError, ValueError):
        remote_cfg = RemoteConfig()

    editor = Editor(emit=emit, remote=RepoClient(remote_cfg, transport=transport))
    core = Core(editor)

    prompt = cfg.get("prompt")
    if isinstance(prompt, str) and prompt:
        core.prompt = prompt

    core.register("undo", undo_cmd, "Reverse the most recent command", "undo")
    core.register("history", history_cmd, "List recorded commands, oldest first", "history")
    core.register("help", help_cmd, "Show available commands", "help [command]")

    return core
