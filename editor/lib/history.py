# editor/lib/history.py
# Store-based primitive (no Core dependency).
# LIFO record of applied actions.

from editor.errors import EmptyHistoryError


class History:
    def __init__(self):
        self._actions = []

    def push(self, action):
        self._actions.append(action)

    def pop(self):
        if not self._actions:
            raise EmptyHistoryError()
        return self._actions.pop()

    def peek(self):
        if not self._actions:
            raise EmptyHistoryError()
        return self._actions[-1]

    def __len__(self):
        return len(self._actions)

    def __iter__(self):
        return iter(list(self._actions))
