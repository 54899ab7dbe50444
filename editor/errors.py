# editor/errors.py
#
# Error kinds surfaced by the command loop.
# All of them are per-line and recoverable: Core.execute turns them into
# "Error: ..." messages.


class DispatchError(ValueError):
    pass


class EmptyInput(DispatchError):
    def __init__(self):
        super().__init__("Empty input")


class MissingArgument(DispatchError):
    def __init__(self, command: str, argument: str):
        self.command = command
        self.argument = argument
        super().__init__(f"Missing argument: {argument}")


class UnrecognizedCommand(DispatchError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unrecognized command: {name}")


class EmptyHistoryError(IndexError):
    def __init__(self):
        super().__init__("Nothing to undo")


class EditorError(RuntimeError):
    pass
