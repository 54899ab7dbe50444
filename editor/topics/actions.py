# editor/topics/actions.py
#
# One action class per command name.
# Each binds the receiver plus the arguments captured at dispatch time, and
# snapshots whatever reverse() needs BEFORE apply() runs.


class Action:
    name = ""
    args = ()  # required positional args, by name

    def __init__(self, editor):
        self.editor = editor

    def apply(self):
        raise NotImplementedError

    def reverse(self):
        raise NotImplementedError

    def describe(self):
        return self.name

    def __repr__(self):
        return f"<{type(self).__name__} {self.describe()!r}>"


class SaveCommand(Action):
    name = "save"

    def apply(self):
        self.editor.save()

    def reverse(self):
        self.editor.revert()


class SaveAsCommand(Action):
    name = "saveas"
    args = ("newpath",)

    def __init__(self, editor, new_path):
        super().__init__(editor)
        self.new_path = new_path
        self.old_path = editor.get_path()

    def apply(self):
        self.editor.save_as(self.new_path)

    def reverse(self):
        # path field only; the earlier file is not re-saved
        self.editor.set_path(self.old_path)

    def describe(self):
        return f"saveas {self.new_path}"


class OpenCommand(Action):
    name = "open"
    args = ("filepath",)

    def __init__(self, editor, path):
        super().__init__(editor)
        self.path = path

    def apply(self):
        self.editor.open(self.path)

    def reverse(self):
        self.editor.close()

    def describe(self):
        return f"open {self.path}"


class PrintCommand(Action):
    name = "print"

    def apply(self):
        self.editor.print()

    def reverse(self):
        pass


class CloseCommand(Action):
    name = "close"

    def __init__(self, editor):
        super().__init__(editor)
        self.path = editor.get_path()

    def apply(self):
        self.editor.close()

    def reverse(self):
        self.editor.open(self.path)

    def describe(self):
        return f"close {self.path}" if self.path else "close"


class NewCommand(Action):
    name = "new"

    def apply(self):
        self.editor.create_new()

    def reverse(self):
        self.editor.close()


class CloneCommand(Action):
    name = "clone"
    args = ("url",)

    def __init__(self, editor, url):
        super().__init__(editor)
        self.url = url

    def apply(self):
        self.editor.clone_repository(self.url)

    def reverse(self):
        self.editor.close()

    def describe(self):
        return f"clone {self.url}"


COMMANDS = {
    "save":   (SaveCommand,   "Save the current file",             "save"),
    "saveas": (SaveAsCommand, "Save the current file to a new path", "saveas <newpath>"),
    "open":   (OpenCommand,   "Open a file",                       "open <filepath>"),
    "print":  (PrintCommand,  "Print the current file",            "print"),
    "close":  (CloseCommand,  "Close the current file",            "close"),
    "new":    (NewCommand,    "Create a new file",                 "new"),
    "clone":  (CloneCommand,  "Clone a repository by url",         "clone <url>"),
}
