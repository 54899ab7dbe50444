from editor.topics.actions import COMMANDS as ACTION_COMMANDS

ALL_COMMANDS = {}
ALL_COMMANDS.update(ACTION_COMMANDS)
