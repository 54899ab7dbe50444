# cmdedit.py
import readline
from editor.core import init_core

def main():
    core = init_core()
    print("Editor REPL (line -> command -> history)")
    print("Please enter a command. For example: open, save, saveas, close, print, new.")
    print("Commands: help, undo, history. Exit: quit/exit\n")

    while True:
        try:
            line = input(core.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip() in ("quit", "exit"):
            break
        try:
            res = core.execute(line)
        except KeyboardInterrupt:
            # the command is dropped, nothing was pushed
            print("\nInterrupted")
            continue
        if res is not None:
            print(res)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
