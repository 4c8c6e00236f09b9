"""Command-line interface loop for the task list.

Task numbers shown to the user are 1-based; the controller works with
0-based indices.
"""
import logging
from typing import Optional

import click

from models import Status
from theme import color, C_WARNING
from tasklist import TaskListController
import view

logger = logging.getLogger(__name__)

# ESC[3J (scrollback), ESC[H (home), ESC[2J (screen), ESC[H (home); 3J first
# is more reliable in some terminals.
def _clear_screen() -> None:
    print("\033[3J\033[H\033[2J\033[H", end="", flush=True)


def _enter_alt_screen() -> None:
    print("\033[?1049h", end="", flush=True)


def _leave_alt_screen() -> None:
    print("\033[?1049l", end="", flush=True)


def _confirm(title: str, message: str) -> bool:
    return click.confirm(f"{title}: {message}", default=False)


class CLI:
    def __init__(self, controller: TaskListController, alt_screen: bool = True):
        self.controller: TaskListController = controller
        self.alt_screen: bool = alt_screen
        self.status: Optional[Status] = view.initial_status(controller)
        self.feedback: Optional[view.Feedback] = None
        controller.subscribe(self._on_status)

    def _on_status(self, status: Status) -> None:
        self.status = status

    def run(self) -> None:
        """Main REPL loop; the board is cleared and redrawn each cycle.

        Uses the terminal's alternate screen (if enabled) so prior renders
        do not remain in scrollback history.
        """
        exit_message: Optional[str] = None
        if self.alt_screen:
            _enter_alt_screen()
        try:
            while True:
                self._redraw()
                line = input("\n: ").strip()
                if not line:
                    continue
                lower = line.lower()
                if lower == 'help':
                    _clear_screen()
                    self._help()
                    input("\nPress Enter to return to the list...")
                    continue
                if lower in ('exit', 'quit'):
                    exit_message = "Goodbye."
                    break
                self.feedback = self._handle_command(line)
        except (KeyboardInterrupt, EOFError, click.Abort):
            exit_message = "Interrupted. Goodbye."
        finally:
            if self.alt_screen:
                _leave_alt_screen()
            self.controller.unsubscribe(self._on_status)
            if exit_message:
                print(exit_message)

    def _redraw(self) -> None:
        _clear_screen()
        for row in view.render_board(self.controller.snapshot(), self.status,
                                     self.controller.selected):
            print(row)
        if self.feedback is not None:
            print()
            self._show(self.feedback)
            self.feedback = None

    @staticmethod
    def _show(feedback: view.Feedback) -> None:
        if feedback.kind == view.WARNING:
            print(color(feedback.message, C_WARNING))
        else:
            print(feedback.message)

    # -------------------- command dispatch --------------------
    def _handle_command(self, line: str) -> Optional[view.Feedback]:
        tokens = line.split()
        if not tokens:
            return None
        cmd = tokens[0].lower()
        if cmd == 'add':
            return self._cmd_add(line)
        if cmd in ('done', 'complete'):
            return self._cmd_done(tokens)
        if cmd in ('rm', 'delete'):
            return self._cmd_rm(tokens)
        if cmd in ('sel', 'select'):
            return self._cmd_sel(tokens)
        if cmd == 'clear':
            return view.clear_action(self.controller, _confirm)
        logger.debug("unknown command %r", cmd)
        return view.Feedback(view.WARNING, "Unknown command. Type 'help' for instructions.")

    # ---- individual command helpers ----
    def _cmd_add(self, line: str) -> view.Feedback:
        parts = line.split(None, 1)
        if len(parts) > 1:  # inline shorthand
            text = parts[1]
        else:
            text = input("Enter task: ")
        return view.add_action(self.controller, text)

    def _cmd_done(self, tokens: list[str]) -> view.Feedback:
        index = self._parse_number(tokens)
        if index is False:
            return view.Feedback(view.WARNING, "Usage: done [<number>]")
        return view.complete_action(self.controller, index)

    def _cmd_rm(self, tokens: list[str]) -> Optional[view.Feedback]:
        index = self._parse_number(tokens)
        if index is False:
            return view.Feedback(view.WARNING, "Usage: rm [<number>]")
        return view.delete_action(self.controller, index, _confirm)

    def _cmd_sel(self, tokens: list[str]) -> Optional[view.Feedback]:
        index = self._parse_number(tokens)
        if index is False:
            return view.Feedback(view.WARNING, "Usage: sel [<number>]")
        if self.controller.select(index) is None and index is not None:
            return view.Feedback(view.WARNING, f"No task #{index + 1}.")
        return None

    @staticmethod
    def _parse_number(tokens: list[str]):
        """0-based index from an optional 1-based number argument.

        Returns None when no number was given and False when it is malformed.
        """
        if len(tokens) == 1:
            return None
        if len(tokens) != 2:
            return False
        raw = tokens[1].rstrip('.')
        if not raw.isdecimal():
            return False
        return int(raw) - 1

    # -------------------- help --------------------
    def _help(self) -> None:
        print("Commands:")
        print("  add                 Add a new task (prompts for text)")
        print("  add <text...>       Shorthand add with inline text (e.g., add buy milk)")
        print("  done [<n>]          Mark task n (or the selected task) complete")
        print("  rm [<n>]            Delete task n (or the selected task), asks first")
        print("  sel [<n>]           Select task n; without n clears the selection")
        print("  clear               Delete all tasks, asks first")
        print("  help                Show this help (press Enter to return)")
        print("  exit                Exit (tasks are not saved)")
