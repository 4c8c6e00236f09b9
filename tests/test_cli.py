from __future__ import annotations

import builtins
from typing import Iterable

import click
import pytest

import cli
import view
from cli import CLI


def feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> None:
    """Patch input() to replay `lines`, then behave like a closed stdin."""
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


@pytest.fixture()
def answers(monkeypatch: pytest.MonkeyPatch) -> list[bool]:
    """Replies handed out by the confirmation prompt, in order."""
    replies: list[bool] = []
    monkeypatch.setattr(cli, "_confirm", lambda title, message: replies.pop(0))
    return replies


def run(controller, monkeypatch, lines) -> None:
    feed(monkeypatch, lines)
    CLI(controller, alt_screen=False).run()


def test_add_done_and_exit(controller, monkeypatch, capsys) -> None:
    run(controller, monkeypatch, ["add Buy milk", "add", "Walk dog", "done 1", "exit"])
    assert [tuple(t) for t in controller.snapshot()] == [("Buy milk", True), ("Walk dog", False)]
    out = capsys.readouterr().out
    assert view.MSG_ADDED in out
    assert view.MSG_COMPLETED in out
    assert "Total: 2 | Completed: 1 | Pending: 1" in out
    assert out.rstrip().endswith("Goodbye.")


def test_ready_status_before_first_change(controller, monkeypatch, capsys) -> None:
    run(controller, monkeypatch, ["exit"])
    assert view.READY_STATUS in capsys.readouterr().out


def test_empty_add_warns(controller, monkeypatch, capsys) -> None:
    run(controller, monkeypatch, ["add", "   ", "exit"])
    assert len(controller) == 0
    assert view.MSG_EMPTY_TEXT in capsys.readouterr().out


def test_rm_asks_and_respects_answer(filled, monkeypatch, answers, capsys) -> None:
    answers.extend([False, True])
    run(filled, monkeypatch, ["rm 2", "rm 2", "exit"])
    assert [t.text for t in filled.snapshot()] == ["Buy milk", "Call mom"]
    assert view.MSG_DELETED in capsys.readouterr().out
    assert answers == []


def test_rm_uses_selection(filled, monkeypatch, answers) -> None:
    answers.append(True)
    run(filled, monkeypatch, ["sel 3", "rm", "exit"])
    assert [t.text for t in filled.snapshot()] == ["Buy milk", "Walk dog"]


def test_rm_without_selection_warns(filled, monkeypatch, answers, capsys) -> None:
    run(filled, monkeypatch, ["rm", "exit"])
    assert len(filled) == 3
    assert view.MSG_SELECT_DELETE in capsys.readouterr().out


def test_done_twice_reports_already_complete(filled, monkeypatch, capsys) -> None:
    run(filled, monkeypatch, ["done 1", "exit"])
    assert view.MSG_ALREADY_COMPLETE in capsys.readouterr().out


def test_clear_flow(filled, monkeypatch, answers, capsys) -> None:
    answers.append(True)
    run(filled, monkeypatch, ["clear", "clear", "exit"])
    out = capsys.readouterr().out
    assert len(filled) == 0
    assert view.MSG_CLEARED in out
    assert view.MSG_ALREADY_EMPTY in out
    assert "Total: 0 | Completed: 0 | Pending: 0" in out


@pytest.mark.parametrize("line, message", [
    ("frobnicate", "Unknown command. Type 'help' for instructions."),
    ("done x", "Usage: done [<number>]"),
    ("rm 1 2", "Usage: rm [<number>]"),
    ("sel 9", "No task #9."),
    ("done 0", view.MSG_SELECT_COMPLETE),
    ("rm \u00b2", "Usage: rm [<number>]"),
    ("done \u00b2", "Usage: done [<number>]"),
    ("sel \u00b2", "Usage: sel [<number>]"),
])
def test_bad_input_is_reported(filled, monkeypatch, capsys, line, message) -> None:
    before = filled.snapshot()
    run(filled, monkeypatch, [line, "exit"])
    assert message in capsys.readouterr().out
    assert filled.snapshot() == before


def test_help_then_return(controller, monkeypatch, capsys) -> None:
    run(controller, monkeypatch, ["help", "", "exit"])
    assert "Commands:" in capsys.readouterr().out


def test_eof_exits_cleanly_and_unsubscribes(controller, monkeypatch, capsys) -> None:
    app = CLI(controller, alt_screen=False)
    feed(monkeypatch, ["add one"])
    app.run()
    assert "Interrupted. Goodbye." in capsys.readouterr().out
    controller.add_task("two")
    assert app.status == (1, 0, 1)


def test_alt_screen_is_entered_and_left(controller, monkeypatch, capsys) -> None:
    feed(monkeypatch, ["exit"])
    CLI(controller, alt_screen=True).run()
    out = capsys.readouterr().out
    assert out.startswith("\033[?1049h")
    assert "\033[?1049l" in out


def test_existing_tasks_show_their_status(filled, monkeypatch, capsys) -> None:
    run(filled, monkeypatch, ["exit"])
    out = capsys.readouterr().out
    assert "Total: 3 | Completed: 1 | Pending: 2" in out
    assert view.READY_STATUS not in out


def test_abort_at_confirmation_exits_cleanly(filled, monkeypatch, capsys) -> None:
    def interrupted(title: str, message: str) -> bool:
        raise click.Abort()

    monkeypatch.setattr(cli, "_confirm", interrupted)
    run(filled, monkeypatch, ["clear"])
    assert capsys.readouterr().out.rstrip().endswith("Interrupted. Goodbye.")
    assert len(filled) == 3
