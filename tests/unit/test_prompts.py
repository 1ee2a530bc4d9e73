"""Unit tests for epicboard.ui.prompts — console and scripted answers."""

from __future__ import annotations

import io
from collections.abc import Iterator

import pytest
from rich.console import Console

from epicboard.core.models import Epic, Status, Story
from epicboard.ui.prompts import ConsolePrompts, ScriptedPrompts, ScriptedPromptsExhausted


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=100, color_system=None)


def _feed(monkeypatch: pytest.MonkeyPatch, *lines: str) -> None:
    answers: Iterator[str] = iter(lines)
    monkeypatch.setattr("builtins.input", lambda *args: next(answers))


# ---------------------------------------------------------------------------
# ConsolePrompts
# ---------------------------------------------------------------------------


class TestConsolePrompts:
    def test_create_epic(self, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
        _feed(monkeypatch, "Checkout", "Rebuild the checkout flow")
        epic = ConsolePrompts(console).create_epic()
        assert epic == Epic(name="Checkout", description="Rebuild the checkout flow")

    def test_create_story(self, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
        _feed(monkeypatch, "  Pay button ", "Add it")
        story = ConsolePrompts(console).create_story()
        assert story == Story(name="Pay button", description="Add it")

    def test_cancel_at_name(self, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
        _feed(monkeypatch, "x")
        assert ConsolePrompts(console).create_epic() is None

    def test_cancel_at_description(self, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
        _feed(monkeypatch, "Name", "X")
        assert ConsolePrompts(console).create_story() is None

    def test_empty_answer_asks_again(self, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
        _feed(monkeypatch, "", "   ", "Name", "Description")
        assert ConsolePrompts(console).create_epic() == Epic(name="Name", description="Description")

    def test_long_name_rejected(self, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
        _feed(monkeypatch, "a" * 20, "short", "Description")
        prompts = ConsolePrompts(console, max_name_length=10)
        assert prompts.create_epic() == Epic(name="short", description="Description")
        assert "under 10 characters" in console.file.getvalue()

    def test_update_name_and_description(self, monkeypatch: pytest.MonkeyPatch, console: Console) -> None:
        _feed(monkeypatch, "New name", "New description", "x")
        prompts = ConsolePrompts(console)
        assert prompts.update_name() == "New name"
        assert prompts.update_description() == "New description"
        assert prompts.update_name() is None

    @pytest.mark.parametrize(
        "answer,expected",
        [
            ("1", Status.OPEN),
            ("2", Status.IN_PROGRESS),
            ("3", Status.RESOLVED),
            (" 4 ", Status.CLOSED),
            ("x", None),
            ("", None),
            ("9", None),
        ],
    )
    def test_update_status(
        self, monkeypatch: pytest.MonkeyPatch, console: Console, answer: str, expected
    ) -> None:
        _feed(monkeypatch, answer)
        assert ConsolePrompts(console).update_status() is expected

    @pytest.mark.parametrize("answer,expected", [("y", True), ("n", False), ("", False)])
    def test_confirm_delete(
        self, monkeypatch: pytest.MonkeyPatch, console: Console, answer: str, expected: bool
    ) -> None:
        _feed(monkeypatch, answer, answer)
        prompts = ConsolePrompts(console)
        assert prompts.confirm_delete_epic() is expected
        assert prompts.confirm_delete_story() is expected


class TestEndOfInput:
    @pytest.fixture(autouse=True)
    def closed_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _eof(*args: object) -> str:
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)

    def test_text_questions_cancel(self, console: Console) -> None:
        prompts = ConsolePrompts(console)
        assert prompts.create_epic() is None
        assert prompts.create_story() is None
        assert prompts.update_name() is None
        assert prompts.update_description() is None

    def test_status_cancels(self, console: Console) -> None:
        assert ConsolePrompts(console).update_status() is None

    def test_confirmations_answer_no(self, console: Console) -> None:
        prompts = ConsolePrompts(console)
        assert prompts.confirm_delete_epic() is False
        assert prompts.confirm_delete_story() is False

    def test_eof_after_name_discards_item(
        self, monkeypatch: pytest.MonkeyPatch, console: Console
    ) -> None:
        answers = iter(["Checkout"])

        def _input(*args: object) -> str:
            try:
                return next(answers)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", _input)
        assert ConsolePrompts(console).create_epic() is None


# ---------------------------------------------------------------------------
# ScriptedPrompts
# ---------------------------------------------------------------------------


class TestScriptedPrompts:
    def test_answers_in_order(self) -> None:
        prompts = ScriptedPrompts(update_status=[Status.CLOSED, None], confirm_delete_story=[1, 0])
        assert prompts.update_status() is Status.CLOSED
        assert prompts.update_status() is None
        assert prompts.confirm_delete_story() is True
        assert prompts.confirm_delete_story() is False

    def test_records_questions(self) -> None:
        prompts = ScriptedPrompts(update_name=["a"], update_description=["b"])
        prompts.update_description()
        prompts.update_name()
        assert prompts.asked == ["update_description", "update_name"]

    def test_exhausted(self) -> None:
        prompts = ScriptedPrompts()
        with pytest.raises(ScriptedPromptsExhausted, match="create_epic"):
            prompts.create_epic()
        assert prompts.asked == ["create_epic"]

    def test_unknown_question(self) -> None:
        with pytest.raises(TypeError, match="create_task"):
            ScriptedPrompts(create_task=[None])
