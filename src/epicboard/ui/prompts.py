"""
Prompts — the interactive questions the Navigator asks before mutating.

:class:`Prompts` is the capability the Navigator depends on. Two
implementations:

    ConsolePrompts    asks on the terminal with rich.prompt
    ScriptedPrompts   replays queued answers (tests, scripted sessions)

Every question except the delete confirmations can be cancelled; a
cancelled question returns ``None`` and the Navigator does nothing. End of
input cancels any question; a confirmation then answers no.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable
from typing import Any

from rich.console import Console
from rich.prompt import Confirm, Prompt

from epicboard.core.constants import MAX_NAME_LENGTH
from epicboard.core.models import Epic, Status, Story

_CANCEL = "x"

_STATUS_CHOICES = {
    "1": Status.OPEN,
    "2": Status.IN_PROGRESS,
    "3": Status.RESOLVED,
    "4": Status.CLOSED,
}


class Prompts(ABC):
    """Questions the Navigator needs answered."""

    @abstractmethod
    def create_epic(self) -> Epic | None: ...

    @abstractmethod
    def create_story(self) -> Story | None: ...

    @abstractmethod
    def confirm_delete_epic(self) -> bool: ...

    @abstractmethod
    def confirm_delete_story(self) -> bool: ...

    @abstractmethod
    def update_name(self) -> str | None: ...

    @abstractmethod
    def update_description(self) -> str | None: ...

    @abstractmethod
    def update_status(self) -> Status | None: ...


# ---------------------------------------------------------------------------
# Console
# ---------------------------------------------------------------------------


class ConsolePrompts(Prompts):
    """Asks on the terminal. ``x`` at any text prompt cancels."""

    def __init__(self, console: Console, max_name_length: int = MAX_NAME_LENGTH) -> None:
        self.console = console
        self.max_name_length = max_name_length

    def create_epic(self) -> Epic | None:
        fields = self._name_and_description("Epic")
        return Epic(name=fields[0], description=fields[1]) if fields else None

    def create_story(self) -> Story | None:
        fields = self._name_and_description("Story")
        return Story(name=fields[0], description=fields[1]) if fields else None

    def confirm_delete_epic(self) -> bool:
        return self._confirm(
            "[bold]Delete this Epic?[/bold] All Stories in this Epic will also be deleted."
        )

    def confirm_delete_story(self) -> bool:
        return self._confirm("[bold]Delete this Story?[/bold]")

    def update_name(self) -> str | None:
        return self._ask_name("New name")

    def update_description(self) -> str | None:
        return self._ask_text("New description")

    def update_status(self) -> Status | None:
        self.console.print("[bold]New status:[/bold]")
        for key, status in _STATUS_CHOICES.items():
            self.console.print(f"  ({key}) {status.label}")
        self.console.print(f"  ({_CANCEL}) cancel")
        try:
            answer = Prompt.ask(
                "Choice", console=self.console, default=_CANCEL, show_default=False
            )
        except EOFError:
            return None
        return _STATUS_CHOICES.get(answer.strip().lower())

    # ------------------------------------------------------------------

    def _name_and_description(self, kind: str) -> tuple[str, str] | None:
        self.console.print(f"[dim]({_CANCEL}) cancel and discard[/dim]")
        name = self._ask_name(f"{kind} name", kind=kind)
        if name is None:
            return None
        description = self._ask_text(f"{kind} description")
        if description is None:
            return None
        return name, description

    def _confirm(self, question: str) -> bool:
        try:
            return Confirm.ask(question, console=self.console, default=False)
        except EOFError:
            return False

    def _ask_name(self, label: str, kind: str = "Item") -> str | None:
        while True:
            name = self._ask_text(label)
            if name is None or len(name) < self.max_name_length:
                return name
            self.console.print(
                f"[yellow]{kind} names should be short and meaningful "
                f"(under {self.max_name_length} characters).[/yellow]"
            )

    def _ask_text(self, label: str) -> str | None:
        while True:
            try:
                answer = Prompt.ask(f"[bold]{label}[/bold]", console=self.console).strip()
            except EOFError:
                return None
            if answer.lower() == _CANCEL:
                return None
            if answer:
                return answer


# ---------------------------------------------------------------------------
# Scripted
# ---------------------------------------------------------------------------


class ScriptedPromptsExhausted(RuntimeError):
    """Raised when a scripted question has no queued answer left."""


class ScriptedPrompts(Prompts):
    """
    Replays pre-recorded answers, one queue per question.

    Usage::

        prompts = ScriptedPrompts(
            update_status=[Status.CLOSED],
            confirm_delete_story=[True],
        )
        nav = Navigator(db, prompts)

    ``asked`` records the question names in the order they were asked.
    """

    _QUESTIONS = (
        "create_epic",
        "create_story",
        "confirm_delete_epic",
        "confirm_delete_story",
        "update_name",
        "update_description",
        "update_status",
    )

    def __init__(self, **answers: Iterable[Any]) -> None:
        unknown = set(answers) - set(self._QUESTIONS)
        if unknown:
            raise TypeError(f"Unknown prompt(s): {sorted(unknown)}")
        self._queues: dict[str, deque[Any]] = {
            q: deque(answers.get(q, ())) for q in self._QUESTIONS
        }
        self.asked: list[str] = []

    def _next(self, question: str) -> Any:
        self.asked.append(question)
        queue = self._queues[question]
        if not queue:
            raise ScriptedPromptsExhausted(f"No scripted answer left for {question!r}")
        return queue.popleft()

    def create_epic(self) -> Epic | None:
        return self._next("create_epic")

    def create_story(self) -> Story | None:
        return self._next("create_story")

    def confirm_delete_epic(self) -> bool:
        return bool(self._next("confirm_delete_epic"))

    def confirm_delete_story(self) -> bool:
        return bool(self._next("confirm_delete_story"))

    def update_name(self) -> str | None:
        return self._next("update_name")

    def update_description(self) -> str | None:
        return self._next("update_description")

    def update_status(self) -> Status | None:
        return self._next("update_status")
