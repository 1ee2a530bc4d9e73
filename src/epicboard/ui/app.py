"""
Interactive loop — clear, draw, read one line, dispatch, repeat.

Errors from drawing, translating, or dispatching are shown to the user and
the loop continues; only an empty page stack ends it.
"""

from __future__ import annotations

import logging
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from epicboard.core.config import EpicboardConfig
from epicboard.core.exceptions import EpicboardError
from epicboard.core.store.database import TrackerDatabase
from epicboard.ui.actions import Exit
from epicboard.ui.navigator import Navigator
from epicboard.ui.pages import action_from, render
from epicboard.ui.prompts import ConsolePrompts, Prompts

logger = logging.getLogger(__name__)


class TrackerApp:
    """
    Owns the Navigator for one interactive session.

    Usage::

        app = TrackerApp(db, config, console)
        app.run()      # returns when the user quits
    """

    def __init__(
        self,
        db: TrackerDatabase,
        config: EpicboardConfig,
        console: Console,
        prompts: Prompts | None = None,
        stream: TextIO | None = None,
    ) -> None:
        self.db = db
        self.config = config
        self.console = console
        self.prompts = prompts or ConsolePrompts(console, config.ui.max_name_length)
        self.navigator = Navigator(db, self.prompts)
        self.stream = stream

    def run(self) -> None:
        logger.info("Session started")
        while self.step():
            pass
        logger.info("Session ended")

    def step(self) -> bool:
        """Process one line of input. Returns False once the stack is empty."""
        page = self.navigator.current_page
        if page is None:
            return False

        if self.config.ui.clear_screen:
            self.console.clear()

        try:
            render(
                page,
                self.db,
                self.console,
                self.config.ui.max_name_length,
                self.config.ui.max_description_length,
            )
        except EpicboardError as exc:
            self._report("Error rendering page", exc)

        line = self._read_line()
        if line is None:
            # EOF on stdin behaves like quitting
            self.navigator.dispatch(Exit())
            return False

        try:
            action = action_from(page, line, self.db)
        except EpicboardError as exc:
            self._report("Error reading input", exc)
            return True

        if action is not None:
            try:
                self.navigator.dispatch(action)
            except EpicboardError as exc:
                self._report("Error processing request", exc)

        return self.navigator.current_page is not None

    def _read_line(self) -> str | None:
        try:
            raw = self.console.input("> ", stream=self.stream)
        except EOFError:
            return None
        if self.stream is not None and raw == "":
            return None
        return raw.strip()

    def _report(self, what: str, exc: Exception) -> None:
        logger.warning("%s: %s", what, exc)
        self.console.print(f"[red]{what}:[/red] {escape(str(exc))}")
        self.console.print("Press (enter) to continue..")
        self._read_line()
