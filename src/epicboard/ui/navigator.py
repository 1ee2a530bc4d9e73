"""
Navigator — the page stack and the action dispatcher.

The stack holds page frames, top of stack is the active view::

    [HomePage()]                                  initial
    [HomePage(), EpicDetailPage(0)]               after NavigateToEpicDetail(0)
    [HomePage(), EpicDetailPage(0), StoryDetailPage(1, 0)]
    []                                            after Exit (terminal)

NavigateToPreviousPage never pops Home; only Exit empties the stack.

``dispatch`` executes one Action: it may ask the user via :class:`Prompts`,
mutate the :class:`TrackerDatabase`, roll up an epic's status, and push or
pop frames. Store errors propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from epicboard.core.rollup import rollup_epic_status
from epicboard.core.store.database import TrackerDatabase
from epicboard.ui.actions import (
    Action,
    CreateEpic,
    CreateStory,
    DeleteEpic,
    DeleteStory,
    Exit,
    NavigateToEpicDetail,
    NavigateToPreviousPage,
    NavigateToStoryDetail,
    UpdateEpicDescription,
    UpdateEpicName,
    UpdateEpicStatus,
    UpdateStoryDescription,
    UpdateStoryName,
    UpdateStoryStatus,
)
from epicboard.ui.prompts import Prompts

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Page frames
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HomePage:
    pass


@dataclass(frozen=True)
class EpicDetailPage:
    epic_id: int


@dataclass(frozen=True)
class StoryDetailPage:
    story_id: int
    epic_id: int


Page = HomePage | EpicDetailPage | StoryDetailPage


# ---------------------------------------------------------------------------
# Navigator
# ---------------------------------------------------------------------------


class Navigator:
    def __init__(self, db: TrackerDatabase, prompts: Prompts) -> None:
        self.db = db
        self.prompts = prompts
        self._pages: list[Page] = [HomePage()]

    @property
    def current_page(self) -> Page | None:
        """The active page, or ``None`` once the stack is empty."""
        return self._pages[-1] if self._pages else None

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def pages(self) -> tuple[Page, ...]:
        return tuple(self._pages)

    def dispatch(self, action: Action) -> None:
        """Execute ``action`` against the store and the page stack."""
        logger.debug("Dispatch %r (depth=%d)", action, len(self._pages))

        if isinstance(action, NavigateToEpicDetail):
            self._pages.append(EpicDetailPage(epic_id=action.epic_id))

        elif isinstance(action, NavigateToStoryDetail):
            self._pages.append(StoryDetailPage(story_id=action.story_id, epic_id=action.epic_id))

        elif isinstance(action, NavigateToPreviousPage):
            # Home is the bottom frame
            if len(self._pages) > 1:
                self._pages.pop()

        elif isinstance(action, CreateEpic):
            epic = self.prompts.create_epic()
            if epic is not None:
                self.db.create_epic(epic)

        elif isinstance(action, CreateStory):
            story = self.prompts.create_story()
            if story is not None:
                self.db.create_story(story, action.epic_id)

        elif isinstance(action, UpdateEpicName):
            name = self.prompts.update_name()
            if name is not None:
                self.db.update_epic_name(action.epic_id, name)

        elif isinstance(action, UpdateEpicDescription):
            description = self.prompts.update_description()
            if description is not None:
                self.db.update_epic_description(action.epic_id, description)

        elif isinstance(action, UpdateEpicStatus):
            status = self.prompts.update_status()
            if status is not None:
                self.db.update_epic_status(action.epic_id, status)

        elif isinstance(action, UpdateStoryName):
            name = self.prompts.update_name()
            if name is not None:
                self.db.update_story_name(action.story_id, name)

        elif isinstance(action, UpdateStoryDescription):
            description = self.prompts.update_description()
            if description is not None:
                self.db.update_story_description(action.story_id, description)

        elif isinstance(action, UpdateStoryStatus):
            status = self.prompts.update_status()
            if status is not None:
                self.db.update_story_status(action.story_id, status)
                rollup_epic_status(self.db, story_id=action.story_id)

        elif isinstance(action, DeleteEpic):
            if self.prompts.confirm_delete_epic():
                self.db.delete_epic(action.epic_id)
                self._pop()

        elif isinstance(action, DeleteStory):
            if self.prompts.confirm_delete_story():
                self.db.delete_story(action.story_id, action.epic_id)
                rollup_epic_status(self.db, epic_id=action.epic_id)
                self._pop()

        elif isinstance(action, Exit):
            self._pages.clear()

        else:
            raise TypeError(f"Unknown action: {action!r}")

    def _pop(self) -> None:
        if self._pages:
            self._pages.pop()
