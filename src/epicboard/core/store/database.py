"""
TrackerDatabase — CRUD over epics and stories with referential integrity.

Every mutating call is one full round trip against the Storage backend:

    state = storage.read()      # whole state
    ...validate, mutate state...
    storage.write(state)        # whole state

Validation happens before anything is written, so a failed call leaves the
persisted state untouched and consumes no id.

Ids come from one sequence shared by epics and stories
(``lastItemId + 1``, starting at 0) and are never reused.

There should be a single TrackerDatabase per backing store, shared by
reference between the navigator and the pages.
"""

from __future__ import annotations

import logging

from epicboard.core.exceptions import EpicNotFoundError, StoryNotFoundError
from epicboard.core.models import DatabaseState, Epic, Status, Story
from epicboard.core.store.storage import Storage

logger = logging.getLogger(__name__)


class TrackerDatabase:
    """Entity store built on one :class:`Storage` backend."""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def read(self) -> DatabaseState:
        """Return the current persisted state."""
        return self.storage.read()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_story(self, story_id: int) -> Story:
        state = self.read()
        return _story_or_raise(state, story_id)

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create_epic(self, epic: Epic) -> int:
        """Store a copy of ``epic`` under a newly allocated id and return it."""
        state = self.read()
        epic_id = state.next_id()
        state.epics[epic_id] = epic.model_copy(deep=True)
        state.last_item_id = epic_id
        self.storage.write(state)
        logger.info("Created epic %d: %r", epic_id, epic.name)
        return epic_id

    def create_story(self, story: Story, epic_id: int) -> int:
        """
        Store ``story`` and append its id to epic ``epic_id``.

        Raises:
            EpicNotFoundError: the parent epic does not exist.
        """
        state = self.read()
        parent = _epic_or_raise(state, epic_id)
        story_id = state.next_id()
        state.stories[story_id] = story.model_copy(deep=True)
        parent.story_ids.append(story_id)
        state.last_item_id = story_id
        self.storage.write(state)
        logger.info("Created story %d in epic %d: %r", story_id, epic_id, story.name)
        return story_id

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update_epic_name(self, epic_id: int, name: str) -> None:
        self._update_epic(epic_id, name=name)

    def update_epic_description(self, epic_id: int, description: str) -> None:
        self._update_epic(epic_id, description=description)

    def update_epic_status(self, epic_id: int, status: Status) -> None:
        self._update_epic(epic_id, status=status)

    def update_story_name(self, story_id: int, name: str) -> None:
        self._update_story(story_id, name=name)

    def update_story_description(self, story_id: int, description: str) -> None:
        self._update_story(story_id, description=description)

    def update_story_status(self, story_id: int, status: Status) -> None:
        self._update_story(story_id, status=status)

    def _update_epic(self, epic_id: int, **fields: object) -> None:
        state = self.read()
        epic = _epic_or_raise(state, epic_id)
        for key, value in fields.items():
            setattr(epic, key, value)
        self.storage.write(state)
        logger.debug("Updated epic %d: %s", epic_id, fields)

    def _update_story(self, story_id: int, **fields: object) -> None:
        state = self.read()
        story = _story_or_raise(state, story_id)
        for key, value in fields.items():
            setattr(story, key, value)
        self.storage.write(state)
        logger.debug("Updated story %d: %s", story_id, fields)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_epic(self, epic_id: int) -> None:
        """
        Delete epic ``epic_id`` together with every story it lists.

        Raises:
            EpicNotFoundError: the epic does not exist.
        """
        state = self.read()
        epic = _epic_or_raise(state, epic_id)
        for story_id in epic.story_ids:
            state.stories.pop(story_id, None)
        del state.epics[epic_id]
        self.storage.write(state)
        logger.info("Deleted epic %d (%d stories removed)", epic_id, len(epic.story_ids))

    def delete_story(self, story_id: int, epic_id: int) -> None:
        """
        Delete story ``story_id`` and strip it from epic ``epic_id``.

        Raises:
            EpicNotFoundError:  the epic does not exist.
            StoryNotFoundError: the story is not listed under that epic,
                                even if it exists under another one.
        """
        state = self.read()
        epic = _epic_or_raise(state, epic_id)
        if story_id not in epic.story_ids:
            raise StoryNotFoundError(story_id, epic_id)
        epic.story_ids.remove(story_id)
        state.stories.pop(story_id, None)
        self.storage.write(state)
        logger.info("Deleted story %d from epic %d", story_id, epic_id)


def _epic_or_raise(state: DatabaseState, epic_id: int) -> Epic:
    try:
        return state.epics[epic_id]
    except KeyError:
        raise EpicNotFoundError(epic_id) from None


def _story_or_raise(state: DatabaseState, story_id: int) -> Story:
    try:
        return state.stories[story_id]
    except KeyError:
        raise StoryNotFoundError(story_id) from None
