"""
Epic status rollup — derive an epic's status from its stories.

Rules, evaluated top to bottom, first match wins:

    no stories                          -> Open
    all stories Closed                  -> Closed
    all stories Resolved or Closed      -> Resolved
    all stories Open                    -> Open
    anything else                       -> In Progress

Usage::

    status = rollup_epic_status(db, epic_id=3)
    status = rollup_epic_status(db, story_id=7)   # owning epic is looked up
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from epicboard.core.exceptions import EpicNotFoundError, NotFoundError
from epicboard.core.models import Status
from epicboard.core.store.database import TrackerDatabase

logger = logging.getLogger(__name__)

_DONE = frozenset({Status.RESOLVED, Status.CLOSED})


def derive_epic_status(statuses: Iterable[Status]) -> Status:
    """Pure derivation of an epic status from its stories' statuses."""
    seen = list(statuses)
    if not seen:
        return Status.OPEN
    if all(s is Status.CLOSED for s in seen):
        return Status.CLOSED
    if all(s in _DONE for s in seen):
        return Status.RESOLVED
    if all(s is Status.OPEN for s in seen):
        return Status.OPEN
    return Status.IN_PROGRESS


def rollup_epic_status(
    db: TrackerDatabase,
    *,
    epic_id: int | None = None,
    story_id: int | None = None,
) -> Status:
    """
    Recompute and persist the status of one epic.

    Exactly one of ``epic_id`` or ``story_id`` must be given. With a story
    id, the owning epic is the one whose story list contains it. Story ids
    that no longer resolve to a story are skipped.

    Returns:
        The status written to the epic.

    Raises:
        EpicNotFoundError: no epic ``epic_id``.
        NotFoundError:     no epic owns ``story_id``.
    """
    if (epic_id is None) == (story_id is None):
        raise ValueError("rollup_epic_status needs exactly one of epic_id or story_id")

    state = db.read()
    if epic_id is None:
        epic_id = next(
            (eid for eid, e in state.epics.items() if story_id in e.story_ids),
            None,
        )
        if epic_id is None:
            raise NotFoundError(f"no epic owns story {story_id}")
    epic = state.epics.get(epic_id)
    if epic is None:
        raise EpicNotFoundError(epic_id)

    statuses = [state.stories[sid].status for sid in epic.story_ids if sid in state.stories]
    status = derive_epic_status(statuses)
    db.update_epic_status(epic_id, status)
    logger.info(
        "Rolled up epic %d from %d stories: %s -> %s",
        epic_id,
        len(statuses),
        epic.status.label,
        status.label,
    )
    return status
