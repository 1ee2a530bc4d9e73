"""
Domain model — Status, Epic, Story, and the persisted DatabaseState.

The JSON layout mirrors the on-disk file exactly::

    {
      "lastItemId": 3,
      "epics":   {"0": {"name": ..., "description": ..., "status": "open", "storyIds": [1, 3]}},
      "stories": {"1": {"name": ..., "description": ..., "status": "closed"}, ...}
    }

Integer ids become string keys in JSON and are parsed back to ``int``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Status(StrEnum):
    """Workflow status shared by epics and stories."""

    OPEN = "open"
    IN_PROGRESS = "inProgress"
    RESOLVED = "resolved"
    CLOSED = "closed"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    Status.OPEN: "Open",
    Status.IN_PROGRESS: "In Progress",
    Status.RESOLVED: "Resolved",
    Status.CLOSED: "Closed",
}


class Story(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    status: Status = Status.OPEN


class Epic(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    status: Status = Status.OPEN
    story_ids: list[int] = Field(default_factory=list, alias="storyIds")


class DatabaseState(BaseModel):
    """The whole persisted state. Read and written as one unit."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    last_item_id: int | None = Field(alias="lastItemId", ge=0)
    epics: dict[int, Epic]
    stories: dict[int, Story]

    @model_validator(mode="after")
    def check_ids(self) -> DatabaseState:
        epic_ids, story_ids = set(self.epics), set(self.stories)
        if self.last_item_id is None:
            if epic_ids or story_ids:
                raise ValueError("lastItemId is null but the store holds items")
            return self
        if any(i < 0 for i in epic_ids | story_ids):
            raise ValueError("item ids must not be negative")
        issued_past = sorted(i for i in epic_ids | story_ids if i > self.last_item_id)
        if issued_past:
            raise ValueError(f"item ids {issued_past} exceed lastItemId {self.last_item_id}")
        shared = sorted(epic_ids & story_ids)
        if shared:
            raise ValueError(f"ids {shared} are used by both an epic and a story")
        return self

    @classmethod
    def empty(cls) -> DatabaseState:
        return cls(last_item_id=None, epics={}, stories={})

    def next_id(self) -> int:
        """Return the id the next created item would receive."""
        return 0 if self.last_item_id is None else self.last_item_id + 1

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)

    @classmethod
    def from_json(cls, text: str | bytes) -> DatabaseState:
        return cls.model_validate_json(text)
