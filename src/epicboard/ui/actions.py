"""
Action vocabulary — the commands pages emit and the Navigator executes.

Actions are immutable and compare by value, so tests can assert
``page_action == UpdateEpicStatus(epic_id=3)`` directly.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NavigateToEpicDetail:
    epic_id: int


@dataclass(frozen=True)
class NavigateToStoryDetail:
    story_id: int
    epic_id: int


@dataclass(frozen=True)
class NavigateToPreviousPage:
    pass


@dataclass(frozen=True)
class CreateEpic:
    pass


@dataclass(frozen=True)
class CreateStory:
    epic_id: int


@dataclass(frozen=True)
class UpdateEpicName:
    epic_id: int


@dataclass(frozen=True)
class UpdateEpicDescription:
    epic_id: int


@dataclass(frozen=True)
class UpdateEpicStatus:
    epic_id: int


@dataclass(frozen=True)
class UpdateStoryName:
    story_id: int


@dataclass(frozen=True)
class UpdateStoryDescription:
    story_id: int


@dataclass(frozen=True)
class UpdateStoryStatus:
    story_id: int


@dataclass(frozen=True)
class DeleteEpic:
    epic_id: int


@dataclass(frozen=True)
class DeleteStory:
    story_id: int
    epic_id: int


@dataclass(frozen=True)
class Exit:
    pass


Action = (
    NavigateToEpicDetail
    | NavigateToStoryDetail
    | NavigateToPreviousPage
    | CreateEpic
    | CreateStory
    | UpdateEpicName
    | UpdateEpicDescription
    | UpdateEpicStatus
    | UpdateStoryName
    | UpdateStoryDescription
    | UpdateStoryStatus
    | DeleteEpic
    | DeleteStory
    | Exit
)
