"""Epicboard exception hierarchy."""

from __future__ import annotations


class EpicboardError(Exception):
    """Base exception for all Epicboard errors."""


class ConfigError(EpicboardError):
    """Raised when the configuration is invalid or cannot be read."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly requested configuration file does not exist."""


class StorageError(EpicboardError):
    """Raised when the backing store cannot be read or written."""


class StorageIOError(StorageError):
    """Raised when the storage medium is unreachable or unwritable."""


class StateParseError(StorageError):
    """Raised when persisted content is not a valid database state."""


class NotFoundError(EpicboardError):
    """Raised when a referenced epic or story does not exist."""


class EpicNotFoundError(NotFoundError):
    def __init__(self, epic_id: int) -> None:
        super().__init__(f"no epic found for id {epic_id}")
        self.epic_id = epic_id


class StoryNotFoundError(NotFoundError):
    def __init__(self, story_id: int, epic_id: int | None = None) -> None:
        if epic_id is None:
            msg = f"no story found for id {story_id}"
        else:
            msg = f"no story found for id {story_id} in epic {epic_id}"
        super().__init__(msg)
        self.story_id = story_id
        self.epic_id = epic_id
