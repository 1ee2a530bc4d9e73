"""
Storage backends — read and write the entire DatabaseState as one unit.

Two implementations of the :class:`Storage` contract:

    JSONFileStorage   the real backing file (~/.epicboard/db.json by default)
    MemoryStorage     in-process state, used by tests

There is no locking at this layer. A single process is assumed to own the
backing file; callers must not invoke ``read``/``write`` concurrently.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from epicboard.core.exceptions import StateParseError, StorageIOError
from epicboard.core.models import DatabaseState

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Whole-state persistence contract."""

    @abstractmethod
    def read(self) -> DatabaseState:
        """
        Return the full persisted state.

        Raises:
            StateParseError: persisted bytes are not a valid DatabaseState.
            StorageIOError:  the medium is unreachable.
        """

    @abstractmethod
    def write(self, state: DatabaseState) -> None:
        """
        Replace the persisted state with ``state``.

        Raises:
            StorageIOError: the medium is unwritable.
        """


class JSONFileStorage(Storage):
    """DatabaseState persisted as a single JSON document on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def ensure_initialized(self) -> None:
        """
        Create the backing file with an empty state if it does not exist.

        An existing file is read back once so a malformed file fails here,
        at startup, rather than on the first mutation. It is never replaced.
        """
        if self.path.exists():
            self.read()
            return
        logger.info("Creating empty database at %s", self.path)
        try:
            self.path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageIOError(f"Cannot create directory {self.path.parent}: {exc}") from exc
        self.write(DatabaseState.empty())

    def read(self) -> DatabaseState:
        try:
            data = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise StateParseError(f"Database {self.path} is not UTF-8 text: {exc}") from exc
        except OSError as exc:
            raise StorageIOError(f"Cannot read database {self.path}: {exc}") from exc
        try:
            return DatabaseState.from_json(data)
        except ValidationError as exc:
            raise StateParseError(f"Malformed database {self.path}: {exc}") from exc

    def write(self, state: DatabaseState) -> None:
        # Write atomically
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp_path.write_text(state.to_json(), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StorageIOError(f"Cannot write database {self.path}: {exc}") from exc


class MemoryStorage(Storage):
    """
    In-memory storage. Holds the last written state.

    Reads and writes copy the state so no caller can mutate what is stored
    except through ``write``.
    """

    def __init__(self, state: DatabaseState | None = None) -> None:
        self._state = (state or DatabaseState.empty()).model_copy(deep=True)
        self.write_count = 0

    def read(self) -> DatabaseState:
        return self._state.model_copy(deep=True)

    def write(self, state: DatabaseState) -> None:
        self._state = state.model_copy(deep=True)
        self.write_count += 1
