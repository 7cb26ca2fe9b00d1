"""Target directory precondition check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tsscaffold.core.contracts.exceptions import PreconditionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryState:
    path: Path
    file_count: int

    @property
    def is_empty(self) -> bool:
        return self.file_count == 0


def check_directory(path: Path) -> DirectoryState:
    """Count the entries of *path* (hidden entries included)."""
    try:
        count = sum(1 for _ in path.iterdir())
    except OSError as exc:
        raise PreconditionError(f'Folder "{path}" cannot be read: {exc}', path=path) from exc
    logger.debug("%s contains %d entries", path, count)
    return DirectoryState(path=path, file_count=count)


def ensure_empty_directory(path: Path) -> DirectoryState:
    state = check_directory(path)
    if not state.is_empty:
        raise PreconditionError(f'Folder "{path}" is not empty !', path=path, file_count=state.file_count)
    return state
