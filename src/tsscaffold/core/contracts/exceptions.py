"""Exception hierarchy for tsscaffold."""

from __future__ import annotations

from pathlib import Path


class TsScaffoldError(Exception):
    """Base exception for all tsscaffold errors."""


class PreconditionError(TsScaffoldError):
    """Target directory is not empty (or cannot be inspected)."""

    def __init__(self, message: str, *, path: Path, file_count: int = 0) -> None:
        super().__init__(message)
        self.path = path
        self.file_count = file_count


class PromptAbortedError(TsScaffoldError):
    """Answer collection was cancelled by the user."""


class ConfigError(TsScaffoldError):
    """Answers file or command-line options failed validation."""


class FilesystemWriteError(TsScaffoldError):
    """An artifact could not be written; earlier artifacts are left in place."""

    def __init__(self, message: str, *, path: Path, written: tuple[Path, ...] = ()) -> None:
        super().__init__(message)
        self.path = path
        self.written = written


class InstallError(TsScaffoldError):
    """Dependency installation or git initialization failed."""

    def __init__(self, message: str, *, command: tuple[str, ...] = (), returncode: int | None = None) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
