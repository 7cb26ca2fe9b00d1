"""Progress reporting protocol for the install step.

The installer emits phase lifecycle events; consumers (e.g. the CLI's Rich
spinner) implement ``InstallProgress`` to render feedback.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class InstallProgress(ABC):
    """Observer interface for install progress events."""

    @abstractmethod
    def phase_start(self, phase: str) -> None:
        """A phase (``Install`` or ``Git``) is starting."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_done(self, phase: str) -> None:
        """The *phase* has finished successfully."""
        ...  # pragma: no cover

    @abstractmethod
    def phase_error(self, phase: str, error: BaseException) -> None:
        """The *phase* was interrupted by *error*."""
        ...  # pragma: no cover


class NullInstallProgress(InstallProgress):
    """No-op implementation used when no progress display is requested."""

    def phase_start(self, phase: str) -> None:
        pass

    def phase_done(self, phase: str) -> None:
        pass

    def phase_error(self, phase: str, error: BaseException) -> None:
        pass
