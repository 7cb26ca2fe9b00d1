"""Dependency installation and git initialization."""

from __future__ import annotations

import asyncio
import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from tsscaffold.core.contracts.config import InstallSettings
from tsscaffold.core.contracts.exceptions import InstallError
from tsscaffold.core.contracts.progress import InstallProgress, NullInstallProgress

logger = logging.getLogger(__name__)

INSTALL_PHASE = "Install"
GIT_PHASE = "Git"


class DependencyInstaller:
    """Run the package manager and, optionally, ``git init`` in *cwd*.

    Both commands run with captured output; only their exit status and
    stderr are surfaced.
    """

    def __init__(self, *, cwd: Path, settings: InstallSettings | None = None) -> None:
        self._cwd = cwd
        self._settings = settings or InstallSettings()

    def install_command(self, dev_dependencies: Sequence[str]) -> tuple[str, ...]:
        return (self._settings.package_manager, "install", "--save-dev", *dev_dependencies)

    def git_command(self) -> tuple[str, ...]:
        return (self._settings.git_executable, "init")

    async def install(
        self,
        dev_dependencies: Sequence[str],
        *,
        git_init: bool,
        progress: InstallProgress | None = None,
    ) -> None:
        """Install *dev_dependencies*, then run ``git init`` if requested.

        ``git init`` only runs after a successful install.
        """
        progress = progress or NullInstallProgress()
        await self._run_phase(INSTALL_PHASE, self.install_command(dev_dependencies), progress)
        if git_init:
            await self._run_phase(GIT_PHASE, self.git_command(), progress)

    async def _run_phase(self, phase: str, command: tuple[str, ...], progress: InstallProgress) -> None:
        progress.phase_start(phase)
        try:
            await self._run(command)
        except InstallError as exc:
            progress.phase_error(phase, exc)
            raise
        progress.phase_done(phase)

    async def _run(self, command: tuple[str, ...]) -> None:
        executable = shutil.which(command[0])
        if executable is None:
            raise InstallError(f"{command[0]} was not found on PATH", command=command)

        logger.debug("Running: %s", " ".join(command))
        try:
            process = await asyncio.create_subprocess_exec(
                executable,
                *command[1:],
                cwd=self._cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise InstallError(f"Failed to execute {command[0]}: {exc}", command=command) from exc

        _, stderr = await process.communicate()
        if process.returncode != 0:
            details = stderr.decode(errors="replace").strip()
            message = f"{' '.join(command)} exited with status {process.returncode}"
            if details:
                message = f"{message}: {details}"
            raise InstallError(message, command=command, returncode=process.returncode)
