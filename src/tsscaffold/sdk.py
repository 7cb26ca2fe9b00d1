"""SDK composition root for tsscaffold."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from tsscaffold.core.contracts.answers import AdvancedAnswers, BasicAnswers
from tsscaffold.core.contracts.config import InstallSettings
from tsscaffold.core.contracts.derived import DerivedConfig, FilePlan
from tsscaffold.core.contracts.progress import InstallProgress
from tsscaffold.core.contracts.reporter import NullReporter, Reporter
from tsscaffold.core.derive import derive
from tsscaffold.core.install import DependencyInstaller
from tsscaffold.core.materialize import materialize
from tsscaffold.core.plan import build_file_plan
from tsscaffold.core.preflight import DirectoryState, ensure_empty_directory

logger = logging.getLogger(__name__)

FILES_CREATED_MESSAGE = "> Files created."
SUCCESS_MESSAGE = "[Success] Project created successfully. Happy coding!"


@dataclass(frozen=True)
class ScaffoldResult:
    derived: DerivedConfig
    written: tuple[Path, ...]
    dev_dependencies: tuple[str, ...] = ()
    git_initialized: bool = False
    install_skipped: bool = False
    plan: FilePlan | None = field(default=None, compare=False)


class Scaffolder:
    """Generate a TypeScript library into *cwd*.

    The stages run strictly in order: :meth:`check` before any prompting,
    :meth:`generate` for derivation and file writes, :meth:`install` last.
    """

    def __init__(
        self,
        *,
        cwd: Path,
        settings: InstallSettings | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._cwd = cwd
        self._settings = settings or InstallSettings()
        self._reporter = reporter or NullReporter()
        self._installer = DependencyInstaller(cwd=cwd, settings=self._settings)

    @property
    def cwd(self) -> Path:
        return self._cwd

    def check(self) -> DirectoryState:
        return ensure_empty_directory(self._cwd)

    def generate(self, basic: BasicAnswers, advanced: AdvancedAnswers) -> ScaffoldResult:
        derived = derive(basic, advanced)
        plan = build_file_plan(derived)
        written = materialize(plan, self._cwd)
        self._reporter.info(FILES_CREATED_MESSAGE)
        return ScaffoldResult(derived=derived, written=tuple(written), plan=plan)

    async def install(self, derived: DerivedConfig, *, progress: InstallProgress | None = None) -> None:
        await self._installer.install(derived.dev_dependencies, git_init=derived.git_init, progress=progress)

    async def complete(self, result: ScaffoldResult, *, progress: InstallProgress | None = None) -> ScaffoldResult:
        """Install dependencies for a generated *result* unless installs are skipped."""
        if self._settings.skip_install:
            logger.debug("skipping dependency installation")
            self._reporter.success(SUCCESS_MESSAGE)
            return ScaffoldResult(
                derived=result.derived,
                written=result.written,
                install_skipped=True,
                plan=result.plan,
            )

        await self.install(result.derived, progress=progress)
        self._reporter.success(SUCCESS_MESSAGE)
        return ScaffoldResult(
            derived=result.derived,
            written=result.written,
            dev_dependencies=result.derived.dev_dependencies,
            git_initialized=result.derived.git_init,
            plan=result.plan,
        )

    async def run(
        self,
        basic: BasicAnswers,
        advanced: AdvancedAnswers,
        *,
        progress: InstallProgress | None = None,
    ) -> ScaffoldResult:
        """Generate files, then install dependencies unless installs are skipped."""
        return await self.complete(self.generate(basic, advanced), progress=progress)
