"""Rich-based install spinner."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from tsscaffold.core.contracts.progress import InstallProgress


class RichInstallProgress(InstallProgress):
    """Live terminal spinner powered by Rich.

    Use as a context manager so the live display is properly started/stopped::

        with RichInstallProgress() as progress:
            await scaffolder.run(basic, advanced, progress=progress)
    """

    _PHASE_LABELS: ClassVar[dict[str, str]] = {
        "Install": "[green]Installing dependencies[/]",
        "Git": "[cyan]Initializing git repository[/]",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)
        self._progress = Progress(
            SpinnerColumn(spinner_name="dots", style="green", finished_text="[green]✓[/green]"),
            TextColumn("{task.description}"),
            TimeElapsedColumn(),
            console=self._console,
            transient=False,
        )
        self._task_ids: dict[str, RichTaskID] = {}

    def __enter__(self) -> RichInstallProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str) -> None:
        label = self._PHASE_LABELS.get(phase, phase)
        self._task_ids[phase] = self._progress.add_task(label, total=None)

    def phase_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        # Indeterminate task; mark finished by setting total = completed.
        self._progress.update(task_id, total=1, completed=1)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self._progress.update(task_id, description=f"[red]✗ {phase} failed[/red]", total=1, completed=1)
