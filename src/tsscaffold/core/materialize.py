"""Write a file plan to disk."""

from __future__ import annotations

import logging
from pathlib import Path

from tsscaffold.core.contracts.derived import FileKind, FilePlan
from tsscaffold.core.contracts.exceptions import FilesystemWriteError

logger = logging.getLogger(__name__)


def materialize(plan: FilePlan, root: Path) -> list[Path]:
    """Write every entry of *plan* under *root*, in order.

    Files are created exclusively, so a path that already exists is reported
    instead of overwritten. The first failure stops the run; entries written
    before it stay on disk and are listed on the raised
    :class:`FilesystemWriteError`.
    """
    written: list[Path] = []
    for entry in plan.entries:
        target = root / entry.path
        try:
            if entry.kind is FileKind.DIRECTORY:
                target.mkdir(parents=True, exist_ok=True)
            else:
                with target.open("x", encoding="utf-8", newline="\n") as handle:
                    handle.write(entry.content or "")
        except OSError as exc:
            raise FilesystemWriteError(
                f"cannot write {entry.path}: {exc}",
                path=target,
                written=tuple(written),
            ) from exc
        logger.debug("wrote %s (%s)", target, entry.kind.value)
        written.append(target)
    return written
