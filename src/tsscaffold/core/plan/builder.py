"""Turn a derived configuration into an ordered file plan."""

from __future__ import annotations

import json
from pathlib import PurePosixPath
from typing import Any

from pydantic import ValidationError

from tsscaffold.core.contracts.derived import DerivedConfig, FileEntry, FileKind, FilePlan
from tsscaffold.core.contracts.exceptions import ConfigError
from tsscaffold.core.derive import templates


def render_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, indent="\t") + "\n"


def _json(path: str, payload: dict[str, Any]) -> FileEntry:
    return FileEntry(path=path, kind=FileKind.JSON, content=render_json(payload))


def _text(path: str, content: str) -> FileEntry:
    return FileEntry(path=path, kind=FileKind.TEXT, content=content)


def _directories(path: str) -> list[str]:
    """``"a/b/c"`` -> ``["a", "a/b", "a/b/c"]``."""
    pure = PurePosixPath(path)
    return [str(parent) for parent in reversed(pure.parents) if str(parent) != "."] + [str(pure)]


def build_file_plan(derived: DerivedConfig) -> FilePlan:
    """Build the ordered artifact list for *derived*.

    Raises :class:`ConfigError` when the output directory collides with a
    generated file or points outside the project.
    """
    out_dir = derived.normalized_out_dir
    entries: list[FileEntry] = [
        _json("package.json", derived.manifest),
        _json("tsconfig.json", derived.compiler_config),
    ]
    if derived.git_init:
        entries.append(_text(".gitignore", templates.ignore_lines(out_dir)))
    if derived.prettier_config is not None:
        entries.append(_json(".prettierrc", derived.prettier_config))
    if derived.eslint_config is not None:
        entries.append(_json(".eslintrc", derived.eslint_config))
        entries.append(_text(".eslintignore", templates.ignore_lines(out_dir)))

    directories: list[str] = []
    if derived.jest_config is not None:
        entries.append(_json(templates.JEST_CONFIG_FILE, derived.jest_config))
        directories.append(templates.TESTS_DIR)

    try:
        directories.extend(_directories(out_dir))
        planned = {entry.path: entry.kind for entry in entries}
        for directory in directories:
            kind = planned.get(directory)
            if kind is FileKind.DIRECTORY:
                continue
            if kind is not None:
                raise ConfigError(f"output dir {out_dir!r} collides with generated file {directory!r}")
            planned[directory] = FileKind.DIRECTORY
            entries.append(FileEntry(path=directory, kind=FileKind.DIRECTORY))
            if directory == templates.TESTS_DIR and derived.jest_config is not None:
                entries.append(_text(templates.TESTS_ENTRY, ""))
                planned[templates.TESTS_ENTRY] = FileKind.TEXT

        if planned.get(templates.SOURCE_DIR) is None:
            entries.append(FileEntry(path=templates.SOURCE_DIR, kind=FileKind.DIRECTORY))
        entries.append(_text(templates.SOURCE_ENTRY, templates.SOURCE_STUB))
        return FilePlan(entries=tuple(entries))
    except ValidationError as exc:
        raise ConfigError(f"output dir {out_dir!r} cannot be generated: {exc}") from exc
