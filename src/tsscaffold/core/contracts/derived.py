"""Derived configuration and file plan contracts."""

from __future__ import annotations

from enum import StrEnum
from pathlib import PurePosixPath
from typing import Any

from pydantic import BaseModel, model_validator


class DerivedConfig(BaseModel):
    """Everything generated from one answer set.

    ``manifest`` and the tool configs keep insertion order, which is the order
    their keys are written to disk.
    """

    model_config = {"frozen": True}

    normalized_out_dir: str
    package_name: str
    dev_dependencies: tuple[str, ...]
    build_pipeline_steps: tuple[str, ...]
    scripts: dict[str, str]
    manifest: dict[str, Any]
    compiler_config: dict[str, Any]
    prettier_config: dict[str, Any] | None = None
    eslint_config: dict[str, Any] | None = None
    jest_config: dict[str, Any] | None = None
    git_init: bool = False

    @property
    def prepare_script(self) -> str:
        return self.scripts["prepare"]


class FileKind(StrEnum):
    JSON = "json"
    TEXT = "text"
    DIRECTORY = "directory"


class FileEntry(BaseModel):
    model_config = {"frozen": True}

    path: str
    kind: FileKind
    content: str | None = None

    @model_validator(mode="after")
    def validate_content(self) -> FileEntry:
        if self.kind is FileKind.DIRECTORY and self.content is not None:
            raise ValueError(f"directory entry {self.path!r} cannot have content")
        if self.kind is not FileKind.DIRECTORY and self.content is None:
            raise ValueError(f"file entry {self.path!r} requires content")
        pure = PurePosixPath(self.path)
        if pure.is_absolute() or ".." in pure.parts:
            raise ValueError(f"plan paths must stay inside the project: {self.path!r}")
        return self


class FilePlan(BaseModel):
    """Ordered list of artifacts; parents always precede their children."""

    model_config = {"frozen": True}

    entries: tuple[FileEntry, ...]

    @model_validator(mode="after")
    def validate_order(self) -> FilePlan:
        seen: set[str] = set()
        directories: set[str] = set()
        for entry in self.entries:
            if entry.path in seen:
                raise ValueError(f"duplicate plan path: {entry.path!r}")
            parent = PurePosixPath(entry.path).parent
            if str(parent) != "." and str(parent) not in directories:
                raise ValueError(f"{entry.path!r} is planned before its directory {str(parent)!r}")
            seen.add(entry.path)
            if entry.kind is FileKind.DIRECTORY:
                directories.add(entry.path)
        return self

    @property
    def paths(self) -> list[str]:
        return [entry.path for entry in self.entries]

    def get(self, path: str) -> FileEntry | None:
        for entry in self.entries:
            if entry.path == path:
                return entry
        return None
