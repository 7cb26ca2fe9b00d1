from __future__ import annotations

import json
from pathlib import Path

import pytest

from tsscaffold.core.contracts.answers import AdvancedAnswers, BasicAnswers
from tsscaffold.core.contracts.derived import FileEntry, FileKind, FilePlan
from tsscaffold.core.contracts.exceptions import FilesystemWriteError
from tsscaffold.core.derive import derive
from tsscaffold.core.materialize import materialize
from tsscaffold.core.plan import build_file_plan


def test_materialize_writes_full_layout(tmp_path: Path, basic_answers: BasicAnswers) -> None:
    basic = basic_answers.model_copy(update={"git_init": True})
    plan = build_file_plan(derive(basic, AdvancedAnswers(use_jest=True)))

    written = materialize(plan, tmp_path)

    assert written == [tmp_path / path for path in plan.paths]
    assert (tmp_path / "dist").is_dir()
    assert (tmp_path / "tests" / "test.ts").read_text() == ""
    assert (tmp_path / "src" / "index.ts").read_text() == 'console.log("Hello world!");'
    assert (tmp_path / ".gitignore").read_text() == "node_modules\ndist\n"
    manifest = json.loads((tmp_path / "package.json").read_text())
    assert manifest["scripts"]["test"] == "jest --config jestconfig.json"
    assert manifest["repository"] == {"type": "git", "url": ""}


def test_materialize_refuses_to_overwrite(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("keep me")
    plan = FilePlan(
        entries=(
            FileEntry(path="tsconfig.json", kind=FileKind.JSON, content="{}\n"),
            FileEntry(path="package.json", kind=FileKind.JSON, content="{}\n"),
            FileEntry(path="src", kind=FileKind.DIRECTORY),
        )
    )

    with pytest.raises(FilesystemWriteError) as exc_info:
        materialize(plan, tmp_path)

    assert (tmp_path / "package.json").read_text() == "keep me"
    assert exc_info.value.path == tmp_path / "package.json"
    assert exc_info.value.written == (tmp_path / "tsconfig.json",)
    # Remaining entries are not attempted.
    assert not (tmp_path / "src").exists()


def test_materialize_reports_unwritable_root(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    plan = FilePlan(entries=(FileEntry(path="package.json", kind=FileKind.JSON, content="{}\n"),))

    with pytest.raises(FilesystemWriteError, match="package.json"):
        materialize(plan, blocker)


def test_materialize_existing_directory_is_reused(tmp_path: Path) -> None:
    (tmp_path / "src").mkdir()
    plan = FilePlan(
        entries=(
            FileEntry(path="src", kind=FileKind.DIRECTORY),
            FileEntry(path="src/index.ts", kind=FileKind.TEXT, content="x"),
        )
    )

    materialize(plan, tmp_path)

    assert (tmp_path / "src" / "index.ts").read_text() == "x"
