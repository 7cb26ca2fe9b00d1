"""Tests for the tsscaffold exception hierarchy."""

from __future__ import annotations

from pathlib import Path

from tsscaffold.core.contracts.exceptions import (
    ConfigError,
    FilesystemWriteError,
    InstallError,
    PreconditionError,
    PromptAbortedError,
    TsScaffoldError,
)


class TestExceptionHierarchy:
    def test_all_exceptions_inherit_from_base(self) -> None:
        for exc_type in (ConfigError, FilesystemWriteError, InstallError, PreconditionError, PromptAbortedError):
            assert issubclass(exc_type, TsScaffoldError)

    def test_precondition_error_carries_path_and_count(self) -> None:
        exc = PreconditionError("not empty", path=Path("/tmp/x"), file_count=3)

        assert exc.path == Path("/tmp/x")
        assert exc.file_count == 3
        assert str(exc) == "not empty"

    def test_write_error_carries_written_paths(self) -> None:
        exc = FilesystemWriteError("boom", path=Path("b"), written=(Path("a"),))

        assert exc.path == Path("b")
        assert exc.written == (Path("a"),)

    def test_install_error_defaults(self) -> None:
        exc = InstallError("npm missing")

        assert exc.command == ()
        assert exc.returncode is None
