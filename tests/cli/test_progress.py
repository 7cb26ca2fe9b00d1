"""Tests for RichInstallProgress, NullInstallProgress and RichReporter."""

from __future__ import annotations

import io

from rich.console import Console

from tsscaffold.cli.progress import RichInstallProgress
from tsscaffold.cli.reporter import RichReporter
from tsscaffold.core.contracts.progress import InstallProgress, NullInstallProgress
from tsscaffold.core.contracts.reporter import NullReporter


class TestNullInstallProgress:
    def test_implements_protocol(self) -> None:
        assert issubclass(NullInstallProgress, InstallProgress)

    def test_phase_lifecycle_is_noop(self) -> None:
        progress = NullInstallProgress()
        progress.phase_start("Install")
        progress.phase_done("Install")
        progress.phase_error("Git", RuntimeError("boom"))


class TestRichInstallProgress:
    def test_implements_protocol(self) -> None:
        assert issubclass(RichInstallProgress, InstallProgress)

    def test_context_manager(self) -> None:
        progress = RichInstallProgress(console=Console(file=io.StringIO()))
        with progress as p:
            assert p is progress

    def test_phase_lifecycle(self) -> None:
        buffer = io.StringIO()
        with RichInstallProgress(console=Console(file=buffer, width=100)) as progress:
            progress.phase_start("Install")
            progress.phase_done("Install")
            progress.phase_start("Git")
            progress.phase_error("Git", RuntimeError("boom"))

        output = buffer.getvalue()
        assert "Installing dependencies" in output
        assert "Git failed" in output

    def test_unknown_phase_is_noop(self) -> None:
        with RichInstallProgress(console=Console(file=io.StringIO())) as progress:
            progress.phase_done("Unknown")
            progress.phase_error("Unknown", RuntimeError("boom"))


class TestReporters:
    def test_rich_reporter_prints_brackets_literally(self) -> None:
        out = io.StringIO()
        err = io.StringIO()
        reporter = RichReporter(console=Console(file=out), error_console=Console(file=err))

        reporter.info("> Files created.")
        reporter.success("[Success] done")
        reporter.error("[Failed] boom")

        assert out.getvalue() == "> Files created.\n[Success] done\n"
        assert err.getvalue() == "[Failed] boom\n"

    def test_null_reporter_records_messages(self) -> None:
        reporter = NullReporter()
        reporter.info("a")
        reporter.error("b")

        assert reporter.messages == [("info", "a"), ("error", "b")]
