"""Terminal progress displays."""

from tsscaffold.cli.progress.rich import RichInstallProgress

__all__ = ["RichInstallProgress"]
