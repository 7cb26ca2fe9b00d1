"""Public contracts shared by core and CLI layers."""

from tsscaffold.core.contracts.answers import (
    DEFAULT_ADVANCED_ANSWERS,
    AdvancedAnswers,
    BasicAnswers,
    ModuleFormat,
    ScaffoldAnswers,
    normalize_out_dir,
)
from tsscaffold.core.contracts.config import InstallSettings
from tsscaffold.core.contracts.derived import DerivedConfig, FileEntry, FileKind, FilePlan
from tsscaffold.core.contracts.exceptions import (
    ConfigError,
    FilesystemWriteError,
    InstallError,
    PreconditionError,
    PromptAbortedError,
    TsScaffoldError,
)
from tsscaffold.core.contracts.progress import InstallProgress, NullInstallProgress
from tsscaffold.core.contracts.reporter import NullReporter, Reporter

__all__ = [
    "DEFAULT_ADVANCED_ANSWERS",
    "AdvancedAnswers",
    "BasicAnswers",
    "ConfigError",
    "DerivedConfig",
    "FileEntry",
    "FileKind",
    "FilePlan",
    "FilesystemWriteError",
    "InstallError",
    "InstallProgress",
    "InstallSettings",
    "ModuleFormat",
    "NullInstallProgress",
    "NullReporter",
    "PreconditionError",
    "PromptAbortedError",
    "Reporter",
    "ScaffoldAnswers",
    "TsScaffoldError",
    "normalize_out_dir",
]
