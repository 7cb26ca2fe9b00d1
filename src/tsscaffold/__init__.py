"""Public API surface for tsscaffold."""

__version__ = "1.0.0"

from tsscaffold.core.config import answers_from_options, load_answers
from tsscaffold.core.contracts import (
    DEFAULT_ADVANCED_ANSWERS,
    AdvancedAnswers,
    BasicAnswers,
    ConfigError,
    DerivedConfig,
    FileEntry,
    FileKind,
    FilePlan,
    FilesystemWriteError,
    InstallError,
    InstallProgress,
    InstallSettings,
    ModuleFormat,
    NullInstallProgress,
    NullReporter,
    PreconditionError,
    PromptAbortedError,
    Reporter,
    ScaffoldAnswers,
    TsScaffoldError,
    normalize_out_dir,
)
from tsscaffold.core.derive import derive, to_package_name
from tsscaffold.core.install import DependencyInstaller
from tsscaffold.core.materialize import materialize
from tsscaffold.core.plan import build_file_plan
from tsscaffold.core.preflight import DirectoryState, check_directory, ensure_empty_directory
from tsscaffold.sdk import ScaffoldResult, Scaffolder

__all__ = [
    "DEFAULT_ADVANCED_ANSWERS",
    "AdvancedAnswers",
    "BasicAnswers",
    "ConfigError",
    "DependencyInstaller",
    "DerivedConfig",
    "DirectoryState",
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
    "ScaffoldResult",
    "Scaffolder",
    "TsScaffoldError",
    "answers_from_options",
    "build_file_plan",
    "check_directory",
    "derive",
    "ensure_empty_directory",
    "load_answers",
    "materialize",
    "normalize_out_dir",
    "to_package_name",
]
