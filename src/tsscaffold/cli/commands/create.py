"""Create command: collect answers and scaffold the project."""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
from typing import Any

import questionary
from pydantic import ValidationError

from tsscaffold.core.contracts.answers import (
    DEFAULT_ADVANCED_ANSWERS,
    AdvancedAnswers,
    BasicAnswers,
    ModuleFormat,
    ScaffoldAnswers,
    normalize_out_dir,
)
from tsscaffold.core.contracts.config import InstallSettings
from tsscaffold.core.contracts.exceptions import ConfigError, PromptAbortedError
from tsscaffold.core.contracts.reporter import Reporter
from tsscaffold.sdk import ScaffoldResult

DEFAULT_OUT_DIR = "dist"
DEFAULT_GIT_INIT = True


def _validate_name(value: str) -> bool | str:
    if not value.strip():
        return "Project name is required"
    return True


def _validate_out_dir(value: str) -> bool | str:
    if not normalize_out_dir(value.strip()):
        return "Output dir is required"
    return True


def _ask(question: Any) -> Any:
    answer = question.ask()
    if answer is None:
        raise PromptAbortedError("Prompt cancelled by user")
    return answer


def collect_basic_answers() -> BasicAnswers:
    name = _ask(questionary.text("Project name", validate=_validate_name))
    out_dir = _ask(questionary.text("Output dir", default="dist", validate=_validate_out_dir))
    git_init = _ask(questionary.confirm("Init git", default=True))
    advanced_mode = _ask(questionary.confirm("Advanced config", default=False))
    return BasicAnswers(
        name=name,
        out_dir=out_dir,
        git_init=bool(git_init),
        advanced_mode=bool(advanced_mode),
    )


def collect_advanced_answers() -> AdvancedAnswers:
    module_format = _ask(
        questionary.select(
            "Module type",
            choices=[fmt.value for fmt in ModuleFormat],
            default=ModuleFormat.COMMONJS.value,
        )
    )
    strict = _ask(questionary.confirm("Strict mode", default=True))
    use_prettier = _ask(questionary.confirm("Use Prettier", default=True))
    use_eslint = _ask(questionary.confirm("Use ESLint", default=True))
    use_jest = _ask(questionary.confirm("Install Jest", default=False))
    return AdvancedAnswers(
        module_format=ModuleFormat(module_format),
        strict=bool(strict),
        use_prettier=bool(use_prettier),
        use_eslint=bool(use_eslint),
        use_jest=bool(use_jest),
    )


def collect_answers() -> ScaffoldAnswers:
    """Run the interactive wizard.

    Advanced questions are only asked when advanced mode is chosen; otherwise
    the default advanced set is used.
    """
    try:
        basic = collect_basic_answers()
        advanced = collect_advanced_answers() if basic.advanced_mode else DEFAULT_ADVANCED_ANSWERS
    except KeyboardInterrupt as exc:
        raise PromptAbortedError("Prompt cancelled by user") from exc
    return ScaffoldAnswers(basic=basic, advanced=advanced)


def resolve_answers(args: argparse.Namespace) -> ScaffoldAnswers:
    import tsscaffold.cli as cli

    if args.answers:
        return cli.load_answers(args.answers)
    if args.defaults:
        return cli.answers_from_options(
            name=args.name,
            out_dir=args.out_dir if args.out_dir is not None else DEFAULT_OUT_DIR,
            git_init=args.git if args.git is not None else DEFAULT_GIT_INIT,
        )
    return cli.collect_answers()


def build_settings(args: argparse.Namespace) -> InstallSettings:
    try:
        return InstallSettings(package_manager=args.package_manager, skip_install=args.skip_install)
    except ValidationError as exc:
        raise ConfigError(f"invalid options: {exc}") from exc


def run_create(args: argparse.Namespace, *, reporter: Reporter) -> ScaffoldResult:
    """Check the directory, collect answers, then generate and install.

    The directory check runs before any prompt so a non-empty directory never
    gets as far as answer collection. The install spinner only covers the
    install step, after files are written.
    """
    import tsscaffold.cli as cli

    settings = build_settings(args)
    scaffolder = cli.Scaffolder(cwd=Path.cwd(), settings=settings, reporter=reporter)
    scaffolder.check()

    answers = resolve_answers(args)
    result = scaffolder.generate(answers.basic, answers.advanced)

    if args.verbose or settings.skip_install:
        return asyncio.run(scaffolder.complete(result))

    from tsscaffold.cli.progress import RichInstallProgress

    with RichInstallProgress() as progress:
        return asyncio.run(scaffolder.complete(result, progress=progress))


__all__ = [
    "build_settings",
    "collect_advanced_answers",
    "collect_answers",
    "collect_basic_answers",
    "resolve_answers",
    "run_create",
]
