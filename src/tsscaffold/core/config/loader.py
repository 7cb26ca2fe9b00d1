"""Answers file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tsscaffold.core.contracts.answers import DEFAULT_ADVANCED_ANSWERS, AdvancedAnswers, BasicAnswers, ScaffoldAnswers
from tsscaffold.core.contracts.exceptions import ConfigError


def load_answers(path: str | Path) -> ScaffoldAnswers:
    """Read a JSON answers file.

    The file holds the basic answers at the top level plus an optional
    ``advanced`` object; a missing or ``null`` ``advanced`` selects the default
    advanced set::

        {"name": "My Lib", "outDir": "dist", "gitInit": true, "advanced": null}
    """
    answers_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(answers_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"failed reading answers file: {answers_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in answers file: {answers_path}") from exc

    if not isinstance(raw_payload, dict):
        raise ConfigError(f"answers file root must be an object: {answers_path}")

    payload = dict(raw_payload)
    raw_advanced = payload.pop("advanced", None)
    try:
        advanced = DEFAULT_ADVANCED_ANSWERS if raw_advanced is None else AdvancedAnswers.model_validate(raw_advanced)
        basic = BasicAnswers.model_validate({**payload, "advancedMode": raw_advanced is not None})
    except ValidationError as exc:
        raise ConfigError(f"invalid answers: {exc}") from exc

    return ScaffoldAnswers(basic=basic, advanced=advanced)


def answers_from_options(*, name: str | None, out_dir: str = "dist", git_init: bool = True) -> ScaffoldAnswers:
    """Build answers from command-line flags, using the default advanced set."""
    if name is None:
        raise ConfigError("--name is required with --defaults")
    try:
        basic = BasicAnswers(name=name, out_dir=out_dir, git_init=git_init, advanced_mode=False)
    except ValidationError as exc:
        raise ConfigError(f"invalid answers: {exc}") from exc
    return ScaffoldAnswers(basic=basic, advanced=DEFAULT_ADVANCED_ANSWERS)
