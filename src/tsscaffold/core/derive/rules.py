"""Answer-to-configuration derivation.

Each ``apply_*`` rule reads one toggle from :class:`AdvancedAnswers` and
extends the draft independently of the others. Rules always run in the same
order (jest, eslint, prettier) so dependency order and the ``prepare``
pipeline are stable for a given answer set.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from tsscaffold.core.contracts.answers import AdvancedAnswers, BasicAnswers, normalize_out_dir
from tsscaffold.core.contracts.derived import DerivedConfig
from tsscaffold.core.derive import templates

logger = logging.getLogger(__name__)


def to_package_name(name: str) -> str:
    """``"My Cool Lib"`` -> ``"my-cool-lib"``."""
    return name.replace(" ", "-").lower()


@dataclass
class DerivationDraft:
    out_dir: str
    dev_dependencies: list[str] = field(default_factory=lambda: [templates.COMPILER_PACKAGE])
    build_steps: list[str] = field(default_factory=lambda: [templates.COMPILER_STEP])
    scripts: dict[str, str] = field(default_factory=dict)
    prettier_config: dict[str, Any] | None = None
    eslint_config: dict[str, Any] | None = None
    jest_config: dict[str, Any] | None = None


def apply_jest(draft: DerivationDraft, advanced: AdvancedAnswers) -> None:
    if not advanced.use_jest:
        return
    draft.dev_dependencies.extend(templates.JEST_PACKAGES)
    draft.scripts["test"] = templates.TEST_SCRIPT
    draft.jest_config = templates.jest_config()


def apply_eslint(draft: DerivationDraft, advanced: AdvancedAnswers) -> None:
    if not advanced.use_eslint:
        return
    draft.dev_dependencies.extend(templates.ESLINT_PACKAGES)
    draft.scripts["lint"] = templates.LINT_SCRIPT
    draft.build_steps.append(templates.LINT_STEP)
    draft.eslint_config = templates.eslint_config()


def apply_prettier(draft: DerivationDraft, advanced: AdvancedAnswers) -> None:
    if not advanced.use_prettier:
        return
    draft.dev_dependencies.extend(templates.PRETTIER_PACKAGES)
    draft.scripts["format"] = templates.format_script(draft.out_dir)
    draft.build_steps.append(templates.FORMAT_STEP)
    draft.prettier_config = templates.prettier_config()


RULES: tuple[Callable[[DerivationDraft, AdvancedAnswers], None], ...] = (
    apply_jest,
    apply_eslint,
    apply_prettier,
)


def build_scripts(draft: DerivationDraft) -> dict[str, str]:
    """``build`` first, then the toggled scripts, ``prepare`` last."""
    return {
        "build": templates.BUILD_SCRIPT,
        **draft.scripts,
        "prepare": " && ".join(draft.build_steps),
    }


def build_manifest(*, package_name: str, out_dir: str, scripts: dict[str, str], git_init: bool) -> dict[str, Any]:
    manifest: dict[str, Any] = {
        "name": package_name,
        "version": templates.PACKAGE_VERSION,
        "description": "",
        "main": f"{out_dir}/index.js",
        "types": f"{out_dir}/index.d.ts",
        "scripts": dict(scripts),
        "files": [f"{out_dir}/**/*"],
        "author": "",
        "license": templates.PACKAGE_LICENSE,
    }
    if git_init:
        manifest["repository"] = {"type": "git", "url": ""}
    return manifest


def build_compiler_config(*, out_dir: str, advanced: AdvancedAnswers) -> dict[str, Any]:
    return {
        "compilerOptions": {
            "target": templates.COMPILER_TARGET,
            "module": advanced.module_format.value,
            "declaration": True,
            "outDir": out_dir,
            "esModuleInterop": True,
            "strict": advanced.strict,
        },
        "include": list(templates.COMPILER_INCLUDE),
        "exclude": list(templates.COMPILER_EXCLUDE),
    }


def derive(basic: BasicAnswers, advanced: AdvancedAnswers) -> DerivedConfig:
    """Map one answer set to the full generated configuration.

    Pure: the same answers always produce an equal :class:`DerivedConfig`,
    and serializing it yields byte-identical files.
    """
    out_dir = normalize_out_dir(basic.out_dir)
    package_name = to_package_name(basic.name)

    draft = DerivationDraft(out_dir=out_dir)
    for rule in RULES:
        rule(draft, advanced)

    scripts = build_scripts(draft)
    logger.debug("derived %s: deps=%s prepare=%r", package_name, draft.dev_dependencies, scripts["prepare"])

    return DerivedConfig(
        normalized_out_dir=out_dir,
        package_name=package_name,
        dev_dependencies=tuple(draft.dev_dependencies),
        build_pipeline_steps=tuple(draft.build_steps),
        scripts=scripts,
        manifest=build_manifest(package_name=package_name, out_dir=out_dir, scripts=scripts, git_init=basic.git_init),
        compiler_config=build_compiler_config(out_dir=out_dir, advanced=advanced),
        prettier_config=draft.prettier_config,
        eslint_config=draft.eslint_config,
        jest_config=draft.jest_config,
        git_init=basic.git_init,
    )
