"""Shared test fixtures for tsscaffold tests."""

from __future__ import annotations

from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest

from tsscaffold.core.contracts.answers import AdvancedAnswers, BasicAnswers, ModuleFormat


@pytest.fixture
def basic_answers() -> BasicAnswers:
    """A minimal valid answer set without git."""
    return BasicAnswers(name="My Cool Lib", out_dir="dist", git_init=False, advanced_mode=True)


@pytest.fixture
def lint_and_format_answers() -> AdvancedAnswers:
    """ES6, non-strict, eslint + prettier, no jest."""
    return AdvancedAnswers(
        module_format=ModuleFormat.ES6,
        strict=False,
        use_prettier=True,
        use_eslint=True,
        use_jest=False,
    )


@pytest.fixture
def jest_only_answers() -> AdvancedAnswers:
    return AdvancedAnswers(use_prettier=False, use_eslint=False, use_jest=True)


class FakeProcess:
    """Mimics ``asyncio.subprocess.Process`` for a finished command."""

    def __init__(self, returncode: int = 0, stderr: bytes = b"") -> None:
        self.returncode = returncode
        self._stderr = stderr

    async def communicate(self) -> tuple[bytes, bytes]:
        return b"", self._stderr


class FakeSubprocess:
    """Records every spawned command and returns canned exit codes in order."""

    def __init__(self, results: list[tuple[int, bytes]] | None = None) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.kwargs: list[dict[str, Any]] = []
        self._results = list(results or [])

    async def __call__(self, *args: str, **kwargs: Any) -> FakeProcess:
        self.calls.append(tuple(args))
        self.kwargs.append(kwargs)
        returncode, stderr = self._results.pop(0) if self._results else (0, b"")
        return FakeProcess(returncode, stderr)


@pytest.fixture
def fake_subprocess(monkeypatch: pytest.MonkeyPatch) -> Callable[..., FakeSubprocess]:
    """Patch process spawning and PATH lookup used by the installer."""

    def _install(results: list[tuple[int, bytes]] | None = None) -> FakeSubprocess:
        fake = FakeSubprocess(results)
        monkeypatch.setattr("tsscaffold.core.install.asyncio.create_subprocess_exec", fake)
        monkeypatch.setattr("tsscaffold.core.install.shutil.which", lambda name: f"/usr/bin/{name}")
        return fake

    return _install


class FakeQuestion:
    """Mimics questionary.Question: returns a canned value from .ask()."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def ask(self) -> Any:
        return self._value


def build_fake_questionary(answers: dict[str, Any], asked: list[str] | None = None) -> SimpleNamespace:
    """Build a fake questionary namespace from a mapping of prompt -> answer.

    Prompts are matched case-insensitively by containment; every prompt shown
    is appended to *asked*.
    """

    def _find(prompt: str) -> Any:
        if asked is not None:
            asked.append(prompt)
        for key, value in answers.items():
            if key.lower() in prompt.lower():
                return value
        raise KeyError(f"no answer configured for prompt: {prompt!r}")

    def _question(prompt: str, **_kw: Any) -> FakeQuestion:
        return FakeQuestion(_find(prompt))

    return SimpleNamespace(text=_question, select=_question, confirm=_question)


@pytest.fixture
def fake_questionary(monkeypatch: pytest.MonkeyPatch) -> Callable[..., list[str]]:
    """Install a fake questionary into the create command; returns the asked prompts."""

    def _install(answers: dict[str, Any]) -> list[str]:
        asked: list[str] = []
        monkeypatch.setattr("tsscaffold.cli.commands.create.questionary", build_fake_questionary(answers, asked))
        return asked

    return _install
