"""Shared pytest fixtures and configuration for the bmad-installer test suite.

Guidelines
----------
* No terminal interaction — questionary is replaced by a scripted fake.
* The installer collaborator is always a recording fake.
* Tests must not depend on OS state or on an installed ``bmad-method``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from bmad_installer.cli import console as console_module
from bmad_installer.core.models import AgentDescriptor
from bmad_installer.infra.resolver import InstallerContext

USE_DEFAULT = object()
"""Scripted answer meaning "accept the prompt's default"."""


# ---------------------------------------------------------------------------
# Fake installer collaborator
# ---------------------------------------------------------------------------

class FakeInstaller:
    """Records every capability call; raises from ``errors`` when set."""

    def __init__(self, agents: list[Any] | None = None) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.errors: dict[str, BaseException] = {}
        self.agents: list[Any] = agents if agents is not None else [
            AgentDescriptor(id="dev", name="Developer", description="Writes code"),
            {"id": "qa", "name": "Quinn", "description": "Reviews quality"},
        ]

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if name in self.errors:
            raise self.errors[name]

    def install(self, config: Any) -> None:
        self._record("install", config)

    def update(self) -> None:
        self._record("update")

    def list_agents(self) -> None:
        self._record("list_agents")

    def show_status(self) -> None:
        self._record("show_status")

    def get_available_agents(self) -> list[Any]:
        self._record("get_available_agents")
        return self.agents

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


# ---------------------------------------------------------------------------
# Fake questionary
# ---------------------------------------------------------------------------

@dataclass
class FakeChoice:
    title: str
    value: Any = None


class FakePrompt:
    def __init__(self, owner: FakeQuestionary, kind: str, message: str, kwargs: dict[str, Any]) -> None:
        self.owner = owner
        self.kind = kind
        self.message = message
        self.kwargs = kwargs

    def unsafe_ask(self) -> Any:
        self.owner.asked.append(self)
        answer = self.owner.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        if answer is USE_DEFAULT:
            return self.kwargs.get("default")
        return answer


class FakeQuestionary:
    """Stands in for the ``questionary`` module; answers are consumed in order."""

    Choice = FakeChoice

    def __init__(self) -> None:
        self.answers: list[Any] = []
        self.asked: list[FakePrompt] = []

    def text(self, message: str, **kwargs: Any) -> FakePrompt:
        return FakePrompt(self, "text", message, kwargs)

    def select(self, message: str, **kwargs: Any) -> FakePrompt:
        return FakePrompt(self, "select", message, kwargs)

    def checkbox(self, message: str, **kwargs: Any) -> FakePrompt:
        return FakePrompt(self, "checkbox", message, kwargs)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _reset_presentation_helpers() -> Any:
    console_module.get_rich_console.cache_clear()
    console_module.import_questionary.cache_clear()
    yield
    console_module.get_rich_console.cache_clear()
    console_module.import_questionary.cache_clear()


@pytest.fixture
def installer() -> FakeInstaller:
    return FakeInstaller()


@pytest.fixture
def resolved(monkeypatch: pytest.MonkeyPatch, installer: FakeInstaller) -> InstallerContext:
    """Make ``main`` resolve to the fake installer at version 4.2.0."""
    context = InstallerContext(version="4.2.0", installer=installer, source="installer")
    monkeypatch.setattr(
        "bmad_installer.cli.app.resolve_installer_context",
        lambda **_kwargs: context,
    )
    return context


@pytest.fixture
def fake_questionary(monkeypatch: pytest.MonkeyPatch) -> FakeQuestionary:
    fake = FakeQuestionary()
    monkeypatch.setattr("bmad_installer.cli.prompts.import_questionary", lambda: fake)
    return fake
