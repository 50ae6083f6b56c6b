"""Interactive install flow for the CLI layer.

Asks, in order:

1. target directory (free text, default ``.bmad-core``)
2. install type (complete or single agent)
3. which agent, only for a single-agent install
4. which IDE(s) to configure, at least one

and returns the answers as an :class:`InstallConfig`.  Prompts use
``unsafe_ask`` so Ctrl+C raises ``KeyboardInterrupt`` and aborts the
command.
"""

from __future__ import annotations

from typing import Any

from bmad_installer.cli.console import console, escape, import_questionary
from bmad_installer.core.models import AgentDescriptor, InstallConfig, InstallType
from bmad_installer.core.protocols import Installer
from bmad_installer.exceptions import InvalidAgentError
from bmad_installer.utils.aio import resolve_awaitable
from bmad_installer.utils.constants import (
    DEFAULT_DIRECTORY,
    IDE_CHOICES,
    INSTALL_TYPE_LABELS,
)

NO_IDE_MESSAGE: str = "You must choose at least one IDE, or press Ctrl+C to skip IDE setup."


def validate_ide_selection(selected: list[str]) -> bool | str:
    """Checkbox validator: ``True``, or the message shown when nothing is ticked."""
    if len(selected) < 1:
        return NO_IDE_MESSAGE
    return True


def fetch_agents(installer: Installer) -> list[AgentDescriptor]:
    """Ask the installer for its agents and normalise them."""
    raw_agents = resolve_awaitable(installer.get_available_agents())
    agents = [AgentDescriptor.coerce(raw) for raw in raw_agents or ()]
    if not agents:
        raise InvalidAgentError(
            "The installer reported no agents to install.",
            hint="Choose a complete installation instead.",
        )
    return agents


# ---------------------------------------------------------------------------
# Individual prompts
# ---------------------------------------------------------------------------

def _ask_directory(questionary: Any) -> str:
    answer: str = questionary.text(
        "Where would you like to install BMAD?",
        default=DEFAULT_DIRECTORY,
    ).unsafe_ask()
    return answer if answer.strip() else DEFAULT_DIRECTORY


def _ask_install_type(questionary: Any) -> InstallType:
    choices = [
        questionary.Choice(title=label, value=value)
        for value, label in INSTALL_TYPE_LABELS.items()
    ]
    answer: str = questionary.select(
        "How would you like to install BMAD?",
        choices=choices,
    ).unsafe_ask()
    return InstallType(answer)


def _ask_agent(questionary: Any, installer: Installer) -> str:
    choices = [
        questionary.Choice(title=agent.label, value=agent.id)
        for agent in fetch_agents(installer)
    ]
    answer: str = questionary.select(
        "Select an agent to install:",
        choices=choices,
    ).unsafe_ask()
    return answer


def _ask_ides(questionary: Any) -> list[str]:
    choices = [
        questionary.Choice(title=label, value=ide_id)
        for ide_id, label in IDE_CHOICES
    ]
    answer: list[str] = questionary.checkbox(
        "Which IDE(s) are you using? (Select all that apply)",
        choices=choices,
        validate=validate_ide_selection,
    ).unsafe_ask()
    return answer


# ---------------------------------------------------------------------------
# Public prompt function
# ---------------------------------------------------------------------------

def prompt_installation(installer: Installer, version: str) -> InstallConfig:
    """Run the interactive flow and return the resulting install config.

    Parameters
    ----------
    installer:
        Collaborator queried for the agent list on single-agent installs.
    version:
        Installer version shown in the welcome banner.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C at any prompt.
    InvalidAgentError
        If a single-agent install is chosen but no usable agents exist.
    """
    questionary = import_questionary()

    console.print(f"\n[bold blue]Welcome to BMAD Method Installer v{escape(version)}[/bold blue]\n")

    directory = _ask_directory(questionary)
    install_type = _ask_install_type(questionary)

    agent: str | None = None
    if install_type is InstallType.SINGLE_AGENT:
        agent = _ask_agent(questionary, installer)

    ides = _ask_ides(questionary)

    return InstallConfig.build(
        install_type=install_type,
        agent=agent,
        directory=directory,
        ides=ides,
    )
