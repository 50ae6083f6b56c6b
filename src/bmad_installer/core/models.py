"""Domain models for bmad-installer.

All models are **frozen** dataclasses — immutable value objects that
live for the duration of one command.  Nothing here is persisted.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from bmad_installer.exceptions import InvalidAgentError
from bmad_installer.utils.constants import DEFAULT_DIRECTORY


class InstallType(str, enum.Enum):
    """How much of BMAD Method to install."""

    FULL = "full"
    SINGLE_AGENT = "single-agent"


# ---------------------------------------------------------------------------
# Install request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstallConfig:
    """Resolved install parameters handed to ``Installer.install``."""

    install_type: InstallType
    """Whole ``.bmad-core`` folder, or one agent with its dependencies."""

    agent: str | None = None
    """Agent id; only meaningful for :attr:`InstallType.SINGLE_AGENT`."""

    directory: str = DEFAULT_DIRECTORY
    """Target installation directory."""

    ides: tuple[str, ...] = ()
    """IDE ids to configure, first-seen order, no duplicates."""

    @classmethod
    def build(
        cls,
        *,
        install_type: InstallType | str,
        agent: str | None = None,
        directory: str | None = None,
        ides: Iterable[str] | None = None,
    ) -> InstallConfig:
        """Normalise loosely-typed inputs into an :class:`InstallConfig`.

        ``directory`` falls back to ``.bmad-core`` when missing or blank,
        and repeated IDE ids collapse to their first occurrence.
        """
        return cls(
            install_type=InstallType(install_type),
            agent=agent,
            directory=directory or DEFAULT_DIRECTORY,
            ides=tuple(dict.fromkeys(ides or ())),
        )


# ---------------------------------------------------------------------------
# Agent listing
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class AgentDescriptor:
    """An agent the installer can install on its own."""

    id: str
    name: str
    description: str

    @property
    def label(self) -> str:
        """Single-line choice label: ``"<id> - <name> (<description>)"``."""
        return f"{self.id} - {self.name} ({self.description})"

    @classmethod
    def coerce(cls, raw: Any) -> AgentDescriptor:
        """Accept a descriptor, a mapping, or any object with matching attributes.

        Raises
        ------
        InvalidAgentError
            If *raw* has no ``id``.
        """
        if isinstance(raw, AgentDescriptor):
            return raw
        if isinstance(raw, Mapping):
            fields = {key: raw.get(key) for key in ("id", "name", "description")}
        else:
            fields = {key: getattr(raw, key, None) for key in ("id", "name", "description")}
        if not fields["id"]:
            raise InvalidAgentError(f"Installer returned an agent without an id: {raw!r}")
        return cls(
            id=str(fields["id"]),
            name=str(fields["name"] or fields["id"]),
            description=str(fields["description"] or ""),
        )
