"""Protocols (interfaces) for the installer collaborator.

The installer does all real work, such as copying files and merging
IDE configuration.  This package only depends on the contract below;
any module or object exposing these callables satisfies it
structurally.
"""

from __future__ import annotations

from collections.abc import Awaitable, Iterable
from typing import Any, Protocol

from bmad_installer.core.models import InstallConfig


class Installer(Protocol):
    """Contract for the external installer collaborator.

    Every capability may be synchronous or return an awaitable; the CLI
    drives awaitables to completion.  Failures are signalled by raising
    any exception; the CLI reports its message and exits with status 1.
    """

    def install(self, config: InstallConfig) -> None | Awaitable[None]:
        """Install BMAD Method according to *config*."""
        ...  # pragma: no cover

    def update(self) -> None | Awaitable[None]:
        """Update an existing installation in place."""
        ...  # pragma: no cover

    def list_agents(self) -> None | Awaitable[None]:
        """Print the agents available for installation."""
        ...  # pragma: no cover

    def show_status(self) -> None | Awaitable[None]:
        """Print the status of the current installation."""
        ...  # pragma: no cover

    def get_available_agents(self) -> Iterable[Any] | Awaitable[Iterable[Any]]:
        """Return agent records with ``id``, ``name`` and ``description``.

        Records may be mappings or attribute objects; see
        :meth:`~bmad_installer.core.models.AgentDescriptor.coerce`.
        """
        ...  # pragma: no cover
