"""Core layer — domain models and the installer contract.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from bmad_installer.core.models import AgentDescriptor, InstallConfig, InstallType
from bmad_installer.core.protocols import Installer

__all__: list[str] = [
    "AgentDescriptor",
    "InstallConfig",
    "InstallType",
    "Installer",
]
