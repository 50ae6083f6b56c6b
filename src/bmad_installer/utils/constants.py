"""Defaults and choice tables shared by the CLI and resolver layers."""

from __future__ import annotations

PROG_NAME: str = "bmad"

DESCRIPTION: str = "BMAD Method installer - AI-powered Agile development framework"

DEFAULT_DIRECTORY: str = ".bmad-core"
"""Installation directory used when neither a flag nor an answer gives one."""

IDE_CHOICES: tuple[tuple[str, str], ...] = (
    ("cursor", "Cursor"),
    ("claude-code", "Claude Code"),
    ("windsurf", "Windsurf"),
    ("roo", "Roo Code"),
)
"""``(id, display label)`` pairs, in prompt order."""

IDE_IDS: tuple[str, ...] = tuple(ide_id for ide_id, _ in IDE_CHOICES)

INSTALL_TYPE_LABELS: dict[str, str] = {
    "full": "Complete installation (recommended) - All agents and tools",
    "single-agent": "Single agent - Choose one agent to install",
}

# Installer context: the collaborator is an installed distribution.
INSTALLER_MODULE: str = "bmad_method.installer"
INSTALLER_DISTRIBUTION: str = "bmad-method"

# Root context: the collaborator lives in a BMAD Method source checkout.
ROOT_MANIFEST: str = "package.json"
ROOT_INSTALLER_PATH: tuple[str, ...] = ("tools", "installer", "lib", "installer.py")

REQUIRED_CAPABILITIES: tuple[str, ...] = (
    "install",
    "update",
    "list_agents",
    "show_status",
    "get_available_agents",
)
