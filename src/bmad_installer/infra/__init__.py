"""Infrastructure layer — locating the external installer collaborator.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the CLI layer.
"""

from bmad_installer.infra.resolver import (
    InstallerContext,
    ResolutionStrategy,
    default_strategies,
    resolve_installer_context,
)

__all__: list[str] = [
    "InstallerContext",
    "ResolutionStrategy",
    "default_strategies",
    "resolve_installer_context",
]
