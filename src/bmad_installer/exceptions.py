"""Custom exception hierarchy for bmad-installer.

Errors raised by this package inherit from :class:`BmadInstallerError`.
Errors raised by the installer collaborator are opaque: the command
handlers catch them broadly and report their message.

Hierarchy
---------
BmadInstallerError
├── ModuleResolutionError
├── EnvironmentError
└── InvalidAgentError
"""

from __future__ import annotations


class BmadInstallerError(Exception):
    """Base exception for all bmad-installer errors.

    Every user-visible error condition raised by this package maps to a
    subclass of this exception so that the CLI error boundary can render
    a clean message without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Start-up --------------------------------------------------------------

class ModuleResolutionError(BmadInstallerError):
    """Raised when no resolution strategy could load the installer.

    ``reasons`` holds one ``(strategy name, failure message)`` pair per
    attempted strategy, in the order they were tried.
    """

    def __init__(
        self,
        message: str,
        *,
        reasons: tuple[tuple[str, str], ...] = (),
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.reasons: tuple[tuple[str, str], ...] = reasons


class EnvironmentError(BmadInstallerError):
    """Raised when a required runtime dependency is not available."""


# --- Collaborator data -----------------------------------------------------

class InvalidAgentError(BmadInstallerError):
    """Raised when the installer reports an agent that cannot be displayed."""
