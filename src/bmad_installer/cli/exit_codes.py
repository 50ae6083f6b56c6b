"""Exit-code constants used by the CLI layer.

Every exit path returns one of these values; command handlers only ever
produce ``SUCCESS`` or ``GENERAL_ERROR``.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed, or help was displayed."""

GENERAL_ERROR: int = 1
"""An installer operation failed, the installer could not be loaded, or
the command line was invalid."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""
