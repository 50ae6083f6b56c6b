"""Allow ``python -m bmad_installer`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m bmad_installer`` behaves identically to the ``bmad``
console script.
"""

from __future__ import annotations

from bmad_installer.cli.app import cli

if __name__ == "__main__":
    cli()
