"""CLI application entry point and command routing for bmad-installer.

Start-up resolves the installer collaborator (and with it the version
string) before any argument is interpreted; if that fails the process
exits with status 1.  Each command handler then catches every error
raised while it runs, prints it with a command-specific prefix, and
returns :data:`exit_codes.GENERAL_ERROR`.

Architecture notes
------------------
* No installer logic lives here; all work is delegated to the
  collaborator found by :mod:`bmad_installer.infra.resolver`.
* User-facing output goes through the Rich console proxy.
* :func:`cli` is the only place that translates exit codes into
  ``sys.exit`` calls.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import NoReturn

from bmad_installer.cli import exit_codes
from bmad_installer.cli.console import console, escape
from bmad_installer.core.models import InstallConfig, InstallType
from bmad_installer.exceptions import BmadInstallerError, ModuleResolutionError
from bmad_installer.infra.resolver import InstallerContext, resolve_installer_context
from bmad_installer.utils.aio import resolve_awaitable
from bmad_installer.utils.constants import DESCRIPTION, IDE_IDS, PROG_NAME
from bmad_installer.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with ``GENERAL_ERROR``."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(exit_codes.GENERAL_ERROR, f"{self.prog}: error: {message}\n")


def _build_pre_parser() -> argparse.ArgumentParser:
    """Parser for the flags needed before the installer is resolved."""
    parser = _ArgumentParser(add_help=False, allow_abbrev=False)
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _build_parser(version: str) -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``bmad install``  — install all agents, or one agent
    * ``bmad update``   — update an existing installation
    * ``bmad list``     — list available agents
    * ``bmad status``   — show installation status
    """
    parser = _ArgumentParser(
        prog=PROG_NAME,
        description=DESCRIPTION,
        parents=[_build_pre_parser()],
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {version}",
    )
    subparsers = parser.add_subparsers(
        dest="command",
        metavar="<command>",
        parser_class=_ArgumentParser,
    )
    common = [_build_pre_parser()]

    install = subparsers.add_parser(
        "install",
        help="Install BMAD Method agents and tools",
        description="Install BMAD Method agents and tools.",
        parents=common,
    )
    install.add_argument(
        "-f",
        "--full",
        action="store_true",
        help="Install complete .bmad-core folder",
    )
    install.add_argument(
        "-a",
        "--agent",
        metavar="<agent>",
        help="Install specific agent with dependencies",
    )
    install.add_argument(
        "-d",
        "--directory",
        metavar="<path>",
        help="Installation directory (default: .bmad-core)",
    )
    install.add_argument(
        "-i",
        "--ide",
        nargs="+",
        action="extend",
        choices=IDE_IDS,
        metavar="<ide>",
        help=(
            "Configure for specific IDE(s) - can specify multiple "
            f"({', '.join(IDE_IDS)})"
        ),
    )

    update = subparsers.add_parser(
        "update",
        help="Update existing BMAD installation",
        description="Update existing BMAD installation.",
        parents=common,
    )
    update.add_argument(
        "--force",
        action="store_true",
        help="Force update, overwriting modified files",
    )
    update.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be updated without making changes",
    )

    subparsers.add_parser("list", help="List available agents", parents=common)
    subparsers.add_parser("status", help="Show installation status", parents=common)
    return parser


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# ---------------------------------------------------------------------------
# Start-up
# ---------------------------------------------------------------------------

def _report_fallback(failed: str, reason: str, next_name: str) -> None:
    console.print(
        f"[dim]{failed.capitalize()} context not found ({escape(reason)}), "
        f"trying {next_name} context...[/dim]",
        soft_wrap=True,
    )


def _report_resolution_failure(exc: ModuleResolutionError) -> None:
    console.error(
        "Error:",
        "Could not load required modules. "
        "Please ensure you are running from the correct directory.",
    )
    debug_info = {
        "bmad_installer": __version__,
        "package_dir": str(Path(__file__).resolve().parent.parent),
        "cwd": os.getcwd(),
        "error": "; ".join(f"{name}: {reason}" for name, reason in exc.reasons) or str(exc),
    }
    console.print("Debug info:", debug_info)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _report_failure(prefix: str, exc: Exception) -> None:
    console.error(prefix, exc)
    if isinstance(exc, BmadInstallerError) and exc.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", soft_wrap=True)


def _config_from_flags(args: argparse.Namespace) -> InstallConfig:
    return InstallConfig.build(
        install_type=InstallType.FULL if args.full else InstallType.SINGLE_AGENT,
        agent=args.agent,
        directory=args.directory,
        ides=args.ide,
    )


def _handle_install(args: argparse.Namespace, context: InstallerContext) -> int:
    """Dispatch ``bmad install``.

    Without ``--full`` or ``--agent`` the options are gathered
    interactively and ``--directory``/``--ide`` are ignored.
    """
    try:
        if not args.full and not args.agent:
            from bmad_installer.cli.prompts import prompt_installation

            config = prompt_installation(context.installer, context.version)
        else:
            config = _config_from_flags(args)
        logger.debug("Installing with %s", config)
        resolve_awaitable(context.installer.install(config))
    except Exception as exc:  # noqa: BLE001
        logger.debug("install failed", exc_info=True)
        _report_failure("Installation failed:", exc)
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS


def _run_capability(prefix: str, operation: Callable[[], object]) -> int:
    """Call a no-argument installer capability, reporting any failure."""
    try:
        resolve_awaitable(operation())
    except Exception as exc:  # noqa: BLE001
        logger.debug("%s %s", prefix, exc, exc_info=True)
        _report_failure(prefix, exc)
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS


def _handle_update(args: argparse.Namespace, context: InstallerContext) -> int:
    """Dispatch ``bmad update``.

    ``--force`` and ``--dry-run`` are accepted but the installer's
    ``update()`` takes no options, so they are not passed on.
    """
    if args.force or args.dry_run:
        logger.debug(
            "update flags not forwarded: force=%s dry_run=%s", args.force, args.dry_run,
        )
    return _run_capability("Update failed:", context.installer.update)


def _handle_list(args: argparse.Namespace, context: InstallerContext) -> int:
    return _run_capability("Error:", context.installer.list_agents)


def _handle_status(args: argparse.Namespace, context: InstallerContext) -> int:
    return _run_capability("Error:", context.installer.show_status)


_HANDLERS: dict[str, Callable[[argparse.Namespace, InstallerContext], int]] = {
    "install": _handle_install,
    "update": _handle_update,
    "list": _handle_list,
    "status": _handle_status,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the bmad CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    arguments = list(sys.argv[1:] if argv is None else argv)

    pre_args, _ = _build_pre_parser().parse_known_args(arguments)
    _configure_logging(pre_args.debug)

    try:
        context = resolve_installer_context(on_fallback=_report_fallback)
    except ModuleResolutionError as exc:
        _report_resolution_failure(exc)
        return exit_codes.GENERAL_ERROR

    parser = _build_parser(context.version)
    args = parser.parse_args(arguments)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _HANDLERS[args.command](args, context)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except BmadInstallerError as exc:
        console.error("Error:", exc)
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", soft_wrap=True)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
