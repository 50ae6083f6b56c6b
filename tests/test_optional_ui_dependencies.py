"""Regression tests for optional UI dependencies (rich/questionary).

Help and version never touch the presentation helpers, and error
reporting degrades to plain stderr output without Rich.  Only the
interactive flow requires questionary, and it fails cleanly without it.
"""

from __future__ import annotations

import importlib
import sys

import pytest
from conftest import FakeInstaller

from bmad_installer.cli import console as console_module
from bmad_installer.cli import exit_codes
from bmad_installer.cli.app import main
from bmad_installer.exceptions import EnvironmentError
from bmad_installer.infra.resolver import InstallerContext


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(
    monkeypatch: pytest.MonkeyPatch, resolved: InstallerContext,
) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(
    monkeypatch: pytest.MonkeyPatch, resolved: InstallerContext,
) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_errors_print_plainly_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    resolved: InstallerContext,
    installer: FakeInstaller,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    installer.errors["show_status"] = RuntimeError("no install found")

    assert main(["status"]) == exit_codes.GENERAL_ERROR
    assert capsys.readouterr().err == "Error: no install found\n"


def test_interactive_install_fails_cleanly_without_questionary(
    monkeypatch: pytest.MonkeyPatch,
    resolved: InstallerContext,
    installer: FakeInstaller,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_questionary(monkeypatch)

    assert main(["install"]) == exit_codes.GENERAL_ERROR
    assert "questionary is not installed" in capsys.readouterr().err
    assert installer.calls == []


def test_helpers_load_once(monkeypatch: pytest.MonkeyPatch) -> None:
    first = console_module.get_rich_console()
    assert console_module.get_rich_console() is first
    assert console_module.import_questionary() is console_module.import_questionary()


def test_failed_load_is_retried(monkeypatch: pytest.MonkeyPatch) -> None:
    real = importlib.import_module("questionary")
    _hide_questionary(monkeypatch)
    with pytest.raises(EnvironmentError):
        console_module.import_questionary()

    monkeypatch.setitem(sys.modules, "questionary", real)
    assert console_module.import_questionary() is real
