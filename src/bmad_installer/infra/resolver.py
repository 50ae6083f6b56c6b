"""Infrastructure: locate the installer collaborator and its version.

The installer can live in one of two places:

* **installer context** — installed into the environment as the
  ``bmad-method`` distribution, importable as ``bmad_method.installer``.
* **root context** — a BMAD Method source checkout somewhere above the
  current working directory, holding ``package.json`` and
  ``tools/installer/lib/installer.py``.

Each place is a :class:`ResolutionStrategy`.  Strategies are tried in
order and the first success wins; if every strategy fails a
:class:`~bmad_installer.exceptions.ModuleResolutionError` carries all
failure reasons.

Rules
-----
* No imports from ``cli``.
* No user-facing output; callers are told about fallbacks through the
  ``on_fallback`` callback.
"""

from __future__ import annotations

import importlib
import importlib.metadata
import importlib.util
import json
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any

from bmad_installer.exceptions import ModuleResolutionError
from bmad_installer.utils.constants import (
    INSTALLER_DISTRIBUTION,
    INSTALLER_MODULE,
    REQUIRED_CAPABILITIES,
    ROOT_INSTALLER_PATH,
    ROOT_MANIFEST,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result and strategy types
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstallerContext:
    """A successfully resolved installer together with its version."""

    version: str
    installer: Any
    """Object satisfying :class:`~bmad_installer.core.protocols.Installer`."""

    source: str
    """Name of the strategy that produced this context."""


@dataclass(frozen=True, slots=True)
class ResolutionStrategy:
    """A named way of loading an :class:`InstallerContext`.

    ``load`` raises any exception on failure; its message becomes the
    reason reported for this strategy.
    """

    name: str
    load: Callable[[], InstallerContext]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require_capabilities(installer: Any, origin: str) -> None:
    """Raise ``ImportError`` unless *installer* exposes every capability."""
    missing = [
        name for name in REQUIRED_CAPABILITIES
        if not callable(getattr(installer, name, None))
    ]
    if missing:
        raise ImportError(
            f"{origin} does not provide: {', '.join(missing)}",
        )


def _load_module_from_path(path: Path) -> ModuleType:
    """Execute the Python file at *path* as an anonymous module."""
    spec = importlib.util.spec_from_file_location("_bmad_root_installer", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load installer from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _read_manifest_version(manifest: Path) -> str:
    """Return the ``version`` field of a ``package.json`` manifest."""
    data = json.loads(manifest.read_text(encoding="utf-8"))
    version = data.get("version") if isinstance(data, dict) else None
    if not isinstance(version, str) or not version:
        raise ValueError(f"{manifest} has no version field")
    return version


def find_checkout_root(start: Path) -> Path | None:
    """Return the nearest directory at or above *start* that looks like a
    BMAD Method checkout, or ``None``.
    """
    for candidate in (start, *start.parents):
        if (candidate / ROOT_MANIFEST).is_file() and candidate.joinpath(
            *ROOT_INSTALLER_PATH
        ).is_file():
            return candidate
    return None


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def load_installer_context() -> InstallerContext:
    """Load the installer from the installed ``bmad-method`` distribution."""
    installer = importlib.import_module(INSTALLER_MODULE)
    _require_capabilities(installer, INSTALLER_MODULE)
    version = importlib.metadata.version(INSTALLER_DISTRIBUTION)
    return InstallerContext(version=version, installer=installer, source="installer")


def load_root_context(start: Path | None = None) -> InstallerContext:
    """Load the installer from a source checkout above *start* (default: cwd)."""
    origin = (start or Path.cwd()).resolve()
    root = find_checkout_root(origin)
    if root is None:
        raise FileNotFoundError(
            f"No {ROOT_MANIFEST} with {'/'.join(ROOT_INSTALLER_PATH)} "
            f"found at or above {origin}",
        )
    version = _read_manifest_version(root / ROOT_MANIFEST)
    installer_path = root.joinpath(*ROOT_INSTALLER_PATH)
    installer = _load_module_from_path(installer_path)
    _require_capabilities(installer, str(installer_path))
    return InstallerContext(version=version, installer=installer, source="root")


def default_strategies() -> tuple[ResolutionStrategy, ...]:
    """Installer context first, then root context."""
    return (
        ResolutionStrategy(name="installer", load=load_installer_context),
        ResolutionStrategy(name="root", load=load_root_context),
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def resolve_installer_context(
    strategies: Sequence[ResolutionStrategy] | None = None,
    *,
    on_fallback: Callable[[str, str, str], None] | None = None,
) -> InstallerContext:
    """Try each strategy in order and return the first success.

    Parameters
    ----------
    strategies:
        Candidates to try.  Defaults to :func:`default_strategies`.
    on_fallback:
        Called with ``(failed strategy, reason, next strategy)`` whenever a
        strategy fails and another one remains.

    Raises
    ------
    ModuleResolutionError
        If every strategy fails.  ``reasons`` lists each failure.
    """
    candidates = tuple(strategies) if strategies is not None else default_strategies()
    reasons: list[tuple[str, str]] = []

    for index, strategy in enumerate(candidates):
        logger.debug("Resolving installer via %s context", strategy.name)
        try:
            context = strategy.load()
        except Exception as exc:  # noqa: BLE001
            reason = str(exc) or type(exc).__name__
            logger.debug("%s context failed: %s", strategy.name, reason)
            reasons.append((strategy.name, reason))
            if on_fallback is not None and index < len(candidates) - 1:
                on_fallback(strategy.name, reason, candidates[index + 1].name)
            continue
        logger.debug(
            "Resolved installer v%s via %s context", context.version, context.source,
        )
        return context

    summary = "; ".join(f"{name}: {reason}" for name, reason in reasons)
    raise ModuleResolutionError(
        f"Could not load required modules ({summary or 'no strategies'})",
        reasons=tuple(reasons),
        hint="Please ensure you are running from the correct directory.",
    )
