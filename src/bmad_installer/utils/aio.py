"""Bridge between the synchronous CLI and possibly-async collaborators."""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable
from typing import Any


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def resolve_awaitable(value: Any) -> Any:
    """Return *value*, first running it to completion if it is awaitable."""
    if inspect.isawaitable(value):
        return asyncio.run(_await(value))
    return value
