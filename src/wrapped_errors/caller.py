"""Attribution of wrap operations to the function that called them."""

from __future__ import annotations

import sys
from collections.abc import Callable
from types import FrameType
from typing import Any

from loguru import logger

from .config import get_settings
from .errors import CallerResolutionError

ENTRY_POINT_PREFIX = "__main__."


def trim_entry_point(name: str, keep: bool | None = None) -> str:
    """Strip the ``__main__.`` marker unless configured to keep it."""
    if keep is None:
        keep = get_settings().keep_entry_point_prefix
    if not keep and name.startswith(ENTRY_POINT_PREFIX):
        return name[len(ENTRY_POINT_PREFIX) :]
    return name


def frame_name(frame: FrameType) -> str:
    module = frame.f_globals.get("__name__", "?")
    return f"{module}.{frame.f_code.co_qualname}"


def function_name(func: Callable[..., Any]) -> str:
    module = getattr(func, "__module__", None) or "?"
    qualname = getattr(func, "__qualname__", None) or repr(func)
    return trim_entry_point(f"{module}.{qualname}")


def resolve_caller(stacklevel: int = 1) -> str:
    """Return the qualified name of the function *stacklevel* frames up.

    ``stacklevel=1`` names whoever called the function that called
    ``resolve_caller``; each public wrap operation forwards its own
    ``stacklevel`` here unchanged. Raises :class:`CallerResolutionError`
    instead of guessing.
    """
    if stacklevel < 1:
        logger.error("Invalid stacklevel {}", stacklevel)
        raise CallerResolutionError(f"stacklevel must be >= 1, got {stacklevel}")
    try:
        # 0 is this function, 1 the public operation, 2 its caller.
        frame = sys._getframe(stacklevel + 1)
    except ValueError as exc:
        logger.error("No frame at stacklevel {}", stacklevel)
        raise CallerResolutionError(
            f"call stack is not deep enough for stacklevel {stacklevel}"
        ) from exc
    try:
        return trim_entry_point(frame_name(frame))
    finally:
        del frame
