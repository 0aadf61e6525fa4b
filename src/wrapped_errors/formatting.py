from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def join_values(values: Iterable[Any]) -> str:
    """Render context values as ``v1,v2,...``."""
    return ",".join(str(value) for value in values)


def apply_template(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply printf-style *fmt* to *args*.

    A template without arguments is taken literally apart from ``%%``, which
    becomes ``%``. A lone mapping argument feeds named placeholders, the same
    way ``logging`` renders records. Formatting errors propagate to the caller.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be str, not {type(fmt).__name__}")
    if not args:
        return fmt.replace("%%", "%")
    if len(args) == 1 and isinstance(args[0], Mapping):
        return fmt % args[0]
    return fmt % args


def compose(where: str, context: str, inner: BaseException) -> str:
    return f"{where}({context}): {inner}"
