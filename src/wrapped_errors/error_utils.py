from __future__ import annotations

import asyncio
import functools
import inspect
import traceback
from collections.abc import Callable
from typing import Any, NoReturn, ParamSpec, TypeVar

from loguru import logger

from .caller import function_name
from .formatting import compose, join_values
from .wrap import annotate, cause, exit_code

P = ParamSpec("P")
R = TypeVar("R")


def _format_tail(exc: BaseException, *, limit: int = 6) -> str:
    tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return "".join(tb[-limit:])


def _rewrap(exc: Exception, func: Callable[..., Any], context: str) -> NoReturn:
    where = function_name(func)
    logger.debug("{} failed:\n{}", where, _format_tail(exc))
    raise annotate(exc, compose(where, context, exc)) from cause(exc)


def wrap_exceptions(*values: Any) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Decorator annotating any escaping error with the decorated function.

    Equivalent to ``raise wrap(exc, *values)`` inside the function body.
    """
    context = join_values(values)

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
                try:
                    return await func(*args, **kwargs)
                except asyncio.CancelledError:
                    raise
                except Exception as exc:
                    _rewrap(exc, func, context)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs):  # type: ignore[override]
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                _rewrap(exc, func, context)

        return sync_wrapper  # type: ignore[return-value]

    return decorator


def exit_with(err: BaseException | None) -> NoReturn:
    """Terminate the process with the exit code carried by *err*."""
    if err is None:
        raise SystemExit(0)
    code = exit_code(err)
    logger.error("{} (exit code {})", err, code)
    raise SystemExit(code)
