"""Wrap operations: annotate an error with the site that saw it.

    def read_config(path):
        try:
            return load(path)
        except OSError as exc:
            raise wrap(exc, path)

produces ``"app.settings.read_config(/etc/app.toml): [Errno 2] ..."``; every
further ``wrap`` up the stack adds another ``name(args): `` breadcrumb in
front while ``cause()`` keeps returning the original ``OSError``.

All operations pass ``None`` through untouched so ``return wrap(err)`` is
safe when there is no error.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from loguru import logger

from .caller import resolve_caller
from .config import get_settings
from .errors import AnnotatedError, PlainError
from .formatting import apply_template, compose, join_values


def annotate(err: BaseException, message: str) -> AnnotatedError:
    if isinstance(err, AnnotatedError):
        return dataclasses.replace(err, message=message)
    return AnnotatedError(
        message=message, cause=err, code=get_settings().default_exit_code
    )


def wrap(
    err: BaseException | None, *values: Any, stacklevel: int = 1
) -> AnnotatedError | None:
    """Prefix *err* with ``caller(v1,v2,...): ``."""
    if err is None:
        return None
    where = resolve_caller(stacklevel)
    logger.trace("wrap at {}", where)
    return annotate(err, compose(where, join_values(values), err))


def wrapf(
    err: BaseException | None, fmt: str, *args: Any, stacklevel: int = 1
) -> AnnotatedError | None:
    """Prefix *err* with ``caller(<fmt % args>): ``."""
    if err is None:
        return None
    context = apply_template(fmt, args)
    where = resolve_caller(stacklevel)
    logger.trace("wrapf at {}", where)
    return annotate(err, compose(where, context, err))


def prependf(
    err: BaseException | None, fmt: str, *args: Any
) -> AnnotatedError | None:
    """Prefix *err* with ``<fmt % args>: `` without naming the caller."""
    if err is None:
        return None
    return annotate(err, f"{apply_template(fmt, args)}: {err}")


def with_exit_code(code: int, err: BaseException | None) -> AnnotatedError | None:
    """Attach an exit code, leaving the message as it is."""
    if err is None:
        return None
    if isinstance(err, AnnotatedError):
        return dataclasses.replace(err, code=code)
    return AnnotatedError(message=str(err), cause=err, code=code)


def wrap_with_exit_code(
    code: int, err: BaseException | None, *values: Any, stacklevel: int = 1
) -> AnnotatedError | None:
    return with_exit_code(code, wrap(err, *values, stacklevel=stacklevel + 1))


def wrapf_with_exit_code(
    code: int,
    err: BaseException | None,
    fmt: str,
    *args: Any,
    stacklevel: int = 1,
) -> AnnotatedError | None:
    return with_exit_code(code, wrapf(err, fmt, *args, stacklevel=stacklevel + 1))


def exit_code(err: BaseException | None) -> int:
    """Return the exit code carried by *err*, or the configured default."""
    if isinstance(err, AnnotatedError):
        return err.code
    return get_settings().default_exit_code


def cause(err: BaseException | None) -> BaseException | None:
    """Return the root error behind *err* (or *err* itself if not annotated)."""
    if isinstance(err, AnnotatedError):
        return err.cause
    return err


def errorf(fmt: str, *args: Any) -> PlainError:
    return PlainError(apply_template(fmt, args))
