"""Annotate errors with the function that saw them, plus an exit code."""

from __future__ import annotations

from loguru import logger

from .caller import resolve_caller
from .config import Settings, configure, get_settings, reset_settings
from .error_utils import exit_with, wrap_exceptions
from .errors import AnnotatedError, CallerResolutionError, PlainError
from .wrap import (
    cause,
    errorf,
    exit_code,
    prependf,
    with_exit_code,
    wrap,
    wrap_with_exit_code,
    wrapf,
    wrapf_with_exit_code,
)

logger.disable(__name__)

__all__ = [
    "AnnotatedError",
    "CallerResolutionError",
    "PlainError",
    "Settings",
    "cause",
    "configure",
    "errorf",
    "exit_code",
    "exit_with",
    "get_settings",
    "prependf",
    "reset_settings",
    "resolve_caller",
    "with_exit_code",
    "wrap",
    "wrap_exceptions",
    "wrap_with_exit_code",
    "wrapf",
    "wrapf_with_exit_code",
]
