from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class AnnotatedError(Exception):
    """Error carrying call-site breadcrumbs on top of a root failure.

    Instances are treated as values: wrap operations build a new one with
    ``dataclasses.replace`` and never assign to an existing one.

    Attributes:
        message: Composed text, outermost call site first, root message last.
        cause: The original failure. Never an ``AnnotatedError`` itself.
        code: Preferred process exit code.
    """

    message: str
    cause: BaseException
    code: int

    def __post_init__(self) -> None:
        if isinstance(self.cause, AnnotatedError):
            raise TypeError("cause must be the root error, not an AnnotatedError")
        self.__cause__ = self.cause

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.message, self.cause, self.code)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class PlainError(Exception):
    """Non-annotated error built by :func:`wrapped_errors.errorf`."""


class CallerResolutionError(RuntimeError):
    """Raised when the calling function cannot be determined."""
