import asyncio

import pytest

from wrapped_errors import (
    AnnotatedError,
    cause,
    configure,
    errorf,
    exit_code,
    exit_with,
    with_exit_code,
    wrap,
    wrap_exceptions,
)


@wrap_exceptions("user", 7)
def load_user(err: Exception) -> None:
    raise err


@wrap_exceptions()
def load_profile(err: Exception) -> None:
    load_user(err)


@wrap_exceptions()
def succeed() -> int:
    return 5


@wrap_exceptions("id")
async def fetch(err: Exception | None) -> str:
    await asyncio.sleep(0)
    if err is not None:
        raise err
    return "ok"


def test_decorator_annotates_escaping_error() -> None:
    root = ValueError("bad id")
    with pytest.raises(AnnotatedError) as info:
        load_user(root)
    assert str(info.value) == f"{__name__}.load_user(user,7): bad id"
    assert cause(info.value) is root
    assert info.value.__cause__ is root


def test_decorator_stacks_and_keeps_code() -> None:
    root = errorf("disk full")
    with pytest.raises(AnnotatedError) as info:
        load_profile(with_exit_code(12, root))
    assert str(info.value) == (
        f"{__name__}.load_profile(): {__name__}.load_user(user,7): disk full"
    )
    assert cause(info.value) is root
    assert exit_code(info.value) == 12


def test_decorator_returns_value() -> None:
    assert succeed() == 5
    assert succeed.__name__ == "succeed"


def test_decorator_logs_traceback_tail(loguru_caplog: pytest.LogCaptureFixture) -> None:
    with pytest.raises(AnnotatedError):
        load_user(RuntimeError("boom"))
    assert f"{__name__}.load_user failed" in loguru_caplog.text
    assert "RuntimeError: boom" in loguru_caplog.text


@pytest.mark.asyncio
async def test_async_decorator() -> None:
    assert await fetch(None) == "ok"
    root = KeyError("k")
    with pytest.raises(AnnotatedError) as info:
        await fetch(root)
    assert str(info.value) == f"{__name__}.fetch(id): 'k'"
    assert cause(info.value) is root


@pytest.mark.asyncio
async def test_async_decorator_lets_cancellation_through() -> None:
    with pytest.raises(asyncio.CancelledError):
        await fetch(asyncio.CancelledError())  # type: ignore[arg-type]


def test_exit_with_uses_carried_code(loguru_caplog: pytest.LogCaptureFixture) -> None:
    err = with_exit_code(29, wrap(errorf("disk full")))
    with pytest.raises(SystemExit) as info:
        exit_with(err)
    assert info.value.code == 29
    assert "disk full (exit code 29)" in loguru_caplog.text


def test_exit_with_default_code() -> None:
    configure(default_exit_code=6)
    with pytest.raises(SystemExit) as info:
        exit_with(ValueError("x"))
    assert info.value.code == 6


def test_exit_with_none_exits_cleanly() -> None:
    with pytest.raises(SystemExit) as info:
        exit_with(None)
    assert info.value.code == 0
