import logging
from collections.abc import Iterator

import pytest
from loguru import logger

from wrapped_errors import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from defaults, not from a previous test's configure()."""
    monkeypatch.delenv("WRAPPED_ERRORS_KEEP_ENTRY_POINT_PREFIX", raising=False)
    monkeypatch.delenv("WRAPPED_ERRORS_DEFAULT_EXIT_CODE", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def loguru_caplog(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route the library's loguru records into caplog."""
    caplog.set_level(logging.DEBUG)
    logger.enable("wrapped_errors")
    sink_id = logger.add(caplog.handler, level="DEBUG", format="{message}")
    yield caplog
    logger.remove(sink_id)
    logger.disable("wrapped_errors")
