# xutils:header:start
#
#   project      : Xutils
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Xutils contributors
#
# xutils:header:end

"""Pytest configuration for the Xutils test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

import logging as std_logging
from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from xutils.config import logging
from xutils.console.console import RecordingConsole

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer shell settings from leaking into test runs.

    Clears ``XUTILS_LOG_LEVEL`` and the ``FORCE_COLOR`` / ``NO_COLOR`` switches so
    color resolution only depends on what each test sets.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("XUTILS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo `setup_logging` calls made by CLI invocations during a test."""
    root = std_logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so render traces are captured on failure.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def recording() -> RecordingConsole:
    """Return a fresh in-memory sink with the default gray-on-black colors."""
    return RecordingConsole()
