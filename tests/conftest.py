"""Shared pytest fixtures and configuration for the cypress-cli test suite.

Guidelines
----------
* No subsystem is ever started — handlers are ``AsyncMock`` objects.
* No installed entry points are relied upon; ``importlib.metadata`` is
  patched where resolution is exercised.
* Tests must not depend on the caller's environment (``DEBUG`` etc.).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest

from cypress_cli.core.models import Versions
from cypress_cli.core.protocols import Handlers


def _start_handler() -> MagicMock:
    handler = MagicMock()
    handler.start = AsyncMock(return_value=None)
    return handler


@pytest.fixture
def handlers() -> Handlers:
    """A bundle of mocked subsystems; every ``start`` resolves to ``None``."""
    reporter = MagicMock()
    reporter.versions = AsyncMock(
        return_value=Versions(package="0.4.0", binary="9.9.9"),
    )
    return Handlers(
        run=_start_handler(),
        open=_start_handler(),
        install=_start_handler(),
        verify=_start_handler(),
        versions=reporter,
    )


@pytest.fixture(autouse=True)
def _reset_package_logger(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep logger handlers and the ``DEBUG`` variable from leaking between tests."""
    monkeypatch.delenv("DEBUG", raising=False)
    package_logger = logging.getLogger("cypress_cli")
    saved_handlers = list(package_logger.handlers)
    saved_level = package_logger.level
    yield
    package_logger.handlers[:] = saved_handlers
    package_logger.setLevel(saved_level)
