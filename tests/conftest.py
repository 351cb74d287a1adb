"""Shared pytest fixtures and configuration for the twoptr test suite.

Guidelines
----------
* Core tests are pure function calls with no mocking and no I/O.
* Optional UI packages (rich, questionary) are hidden or mocked, never
  driven through a real terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _reset_twoptr_logger() -> Iterator[None]:
    """Undo handlers/levels installed by ``configure_logging`` in a test."""
    logger = logging.getLogger("twoptr")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
