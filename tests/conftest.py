"""Shared fixtures for the calbump test suite."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Generator

import pytest

import calbump.utils.logger as logger_module
import calbump.utils.console as console_module
from calbump.core import CalverIncrementer, Clock

#: Date every calendar-sensitive test runs on unless it asks otherwise.
FIXED_TODAY = date(2026, 10, 18)


@pytest.fixture
def today() -> date:
    return FIXED_TODAY


@pytest.fixture
def fixed_clock(today: date) -> Clock:
    return lambda: today


@pytest.fixture
def make_incrementer(fixed_clock: Clock) -> Callable[..., CalverIncrementer]:
    """Build an incrementer on the fixed clock, configured with ``options``."""

    def _make(**options: Any) -> CalverIncrementer:
        return CalverIncrementer(options, clock=fixed_clock)

    return _make


@pytest.fixture(autouse=True)
def clean_logger_state() -> Generator[None, None, None]:
    """Reset the calbump logger and console around each test."""
    root_logger = logging.getLogger(logger_module.ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False
    console_module.reconfigure_console()

    yield

    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True
    logger_module._logging_configured = False
    console_module.reconfigure_console()
