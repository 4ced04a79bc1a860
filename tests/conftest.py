# tests/conftest.py
"""Global pytest fixtures for the componentresult test suite."""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from componentresult.effects import RecordingRuntime


@pytest.fixture
def runtime() -> RecordingRuntime:
    """Fresh recording runtime per test."""
    return RecordingRuntime()


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> Generator[pytest.LogCaptureFixture, None, None]:
    """Capture componentresult log records at DEBUG and above."""
    with caplog.at_level(logging.DEBUG, logger="componentresult"):
        yield caplog
