# tests/helpers/__init__.py
"""Shared test utilities for the componentresult test suite.

Usage:
    >>> from tests.helpers import expect_ok, expect_failed, CallCounter
    >>>
    >>> model, effects = expect_ok(resolve_error(recover, result))
    >>> error = expect_failed(pager.go_to(9, pager_model))
"""

from __future__ import annotations

from tests.helpers.factories import CallCounter, HandlerSpy
from tests.helpers.result_utils import (
    E,
    T,
    expect_failed,
    expect_failure,
    expect_notification,
    expect_ok,
    expect_success,
)

__all__ = [
    # Result unwrapping
    "expect_success",
    "expect_failure",
    "expect_ok",
    "expect_notification",
    "expect_failed",
    "T",
    "E",
    # Test doubles
    "CallCounter",
    "HandlerSpy",
]
