"""ADTs for ComponentResult contract violations.

Type-state preconditions (no notification yet, no possible error) are checked
statically by mypy through the aliases in ``componentresult.component``. When
a caller bypasses the checker, the combinator detects the forbidden state,
logs it, and raises ``ContractViolationError``. These are programming errors:
the library never recovers from them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

__all__ = [
    "ContractViolation",
    "ContractViolationError",
    "NotificationAlreadyPresent",
    "RecoveryFailed",
    "UnexpectedNotification",
    "UnresolvedFailure",
]


@dataclass(frozen=True)
class NotificationAlreadyPresent:
    """A second notification was attached to a notification-bearing result."""

    operation: str
    pending: str
    kind: Literal["NotificationAlreadyPresent"] = "NotificationAlreadyPresent"


@dataclass(frozen=True)
class UnexpectedNotification:
    """A result that must be notification-free carried a notification."""

    operation: str
    notification: str
    kind: Literal["UnexpectedNotification"] = "UnexpectedNotification"


@dataclass(frozen=True)
class UnresolvedFailure:
    """A result that must be infallible was Failed."""

    operation: str
    error: str
    kind: Literal["UnresolvedFailure"] = "UnresolvedFailure"


@dataclass(frozen=True)
class RecoveryFailed:
    """An error-recovery function returned another Failed result."""

    original_error: str
    recovery_error: str
    kind: Literal["RecoveryFailed"] = "RecoveryFailed"


ContractViolation = (
    NotificationAlreadyPresent | UnexpectedNotification | UnresolvedFailure | RecoveryFailed
)


def _describe(violation: ContractViolation) -> str:
    match violation:
        case NotificationAlreadyPresent(operation=op, pending=pending):
            return f"{op}: result already carries notification {pending}"
        case UnexpectedNotification(operation=op, notification=notification):
            return f"{op}: expected a notification-free result, got notification {notification}"
        case UnresolvedFailure(operation=op, error=error):
            return f"{op}: expected an infallible result, got Failed({error})"
        case RecoveryFailed(original_error=original, recovery_error=recovery):
            return f"resolve_error: recovery from {original} returned Failed({recovery})"


class ContractViolationError(RuntimeError):
    """Raised when a combinator receives a value in a forbidden type state.

    Attributes:
        violation: The ContractViolation ADT describing what went wrong.
    """

    def __init__(self, violation: ContractViolation) -> None:
        super().__init__(_describe(violation))
        self.violation = violation
