"""
Effect ADTs - concrete effect descriptions shipped with componentresult.

The core never inspects effects; these types exist so example components,
host wiring and tests share a vocabulary of describable work.

Type Safety:
    - All effect types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - ``Tagged`` is generic so parents keep the child's effect type visible
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar


E = TypeVar("E")


@dataclass(frozen=True)
class LogMessage:
    """Request to emit a log message from the host runtime.

    Attributes:
        kind: Discriminator for pattern matching. Always "LogMessage".
        level: Log level to emit ("debug", "info", "warning", "error", "critical").
        message: Log message payload.
        logger_name: Logger name to use; the runtime default applies when empty.
    """

    kind: Literal["LogMessage"] = "LogMessage"
    level: Literal["debug", "info", "warning", "error", "critical"] = "info"
    message: str = ""
    logger_name: str = ""


@dataclass(frozen=True)
class RecordTimestamp:
    """Request to record the current wall-clock time under a label.

    Attributes:
        kind: Discriminator for pattern matching. Always "RecordTimestamp".
        label: What the timestamp marks, e.g. "accepted".
    """

    kind: Literal["RecordTimestamp"] = "RecordTimestamp"
    label: str = ""


@dataclass(frozen=True)
class FetchPage:
    """Request to load one page of content.

    Attributes:
        kind: Discriminator for pattern matching. Always "FetchPage".
        page: Zero-based page index.
        page_size: Number of items per page.
    """

    kind: Literal["FetchPage"] = "FetchPage"
    page: int = 0
    page_size: int = 20


@dataclass(frozen=True)
class Tagged(Generic[E]):
    """Child effect wrapped with the tag of the parent slot that owns it.

    Attributes:
        tag: Name of the child slot in the parent model.
        effect: The child's original effect description.
        kind: Discriminator for pattern matching. Always "Tagged".
    """

    tag: str
    effect: E
    kind: Literal["Tagged"] = "Tagged"


# Effects understood by the bundled examples
AppEffect = LogMessage | RecordTimestamp | FetchPage


__all__ = [
    "AppEffect",
    "FetchPage",
    "LogMessage",
    "RecordTimestamp",
    "Tagged",
]
