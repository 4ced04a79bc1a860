"""
Effect descriptions for componentresult - what to do, never how.

Components queue effects as pure, immutable descriptions inside their
ComponentResult. Batches are composed by concatenation and handed to a host
runtime only after ``resolve``; this package never executes anything.

Example:
    >>> from componentresult.effects import EffectBatch, FetchPage, LogMessage, batch
    >>>
    >>> effects = batch(
    ...     EffectBatch.of(FetchPage(page=3)),
    ...     EffectBatch.of(LogMessage(message="moved to page 3")),
    ... )
"""

from __future__ import annotations

from componentresult.effects.batch import EffectBatch, batch, map_batch
from componentresult.effects.recording import RecordingRuntime
from componentresult.effects.types import (
    AppEffect,
    FetchPage,
    LogMessage,
    RecordTimestamp,
    Tagged,
)


__all__ = [
    # Batches
    "EffectBatch",
    "batch",
    "map_batch",
    # Effect types
    "AppEffect",
    "FetchPage",
    "LogMessage",
    "RecordTimestamp",
    "Tagged",
    # Runtime double
    "RecordingRuntime",
]
