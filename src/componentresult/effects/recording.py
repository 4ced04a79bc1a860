"""
Recording runtime for exercising component wiring without executing effects.

RecordingRuntime stands in for the host program's effect executor. It records
every dispatched effect description in arrival order and forwards LogMessage
effects (bare or wrapped in Tagged) to the standard logging module. Nothing
else is executed.

Example:
    >>> runtime = RecordingRuntime()
    >>> loop = HostLoop(page.program(), runtime)
    >>> loop.start()
    >>> loop.send(page.EditorMsg(editor.Accept()))
    >>> runtime.assert_contains_effect(RecordTimestamp)
"""

from __future__ import annotations

import logging
from typing import Any, assert_never

from componentresult.effects.batch import EffectBatch
from componentresult.effects.types import LogMessage, Tagged


class RecordingRuntime:
    """Host runtime double that records effects instead of running them.

    Attributes:
        recorded_effects: Every dispatched effect, in dispatch order.
        dispatch_count: Number of batches received.

    Example:
        >>> runtime = RecordingRuntime()
        >>> runtime.dispatch(EffectBatch.of(FetchPage(page=2)))
        >>> runtime.assert_effect_count(1)
    """

    def __init__(self, default_logger_name: str = "componentresult") -> None:
        """Initialize with empty state.

        Args:
            default_logger_name: Fallback logger name when a LogMessage has none.
        """
        self._default_logger_name = default_logger_name
        self.recorded_effects: list[object] = []
        self.dispatch_count = 0

    def dispatch(self, effects: EffectBatch[Any]) -> None:
        """Record a resolved effect batch.

        Args:
            effects: The batch handed over by the host loop.
        """
        self.dispatch_count += 1
        self.recorded_effects.extend(effects.effects)
        for effect in effects.effects:
            self._forward_log(effect)

    def _forward_log(self, effect: object) -> None:
        match effect:
            case LogMessage():
                self._log_message(effect)
            case Tagged(effect=inner):
                self._forward_log(inner)
            case _:
                return

    def _log_message(self, effect: LogMessage) -> None:
        """Emit a log message at the requested level."""
        logger = logging.getLogger(effect.logger_name or self._default_logger_name)
        match effect.level:
            case "debug":
                logger.debug(effect.message)
            case "info":
                logger.info(effect.message)
            case "warning":
                logger.warning(effect.message)
            case "error":
                logger.error(effect.message)
            case "critical":
                logger.critical(effect.message)
            case _ as unreachable:
                assert_never(unreachable)

    def assert_effect_count(self, count: int) -> None:
        """Assert the number of recorded effects.

        Raises:
            AssertionError: If count doesn't match.
        """
        actual = len(self.recorded_effects)
        match actual == count:
            case True:
                return
            case False:
                raise AssertionError(f"Expected {count} effects, got {actual}")

    def assert_contains_effect(self, effect_type: type[object]) -> None:
        """Assert that at least one effect of the given type was recorded.

        Tagged wrappers are looked through, so a tagged child effect counts.

        Raises:
            AssertionError: If no effect of the given type was recorded.
        """
        match self.get_effects_of_type(effect_type):
            case []:
                raise AssertionError(f"No effect of type {effect_type.__name__} recorded")
            case _:
                return

    def get_effects_of_type(self, effect_type: type[object]) -> list[object]:
        """Get all recorded effects of a type, looking through Tagged wrappers."""
        return [e for e in map(_untag, self.recorded_effects) if isinstance(e, effect_type)]

    def clear(self) -> None:
        """Forget all recorded effects."""
        self.recorded_effects.clear()
        self.dispatch_count = 0


def _untag(effect: object) -> object:
    match effect:
        case Tagged(effect=inner):
            return _untag(inner)
        case _:
            return effect


__all__ = ["RecordingRuntime"]
