"""
Host-boundary wiring: turning fully handled results into a running program.

A Program is a pair of functions returning ``Ok`` results: every notification
consumed and every error resolved. HostLoop calls ``resolve`` on each of them
and passes the resulting effect batch to a runtime. It is deliberately thin;
real hosts supply their own runtime with the same ``dispatch`` method.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

from componentresult.component import Resolvable, resolve
from componentresult.effects.batch import EffectBatch


Model = TypeVar("Model")
Msg = TypeVar("Msg")
E = TypeVar("E")
E_contra = TypeVar("E_contra", contravariant=True)


class HostConfig(BaseModel):
    """Settings for HostLoop.

    Attributes:
        logger_name: Logger used for dispatch messages.
        log_dispatch: Log each dispatched batch at DEBUG level.
    """

    logger_name: str = "componentresult"
    log_dispatch: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")


class Runtime(Protocol[E_contra]):
    """Anything that accepts resolved effect batches."""

    def dispatch(self, effects: EffectBatch[E_contra]) -> None: ...


@dataclass(frozen=True)
class Program(Generic[Model, Msg, E]):
    """Top-level component, already fully handled.

    Attributes:
        init: Builds the initial result.
        update: Applies one message to the current model.
    """

    init: Callable[[], Resolvable[Model, E]]
    update: Callable[[Msg, Model], Resolvable[Model, E]]


class HostLoop(Generic[Model, Msg, E]):
    """Drive a Program: resolve each step and hand its effects to a runtime.

    Example:
        >>> runtime = RecordingRuntime()
        >>> loop = HostLoop(page.program(), runtime)
        >>> loop.start()
        >>> loop.send(page.EditorMsg(editor.Accept()))
        >>> loop.model.status
        'accepted: ...'
    """

    def __init__(
        self,
        program: Program[Model, Msg, E],
        runtime: Runtime[E],
        config: HostConfig | None = None,
    ) -> None:
        self._program = program
        self._runtime = runtime
        self._config = config or HostConfig()
        self._logger = logging.getLogger(self._config.logger_name)
        # Boxed so that a None model still counts as started.
        self._current: tuple[Model] | None = None

    @property
    def started(self) -> bool:
        return self._current is not None

    @property
    def model(self) -> Model:
        """Current model.

        Raises:
            RuntimeError: If the loop has not been started.
        """
        match self._current:
            case None:
                raise RuntimeError("HostLoop.model accessed before start()")
            case (model,):
                return model

    def start(self) -> Model:
        """Resolve ``init`` and dispatch its effects."""
        return self._step("init", self._program.init())

    def send(self, msg: Msg) -> Model:
        """Resolve ``update(msg, model)`` and dispatch its effects."""
        return self._step(type(msg).__name__, self._program.update(msg, self.model))

    def _step(self, label: str, result: Resolvable[Model, E]) -> Model:
        model, effects = resolve(result)
        self._current = (model,)
        if self._config.log_dispatch:
            self._logger.debug("%s: dispatching %d effect(s)", label, len(effects))
        self._runtime.dispatch(effects)
        return model


__all__ = ["HostConfig", "HostLoop", "Program", "Runtime"]
