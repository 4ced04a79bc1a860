"""
componentresult - a composite result type for component update functions.

Components return a ComponentResult from ``init``/``update``: a new model
with queued effects, optionally one notification for the caller, or an
error. Parents combine, map and resolve these values with the pure
combinators re-exported here; effects stay opaque descriptions until a host
runtime receives them from ``resolve``.

Example:
    >>> from componentresult import (
    ...     apply_external_msg,
    ...     resolve,
    ...     with_effect,
    ...     with_model,
    ...     with_notification,
    ... )
    >>> child = with_notification("saved", with_effect("persist", with_model(1)))
    >>> handled = apply_external_msg(lambda note, r: with_effect(f"log {note}", r), child)
    >>> resolve(handled)
    (1, EffectBatch(effects=('persist', 'log saved')))
"""

from __future__ import annotations

from componentresult.component import (
    ComponentResult,
    Escaped,
    Failed,
    Infallible,
    NoNotification,
    Ok,
    OkWithNotification,
    Resolvable,
    apply_external_msg,
    discard_notification,
    escape,
    just_error,
    map2_model,
    map_effect,
    map_error,
    map_model,
    map_notification,
    resolve,
    resolve_error,
    sequence,
    with_batch,
    with_effect,
    with_effects,
    with_model,
    with_notification,
)
from componentresult.effects.batch import EffectBatch, batch, map_batch
from componentresult.errors import ContractViolation, ContractViolationError
from componentresult.program import HostConfig, HostLoop, Program
from componentresult.result import Failure, Result, Success


__all__ = [
    # Result variants and type states
    "ComponentResult",
    "Escaped",
    "Failed",
    "Infallible",
    "NoNotification",
    "Ok",
    "OkWithNotification",
    "Resolvable",
    # Construction and augmentation
    "just_error",
    "with_batch",
    "with_effect",
    "with_effects",
    "with_model",
    "with_notification",
    # Mapping
    "map_effect",
    "map_error",
    "map_model",
    "map_notification",
    # Combination
    "apply_external_msg",
    "discard_notification",
    "map2_model",
    "sequence",
    # Resolution
    "escape",
    "resolve",
    "resolve_error",
    # Effects
    "EffectBatch",
    "batch",
    "map_batch",
    # Errors
    "ContractViolation",
    "ContractViolationError",
    # Host wiring
    "HostConfig",
    "HostLoop",
    "Program",
    # Plain results
    "Failure",
    "Result",
    "Success",
]
