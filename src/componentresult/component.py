"""
ComponentResult ADT - the return type of component ``init``/``update`` steps.

A component's update either succeeds with a new model and a batch of queued
effects, succeeds with the same plus one notification for its caller, or
fails with an error of the component's own choosing. Callers thread the value
through the combinators below and, at the host boundary, ``resolve`` it into
the ``(model, effects)`` pair the program loop expects.

Type states:
    ``ComponentResult``  any of the three variants
    ``NoNotification``   Ok | Failed - no notification attached yet
    ``Infallible``       Ok | OkWithNotification - error already handled
    ``Ok``               no notification and no error, ready to resolve

mypy checks these statically. Passing a value in a forbidden state at
runtime raises ContractViolationError; it is a programming error and is never
recovered from inside this module.

Short-circuit:
    Failed carries no model, effects or notification. Every combinator except
    ``map_error``, ``resolve_error`` and ``escape`` returns it untouched.

Usage:
    >>> def update(msg: PagerMsg, model: Pager) -> PagerResult:
    ...     match msg:
    ...         case GoTo(page) if page >= model.page_count:
    ...             return just_error(PageOutOfRange(requested=page, page_count=model.page_count))
    ...         case GoTo(page):
    ...             return with_notification(
    ...                 PageChanged(page),
    ...                 with_effect(FetchPage(page=page), with_model(replace(model, current=page))),
    ...             )
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import reduce
from typing import (
    Callable,
    Generic,
    Literal,
    NoReturn,
    Sequence,
    TypeVar,
    assert_never,
    overload,
)

from componentresult.effects.batch import EffectBatch, map_batch
from componentresult.errors import (
    ContractViolation,
    ContractViolationError,
    NotificationAlreadyPresent,
    RecoveryFailed,
    UnexpectedNotification,
    UnresolvedFailure,
)
from componentresult.result import Failure, Result, Success


logger = logging.getLogger(__name__)

M = TypeVar("M")
M2 = TypeVar("M2")
M3 = TypeVar("M3")
E = TypeVar("E")
E2 = TypeVar("E2")
X = TypeVar("X")
X2 = TypeVar("X2")
Err = TypeVar("Err")
Err2 = TypeVar("Err2")


# =========================================================================== #
#                                VARIANTS                                     #
# =========================================================================== #


@dataclass(frozen=True)
class Ok(Generic[M, E]):
    """Success with no pending notification.

    Attributes:
        model: The component's new model.
        effects: Effects queued so far.
        kind: Discriminator for pattern matching. Always "Ok".
    """

    model: M
    effects: EffectBatch[E] = field(default_factory=EffectBatch.none)
    kind: Literal["Ok"] = "Ok"


@dataclass(frozen=True)
class OkWithNotification(Generic[M, E, X]):
    """Success carrying exactly one notification for the caller.

    Attributes:
        model: The component's new model.
        notification: Side-channel message for the caller to interpret.
        effects: Effects queued so far.
        kind: Discriminator for pattern matching. Always "OkWithNotification".
    """

    model: M
    notification: X
    effects: EffectBatch[E] = field(default_factory=EffectBatch.none)
    kind: Literal["OkWithNotification"] = "OkWithNotification"


@dataclass(frozen=True)
class Failed(Generic[Err]):
    """Terminal failure. Holds only the error.

    Attributes:
        error: Caller-defined error value.
        kind: Discriminator for pattern matching. Always "Failed".
    """

    error: Err
    kind: Literal["Failed"] = "Failed"


@dataclass(frozen=True)
class Escaped(Generic[M, E, X]):
    """Plain view of a successful result, produced by ``escape``.

    ``notification`` is None when the result carried none.
    """

    model: M
    effects: EffectBatch[E]
    notification: X | None = None


ComponentResult = Ok[M, E] | OkWithNotification[M, E, X] | Failed[Err]
NoNotification = Ok[M, E] | Failed[Err]
Infallible = Ok[M, E] | OkWithNotification[M, E, X]
Resolvable = Ok[M, E]


def _violate(violation: ContractViolation) -> NoReturn:
    error = ContractViolationError(violation)
    logger.error("ComponentResult contract violation: %s", error)
    raise error


def _require_no_notification(
    operation: str, result: ComponentResult[M, E, X, Err]
) -> NoNotification[M, E, Err]:
    match result:
        case OkWithNotification(notification=notification):
            _violate(UnexpectedNotification(operation=operation, notification=repr(notification)))
        case Ok() | Failed():
            return result


# =========================================================================== #
#                              CONSTRUCTION                                   #
# =========================================================================== #


def with_model(model: M) -> Ok[M, E]:
    """Start a successful result with no effects and no notification."""
    return Ok(model=model, effects=EffectBatch.none())


def just_error(error: Err) -> Failed[Err]:
    """Start a failed result.

    Later augmentation calls on the returned value are no-ops.
    """
    return Failed(error=error)


# =========================================================================== #
#                              AUGMENTATION                                   #
# =========================================================================== #


@overload
def with_batch(effects: EffectBatch[E], result: Ok[M, E]) -> Ok[M, E]: ...
@overload
def with_batch(
    effects: EffectBatch[E], result: NoNotification[M, E, Err]
) -> NoNotification[M, E, Err]: ...
@overload
def with_batch(
    effects: EffectBatch[E], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E, X, Err]: ...
def with_batch(
    effects: EffectBatch[E], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E, X, Err]:
    """Append an effect batch after the effects already queued.

    Args:
        effects: Batch to append.
        result: Result to augment. Failed is returned unchanged.

    Returns:
        A new result with ``result.effects`` followed by ``effects``.
    """
    match result:
        case Ok(model=model, effects=queued):
            return Ok(model=model, effects=queued.combine(effects))
        case OkWithNotification(model=model, notification=notification, effects=queued):
            return OkWithNotification(
                model=model, notification=notification, effects=queued.combine(effects)
            )
        case Failed():
            return result


@overload
def with_effect(effect: E, result: Ok[M, E]) -> Ok[M, E]: ...
@overload
def with_effect(effect: E, result: NoNotification[M, E, Err]) -> NoNotification[M, E, Err]: ...
@overload
def with_effect(
    effect: E, result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E, X, Err]: ...
def with_effect(effect: E, result: ComponentResult[M, E, X, Err]) -> ComponentResult[M, E, X, Err]:
    """Queue one effect. No-op on Failed."""
    return with_batch(EffectBatch.of(effect), result)


@overload
def with_effects(effects: Sequence[E], result: Ok[M, E]) -> Ok[M, E]: ...
@overload
def with_effects(
    effects: Sequence[E], result: NoNotification[M, E, Err]
) -> NoNotification[M, E, Err]: ...
@overload
def with_effects(
    effects: Sequence[E], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E, X, Err]: ...
def with_effects(
    effects: Sequence[E], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E, X, Err]:
    """Queue several effects as one batch.

    An empty list returns ``result`` itself. The list order is kept as an
    append order only; it is not an execution order.
    """
    match effects:
        case []:
            return result
        case _:
            return with_batch(EffectBatch.from_iterable(effects), result)


@overload
def with_notification(notification: X, result: Ok[M, E]) -> OkWithNotification[M, E, X]: ...
@overload
def with_notification(
    notification: X, result: NoNotification[M, E, Err]
) -> OkWithNotification[M, E, X] | Failed[Err]: ...
def with_notification(
    notification: X, result: NoNotification[M, E, Err]
) -> OkWithNotification[M, E, X] | Failed[Err]:
    """Attach a notification for the caller.

    Args:
        notification: The value the caller will receive in ``apply_external_msg``.
        result: A result with no notification yet. Failed is returned unchanged.

    Raises:
        ContractViolationError: If ``result`` already carries a notification.
    """
    match result:
        case Ok(model=model, effects=effects):
            return OkWithNotification(model=model, notification=notification, effects=effects)
        case Failed():
            return result
        case OkWithNotification(notification=pending):
            _violate(
                NotificationAlreadyPresent(operation="with_notification", pending=repr(pending))
            )


# =========================================================================== #
#                                 MAPPING                                     #
# =========================================================================== #


@overload
def map_model(f: Callable[[M], M2], result: Ok[M, E]) -> Ok[M2, E]: ...
@overload
def map_model(
    f: Callable[[M], M2], result: NoNotification[M, E, Err]
) -> NoNotification[M2, E, Err]: ...
@overload
def map_model(
    f: Callable[[M], M2], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M2, E, X, Err]: ...
def map_model(
    f: Callable[[M], M2], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M2, E, X, Err]:
    """Transform the model; effects and notification are kept as they are."""
    match result:
        case Ok(model=model, effects=effects):
            return Ok(model=f(model), effects=effects)
        case OkWithNotification(model=model, notification=notification, effects=effects):
            return OkWithNotification(model=f(model), notification=notification, effects=effects)
        case Failed():
            return result


@overload
def map_effect(f: Callable[[E], E2], result: Ok[M, E]) -> Ok[M, E2]: ...
@overload
def map_effect(
    f: Callable[[E], E2], result: NoNotification[M, E, Err]
) -> NoNotification[M, E2, Err]: ...
@overload
def map_effect(
    f: Callable[[E], E2], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E2, X, Err]: ...
def map_effect(
    f: Callable[[E], E2], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E2, X, Err]:
    """Transform every queued effect description.

    Parents use this to wrap child effects in a type the runtime can route
    back to them.
    """
    match result:
        case Ok(model=model, effects=effects):
            return Ok(model=model, effects=map_batch(f, effects))
        case OkWithNotification(model=model, notification=notification, effects=effects):
            return OkWithNotification(
                model=model, notification=notification, effects=map_batch(f, effects)
            )
        case Failed():
            return result


def map_error(
    f: Callable[[Err], Err2], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E, X, Err2]:
    """Transform the error of a Failed result. Success branches pass through."""
    match result:
        case Failed(error=error):
            return Failed(error=f(error))
        case Ok() | OkWithNotification():
            return result


def map_notification(
    f: Callable[[X], X2], result: ComponentResult[M, E, X, Err]
) -> ComponentResult[M, E, X2, Err]:
    """Transform a pending notification. Ok and Failed pass through."""
    match result:
        case OkWithNotification(model=model, notification=notification, effects=effects):
            return OkWithNotification(model=model, notification=f(notification), effects=effects)
        case Ok() | Failed():
            return result


# =========================================================================== #
#                               COMBINATION                                   #
# =========================================================================== #


def map2_model(
    f: Callable[[M, M2], M3],
    first: ComponentResult[M, E, X, Err],
    second: NoNotification[M2, E, Err],
) -> ComponentResult[M3, E, X, Err]:
    """Combine two results into one.

    Effects are batched as ``first``'s followed by ``second``'s. Only
    ``first`` may carry a notification, and it survives into the output.
    When both fail, ``first``'s error is returned.

    Raises:
        ContractViolationError: If ``second`` carries a notification and
            ``first`` has not failed.
    """
    match (first, second):
        case (Failed(), _):
            return first
        case (_, Failed()):
            return second
        case (_, OkWithNotification(notification=notification)):
            _violate(
                UnexpectedNotification(operation="map2_model", notification=repr(notification))
            )
        case (Ok(model=a, effects=a_effects), Ok(model=b, effects=b_effects)):
            return Ok(model=f(a, b), effects=a_effects.combine(b_effects))
        case (
            OkWithNotification(model=a, notification=notification, effects=a_effects),
            Ok(model=b, effects=b_effects),
        ):
            return OkWithNotification(
                model=f(a, b), notification=notification, effects=a_effects.combine(b_effects)
            )
        case _ as unreachable:
            assert_never(unreachable)


def sequence(
    updaters: Sequence[Callable[[M], NoNotification[M, E, Err]]],
    initial: M,
) -> NoNotification[M, E, Err]:
    """Run update steps left to right, stopping at the first failure.

    Each step receives the model produced by the previous one. Effects
    accumulate as (everything queued so far, then the new step's effects).
    Once a step fails, the remaining updaters are never called and the
    failure is returned without any of the effects queued before it.

    Args:
        updaters: Model-to-result functions; each must return a
            notification-free result.
        initial: Starting model.

    Returns:
        The last step's result, or the first Failed.

    Raises:
        ContractViolationError: If an updater returns a notification.

    Example:
        >>> result = sequence(
        ...     [
        ...         lambda n: with_effect("first", with_model(n + 1)),
        ...         lambda n: with_effect("second", with_model(n * 2)),
        ...     ],
        ...     1,
        ... )
        >>> resolve(result)
        (4, EffectBatch(effects=('first', 'second')))
    """

    def step(
        running: NoNotification[M, E, Err], updater: Callable[[M], NoNotification[M, E, Err]]
    ) -> NoNotification[M, E, Err]:
        match running:
            case Failed():
                return running
            case Ok(model=model, effects=queued):
                match _require_no_notification("sequence", updater(model)):
                    case Ok(model=next_model, effects=new_effects):
                        return Ok(model=next_model, effects=queued.combine(new_effects))
                    case Failed() as failed:
                        return failed

    start: NoNotification[M, E, Err] = with_model(initial)
    return reduce(step, updaters, start)


def apply_external_msg(
    handler: Callable[[X, Ok[M, E]], ComponentResult[M, E, X2, Err]],
    result: ComponentResult[M, E, X, Err],
) -> ComponentResult[M, E, X2, Err]:
    """Consume a pending notification.

    On OkWithNotification, ``handler`` is called once with the notification
    and the same result stripped of it (model and effects intact); its
    return value becomes the output, which may carry a notification of the
    caller's own. Ok and Failed pass through and ``handler`` is not called.

    Example:
        >>> def on_editor(note: ValueAccepted, page: Ok[Page, Tagged[AppEffect]]):
        ...     return map_model(lambda p: replace(p, status=f"accepted: {note.value}"), page)
        >>> apply_external_msg(on_editor, child_result)
    """
    match result:
        case OkWithNotification(model=model, notification=notification, effects=effects):
            return handler(notification, Ok(model=model, effects=effects))
        case Ok() | Failed():
            return result


@overload
def discard_notification(result: Infallible[M, E, X]) -> Ok[M, E]: ...
@overload
def discard_notification(result: ComponentResult[M, E, X, Err]) -> NoNotification[M, E, Err]: ...
def discard_notification(result: ComponentResult[M, E, X, Err]) -> NoNotification[M, E, Err]:
    """Drop a pending notification, keeping model, effects or error."""
    match result:
        case OkWithNotification(model=model, effects=effects):
            return Ok(model=model, effects=effects)
        case Ok() | Failed():
            return result


# =========================================================================== #
#                               RESOLUTION                                    #
# =========================================================================== #


def resolve_error(
    recover: Callable[[Err], Infallible[M, E, X]],
    result: ComponentResult[M, E, X, Err],
) -> Infallible[M, E, X]:
    """Replace a failure with a caller-chosen successful result.

    The output can no longer fail, which is what ``resolve`` requires at the
    host boundary. Success branches pass through unchanged.

    Raises:
        ContractViolationError: If ``recover`` returns a Failed value.
    """
    match result:
        case Failed(error=error):
            recovered: ComponentResult[M, E, X, object] = recover(error)
            match recovered:
                case Failed(error=again):
                    _violate(RecoveryFailed(original_error=repr(error), recovery_error=repr(again)))
                case Ok() | OkWithNotification():
                    return recovered
        case Ok() | OkWithNotification():
            return result


def resolve(result: Resolvable[M, E]) -> tuple[M, EffectBatch[E]]:
    """Hand a fully handled result to the host program loop.

    Returns:
        The ``(model, effects)`` pair.

    Raises:
        ContractViolationError: If ``result`` still carries a notification or
            is Failed.
    """
    widened: ComponentResult[M, E, object, object] = result
    match widened:
        case Ok(model=model, effects=effects):
            return (model, effects)
        case OkWithNotification(notification=notification):
            _violate(UnexpectedNotification(operation="resolve", notification=repr(notification)))
        case Failed(error=error):
            _violate(UnresolvedFailure(operation="resolve", error=repr(error)))


def escape(result: ComponentResult[M, E, X, Err]) -> Result[Escaped[M, E, X], Err]:
    """Flatten any result into a plain Success/Failure for inspection.

    Unlike ``resolve`` this accepts every variant and never raises, at the
    cost of the type-state guarantees. Meant for debugging and tests.
    """
    match result:
        case Ok(model=model, effects=effects):
            return Success(Escaped(model=model, effects=effects))
        case OkWithNotification(model=model, notification=notification, effects=effects):
            return Success(Escaped(model=model, effects=effects, notification=notification))
        case Failed(error=error):
            return Failure(error)


__all__ = [
    # Variants and type states
    "ComponentResult",
    "Escaped",
    "Failed",
    "Infallible",
    "NoNotification",
    "Ok",
    "OkWithNotification",
    "Resolvable",
    # Construction
    "just_error",
    "with_model",
    # Augmentation
    "with_batch",
    "with_effect",
    "with_effects",
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
]
