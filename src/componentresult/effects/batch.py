"""
Effect batches: the effect set carried by every successful ComponentResult.

An EffectBatch is a pure, immutable collection of effect descriptions. It is
never executed here; a host runtime receives the batch after ``resolve`` and
decides HOW and WHEN to run its members.

Type Safety:
    - EffectBatch is a frozen dataclass over a tuple (immutable)
    - The effect type parameter is preserved through ``map_batch``
    - ``EffectBatch.none()`` is the identity for ``batch``

Ordering:
    Members are kept in append order for inspection, but the host runtime
    gives no execution-order guarantee across members of a batch. Code that
    queues effects must not rely on their interleaving.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Callable, Generic, Iterable, TypeVar


E = TypeVar("E")
E2 = TypeVar("E2")


@dataclass(frozen=True)
class EffectBatch(Generic[E]):
    """Unordered batch of effect descriptions.

    Attributes:
        effects: Tuple of queued effect descriptions, in append order.

    Example:
        >>> saved = EffectBatch.of(RecordTimestamp(label="saved"))
        >>> logged = EffectBatch.of(LogMessage(message="saved"))
        >>> len(batch(saved, logged))
        2
    """

    effects: tuple[E, ...] = ()

    @classmethod
    def none(cls) -> EffectBatch[E]:
        """The empty batch."""
        return cls()

    @classmethod
    def of(cls, *effects: E) -> EffectBatch[E]:
        return cls(effects=effects)

    @classmethod
    def from_iterable(cls, effects: Iterable[E]) -> EffectBatch[E]:
        return cls(effects=tuple(effects))

    def combine(self, other: EffectBatch[E]) -> EffectBatch[E]:
        """Append ``other`` after this batch."""
        match (self.effects, other.effects):
            case ((), _):
                return other
            case (_, ()):
                return self
            case _:
                return EffectBatch(effects=self.effects + other.effects)

    def is_empty(self) -> bool:
        return len(self.effects) == 0

    def __len__(self) -> int:
        return len(self.effects)


def batch(*batches: EffectBatch[E]) -> EffectBatch[E]:
    """Concatenate batches left to right.

    Returns:
        A single EffectBatch holding every member of every input batch.
    """
    empty: EffectBatch[E] = EffectBatch.none()
    return reduce(lambda acc, nxt: acc.combine(nxt), batches, empty)


def map_batch(f: Callable[[E], E2], effects: EffectBatch[E]) -> EffectBatch[E2]:
    """Map a function over every effect description in a batch.

    This is the functor operation for effect batches, used by parents to tag
    child effects so the runtime can route their results back.

    Example:
        >>> tagged = map_batch(lambda e: Tagged(tag="editor", effect=e), child_effects)
    """
    return EffectBatch(effects=tuple(f(effect) for effect in effects.effects))


__all__ = ["EffectBatch", "batch", "map_batch"]
