"""
Plain success/failure split for the edges of componentresult.

``validate_model`` reports pydantic problems through it, and ``escape``
flattens a ComponentResult into it for inspection. Callers pattern-match:

    >>> match validate_model(PagerConfig, page_count=0):
    ...     case Success(config):
    ...         print(config.page_count)
    ...     case Failure(error):
    ...         print(f"Invalid pager config: {error}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E


Result = Success[T] | Failure[E]


__all__ = ["Failure", "Result", "Success"]
