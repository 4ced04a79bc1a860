"""Configuration checks that report pydantic errors as values."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from componentresult.result import Failure, Result, Success


ConfigT = TypeVar("ConfigT", bound=BaseModel)


def validate_model(model_cls: type[ConfigT], **data: object) -> Result[ConfigT, ValidationError]:
    """
    Build ``model_cls`` from keyword data.

    A bad configuration comes back as ``Failure(ValidationError)`` so an
    ``init`` function can turn it into a Failed result rather than raising
    out of the update loop.
    """
    try:
        return Success(model_cls(**data))
    except ValidationError as exc:
        return Failure(exc)


def error_messages(error: ValidationError) -> tuple[str, ...]:
    """Flatten a ValidationError into ``"field: message"`` lines."""
    return tuple(
        f"{'.'.join(str(part) for part in detail['loc'])}: {detail['msg']}"
        for detail in error.errors()
    )


__all__ = ["error_messages", "validate_model"]
