"""
Text editor component.

The editor keeps the text being edited and the last accepted value. Accepting
records a timestamp and notifies the caller with ``ValueAccepted``; the editor
itself does not know what its parent does with the accepted value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Final, Literal

from pydantic import BaseModel, ConfigDict, PositiveInt

from componentresult.component import (
    ComponentResult,
    NoNotification,
    Ok,
    just_error,
    with_effect,
    with_model,
    with_notification,
)
from componentresult.effects.types import AppEffect, RecordTimestamp


class EditorConfig(BaseModel):
    """Editor limits.

    Attributes:
        max_length: Longest value ``Edit`` accepts.
        allow_empty: Whether an empty value may be accepted.
    """

    max_length: PositiveInt = 256
    allow_empty: bool = False

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_EDITOR_CONFIG: Final[EditorConfig] = EditorConfig()


@dataclass(frozen=True)
class Editor:
    value: str = ""
    revert_value: str = ""


# Messages


@dataclass(frozen=True)
class Edit:
    text: str
    kind: Literal["Edit"] = "Edit"


@dataclass(frozen=True)
class Accept:
    kind: Literal["Accept"] = "Accept"


@dataclass(frozen=True)
class Revert:
    kind: Literal["Revert"] = "Revert"


EditorMsg = Edit | Accept | Revert


# Notifications


@dataclass(frozen=True)
class ValueAccepted:
    value: str
    kind: Literal["ValueAccepted"] = "ValueAccepted"


# Errors


@dataclass(frozen=True)
class ValueTooLong:
    length: int
    max_length: int
    kind: Literal["ValueTooLong"] = "ValueTooLong"


@dataclass(frozen=True)
class EmptyValue:
    kind: Literal["EmptyValue"] = "EmptyValue"


EditorError = ValueTooLong | EmptyValue

EditorResult = ComponentResult[Editor, AppEffect, ValueAccepted, EditorError]
EditorStep = Callable[[Editor], NoNotification[Editor, AppEffect, EditorError]]


def init(value: str = "") -> Ok[Editor, AppEffect]:
    return with_model(Editor(value=value, revert_value=value))


def update(
    msg: EditorMsg, model: Editor, config: EditorConfig = DEFAULT_EDITOR_CONFIG
) -> EditorResult:
    match msg:
        case Edit(text=text):
            return edit(text, config)(model)
        case Accept():
            return accept(model, config)
        case Revert():
            return with_model(replace(model, value=model.revert_value))


def edit(text: str, config: EditorConfig = DEFAULT_EDITOR_CONFIG) -> EditorStep:
    """Build a step that replaces the value, rejecting text over ``max_length``."""

    def step(model: Editor) -> NoNotification[Editor, AppEffect, EditorError]:
        match len(text) > config.max_length:
            case True:
                return just_error(ValueTooLong(length=len(text), max_length=config.max_length))
            case False:
                return with_model(replace(model, value=text))

    return step


def trim(model: Editor) -> NoNotification[Editor, AppEffect, EditorError]:
    """Strip surrounding whitespace from the value."""
    return with_model(replace(model, value=model.value.strip()))


def accept(model: Editor, config: EditorConfig = DEFAULT_EDITOR_CONFIG) -> EditorResult:
    """Make the current value the new revert point and tell the caller."""
    match model.value == "" and not config.allow_empty:
        case True:
            return just_error(EmptyValue())
        case False:
            return with_notification(
                ValueAccepted(value=model.value),
                with_effect(
                    RecordTimestamp(label="accepted"),
                    with_model(replace(model, revert_value=model.value)),
                ),
            )
