"""
Page component: a parent embedding an editor and a pager.

This is the caller side of the ComponentResult contract. For every child
result the page

    1. embeds the child model with ``map_model``,
    2. tags child effects with ``map_effect`` so the runtime can route them,
    3. consumes child notifications with ``apply_external_msg``,
    4. recovers from child errors with ``resolve_error``,

and ends with an ``Ok`` that ``HostLoop`` can resolve.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Literal, TypeVar, assert_never

from pydantic import ValidationError

from componentresult.component import (
    NoNotification,
    Ok,
    apply_external_msg,
    discard_notification,
    just_error,
    map2_model,
    map_effect,
    map_model,
    resolve_error,
    sequence,
    with_effect,
    with_model,
)
from componentresult.effects.types import AppEffect, LogMessage, Tagged
from componentresult.examples import editor, pager
from componentresult.program import Program
from componentresult.result import Failure, Success
from componentresult.validation import error_messages, validate_model


E = TypeVar("E")

PageEffect = Tagged[AppEffect]


@dataclass(frozen=True)
class Page:
    editor: editor.Editor
    pager: pager.Pager
    editor_config: editor.EditorConfig = editor.DEFAULT_EDITOR_CONFIG
    status: str = ""
    history: tuple[str, ...] = ()


@dataclass(frozen=True)
class EditorMsg:
    msg: editor.EditorMsg
    kind: Literal["EditorMsg"] = "EditorMsg"


@dataclass(frozen=True)
class PagerMsg:
    msg: pager.PagerMsg
    kind: Literal["PagerMsg"] = "PagerMsg"


@dataclass(frozen=True)
class Prefill:
    """Load a draft into the editor: replace the value, then trim it."""

    text: str
    kind: Literal["Prefill"] = "Prefill"


PageMsg = EditorMsg | PagerMsg | Prefill


@dataclass(frozen=True)
class InvalidConfig:
    component: str
    errors: tuple[str, ...]
    kind: Literal["InvalidConfig"] = "InvalidConfig"


def _tag(name: str) -> Callable[[E], Tagged[E]]:
    return lambda effect: Tagged(tag=name, effect=effect)


def _with_status(page: Page, status: str) -> Page:
    return replace(page, status=status, history=(*page.history, status))


def _invalid(component: str, error: ValidationError) -> InvalidConfig:
    return InvalidConfig(component=component, errors=error_messages(error))


def init(
    page_count: int, page_size: int = 20, max_length: int = 256
) -> NoNotification[Page, PageEffect, InvalidConfig]:
    """Validate configuration and build both children."""
    match (
        validate_model(editor.EditorConfig, max_length=max_length),
        validate_model(pager.PagerConfig, page_count=page_count, page_size=page_size),
    ):
        case (Failure(error), _):
            return just_error(_invalid("editor", error))
        case (_, Failure(error)):
            return just_error(_invalid("pager", error))
        case (Success(editor_config), Success(pager_config)):
            return map2_model(
                lambda e, p: Page(editor=e, pager=p, editor_config=editor_config),
                map_effect(_tag("editor"), editor.init()),
                map_effect(_tag("pager"), pager.init(pager_config)),
            )
        case _ as unreachable:
            assert_never(unreachable)


def init_or_default(
    page_count: int, page_size: int = 20, max_length: int = 256
) -> Ok[Page, PageEffect]:
    """``init``, falling back to a single-page default when the config is invalid."""

    def fallback(error: InvalidConfig) -> Ok[Page, PageEffect]:
        default = pager.PagerConfig(page_count=1)
        return with_effect(
            Tagged(
                tag="page",
                effect=LogMessage(
                    level="warning", message=f"invalid {error.component} config, using defaults"
                ),
            ),
            map_model(
                lambda p: _with_status(Page(editor=editor.init().model, pager=p), "defaults"),
                map_effect(_tag("pager"), pager.init(default)),
            ),
        )

    return discard_notification(resolve_error(fallback, init(page_count, page_size, max_length)))


def update(msg: PageMsg, model: Page) -> Ok[Page, PageEffect]:
    match msg:
        case EditorMsg(msg=inner):
            return _handle_editor(model, editor.update(inner, model.editor, model.editor_config))
        case PagerMsg(msg=inner):
            return _handle_pager(model, pager.update(inner, model.pager))
        case Prefill(text=text):
            steps = sequence([editor.edit(text, model.editor_config), editor.trim], model.editor)
            return _handle_editor(model, steps)


def _handle_editor(model: Page, child: editor.EditorResult) -> Ok[Page, PageEffect]:
    def on_accepted(
        note: editor.ValueAccepted, page: Ok[Page, PageEffect]
    ) -> Ok[Page, PageEffect]:
        return map_model(lambda p: _with_status(p, f"accepted: {note.value}"), page)

    def recover(error: editor.EditorError) -> Ok[Page, PageEffect]:
        match error:
            case editor.ValueTooLong(length=length, max_length=limit):
                return with_model(_with_status(model, f"too long: {length} > {limit}"))
            case editor.EmptyValue():
                return with_model(_with_status(model, "nothing to accept"))

    embedded = map_model(lambda e: replace(model, editor=e), map_effect(_tag("editor"), child))
    return discard_notification(resolve_error(recover, apply_external_msg(on_accepted, embedded)))


def _handle_pager(model: Page, child: pager.PagerResult) -> Ok[Page, PageEffect]:
    def on_changed(note: pager.PageChanged, page: Ok[Page, PageEffect]) -> Ok[Page, PageEffect]:
        return map_model(
            lambda p: _with_status(p, f"page {note.page + 1} of {p.pager.page_count}"), page
        )

    def recover(error: pager.PageOutOfRange) -> Ok[Page, PageEffect]:
        return with_effect(
            Tagged(
                tag="page",
                effect=LogMessage(
                    level="warning",
                    message=f"page {error.requested} requested, only {error.page_count} available",
                ),
            ),
            with_model(_with_status(model, f"page {error.requested + 1} unavailable")),
        )

    embedded = map_model(lambda p: replace(model, pager=p), map_effect(_tag("pager"), child))
    return discard_notification(resolve_error(recover, apply_external_msg(on_changed, embedded)))


def program(
    page_count: int, page_size: int = 20, max_length: int = 256
) -> Program[Page, PageMsg, PageEffect]:
    """Wire the page as a top-level program for HostLoop."""
    return Program(
        init=lambda: init_or_default(page_count, page_size, max_length),
        update=update,
    )
