"""
Pager component.

Moving to a page that does not exist is an error, not a clamp: the pager
reports ``PageOutOfRange`` and lets its caller decide whether to stay put,
show a message or try another page.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Literal

from pydantic import BaseModel, ConfigDict, PositiveInt

from componentresult.component import (
    ComponentResult,
    Ok,
    just_error,
    with_effect,
    with_effects,
    with_model,
    with_notification,
)
from componentresult.effects.types import AppEffect, FetchPage, LogMessage


class PagerConfig(BaseModel):
    """Pager dimensions.

    Attributes:
        page_count: Number of pages available.
        page_size: Items per page, forwarded to FetchPage.
    """

    page_count: PositiveInt
    page_size: PositiveInt = 20

    model_config = ConfigDict(frozen=True, extra="forbid")


@dataclass(frozen=True)
class Pager:
    current: int
    page_count: int
    page_size: int


@dataclass(frozen=True)
class GoTo:
    page: int
    kind: Literal["GoTo"] = "GoTo"


@dataclass(frozen=True)
class Next:
    kind: Literal["Next"] = "Next"


@dataclass(frozen=True)
class Previous:
    kind: Literal["Previous"] = "Previous"


PagerMsg = GoTo | Next | Previous


@dataclass(frozen=True)
class PageChanged:
    page: int
    kind: Literal["PageChanged"] = "PageChanged"


@dataclass(frozen=True)
class PageOutOfRange:
    requested: int
    page_count: int
    kind: Literal["PageOutOfRange"] = "PageOutOfRange"


PagerResult = ComponentResult[Pager, AppEffect, PageChanged, PageOutOfRange]


def init(config: PagerConfig) -> Ok[Pager, AppEffect]:
    """Start on the first page and fetch it."""
    return with_effect(
        FetchPage(page=0, page_size=config.page_size),
        with_model(Pager(current=0, page_count=config.page_count, page_size=config.page_size)),
    )


def update(msg: PagerMsg, model: Pager) -> PagerResult:
    match msg:
        case GoTo(page=page):
            return go_to(page, model)
        case Next():
            return go_to(model.current + 1, model)
        case Previous():
            return go_to(model.current - 1, model)


def go_to(page: int, model: Pager) -> PagerResult:
    match 0 <= page < model.page_count:
        case False:
            return just_error(PageOutOfRange(requested=page, page_count=model.page_count))
        case True:
            return with_notification(
                PageChanged(page=page),
                with_effects(
                    [
                        FetchPage(page=page, page_size=model.page_size),
                        LogMessage(level="debug", message=f"pager moved to page {page}"),
                    ],
                    with_model(replace(model, current=page)),
                ),
            )
