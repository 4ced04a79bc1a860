# tests/test_component/test_mapping.py
"""
Tests for the mapping combinators.

map_model, map_effect, map_error and map_notification each touch exactly one
slot of a result and leave the rest alone.
"""

from __future__ import annotations

from componentresult.component import (
    just_error,
    map_effect,
    map_error,
    map_model,
    map_notification,
    with_effect,
    with_effects,
    with_model,
    with_notification,
)
from componentresult.effects.types import Tagged
from tests.helpers import expect_failed, expect_notification, expect_ok


class TestMapModel:
    """Tests for map_model."""

    def test_transforms_model_of_ok(self) -> None:
        """The model is replaced by f(model); effects are kept."""
        result = map_model(str, with_effect("fx", with_model(7)))

        model, effects = expect_ok(result)
        assert model == "7"
        assert effects.effects == ("fx",)

    def test_keeps_notification(self) -> None:
        """A pending notification survives model mapping."""
        result = map_model(lambda n: n * 10, with_notification("note", with_model(2)))

        model, notification, _ = expect_notification(result)
        assert (model, notification) == (20, "note")

    def test_failed_passes_through(self) -> None:
        """Failed is returned untouched and f is not applied."""
        failed = just_error("err")

        assert map_model(lambda _: 1 / 0, failed) is failed


class TestMapEffect:
    """Tests for map_effect."""

    def test_maps_every_effect(self) -> None:
        """Each queued effect is transformed, order kept."""
        result = map_effect(str.upper, with_effects(["a", "b"], with_model(0)))

        _, effects = expect_ok(result)
        assert effects.effects == ("A", "B")

    def test_tags_child_effects(self) -> None:
        """Parents wrap child effects with Tagged for routing."""
        child = with_notification("note", with_effect("fetch", with_model(0)))

        result = map_effect(lambda e: Tagged(tag="child", effect=e), child)

        _, notification, effects = expect_notification(result)
        assert notification == "note"
        assert effects.effects == (Tagged(tag="child", effect="fetch"),)

    def test_failed_passes_through(self) -> None:
        """Failed has no effects to map."""
        failed = just_error("err")

        assert map_effect(str.upper, failed) is failed


class TestMapError:
    """Tests for map_error."""

    def test_transforms_error(self) -> None:
        """Only the Failed branch is transformed."""
        result = map_error(len, just_error("four"))

        assert expect_failed(result) == 4

    def test_success_branches_pass_through(self) -> None:
        """Ok and OkWithNotification are returned unchanged."""
        ok = with_model(1)
        notified = with_notification("n", with_model(1))

        assert map_error(len, ok) is ok
        assert map_error(len, notified) is notified


class TestMapNotification:
    """Tests for map_notification."""

    def test_transforms_pending_notification(self) -> None:
        """The notification is replaced by f(notification)."""
        result = map_notification(str.upper, with_notification("saved", with_model(0)))

        _, notification, _ = expect_notification(result)
        assert notification == "SAVED"

    def test_ok_and_failed_pass_through(self) -> None:
        """Nothing to map when no notification is pending."""
        ok = with_model(0)
        failed = just_error("err")

        assert map_notification(str.upper, ok) is ok
        assert map_notification(str.upper, failed) is failed
