# tests/test_component/test_combination.py
"""
Tests for combining and sequencing results.

Covers map2_model precedence, sequence short-circuiting and effect order,
apply_external_msg and discard_notification.
"""

from __future__ import annotations

import pytest

from componentresult.component import (
    ComponentResult,
    NoNotification,
    Ok,
    apply_external_msg,
    discard_notification,
    just_error,
    map2_model,
    map_model,
    sequence,
    with_effect,
    with_model,
    with_notification,
)
from componentresult.errors import ContractViolationError, UnexpectedNotification
from tests.helpers import (
    CallCounter,
    HandlerSpy,
    expect_failed,
    expect_notification,
    expect_ok,
)


def _add(a: int, b: int) -> int:
    return a + b


class TestMap2Model:
    """Tests for map2_model."""

    def test_combines_models_and_effects(self) -> None:
        """Models are combined with f; effects are first's then second's."""
        first = with_effect("a", with_model(1))
        second = with_effect("b", with_model(2))

        model, effects = expect_ok(map2_model(_add, first, second))

        assert model == 3
        assert effects.effects == ("a", "b")

    def test_first_notification_survives(self) -> None:
        """Only the first result may carry a notification."""
        first = with_notification("note", with_effect("a", with_model(1)))
        second = with_effect("b", with_model(2))

        model, notification, effects = expect_notification(map2_model(_add, first, second))

        assert (model, notification) == (3, "note")
        assert effects.effects == ("a", "b")

    def test_first_error_wins(self) -> None:
        """When both fail, the first error is returned."""
        result = map2_model(_add, just_error("first"), just_error("second"))

        assert expect_failed(result) == "first"

    def test_first_error_over_success(self) -> None:
        """A failed first result wins over any second result."""
        assert expect_failed(map2_model(_add, just_error("e1"), with_model(2))) == "e1"

    def test_second_error_over_success(self) -> None:
        """A failed second result wins over a successful first."""
        first = with_notification("note", with_effect("a", with_model(1)))

        assert expect_failed(map2_model(_add, first, just_error("e2"))) == "e2"

    def test_second_notification_is_contract_violation(self) -> None:
        """A notification on the second argument is rejected."""
        second = with_notification("stray", with_model(2))

        with pytest.raises(ContractViolationError) as exc_info:
            map2_model(_add, with_model(1), second)  # type: ignore[arg-type]

        assert isinstance(exc_info.value.violation, UnexpectedNotification)
        assert exc_info.value.violation.operation == "map2_model"


class TestSequence:
    """Tests for sequence."""

    def test_empty_is_with_model(self) -> None:
        """No updaters leaves the initial model with no effects."""
        updaters: list[CallCounter[int, str, str]] = []

        assert sequence(updaters, 5) == with_model(5)

    def test_threads_model_left_to_right(self) -> None:
        """Each updater receives the previous model."""
        inc = CallCounter[int, str, str](lambda n: with_model(n + 1))
        double = CallCounter[int, str, str](lambda n: with_model(n * 2))

        model, _ = expect_ok(sequence([inc, double], 3))

        assert model == 8
        assert inc.calls == [3]
        assert double.calls == [4]

    def test_effects_accumulate_previous_then_new(self) -> None:
        """Effects queued earlier come before effects of later steps."""

        def step(label: str) -> CallCounter[int, str, str]:
            return CallCounter(lambda n: with_effect(label, with_model(n)))

        _, effects = expect_ok(sequence([step("one"), step("two"), step("three")], 0))

        assert effects.effects == ("one", "two", "three")

    def test_stops_at_first_failure(self) -> None:
        """Later updaters are never invoked after a failure."""
        first = CallCounter[int, str, str](lambda n: just_error(f"failed at {n}"))
        second = CallCounter[int, str, str](lambda n: with_model(n + 1))

        result = sequence([first, second], 0)

        assert expect_failed(result) == "failed at 0"
        assert first.call_count == 1
        assert second.call_count == 0

    def test_failure_drops_earlier_effects(self) -> None:
        """A Failed result carries no effects, including earlier ones."""
        ok_step = CallCounter[int, str, str](lambda n: with_effect("queued", with_model(n)))
        bad_step = CallCounter[int, str, str](lambda _: just_error("bad"))

        result = sequence([ok_step, bad_step], 0)

        assert result == just_error("bad")

    def test_notification_from_updater_is_contract_violation(self) -> None:
        """Updaters must return notification-free results."""

        def notifying(n: int) -> NoNotification[int, str, str]:
            return with_notification("oops", with_model(n))  # type: ignore[return-value]

        with pytest.raises(ContractViolationError) as exc_info:
            sequence([notifying], 0)

        assert isinstance(exc_info.value.violation, UnexpectedNotification)
        assert exc_info.value.violation.operation == "sequence"


class TestApplyExternalMsg:
    """Tests for apply_external_msg."""

    def test_handler_receives_notification_and_stripped_result(self) -> None:
        """The handler gets the notification and the same result without it."""
        spy: HandlerSpy[int, str, str, str] = HandlerSpy(lambda note, r: r)
        notified = with_notification("note", with_model(1))

        apply_external_msg(spy, notified)

        assert spy.calls == [("note", with_model(1))]

    def test_handler_output_is_returned(self) -> None:
        """Whatever the handler returns becomes the result."""

        def handler(note: str, result: Ok[int, str]) -> ComponentResult[int, str, str, str]:
            return with_notification(f"parent saw {note}", with_effect("log", result))

        notified = with_notification("note", with_effect("child", with_model(1)))

        model, notification, effects = expect_notification(apply_external_msg(handler, notified))

        assert model == 1
        assert notification == "parent saw note"
        assert effects.effects == ("child", "log")

    def test_no_notification_passes_through(self) -> None:
        """Ok is returned unchanged and the handler is not called."""
        spy: HandlerSpy[int, str, str, str] = HandlerSpy(lambda note, r: r)
        ok = with_effect("fx", with_model(1))

        assert apply_external_msg(spy, ok) is ok
        assert spy.calls == []

    def test_failed_passes_through(self) -> None:
        """Failed is returned unchanged and the handler is not called."""
        spy: HandlerSpy[int, str, str, str] = HandlerSpy(lambda note, r: r)
        failed = just_error("err")

        assert apply_external_msg(spy, failed) is failed
        assert spy.calls == []

    def test_handler_can_map_model(self) -> None:
        """A parent typically folds the notification into its model."""
        notified = with_notification(5, with_model(10))

        result = apply_external_msg(lambda n, r: map_model(lambda m: m + n, r), notified)

        assert expect_ok(result)[0] == 15


class TestDiscardNotification:
    """Tests for discard_notification."""

    def test_drops_notification(self) -> None:
        """Model and effects stay, the notification goes."""
        notified = with_notification("note", with_effect("fx", with_model(1)))

        assert discard_notification(notified) == with_effect("fx", with_model(1))

    def test_ok_and_failed_unchanged(self) -> None:
        """Nothing to drop on Ok or Failed."""
        ok = with_model(1)
        failed = just_error("err")

        assert discard_notification(ok) is ok
        assert discard_notification(failed) is failed
