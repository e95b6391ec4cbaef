from __future__ import annotations

import pytest

from tally.viewmodels.observable import Observable


def test_subscribe_replays_current_value_by_default() -> None:
    subject = Observable(5)
    seen = []

    subject.subscribe(seen.append)

    assert seen == [5]


def test_subscribe_without_replay_waits_for_next_set() -> None:
    subject = Observable(5)
    seen = []

    subject.subscribe(seen.append, replay=False)
    subject.set(6)

    assert seen == [6]


def test_every_set_is_broadcast_even_when_value_is_unchanged() -> None:
    subject = Observable(False)
    seen = []
    subject.subscribe(seen.append, replay=False)

    subject.set(False)
    subject.set(False)

    assert seen == [False, False]


def test_listeners_run_in_subscription_order() -> None:
    subject = Observable(0)
    calls = []
    subject.subscribe(lambda v: calls.append(("first", v)), replay=False)
    subject.subscribe(lambda v: calls.append(("second", v)), replay=False)

    subject.set(1)
    subject.set(2)

    assert calls == [("first", 1), ("second", 1), ("first", 2), ("second", 2)]


def test_unsubscribe_stops_delivery_and_is_idempotent() -> None:
    subject = Observable(0)
    seen = []
    unsubscribe = subject.subscribe(seen.append, replay=False)

    unsubscribe()
    unsubscribe()
    subject.set(1)

    assert seen == []
    assert subject.subscriber_count() == 0


def test_listener_may_unsubscribe_during_notification() -> None:
    subject = Observable(0)
    seen = []
    holder = {}

    def once(value: int) -> None:
        seen.append(("once", value))
        holder["unsubscribe"]()

    holder["unsubscribe"] = subject.subscribe(once, replay=False)
    subject.subscribe(lambda v: seen.append(("always", v)), replay=False)

    subject.set(1)
    subject.set(2)

    assert seen == [("once", 1), ("always", 1), ("always", 2)]


def test_listener_errors_propagate_to_setter() -> None:
    subject = Observable(0)

    def boom(_: int) -> None:
        raise RuntimeError("render failed")

    subject.subscribe(boom, replay=False)

    with pytest.raises(RuntimeError):
        subject.set(1)
    assert subject.value == 1


def test_read_only_view_tracks_source_without_setter() -> None:
    subject = Observable("a")
    view = subject.as_read_only()
    seen = []
    view.subscribe(seen.append)

    subject.set("b")

    assert view.value == "b"
    assert seen == ["a", "b"]
    assert not hasattr(view, "set")
