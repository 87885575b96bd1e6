"""Tests for request states and the StateStore observable."""

from __future__ import annotations

import dataclasses

import pytest

from movieBrowser.gui.state import Error, Loading, StateStore, Successful


@pytest.fixture
def store(qapp) -> StateStore:
    return StateStore()


class TestStates:
    def test_value_equality(self) -> None:
        assert Loading() == Loading()
        assert Successful((1, 2)) == Successful((1, 2))
        assert Error("boom") != Error("bang")

    def test_states_are_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Error("boom").message = "other"  # type: ignore[misc]

    def test_error_requires_message(self) -> None:
        with pytest.raises(ValueError):
            Error("")


class TestStateStore:
    def test_initial_state_is_loading(self, store: StateStore) -> None:
        assert store.value == Loading()

    def test_subscriber_gets_current_value_immediately(self, store: StateStore) -> None:
        store.publish(Successful(("a",)))
        seen = []

        store.subscribe(seen.append)

        assert seen == [Successful(("a",))]

    def test_transitions_delivered_in_publish_order(self, store: StateStore) -> None:
        seen = []
        store.subscribe(seen.append)

        store.publish(Loading())
        store.publish(Error("offline"))
        store.publish(Loading())
        store.publish(Successful(()))

        assert seen == [Loading(), Loading(), Error("offline"), Loading(), Successful(())]
        assert store.value == Successful(())

    def test_unsubscribe_stops_delivery(self, store: StateStore) -> None:
        seen = []
        unsubscribe = store.subscribe(seen.append)

        unsubscribe()
        unsubscribe()  # second call is a no-op
        store.publish(Error("late"))

        assert seen == [Loading()]

    def test_unsubscribe_leaves_other_subscribers(self, store: StateStore) -> None:
        first, second = [], []
        stop_first = store.subscribe(first.append)
        store.subscribe(second.append)

        stop_first()
        store.publish(Error("x"))

        assert first == [Loading()]
        assert second == [Loading(), Error("x")]

    def test_changed_signal_mirrors_publish(self, store: StateStore, qtbot) -> None:
        with qtbot.waitSignal(store.changed, timeout=1000) as blocker:
            store.publish(Error("offline"))

        assert blocker.args == [Error("offline")]
