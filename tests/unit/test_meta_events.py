"""Tests for the newListener / removeListener meta-events."""

from tinyemitter import NEW_LISTENER_EVENT
from tinyemitter import REMOVE_LISTENER_EVENT
from tinyemitter import EventEmitter


def test_new_listener_event_on_registration(emitter):
    seen = []
    emitter.on(NEW_LISTENER_EVENT, lambda event, listener: seen.append((event, listener)))
    seen.clear()

    def listener():
        pass

    emitter.on("a", listener)
    emitter.prepend_listener("b", listener)
    assert seen == [("a", listener), ("b", listener)]


def test_new_listener_listener_sees_its_own_registration(emitter):
    seen = []

    def watcher(event, listener):
        seen.append((event, listener))

    emitter.on(NEW_LISTENER_EVENT, watcher)
    assert seen == [(NEW_LISTENER_EVENT, watcher)]


def test_new_listener_receives_original_for_once(emitter):
    seen = []
    emitter.on(NEW_LISTENER_EVENT, lambda event, listener: seen.append(listener))
    seen.clear()

    def listener():
        pass

    emitter.once("a", listener)
    emitter.prepend_once_listener("a", listener)
    assert seen == [listener, listener]


def test_new_listener_fires_before_registration_returns(emitter):
    counts = []
    emitter.on(NEW_LISTENER_EVENT, lambda event, listener: counts.append(emitter.listener_count(event)))
    counts.clear()

    emitter.on("a", print)
    assert counts == [1]


def test_remove_listener_event_only_when_removed(emitter):
    seen = []
    emitter.on(REMOVE_LISTENER_EVENT, lambda event, listener: seen.append((event, listener)))

    def listener():
        pass

    emitter.remove_listener("a", listener)
    assert seen == []

    emitter.on("a", listener)
    emitter.remove_listener("a", listener)
    assert seen == [("a", listener)]


def test_remove_listener_event_receives_original_for_once(emitter):
    seen = []
    emitter.on(REMOVE_LISTENER_EVENT, lambda event, listener: seen.append(listener))

    def listener():
        pass

    emitter.once("a", listener)
    emitter.emit("a")
    emitter.once("b", listener)
    emitter.off("b", listener)
    assert seen == [listener, listener]


def test_remove_all_listeners_emits_per_entry(emitter):
    seen = []
    emitter.on(REMOVE_LISTENER_EVENT, lambda event, listener: seen.append((event, listener)))

    def f():
        pass

    def g():
        pass

    emitter.on("a", f).on("a", g).on("a", f)
    emitter.remove_all_listeners("a")
    assert seen == [("a", f), ("a", g), ("a", f)]
    assert emitter.listener_count("a") == 0


def test_remove_all_listeners_without_key_clears_everything(emitter):
    emitter.on("a", print).on("b", print).once("c", print)
    emitter.on(REMOVE_LISTENER_EVENT, lambda event, listener: None)

    emitter.remove_all_listeners()
    assert emitter.event_names() == []


def test_meta_events_can_be_disabled(quiet_emitter):
    seen = []

    def noop():
        pass

    quiet_emitter.on(NEW_LISTENER_EVENT, lambda *args: seen.append(("new", args)))
    quiet_emitter.on(REMOVE_LISTENER_EVENT, lambda *args: seen.append(("remove", args)))

    quiet_emitter.on("a", noop)
    quiet_emitter.once("a", noop)
    quiet_emitter.remove_listener("a", noop)
    quiet_emitter.emit("a")
    quiet_emitter.remove_all_listeners()
    assert seen == []


def test_throwing_new_listener_handler_does_not_break_registration():
    e = EventEmitter()

    def bad(event, listener):
        msg = "boom"
        raise ValueError(msg)

    e.on(NEW_LISTENER_EVENT, bad)
    e.on("a", print)
    assert e.listener_count("a") == 1
