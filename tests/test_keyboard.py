import pytest

from mememe.editor import KeyboardEvents, KeyboardFrame


def test_events_without_subscriber_are_dropped():
    events = KeyboardEvents()
    events.post_will_show(KeyboardFrame(100))
    events.post_will_hide()
    assert not events.subscribed


def test_subscribe_delivers_and_unsubscribe_stops():
    events = KeyboardEvents()
    seen = []
    events.subscribe(lambda frame: seen.append(("show", frame.height)), lambda: seen.append(("hide", None)))

    events.post_will_show(KeyboardFrame(216))
    events.post_will_hide()
    events.unsubscribe()
    events.post_will_show(KeyboardFrame(216))

    assert seen == [("show", 216), ("hide", None)]


def test_negative_height_rejected():
    with pytest.raises(ValueError):
        KeyboardFrame(-1)
