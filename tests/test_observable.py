from conftest import RecordingListener

from core.observable import Observable, PositionChanged, StateChanged
from model import ModelLocator, PlayerModel


def test_subscribe_accepts_listener(listener):
    observable = Observable()
    assert observable.subscribe(listener) is True
    assert observable.listener_count == 1


def test_subscribe_rejects_object_without_interface():
    class NotAListener:
        def on_update(self, source, event):
            pass

    observable = Observable()
    assert observable.subscribe(NotAListener()) is False
    assert observable.subscribe(object()) is False
    assert observable.listener_count == 0


def test_subscribing_twice_registers_once(listener):
    observable = Observable()
    observable.subscribe(listener)
    observable.subscribe(listener)
    observable.publish(StateChanged(True))
    assert len(listener.calls) == 1


def test_publish_passes_source_and_event(listener):
    observable = Observable()
    observable.subscribe(listener)
    event = PositionChanged('x', 5)
    observable.publish(event)
    assert listener.calls == [(observable, event)]


def test_publish_runs_newest_listener_first():
    order = []
    observable = Observable()
    for name in ('first', 'second', 'third'):
        observable.subscribe(RecordingListener(name, order))
    observable.publish(StateChanged(False))
    assert order == ['third', 'second', 'first']


def test_publish_without_listeners_is_noop():
    Observable().publish(StateChanged(True))


def test_unsubscribe(listener):
    observable = Observable()
    observable.subscribe(listener)
    assert observable.unsubscribe(listener) is True
    assert observable.unsubscribe(listener) is False
    observable.publish(StateChanged(True))
    assert listener.calls == []


def test_listeners_are_per_instance(listener):
    a = PlayerModel()
    b = PlayerModel()
    a.subscribe(listener)
    b.set_y(12)
    assert listener.calls == []
    a.set_y(3)
    assert len(listener.calls) == 1


def test_locators_do_not_share_models():
    first = ModelLocator()
    second = ModelLocator()
    assert first.ball_model is not second.ball_model
    assert first.player1_model is not first.player2_model
    assert first.play_state_model is not second.play_state_model
