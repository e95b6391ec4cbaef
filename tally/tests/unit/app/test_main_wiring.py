from __future__ import annotations

from typing import Callable, List, Optional

import pytest

pytest.importorskip("tkinter")

from tally.app import main as app_main
from tally.domain.counter_state import CounterState
from tally.tests.unit.app.after_stub import AfterStub


class ViewStub(AfterStub):
    instances: List["ViewStub"] = []

    def __init__(self, *, on_play: Optional[Callable[[], None]] = None, on_reset=None) -> None:
        super().__init__()
        self.on_play = on_play
        self.on_reset = on_reset
        self.counts: List[int] = []
        self.playing: List[bool] = []
        self.reset_visible: List[bool] = []
        self.protocols = {}
        self.destroyed = False
        ViewStub.instances.append(self)

    def set_count(self, value: int) -> None:
        self.counts.append(value)

    def set_playing(self, playing: bool) -> None:
        self.playing.append(playing)

    def set_reset_visible(self, visible: bool) -> None:
        self.reset_visible.append(visible)

    def protocol(self, name: str, callback) -> None:
        self.protocols[name] = callback

    def destroy(self) -> None:
        self.destroyed = True


@pytest.fixture()
def app(monkeypatch):
    ViewStub.instances.clear()
    monkeypatch.setattr(app_main, "CounterView", ViewStub)
    return app_main.App()


def test_view_renders_initial_state(app) -> None:
    view = ViewStub.instances[0]
    assert view.counts == [0]
    assert view.playing == [False]
    assert view.reset_visible == [False]


def test_view_callbacks_drive_controller(app) -> None:
    view = ViewStub.instances[0]

    view.on_play()
    view.fire_next()
    view.on_reset()

    assert view.counts == [0, 1, 0]
    assert view.playing == [False, True, False]
    assert view.reset_visible == [False, True, False]
    assert app.store.snapshot() == CounterState(0, False, False)


def test_window_close_cancels_ticks_and_detaches(app) -> None:
    view = ViewStub.instances[0]
    view.on_play()

    view.protocols["WM_DELETE_WINDOW"]()

    assert view.destroyed is True
    assert view.pending == {}
    app.store.set_count(5)
    assert view.counts == [0]
