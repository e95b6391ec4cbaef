from __future__ import annotations

import pytest

tk = pytest.importorskip("tkinter")

from tally.app.views.counter_view import CounterView


@pytest.fixture()
def view():
    calls = []
    try:
        win = CounterView(on_play=lambda: calls.append("play"), on_reset=lambda: calls.append("reset"))
    except tk.TclError:
        pytest.skip("no display available")
    win.calls = calls
    yield win
    win.destroy()


def test_reset_button_hidden_until_visible(view) -> None:
    assert view._reset_btn.winfo_manager() == ""

    view.set_reset_visible(True)
    assert view._reset_btn.winfo_manager() == "grid"

    view.set_reset_visible(False)
    assert view._reset_btn.winfo_manager() == ""


def test_play_label_tracks_playing_state(view) -> None:
    assert view._play_text.get() == "Play"

    view.set_playing(True)
    assert view._play_text.get() == "Pause"

    view.set_playing(False)
    assert view._play_text.get() == "Play"


def test_count_label_and_button_callbacks(view) -> None:
    view.set_count(7)
    assert view._count_var.get() == "7"

    view._play_btn.invoke()
    view._reset_btn.invoke()
    assert view.calls == ["play", "reset"]
