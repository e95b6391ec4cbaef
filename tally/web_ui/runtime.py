"""NiceGUI runtime orchestration for Tally.

This module composes the counter view-model and controller for the web
runtime. Ticks run as one-shot NiceGUI timers on the server loop, so the
store stays single-threaded.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from nicegui import app

from tally.app.counter_controller import CounterController
from tally.app.tick_scheduler import CancelFn, ScheduleFn, TickScheduler
from tally.domain.counter_state import CounterSettings, CounterState
from tally.viewmodels.counter_store import CounterStore


LOGGER = logging.getLogger(__name__)


def _start_timer(delay_ms: int, callback: Callable[[], None]) -> Any:
    """Run ``callback`` once after ``delay_ms`` on a UI-independent timer."""
    return app.timer(delay_ms / 1000.0, callback, once=True)


def _cancel_timer(timer: Any) -> None:
    timer.cancel()


class PageBinding:
    """Keeps one page's render hooks subscribed while its socket is connected."""

    def __init__(
        self,
        runtime: "WebRuntime",
        *,
        on_count: Callable[[int], None],
        on_playing: Callable[[bool], None],
        on_reset_visible: Callable[[bool], None],
    ) -> None:
        self._runtime = runtime
        self._hooks = dict(
            on_count=on_count,
            on_playing=on_playing,
            on_reset_visible=on_reset_visible,
        )
        self._detach: Optional[Callable[[], None]] = None

    @property
    def attached(self) -> bool:
        return self._detach is not None

    def attach(self) -> None:
        """Subscribe the hooks; replays current values so the page resyncs."""
        if self._detach is None:
            self._detach = self._runtime.bind(**self._hooks)

    def detach(self) -> None:
        if self._detach is not None:
            self._detach()
            self._detach = None


class WebRuntime:
    """Process-wide counter shared by every connected browser tab."""

    def __init__(
        self,
        settings: Optional[CounterSettings] = None,
        *,
        schedule: ScheduleFn = _start_timer,
        cancel: CancelFn = _cancel_timer,
    ) -> None:
        self.store = CounterStore()
        self.scheduler = TickScheduler(schedule, cancel)
        self.controller = CounterController(self.store, self.scheduler, settings)

    def on_play(self) -> None:
        self.controller.on_play()

    def on_reset(self) -> None:
        self.controller.on_reset()

    def state(self) -> CounterState:
        return self.store.snapshot()

    def bind(
        self,
        *,
        on_count: Callable[[int], None],
        on_playing: Callable[[bool], None],
        on_reset_visible: Callable[[bool], None],
    ) -> Callable[[], None]:
        """Subscribe one page's render hooks; returns a detach callable."""
        unsubscribers: List[Callable[[], None]] = [
            self.store.count.subscribe(on_count),
            self.store.is_playing.subscribe(on_playing),
            self.store.is_reset_visible.subscribe(on_reset_visible),
        ]

        def detach() -> None:
            for unsubscribe in unsubscribers:
                unsubscribe()
            unsubscribers.clear()

        LOGGER.debug("Page bound to counter runtime")
        return detach

    def bind_client(
        self,
        client: Any,
        *,
        on_count: Callable[[int], None],
        on_playing: Callable[[bool], None],
        on_reset_visible: Callable[[bool], None],
    ) -> PageBinding:
        """Bind a page for the lifetime of its client connection.

        Socket drops detach the hooks; a reconnect within NiceGUI's
        ``reconnect_timeout`` keeps the same page, so the hooks re-attach.
        """
        binding = PageBinding(
            self,
            on_count=on_count,
            on_playing=on_playing,
            on_reset_visible=on_reset_visible,
        )
        binding.attach()
        client.on_connect(binding.attach)
        client.on_disconnect(binding.detach)
        return binding

    def shutdown(self) -> None:
        self.controller.shutdown()


__all__ = ["PageBinding", "WebRuntime"]
