# tally/app/main.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..domain.counter_state import CounterSettings
from ..utils import logging as logging_utils
from ..viewmodels.counter_store import CounterStore
from .counter_controller import CounterController
from .tick_scheduler import TickScheduler
from .views.counter_view import CounterView


class App:
    """Bootstrap: wire CounterView <-> CounterStore and the tick controller."""

    def __init__(self, settings: Optional[CounterSettings] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.store = CounterStore()

        self.win = CounterView(on_play=self._on_play, on_reset=self._on_reset)
        self.scheduler = TickScheduler(self.win.after, self.win.after_cancel)
        self.controller = CounterController(self.store, self.scheduler, settings)

        self._unsubscribers: List[Callable[[], None]] = [
            self.store.count.subscribe(self.win.set_count),
            self.store.is_playing.subscribe(self.win.set_playing),
            self.store.is_reset_visible.subscribe(self.win.set_reset_visible),
        ]
        self.win.protocol("WM_DELETE_WINDOW", self.close)
        self._log.debug("Desktop app ready with %s", self.controller.settings)

    def _on_play(self) -> None:
        self.controller.on_play()

    def _on_reset(self) -> None:
        self.controller.on_reset()

    def close(self) -> None:
        self.controller.shutdown()
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()
        self.win.destroy()


def main() -> None:
    logging_utils.configure_root()
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
