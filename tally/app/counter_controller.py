"""Play/pause/reset command handling for the counter.

The controller owns the single increment task. Each tick is a one-shot
timer on the UI event loop, so store mutations from commands and ticks are
serialised without locks.
"""

from __future__ import annotations

import itertools
import logging
from typing import Optional

from ..domain.counter_state import CounterSettings
from ..viewmodels.counter_store import CounterStore
from .tick_scheduler import TickScheduler

INCREMENT_CHANNEL = "increment"

_task_ids = itertools.count(1)


class IncrementTask:
    """Handle for one play cycle. Never reused once inactive."""

    def __init__(self) -> None:
        self.task_id = next(_task_ids)
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False

    def __repr__(self) -> str:
        state = "active" if self._active else "done"
        return f"IncrementTask(id={self.task_id}, {state})"


class CounterController:
    """Mediates play/reset commands against a :class:`CounterStore`.

    Call chain:
        Views call ``on_play`` / ``on_reset``; the scheduler calls back into
        ``_on_tick`` once per interval while a task is active.
    """

    def __init__(
        self,
        store: CounterStore,
        scheduler: TickScheduler,
        settings: Optional[CounterSettings] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self.store = store
        self.settings = settings or CounterSettings()
        self._scheduler = scheduler
        self._task: Optional[IncrementTask] = None

    @property
    def task(self) -> Optional[IncrementTask]:
        return self._task

    @property
    def is_running(self) -> bool:
        return self._task is not None and self._task.is_active

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def on_play(self) -> None:
        """Start a fresh increment task, or pause the running one."""
        start = not self.store.is_playing.value
        self._cancel_task()

        if not start:
            self.store.set_playing(False)
            self._log.info("Paused at %d", self.store.count.value)
            return

        task = IncrementTask()
        self._task = task
        self.store.set_playing(True)
        self.store.set_reset_visible(True)
        self._log.info("Started %r at %d", task, self.store.count.value)
        self._advance(task)

    def on_reset(self) -> None:
        """Zero the counter and hide reset; ignored before the first play."""
        if self._task is None:
            self._log.debug("Reset ignored: no play cycle has started yet")
            return

        self._cancel_task()
        self.store.set_playing(False)
        self.store.set_count()
        self.store.set_reset_visible(False)
        self._log.info("Counter reset")

    def shutdown(self) -> None:
        """Cancel any pending tick without touching the store."""
        self._cancel_task()
        self._scheduler.cancel_all()

    # ------------------------------------------------------------------
    # Tick loop
    # ------------------------------------------------------------------
    def _advance(self, task: IncrementTask) -> None:
        if not task.is_active:
            return
        if self.store.count.value < self.settings.max_count:
            self._scheduler.schedule(
                INCREMENT_CHANNEL,
                self.settings.tick_interval_ms,
                lambda: self._on_tick(task),
            )
            return
        task.cancel()
        self.store.set_playing(False)
        self._log.info("%r reached %d and stopped", task, self.store.count.value)

    def _on_tick(self, task: IncrementTask) -> None:
        if not task.is_active:
            return
        self.store.increment()
        self._log.debug("%r tick -> %d", task, self.store.count.value)
        self._advance(task)

    def _cancel_task(self) -> None:
        if self._task is not None and self._task.is_active:
            self._task.cancel()
            self._log.debug("Canceled %r", self._task)
        self._scheduler.cancel(INCREMENT_CHANNEL)


__all__ = ["CounterController", "INCREMENT_CHANNEL", "IncrementTask"]
