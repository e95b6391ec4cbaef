from __future__ import annotations

from ..domain.counter_state import CounterState
from .observable import Observable, ReadOnlyObservable


class CounterStore:
    """Keeps counter UI state as observables, no timers here.

    Setters perform no bounds checks; the controller keeps ``count``
    within its configured range.
    """

    def __init__(self) -> None:
        self._count: Observable[int] = Observable(0)
        self._is_playing: Observable[bool] = Observable(False)
        self._is_reset_visible: Observable[bool] = Observable(False)

        self.count: ReadOnlyObservable[int] = self._count.as_read_only()
        self.is_playing: ReadOnlyObservable[bool] = self._is_playing.as_read_only()
        self.is_reset_visible: ReadOnlyObservable[bool] = self._is_reset_visible.as_read_only()

    def set_count(self, value: int = 0) -> None:
        self._count.set(int(value))

    def increment(self) -> None:
        self._count.set(self._count.value + 1)

    def set_playing(self, flag: bool) -> None:
        self._is_playing.set(bool(flag))

    def set_reset_visible(self, flag: bool) -> None:
        self._is_reset_visible.set(bool(flag))

    def snapshot(self) -> CounterState:
        """Return the current values as an immutable :class:`CounterState`."""
        return CounterState(
            count=self._count.value,
            is_playing=self._is_playing.value,
            is_reset_visible=self._is_reset_visible.value,
        )


__all__ = ["CounterStore"]
