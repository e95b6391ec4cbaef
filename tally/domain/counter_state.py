"""Value objects describing the counter and its tick policy."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_MAX_COUNT = 10
DEFAULT_TICK_INTERVAL_MS = 1000


@dataclass(frozen=True)
class CounterState:
    """Immutable snapshot of the three observable counter values."""

    count: int = 0
    is_playing: bool = False
    is_reset_visible: bool = False


@dataclass(frozen=True)
class CounterSettings:
    """Tick policy for the increment task.

    Attributes:
        max_count: Upper bound where the task stops itself.
        tick_interval_ms: Wall-clock delay before each increment.
    """

    max_count: int = DEFAULT_MAX_COUNT
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS

    def __post_init__(self) -> None:
        for name in ("max_count", "tick_interval_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}.")
        if self.max_count < 0:
            raise ValueError("max_count must be >= 0.")
        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be >= 1.")


__all__ = ["CounterSettings", "CounterState", "DEFAULT_MAX_COUNT", "DEFAULT_TICK_INTERVAL_MS"]
