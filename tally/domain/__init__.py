"""Domain package exports for counter value objects."""

from .counter_state import (
    DEFAULT_MAX_COUNT,
    DEFAULT_TICK_INTERVAL_MS,
    CounterSettings,
    CounterState,
)

__all__ = [
    "DEFAULT_MAX_COUNT",
    "DEFAULT_TICK_INTERVAL_MS",
    "CounterSettings",
    "CounterState",
]
