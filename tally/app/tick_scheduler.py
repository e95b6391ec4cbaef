"""Scheduler helper that owns one-shot timers for UI-driven tick loops.

The host passes Tk ``after`` and ``after_cancel`` callables (or asyncio
``call_later`` wrappers) into this class so timer state is tracked in one
place and canceled safely when a task stops or the window closes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

ScheduleFn = Callable[[int, Callable[[], None]], Any]
CancelFn = Callable[[Any], None]


@dataclass
class TimerHandle:
    """Timer token associated with a single channel.

    Attributes:
        channel: Channel key (for example ``increment``).
        token: Token returned by the host scheduler implementation.
    """
    channel: str
    token: Any


class TickScheduler:
    """Manage per-channel one-shot timers using a host scheduler."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions and initialize handle registry.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(token)``.
        """
        self._log = logging.getLogger(__name__)
        self._schedule = schedule
        self._cancel = cancel
        self._handles: Dict[str, TimerHandle] = {}

    def schedule(self, channel: str, delay_ms: int, callback: Callable[[], None]) -> None:
        """Schedule or reschedule the next callback for a channel.

        Args:
            channel: Timer channel key.
            delay_ms: Delay in milliseconds before callback execution.
            callback: Callback to execute once.
        """
        delay = max(1, int(delay_ms))
        self.cancel(channel)

        holder: Dict[str, TimerHandle] = {}

        def fire() -> None:
            handle = holder.get("handle")
            if handle is not None and self._handles.get(channel) is handle:
                del self._handles[channel]
            callback()

        token = self._schedule(delay, fire)
        handle = TimerHandle(channel=channel, token=token)
        holder["handle"] = handle
        self._handles[channel] = handle
        self._log.debug("Scheduled %s in %d ms", channel, delay)

    def cancel(self, channel: str) -> None:
        """Cancel a pending callback for a channel.

        Args:
            channel: Timer channel key to cancel.
        """
        handle = self._handles.pop(channel, None)
        if not handle:
            return
        self._cancel(handle.token)
        self._log.debug("Canceled pending %s timer", channel)

    def cancel_all(self) -> None:
        """Cancel all pending callbacks across all channels."""
        for channel in list(self._handles.keys()):
            self.cancel(channel)

    def handle_for(self, channel: str) -> Optional[TimerHandle]:
        """Return the current handle for a channel, if scheduled."""
        return self._handles.get(channel)


__all__ = ["TickScheduler", "TimerHandle"]
