"""Observable value holder used by view-models to broadcast state to views."""

from __future__ import annotations

from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]
Unsubscribe = Callable[[], None]


class Observable(Generic[T]):
    """Current value plus listeners notified synchronously on every ``set``.

    Listeners run in subscription order. Exceptions raised by a listener
    propagate to the caller of ``set``.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: List[Listener[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value
        # Snapshot so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(value)

    def subscribe(self, listener: Listener[T], *, replay: bool = True) -> Unsubscribe:
        """Register ``listener`` and return a callable that removes it.

        Args:
            listener: Called with each new value.
            replay: When true, call ``listener`` with the current value now.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                return

        if replay:
            listener(self._value)
        return unsubscribe

    def subscriber_count(self) -> int:
        return len(self._listeners)

    def as_read_only(self) -> "ReadOnlyObservable[T]":
        return ReadOnlyObservable(self)


class ReadOnlyObservable(Generic[T]):
    """View of an :class:`Observable` without write access."""

    def __init__(self, source: Observable[T]) -> None:
        self._source = source

    @property
    def value(self) -> T:
        return self._source.value

    def subscribe(self, listener: Listener[T], *, replay: bool = True) -> Unsubscribe:
        return self._source.subscribe(listener, replay=replay)


__all__ = ["Listener", "Observable", "ReadOnlyObservable", "Unsubscribe"]
