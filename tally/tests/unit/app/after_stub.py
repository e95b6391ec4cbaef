from __future__ import annotations

from typing import Callable, Dict, List, Tuple


class AfterStub:
    """Stand-in for Tk ``after``/``after_cancel`` with manual firing."""

    def __init__(self) -> None:
        self.pending: Dict[str, Tuple[int, Callable[[], None]]] = {}
        self.after_calls: List[Tuple[int, Callable[[], None]]] = []
        self.after_cancelled: List[str] = []

    def after(self, delay: int, callback: Callable[[], None]) -> str:
        token = f"after-{len(self.after_calls) + 1}"
        self.after_calls.append((delay, callback))
        self.pending[token] = (delay, callback)
        return token

    def after_cancel(self, token: str) -> None:
        self.after_cancelled.append(token)
        self.pending.pop(token, None)

    def fire_next(self) -> int:
        token = next(iter(self.pending))
        delay, callback = self.pending.pop(token)
        callback()
        return delay


__all__ = ["AfterStub"]
