"""ViewModel package for counter UI state.

Call context:
    ``tally/app/main.py`` and ``tally/web_ui/runtime.py`` create one
    :class:`CounterStore` and subscribe their views to its observables.

Dependencies:
    Domain value objects only. Timers and command orchestration live in
    ``tally.app``.
"""

from .counter_store import CounterStore
from .observable import Listener, Observable, ReadOnlyObservable

__all__ = ["CounterStore", "Listener", "Observable", "ReadOnlyObservable"]
