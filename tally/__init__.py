"""Reactive play/pause/reset counter sample (MVVM)."""

__version__ = "0.1.0"
