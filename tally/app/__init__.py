"""Application composition layer.

Controllers in this package own timers and command handling, and wire the
counter view-model into the Tkinter desktop window.
"""
