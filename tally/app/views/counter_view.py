"""
CounterView
-----------
Tkinter main window for the counter. This file contains **only View code**:
no timers, no state. It exposes callback hooks that are connected to the
controller, and setters that the app binds to the store's observables.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import font as tkfont
from tkinter import ttk
from typing import Callable, Optional


class CounterView(tk.Tk):
    """Top-level window: large count label, Play/Pause and Reset buttons."""

    OnVoid = Optional[Callable[[], None]]

    def __init__(self, *, on_play: OnVoid = None, on_reset: OnVoid = None) -> None:
        super().__init__()

        self.title("Tally")
        self.geometry("360x320")
        self.minsize(240, 220)

        self._on_play = on_play
        self._on_reset = on_reset

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        content = ttk.Frame(self)
        content.grid(row=0, column=0)

        self._count_var = tk.StringVar(value="0")
        big = tkfont.Font(size=72, weight="bold")
        ttk.Label(content, textvariable=self._count_var, font=big, anchor="center").grid(
            row=0, column=0, columnspan=2, pady=(0, 12)
        )

        self._play_text = tk.StringVar(value="Play")
        self._play_btn = ttk.Button(content, textvariable=self._play_text, command=self._play)
        self._play_btn.grid(row=1, column=0, padx=6)

        self._reset_btn = ttk.Button(content, text="Reset", command=self._reset)
        self._reset_btn.grid(row=1, column=1, padx=6)
        self._reset_btn.grid_remove()

        self.bind("<space>", lambda e: self._play())
        self.bind("<Escape>", lambda e: self._reset())

    # ------------------------------------------------------------------
    # Render hooks
    # ------------------------------------------------------------------
    def set_count(self, value: int) -> None:
        self._count_var.set(str(value))

    def set_playing(self, playing: bool) -> None:
        self._play_text.set("Pause" if playing else "Play")

    def set_reset_visible(self, visible: bool) -> None:
        if visible:
            self._reset_btn.grid()
        else:
            self._reset_btn.grid_remove()

    # ------------------------------------------------------------------
    def _play(self) -> None:
        if self._on_play:
            self._on_play()

    def _reset(self) -> None:
        # Hidden button still owns the shortcut; the controller ignores
        # resets before the first play.
        if self._on_reset:
            self._on_reset()
