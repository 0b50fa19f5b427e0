"""Transient notification label."""
from __future__ import annotations

from typing import Optional

import tkinter as tk

from wheeltimer.config import theme


class Toast:
    """Minimal transient notification label."""

    def __init__(self, parent: tk.Misc, palette: dict[str, str]) -> None:
        self.parent = parent
        self._label = tk.Label(
            parent,
            text="",
            bg=palette["COL_TOAST_BG"],
            fg=palette["COL_TOAST_TEXT"],
            font=theme.FONT_LABEL,
            bd=0,
            relief="flat",
            padx=16,
            pady=8,
        )
        self._after_id: Optional[str] = None

    @property
    def visible(self) -> bool:
        return self._after_id is not None

    @property
    def text(self) -> str:
        return str(self._label.cget("text"))

    def show(self, text: str, duration_ms: int = 2000) -> None:
        self._label.configure(text=str(text))
        self._label.place(relx=0.5, rely=0.9, anchor="s")
        self._label.lift()

        if self._after_id:
            try:
                self.parent.after_cancel(self._after_id)
            except tk.TclError:
                pass
        self._after_id = self.parent.after(duration_ms, self.hide)

    def hide(self) -> None:
        try:
            self._label.place_forget()
        except tk.TclError:
            pass
        self._after_id = None


__all__ = ["Toast"]
