"""Light and dark palettes for the timer screen."""
from __future__ import annotations

from copy import deepcopy

import tkinter as tk
from tkinter import ttk

_THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "COL_BG": "#121212",
        "COL_BAR": "#1F1B24",
        "COL_TEXT": "#F5F5F5",
        "COL_MUTED": "#8A8A8A",
        "COL_ACCENT": "#BB86FC",
        "COL_BORDER": "#3A3A3A",
        "COL_DISABLED": "#555555",
        "COL_TOAST_BG": "#E0E0E0",
        "COL_TOAST_TEXT": "#121212",
    },
    "light": {
        "COL_BG": "#FFFFFF",
        "COL_BAR": "#6200EE",
        "COL_TEXT": "#1A1A1A",
        "COL_MUTED": "#6B6B6B",
        "COL_ACCENT": "#6200EE",
        "COL_BORDER": "#C8C8C8",
        "COL_DISABLED": "#B0B0B0",
        "COL_TOAST_BG": "#323232",
        "COL_TOAST_TEXT": "#FFFFFF",
    },
}

FONT_TITLE = ("DejaVu Sans", 28, "bold")
FONT_DIGITS = ("DejaVu Sans Mono", 40, "bold")
FONT_LABEL = ("DejaVu Sans", 12)
FONT_BUTTON = ("DejaVu Sans", 12, "bold")


def get_palette(name: str) -> dict[str, str]:
    """Return a copy of the palette for ``name``, falling back to ``dark``."""

    return deepcopy(_THEMES.get(name, _THEMES["dark"]))


def _configure_styles(root: tk.Misc, palette: dict[str, str]) -> None:
    style = ttk.Style(root)
    try:
        style.theme_use("clam")
    except tk.TclError:
        pass

    bg = palette["COL_BG"]
    text = palette["COL_TEXT"]
    accent = palette["COL_ACCENT"]

    style.configure("TFrame", background=bg)
    style.configure("Bar.TFrame", background=palette["COL_BAR"])
    style.configure("TLabel", background=bg, foreground=text)
    style.configure(
        "Bar.TLabel",
        background=palette["COL_BAR"],
        foreground="#FFFFFF",
        font=FONT_TITLE,
    )
    style.configure(
        "Timer.TButton",
        background=bg,
        foreground=accent,
        bordercolor=accent,
        focusthickness=1,
        padding=(12, 8),
        font=FONT_BUTTON,
    )
    style.map(
        "Timer.TButton",
        foreground=[("disabled", palette["COL_DISABLED"])],
        bordercolor=[("disabled", palette["COL_BORDER"])],
    )


def apply_theme(root: tk.Misc, name: str = "dark") -> dict[str, str]:
    """Apply the palette ``name`` to ``root`` and return it."""

    palette = get_palette(name)
    try:
        root.configure(bg=palette["COL_BG"])
    except tk.TclError:
        pass
    _configure_styles(root, palette)
    return palette


__all__ = [
    "FONT_BUTTON",
    "FONT_DIGITS",
    "FONT_LABEL",
    "FONT_TITLE",
    "apply_theme",
    "get_palette",
]
