"""Clipboard boundary for the finished prompt."""

from __future__ import annotations

import pyperclip

from .errors import PromptGenError


def copy_to_clipboard(text: str) -> None:
    """Place ``text`` on the system clipboard."""
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise PromptGenError(
            f"Clipboard copy failed: {exc}. Re-run with --stdout to print the prompt instead."
        ) from exc
