"""Domain value objects and pure renderers for the cow speech bubble."""

from __future__ import annotations

from .art import COW_LINES, cow_lines
from .speech import Speech, border_line, ensure_message, message_line, render_speech

__all__ = [
    "COW_LINES",
    "Speech",
    "border_line",
    "cow_lines",
    "ensure_message",
    "message_line",
    "render_speech",
]
