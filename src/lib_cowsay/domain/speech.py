"""Pure text rendering of a cow speech bubble.

Purpose
-------
Translate a caller-supplied message into the exact lines the printers emit,
without touching any output stream.

Contents
--------
* :func:`border_line` - horizontal rule sized to a message length.
* :func:`message_line` - the message wrapped in ``< `` and `` >``.
* :class:`Speech` - value object deriving every line from one message.
* :func:`render_speech` - full output (bubble plus art) as a single string.

System Role
-----------
Domain layer: the façade in :mod:`lib_cowsay.lib_cowsay` and the CLI both
format through these helpers, so the byte layout is defined exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass

from .art import cow_lines

BORDER_CHAR = "-"
BORDER_PADDING = 2


def border_line(length: int) -> str:
    """Return one border row for a message of ``length`` characters.

    Negative lengths follow sequence repetition, so ``length + 2 <= 0``
    yields a row without dashes.

    Examples
    --------
    >>> border_line(5)
    ' -------\\n'
    >>> border_line(0)
    ' --\\n'
    >>> border_line(-5)
    ' \\n'
    """

    return " " + BORDER_CHAR * (length + BORDER_PADDING) + "\n"


def message_line(message: str) -> str:
    """Return the bracketed message row.

    Examples
    --------
    >>> message_line("Hello")
    '< Hello >\\n'
    """

    return f"< {message} >\n"


def ensure_message(message: object) -> str:
    """Reject anything that is not text before rendering starts."""

    if not isinstance(message, str):
        raise TypeError(f"message must be str, not {type(message).__name__}")
    return message


@dataclass(slots=True, frozen=True)
class Speech:
    """One message and the bubble lines derived from it.

    Attributes
    ----------
    message:
        Text shown inside the bubble; its length sizes both borders.
    """

    message: str

    def __post_init__(self) -> None:
        ensure_message(self.message)

    @property
    def length(self) -> int:
        return len(self.message)

    @property
    def border(self) -> str:
        return border_line(self.length)

    @property
    def message_line(self) -> str:
        return message_line(self.message)

    @property
    def lines(self) -> list[str]:
        """Return all emitted rows in order, each ending with a newline.

        Examples
        --------
        >>> Speech("Hi").lines[:3]
        [' ----\\n', '< Hi >\\n', ' ----\\n']
        """

        return [self.border, self.message_line, self.border, *cow_lines()]

    @property
    def text(self) -> str:
        return "".join(self.lines)


def render_speech(message: str) -> str:
    """Return the complete output for ``message`` as one string."""

    return Speech(message).text


__all__ = [
    "BORDER_CHAR",
    "BORDER_PADDING",
    "Speech",
    "border_line",
    "ensure_message",
    "message_line",
    "render_speech",
]
