"""Public façade printing a message in a bordered bubble above a cow.

Purpose
-------
Expose the three printers host programs link against: :func:`print_border`,
:func:`print_cow` and :func:`cowsay`, plus :func:`cowsay_text` for callers who
want the rendered string instead of a side effect.

Contents
--------
* Printers: :func:`print_border`, :func:`print_cow`, :func:`cowsay`.
* Pure helper: :func:`cowsay_text`.
* Metadata: :func:`summary_info` used by the CLI entry point.

System Role
-----------
Composition point between the domain renderers (:mod:`lib_cowsay.domain`)
and the writer adapters (:mod:`lib_cowsay.adapters`). Formatting decisions
stay in the domain; this module only decides where the text goes.
"""

from __future__ import annotations

import logging

from .adapters import StdoutWriter
from .application.ports import WriterPort
from .domain import border_line, cow_lines, ensure_message, message_line, render_speech

logger = logging.getLogger(__name__)


def _resolve_writer(writer: WriterPort | None) -> WriterPort:
    return writer if writer is not None else StdoutWriter()


def print_border(length: int, *, writer: WriterPort | None = None) -> None:
    """Print one border row sized for a message of ``length`` characters.

    What
    ----
    Writes a space, ``length + 2`` dashes and a newline.

    Examples
    --------
    >>> print_border(3)
     -----
    """

    _resolve_writer(writer).write(border_line(length))


def print_cow(*, writer: WriterPort | None = None) -> None:
    """Print the fixed five-line cow illustration.

    Examples
    --------
    >>> print_cow()  # doctest: +NORMALIZE_WHITESPACE
            \\   ^__^
             \\  (oo)\\_______
                (__)\\       )\\/\\
                    ||----w |
                    ||     ||
    """

    target = _resolve_writer(writer)
    for line in cow_lines():
        target.write(line)


def cowsay(message: str, *, writer: WriterPort | None = None) -> None:
    """Print ``message`` inside a border followed by the cow.

    Why
    ---
    This is the entry point other programs call; it keeps the historical
    order of writes (border, message, border, art) so partial output on a
    failing stream matches what callers expect.

    Parameters
    ----------
    message:
        Text to display. Its length sizes both borders.
    writer:
        Destination for the output; defaults to standard output.

    Raises
    ------
    TypeError
        When ``message`` is not a :class:`str`; nothing is written.

    Examples
    --------
    >>> cowsay("Hello")  # doctest: +NORMALIZE_WHITESPACE
     -------
    < Hello >
     -------
            \\   ^__^
             \\  (oo)\\_______
                (__)\\       )\\/\\
                    ||----w |
                    ||     ||
    """

    text = ensure_message(message)
    length = len(text)
    logger.debug("cowsay message length=%d", length)
    target = _resolve_writer(writer)
    print_border(length, writer=target)
    target.write(message_line(text))
    print_border(length, writer=target)
    print_cow(writer=target)


def cowsay_text(message: str) -> str:
    """Return exactly what :func:`cowsay` would print for ``message``.

    Examples
    --------
    >>> cowsay_text("")[:13]
    ' --\\n<  >\\n --\\n'
    """

    return render_speech(message)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Captures the output of :func:`lib_cowsay.__init__conf__.print_info` and
    returns it as a single string.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = [
    "cowsay",
    "cowsay_text",
    "print_border",
    "print_cow",
    "summary_info",
]
