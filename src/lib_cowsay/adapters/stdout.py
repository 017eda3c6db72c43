"""Plain standard-output writer implementing :class:`WriterPort`."""

from __future__ import annotations

import sys
from typing import TextIO

from lib_cowsay.application.ports.writer import WriterPort


class StdoutWriter(WriterPort):
    """Write text to a stream, defaulting to the current ``sys.stdout``.

    The default stream is looked up on every call so redirection and test
    capture installed after construction still apply.

    Examples
    --------
    >>> from io import StringIO
    >>> buffer = StringIO()
    >>> StdoutWriter(stream=buffer).write("moo\\n")
    >>> buffer.getvalue()
    'moo\\n'
    """

    def __init__(self, *, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, text: str) -> None:
        print(text, end="", file=self._stream if self._stream is not None else sys.stdout)


__all__ = ["StdoutWriter"]
