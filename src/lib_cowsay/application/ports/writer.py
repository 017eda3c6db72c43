"""Writer port describing where rendered text goes.

Purpose
-------
Define the abstraction the printers write through, letting the façade depend
on a narrow protocol instead of a concrete stream.

Contents
--------
* :class:`WriterPort` - runtime-checkable protocol with a single ``write``
  method.

System Role
-----------
Marks the output boundary so adapters (plain stdout, Rich) can plug in without
the rendering code knowing about them.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class WriterPort(Protocol):
    """Receive already-rendered text, byte for byte."""

    def write(self, text: str) -> None:
        """Emit ``text`` without adding or removing characters."""


__all__ = ["WriterPort"]
