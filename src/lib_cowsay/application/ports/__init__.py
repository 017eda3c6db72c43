"""Protocols describing the outbound boundaries of the library."""

from __future__ import annotations

from .writer import WriterPort

__all__ = ["WriterPort"]
