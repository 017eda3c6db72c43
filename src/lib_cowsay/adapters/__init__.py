"""Concrete adapters implementing the application ports."""

from __future__ import annotations

from .console import RichConsoleWriter
from .stdout import StdoutWriter

__all__ = ["RichConsoleWriter", "StdoutWriter"]
