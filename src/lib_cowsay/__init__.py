"""Public package surface exposing the cow speech-bubble printers.

``import lib_cowsay`` gives host programs :func:`cowsay` and its two helpers
:func:`print_border` and :func:`print_cow`; :func:`cowsay_text` returns the
same output as a string.
"""

from __future__ import annotations

from .lib_cowsay import cowsay, cowsay_text, print_border, print_cow, summary_info

__all__ = ["cowsay", "cowsay_text", "print_border", "print_cow", "summary_info"]
