"""The fixed cow illustration printed under every speech bubble.

Purpose
-------
Keep the ASCII art in one immutable place so every renderer emits the same
bytes on every call.

Contents
--------
* :data:`COW_LINES` - the five art lines without line terminators.
* :func:`cow_lines` - newline-terminated copy used by the renderers.
"""

from __future__ import annotations

COW_LINES: tuple[str, ...] = (
    "        \\   ^__^",
    "         \\  (oo)\\_______",
    "            (__)\\       )\\/\\",
    "                ||----w |",
    "                ||     ||",
)
#: Art rows in display order; each row is written followed by ``"\n"``.


def cow_lines() -> list[str]:
    """Return the art rows, each terminated with a newline.

    Examples
    --------
    >>> rows = cow_lines()
    >>> len(rows)
    5
    >>> rows[0]
    '        \\\\   ^__^\\n'
    """

    return [f"{line}\n" for line in COW_LINES]


__all__ = ["COW_LINES", "cow_lines"]
