"""Static package metadata surfaced by the CLI banner and ``--version``.

Keep :data:`version` in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Callable

name = "lib_cowsay"
title = "Print a message in a bordered speech bubble above an ASCII cow"
version = "1.0.0"
author = "lib_cowsay maintainers"
shell_command = "lib_cowsay"

_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", name),
    ("title", title),
    ("version", version),
    ("author", author),
    ("shell_command", shell_command),
)


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner, one field per line.

    Parameters
    ----------
    writer:
        Callable receiving each chunk of text; defaults to writing to stdout
        without an extra newline.

    Examples
    --------
    >>> chunks: list[str] = []
    >>> print_info(writer=chunks.append)
    >>> chunks[0]
    'Info for lib_cowsay:\\n\\n'
    """

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    emit(f"Info for {name}:\n\n")
    pad = max(len(key) for key, _ in _FIELDS)
    for key, value in _FIELDS:
        emit(f"    {key:<{pad}} = {value}\n")
