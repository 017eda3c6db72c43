"""Rich-powered console writer implementing :class:`WriterPort`.

Purpose
-------
Let the CLI print the speech bubble through a Rich console so a single style
can colour the whole output while the characters stay byte-identical to
:class:`~lib_cowsay.adapters.stdout.StdoutWriter`.

Contents
--------
* :class:`RichConsoleWriter` - adapter used by ``lib_cowsay say --style``.

System Role
-----------
Human-facing sink. Rich decides whether and how to colour (terminal
detection, ``no_color``, colour system); the text itself is written to the
console's file without passing through :class:`rich.text.Text`, which would
expand tabs and drop control characters.
"""

from __future__ import annotations

from rich.console import COLOR_SYSTEMS, Console
from rich.style import Style

from lib_cowsay.application.ports.writer import WriterPort


class RichConsoleWriter(WriterPort):
    """Write text to a Rich console, optionally wrapping each line in one style."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        style: str | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the writer with colour toggles and an optional style."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color)
        self._style = Style.parse(style) if style else None

    @property
    def console(self) -> Console:
        return self._console

    def write(self, text: str) -> None:
        """Write ``text`` verbatim, adding style escape codes around each line.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO())
        >>> RichConsoleWriter(console=console).write("< [b]moo[/b]\\t>\\n")
        >>> console.file.getvalue()
        '< [b]moo[/b]\\t>\\n'
        """
        self._console.file.write(self._stylize(text))

    def _stylize(self, text: str) -> str:
        color_system = COLOR_SYSTEMS.get(self._console.color_system or "")
        if self._style is None or color_system is None:
            return text
        style = self._style.without_color if self._console.no_color else self._style
        return "".join(
            style.render(line, color_system=color_system) + newline
            for line, newline in _split_keep_newline(text)
        )


def _split_keep_newline(text: str) -> list[tuple[str, str]]:
    """Split ``text`` into ``(content, "\\n" or "")`` pairs."""

    parts = text.split("\n")
    pairs = [(part, "\n") for part in parts[:-1]]
    if parts[-1]:
        pairs.append((parts[-1], ""))
    return pairs


__all__ = ["RichConsoleWriter"]
