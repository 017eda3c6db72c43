from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console


@pytest.fixture
def record_console() -> Console:
    """Rich console writing into memory and recording for ``export_text``."""

    return Console(file=StringIO(), record=True, width=120, color_system=None)


@pytest.fixture
def color_console() -> Console:
    """Rich console that always emits ANSI colour codes into memory."""

    return Console(file=StringIO(), force_terminal=True, color_system="standard", no_color=False, width=120)
