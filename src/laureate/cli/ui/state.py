#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from rich.console import Console
from rich.theme import Theme

STYLES = {
    "title": "bold cyan",
    "subtitle": "dim",
    "field": "cyan",
    "missing": "bold yellow",
    "success": "green",
    "warning": "yellow",
    "error": "red",
    "panel": "cyan",
}


def stream_is_terminal(stream) -> bool:
    """Report whether ``stream`` is an interactive terminal.

    The console is built against the interpreter's original streams so test
    runners that swap ``sys.stdout`` still get plain output.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def _console(*, stderr: bool, theme: Theme) -> Console:
    stream = sys.__stderr__ if stderr else sys.__stdout__
    return Console(stderr=stderr, theme=theme, force_terminal=stream_is_terminal(stream))


@dataclass
class UIContext:
    theme: Theme = field(default_factory=lambda: Theme(STYLES))
    console: Console = field(init=False)
    console_err: Console = field(init=False)
    quiet: bool = False

    def __post_init__(self) -> None:
        self.console = _console(stderr=False, theme=self.theme)
        self.console_err = _console(stderr=True, theme=self.theme)


DEFAULT_CONTEXT = UIContext()


def get_context() -> UIContext:
    return DEFAULT_CONTEXT
