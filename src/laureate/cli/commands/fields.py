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

import typer

from ...binding.catalog import AVAILABLE_DATA_FIELDS, fields_by_section
from ..core.common import _ctx_flags, _run_cli
from ..ui import build_table, console

_FIELDS_HELP = (
    "List the data fields a template can bind to.\n\n"
    "Examples:\n"
    "  laureate fields\n"
    "  laureate fields --section certificate\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_FIELDS_HELP)(fields)


def fields(
    ctx: typer.Context,
    section: str | None = typer.Option(
        None,
        "--section",
        "-s",
        help="Only this section (user, course, certificate, institution, signatories, custom).",
        rich_help_panel="Filters",
    ),
) -> None:
    debug_value, quiet_value = _ctx_flags(ctx)

    def _run() -> None:
        bindings = AVAILABLE_DATA_FIELDS if section is None else fields_by_section(section)
        if quiet_value:
            for binding in bindings:
                console.print(binding.field_path)
            return
        rows = [
            (
                binding.field_path,
                binding.label,
                binding.value_type.value,
                binding.format_pattern or "",
                "yes" if binding.required else "",
            )
            for binding in bindings
        ]
        console.print(build_table(("Path", "Label", "Type", "Format", "Required"), rows))

    _run_cli(_run, debug=debug_value)
