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

from ...binding.resolver import validate_required
from ..core.common import _ctx_flags, _load_config, _load_records, _load_template, _run_cli
from ..ui import build_table, console

_VALIDATE_HELP = (
    "Check data records against a template's required fields.\n\n"
    "Every record is checked and every missing field reported. Exits with status 1\n"
    "when any record is incomplete.\n\n"
    "Examples:\n"
    "  laureate validate template_18c2f_ab12cd34 --data students.json\n"
    "  laureate validate ./completion.json --sample\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_VALIDATE_HELP)(validate)


def validate(
    ctx: typer.Context,
    template: str = typer.Argument(..., help="Template id or path to a template .json file."),
    data: str | None = typer.Option(
        None,
        "--data",
        "-d",
        help="JSON file with one record (object) or many (array).",
        rich_help_panel="Inputs",
    ),
    sample: bool = typer.Option(
        False,
        "--sample",
        help="Use the built-in sample record.",
        rich_help_panel="Inputs",
    ),
) -> None:
    debug_value, quiet_value = _ctx_flags(ctx)

    def _run() -> int:
        config = _load_config(ctx)
        loaded = _load_template(config, template)
        records = _load_records(data, sample=sample)
        required = loaded.all_required_fields()
        failures: list[tuple[int, tuple[str, ...]]] = []
        for index, record in enumerate(records):
            report = validate_required(record, required)
            if not report.all_present:
                failures.append((index, report.missing))
        if not failures:
            if not quiet_value:
                console.print(f"[success]All {len(records)} record(s) complete.[/success]")
            return 0
        if not quiet_value:
            rows = [
                (index, f"[missing]{', '.join(missing)}[/missing]")
                for index, missing in failures
            ]
            console.print(build_table(("Record", "Missing fields"), rows))
            console.print(
                f"[error]{len(failures)} of {len(records)} record(s) incomplete.[/error]"
            )
        return 1

    _run_cli(_run, debug=debug_value)
