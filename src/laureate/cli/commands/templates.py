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

from ..core.common import _ctx_flags, _load_config, _run_cli, _template_store
from ..ui import build_table, console

_TEMPLATES_HELP = (
    "List saved templates, or delete one.\n\n"
    "Examples:\n"
    "  laureate templates\n"
    "  laureate templates --delete template_18c2f_ab12cd34\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_TEMPLATES_HELP)(templates)


def templates(
    ctx: typer.Context,
    delete: str | None = typer.Option(
        None,
        "--delete",
        help="Delete the template with this id.",
        rich_help_panel="Behavior",
    ),
) -> None:
    debug_value, quiet_value = _ctx_flags(ctx)

    def _run() -> None:
        store = _template_store(_load_config(ctx))
        if delete:
            store.delete(delete)
            if not quiet_value:
                console.print(f"Deleted {delete}")
            return
        summaries = store.list()
        if quiet_value:
            for summary in summaries:
                console.print(summary.id)
            return
        if not summaries:
            console.print(f"[subtitle]No templates in {store.root}[/subtitle]")
            return
        rows = [
            (summary.id, summary.name, summary.certificate_type, summary.updated_at)
            for summary in summaries
        ]
        console.print(build_table(("ID", "Name", "Type", "Updated"), rows))

    _run_cli(_run, debug=debug_value)
