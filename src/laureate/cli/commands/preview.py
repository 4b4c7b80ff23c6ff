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

from pathlib import Path
from typing import Literal

import typer

from ...binding.preview import preview_document
from ...render.service import RenderService
from ..core.common import (
    _ctx_flags,
    _load_config,
    _load_records,
    _load_template,
    _resolver,
    _run_cli,
)
from ..ui import console

OutputFormat = Literal["html", "pdf"]

_PREVIEW_HELP = (
    "Render a template against one data record.\n\n"
    "Missing values show as placeholders (or [required: ...] markers); nothing is\n"
    "validated. Without --data or --sample the template renders in design view.\n\n"
    "Examples:\n"
    "  laureate preview template_18c2f_ab12cd34 --sample -o preview.html\n"
    "  laureate preview ./completion.json --data jane.json --format pdf -o jane.pdf\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_PREVIEW_HELP)(preview)


def preview(
    ctx: typer.Context,
    template: str = typer.Argument(..., help="Template id or path to a template .json file."),
    data: str | None = typer.Option(
        None,
        "--data",
        "-d",
        help="JSON file with the record; an array uses its first entry.",
        rich_help_panel="Inputs",
    ),
    sample: bool = typer.Option(
        False,
        "--sample",
        help="Use the built-in sample record.",
        rich_help_panel="Inputs",
    ),
    format: OutputFormat = typer.Option(
        "html",
        "--format",
        "-f",
        help="Output format.",
        rich_help_panel="Outputs",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (defaults to preview.<format>).",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value, quiet_value = _ctx_flags(ctx)

    def _run() -> None:
        config = _load_config(ctx)
        loaded = _load_template(config, template)
        document = loaded.document
        if data is not None or sample:
            record = _load_records(data, sample=sample)[0]
            document = preview_document(document, record, _resolver(config))
        output_path = output or Path.cwd() / f"preview.{format}"
        RenderService.from_config(config).write(document, output_path, fmt=format)
        if not quiet_value:
            console.print(str(output_path))

    _run_cli(_run, debug=debug_value)
