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

import json
from pathlib import Path
from typing import Literal

import typer

from ...document.codec import template_to_dict
from ...document.model import create_page
from ...document.template import create_template
from ..core.common import _ctx_flags, _load_config, _run_cli, _template_store
from ..ui import console, print_completion_panel

CertificateTypeOption = Literal["completion", "achievement", "participation", "honor", "graduation"]

_NEW_HELP = (
    "Create a certificate template.\n\n"
    "By default the template gets a starter layout (heading, recipient name, course,\n"
    "issue date, verification QR code and a signature box) and is saved to the\n"
    "template store.\n\n"
    "Examples:\n"
    '  laureate new "Course Completion"\n'
    '  laureate new "Honor Roll" --type honor --blank\n'
    '  laureate new "Workshop" -o workshop.json\n'
)


def register(app: typer.Typer) -> None:
    app.command(help=_NEW_HELP)(new)


def new(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Template name."),
    certificate_type: CertificateTypeOption = typer.Option(
        "completion",
        "--type",
        "-t",
        help="Certificate type.",
        rich_help_panel="Template",
    ),
    blank: bool = typer.Option(
        False,
        "--blank",
        help="Start from an empty page instead of the starter layout.",
        rich_help_panel="Template",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the template JSON here instead of the template store.",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value, quiet_value = _ctx_flags(ctx)

    def _run() -> None:
        if not name.strip():
            raise ValueError("template name cannot be empty")
        config = _load_config(ctx)
        page = create_page(
            width=config.page.width,
            height=config.page.height,
            background_color=config.page.background_color,
        )
        template = create_template(
            name.strip(),
            certificate_type=certificate_type,
            starter_layout=not blank,
            page=page,
        )
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            payload = json.dumps(template_to_dict(template), indent=2, ensure_ascii=False)
            output.write_text(payload + "\n", encoding="utf-8")
            location = output
        else:
            store = _template_store(config)
            template = store.save(template)
            location = store.path_for(template.id)
        if quiet_value:
            console.print(template.id)
            return
        print_completion_panel(
            "Template created",
            [("ID", template.id), ("Name", template.name), ("File", str(location))],
            quiet=False,
        )

    _run_cli(_run, debug=debug_value)
