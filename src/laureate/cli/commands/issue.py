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
import re
from pathlib import Path
from typing import Literal

import typer

from ...binding.preview import IssuedCertificate, issue_batch
from ...core.models import MissingRequiredFieldsError
from ...render.service import RenderService
from ..core.common import (
    _ctx_flags,
    _load_config,
    _load_records,
    _load_template,
    _resolver,
    _run_cli,
)
from ..ui import build_table, console_err, print_completion_panel

OutputFormat = Literal["html", "pdf"]
MANIFEST_NAME = "manifest.json"

_UNSAFE_NAME_RE = re.compile(r"[^A-Za-z0-9_.-]+")

_ISSUE_HELP = (
    "Issue certificates from a template, one per data record.\n\n"
    "All records are validated first; if any is missing a required field nothing\n"
    "is written and every missing field is listed. On success each certificate is\n"
    f"written to the output directory together with {MANIFEST_NAME}.\n\n"
    "Examples:\n"
    "  laureate issue template_18c2f_ab12cd34 --data students.json -o out/\n"
    "  laureate issue ./completion.json --data jane.json --format html -o out/\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_ISSUE_HELP)(issue)


def issue(
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
    format: OutputFormat = typer.Option(
        "pdf",
        "--format",
        "-f",
        help="Output format.",
        rich_help_panel="Outputs",
    ),
    output_dir: Path = typer.Option(
        Path("certificates"),
        "--output-dir",
        "-o",
        help="Directory for the issued certificates.",
        rich_help_panel="Outputs",
    ),
) -> None:
    debug_value, quiet_value = _ctx_flags(ctx)

    def _run() -> int:
        config = _load_config(ctx)
        loaded = _load_template(config, template)
        records = _load_records(data, sample=sample)
        try:
            issued = issue_batch(loaded, records, _resolver(config))
        except MissingRequiredFieldsError as exc:
            rows = [
                (index, f"[missing]{', '.join(paths)}[/missing]")
                for index, paths in sorted(exc.missing.items())
            ]
            console_err.print(build_table(("Record", "Missing fields"), rows))
            console_err.print("[red]Error:[/red] nothing issued; required fields are missing")
            return 1
        output_dir.mkdir(parents=True, exist_ok=True)
        service = RenderService.from_config(config)
        entries = []
        for index, certificate in enumerate(issued):
            path = output_dir / f"{_output_stem(index, certificate)}.{format}"
            service.write(certificate.document, path, fmt=format)
            entries.append(_manifest_entry(certificate, path))
        manifest_path = output_dir / MANIFEST_NAME
        manifest_path.write_text(
            json.dumps({"certificates": entries}, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        print_completion_panel(
            "Certificates issued",
            [
                ("Template", loaded.name),
                ("Issued", str(len(issued))),
                ("Directory", str(output_dir)),
                ("Manifest", str(manifest_path)),
            ],
            quiet=quiet_value,
        )
        return 0

    _run_cli(_run, debug=debug_value)


def _output_stem(index: int, certificate: IssuedCertificate) -> str:
    stem = f"certificate-{index + 1:04d}"
    if certificate.certificate_id:
        safe = _UNSAFE_NAME_RE.sub("_", certificate.certificate_id).strip("._")
        if safe:
            stem = f"{stem}-{safe}"
    return stem


def _manifest_entry(certificate: IssuedCertificate, path: Path) -> dict[str, object]:
    return {
        "file": path.name,
        "template_id": certificate.template_id,
        "template_version": certificate.template_version,
        "generated_at": certificate.generated_at,
        "certificate_id": certificate.certificate_id,
        "user_id": certificate.user_id,
    }
