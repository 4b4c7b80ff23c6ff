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

import importlib.metadata
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ...binding.catalog import SAMPLE_CERTIFICATE_DATA
from ...binding.resolver import TemplateVariableResolver
from ...config import AppConfig, load_app_config
from ...document.template import CertificateTemplate
from ...storage import TemplateStore
from ..ui import console_err


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] {_error_text(exc)}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _error_text(exc: BaseException) -> str:
    # KeyError wraps its message in quotes.
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    return str(exc)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _ctx_flags(ctx: typer.Context) -> tuple[bool, bool]:
    return bool(_ctx_value(ctx, "debug")), bool(_ctx_value(ctx, "quiet"))


def _load_config(ctx: typer.Context) -> AppConfig:
    return load_app_config(_ctx_value(ctx, "config"))


def _template_store(config: AppConfig) -> TemplateStore:
    return TemplateStore(config.templates_dir)


def _resolver(config: AppConfig) -> TemplateVariableResolver:
    return TemplateVariableResolver(
        locale=config.binding.locale,
        date_pattern=config.binding.date_pattern,
    )


def _load_template(config: AppConfig, ref: str) -> CertificateTemplate:
    """Load a template by store id, or from a ``.json`` path."""
    path = Path(ref).expanduser()
    if path.suffix == ".json" and path.is_file():
        return TemplateStore.load_path(path)
    return _template_store(config).load(ref)


def _load_records(data_path: str | None, *, sample: bool = False) -> list[dict[str, Any]]:
    """Records from a JSON object (one record) or array (a batch)."""
    if sample or data_path is None:
        if not sample:
            raise ValueError("provide --data FILE or --sample")
        return [SAMPLE_CERTIFICATE_DATA]
    path = Path(data_path).expanduser()
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"data file is not valid JSON: {path}: {exc}") from exc
    if isinstance(payload, dict):
        return [payload]
    if isinstance(payload, list) and all(isinstance(item, dict) for item in payload):
        if not payload:
            raise ValueError(f"data file holds no records: {path}")
        return payload
    raise ValueError("data file must hold a JSON object or an array of objects")


def _get_version() -> str:
    try:
        return importlib.metadata.version("laureate")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"
