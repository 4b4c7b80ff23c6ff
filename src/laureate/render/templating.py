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

import base64
import mimetypes
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

TEMPLATES_ROOT = Path(__file__).resolve().parent.parent / "templates"
DEFAULT_CERTIFICATE_TEMPLATE = TEMPLATES_ROOT / "certificate.html.j2"


def _resolve_asset_path(rel_path: str, root: Path) -> Path:
    if not rel_path or not str(rel_path).strip():
        raise ValueError("asset_data_uri requires a relative path")
    candidate = Path(rel_path)
    if candidate.is_absolute():
        raise ValueError("asset_data_uri does not allow absolute paths")
    root = root.resolve()
    resolved = (root / candidate).resolve(strict=False)
    if not resolved.is_relative_to(root):
        raise ValueError(f"asset_data_uri path escapes template dir: {rel_path}")
    if not resolved.is_file():
        raise FileNotFoundError(f"asset not found: {rel_path}")
    return resolved


@lru_cache(maxsize=64)
def _asset_data_uri_for_path(path: Path) -> str:
    payload = path.read_bytes()
    mime_type, _encoding = mimetypes.guess_type(path.name)
    if not mime_type:
        mime_type = "application/octet-stream"
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def _px(value: object) -> str:
    number = float(value)
    if number.is_integer():
        return f"{int(number)}px"
    return f"{number:g}px"


@lru_cache(maxsize=16)
def _get_env(template_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "j2"], default_for_string=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        auto_reload=True,
    )
    env.filters["px"] = _px
    env.globals["asset_data_uri"] = lambda rel_path: _asset_data_uri_for_path(
        _resolve_asset_path(str(rel_path), template_dir)
    )
    return env


def render_template(path: str | Path, context: dict[str, object]) -> str:
    """Render the jinja2 template at ``path``; undefined names are errors.

    Record values end up in the output, so HTML autoescaping is on.
    """
    template_path = Path(path)
    env = _get_env(template_path.parent.resolve())
    template = env.get_template(template_path.name)
    return template.render(**context)


__all__ = ["DEFAULT_CERTIFICATE_TEMPLATE", "TEMPLATES_ROOT", "render_template"]
