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

import math
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..core.bounds import (
    DEFAULT_DATE_PATTERN,
    DEFAULT_GRID_SIZE,
    DEFAULT_PAGE_BACKGROUND,
    DEFAULT_PAGE_HEIGHT,
    DEFAULT_PAGE_WIDTH,
    MIN_ELEMENT_HEIGHT,
    MIN_ELEMENT_WIDTH,
)
from ..render.qr import Color, QrConfig
from .installer import DEFAULT_RENDER_TEMPLATE_PATH, config_paths, resolve_config_path


@dataclass(frozen=True)
class BindingDefaults:
    locale: str = "en"
    date_pattern: str = DEFAULT_DATE_PATTERN


@dataclass(frozen=True)
class EditorDefaults:
    min_width: float = MIN_ELEMENT_WIDTH
    min_height: float = MIN_ELEMENT_HEIGHT
    history_limit: int | None = None
    grid_size: float = DEFAULT_GRID_SIZE
    snap_to_grid: bool = False


@dataclass(frozen=True)
class PageDefaults:
    width: float = DEFAULT_PAGE_WIDTH
    height: float = DEFAULT_PAGE_HEIGHT
    background_color: str = DEFAULT_PAGE_BACKGROUND


@dataclass(frozen=True)
class AppConfig:
    config_path: Path
    templates_dir: Path
    render_template_path: Path
    binding: BindingDefaults = field(default_factory=BindingDefaults)
    editor: EditorDefaults = field(default_factory=EditorDefaults)
    page: PageDefaults = field(default_factory=PageDefaults)
    qr_config: QrConfig = field(default_factory=QrConfig)


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    data = _load_toml(config_path)
    templates_cfg = _get_dict(data, "templates")
    return AppConfig(
        config_path=config_path,
        templates_dir=_resolve_path(
            templates_cfg.get("dir"),
            base=config_path.parent,
            default=config_paths().user_templates_dir,
            field="templates.dir",
        ),
        render_template_path=_resolve_path(
            templates_cfg.get("render_template"),
            base=config_path.parent,
            default=DEFAULT_RENDER_TEMPLATE_PATH,
            field="templates.render_template",
        ),
        binding=_parse_binding(_get_dict(data, "binding")),
        editor=_parse_editor(_get_dict(data, "editor")),
        page=_parse_page(_get_dict(data, "page")),
        qr_config=build_qr_config(_get_dict(data, "qr")),
    )


def build_qr_config(cfg: dict[str, object] | None = None) -> QrConfig:
    cfg = cfg or {}
    error = _parse_str(cfg.get("error"), field="qr.error", default="M").strip().upper()
    if error not in ("L", "M", "Q", "H"):
        raise ValueError("qr.error must be one of L, M, Q, H")
    boost_error = _parse_bool(cfg.get("boost_error"), field="qr.boost_error", default=True)
    micro = cfg.get("micro")
    return QrConfig(
        error=error,
        scale=_parse_positive_int(cfg.get("scale"), field="qr.scale", default=4),
        border=_parse_non_negative_int(cfg.get("border"), field="qr.border", default=4),
        dark=_parse_color(cfg.get("dark")),
        light=_parse_color(cfg.get("light")),
        version=_parse_optional_int(cfg.get("version"), field="qr.version"),
        micro=None if micro is None else _parse_bool(micro, field="qr.micro", default=False),
        boost_error=boost_error,
    )


def _parse_binding(cfg: dict[str, object]) -> BindingDefaults:
    return BindingDefaults(
        locale=_parse_str(cfg.get("locale"), field="binding.locale", default="en"),
        date_pattern=_parse_str(
            cfg.get("date_pattern"),
            field="binding.date_pattern",
            default=DEFAULT_DATE_PATTERN,
        ),
    )


def _parse_editor(cfg: dict[str, object]) -> EditorDefaults:
    history_limit = _parse_optional_int(cfg.get("history_limit"), field="editor.history_limit")
    if history_limit is not None and history_limit < 0:
        raise ValueError("editor.history_limit must be a non-negative integer")
    return EditorDefaults(
        min_width=_parse_positive_float(
            cfg.get("min_width"), field="editor.min_width", default=MIN_ELEMENT_WIDTH
        ),
        min_height=_parse_positive_float(
            cfg.get("min_height"), field="editor.min_height", default=MIN_ELEMENT_HEIGHT
        ),
        history_limit=history_limit or None,
        grid_size=_parse_positive_float(
            cfg.get("grid_size"), field="editor.grid_size", default=DEFAULT_GRID_SIZE
        ),
        snap_to_grid=_parse_bool(
            cfg.get("snap_to_grid"), field="editor.snap_to_grid", default=False
        ),
    )


def _parse_page(cfg: dict[str, object]) -> PageDefaults:
    return PageDefaults(
        width=_parse_positive_float(
            cfg.get("width"), field="page.width", default=DEFAULT_PAGE_WIDTH
        ),
        height=_parse_positive_float(
            cfg.get("height"), field="page.height", default=DEFAULT_PAGE_HEIGHT
        ),
        background_color=_parse_str(
            cfg.get("background_color"),
            field="page.background_color",
            default=DEFAULT_PAGE_BACKGROUND,
        ),
    )


def _resolve_path(value: object, *, base: Path, default: Path, field: str) -> Path:
    text = _parse_str(value, field=field, default="").strip()
    if not text:
        return default
    path = Path(text).expanduser()
    if not path.is_absolute():
        path = base / path
    return path


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_str(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _parse_optional_int(value: object, *, field: str) -> int | None:
    if value is None:
        return None
    return _parse_int_strict(value, field=field)


def _parse_positive_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _parse_non_negative_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} must be a non-negative integer")
    return parsed


def _parse_positive_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return float(default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field} must be a number")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{field} must be a positive number")
    return float(value)


def _parse_color(value: object) -> Color:
    if value is None:
        return None
    if isinstance(value, str):
        if value.strip().lower() in ("", "none", "transparent"):
            return None
        return value
    if isinstance(value, (list, tuple)):
        if len(value) == 3:
            return (int(value[0]), int(value[1]), int(value[2]))
        if len(value) == 4:
            return (int(value[0]), int(value[1]), int(value[2]), int(value[3]))
    return None


__all__ = [
    "AppConfig",
    "BindingDefaults",
    "EditorDefaults",
    "PageDefaults",
    "build_qr_config",
    "load_app_config",
]
