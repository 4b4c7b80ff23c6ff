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

from dataclasses import dataclass
from typing import Any

import segno

Color = str | tuple[int, int, int] | tuple[int, int, int, int] | None

_ERROR_LEVELS = frozenset("LMQH")


@dataclass(frozen=True)
class QrConfig:
    error: str = "M"
    scale: int = 4
    border: int = 4
    dark: Color = None
    light: Color = None
    version: int | None = None
    micro: bool | None = None
    boost_error: bool = True


def make_qr(data: bytes | str, config: QrConfig | None = None, *, error: str | None = None) -> Any:
    config = config or QrConfig()
    level = (error or config.error).strip().upper()
    if level not in _ERROR_LEVELS:
        raise ValueError(f"unsupported QR error correction level: {error or config.error}")
    return segno.make(
        data,
        error=level,
        version=config.version,
        micro=config.micro,
        boost_error=config.boost_error,
    )


def qr_data_uri(
    data: bytes | str,
    config: QrConfig | None = None,
    *,
    error: str | None = None,
    dark: Color = None,
    light: Color = None,
) -> str:
    """PNG data URI for ``data``; per-call colors override the config's."""
    config = config or QrConfig()
    qr = make_qr(data, config, error=error)
    return qr.png_data_uri(
        scale=config.scale,
        border=config.border,
        **_segno_color_kwargs(dark=dark or config.dark, light=light or config.light),
    )


def _segno_color_kwargs(**values: object) -> dict[str, object]:
    style: dict[str, object] = {}
    for key, value in values.items():
        normalized = _normalize_color_value(value)
        if normalized is None:
            continue
        style[key] = normalized
    return style


def _normalize_color_value(value: object) -> object | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip()
    return value


__all__ = ["QrConfig", "make_qr", "qr_data_uri"]
