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

import calendar
import re
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable

from ..core.bounds import DEFAULT_DATE_PATTERN
from ..core.models import DataBinding, ValueType
from .fields import MISSING

DateFormatter = Callable[[date, str, str], str]
DateErrorCallback = Callable[[object, Exception], None]

DEFAULT_LOCALE = "en"

_LEGACY_TOKENS = (("YYYY", "yyyy"), ("YY", "yy"), ("DD", "dd"))
_PATTERN_TOKEN_RE = re.compile(r"'[^']*'|([A-Za-z])\1*|[^A-Za-z']+")


def normalize_date_pattern(pattern: str) -> str:
    """Map moment-style upper-case tokens onto their LDML equivalents."""
    normalized = pattern
    for legacy, ldml in _LEGACY_TOKENS:
        normalized = normalized.replace(legacy, ldml)
    return normalized


def default_format_date(value: date, pattern: str, locale: str) -> str:
    """Render ``value`` with a subset of LDML tokens.

    Supports ``d dd M MM MMM MMMM y yy yyyy E EEE EEEE`` and quoted literals.
    Month and weekday names are English whatever ``locale`` says; plug a real
    locale-aware formatter in through ``TemplateVariableResolver`` for others.
    """
    _ = locale
    parts: list[str] = []
    for match in _PATTERN_TOKEN_RE.finditer(pattern):
        token = match.group(0)
        if token.startswith("'"):
            literal = token[1:-1]
            parts.append(literal if literal else "'")
            continue
        if not token[0].isalpha():
            parts.append(token)
            continue
        parts.append(_render_token(token, value))
    return "".join(parts)


def _render_token(token: str, value: date) -> str:
    letter = token[0]
    width = len(token)
    if letter == "d":
        return f"{value.day:0{min(width, 2)}d}"
    if letter == "M":
        if width >= 4:
            return calendar.month_name[value.month]
        if width == 3:
            return calendar.month_abbr[value.month]
        return f"{value.month:0{width}d}"
    if letter == "y":
        if width == 2:
            return f"{value.year % 100:02d}"
        return f"{value.year:0{width}d}"
    if letter == "E":
        if width >= 4:
            return calendar.day_name[value.weekday()]
        return calendar.day_abbr[value.weekday()]
    raise ValueError(f"unsupported date pattern token: {token}")


def parse_iso_date(value: object) -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("date value must be an ISO-8601 string")
    text = value.strip()
    if not text:
        raise ValueError("date value must not be empty")
    return datetime.fromisoformat(text)


def format_value(
    value: object,
    binding: DataBinding,
    *,
    format_date: DateFormatter = default_format_date,
    locale: str = DEFAULT_LOCALE,
    date_pattern: str = DEFAULT_DATE_PATTERN,
    on_date_error: DateErrorCallback | None = None,
) -> str:
    """Turn a resolved value into display text according to ``binding``.

    Date values that cannot be parsed or formatted come back as the raw
    string; ``on_date_error`` is told about it so the caller can log.
    Nothing here raises for bad data.
    """
    if value is MISSING or value is None:
        if binding.default_value is None or binding.default_value == "":
            return ""
        return str(binding.default_value)

    value_type = binding.value_type
    if value_type == ValueType.NUMBER:
        return _format_number(value, binding.format_pattern)
    if value_type == ValueType.DATE:
        return _format_date_value(
            value,
            binding.format_pattern or date_pattern,
            format_date=format_date,
            locale=locale,
            on_error=on_date_error,
        )
    return str(value)


def _format_number(value: object, pattern: str | None) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if not pattern:
        return str(value)
    _, _, fraction = pattern.partition(".")
    decimals = len(fraction)
    try:
        quantum = Decimal(1).scaleb(-decimals)
        rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError):
        return str(value)
    return f"{rounded:.{decimals}f}"


def _format_date_value(
    value: object,
    pattern: str,
    *,
    format_date: DateFormatter,
    locale: str,
    on_error: DateErrorCallback | None,
) -> str:
    raw = value if isinstance(value, str) else str(value)
    try:
        parsed = parse_iso_date(value)
        return format_date(parsed, normalize_date_pattern(pattern), locale)
    except Exception as exc:
        if on_error is not None:
            on_error(value, exc)
        return raw


__all__ = [
    "DEFAULT_LOCALE",
    "DateErrorCallback",
    "DateFormatter",
    "default_format_date",
    "format_value",
    "normalize_date_pattern",
    "parse_iso_date",
]
