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

import re

from ..core.models import TextTransform

_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")


def apply_transform(text: str, mode: TextTransform | str | None) -> str:
    if mode is None:
        return text
    try:
        normalized = TextTransform(mode)
    except ValueError:
        return text
    if normalized == TextTransform.UPPERCASE:
        return text.upper()
    if normalized == TextTransform.LOWERCASE:
        return text.lower()
    if normalized == TextTransform.CAPITALIZE:
        return _capitalize_words(text)
    return text


def _capitalize_words(text: str) -> str:
    # Separators are kept so "a  b" stays double-spaced.
    parts = _WHITESPACE_SPLIT_RE.split(text)
    return "".join(
        part if not part or part.isspace() else part[0].upper() + part[1:].lower()
        for part in parts
    )


__all__ = ["apply_transform"]
