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
from enum import Enum


class ValueType(str, Enum):
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    IMAGE = "image"
    QR_CODE = "qr-code"


class TextTransform(str, Enum):
    NONE = "none"
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    CAPITALIZE = "capitalize"


@dataclass(frozen=True)
class DataBinding:
    """Where a template variable reads its value from and how to format it."""

    field_path: str
    label: str
    value_type: ValueType = ValueType.TEXT
    format_pattern: str | None = None
    default_value: object = None
    required: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "field_path": self.field_path,
            "label": self.label,
            "value_type": self.value_type.value,
            "format_pattern": self.format_pattern,
            "default_value": self.default_value,
            "required": self.required,
        }


@dataclass(frozen=True)
class Bounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class RequiredFieldsReport:
    all_present: bool
    missing: tuple[str, ...]


class UnknownElementKindError(ValueError):
    """Raised when an element kind is not one of the supported variants."""


class MissingRequiredFieldsError(ValueError):
    """Raised when issuance is attempted with required fields missing."""

    def __init__(self, missing: dict[int, tuple[str, ...]]) -> None:
        self.missing = missing
        parts = []
        for index, paths in sorted(missing.items()):
            parts.append(f"record {index}: {', '.join(paths)}")
        super().__init__("missing required fields: " + "; ".join(parts))


__all__ = [
    "Bounds",
    "DataBinding",
    "MissingRequiredFieldsError",
    "RequiredFieldsReport",
    "TextTransform",
    "UnknownElementKindError",
    "ValueType",
]
