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

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..core.bounds import DEFAULT_DATE_PATTERN
from ..core.models import RequiredFieldsReport, UnknownElementKindError
from ..document.elements import TemplateVariableElement
from .fields import DataRecord, is_absent, resolve_field
from .formatting import DEFAULT_LOCALE, DateFormatter, default_format_date, format_value
from .transform import apply_transform

logger = logging.getLogger(__name__)

REQUIRED_MARKER_TEMPLATE = "[required: {label}]"
LABEL_PLACEHOLDER_TEMPLATE = "[{label}]"


def required_marker(label: str) -> str:
    return REQUIRED_MARKER_TEMPLATE.format(label=label)


def label_placeholder(label: str) -> str:
    return LABEL_PLACEHOLDER_TEMPLATE.format(label=label)


def design_text(element: TemplateVariableElement) -> str:
    """What the canvas shows for a bound element while designing."""
    props = element.properties
    return props.placeholder or label_placeholder(props.data_binding.label)


@dataclass(frozen=True)
class TemplateVariableResolver:
    """Turns one bound element plus one data record into the text to draw."""

    format_date: DateFormatter = default_format_date
    locale: str = DEFAULT_LOCALE
    date_pattern: str = DEFAULT_DATE_PATTERN

    def resolve_display_text(self, element: TemplateVariableElement, record: DataRecord) -> str:
        if not isinstance(element, TemplateVariableElement):
            kind = getattr(element, "kind", type(element).__name__)
            raise UnknownElementKindError(f"not a template variable: {kind}")
        props = element.properties
        binding = props.data_binding
        value = resolve_field(record, binding.field_path)
        if is_absent(value):
            if binding.required:
                return required_marker(binding.label)
            return props.placeholder or label_placeholder(binding.label)

        text = format_value(
            value,
            binding,
            format_date=self.format_date,
            locale=self.locale,
            date_pattern=self.date_pattern,
            on_date_error=lambda raw, exc: logger.warning(
                "date value for %s left unformatted (%r): %s",
                binding.field_path,
                raw,
                exc,
            ),
        )
        text = apply_transform(text, props.transform)
        return f"{props.prefix or ''}{text}{props.suffix or ''}"

    def validate_required(
        self,
        record: DataRecord,
        field_paths: Iterable[str],
    ) -> RequiredFieldsReport:
        return validate_required(record, field_paths)


def validate_required(record: DataRecord, field_paths: Iterable[str]) -> RequiredFieldsReport:
    """Check every path, collecting all missing ones rather than stopping at the first."""
    missing = tuple(path for path in field_paths if is_absent(resolve_field(record, path)))
    return RequiredFieldsReport(all_present=not missing, missing=missing)


__all__ = [
    "LABEL_PLACEHOLDER_TEMPLATE",
    "REQUIRED_MARKER_TEMPLATE",
    "TemplateVariableResolver",
    "design_text",
    "label_placeholder",
    "required_marker",
    "validate_required",
]
