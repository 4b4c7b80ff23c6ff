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

"""Preview and issuance: apply a data record to a designed document."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from ..core.bounds import MAX_BATCH_RECORDS
from ..core.models import MissingRequiredFieldsError, ValueType
from ..document.elements import (
    DesignerElement,
    ImageElement,
    ImageProperties,
    QrCodeElement,
    QrCodeProperties,
    TemplateVariableElement,
    TextElement,
    TextProperties,
)
from ..document.model import Document, utc_timestamp
from ..document.template import CertificateTemplate, template_variables
from .fields import DataRecord, is_absent, resolve_field
from .resolver import TemplateVariableResolver, validate_required

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IssuedCertificate:
    template_id: str
    template_version: str
    document: Document
    generated_at: str
    certificate_id: str | None = None
    user_id: str | None = None


def preview_document(
    document: Document,
    record: DataRecord,
    resolver: TemplateVariableResolver | None = None,
) -> Document:
    """Copy of ``document`` with every bound element replaced by resolved content.

    Text, number and date bindings become text elements. Image and QR bindings
    with a value become image / QR elements carrying the raw reference; without
    a value they fall back to text showing the placeholder or required marker.
    """
    resolver = resolver or TemplateVariableResolver()
    pages = []
    for page in document.pages:
        elements = tuple(_resolve_element(item, record, resolver) for item in page.elements)
        pages.append(replace(page, elements=elements))
    return replace(document, pages=tuple(pages))


def issue_certificate(
    template: CertificateTemplate,
    record: DataRecord,
    resolver: TemplateVariableResolver | None = None,
) -> IssuedCertificate:
    report = validate_required(record, template.all_required_fields())
    if not report.all_present:
        raise MissingRequiredFieldsError({0: report.missing})
    return _issue(template, record, resolver or TemplateVariableResolver())


def issue_batch(
    template: CertificateTemplate,
    records: Sequence[DataRecord],
    resolver: TemplateVariableResolver | None = None,
) -> list[IssuedCertificate]:
    """Issue one certificate per record, or none at all.

    Every record is validated first; if any is missing required fields the
    whole batch is rejected with the full per-record list.
    """
    if len(records) > MAX_BATCH_RECORDS:
        raise ValueError(f"batch exceeds MAX_BATCH_RECORDS ({MAX_BATCH_RECORDS})")
    required = template.all_required_fields()
    missing: dict[int, tuple[str, ...]] = {}
    for index, record in enumerate(records):
        report = validate_required(record, required)
        if not report.all_present:
            missing[index] = report.missing
    if missing:
        raise MissingRequiredFieldsError(missing)
    resolver = resolver or TemplateVariableResolver()
    issued = [_issue(template, record, resolver) for record in records]
    logger.info("issued %d certificate(s) from template %s", len(issued), template.id)
    return issued


def _issue(
    template: CertificateTemplate,
    record: DataRecord,
    resolver: TemplateVariableResolver,
) -> IssuedCertificate:
    document = preview_document(template.document, record, resolver)
    return IssuedCertificate(
        template_id=template.id,
        template_version=template.document.metadata.version,
        document=document,
        generated_at=utc_timestamp(),
        certificate_id=_optional_str(resolve_field(record, "certificate.id")),
        user_id=_optional_str(resolve_field(record, "user.id")),
    )


def _resolve_element(
    element: DesignerElement,
    record: DataRecord,
    resolver: TemplateVariableResolver,
) -> DesignerElement:
    if not isinstance(element, TemplateVariableElement):
        return element
    props = element.properties
    binding = props.data_binding
    common = _common_fields(element)
    if binding.value_type in (ValueType.IMAGE, ValueType.QR_CODE):
        value = resolve_field(record, binding.field_path)
        if not is_absent(value):
            if binding.value_type == ValueType.IMAGE:
                return ImageElement(**common, properties=ImageProperties(src=str(value)))
            return QrCodeElement(**common, properties=QrCodeProperties(data=str(value)))
    text = resolver.resolve_display_text(element, record)
    return TextElement(**common, properties=TextProperties(text=text, style=props.style))


def _common_fields(element: DesignerElement) -> dict[str, object]:
    return {
        "id": element.id,
        "x": element.x,
        "y": element.y,
        "width": element.width,
        "height": element.height,
        "rotation": element.rotation,
        "opacity": element.opacity,
        "visible": element.visible,
        "locked": element.locked,
        "z_index": element.z_index,
        "name": element.name,
    }


def _optional_str(value: object) -> str | None:
    if is_absent(value):
        return None
    return str(value)


__all__ = [
    "IssuedCertificate",
    "issue_batch",
    "issue_certificate",
    "preview_document",
    "template_variables",
]
