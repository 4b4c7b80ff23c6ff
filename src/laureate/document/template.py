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

from dataclasses import dataclass, replace
from typing import Literal

from ..binding.catalog import find_field
from .elements import TemplateVariableElement, TextElement, TextProperties, TextStyle
from .factory import create_element, create_template_variable, new_id
from .model import Document, Page, add_element, create_document

CertificateType = Literal["completion", "achievement", "participation", "honor", "graduation"]


@dataclass(frozen=True)
class CertificateTemplate:
    id: str
    name: str
    document: Document
    required_fields: tuple[str, ...] = ()
    certificate_type: CertificateType = "completion"
    category: str = ""
    description: str | None = None
    tags: tuple[str, ...] = ()
    is_public: bool = False
    is_active: bool = True

    def template_variables(self) -> tuple[TemplateVariableElement, ...]:
        return template_variables(self.document)

    def all_required_fields(self) -> tuple[str, ...]:
        """Declared required paths plus those of required bindings, first-seen order."""
        paths = list(self.required_fields)
        for element in self.template_variables():
            binding = element.properties.data_binding
            if binding.required:
                paths.append(binding.field_path)
        return tuple(dict.fromkeys(paths))


def template_variables(document: Document) -> tuple[TemplateVariableElement, ...]:
    return tuple(
        element
        for element in document.all_elements()
        if isinstance(element, TemplateVariableElement)
    )


def create_template(
    name: str,
    *,
    certificate_type: CertificateType = "completion",
    starter_layout: bool = True,
    created_by: str = "",
    page: Page | None = None,
) -> CertificateTemplate:
    """New template; the starter layout binds the usual certificate fields."""
    document = create_document(name=name, created_by=created_by, page=page)
    if starter_layout:
        document = _with_starter_layout(document, title=name)
    return CertificateTemplate(
        id=new_id("template"),
        name=name,
        document=document,
        certificate_type=certificate_type,
    )


def _with_starter_layout(document: Document, *, title: str) -> Document:
    page = document.pages[0]
    center_x = page.width / 2
    heading = TextElement(
        id=new_id(),
        x=center_x - 250.0,
        y=60.0,
        width=500.0,
        height=60.0,
        name="Heading",
        properties=TextProperties(
            text=title,
            style=TextStyle(font_size=36.0, font_weight="bold", text_align="center"),
        ),
    )
    elements = [heading]
    for path, y, font_size in (
        ("user.fullName", 200.0, 32.0),
        ("course.name", 280.0, 20.0),
        ("certificate.issueDate", 340.0, 16.0),
    ):
        binding = find_field(path)
        if binding is None:
            continue
        variable = create_template_variable(binding, x=center_x - 200.0, y=y, width=400.0)
        style = replace(variable.properties.style, font_size=font_size, text_align="center")
        elements.append(replace(variable, properties=replace(variable.properties, style=style)))
    qr_binding = find_field("certificate.qrCode")
    if qr_binding is not None:
        elements.append(
            create_template_variable(
                qr_binding,
                x=page.width - 140.0,
                y=page.height - 140.0,
                width=100.0,
                height=100.0,
            )
        )
    elements.append(create_element("signature", x=center_x - 100.0, y=page.height - 140.0))
    for element in elements:
        document = add_element(document, page.id, element)
    return document


__all__ = ["CertificateTemplate", "CertificateType", "create_template", "template_variables"]
