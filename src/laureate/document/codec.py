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

"""JSON-friendly dict encoding of documents and templates.

Dataclasses become dicts keyed by field name, enums their values and tuples
lists. Decoding walks the dataclass type hints back, so nested property
objects come out as the same frozen types.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from enum import Enum
from functools import lru_cache
from typing import Any, TypeVar, Union

from ..core.validation import (
    require_bool,
    require_dict,
    require_int,
    require_keys,
    require_list,
    require_number,
    require_positive_number,
    require_str,
)
from .elements import DesignerElement, element_class, parse_element_kind
from .model import Document, DocumentMetadata, DocumentSettings, Margins, Page
from .template import CertificateTemplate

FORMAT_VERSION = 1

_T = TypeVar("_T")


def document_to_dict(document: Document) -> dict[str, Any]:
    return {
        "format_version": FORMAT_VERSION,
        "id": document.id,
        "name": document.name,
        "description": document.description,
        "metadata": to_plain(document.metadata),
        "settings": to_plain(document.settings),
        "pages": [_page_to_dict(page) for page in document.pages],
    }


def document_from_dict(data: object) -> Document:
    data = require_dict(data, label="document")
    require_keys(data, ("id", "name", "pages", "metadata"), label="document")
    _check_version(data)
    pages = require_list(data["pages"], 1, label="document pages")
    settings = data.get("settings")
    return Document(
        id=require_str(data["id"], label="document id"),
        name=require_str(data["name"], label="document name"),
        description=data.get("description"),
        pages=tuple(_page_from_dict(page) for page in pages),
        metadata=from_plain(DocumentMetadata, data["metadata"], label="document metadata"),
        settings=(
            DocumentSettings()
            if settings is None
            else from_plain(DocumentSettings, settings, label="document settings")
        ),
    )


def element_to_dict(element: DesignerElement) -> dict[str, Any]:
    payload = {"kind": element.kind.value}
    payload.update(to_plain(element))
    return payload


def element_from_dict(data: object) -> DesignerElement:
    data = require_dict(data, label="element")
    require_keys(data, ("kind",), label="element")
    kind = parse_element_kind(data["kind"])
    fields = {key: value for key, value in data.items() if key != "kind"}
    label = f"{kind.value} element"
    element = from_plain(element_class(kind), fields, label=label)
    require_positive_number(element.width, label=f"{label} width")
    require_positive_number(element.height, label=f"{label} height")
    return element


def template_to_dict(template: CertificateTemplate) -> dict[str, Any]:
    payload = to_plain(template)
    payload["document"] = document_to_dict(template.document)
    return payload


def template_from_dict(data: object) -> CertificateTemplate:
    data = require_dict(data, label="template")
    require_keys(data, ("id", "name", "document"), label="template")
    return from_plain(
        CertificateTemplate,
        data,
        label="template",
        document=document_from_dict(data["document"]),
    )


def to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            field.name: to_plain(getattr(value, field.name))
            for field in dataclasses.fields(value)
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_plain(item) for key, item in value.items()}
    return value


def from_plain(cls: type[_T], data: object, *, label: str, **decoded: Any) -> _T:
    """Build dataclass ``cls`` from a dict, recursing through its type hints.

    Missing keys fall back to field defaults; unknown keys are ignored.
    ``decoded`` supplies fields the caller has already built.
    """
    data = require_dict(data, label=label)
    hints = _type_hints(cls)
    kwargs: dict[str, Any] = dict(decoded)
    for field in dataclasses.fields(cls):
        if not field.init or field.name in kwargs:
            continue
        if field.name not in data:
            if _has_default(field):
                continue
            raise ValueError(f"{label} {field.name} is required")
        kwargs[field.name] = _coerce(hints[field.name], data[field.name], f"{label} {field.name}")
    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ValueError(f"{label} is malformed: {exc}") from exc


def _page_to_dict(page: Page) -> dict[str, Any]:
    payload = to_plain(dataclasses.replace(page, elements=()))
    payload["elements"] = [element_to_dict(element) for element in page.elements]
    return payload


def _page_from_dict(data: object) -> Page:
    data = require_dict(data, label="page")
    require_keys(data, ("id", "name"), label="page")
    elements = require_list(data.get("elements", []), 0, label="page elements")
    margins = data.get("margins")
    return from_plain(
        Page,
        data,
        label="page",
        margins=(
            Margins() if margins is None else from_plain(Margins, margins, label="page margins")
        ),
        elements=tuple(element_from_dict(element) for element in elements),
    )


def _check_version(data: dict[str, Any]) -> None:
    version = data.get("format_version", FORMAT_VERSION)
    if version != FORMAT_VERSION:
        raise ValueError(f"unsupported document format_version: {version}")


def _has_default(field: dataclasses.Field) -> bool:
    return (
        field.default is not dataclasses.MISSING
        or field.default_factory is not dataclasses.MISSING
    )


@lru_cache(maxsize=None)
def _type_hints(cls: type) -> dict[str, Any]:
    return typing.get_type_hints(cls)


def _coerce(hint: Any, value: object, label: str) -> Any:
    origin = typing.get_origin(hint)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if value is None:
            return None
        if len(args) == 1:
            return _coerce(args[0], value, label)
        return value
    if origin is tuple:
        items = require_list(value, 0, label=label)
        args = typing.get_args(hint)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_coerce(args[0], item, label) for item in items)
        return tuple(items)
    if origin is typing.Literal:
        allowed = typing.get_args(hint)
        if value not in allowed:
            raise ValueError(f"{label} must be one of {', '.join(map(str, allowed))}")
        return value
    if isinstance(hint, type):
        if issubclass(hint, Enum):
            try:
                return hint(value)
            except ValueError as exc:
                raise ValueError(f"{label} has unknown value: {value}") from exc
        if dataclasses.is_dataclass(hint):
            return from_plain(hint, value, label=label)
        if hint is float:
            return require_number(value, label=label)
        if hint is bool:
            return require_bool(value, label=label)
        if hint is int:
            return require_int(value, label=label)
        if hint is str:
            return require_str(value, label=label)
    return value


__all__ = [
    "FORMAT_VERSION",
    "document_from_dict",
    "document_to_dict",
    "element_from_dict",
    "element_to_dict",
    "from_plain",
    "template_from_dict",
    "template_to_dict",
    "to_plain",
]
