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

"""Immutable page/element tree and its copy-on-write mutations.

Every mutation takes a :class:`Document` and returns a new one; the input is
never modified, which is what lets :class:`~laureate.document.history.DocumentHistory`
keep whole snapshots cheaply.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Literal

from ..core.bounds import (
    DEFAULT_PAGE_BACKGROUND,
    DEFAULT_PAGE_HEIGHT,
    DEFAULT_PAGE_MARGIN,
    DEFAULT_PAGE_WIDTH,
    DUPLICATE_OFFSET,
)
from .elements import DesignerElement
from .factory import duplicate_element, new_id

Unit = Literal["px", "mm", "cm", "in"]
ColorProfile = Literal["RGB", "CMYK"]

_PROTECTED_FIELDS = frozenset({"id", "kind"})


@dataclass(frozen=True)
class Margins:
    top: float = DEFAULT_PAGE_MARGIN
    right: float = DEFAULT_PAGE_MARGIN
    bottom: float = DEFAULT_PAGE_MARGIN
    left: float = DEFAULT_PAGE_MARGIN


@dataclass(frozen=True)
class Page:
    id: str
    name: str
    width: float = DEFAULT_PAGE_WIDTH
    height: float = DEFAULT_PAGE_HEIGHT
    background_color: str = DEFAULT_PAGE_BACKGROUND
    background_image: str | None = None
    margins: Margins = field(default_factory=Margins)
    elements: tuple[DesignerElement, ...] = ()


@dataclass(frozen=True)
class DocumentMetadata:
    created_at: str
    updated_at: str
    created_by: str = ""
    version: str = "1.0.0"
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class DocumentSettings:
    unit: Unit = "px"
    dpi: int = 300
    color_profile: ColorProfile = "RGB"
    bleed: float = 0.0


@dataclass(frozen=True)
class Document:
    id: str
    name: str
    pages: tuple[Page, ...]
    metadata: DocumentMetadata
    settings: DocumentSettings = field(default_factory=DocumentSettings)
    description: str | None = None

    def all_elements(self) -> Iterable[DesignerElement]:
        for page in self.pages:
            yield from page.elements


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def create_page(
    *,
    name: str = "Page 1",
    width: float = DEFAULT_PAGE_WIDTH,
    height: float = DEFAULT_PAGE_HEIGHT,
    background_color: str = DEFAULT_PAGE_BACKGROUND,
    margin: float = DEFAULT_PAGE_MARGIN,
) -> Page:
    return Page(
        id=new_id("page"),
        name=name,
        width=width,
        height=height,
        background_color=background_color,
        margins=Margins(top=margin, right=margin, bottom=margin, left=margin),
    )


def create_document(
    *,
    name: str = "Untitled document",
    created_by: str = "",
    page: Page | None = None,
    settings: DocumentSettings | None = None,
) -> Document:
    now = utc_timestamp()
    return Document(
        id=new_id("doc"),
        name=name,
        pages=(page or create_page(),),
        metadata=DocumentMetadata(created_at=now, updated_at=now, created_by=created_by),
        settings=settings or DocumentSettings(),
    )


def touch(document: Document) -> Document:
    return replace(document, metadata=replace(document.metadata, updated_at=utc_timestamp()))


def find_page(document: Document, page_id: str) -> Page:
    for page in document.pages:
        if page.id == page_id:
            return page
    raise KeyError(f"unknown page: {page_id}")


def find_element(document: Document, element_id: str) -> tuple[Page, DesignerElement]:
    for page in document.pages:
        for element in page.elements:
            if element.id == element_id:
                return page, element
    raise KeyError(f"unknown element: {element_id}")


def sorted_for_paint(page: Page) -> tuple[DesignerElement, ...]:
    """Elements bottom-most first; equal z-index keeps insertion order."""
    return tuple(sorted(page.elements, key=lambda element: element.z_index))


def add_element(document: Document, page_id: str, element: DesignerElement) -> Document:
    page = find_page(document, page_id)
    if any(existing.id == element.id for existing in document.all_elements()):
        raise ValueError(f"duplicate element id: {element.id}")
    _require_positive_size(element.width, label="width")
    _require_positive_size(element.height, label="height")
    return _replace_page(document, replace(page, elements=(*page.elements, element)))


def update_element(document: Document, element_id: str, **changes: object) -> Document:
    protected = _PROTECTED_FIELDS.intersection(changes)
    if protected:
        raise ValueError(f"cannot change element {', '.join(sorted(protected))}")
    page, element = find_element(document, element_id)
    for key in ("width", "height"):
        if key in changes:
            _require_positive_size(changes[key], label=key)
    updated = replace(element, **changes)
    return replace_element(document, updated, page=page)


def replace_element(
    document: Document,
    element: DesignerElement,
    *,
    page: Page | None = None,
) -> Document:
    if page is None:
        page, _ = find_element(document, element.id)
    _require_positive_size(element.width, label="width")
    _require_positive_size(element.height, label="height")
    elements = tuple(element if item.id == element.id else item for item in page.elements)
    return _replace_page(document, replace(page, elements=elements))


def delete_elements(document: Document, element_ids: Iterable[str]) -> Document:
    targets = set(element_ids)
    if not targets:
        return document
    pages = tuple(
        replace(page, elements=tuple(item for item in page.elements if item.id not in targets))
        for page in document.pages
    )
    return touch(replace(document, pages=pages))


def duplicate_elements(
    document: Document,
    element_ids: Sequence[str],
    *,
    offset: float = DUPLICATE_OFFSET,
) -> tuple[Document, tuple[str, ...]]:
    new_ids: list[str] = []
    for element_id in element_ids:
        page, element = find_element(document, element_id)
        copy = duplicate_element(element, offset_x=offset, offset_y=offset)
        document = add_element(document, page.id, copy)
        new_ids.append(copy.id)
    return document, tuple(new_ids)


def reorder_elements(
    document: Document,
    page_id: str,
    start_index: int,
    end_index: int,
) -> Document:
    """Move an element within the layer list (top-most first) and renumber z-indexes."""
    page = find_page(document, page_id)
    layers = sorted(page.elements, key=lambda element: element.z_index, reverse=True)
    if not 0 <= start_index < len(layers) or not 0 <= end_index < len(layers):
        raise IndexError("layer index out of range")
    moved = layers.pop(start_index)
    layers.insert(end_index, moved)
    total = len(layers)
    renumbered = {item.id: total - index for index, item in enumerate(layers)}
    elements = tuple(replace(item, z_index=renumbered[item.id]) for item in page.elements)
    return _replace_page(document, replace(page, elements=elements))


def set_z_index(document: Document, element_id: str, z_index: int) -> Document:
    return update_element(document, element_id, z_index=int(z_index))


def bring_to_front(document: Document, element_id: str) -> Document:
    page, element = find_element(document, element_id)
    top = max(item.z_index for item in page.elements)
    if element.z_index == top and _unique_z(page, element):
        return document
    return set_z_index(document, element_id, top + 1)


def send_to_back(document: Document, element_id: str) -> Document:
    page, element = find_element(document, element_id)
    bottom = min(item.z_index for item in page.elements)
    if element.z_index == bottom and _unique_z(page, element):
        return document
    return set_z_index(document, element_id, bottom - 1)


def add_page(document: Document, page: Page | None = None) -> Document:
    if page is None:
        page = create_page(name=f"Page {len(document.pages) + 1}")
    if any(existing.id == page.id for existing in document.pages):
        raise ValueError(f"duplicate page id: {page.id}")
    return touch(replace(document, pages=(*document.pages, page)))


def delete_page(document: Document, page_id: str) -> Document:
    find_page(document, page_id)
    if len(document.pages) <= 1:
        raise ValueError("cannot delete the last page")
    pages = tuple(page for page in document.pages if page.id != page_id)
    return touch(replace(document, pages=pages))


def _replace_page(document: Document, page: Page) -> Document:
    pages = tuple(page if item.id == page.id else item for item in document.pages)
    return touch(replace(document, pages=pages))


def _unique_z(page: Page, element: DesignerElement) -> bool:
    return sum(1 for item in page.elements if item.z_index == element.z_index) == 1


def _require_positive_size(value: object, *, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{label} must be a number")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{label} must be a positive finite number")


__all__ = [
    "Document",
    "DocumentMetadata",
    "DocumentSettings",
    "Margins",
    "Page",
    "add_element",
    "add_page",
    "bring_to_front",
    "create_document",
    "create_page",
    "delete_elements",
    "delete_page",
    "duplicate_elements",
    "find_element",
    "find_page",
    "reorder_elements",
    "replace_element",
    "send_to_back",
    "set_z_index",
    "sorted_for_paint",
    "touch",
    "update_element",
    "utc_timestamp",
]
