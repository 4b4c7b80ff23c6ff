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

import secrets
import time
from dataclasses import replace

from ..core.bounds import DUPLICATE_OFFSET
from ..core.models import DataBinding, TextTransform, UnknownElementKindError
from .elements import (
    ArrowElement,
    BarcodeElement,
    BarcodeProperties,
    ChartDataset,
    ChartElement,
    ChartProperties,
    DesignerElement,
    ElementKind,
    IconElement,
    IconProperties,
    ImageElement,
    ImageProperties,
    LineElement,
    QrCodeElement,
    QrCodeProperties,
    ShapeElement,
    ShapeProperties,
    SignatureElement,
    SignatureProperties,
    TableElement,
    TableProperties,
    TemplateVariableElement,
    TemplateVariableProperties,
    TextElement,
    parse_element_kind,
)

_DEFAULT_SIZES: dict[ElementKind, tuple[float, float]] = {
    ElementKind.TEXT: (200.0, 40.0),
    ElementKind.IMAGE: (200.0, 150.0),
    ElementKind.SHAPE: (200.0, 150.0),
    ElementKind.SIGNATURE: (200.0, 80.0),
    ElementKind.QR_CODE: (100.0, 100.0),
    ElementKind.BARCODE: (200.0, 60.0),
    ElementKind.LINE: (200.0, 2.0),
    ElementKind.ARROW: (200.0, 50.0),
    ElementKind.ICON: (60.0, 60.0),
    ElementKind.CHART: (300.0, 200.0),
    ElementKind.TABLE: (300.0, 120.0),
    ElementKind.TEMPLATE_VARIABLE: (200.0, 40.0),
}

_DEFAULT_NAMES: dict[ElementKind, str] = {
    ElementKind.TEXT: "Text Element",
    ElementKind.IMAGE: "Image Element",
    ElementKind.SIGNATURE: "Signature Field",
    ElementKind.QR_CODE: "QR Code",
    ElementKind.BARCODE: "Barcode",
    ElementKind.LINE: "Line",
    ElementKind.ARROW: "Arrow",
    ElementKind.ICON: "Icon",
    ElementKind.CHART: "Chart",
    ElementKind.TABLE: "Table",
}


def new_id(prefix: str = "element") -> str:
    return f"{prefix}_{time.time_ns():x}_{secrets.token_hex(4)}"


def default_size(kind: ElementKind | str) -> tuple[float, float]:
    return _DEFAULT_SIZES[parse_element_kind(kind)]


def create_element(
    kind: ElementKind | str,
    x: float = 100.0,
    y: float = 100.0,
    **options: object,
) -> DesignerElement:
    """Build an element of ``kind`` with per-kind defaults and a fresh id.

    Raises :class:`UnknownElementKindError` for anything outside the closed set.
    """
    parsed = parse_element_kind(kind)
    width, height = _DEFAULT_SIZES[parsed]
    common = {
        "id": new_id(),
        "x": float(x),
        "y": float(y),
        "width": width,
        "height": height,
        "name": _DEFAULT_NAMES.get(parsed),
    }
    if parsed == ElementKind.TEXT:
        return TextElement(**common)
    if parsed == ElementKind.IMAGE:
        src = str(options.get("src") or "")
        return ImageElement(**common, properties=ImageProperties(src=src))
    if parsed == ElementKind.SHAPE:
        return _create_shape(common, str(options.get("shape_type") or "rectangle"))
    if parsed == ElementKind.SIGNATURE:
        user_id = options.get("user_id")
        return SignatureElement(
            **common,
            properties=SignatureProperties(user_id=None if user_id is None else str(user_id)),
        )
    if parsed == ElementKind.QR_CODE:
        data = str(options.get("data") or QrCodeProperties.data)
        return QrCodeElement(**common, properties=QrCodeProperties(data=data))
    if parsed == ElementKind.BARCODE:
        data = str(options.get("data") or BarcodeProperties.data)
        return BarcodeElement(**common, properties=BarcodeProperties(data=data))
    if parsed == ElementKind.LINE:
        return LineElement(**common)
    if parsed == ElementKind.ARROW:
        return ArrowElement(**common)
    if parsed == ElementKind.ICON:
        icon_name = str(options.get("icon_name") or IconProperties.icon_name)
        return IconElement(**common, properties=IconProperties(icon_name=icon_name))
    if parsed == ElementKind.CHART:
        return ChartElement(**common, properties=_sample_chart())
    if parsed == ElementKind.TABLE:
        rows = _table_dimension(options.get("rows"), label="rows")
        columns = _table_dimension(options.get("columns"), label="columns")
        common["width"] = columns * 100.0
        common["height"] = rows * 40.0
        return TableElement(**common, properties=_table_properties(rows, columns))
    if parsed == ElementKind.TEMPLATE_VARIABLE:
        binding = options.get("data_binding")
        if not isinstance(binding, DataBinding):
            raise ValueError("template-variable elements require a data_binding")
        return create_template_variable(binding, x=x, y=y)
    raise UnknownElementKindError(f"unknown element kind: {kind}")


def _table_dimension(value: object, *, label: str) -> int:
    if value is None:
        return 3
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"table {label} must be an integer")
    if value < 1:
        raise ValueError(f"table {label} must be at least 1")
    return value


def create_template_variable(
    binding: DataBinding,
    *,
    x: float = 100.0,
    y: float = 100.0,
    width: float = 200.0,
    height: float = 40.0,
) -> TemplateVariableElement:
    return TemplateVariableElement(
        id=new_id("template-var"),
        x=float(x),
        y=float(y),
        width=float(width),
        height=float(height),
        z_index=1,
        name=binding.label,
        properties=TemplateVariableProperties(
            data_binding=binding,
            placeholder=f"[{binding.label}]",
            transform=TextTransform.NONE,
        ),
    )


def duplicate_element(
    element: DesignerElement,
    *,
    offset_x: float = DUPLICATE_OFFSET,
    offset_y: float = DUPLICATE_OFFSET,
) -> DesignerElement:
    name = f"{element.name} Copy" if element.name else None
    return replace(
        element,
        id=new_id(),
        x=element.x + offset_x,
        y=element.y + offset_y,
        name=name,
    )


def _create_shape(common: dict[str, object], shape_type: str) -> ShapeElement:
    common = {**common, "name": f"{shape_type.capitalize()} Shape"}
    if shape_type == "circle":
        common.update(width=100.0, height=100.0)
    return ShapeElement(
        **common,
        properties=ShapeProperties(
            shape_type=shape_type,
            border_radius=0.0 if shape_type == "rectangle" else None,
            sides=6 if shape_type == "polygon" else None,
            inner_radius=0.5 if shape_type == "star" else None,
        ),
    )


def _sample_chart() -> ChartProperties:
    return ChartProperties(
        chart_type="bar",
        labels=("Jan", "Feb", "Mar", "Apr", "May", "Jun"),
        datasets=(
            ChartDataset(
                label="Sales",
                data=(12.0, 19.0, 3.0, 5.0, 2.0, 3.0),
                background_color="#3f51b5",
                border_color="#303f9f",
            ),
        ),
        title="Sample chart",
    )


def _table_properties(rows: int, columns: int) -> TableProperties:
    data = tuple(
        tuple(
            f"Header {col + 1}" if row == 0 else f"Cell {row},{col + 1}"
            for col in range(columns)
        )
        for row in range(rows)
    )
    return TableProperties(rows=rows, columns=columns, data=data)


__all__ = [
    "create_element",
    "create_template_variable",
    "default_size",
    "duplicate_element",
    "new_id",
]
