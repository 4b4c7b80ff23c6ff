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

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Union

from ..core.models import Bounds, DataBinding, TextTransform, UnknownElementKindError


class ElementKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    SHAPE = "shape"
    SIGNATURE = "signature"
    QR_CODE = "qr-code"
    BARCODE = "barcode"
    LINE = "line"
    ARROW = "arrow"
    ICON = "icon"
    CHART = "chart"
    TABLE = "table"
    TEMPLATE_VARIABLE = "template-variable"


@dataclass(frozen=True)
class Padding:
    top: float = 8.0
    right: float = 8.0
    bottom: float = 8.0
    left: float = 8.0


@dataclass(frozen=True)
class Shadow:
    color: str = "#000000"
    blur: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0


@dataclass(frozen=True)
class TextStyle:
    font_size: float = 24.0
    font_family: str = "Sarabun"
    font_weight: str = "normal"
    font_style: str = "normal"
    text_decoration: str = "none"
    color: str = "#000000"
    text_align: str = "left"
    vertical_align: str = "middle"
    line_height: float = 1.2
    letter_spacing: float = 0.0
    background_color: str | None = None
    padding: Padding = field(default_factory=Padding)
    shadow: Shadow | None = None


@dataclass(frozen=True)
class TextProperties:
    text: str = "New text"
    style: TextStyle = field(default_factory=TextStyle)


@dataclass(frozen=True)
class ImageFilters:
    brightness: float = 100.0
    contrast: float = 100.0
    saturation: float = 100.0
    blur: float = 0.0
    grayscale: float = 0.0
    sepia: float = 0.0


@dataclass(frozen=True)
class ImageProperties:
    src: str = ""
    original_width: float = 200.0
    original_height: float = 150.0
    crop_x: float = 0.0
    crop_y: float = 0.0
    crop_width: float = 200.0
    crop_height: float = 150.0
    border_radius: float = 0.0
    filters: ImageFilters = field(default_factory=ImageFilters)


@dataclass(frozen=True)
class ShapeProperties:
    shape_type: str = "rectangle"
    fill: str = "#3f51b5"
    stroke: str | None = "#000000"
    stroke_width: float = 2.0
    border_radius: float | None = None
    sides: int | None = None
    inner_radius: float | None = None


@dataclass(frozen=True)
class SignatureProperties:
    placeholder: str = "Sign here"
    required: bool = True
    user_id: str | None = None
    signature_data: str | None = None
    border_style: str = "dashed"
    border_color: str = "#666666"
    border_width: float = 2.0
    background_color: str = "#f9f9f9"
    signature_type: str = "draw"
    font_family: str | None = "Sarabun"
    font_size: float | None = 16.0
    signed_at: str | None = None


@dataclass(frozen=True)
class QrCodeProperties:
    data: str = "https://example.com"
    error_correction_level: str = "M"
    foreground_color: str = "#000000"
    background_color: str = "#ffffff"
    margin: int = 4


@dataclass(frozen=True)
class BarcodeProperties:
    data: str = "1234567890"
    format: str = "CODE128"
    display_value: bool = True
    font_size: float = 12.0
    text_align: str = "center"
    text_position: str = "bottom"
    text_margin: float = 2.0
    background_color: str = "#ffffff"
    line_color: str = "#000000"


@dataclass(frozen=True)
class LineProperties:
    points: tuple[float, ...] = (0.0, 0.0, 200.0, 0.0)
    stroke: str = "#000000"
    stroke_width: float = 2.0
    line_cap: str = "butt"
    line_join: str = "miter"


@dataclass(frozen=True)
class ArrowProperties:
    start_x: float = 0.0
    start_y: float = 25.0
    end_x: float = 200.0
    end_y: float = 25.0
    stroke: str = "#000000"
    stroke_width: float = 3.0
    arrowhead_size: float = 15.0
    arrowhead_type: str = "triangle"
    start_arrow: bool = False
    end_arrow: bool = True


@dataclass(frozen=True)
class IconProperties:
    icon_name: str = "star"
    icon_family: str = "material"
    color: str = "#3f51b5"
    background_color: str | None = None
    border_radius: float = 0.0
    padding: float = 8.0


@dataclass(frozen=True)
class ChartDataset:
    label: str
    data: tuple[float, ...]
    background_color: str | None = None
    border_color: str | None = None
    border_width: float = 1.0


@dataclass(frozen=True)
class ChartProperties:
    chart_type: str = "bar"
    labels: tuple[str, ...] = ()
    datasets: tuple[ChartDataset, ...] = ()
    title: str | None = None
    show_legend: bool = True
    legend_position: str = "top"


@dataclass(frozen=True)
class TableProperties:
    rows: int = 3
    columns: int = 3
    data: tuple[tuple[str, ...], ...] = ()
    header_row: bool = True
    header_column: bool = False
    cell_padding: float = 8.0
    border_width: float = 1.0
    border_color: str = "#cccccc"
    header_background_color: str = "#f5f5f5"
    font_size: float = 14.0
    font_family: str = "Sarabun"
    text_align: str = "left"


@dataclass(frozen=True)
class TemplateVariableProperties:
    data_binding: DataBinding
    placeholder: str = ""
    prefix: str = ""
    suffix: str = ""
    transform: TextTransform = TextTransform.NONE
    style: TextStyle = field(default_factory=lambda: TextStyle(font_size=16.0))


@dataclass(frozen=True, kw_only=True)
class ElementBase:
    """Geometry and visibility shared by every element kind."""

    kind: ClassVar[ElementKind]

    id: str
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0
    opacity: float = 1.0
    visible: bool = True
    locked: bool = False
    z_index: int = 0
    name: str | None = None

    @property
    def bounds(self) -> Bounds:
        return Bounds(x=self.x, y=self.y, width=self.width, height=self.height)

    def with_bounds(self, bounds: Bounds):
        return replace(self, x=bounds.x, y=bounds.y, width=bounds.width, height=bounds.height)


@dataclass(frozen=True, kw_only=True)
class TextElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.TEXT
    properties: TextProperties = field(default_factory=TextProperties)


@dataclass(frozen=True, kw_only=True)
class ImageElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.IMAGE
    properties: ImageProperties = field(default_factory=ImageProperties)


@dataclass(frozen=True, kw_only=True)
class ShapeElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.SHAPE
    properties: ShapeProperties = field(default_factory=ShapeProperties)


@dataclass(frozen=True, kw_only=True)
class SignatureElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.SIGNATURE
    properties: SignatureProperties = field(default_factory=SignatureProperties)


@dataclass(frozen=True, kw_only=True)
class QrCodeElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.QR_CODE
    properties: QrCodeProperties = field(default_factory=QrCodeProperties)


@dataclass(frozen=True, kw_only=True)
class BarcodeElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.BARCODE
    properties: BarcodeProperties = field(default_factory=BarcodeProperties)


@dataclass(frozen=True, kw_only=True)
class LineElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.LINE
    properties: LineProperties = field(default_factory=LineProperties)


@dataclass(frozen=True, kw_only=True)
class ArrowElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.ARROW
    properties: ArrowProperties = field(default_factory=ArrowProperties)


@dataclass(frozen=True, kw_only=True)
class IconElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.ICON
    properties: IconProperties = field(default_factory=IconProperties)


@dataclass(frozen=True, kw_only=True)
class ChartElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.CHART
    properties: ChartProperties = field(default_factory=ChartProperties)


@dataclass(frozen=True, kw_only=True)
class TableElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.TABLE
    properties: TableProperties = field(default_factory=TableProperties)


@dataclass(frozen=True, kw_only=True)
class TemplateVariableElement(ElementBase):
    kind: ClassVar[ElementKind] = ElementKind.TEMPLATE_VARIABLE
    properties: TemplateVariableProperties


DesignerElement = Union[
    TextElement,
    ImageElement,
    ShapeElement,
    SignatureElement,
    QrCodeElement,
    BarcodeElement,
    LineElement,
    ArrowElement,
    IconElement,
    ChartElement,
    TableElement,
    TemplateVariableElement,
]

ELEMENT_CLASSES: dict[ElementKind, type[ElementBase]] = {
    ElementKind.TEXT: TextElement,
    ElementKind.IMAGE: ImageElement,
    ElementKind.SHAPE: ShapeElement,
    ElementKind.SIGNATURE: SignatureElement,
    ElementKind.QR_CODE: QrCodeElement,
    ElementKind.BARCODE: BarcodeElement,
    ElementKind.LINE: LineElement,
    ElementKind.ARROW: ArrowElement,
    ElementKind.ICON: IconElement,
    ElementKind.CHART: ChartElement,
    ElementKind.TABLE: TableElement,
    ElementKind.TEMPLATE_VARIABLE: TemplateVariableElement,
}


def parse_element_kind(value: object) -> ElementKind:
    if isinstance(value, ElementKind):
        return value
    try:
        return ElementKind(str(value).strip().lower())
    except ValueError as exc:
        raise UnknownElementKindError(f"unknown element kind: {value}") from exc


def element_class(kind: ElementKind | str) -> type[ElementBase]:
    return ELEMENT_CLASSES[parse_element_kind(kind)]


__all__ = [
    "ArrowElement",
    "ArrowProperties",
    "BarcodeElement",
    "BarcodeProperties",
    "ChartDataset",
    "ChartElement",
    "ChartProperties",
    "DesignerElement",
    "ELEMENT_CLASSES",
    "ElementBase",
    "ElementKind",
    "IconElement",
    "IconProperties",
    "ImageElement",
    "ImageFilters",
    "ImageProperties",
    "LineElement",
    "LineProperties",
    "Padding",
    "QrCodeElement",
    "QrCodeProperties",
    "Shadow",
    "ShapeElement",
    "ShapeProperties",
    "SignatureElement",
    "SignatureProperties",
    "TableElement",
    "TableProperties",
    "TemplateVariableElement",
    "TemplateVariableProperties",
    "TextElement",
    "TextProperties",
    "TextStyle",
    "element_class",
    "parse_element_kind",
]
