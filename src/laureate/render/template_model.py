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
from dataclasses import dataclass
from typing import Callable

from ..binding.resolver import design_text
from ..document.elements import (
    ArrowElement,
    BarcodeElement,
    ChartElement,
    DesignerElement,
    ElementKind,
    IconElement,
    ImageElement,
    LineElement,
    QrCodeElement,
    ShapeElement,
    SignatureElement,
    TableElement,
    TemplateVariableElement,
    TextElement,
    TextStyle,
)
from ..document.model import Document, Page, sorted_for_paint, utc_timestamp
from .qr import QrConfig, qr_data_uri

logger = logging.getLogger(__name__)

QrRenderer = Callable[..., str]


@dataclass(frozen=True)
class LineModel:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: str
    stroke_width: float
    start_arrow: bool = False
    end_arrow: bool = False
    arrowhead_size: float = 0.0


@dataclass(frozen=True)
class ElementModel:
    id: str
    kind: str
    x: float
    y: float
    width: float
    height: float
    rotation: float
    opacity: float
    z_index: int
    style: str = ""
    text: str | None = None
    image_uri: str | None = None
    rows: tuple[tuple[str, ...], ...] = ()
    header_row: bool = False
    line: LineModel | None = None

    def to_template_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "rotation": self.rotation,
            "opacity": self.opacity,
            "z_index": self.z_index,
            "style": self.style,
            "text": self.text,
            "image_uri": self.image_uri,
            "rows": [list(row) for row in self.rows],
            "header_row": self.header_row,
            "line": None if self.line is None else _line_dict(self.line),
        }


@dataclass(frozen=True)
class PageModel:
    id: str
    name: str
    width: float
    height: float
    background_color: str
    background_image: str | None
    elements: tuple[ElementModel, ...]


@dataclass(frozen=True)
class RenderContext:
    document_id: str
    document_name: str
    generated_at: str
    pages: tuple[PageModel, ...]

    def to_template_dict(self) -> dict[str, object]:
        first = self.pages[0]
        return {
            "document_id": self.document_id,
            "document_name": self.document_name,
            "generated_at": self.generated_at,
            "page_size_css": f"{_num(first.width)}px {_num(first.height)}px",
            "pages": [
                {
                    "id": page.id,
                    "name": page.name,
                    "width": page.width,
                    "height": page.height,
                    "background_color": page.background_color,
                    "background_image": page.background_image,
                    "elements": [element.to_template_dict() for element in page.elements],
                }
                for page in self.pages
            ],
        }


def build_render_context(
    document: Document,
    qr_config: QrConfig | None = None,
    *,
    qr_renderer: QrRenderer = qr_data_uri,
) -> RenderContext:
    """Flatten ``document`` into render models, bottom-most element first.

    Hidden elements are dropped. Template variables still present (a design
    view rather than a preview) render their placeholder text.
    """
    builder = _ElementBuilder(qr_config or QrConfig(), qr_renderer)
    return RenderContext(
        document_id=document.id,
        document_name=document.name,
        generated_at=utc_timestamp(),
        pages=tuple(_page_model(page, builder) for page in document.pages),
    )


def _page_model(page: Page, builder: _ElementBuilder) -> PageModel:
    elements = tuple(
        builder.build(element) for element in sorted_for_paint(page) if element.visible
    )
    return PageModel(
        id=page.id,
        name=page.name,
        width=page.width,
        height=page.height,
        background_color=page.background_color,
        background_image=page.background_image,
        elements=elements,
    )


class _ElementBuilder:
    def __init__(self, qr_config: QrConfig, qr_renderer: QrRenderer) -> None:
        self._qr_config = qr_config
        self._qr_renderer = qr_renderer
        self._builders: dict[ElementKind, Callable[..., dict[str, object]]] = {
            ElementKind.TEXT: self._text,
            ElementKind.TEMPLATE_VARIABLE: self._template_variable,
            ElementKind.IMAGE: self._image,
            ElementKind.SHAPE: self._shape,
            ElementKind.SIGNATURE: self._signature,
            ElementKind.QR_CODE: self._qr_code,
            ElementKind.BARCODE: self._barcode,
            ElementKind.LINE: self._line,
            ElementKind.ARROW: self._arrow,
            ElementKind.ICON: self._icon,
            ElementKind.CHART: self._chart,
            ElementKind.TABLE: self._table,
        }

    def build(self, element: DesignerElement) -> ElementModel:
        extra = self._builders[element.kind](element)
        return ElementModel(
            id=element.id,
            kind=element.kind.value,
            x=element.x,
            y=element.y,
            width=element.width,
            height=element.height,
            rotation=element.rotation,
            opacity=element.opacity,
            z_index=element.z_index,
            **extra,
        )

    def _text(self, element: TextElement) -> dict[str, object]:
        props = element.properties
        return {"text": props.text, "style": text_style_css(props.style)}

    def _template_variable(self, element: TemplateVariableElement) -> dict[str, object]:
        style = text_style_css(element.properties.style)
        return {"text": design_text(element), "style": style}

    def _image(self, element: ImageElement) -> dict[str, object]:
        props = element.properties
        filters = props.filters
        css = [f"border-radius: {_num(props.border_radius)}px"]
        css.append(
            "filter: "
            f"brightness({_num(filters.brightness)}%) contrast({_num(filters.contrast)}%) "
            f"saturate({_num(filters.saturation)}%) blur({_num(filters.blur)}px) "
            f"grayscale({_num(filters.grayscale)}%) sepia({_num(filters.sepia)}%)"
        )
        return {"image_uri": props.src or None, "style": "; ".join(css)}

    def _shape(self, element: ShapeElement) -> dict[str, object]:
        props = element.properties
        css = [f"background: {props.fill}"]
        if props.stroke:
            css.append(f"border: {_num(props.stroke_width)}px solid {props.stroke}")
        if props.shape_type in ("circle", "ellipse"):
            css.append("border-radius: 50%")
        elif props.border_radius:
            css.append(f"border-radius: {_num(props.border_radius)}px")
        return {"style": "; ".join(css)}

    def _signature(self, element: SignatureElement) -> dict[str, object]:
        props = element.properties
        css = [
            f"border: {_num(props.border_width)}px {props.border_style} {props.border_color}",
            f"background: {props.background_color}",
        ]
        if props.font_family:
            css.append(f"font-family: {props.font_family}")
        if props.font_size:
            css.append(f"font-size: {_num(props.font_size)}px")
        if props.signature_data:
            return {"image_uri": props.signature_data, "style": "; ".join(css)}
        return {"text": props.placeholder, "style": "; ".join(css)}

    def _qr_code(self, element: QrCodeElement) -> dict[str, object]:
        props = element.properties
        uri = self._qr_renderer(
            props.data,
            self._qr_config,
            error=props.error_correction_level,
            dark=props.foreground_color,
            light=props.background_color,
        )
        return {"image_uri": uri}

    def _barcode(self, element: BarcodeElement) -> dict[str, object]:
        # Drawn as its human-readable value; no barcode symbology is rendered.
        props = element.properties
        css = [
            "font-family: monospace",
            f"font-size: {_num(props.font_size)}px",
            f"color: {props.line_color}",
            f"background: {props.background_color}",
            f"text-align: {props.text_align}",
        ]
        return {"text": props.data if props.display_value else "", "style": "; ".join(css)}

    def _line(self, element: LineElement) -> dict[str, object]:
        props = element.properties
        points = props.points if len(props.points) >= 4 else (0.0, 0.0, element.width, 0.0)
        line = LineModel(
            x1=points[0],
            y1=points[1],
            x2=points[2],
            y2=points[3],
            stroke=props.stroke,
            stroke_width=props.stroke_width,
        )
        return {"line": line}

    def _arrow(self, element: ArrowElement) -> dict[str, object]:
        props = element.properties
        line = LineModel(
            x1=props.start_x,
            y1=props.start_y,
            x2=props.end_x,
            y2=props.end_y,
            stroke=props.stroke,
            stroke_width=props.stroke_width,
            start_arrow=props.start_arrow,
            end_arrow=props.end_arrow,
            arrowhead_size=props.arrowhead_size,
        )
        return {"line": line}

    def _icon(self, element: IconElement) -> dict[str, object]:
        props = element.properties
        css = [
            f"color: {props.color}",
            f"padding: {_num(props.padding)}px",
            f"border-radius: {_num(props.border_radius)}px",
            f"font-size: {_num(min(element.width, element.height) / 2)}px",
            "text-align: center",
        ]
        if props.background_color:
            css.append(f"background: {props.background_color}")
        return {"text": props.icon_name, "style": "; ".join(css)}

    def _chart(self, element: ChartElement) -> dict[str, object]:
        props = element.properties
        header = ("", *props.labels)
        rows = tuple(
            (dataset.label, *(_num(value) for value in dataset.data)) for dataset in props.datasets
        )
        return {
            "text": props.title,
            "rows": (header, *rows),
            "header_row": True,
            "style": "font-size: 12px",
        }

    def _table(self, element: TableElement) -> dict[str, object]:
        props = element.properties
        css = [
            f"font-size: {_num(props.font_size)}px",
            f"font-family: {props.font_family}",
            f"text-align: {props.text_align}",
            f"--cell-padding: {_num(props.cell_padding)}px",
            f"--cell-border: {_num(props.border_width)}px solid {props.border_color}",
            f"--header-background: {props.header_background_color}",
        ]
        return {"rows": props.data, "header_row": props.header_row, "style": "; ".join(css)}


def text_style_css(style: TextStyle) -> str:
    padding = style.padding
    css = [
        f"font-size: {_num(style.font_size)}px",
        f"font-family: {style.font_family}",
        f"font-weight: {style.font_weight}",
        f"font-style: {style.font_style}",
        f"text-decoration: {style.text_decoration}",
        f"color: {style.color}",
        f"text-align: {style.text_align}",
        f"justify-content: {_JUSTIFY.get(style.vertical_align, 'center')}",
        f"line-height: {_num(style.line_height)}",
        f"letter-spacing: {_num(style.letter_spacing)}px",
        (
            f"padding: {_num(padding.top)}px {_num(padding.right)}px "
            f"{_num(padding.bottom)}px {_num(padding.left)}px"
        ),
    ]
    if style.background_color:
        css.append(f"background: {style.background_color}")
    if style.shadow is not None:
        shadow = style.shadow
        css.append(
            f"text-shadow: {_num(shadow.offset_x)}px {_num(shadow.offset_y)}px "
            f"{_num(shadow.blur)}px {shadow.color}"
        )
    return "; ".join(css)


_JUSTIFY = {"top": "flex-start", "middle": "center", "bottom": "flex-end"}


def _num(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def _line_dict(line: LineModel) -> dict[str, object]:
    return {
        "x1": line.x1,
        "y1": line.y1,
        "x2": line.x2,
        "y2": line.y2,
        "stroke": line.stroke,
        "stroke_width": line.stroke_width,
        "start_arrow": line.start_arrow,
        "end_arrow": line.end_arrow,
        "arrowhead_size": line.arrowhead_size,
    }


__all__ = [
    "ElementModel",
    "LineModel",
    "PageModel",
    "RenderContext",
    "build_render_context",
    "text_style_css",
]
