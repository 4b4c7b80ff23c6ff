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
from dataclasses import dataclass, field
from pathlib import Path

from ..config import AppConfig
from ..document.model import Document
from .html_to_pdf import render_html_to_pdf
from .qr import QrConfig
from .template_model import build_render_context
from .templating import DEFAULT_CERTIFICATE_TEMPLATE, render_template

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("html", "pdf")


@dataclass(frozen=True)
class RenderService:
    template_path: Path = DEFAULT_CERTIFICATE_TEMPLATE
    qr_config: QrConfig = field(default_factory=QrConfig)

    @classmethod
    def from_config(cls, config: AppConfig) -> RenderService:
        return cls(template_path=config.render_template_path, qr_config=config.qr_config)

    def render_html(self, document: Document, extra: dict[str, object] | None = None) -> str:
        context = build_render_context(document, self.qr_config).to_template_dict()
        if extra:
            context.update(extra)
        return render_template(self.template_path, context)

    def write(self, document: Document, output_path: str | Path, *, fmt: str = "html") -> Path:
        """Render ``document`` to ``output_path`` as HTML or, through chromium, PDF."""
        if fmt not in OUTPUT_FORMATS:
            raise ValueError(f"unsupported output format: {fmt}")
        output_path = Path(output_path)
        html = self.render_html(document)
        if fmt == "pdf":
            render_html_to_pdf(html, output_path)
        else:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(html, encoding="utf-8")
        logger.debug("wrote %s to %s", fmt, output_path)
        return output_path


__all__ = ["OUTPUT_FORMATS", "RenderService"]
