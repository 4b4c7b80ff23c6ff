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

import json
import logging
import os
import re
from dataclasses import dataclass, replace
from pathlib import Path

from ..document.codec import template_from_dict, template_to_dict
from ..document.model import touch
from ..document.template import CertificateTemplate

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".json"
_TEMPLATE_ID_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


@dataclass(frozen=True)
class TemplateSummary:
    id: str
    name: str
    certificate_type: str
    updated_at: str
    path: Path


class TemplateStore:
    """Certificate templates kept as one JSON file per template id under ``root``."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, template_id: str) -> Path:
        if not _TEMPLATE_ID_RE.match(template_id) or template_id in (".", ".."):
            raise ValueError(f"invalid template id: {template_id!r}")
        return self._root / f"{template_id}{TEMPLATE_SUFFIX}"

    def save(self, template: CertificateTemplate) -> CertificateTemplate:
        """Write ``template`` and return it with ``updated_at`` refreshed."""
        path = self.path_for(template.id)
        saved = replace(template, document=touch(template.document))
        self._root.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(template_to_dict(saved), handle, indent=2, ensure_ascii=False)
            handle.write("\n")
        os.replace(tmp_path, path)
        logger.debug("saved template %s to %s", template.id, path)
        return saved

    def load(self, template_id: str) -> CertificateTemplate:
        path = self.path_for(template_id)
        if not path.is_file():
            raise KeyError(f"unknown template: {template_id}")
        return self.load_path(path)

    @staticmethod
    def load_path(path: str | Path) -> CertificateTemplate:
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"template file is not valid JSON: {path}: {exc}") from exc
        return template_from_dict(data)

    def exists(self, template_id: str) -> bool:
        return self.path_for(template_id).is_file()

    def list(self) -> list[TemplateSummary]:
        """Summaries of every readable template, most recently updated first."""
        if not self._root.is_dir():
            return []
        summaries: list[TemplateSummary] = []
        for path in sorted(self._root.glob(f"*{TEMPLATE_SUFFIX}")):
            try:
                template = self.load_path(path)
            except ValueError as exc:
                logger.warning("skipping unreadable template %s: %s", path, exc)
                continue
            summaries.append(
                TemplateSummary(
                    id=template.id,
                    name=template.name,
                    certificate_type=template.certificate_type,
                    updated_at=template.document.metadata.updated_at,
                    path=path,
                )
            )
        summaries.sort(key=lambda item: item.updated_at, reverse=True)
        return summaries

    def delete(self, template_id: str) -> None:
        path = self.path_for(template_id)
        if not path.is_file():
            raise KeyError(f"unknown template: {template_id}")
        path.unlink()
        logger.debug("deleted template %s", template_id)


__all__ = ["TEMPLATE_SUFFIX", "TemplateStore", "TemplateSummary"]
