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

"""Editing session: history, selection and drag lifecycle in one place.

The session's ``document`` is what the canvas draws. Committed mutations go
through :class:`DocumentHistory`; drag frames only replace ``document`` until
the drag is committed (one history entry) or cancelled (pre-drag document back).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..config import AppConfig
from ..core.bounds import MIN_ELEMENT_HEIGHT, MIN_ELEMENT_WIDTH
from ..core.models import Bounds
from ..render.geometry import ResizeHandle, compute_move, compute_resize, parse_handle
from . import model
from .elements import DesignerElement, ElementKind
from .factory import create_element
from .history import DocumentHistory, HistoryState
from .model import Document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selection:
    page_id: str
    element_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class _Drag:
    mode: str
    element_id: str
    start: Bounds
    before: Document
    handle: ResizeHandle | None = None
    last: Bounds | None = None


class EditorSession:
    def __init__(
        self,
        document: Document | None = None,
        *,
        history_limit: int | None = None,
        min_width: float = MIN_ELEMENT_WIDTH,
        min_height: float = MIN_ELEMENT_HEIGHT,
        grid_size: float | None = None,
    ) -> None:
        initial = document or model.create_document()
        self._history = DocumentHistory(initial, limit=history_limit)
        self._document = initial
        self._selection = Selection(page_id=initial.pages[0].id)
        self._drag: _Drag | None = None
        self.min_width = min_width
        self.min_height = min_height
        self.grid_size = grid_size

    @classmethod
    def from_config(cls, config: AppConfig, document: Document | None = None) -> EditorSession:
        editor = config.editor
        return cls(
            document,
            history_limit=editor.history_limit,
            min_width=editor.min_width,
            min_height=editor.min_height,
            grid_size=editor.grid_size if editor.snap_to_grid else None,
        )

    @property
    def document(self) -> Document:
        return self._document

    @property
    def history(self) -> HistoryState:
        return self._history.state

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def current_page(self) -> model.Page:
        return model.find_page(self._document, self._selection.page_id)

    @property
    def dragging(self) -> bool:
        return self._drag is not None

    # -- selection ---------------------------------------------------------

    def select(self, element_id: str, *, additive: bool = False) -> Selection:
        page, _ = model.find_element(self._document, element_id)
        current = self._selection.element_ids
        if additive and page.id == self._selection.page_id:
            if element_id in current:
                ids = tuple(item for item in current if item != element_id)
            else:
                ids = (*current, element_id)
        else:
            ids = (element_id,)
        self._selection = Selection(page_id=page.id, element_ids=ids)
        return self._selection

    def clear_selection(self) -> None:
        self._selection = Selection(page_id=self._selection.page_id)

    def set_current_page(self, page_id: str) -> None:
        model.find_page(self._document, page_id)
        self._selection = Selection(page_id=page_id)

    # -- committed mutations -----------------------------------------------

    def commit(self, document: Document) -> Document:
        self._require_idle()
        self._history.push(document)
        self._document = document
        self._prune_selection()
        return document

    def replace_document(self, document: Document) -> Document:
        """Swap in a loaded document as one undoable step."""
        self.commit(document)
        self._selection = Selection(page_id=document.pages[0].id)
        return document

    def add_element(
        self,
        kind: ElementKind | str,
        x: float = 100.0,
        y: float = 100.0,
        **options: object,
    ) -> DesignerElement:
        element = create_element(kind, x, y, **options)
        self.insert_element(element)
        return element

    def insert_element(self, element: DesignerElement) -> None:
        page_id = self._selection.page_id
        self.commit(model.add_element(self._document, page_id, element))
        self._selection = Selection(page_id=page_id, element_ids=(element.id,))

    def update_element(self, element_id: str, **changes: object) -> Document:
        return self.commit(model.update_element(self._document, element_id, **changes))

    def delete_selected(self) -> Document | None:
        ids = self._selection.element_ids
        if not ids:
            return None
        document = self.commit(model.delete_elements(self._document, ids))
        self.clear_selection()
        return document

    def delete_elements(self, element_ids: Iterable[str]) -> Document:
        return self.commit(model.delete_elements(self._document, element_ids))

    def duplicate_selected(self) -> tuple[str, ...]:
        ids = self._selection.element_ids
        if not ids:
            return ()
        document, new_ids = model.duplicate_elements(self._document, ids)
        self.commit(document)
        self._selection = Selection(page_id=self._selection.page_id, element_ids=new_ids)
        return new_ids

    def reorder(self, start_index: int, end_index: int) -> Document:
        page_id = self._selection.page_id
        return self.commit(model.reorder_elements(self._document, page_id, start_index, end_index))

    def bring_to_front(self, element_id: str) -> Document:
        return self.commit(model.bring_to_front(self._document, element_id))

    def send_to_back(self, element_id: str) -> Document:
        return self.commit(model.send_to_back(self._document, element_id))

    def add_page(self) -> model.Page:
        document = self.commit(model.add_page(self._document))
        page = document.pages[-1]
        self._selection = Selection(page_id=page.id)
        return page

    def delete_page(self, page_id: str) -> Document:
        page_ids = [page.id for page in self._document.pages]
        was_current = self._selection.page_id == page_id
        document = self.commit(model.delete_page(self._document, page_id))
        if was_current:
            index = min(page_ids.index(page_id), len(document.pages) - 1)
            self._selection = Selection(page_id=document.pages[index].id)
        return document

    def undo(self) -> Document | None:
        self._require_idle()
        document = self._history.undo()
        if document is not None:
            self._document = document
            self._prune_selection()
        return document

    def redo(self) -> Document | None:
        self._require_idle()
        document = self._history.redo()
        if document is not None:
            self._document = document
            self._prune_selection()
        return document

    # -- drags -------------------------------------------------------------

    def begin_resize(self, element_id: str, handle: ResizeHandle | str) -> Bounds:
        element = self._begin_drag_target(element_id)
        self._drag = _Drag(
            mode="resize",
            element_id=element_id,
            start=element.bounds,
            before=self._document,
            handle=parse_handle(handle),
        )
        return element.bounds

    def preview_resize(self, dx: float, dy: float) -> Bounds:
        drag = self._active_drag("resize")
        if drag.handle is None:
            raise RuntimeError("resize drag has no handle")
        bounds = compute_resize(
            drag.handle,
            drag.start,
            dx,
            dy,
            self.min_width,
            self.min_height,
            previous=drag.last,
        )
        self._apply_preview(drag, bounds)
        return bounds

    def commit_resize(self) -> Document:
        return self._commit_drag("resize")

    def cancel_resize(self) -> Document:
        return self._cancel_drag()

    def begin_move(self, element_id: str) -> Bounds:
        element = self._begin_drag_target(element_id)
        self._drag = _Drag(
            mode="move",
            element_id=element_id,
            start=element.bounds,
            before=self._document,
        )
        return element.bounds

    def preview_move(self, dx: float, dy: float) -> Bounds:
        drag = self._active_drag("move")
        bounds = compute_move(drag.start, dx, dy, grid_size=self.grid_size)
        self._apply_preview(drag, bounds)
        return bounds

    def commit_move(self) -> Document:
        return self._commit_drag("move")

    def cancel_move(self) -> Document:
        return self._cancel_drag()

    def _begin_drag_target(self, element_id: str) -> DesignerElement:
        self._require_idle()
        _, element = model.find_element(self._document, element_id)
        if element.locked:
            raise ValueError(f"element is locked: {element_id}")
        return element

    def _apply_preview(self, drag: _Drag, bounds: Bounds) -> None:
        page, element = model.find_element(drag.before, drag.element_id)
        self._document = model.replace_element(drag.before, element.with_bounds(bounds), page=page)
        self._drag = _Drag(
            mode=drag.mode,
            element_id=drag.element_id,
            start=drag.start,
            before=drag.before,
            handle=drag.handle,
            last=bounds,
        )

    def _commit_drag(self, mode: str) -> Document:
        drag = self._active_drag(mode)
        self._drag = None
        if drag.last is None or drag.last == drag.start:
            self._document = drag.before
            return drag.before
        logger.debug("committing %s of %s to %s", mode, drag.element_id, drag.last)
        return self.commit(self._document)

    def _cancel_drag(self) -> Document:
        if self._drag is None:
            return self._document
        self._document = self._drag.before
        self._drag = None
        return self._document

    def _active_drag(self, mode: str) -> _Drag:
        if self._drag is None or self._drag.mode != mode:
            raise RuntimeError(f"no {mode} in progress")
        return self._drag

    def _require_idle(self) -> None:
        if self._drag is not None:
            raise RuntimeError(f"{self._drag.mode} in progress; commit or cancel it first")

    def _prune_selection(self) -> None:
        page_ids = {page.id for page in self._document.pages}
        page_id = self._selection.page_id
        if page_id not in page_ids:
            page_id = self._document.pages[0].id
        live = {element.id for element in model.find_page(self._document, page_id).elements}
        ids = tuple(item for item in self._selection.element_ids if item in live)
        self._selection = Selection(page_id=page_id, element_ids=ids)


__all__ = ["EditorSession", "Selection"]
