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

from dataclasses import dataclass

from .model import Document


@dataclass(frozen=True)
class HistoryState:
    past: tuple[Document, ...]
    present: Document
    future: tuple[Document, ...]


class DocumentHistory:
    """Undo/redo stack over whole document snapshots.

    ``push`` records a new present and drops the redo stack; ``undo`` and
    ``redo`` shuttle one snapshot at a time and are no-ops (returning ``None``)
    when there is nothing to move. ``limit`` caps how many past snapshots are
    kept, oldest first out; ``None`` keeps everything.
    """

    def __init__(self, initial: Document, *, limit: int | None = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError("history limit must be >= 0")
        self._past: list[Document] = []
        self._present = initial
        self._future: list[Document] = []
        self._limit = limit

    @property
    def present(self) -> Document:
        return self._present

    @property
    def past(self) -> tuple[Document, ...]:
        return tuple(self._past)

    @property
    def future(self) -> tuple[Document, ...]:
        return tuple(self._future)

    @property
    def state(self) -> HistoryState:
        return HistoryState(past=self.past, present=self._present, future=self.future)

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def push(self, document: Document) -> Document:
        self._past.append(self._present)
        self._present = document
        self._future.clear()
        if self._limit is not None and len(self._past) > self._limit:
            del self._past[: len(self._past) - self._limit]
        return document

    def undo(self) -> Document | None:
        if not self._past:
            return None
        self._future.insert(0, self._present)
        self._present = self._past.pop()
        return self._present

    def redo(self) -> Document | None:
        if not self._future:
            return None
        self._past.append(self._present)
        self._present = self._future.pop(0)
        return self._present


__all__ = ["DocumentHistory", "HistoryState"]
