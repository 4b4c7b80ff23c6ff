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

import unittest
from dataclasses import replace

from laureate.document.history import DocumentHistory
from laureate.document.model import create_document


def _documents(count: int):
    base = create_document(name="v0")
    return [replace(base, name=f"v{index}") for index in range(count)]


class TestDocumentHistory(unittest.TestCase):
    def test_initial_state(self) -> None:
        doc = create_document()
        history = DocumentHistory(doc)
        self.assertIs(history.present, doc)
        self.assertEqual(history.past, ())
        self.assertEqual(history.future, ())
        self.assertFalse(history.can_undo)
        self.assertFalse(history.can_redo)

    def test_push_undo_redo_round_trip(self) -> None:
        v0, v1, v2 = _documents(3)
        history = DocumentHistory(v0)
        history.push(v1)
        history.push(v2)
        self.assertEqual(history.past, (v0, v1))

        self.assertIs(history.undo(), v1)
        self.assertIs(history.undo(), v0)
        self.assertEqual(history.future, (v1, v2))
        self.assertIs(history.redo(), v1)
        self.assertIs(history.redo(), v2)
        self.assertEqual(history.future, ())

    def test_k_undos_then_k_redos_restore_present(self) -> None:
        for pushes in range(1, 6):
            for k in range(pushes + 1):
                with self.subTest(pushes=pushes, k=k):
                    documents = _documents(pushes + 1)
                    history = DocumentHistory(documents[0])
                    for document in documents[1:]:
                        history.push(document)
                    before = history.state
                    for _ in range(k):
                        history.undo()
                    self.assertIs(history.present, documents[pushes - k])
                    for _ in range(k):
                        history.redo()
                    self.assertIs(history.present, before.present)
                    self.assertEqual(history.state, before)

    def test_undo_and_redo_at_ends_are_noops(self) -> None:
        v0, v1 = _documents(2)
        history = DocumentHistory(v0)
        self.assertIsNone(history.undo())
        self.assertIs(history.present, v0)
        history.push(v1)
        self.assertIsNone(history.redo())
        self.assertIs(history.present, v1)

    def test_push_clears_future(self) -> None:
        v0, v1, v2, v3 = _documents(4)
        history = DocumentHistory(v0)
        history.push(v1)
        history.push(v2)
        history.undo()
        history.push(v3)
        self.assertEqual(history.future, ())
        self.assertEqual(history.past, (v0, v1))
        self.assertIs(history.present, v3)

    def test_sequence_length_is_conserved(self) -> None:
        docs = _documents(6)
        history = DocumentHistory(docs[0])
        for doc in docs[1:]:
            history.push(doc)
        for _ in range(3):
            history.undo()
            state = history.state
            self.assertEqual(len(state.past) + 1 + len(state.future), len(docs))
        history.redo()
        state = history.state
        self.assertEqual(state.past + (state.present,) + state.future, tuple(docs))

    def test_limit_drops_oldest(self) -> None:
        docs = _documents(5)
        history = DocumentHistory(docs[0], limit=2)
        for doc in docs[1:]:
            history.push(doc)
        self.assertEqual(history.past, (docs[2], docs[3]))
        self.assertIs(history.undo(), docs[3])
        self.assertIs(history.undo(), docs[2])
        self.assertIsNone(history.undo())

    def test_zero_limit_keeps_no_past(self) -> None:
        v0, v1 = _documents(2)
        history = DocumentHistory(v0, limit=0)
        history.push(v1)
        self.assertFalse(history.can_undo)

    def test_negative_limit_rejected(self) -> None:
        with self.assertRaises(ValueError):
            DocumentHistory(create_document(), limit=-1)


if __name__ == "__main__":
    unittest.main()
