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

import math
import unittest
from dataclasses import replace

from laureate.core.models import Bounds
from laureate.document import model
from tests.test_support import make_document, make_text


class TestDocumentModel(unittest.TestCase):
    def test_create_document_has_one_page(self) -> None:
        document = model.create_document(name="Cert", created_by="admin")
        self.assertEqual(len(document.pages), 1)
        self.assertEqual(document.metadata.created_by, "admin")
        self.assertEqual(document.metadata.created_at, document.metadata.updated_at)
        self.assertTrue(document.metadata.created_at.endswith("Z"))

    def test_add_element_is_copy_on_write(self) -> None:
        document = model.create_document()
        page_id = document.pages[0].id
        updated = model.add_element(document, page_id, make_text("a"))
        self.assertEqual(document.pages[0].elements, ())
        self.assertEqual([item.id for item in updated.pages[0].elements], ["a"])

    def test_add_element_rejects_duplicate_id(self) -> None:
        document = make_document(make_text("a"))
        with self.assertRaises(ValueError):
            model.add_element(document, document.pages[0].id, make_text("a"))

    def test_add_element_rejects_non_positive_size(self) -> None:
        document = model.create_document()
        page_id = document.pages[0].id
        for changes in ({"height": -40.0}, {"width": 0.0}, {"width": math.nan}):
            with self.subTest(changes=changes):
                with self.assertRaises(ValueError):
                    model.add_element(document, page_id, replace(make_text("b"), **changes))

    def test_add_element_unknown_page(self) -> None:
        with self.assertRaises(KeyError):
            model.add_element(model.create_document(), "page-missing", make_text("a"))

    def test_update_element(self) -> None:
        document = make_document(make_text("a"))
        updated = model.update_element(document, "a", x=5.0, rotation=45.0)
        _, element = model.find_element(updated, "a")
        self.assertEqual((element.x, element.rotation), (5.0, 45.0))
        _, original = model.find_element(document, "a")
        self.assertEqual(original.x, 100.0)

    def test_update_element_rejects_id_and_bad_sizes(self) -> None:
        document = make_document(make_text("a"))
        cases = ({"id": "b"}, {"width": 0}, {"height": -3}, {"width": float("nan")})
        for changes in cases:
            with self.subTest(changes=changes):
                with self.assertRaises(ValueError):
                    model.update_element(document, "a", **changes)

    def test_update_unknown_element(self) -> None:
        with self.assertRaises(KeyError):
            model.update_element(model.create_document(), "nope", x=1.0)

    def test_delete_elements(self) -> None:
        document = make_document(make_text("a"), make_text("b"), make_text("c"))
        updated = model.delete_elements(document, ["a", "c", "ghost"])
        self.assertEqual([item.id for item in updated.pages[0].elements], ["b"])
        self.assertIs(model.delete_elements(document, []), document)

    def test_duplicate_elements_offsets_and_renames(self) -> None:
        document = make_document(make_text("a"))
        updated, new_ids = model.duplicate_elements(document, ["a"])
        self.assertEqual(len(new_ids), 1)
        _, copy = model.find_element(updated, new_ids[0])
        self.assertNotEqual(copy.id, "a")
        self.assertEqual((copy.x, copy.y), (120.0, 120.0))
        self.assertEqual(copy.properties, make_text("a").properties)

    def test_sorted_for_paint_is_stable(self) -> None:
        document = make_document(
            make_text("top", z_index=5),
            make_text("low-1", z_index=0),
            make_text("low-2", z_index=0),
        )
        ordered = model.sorted_for_paint(document.pages[0])
        self.assertEqual([item.id for item in ordered], ["low-1", "low-2", "top"])

    def test_reorder_elements_renumbers_z(self) -> None:
        document = make_document(
            make_text("a", z_index=1),
            make_text("b", z_index=2),
            make_text("c", z_index=3),
        )
        page_id = document.pages[0].id
        # Layer order is top-most first: c, b, a. Move c to the bottom.
        updated = model.reorder_elements(document, page_id, 0, 2)
        ordered = model.sorted_for_paint(updated.pages[0])
        self.assertEqual([item.id for item in ordered], ["c", "a", "b"])
        self.assertEqual(sorted(item.z_index for item in ordered), [1, 2, 3])

    def test_reorder_out_of_range(self) -> None:
        document = make_document(make_text("a"))
        with self.assertRaises(IndexError):
            model.reorder_elements(document, document.pages[0].id, 0, 3)

    def test_bring_to_front_and_send_to_back(self) -> None:
        document = make_document(make_text("a", z_index=0), make_text("b", z_index=4))
        front = model.bring_to_front(document, "a")
        self.assertEqual(model.find_element(front, "a")[1].z_index, 5)
        back = model.send_to_back(document, "b")
        self.assertEqual(model.find_element(back, "b")[1].z_index, -1)
        self.assertIs(model.bring_to_front(document, "b"), document)

    def test_pages(self) -> None:
        document = model.add_page(model.create_document())
        self.assertEqual([page.name for page in document.pages], ["Page 1", "Page 2"])
        trimmed = model.delete_page(document, document.pages[0].id)
        self.assertEqual(len(trimmed.pages), 1)
        with self.assertRaises(ValueError):
            model.delete_page(trimmed, trimmed.pages[0].id)

    def test_with_bounds(self) -> None:
        element = make_text("a").with_bounds(Bounds(1, 2, 3, 4))
        self.assertEqual(element.bounds, Bounds(1, 2, 3, 4))


if __name__ == "__main__":
    unittest.main()
