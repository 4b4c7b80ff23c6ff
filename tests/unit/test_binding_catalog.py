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

from laureate.binding.catalog import (
    AVAILABLE_DATA_FIELDS,
    SAMPLE_CERTIFICATE_DATA,
    SECTIONS,
    fields_by_section,
    find_field,
    required_field_paths,
)
from laureate.binding.resolver import validate_required
from laureate.core.models import ValueType


class TestCatalog(unittest.TestCase):
    def test_paths_are_unique(self) -> None:
        paths = [item.field_path for item in AVAILABLE_DATA_FIELDS]
        self.assertEqual(len(paths), len(set(paths)))

    def test_every_field_belongs_to_a_section(self) -> None:
        grouped = [item for section in SECTIONS for item in fields_by_section(section)]
        self.assertEqual(sorted(grouped, key=str), sorted(AVAILABLE_DATA_FIELDS, key=str))

    def test_custom_section_maps_to_custom_fields(self) -> None:
        paths = [item.field_path for item in fields_by_section("Custom")]
        self.assertEqual(paths, ["customFields.honors", "customFields.specialNote"])

    def test_unknown_section(self) -> None:
        with self.assertRaises(ValueError):
            fields_by_section("payroll")

    def test_find_field(self) -> None:
        field = find_field("certificate.issueDate")
        self.assertIsNotNone(field)
        self.assertEqual(field.value_type, ValueType.DATE)
        self.assertIsNone(find_field("certificate.nope"))

    def test_sample_record_satisfies_required_fields(self) -> None:
        required = required_field_paths()
        self.assertIn("user.fullName", required)
        report = validate_required(SAMPLE_CERTIFICATE_DATA, required)
        self.assertTrue(report.all_present, report.missing)


if __name__ == "__main__":
    unittest.main()
