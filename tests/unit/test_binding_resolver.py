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
from unittest import mock

from laureate.binding.resolver import (
    TemplateVariableResolver,
    design_text,
    label_placeholder,
    required_marker,
    validate_required,
)
from laureate.core.models import UnknownElementKindError, ValueType
from tests.test_support import TEST_RECORD, make_binding, make_text, make_variable


class TestResolveDisplayText(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = TemplateVariableResolver()

    def test_required_value_present(self) -> None:
        element = make_variable(make_binding("user.fullName", "Full name", required=True))
        text = self.resolver.resolve_display_text(element, {"user": {"fullName": "Jane Doe"}})
        self.assertEqual(text, "Jane Doe")

    def test_required_value_missing_shows_marker(self) -> None:
        element = make_variable(make_binding("user.fullName", "Full name", required=True))
        text = self.resolver.resolve_display_text(element, {"user": {}})
        self.assertNotEqual(text, "")
        self.assertIn("Full name", text)
        self.assertEqual(text, required_marker("Full name"))

    def test_required_marker_wins_over_placeholder(self) -> None:
        element = make_variable(
            make_binding("user.fullName", "Full name", required=True),
            placeholder="Student name here",
        )
        text = self.resolver.resolve_display_text(element, {})
        self.assertEqual(text, required_marker("Full name"))

    def test_optional_missing_uses_placeholder(self) -> None:
        element = make_variable(make_binding("user.email", "Email"), placeholder="no email")
        self.assertEqual(self.resolver.resolve_display_text(element, {}), "no email")

    def test_optional_missing_without_placeholder_uses_label(self) -> None:
        element = make_variable(make_binding("user.email", "Email"))
        text = self.resolver.resolve_display_text(element, {})
        self.assertEqual(text, label_placeholder("Email"))

    def test_null_and_empty_values_count_as_missing(self) -> None:
        element = make_variable(make_binding("user.email", "Email", required=True))
        for record in ({"user": {"email": None}}, {"user": {"email": ""}}):
            with self.subTest(record=record):
                text = self.resolver.resolve_display_text(element, record)
                self.assertEqual(text, required_marker("Email"))

    def test_prefix_suffix_and_transform(self) -> None:
        element = make_variable(
            make_binding("user.fullName", "Full name"),
            prefix="Awarded to ",
            suffix="!",
            transform="uppercase",
        )
        text = self.resolver.resolve_display_text(element, {"user": {"fullName": "Jane Doe"}})
        self.assertEqual(text, "Awarded to JANE DOE!")

    def test_transform_does_not_touch_prefix(self) -> None:
        element = make_variable(
            make_binding("user.fullName", "Full name"),
            prefix="Mr. ",
            transform="lowercase",
        )
        text = self.resolver.resolve_display_text(element, {"user": {"fullName": "BOB"}})
        self.assertEqual(text, "Mr. bob")

    def test_number_binding(self) -> None:
        binding = make_binding(
            "user.gpa", "GPA", value_type=ValueType.NUMBER, format_pattern="0.00"
        )
        text = self.resolver.resolve_display_text(make_variable(binding), {"user": {"gpa": 3.5}})
        self.assertEqual(text, "3.50")

    def test_falsy_values_are_rendered(self) -> None:
        binding = make_binding("certificate.rank", "Rank", value_type=ValueType.NUMBER)
        text = self.resolver.resolve_display_text(
            make_variable(binding), {"certificate": {"rank": 0}}
        )
        self.assertEqual(text, "0")

    def test_indexed_path(self) -> None:
        binding = make_binding("signatories.1.name", "Signatory 2 name")
        record = {"signatories": [{"name": "A"}, {"name": "B"}]}
        self.assertEqual(self.resolver.resolve_display_text(make_variable(binding), record), "B")

    def test_rejects_non_variable_elements(self) -> None:
        with self.assertRaises(UnknownElementKindError):
            self.resolver.resolve_display_text(make_text(), {})  # type: ignore[arg-type]

    def test_same_input_gives_same_text(self) -> None:
        cases = (
            (make_variable(make_binding(required=True)), TEST_RECORD),
            (make_variable(make_binding(required=True)), {}),
            (make_variable(make_binding("user.email", "Email"), placeholder="n/a"), TEST_RECORD),
            (
                make_variable(
                    make_binding("certificate.issueDate", "Issued", value_type=ValueType.DATE),
                    prefix="on ",
                    transform="uppercase",
                ),
                TEST_RECORD,
            ),
        )
        for element, record in cases:
            with self.subTest(path=element.properties.data_binding.field_path, record=record):
                first = self.resolver.resolve_display_text(element, record)
                self.assertEqual(self.resolver.resolve_display_text(element, record), first)


class TestDateResolution(unittest.TestCase):
    def _binding(self):
        return make_binding(
            "certificate.issueDate",
            "Issue date",
            value_type=ValueType.DATE,
            format_pattern="dd MMMM yyyy",
        )

    def test_date_goes_through_collaborator(self) -> None:
        formatter = mock.Mock(return_value="15 December 2024")
        resolver = TemplateVariableResolver(format_date=formatter)
        record = {"certificate": {"issueDate": "2024-12-15"}}
        text = resolver.resolve_display_text(make_variable(self._binding()), record)
        self.assertEqual(text, "15 December 2024")
        formatter.assert_called_once()
        self.assertEqual(formatter.call_args.args[1], "dd MMMM yyyy")

    def test_configured_locale_reaches_collaborator(self) -> None:
        formatter = mock.Mock(return_value="15 \u0e18\u0e31\u0e19\u0e27\u0e32\u0e04\u0e21 2567")
        resolver = TemplateVariableResolver(format_date=formatter, locale="th")
        record = {"certificate": {"issueDate": "2024-12-15"}}
        resolver.resolve_display_text(make_variable(self._binding()), record)
        self.assertEqual(formatter.call_args.args[2], "th")

    def test_throwing_collaborator_returns_raw_value(self) -> None:
        formatter = mock.Mock(side_effect=RuntimeError("formatter exploded"))
        resolver = TemplateVariableResolver(format_date=formatter)
        record = {"certificate": {"issueDate": "2024-12-15"}}
        with self.assertLogs("laureate.binding.resolver", level="WARNING") as logs:
            text = resolver.resolve_display_text(make_variable(self._binding()), record)
        self.assertEqual(text, "2024-12-15")
        self.assertIn("certificate.issueDate", logs.output[0])

    def test_default_formatter(self) -> None:
        resolver = TemplateVariableResolver()
        record = {"certificate": {"issueDate": "2024-12-15"}}
        text = resolver.resolve_display_text(make_variable(self._binding()), record)
        self.assertEqual(text, "15 December 2024")

    def test_resolver_date_pattern_applies_without_binding_pattern(self) -> None:
        resolver = TemplateVariableResolver(date_pattern="yyyy-MM-dd")
        binding = make_binding("certificate.issueDate", "Issue date", value_type=ValueType.DATE)
        record = {"certificate": {"issueDate": "2024-12-15"}}
        self.assertEqual(
            resolver.resolve_display_text(make_variable(binding), record), "2024-12-15"
        )


class TestValidateRequired(unittest.TestCase):
    def test_all_present(self) -> None:
        record = {"user": {"fullName": "Jane"}, "course": {"name": "Math"}}
        report = validate_required(record, ["user.fullName", "course.name"])
        self.assertTrue(report.all_present)
        self.assertEqual(report.missing, ())

    def test_collects_every_missing_path_in_order(self) -> None:
        record = {"user": {"fullName": ""}, "course": {}}
        report = validate_required(
            record, ["user.fullName", "user.email", "course.name", "institution.name"]
        )
        self.assertFalse(report.all_present)
        self.assertEqual(
            report.missing,
            ("user.fullName", "user.email", "course.name", "institution.name"),
        )

    def test_empty_path_list(self) -> None:
        self.assertTrue(validate_required({}, []).all_present)

    def test_method_delegates(self) -> None:
        report = TemplateVariableResolver().validate_required({}, ["user.fullName"])
        self.assertEqual(report.missing, ("user.fullName",))


class TestDesignText(unittest.TestCase):
    def test_placeholder_or_label(self) -> None:
        self.assertEqual(design_text(make_variable(placeholder="Name goes here")), "Name goes here")
        self.assertEqual(design_text(make_variable()), "[Full name]")


if __name__ == "__main__":
    unittest.main()
