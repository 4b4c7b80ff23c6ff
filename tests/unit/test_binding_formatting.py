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
from datetime import date
from unittest import mock

from laureate.binding.fields import MISSING
from laureate.binding.formatting import (
    default_format_date,
    format_value,
    normalize_date_pattern,
    parse_iso_date,
)
from laureate.core.models import ValueType
from tests.test_support import make_binding


class TestDefaultFormatDate(unittest.TestCase):
    def test_patterns(self) -> None:
        value = date(2024, 3, 5)
        cases = (
            ("dd MMMM yyyy", "05 March 2024"),
            ("d MMM yy", "5 Mar 24"),
            ("yyyy-MM-dd", "2024-03-05"),
            ("dd/MM/yyyy", "05/03/2024"),
            ("EEEE, d MMMM", "Tuesday, 5 March"),
            ("EEE", "Tue"),
            ("'Issued' d MMMM", "Issued 5 March"),
            ("''d", "'5"),
        )
        for pattern, expected in cases:
            with self.subTest(pattern=pattern):
                self.assertEqual(default_format_date(value, pattern, "en"), expected)

    def test_unsupported_token_raises(self) -> None:
        with self.assertRaises(ValueError):
            default_format_date(date(2024, 1, 1), "HH:mm", "en")

    def test_normalize_legacy_tokens(self) -> None:
        self.assertEqual(normalize_date_pattern("DD/MM/YYYY"), "dd/MM/yyyy")
        self.assertEqual(normalize_date_pattern("DD MMM YY"), "dd MMM yy")


class TestParseIsoDate(unittest.TestCase):
    def test_accepts_iso_strings(self) -> None:
        parsed = parse_iso_date("2024-12-15")
        self.assertEqual((parsed.year, parsed.month, parsed.day), (2024, 12, 15))
        parsed = parse_iso_date("2024-12-15T10:30:00")
        self.assertEqual((parsed.year, parsed.month, parsed.day), (2024, 12, 15))

    def test_passes_dates_through(self) -> None:
        value = date(2020, 1, 2)
        self.assertIs(parse_iso_date(value), value)

    def test_rejects_garbage(self) -> None:
        for value in ("not a date", "", "   ", 20241215, None):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    parse_iso_date(value)


class TestFormatValue(unittest.TestCase):
    def test_text_is_stringified(self) -> None:
        binding = make_binding()
        self.assertEqual(format_value("Jane", binding), "Jane")
        self.assertEqual(format_value(42, binding), "42")

    def test_missing_uses_default_value(self) -> None:
        binding = make_binding(default_value="N/A")
        self.assertEqual(format_value(MISSING, binding), "N/A")
        self.assertEqual(format_value(None, binding), "N/A")

    def test_missing_without_default_is_empty(self) -> None:
        self.assertEqual(format_value(MISSING, make_binding()), "")

    def test_number_pattern_rounds_half_up(self) -> None:
        binding = make_binding(
            "user.gpa", "GPA", value_type=ValueType.NUMBER, format_pattern="0.00"
        )
        cases = ((3.5, "3.50"), (3.125, "3.13"), (2, "2.00"), (0.005, "0.01"))
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(format_value(value, binding), expected)

    def test_number_without_pattern(self) -> None:
        binding = make_binding("certificate.score", "Score", value_type=ValueType.NUMBER)
        self.assertEqual(format_value(95, binding), "95")

    def test_number_binding_with_text_value(self) -> None:
        binding = make_binding("certificate.score", "Score", value_type=ValueType.NUMBER)
        self.assertEqual(format_value("ninety", binding), "ninety")
        self.assertEqual(format_value(True, binding), "True")

    def test_date_uses_binding_pattern(self) -> None:
        binding = make_binding(
            "certificate.issueDate",
            "Issue date",
            value_type=ValueType.DATE,
            format_pattern="dd MMMM yyyy",
        )
        self.assertEqual(format_value("2024-12-15", binding), "15 December 2024")

    def test_date_falls_back_to_default_pattern(self) -> None:
        binding = make_binding("certificate.issueDate", "Issue date", value_type=ValueType.DATE)
        text = format_value("2024-12-15", binding, date_pattern="yyyy/MM/dd")
        self.assertEqual(text, "2024/12/15")

    def test_date_collaborator_receives_locale(self) -> None:
        formatter = mock.Mock(return_value="15 ธันวาคม 2567")
        binding = make_binding("certificate.issueDate", "Issue date", value_type=ValueType.DATE)
        text = format_value("2024-12-15", binding, format_date=formatter, locale="th")
        self.assertEqual(text, "15 ธันวาคม 2567")
        args = formatter.call_args.args
        self.assertEqual(args[0].day, 15)
        self.assertEqual(args[2], "th")

    def test_unparseable_date_returns_raw_and_reports(self) -> None:
        binding = make_binding("certificate.issueDate", "Issue date", value_type=ValueType.DATE)
        on_error = mock.Mock()
        text = format_value("sometime soon", binding, on_date_error=on_error)
        self.assertEqual(text, "sometime soon")
        on_error.assert_called_once()
        self.assertEqual(on_error.call_args.args[0], "sometime soon")


if __name__ == "__main__":
    unittest.main()
