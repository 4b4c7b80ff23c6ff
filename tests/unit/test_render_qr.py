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

from laureate.render import qr as qr_module
from laureate.render.qr import QrConfig, make_qr, qr_data_uri


class TestQr(unittest.TestCase):
    def test_data_uri_is_png(self) -> None:
        uri = qr_data_uri("https://verify.example/cert-1")
        self.assertTrue(uri.startswith("data:image/png;base64,"))

    def test_make_qr_passes_config(self) -> None:
        config = QrConfig(error="q", version=5, micro=False, boost_error=False)
        with mock.patch.object(qr_module.segno, "make") as make_mock:
            make_qr("payload", config)
        make_mock.assert_called_once_with(
            "payload", error="Q", version=5, micro=False, boost_error=False
        )

    def test_error_override(self) -> None:
        with mock.patch.object(qr_module.segno, "make") as make_mock:
            make_qr("payload", QrConfig(), error="h")
        self.assertEqual(make_mock.call_args.kwargs["error"], "H")

    def test_invalid_error_level(self) -> None:
        with self.assertRaises(ValueError):
            make_qr("payload", error="X")

    def test_colors_and_size_reach_segno(self) -> None:
        fake = mock.Mock()
        fake.png_data_uri.return_value = "data:image/png;base64,AA=="
        config = QrConfig(scale=7, border=1, dark="#111111")
        with mock.patch.object(qr_module.segno, "make", return_value=fake):
            uri = qr_data_uri("payload", config, light=" #eeeeee ")
        self.assertEqual(uri, "data:image/png;base64,AA==")
        fake.png_data_uri.assert_called_once_with(
            scale=7, border=1, dark="#111111", light="#eeeeee"
        )

    def test_unset_colors_are_not_sent(self) -> None:
        fake = mock.Mock()
        with mock.patch.object(qr_module.segno, "make", return_value=fake):
            qr_data_uri("payload")
        self.assertEqual(fake.png_data_uri.call_args.kwargs, {"scale": 4, "border": 4})


if __name__ == "__main__":
    unittest.main()
