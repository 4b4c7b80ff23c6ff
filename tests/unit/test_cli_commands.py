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

import json
import re
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from typer.testing import CliRunner

from laureate.cli import app

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def _strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


class TestCliRoot(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_root_info_commands(self) -> None:
        cases = (
            {
                "args": ["--help"],
                "expected_exit_code": 0,
                "contains": ("new", "preview", "issue", "validate", "templates", "fields"),
            },
            {
                "args": ["--version"],
                "expected_exit_code": 0,
                "contains": ("laureate",),
            },
        )
        for case in cases:
            with self.subTest(args=case["args"]):
                result = self.runner.invoke(app, case["args"])
                self.assertEqual(result.exit_code, case["expected_exit_code"])
                output = _strip_ansi(result.output)
                for expected in case["contains"]:
                    self.assertIn(expected, output)

    def test_issue_help_lists_options(self) -> None:
        result = self.runner.invoke(app, ["issue", "--help"])
        self.assertEqual(result.exit_code, 0)
        output = _strip_ansi(result.output)
        for option in ("--data", "--sample", "--format", "--output-dir"):
            self.assertIn(option, output)

    def test_fields_quiet_lists_paths(self) -> None:
        result = self.runner.invoke(app, ["--quiet", "fields", "--section", "institution"])
        self.assertEqual(result.exit_code, 0)
        lines = _strip_ansi(result.output).split()
        self.assertEqual(
            lines,
            ["institution.name", "institution.nameEn", "institution.logo", "institution.address"],
        )

    def test_fields_unknown_section(self) -> None:
        result = self.runner.invoke(app, ["fields", "--section", "payroll"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("unknown field section", _strip_ansi(result.output))

    def test_config_print_path(self) -> None:
        result = self.runner.invoke(app, ["config", "--config", "custom.toml", "--print-path"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(_strip_ansi(result.output).strip(), "custom.toml")


class TestCliWorkflow(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)
        self.store_dir = self.tmp_path / "store"
        self.config_path = self.tmp_path / "config.toml"
        self.config_path.write_text(
            f'[templates]\ndir = "{self.store_dir.as_posix()}"\n', encoding="utf-8"
        )

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _invoke(self, *args: str):
        return self.runner.invoke(app, ["--config", str(self.config_path), *args])

    def _new_template(self, *extra: str) -> str:
        result = self._invoke("--quiet", "new", "Course Completion", *extra)
        self.assertEqual(result.exit_code, 0, result.output)
        return _strip_ansi(result.output).strip()

    def _write_data(self, payload: object) -> Path:
        path = self.tmp_path / "data.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    def test_new_saves_to_store_and_lists(self) -> None:
        template_id = self._new_template("--type", "honor")
        self.assertTrue((self.store_dir / f"{template_id}.json").is_file())
        result = self._invoke("--quiet", "templates")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(_strip_ansi(result.output).split(), [template_id])

    def test_new_to_file(self) -> None:
        output = self.tmp_path / "out" / "workshop.json"
        result = self._invoke("new", "Workshop", "--blank", "-o", str(output))
        self.assertEqual(result.exit_code, 0, result.output)
        payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(payload["name"], "Workshop")
        self.assertEqual(payload["document"]["pages"][0]["elements"], [])

    def test_new_rejects_blank_name(self) -> None:
        result = self._invoke("new", "   ")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("template name cannot be empty", _strip_ansi(result.output))

    def test_delete_template(self) -> None:
        template_id = self._new_template()
        result = self._invoke("templates", "--delete", template_id)
        self.assertEqual(result.exit_code, 0)
        result = self._invoke("templates", "--delete", template_id)
        self.assertEqual(result.exit_code, 2)
        self.assertIn("unknown template", _strip_ansi(result.output))

    def test_validate(self) -> None:
        template_id = self._new_template()
        result = self._invoke("validate", template_id, "--sample")
        self.assertEqual(result.exit_code, 0, result.output)

        data = self._write_data([{"user": {"fullName": "Jane"}}, {"user": {}}])
        result = self._invoke("validate", template_id, "--data", str(data))
        self.assertEqual(result.exit_code, 1)
        output = _strip_ansi(result.output)
        self.assertIn("user.fullName", output)
        self.assertIn("1 of 2", output)

    def test_validate_needs_data(self) -> None:
        template_id = self._new_template()
        result = self._invoke("validate", template_id)
        self.assertEqual(result.exit_code, 2)
        self.assertIn("--data", _strip_ansi(result.output))

    def test_validate_rejects_bad_data_file(self) -> None:
        template_id = self._new_template()
        data = self.tmp_path / "data.json"
        data.write_text("{oops", encoding="utf-8")
        result = self._invoke("validate", template_id, "--data", str(data))
        self.assertEqual(result.exit_code, 2)
        self.assertIn("not valid JSON", _strip_ansi(result.output))

    def test_unknown_template(self) -> None:
        result = self._invoke("validate", "template_missing", "--sample")
        self.assertEqual(result.exit_code, 2)
        self.assertIn("unknown template: template_missing", _strip_ansi(result.output))

    def test_preview_html(self) -> None:
        template_id = self._new_template()
        output = self.tmp_path / "preview.html"
        result = self._invoke("preview", template_id, "--sample", "-o", str(output))
        self.assertEqual(result.exit_code, 0, result.output)
        html = output.read_text(encoding="utf-8")
        self.assertIn("Jane Doe", html)
        self.assertIn("data:image/png;base64,", html)

    def test_preview_design_view(self) -> None:
        template_id = self._new_template()
        output = self.tmp_path / "design.html"
        result = self._invoke("preview", template_id, "-o", str(output))
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("[Full name]", output.read_text(encoding="utf-8"))

    def test_issue_rejects_incomplete_batch(self) -> None:
        template_id = self._new_template()
        data = self._write_data([{"user": {"fullName": "Jane"}}, {"user": {"fullName": ""}}])
        out_dir = self.tmp_path / "issued"
        result = self._invoke(
            "issue", template_id, "--data", str(data), "--format", "html", "-o", str(out_dir)
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("nothing issued", _strip_ansi(result.output))
        self.assertFalse(out_dir.exists())

    def test_issue_writes_files_and_manifest(self) -> None:
        template_id = self._new_template()
        data = self._write_data(
            [
                {"user": {"fullName": "Jane Doe"}, "certificate": {"id": "cert/001"}},
                {"user": {"fullName": "John Roe"}},
            ]
        )
        out_dir = self.tmp_path / "issued"
        result = self._invoke(
            "issue", template_id, "--data", str(data), "--format", "html", "-o", str(out_dir)
        )
        self.assertEqual(result.exit_code, 0, result.output)
        manifest = json.loads((out_dir / "manifest.json").read_text(encoding="utf-8"))
        files = [entry["file"] for entry in manifest["certificates"]]
        self.assertEqual(files, ["certificate-0001-cert_001.html", "certificate-0002.html"])
        self.assertEqual(manifest["certificates"][0]["template_id"], template_id)
        self.assertIn("John Roe", (out_dir / files[1]).read_text(encoding="utf-8"))

    def test_issue_pdf_uses_renderer(self) -> None:
        template_id = self._new_template()
        out_dir = self.tmp_path / "issued"
        with mock.patch("laureate.render.service.render_html_to_pdf") as pdf_mock:
            result = self._invoke("issue", template_id, "--sample", "-o", str(out_dir))
        self.assertEqual(result.exit_code, 0, result.output)
        pdf_mock.assert_called_once()
        self.assertEqual(
            pdf_mock.call_args.args[1], out_dir / "certificate-0001-cert-001.pdf"
        )


if __name__ == "__main__":
    unittest.main()
