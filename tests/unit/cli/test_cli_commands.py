# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for the junit-report CLI."""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path

import pytest
from click.testing import CliRunner

from junit_reporter.cli.commands import cli, load_validation_reports
from junit_reporter.errors import ReportInputError

RESULTS_YAML = """\
- file_path: cfg/a.yaml
  is_valid: true
- file_path: cfg\\b.yaml
  is_valid: false
  error: bad key
"""


@pytest.fixture
def results_file(tmp_path: Path) -> Path:
    """A YAML results file with one valid and one invalid result."""
    path = tmp_path / "results.yaml"
    path.write_text(RESULTS_YAML, encoding="utf-8")
    return path


class TestLoadValidationReports:
    """Tests for load_validation_reports()."""

    def test_loads_yaml_list(self, results_file: Path) -> None:
        """A YAML list loads in order."""
        reports = load_validation_reports(results_file)

        assert [r.file_path for r in reports] == ["cfg/a.yaml", "cfg\\b.yaml"]
        assert reports[1].error_message == "bad key"

    def test_loads_json_mapping(self, tmp_path: Path) -> None:
        """JSON with a top-level 'results' list is accepted."""
        path = tmp_path / "results.json"
        path.write_text(
            json.dumps(
                {"results": [{"file_path": "x.json", "is_valid": False, "error": "e"}]}
            ),
            encoding="utf-8",
        )

        reports = load_validation_reports(path)

        assert len(reports) == 1
        assert not reports[0].is_valid

    def test_empty_file_is_no_results(self, tmp_path: Path) -> None:
        """An empty file loads as an empty list."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_validation_reports(path) == []

    def test_malformed_result_raises(self, tmp_path: Path) -> None:
        """An invalid result without an error is rejected with its index."""
        path = tmp_path / "bad.yaml"
        path.write_text("- file_path: a.yaml\n  is_valid: false\n", encoding="utf-8")

        with pytest.raises(ReportInputError) as exc_info:
            load_validation_reports(path)

        assert exc_info.value.model.context["index"] == 0

    def test_scalar_content_raises(self, tmp_path: Path) -> None:
        """A scalar document is not a list of results."""
        path = tmp_path / "scalar.yaml"
        path.write_text("just text\n", encoding="utf-8")

        with pytest.raises(ReportInputError, match="must contain a list"):
            load_validation_reports(path)

    @pytest.mark.parametrize(
        "content",
        [
            "file_path: a.yaml\nis_valid: true\n",
            "results:\n",
            "results: a.yaml\n",
        ],
    )
    def test_mapping_without_results_list_raises(
        self, tmp_path: Path, content: str
    ) -> None:
        """A mapping must carry a 'results' list, not become an empty report."""
        path = tmp_path / "single.yaml"
        path.write_text(content, encoding="utf-8")

        with pytest.raises(ReportInputError, match="has no 'results' list"):
            load_validation_reports(path)

    def test_yaml_syntax_error_raises(self, tmp_path: Path) -> None:
        """Unparseable YAML is reported as an input error."""
        path = tmp_path / "broken.yaml"
        path.write_text("- [unclosed\n", encoding="utf-8")

        with pytest.raises(ReportInputError, match="cannot read results file"):
            load_validation_reports(path)


class TestRenderCommand:
    """Tests for `junit-report render`."""

    def test_renders_to_stdout(self, results_file: Path) -> None:
        """The report is written to standard output."""
        runner = CliRunner()

        result = runner.invoke(cli, ["render", str(results_file)])

        assert result.exit_code == 0, result.output
        root = ET.fromstring(result.stdout.encode("utf-8"))
        assert root.get("tests") == "2"
        suite = root.find("testsuite")
        assert suite is not None
        assert suite.get("errors") == "1"
        assert suite.findall("testcase")[1].get("file") == "cfg/b.yaml"

    def test_renders_to_output_file(self, results_file: Path, tmp_path: Path) -> None:
        """--output writes the report to a file."""
        output = tmp_path / "reports" / "junit.xml"
        runner = CliRunner()

        result = runner.invoke(
            cli, ["render", str(results_file), "--output", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").startswith("<?xml")
        assert "<?xml" not in result.stdout

    def test_fail_on_invalid(self, results_file: Path) -> None:
        """--fail-on-invalid exits 1 after writing the report."""
        runner = CliRunner()

        result = runner.invoke(cli, ["render", str(results_file), "--fail-on-invalid"])

        assert result.exit_code == 1
        assert result.stdout.startswith("<?xml")

    def test_tool_name_option(self, results_file: Path) -> None:
        """--tool-name renames the report, suite and class."""
        runner = CliRunner()

        result = runner.invoke(
            cli, ["render", str(results_file), "--tool-name", "cfg-lint"]
        )

        root = ET.fromstring(result.stdout.encode("utf-8"))
        assert root.get("name") == "cfg-lint"
        assert root.find("testsuite/testcase").get("classname") == "cfg-lint"

    def test_tool_name_from_environment(
        self, results_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """JUNIT_REPORTER_TOOL_NAME sets the default tool name."""
        monkeypatch.setenv("JUNIT_REPORTER_TOOL_NAME", "env-tool")
        runner = CliRunner()

        result = runner.invoke(cli, ["render", str(results_file)])

        root = ET.fromstring(result.stdout.encode("utf-8"))
        assert root.get("name") == "env-tool"

    def test_input_error_exits_2_without_output(
        self, tmp_path: Path
    ) -> None:
        """Malformed input exits 2 and writes no report."""
        path = tmp_path / "bad.yaml"
        path.write_text("- file_path: a.yaml\n  is_valid: false\n", encoding="utf-8")
        output = tmp_path / "junit.xml"
        runner = CliRunner()

        result = runner.invoke(cli, ["render", str(path), "--output", str(output)])

        assert result.exit_code == 2
        assert not output.exists()
        assert "invalid_input" in result.stderr

    def test_serialization_error_exits_2_without_output(
        self, tmp_path: Path
    ) -> None:
        """An unencodable error message exits 2 and writes nothing."""
        path = tmp_path / "ctrl.json"
        path.write_text(
            json.dumps([{"file_path": "a", "is_valid": False, "error": "x\u0007y"}]),
            encoding="utf-8",
        )
        runner = CliRunner()

        result = runner.invoke(cli, ["render", str(path)])

        assert result.exit_code == 2
        assert result.stdout == ""
        assert "serialization_failed" in result.stderr

    def test_missing_results_file(self, tmp_path: Path) -> None:
        """click rejects a nonexistent results file."""
        runner = CliRunner()

        result = runner.invoke(cli, ["render", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 2
