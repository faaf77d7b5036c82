# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Unit tests for JunitReporter output to an injected sink."""

from __future__ import annotations

import io
from unittest.mock import MagicMock

import pytest

from junit_reporter.errors import PropertyValueConflictError, ReportSerializationError
from junit_reporter.models import ModelJunitReporterConfig, ModelValidationReport
from junit_reporter.protocols import ProtocolReportSink
from junit_reporter.reporter import XML_HEADER, JunitReporter


class TestPrint:
    """Tests for JunitReporter.print()."""

    def test_writes_report_to_sink(
        self, sample_reports: list[ModelValidationReport]
    ) -> None:
        """The sink receives declaration, body and a trailing newline."""
        buffer = io.StringIO()

        JunitReporter(sink=buffer).print(sample_reports)

        text = buffer.getvalue()
        assert text.startswith(XML_HEADER + " <testsuites ")
        assert text.endswith(" </testsuites>\n")
        assert '<failure message="bad key" />' in text

    def test_single_write_call(
        self, sample_reports: list[ModelValidationReport]
    ) -> None:
        """The whole report goes out in one write."""
        sink = MagicMock()

        JunitReporter(sink=sink).print(sample_reports)

        sink.write.assert_called_once()
        (written,) = sink.write.call_args.args
        assert written == JunitReporter().render(sample_reports) + "\n"

    def test_defaults_to_stdout(
        self,
        sample_reports: list[ModelValidationReport],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Without a sink the report goes to standard output."""
        JunitReporter().print(sample_reports)

        captured = capsys.readouterr()
        assert captured.out.startswith(XML_HEADER)
        assert captured.err == ""

    def test_empty_results(self) -> None:
        """No results still renders a valid report."""
        buffer = io.StringIO()

        JunitReporter(sink=buffer).print([])

        assert buffer.getvalue() == (
            XML_HEADER
            + ' <testsuites name="config-file-validator">\n'
            + '   <testsuite name="config-file-validator" />\n'
            + " </testsuites>\n"
        )

    def test_control_character_in_message_is_replaced(
        self, sample_reports: list[ModelValidationReport]
    ) -> None:
        """A control character in one message still writes every result."""
        buffer = io.StringIO()
        reports = [
            *sample_reports,
            ModelValidationReport(
                file_path="bad.json",
                is_valid=False,
                validation_error=ValueError("invalid character '\x1b' in string"),
            ),
        ]

        JunitReporter(sink=buffer).print(reports)

        text = buffer.getvalue()
        assert text.count("<testcase ") == 3
        assert "invalid character '\ufffd' in string" in text
        assert "\x1b" not in text

    def test_nothing_written_on_serialization_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        sample_reports: list[ModelValidationReport],
    ) -> None:
        """An encoder failure leaves the sink untouched."""
        sink = MagicMock()

        def _fail(*args: object, **kwargs: object) -> str:
            raise TypeError("cannot serialize")

        monkeypatch.setattr(
            "junit_reporter.reporter.xml_serializer.ET.tostring", _fail
        )

        with pytest.raises(ReportSerializationError):
            JunitReporter(sink=sink).print(sample_reports)

        sink.write.assert_not_called()

    def test_nothing_written_on_property_conflict(
        self,
        monkeypatch: pytest.MonkeyPatch,
        sample_reports: list[ModelValidationReport],
    ) -> None:
        """A property conflict raised during rendering leaves the sink untouched."""
        sink = MagicMock()
        error = PropertyValueConflictError("property env in testsuite s ...")

        def _reject(document: object) -> None:
            raise error

        monkeypatch.setattr(
            "junit_reporter.reporter.xml_serializer.check_property_validity",
            _reject,
        )

        with pytest.raises(PropertyValueConflictError) as exc_info:
            JunitReporter(sink=sink).print(sample_reports)

        assert exc_info.value is error
        sink.write.assert_not_called()


class TestConfiguration:
    """Tests for reporter configuration."""

    def test_custom_tool_name(self) -> None:
        """The configured tool name is used throughout."""
        config = ModelJunitReporterConfig(tool_name="lint", class_name="lint")
        reporter = JunitReporter(config=config)

        document = reporter.build(
            [ModelValidationReport(file_path="x.ini", is_valid=True)]
        )

        assert document.name == "lint"
        assert document.testsuites[0].name == "lint"

    def test_string_io_satisfies_sink_protocol(self) -> None:
        """Text streams are valid sinks."""
        assert isinstance(io.StringIO(), ProtocolReportSink)
