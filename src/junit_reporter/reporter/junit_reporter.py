# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""JUnit reporter: validation results in, JUnit XML out.

Builds the report tree for a list of validation results, renders it and
writes the text to a sink in a single ``write`` call. Any rendering error
is raised before the sink is touched.

Usage:
    from junit_reporter.reporter.junit_reporter import JunitReporter

    reporter = JunitReporter()              # writes to sys.stdout
    reporter.print(reports)

    buffer = io.StringIO()
    JunitReporter(sink=buffer).print(reports)
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from junit_reporter.models import (
    ModelJunitReporterConfig,
    ModelTestsuites,
    ModelValidationReport,
)
from junit_reporter.protocols import ProtocolReportSink
from junit_reporter.reporter.report_builder import build_report_tree
from junit_reporter.reporter.xml_serializer import render_document

logger = logging.getLogger(__name__)


class JunitReporter:
    """Render validation results as a JUnit XML report.

    Attributes:
        config: Reporter configuration.
    """

    def __init__(
        self,
        config: ModelJunitReporterConfig | None = None,
        sink: ProtocolReportSink | None = None,
    ) -> None:
        """Initialize the reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            sink: Destination for the rendered report. Defaults to the
                process's standard output at print time.
        """
        self.config = config or ModelJunitReporterConfig()
        self._sink = sink

    def build(self, reports: Sequence[ModelValidationReport]) -> ModelTestsuites:
        """Build the report tree for ``reports``."""
        return build_report_tree(reports, self.config)

    def render(self, reports: Sequence[ModelValidationReport]) -> str:
        """Return the complete report text, declaration included.

        Raises:
            PropertyValueConflictError: If a property carries both value forms.
            ReportSerializationError: If the tree cannot be encoded as XML.
        """
        return render_document(self.build(reports), self.config)

    def print(self, reports: Sequence[ModelValidationReport]) -> None:
        """Render ``reports`` and write the report to the sink.

        The declaration, the XML body and a trailing newline are written in
        one call. Nothing is written if rendering fails.

        Args:
            reports: Validation results in output order.

        Raises:
            PropertyValueConflictError: If a property carries both value forms.
            ReportSerializationError: If the tree cannot be encoded as XML.
        """
        text = self.render(reports) + "\n"
        sink = self._sink if self._sink is not None else sys.stdout
        sink.write(text)
        logger.debug("Wrote JUnit report for %d results", len(reports))


__all__ = ["JunitReporter"]
