# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""junit_reporter: render configuration-file validation results as JUnit XML.

Usage:
    from junit_reporter import JunitReporter, ModelValidationReport

    JunitReporter().print(
        [
            ModelValidationReport(file_path="cfg/a.yaml", is_valid=True),
            ModelValidationReport(
                file_path="cfg/b.yaml",
                is_valid=False,
                validation_error=ValueError("bad key"),
            ),
        ]
    )
"""

from junit_reporter.errors import (
    PropertyValueConflictError,
    ReportInputError,
    ReportRenderError,
    ReportSerializationError,
)
from junit_reporter.models import (
    ModelJunitReporterConfig,
    ModelTestsuites,
    ModelValidationReport,
)
from junit_reporter.reporter import (
    JunitReporter,
    build_report_tree,
    render_document,
    render_xml,
)

__version__ = "0.1.0"

__all__: list[str] = [
    "JunitReporter",
    "ModelJunitReporterConfig",
    "ModelTestsuites",
    "ModelValidationReport",
    "PropertyValueConflictError",
    "ReportInputError",
    "ReportRenderError",
    "ReportSerializationError",
    "build_report_tree",
    "render_document",
    "render_xml",
]
