# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Report rendering errors.

Exports:
    ModelReportErrorContext: Bundled structured error context
    ModelReportErrorDetails: Structured payload exposed as ``error.model``
    ReportRenderError: Base class for all rendering errors
    PropertyValueConflictError: Property has both value forms populated
    ReportSerializationError: Tree could not be encoded as XML
    ReportInputError: Validation results could not be loaded
"""

from junit_reporter.errors.model_report_error_context import (
    ModelReportErrorContext,
)
from junit_reporter.errors.report_errors import (
    ModelReportErrorDetails,
    PropertyValueConflictError,
    ReportInputError,
    ReportRenderError,
    ReportSerializationError,
)

__all__: list[str] = [
    "ModelReportErrorContext",
    "ModelReportErrorDetails",
    "PropertyValueConflictError",
    "ReportInputError",
    "ReportRenderError",
    "ReportSerializationError",
]
