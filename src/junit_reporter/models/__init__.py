# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""JUnit report models.

Exports:
    ModelTestsuites: Report document root
    ModelTestsuite: One group of testcases
    ModelTestcase: One individual check
    ModelProperty: Name/value annotation on a suite or case
    ModelSkipped, ModelCaseError, ModelCaseFailure: Testcase outcome records
    ModelValidationReport: Input validation result for one file
    ModelPropertyConflict: Property carrying both value forms
    ModelJunitReporterConfig: Reporter configuration
"""

from junit_reporter.models.model_case_outcome import (
    ModelCaseError,
    ModelCaseFailure,
    ModelCaseOutcome,
    ModelSkipped,
)
from junit_reporter.models.model_junit_reporter_config import (
    DEFAULT_TOOL_NAME,
    ModelJunitReporterConfig,
)
from junit_reporter.models.model_property import ModelProperty
from junit_reporter.models.model_property_conflict import ModelPropertyConflict
from junit_reporter.models.model_testcase import ModelTestcase
from junit_reporter.models.model_testsuite import ModelTestsuite
from junit_reporter.models.model_testsuites import ModelTestsuites
from junit_reporter.models.model_validation_report import ModelValidationReport

__all__: list[str] = [
    "DEFAULT_TOOL_NAME",
    "ModelCaseError",
    "ModelCaseFailure",
    "ModelCaseOutcome",
    "ModelJunitReporterConfig",
    "ModelProperty",
    "ModelPropertyConflict",
    "ModelSkipped",
    "ModelTestcase",
    "ModelTestsuite",
    "ModelTestsuites",
    "ModelValidationReport",
]
