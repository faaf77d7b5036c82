# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Report Tree Builder.

Adapts an ordered list of validation results into a report document
holding exactly one testsuite:

    testsuites (name=<tool>, tests=N)
    └── testsuite (name=<tool>, errors=<invalid count>)
        ├── testcase "<path> validation"
        └── testcase "<path> validation"
            └── failure (message=str(error))    only when invalid

Input order is preserved. Nothing is sorted or deduplicated, and the
filesystem is never touched.

Invalid results are written as ``<failure>`` records but counted under the
suite's ``errors`` attribute (INVALID_RESULT_OUTCOME).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from junit_reporter.enums import EnumCaseOutcome
from junit_reporter.models import (
    ModelCaseError,
    ModelCaseFailure,
    ModelJunitReporterConfig,
    ModelTestcase,
    ModelTestsuite,
    ModelTestsuites,
    ModelValidationReport,
)
from junit_reporter.utils.util_path import normalize_path_separators

logger = logging.getLogger(__name__)

# Outcome record attached to a case whose file failed validation
INVALID_RESULT_OUTCOME = EnumCaseOutcome.FAILURE

_OUTCOME_RECORDS: dict[
    EnumCaseOutcome, type[ModelCaseError] | type[ModelCaseFailure]
] = {
    EnumCaseOutcome.ERROR: ModelCaseError,
    EnumCaseOutcome.FAILURE: ModelCaseFailure,
}


def build_testcase(
    report: ModelValidationReport,
    config: ModelJunitReporterConfig,
) -> ModelTestcase:
    """Build the testcase for one validation result.

    Args:
        report: Validation result for one file.
        config: Reporter configuration supplying names.

    Returns:
        A testcase named after the normalized path, carrying a failure
        record (message only, no body) when the file is invalid.
    """
    path = normalize_path_separators(report.file_path)
    outcome: ModelCaseError | ModelCaseFailure | None = None
    if not report.is_valid:
        record_type = _OUTCOME_RECORDS[INVALID_RESULT_OUTCOME]
        outcome = record_type(message=report.error_message)
    return ModelTestcase(
        name=config.case_name(path),
        classname=config.class_name,
        file=path,
        outcome=outcome,
    )


def build_report_tree(
    reports: Sequence[ModelValidationReport],
    config: ModelJunitReporterConfig | None = None,
) -> ModelTestsuites:
    """Build a report document from validation results.

    Args:
        reports: Validation results in output order. May be empty.
        config: Reporter configuration. Uses defaults if None.

    Returns:
        A document with ``tests == len(reports)`` and a single suite holding
        one case per result.
    """
    config = config or ModelJunitReporterConfig()

    testcases: list[ModelTestcase] = []
    invalid_count = 0
    for report in reports:
        testcase = build_testcase(report, config)
        if testcase.status == INVALID_RESULT_OUTCOME:
            invalid_count += 1
        testcases.append(testcase)

    testsuite = ModelTestsuite(
        name=config.tool_name,
        testcases=tuple(testcases),
        # invalid files are counted as errors, not failures
        errors=invalid_count,
    )
    logger.debug(
        "Built report tree for %s: %d cases, %d invalid",
        config.tool_name,
        len(testcases),
        invalid_count,
    )
    return ModelTestsuites(
        name=config.tool_name,
        tests=len(reports),
        testsuites=(testsuite,),
    )


__all__ = [
    "INVALID_RESULT_OUTCOME",
    "build_report_tree",
    "build_testcase",
]
