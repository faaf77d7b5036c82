# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""JUnit Reporter Enumerations Module.

Exports:
    EnumCaseOutcome: Outcome state of a test case (PASSED, SKIPPED, ERROR, FAILURE)
    EnumReportErrorCode: Classification of report rendering errors
"""

from junit_reporter.enums.enum_case_outcome import EnumCaseOutcome
from junit_reporter.enums.enum_report_error_code import EnumReportErrorCode

__all__: list[str] = [
    "EnumCaseOutcome",
    "EnumReportErrorCode",
]
