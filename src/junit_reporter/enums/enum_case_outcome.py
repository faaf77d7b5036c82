# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Outcome states for a single JUnit test case."""

from __future__ import annotations

from enum import Enum


class EnumCaseOutcome(str, Enum):
    """Outcome of one test case in a JUnit report.

    A case carries at most one outcome record. A case without a record
    passed.

    Values:
        PASSED: No outcome record present.
        SKIPPED: Case carries a ``<skipped>`` record.
        ERROR: Case carries an ``<error>`` record.
        FAILURE: Case carries a ``<failure>`` record.
    """

    PASSED = "passed"
    """No outcome record present."""

    SKIPPED = "skipped"
    """Case was not executed."""

    ERROR = "error"
    """Case could not complete."""

    FAILURE = "failure"
    """Case ran and a check did not hold."""

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumCaseOutcome"]
