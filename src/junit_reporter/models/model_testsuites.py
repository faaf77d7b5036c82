# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""The ``<testsuites>`` document root."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from junit_reporter.models.model_testsuite import ModelTestsuite


class ModelTestsuites(BaseModel):
    """Root of a JUnit report.

    Every attribute, including ``name``, is omitted at its zero value.

    Attributes:
        name: Report name.
        tests: Total number of testcases.
        failures: Total number of failures.
        errors: Total number of errors.
        skipped: Total number of skipped testcases.
        assertions: Total number of assertions.
        time: Aggregate time in seconds.
        timestamp: Start time of the run.
        testsuites: Ordered suites.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = ""
    tests: int = Field(default=0, ge=0)
    failures: int = Field(default=0, ge=0)
    errors: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    assertions: int = Field(default=0, ge=0)
    time: float = Field(default=0.0, ge=0)
    timestamp: datetime | None = None
    testsuites: tuple[ModelTestsuite, ...] = ()


__all__ = ["ModelTestsuites"]
