# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""A ``<testsuite>``: one logical group of testcases."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from junit_reporter.models.model_property import ModelProperty
from junit_reporter.models.model_testcase import ModelTestcase


class ModelTestsuite(BaseModel):
    """One logical group of checks.

    ``name`` is always emitted. Counts, time, timestamp and file are omitted
    at their zero value. ``testcases``, ``properties``, ``system_out`` and
    ``system_err`` are ``None`` when the substructure is absent.

    Attributes:
        name: Suite name.
        tests: Number of testcases.
        failures: Number of failed testcases.
        errors: Number of errored testcases.
        skipped: Number of skipped testcases.
        assertions: Number of assertions.
        time: Aggregate time in seconds.
        timestamp: Start time of the suite.
        file: Source file reference.
        testcases: Ordered testcases.
        properties: Property annotations.
        system_out: Captured standard output.
        system_err: Captured standard error.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Suite name")
    tests: int = Field(default=0, ge=0)
    failures: int = Field(default=0, ge=0)
    errors: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    assertions: int = Field(default=0, ge=0)
    time: float = Field(default=0.0, ge=0)
    timestamp: datetime | None = None
    file: str = ""
    testcases: tuple[ModelTestcase, ...] | None = None
    properties: tuple[ModelProperty, ...] | None = None
    system_out: str | None = None
    system_err: str | None = None


__all__ = ["ModelTestsuite"]
