# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""A single ``<testcase>`` in a JUnit report."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from junit_reporter.enums import EnumCaseOutcome
from junit_reporter.models.model_case_outcome import ModelCaseOutcome, outcome_status
from junit_reporter.models.model_property import ModelProperty


class ModelTestcase(BaseModel):
    """One individual check.

    ``name`` and ``classname`` are always emitted, even when empty. All
    other attributes are omitted at their zero value. ``properties=None``
    suppresses the ``<properties>`` element entirely.

    Attributes:
        name: Case name.
        classname: Owning-class label.
        assertions: Number of assertions evaluated.
        time: Execution time in seconds.
        file: Source file reference.
        line: Source line reference.
        outcome: At most one skipped/error/failure record.
        properties: Optional property annotations.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Case name")
    classname: str = Field(default="", description="Owning-class label")
    assertions: int = Field(default=0, ge=0, description="Assertion count")
    time: float = Field(default=0.0, ge=0, description="Execution time in seconds")
    file: str = Field(default="", description="Source file reference")
    line: int = Field(default=0, ge=0, description="Source line reference")
    outcome: ModelCaseOutcome | None = Field(
        default=None, description="Skipped, error or failure record"
    )
    properties: tuple[ModelProperty, ...] | None = Field(
        default=None, description="Property annotations"
    )

    @property
    def status(self) -> EnumCaseOutcome:
        """Return the outcome state of this case."""
        return outcome_status(self.outcome)


__all__ = ["ModelTestcase"]
