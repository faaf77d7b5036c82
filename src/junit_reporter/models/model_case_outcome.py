# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Outcome records for a testcase.

A testcase holds at most one of ``<skipped>``, ``<error>`` or ``<failure>``.
The three records form a discriminated union on ``kind`` so a case can
never carry two of them at once.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from junit_reporter.enums import EnumCaseOutcome


class ModelSkipped(BaseModel):
    """A ``<skipped>`` record. The message attribute is always emitted."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["skipped"] = "skipped"
    message: str = Field(default="", description="Reason the case was skipped")


class ModelCaseError(BaseModel):
    """An ``<error>`` record: the case could not complete.

    Attributes:
        message: Short error message.
        type: Error category label.
        text: Free-text body, e.g. a stack trace.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["error"] = "error"
    message: str = Field(default="", description="Short error message")
    type: str = Field(default="", description="Error category label")
    text: str = Field(default="", description="Free-text body")


class ModelCaseFailure(BaseModel):
    """A ``<failure>`` record: the case ran and a check did not hold.

    Attributes:
        message: Short failure message.
        type: Failure category label.
        text: Free-text body, e.g. a diagnostic dump.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["failure"] = "failure"
    message: str = Field(default="", description="Short failure message")
    type: str = Field(default="", description="Failure category label")
    text: str = Field(default="", description="Free-text body")


ModelCaseOutcome = Annotated[
    ModelSkipped | ModelCaseError | ModelCaseFailure,
    Field(discriminator="kind"),
]


def outcome_status(
    outcome: ModelSkipped | ModelCaseError | ModelCaseFailure | None,
) -> EnumCaseOutcome:
    """Map an outcome record (or its absence) to an EnumCaseOutcome."""
    if outcome is None:
        return EnumCaseOutcome.PASSED
    return EnumCaseOutcome(outcome.kind)


__all__ = [
    "ModelCaseError",
    "ModelCaseFailure",
    "ModelCaseOutcome",
    "ModelSkipped",
    "outcome_status",
]
