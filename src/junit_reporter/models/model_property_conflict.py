# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""A property found carrying both a value attribute and inline text."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ModelPropertyConflict(BaseModel):
    """First property conflict found in a report tree.

    Attributes:
        property_name: Name of the offending property.
        owner_kind: Whether the property belongs to a testsuite or a testcase.
        owner_name: Name of the owning testsuite or testcase.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    property_name: str = Field(description="Name of the offending property")
    owner_kind: Literal["testsuite", "testcase"] = Field(
        description="Kind of the owning node"
    )
    owner_name: str = Field(description="Name of the owning node")

    def __str__(self) -> str:
        """Format the conflict as a human-readable message."""
        return (
            f"property {self.property_name} in {self.owner_kind} {self.owner_name} "
            "should contain value or a text value, not both"
        )


__all__ = ["ModelPropertyConflict"]
