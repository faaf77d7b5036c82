# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Name/value annotation attached to a testsuite or testcase."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelProperty(BaseModel):
    """A ``<property>`` element.

    A property holds its value either in the ``value`` attribute or as
    inline text, never both. Both empty is valid and means an empty value.
    Construction accepts both forms so that the conflict can be reported
    against its owning suite or case at render time.

    Attributes:
        name: Property name (always emitted).
        value: Attribute-style value.
        text: Inline text value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Property name")
    value: str = Field(default="", description="Attribute-style value")
    text: str = Field(default="", description="Inline text value")

    @property
    def has_value_conflict(self) -> bool:
        """Return True if both the value attribute and inline text are set."""
        return self.value != "" and self.text != ""


__all__ = ["ModelProperty"]
