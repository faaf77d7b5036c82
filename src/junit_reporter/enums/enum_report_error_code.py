# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Error codes for report rendering failures."""

from __future__ import annotations

from enum import Enum


class EnumReportErrorCode(str, Enum):
    """Classification of report rendering errors.

    Values:
        RENDER_FAILED: Generic rendering failure.
        PROPERTY_VALUE_CONFLICT: A property carries both a value attribute
            and inline text.
        SERIALIZATION_FAILED: The tree could not be encoded as XML text.
        INVALID_INPUT: Validation results could not be loaded.
    """

    RENDER_FAILED = "render_failed"
    PROPERTY_VALUE_CONFLICT = "property_value_conflict"
    SERIALIZATION_FAILED = "serialization_failed"
    INVALID_INPUT = "invalid_input"

    def __str__(self) -> str:
        """Return the string value for serialization."""
        return self.value


__all__: list[str] = ["EnumReportErrorCode"]
