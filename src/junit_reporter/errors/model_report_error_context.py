# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Report Error Context Configuration Model.

Bundles the structured fields attached to report rendering errors so that
error constructors keep a short parameter list.
"""

from __future__ import annotations

from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class ModelReportErrorContext(BaseModel):
    """Configuration model for report error context.

    Attributes:
        operation: Operation being performed (build, validate, serialize, load).
        owner_kind: Kind of report node that owns the offending data.
        owner_name: Name of the owning testsuite or testcase.
        property_name: Name of the offending property, if any.
        correlation_id: Correlation ID for tracking a single render call.

    Example:
        >>> context = ModelReportErrorContext(
        ...     operation="validate_properties",
        ...     owner_kind="testsuite",
        ...     owner_name="config-file-validator",
        ...     property_name="env",
        ... )
        >>> raise PropertyValueConflictError("...", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: str | None = Field(
        default=None,
        description="Operation being performed (build, validate, serialize, load)",
    )
    owner_kind: Literal["testsuite", "testcase"] | None = Field(
        default=None,
        description="Kind of report node owning the offending data",
    )
    owner_name: str | None = Field(
        default=None,
        description="Name of the owning testsuite or testcase",
    )
    property_name: str | None = Field(
        default=None,
        description="Name of the offending property",
    )
    correlation_id: UUID | None = Field(
        default=None,
        description="Correlation ID for tracking a single render call",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelReportErrorContext:
        """Create a context, generating a correlation ID when none is given.

        Args:
            correlation_id: Existing correlation ID to reuse.
            **kwargs: Remaining context fields.

        Returns:
            A new context with ``correlation_id`` populated.
        """
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelReportErrorContext"]
