# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Report Rendering Error Classes.

Error Hierarchy:
    ReportRenderError (base rendering error)
    ├── PropertyValueConflictError
    ├── ReportSerializationError
    └── ReportInputError

All errors:
    - Carry an EnumReportErrorCode classification
    - Support error chaining with `raise ... from e`
    - Expose structured context via ``error.model``
    - Accept ModelReportErrorContext for bundled context parameters

Rendering errors are deterministic structural failures. Nothing retries
them and no partial report is written when one is raised.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from junit_reporter.enums import EnumReportErrorCode
from junit_reporter.errors.model_report_error_context import (
    ModelReportErrorContext,
)


class ModelReportErrorDetails(BaseModel):
    """Structured payload attached to every ReportRenderError.

    Attributes:
        message: Human-readable error message.
        error_code: Error classification.
        correlation_id: Correlation ID from the error context, if any.
        context: Flattened context fields plus any extra keyword context.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str = Field(description="Human-readable error message")
    error_code: EnumReportErrorCode = Field(description="Error classification")
    correlation_id: UUID | None = Field(
        default=None, description="Correlation ID for tracking"
    )
    context: dict[str, object] = Field(
        default_factory=dict, description="Structured error context"
    )


class ReportRenderError(Exception):
    """Base error class for report rendering failures.

    Example:
        >>> context = ModelReportErrorContext(operation="serialize")
        >>> raise ReportRenderError("Render failed", context=context)
    """

    default_error_code = EnumReportErrorCode.RENDER_FAILED

    def __init__(
        self,
        message: str,
        error_code: EnumReportErrorCode | None = None,
        context: ModelReportErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize ReportRenderError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to the class default)
            context: Bundled report context (operation, owner, property)
            **extra_context: Additional context information
        """
        structured_context: dict[str, object] = dict(extra_context)

        correlation_id = None
        if context is not None:
            for key in ("operation", "owner_kind", "owner_name", "property_name"):
                value = getattr(context, key)
                if value is not None:
                    structured_context[key] = value
            correlation_id = context.correlation_id

        super().__init__(message)
        self.model = ModelReportErrorDetails(
            message=message,
            error_code=error_code or self.default_error_code,
            correlation_id=correlation_id,
            context=structured_context,
        )

    @property
    def message(self) -> str:
        """Return the human-readable error message."""
        return self.model.message

    @property
    def error_code(self) -> EnumReportErrorCode:
        """Return the error classification."""
        return self.model.error_code


class PropertyValueConflictError(ReportRenderError):
    """Raised when a property carries both a value attribute and inline text.

    Example:
        >>> raise PropertyValueConflictError(
        ...     "property env in testsuite unit should contain value or a "
        ...     "text value, not both",
        ...     context=ModelReportErrorContext(
        ...         owner_kind="testsuite", owner_name="unit", property_name="env"
        ...     ),
        ... )
    """

    default_error_code = EnumReportErrorCode.PROPERTY_VALUE_CONFLICT


class ReportSerializationError(ReportRenderError):
    """Raised when the report tree cannot be encoded as XML text."""

    default_error_code = EnumReportErrorCode.SERIALIZATION_FAILED


class ReportInputError(ReportRenderError):
    """Raised when validation results cannot be loaded into input records."""

    default_error_code = EnumReportErrorCode.INVALID_INPUT


__all__ = [
    "ModelReportErrorDetails",
    "PropertyValueConflictError",
    "ReportInputError",
    "ReportRenderError",
    "ReportSerializationError",
]
