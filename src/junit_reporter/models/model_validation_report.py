# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""One configuration-file validation outcome, as supplied by the validator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ModelValidationReport(BaseModel):
    """Validation result for a single file.

    ``validation_error`` is present iff ``is_valid`` is False. It may be the
    exception raised by the validator or its message. When loading from a
    mapping the error may be given under the ``error`` key.

    Attributes:
        file_path: Path of the validated file, as reported by the validator.
        is_valid: Whether the file passed validation.
        validation_error: Underlying error for an invalid file.

    Example:
        >>> ModelValidationReport(
        ...     file_path="cfg/b.yaml",
        ...     is_valid=False,
        ...     validation_error=ValueError("bad key"),
        ... ).error_message
        'bad key'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )

    file_path: str = Field(description="Path of the validated file")
    is_valid: bool = Field(description="Whether the file passed validation")
    validation_error: BaseException | str | None = Field(
        default=None,
        alias="error",
        description="Underlying error for an invalid file",
    )

    @model_validator(mode="after")
    def _check_error_presence(self) -> ModelValidationReport:
        if self.is_valid and self.validation_error is not None:
            raise ValueError(
                f"valid result for {self.file_path!r} must not carry an error"
            )
        if not self.is_valid and self.validation_error is None:
            raise ValueError(
                f"invalid result for {self.file_path!r} requires an error"
            )
        return self

    @property
    def error_message(self) -> str:
        """Return the string form of the validation error, or an empty string."""
        if self.validation_error is None:
            return ""
        return str(self.validation_error)


__all__ = ["ModelValidationReport"]
