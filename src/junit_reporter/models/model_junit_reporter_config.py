# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Configuration for building and rendering JUnit reports."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Name of the validating tool, used as report, suite and class name
DEFAULT_TOOL_NAME = "config-file-validator"

# Case names are "<path> validation"
DEFAULT_CASE_NAME_TEMPLATE = "{path} validation"

# Every serialized line starts with the base indent; each level adds one indent
DEFAULT_BASE_INDENT = " "
DEFAULT_INDENT = "  "


class ModelJunitReporterConfig(BaseModel):
    """Configuration for the JUnit reporter.

    Attributes:
        tool_name: Name used for the report document and its suite.
        class_name: Owning-class label for every case.
        case_name_template: Template for case names; must contain ``{path}``.
        base_indent: Prefix written at the start of every XML line.
        indent: Indentation added per nesting level.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    tool_name: str = Field(
        default=DEFAULT_TOOL_NAME,
        min_length=1,
        description="Name used for the report document and its suite.",
    )
    class_name: str = Field(
        default=DEFAULT_TOOL_NAME,
        description="Owning-class label for every case.",
    )
    case_name_template: str = Field(
        default=DEFAULT_CASE_NAME_TEMPLATE,
        description="Template for case names; must contain '{path}'.",
    )
    base_indent: str = Field(
        default=DEFAULT_BASE_INDENT,
        pattern=r"^[ \t]*$",
        description="Prefix written at the start of every XML line.",
    )
    indent: str = Field(
        default=DEFAULT_INDENT,
        pattern=r"^[ \t]*$",
        description="Indentation added per nesting level.",
    )

    @field_validator("case_name_template")
    @classmethod
    def _require_path_placeholder(cls, value: str) -> str:
        if "{path}" not in value:
            raise ValueError("case_name_template must contain '{path}'")
        return value

    def case_name(self, path: str) -> str:
        """Return the case name for a normalized file path."""
        return self.case_name_template.replace("{path}", path)


__all__ = [
    "DEFAULT_BASE_INDENT",
    "DEFAULT_CASE_NAME_TEMPLATE",
    "DEFAULT_INDENT",
    "DEFAULT_TOOL_NAME",
    "ModelJunitReporterConfig",
]
