# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Pytest configuration and shared fixtures for junit_reporter tests."""

from __future__ import annotations

import pytest

from junit_reporter.models import ModelValidationReport


@pytest.fixture
def sample_reports() -> list[ModelValidationReport]:
    """One valid and one invalid result, the second with a Windows path."""
    return [
        ModelValidationReport(file_path="cfg/a.yaml", is_valid=True),
        ModelValidationReport(
            file_path="cfg\\b.yaml",
            is_valid=False,
            validation_error=ValueError("bad key"),
        ),
    ]
