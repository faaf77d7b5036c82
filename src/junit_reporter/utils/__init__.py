# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Utility helpers for junit_reporter."""

from junit_reporter.utils.util_path import normalize_path_separators

__all__: list[str] = ["normalize_path_separators"]
