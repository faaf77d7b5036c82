# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Path display helpers."""

from __future__ import annotations


def normalize_path_separators(path: str) -> str:
    """Rewrite backslash separators as forward slashes.

    Reports then read the same whatever platform the validator ran on.
    The path is treated as text only; the filesystem is never consulted.

    Args:
        path: File path as reported by the validator.

    Returns:
        The path with every ``\\`` replaced by ``/``.

    Example:
        >>> normalize_path_separators("cfg\\\\nested\\\\b.yaml")
        'cfg/nested/b.yaml'
    """
    if "\\" not in path:
        return path
    return path.replace("\\", "/")


__all__ = ["normalize_path_separators"]
