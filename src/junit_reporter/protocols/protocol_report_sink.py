# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Protocol for the writable destination of a rendered report.

Any text stream satisfies it: ``sys.stdout``, an ``io.StringIO`` or a file
opened in text mode.

Usage:
    buffer = io.StringIO()
    JunitReporter(sink=buffer).print(reports)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProtocolReportSink(Protocol):
    """Writable text sink receiving the complete report in one call."""

    def write(self, text: str, /) -> int:
        """Write ``text`` and return the number of characters written."""
        ...


__all__ = ["ProtocolReportSink"]
