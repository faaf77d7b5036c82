# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Protocols for report output."""

from junit_reporter.protocols.protocol_report_sink import ProtocolReportSink

__all__: list[str] = ["ProtocolReportSink"]
