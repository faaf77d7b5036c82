# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Report building, validation and serialization.

Exports:
    JunitReporter: Validation results in, JUnit XML written to a sink
    build_report_tree: Adapt validation results into a report document
    check_property_validity: Reject properties carrying both value forms
    find_property_conflict: Locate the first such property
    render_xml: Serialize a document to indented XML
    render_document: Serialize with the XML declaration prepended
    XML_HEADER: The fixed XML declaration line
"""

from junit_reporter.reporter.junit_reporter import JunitReporter
from junit_reporter.reporter.property_validator import (
    check_property_validity,
    find_property_conflict,
)
from junit_reporter.reporter.report_builder import (
    INVALID_RESULT_OUTCOME,
    build_report_tree,
    build_testcase,
)
from junit_reporter.reporter.xml_serializer import (
    XML_HEADER,
    build_element_tree,
    render_document,
    render_xml,
)

__all__: list[str] = [
    "INVALID_RESULT_OUTCOME",
    "JunitReporter",
    "XML_HEADER",
    "build_element_tree",
    "build_report_tree",
    "build_testcase",
    "check_property_validity",
    "find_property_conflict",
    "render_document",
    "render_xml",
]
