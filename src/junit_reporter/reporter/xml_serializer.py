# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""JUnit XML serializer.

Renders a report document to indented XML text. Rendering fails closed:
the property check runs first and its error propagates unchanged, so a
rejected document never produces any output.

Layout:
    Every line starts with the configured base indent (one space by
    default) and each nesting level adds one indent (two spaces):

     <testsuites name="config-file-validator" tests="2">
       <testsuite name="config-file-validator" errors="1">
         <testcase name="cfg/b.yaml validation" classname="config-file-validator" file="cfg/b.yaml">
           <failure message="bad key" />
         </testcase>
       </testsuite>
     </testsuites>

Attributes at their zero value (empty string, 0, None) are omitted, except
``name`` on testsuite, testcase and property, ``classname`` on testcase and
``message`` on skipped, which are always written.

Characters XML 1.0 does not allow are written as U+FFFD. Naive timestamps
are taken as UTC.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from datetime import UTC, datetime

from junit_reporter.errors import ModelReportErrorContext, ReportSerializationError
from junit_reporter.models import (
    ModelCaseError,
    ModelCaseFailure,
    ModelJunitReporterConfig,
    ModelProperty,
    ModelSkipped,
    ModelTestcase,
    ModelTestsuite,
    ModelTestsuites,
)
from junit_reporter.reporter.property_validator import check_property_validity

logger = logging.getLogger(__name__)

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Characters outside the XML 1.0 Char production, written as U+FFFD
_ILLEGAL_XML_CHARS = re.compile(
    "[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)
REPLACEMENT_CHAR = "\ufffd"

AttributeValue = str | int | float | datetime | None


def _xml_text(text: str) -> str:
    return _ILLEGAL_XML_CHARS.sub(REPLACEMENT_CHAR, text)


def _format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    text = value.isoformat()
    if text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text


def _format_value(value: str | int | float | datetime) -> str:
    if isinstance(value, datetime):
        return _format_timestamp(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return _xml_text(value)
    return str(value)


def _set_attributes(
    element: ET.Element,
    attributes: Iterable[tuple[str, AttributeValue]],
    required: tuple[str, ...] = (),
) -> None:
    for name, value in attributes:
        if name in required:
            element.set(name, "" if value is None else _format_value(value))
        elif value is not None and value != "" and value != 0:
            element.set(name, _format_value(value))


def _append_properties(
    parent: ET.Element, properties: tuple[ModelProperty, ...] | None
) -> None:
    if not properties:
        return
    container = ET.SubElement(parent, "properties")
    for prop in properties:
        element = ET.SubElement(container, "property")
        _set_attributes(
            element, [("name", prop.name), ("value", prop.value)], required=("name",)
        )
        if prop.text:
            element.text = _xml_text(prop.text)


def _append_outcome(
    parent: ET.Element,
    outcome: ModelSkipped | ModelCaseError | ModelCaseFailure | None,
) -> None:
    if outcome is None:
        return
    element = ET.SubElement(parent, outcome.kind)
    if isinstance(outcome, ModelSkipped):
        element.set("message", _xml_text(outcome.message))
        return
    _set_attributes(element, [("message", outcome.message), ("type", outcome.type)])
    if outcome.text:
        element.text = _xml_text(outcome.text)


def _append_testcase(parent: ET.Element, testcase: ModelTestcase) -> None:
    element = ET.SubElement(parent, "testcase")
    _set_attributes(
        element,
        [
            ("name", testcase.name),
            ("classname", testcase.classname),
            ("assertions", testcase.assertions),
            ("time", testcase.time),
            ("file", testcase.file),
            ("line", testcase.line),
        ],
        required=("name", "classname"),
    )
    outcome = testcase.outcome
    if isinstance(outcome, ModelSkipped):
        _append_outcome(element, outcome)
        _append_properties(element, testcase.properties)
    else:
        _append_properties(element, testcase.properties)
        _append_outcome(element, outcome)


def _append_testsuite(parent: ET.Element, testsuite: ModelTestsuite) -> None:
    element = ET.SubElement(parent, "testsuite")
    _set_attributes(
        element,
        [
            ("name", testsuite.name),
            ("tests", testsuite.tests),
            ("failures", testsuite.failures),
            ("errors", testsuite.errors),
            ("skipped", testsuite.skipped),
            ("assertions", testsuite.assertions),
            ("time", testsuite.time),
            ("timestamp", testsuite.timestamp),
            ("file", testsuite.file),
        ],
        required=("name",),
    )
    for testcase in testsuite.testcases or ():
        _append_testcase(element, testcase)
    _append_properties(element, testsuite.properties)
    if testsuite.system_out is not None:
        ET.SubElement(element, "system-out").text = _xml_text(testsuite.system_out)
    if testsuite.system_err is not None:
        ET.SubElement(element, "system-err").text = _xml_text(testsuite.system_err)


def build_element_tree(document: ModelTestsuites) -> ET.Element:
    """Convert a report document to an unindented ``<testsuites>`` element.

    Args:
        document: Report document to convert.

    Returns:
        The root element.
    """
    root = ET.Element("testsuites")
    _set_attributes(
        root,
        [
            ("name", document.name),
            ("tests", document.tests),
            ("failures", document.failures),
            ("errors", document.errors),
            ("skipped", document.skipped),
            ("assertions", document.assertions),
            ("time", document.time),
            ("timestamp", document.timestamp),
        ],
    )
    for testsuite in document.testsuites:
        _append_testsuite(root, testsuite)
    return root


def _apply_indent(root: ET.Element, base_indent: str, indent: str) -> None:
    ET.indent(root, space=indent)
    if not base_indent:
        return
    line_start = "\n" + base_indent
    for element in root.iter():
        if len(element) and element.text and not element.text.strip():
            element.text = element.text.replace("\n", line_start)
        if element.tail and not element.tail.strip():
            element.tail = element.tail.replace("\n", line_start)


def render_xml(
    document: ModelTestsuites,
    config: ModelJunitReporterConfig | None = None,
) -> str:
    """Render a report document to indented XML, without the declaration.

    Args:
        document: Report document to render.
        config: Reporter configuration supplying indentation. Uses
            defaults if None.

    Returns:
        The XML body text.

    Raises:
        PropertyValueConflictError: If a property carries both value forms.
        ReportSerializationError: If the encoder fails.
    """
    config = config or ModelJunitReporterConfig()
    check_property_validity(document)

    root = build_element_tree(document)
    _apply_indent(root, config.base_indent, config.indent)
    try:
        body = ET.tostring(root, encoding="unicode")
    except (TypeError, ValueError) as e:
        raise ReportSerializationError(
            f"failed to serialize report: {e}",
            context=ModelReportErrorContext(operation="serialize"),
        ) from e

    logger.debug(
        "Serialized report %r: %d suites, %d characters",
        document.name,
        len(document.testsuites),
        len(body),
    )
    return config.base_indent + body


def render_document(
    document: ModelTestsuites,
    config: ModelJunitReporterConfig | None = None,
) -> str:
    """Render a report document with the XML declaration prepended.

    Args:
        document: Report document to render.
        config: Reporter configuration. Uses defaults if None.

    Returns:
        ``XML_HEADER`` followed by the XML body.
    """
    return XML_HEADER + render_xml(document, config)


__all__ = [
    "XML_HEADER",
    "build_element_tree",
    "render_document",
    "render_xml",
]
