# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Property validity check for report documents.

A ``<property>`` holds its value either as the ``value`` attribute or as
inline text. A property carrying both is rejected before serialization so
that no partial report is ever written.

Usage:
    from junit_reporter.reporter.property_validator import (
        check_property_validity,
        find_property_conflict,
    )

    conflict = find_property_conflict(document)   # None when valid
    check_property_validity(document)             # raises on conflict
"""

from __future__ import annotations

import logging

from junit_reporter.errors import ModelReportErrorContext, PropertyValueConflictError
from junit_reporter.models import ModelPropertyConflict, ModelTestsuites

logger = logging.getLogger(__name__)


def find_property_conflict(document: ModelTestsuites) -> ModelPropertyConflict | None:
    """Return the first property carrying both value forms, if any.

    Suites are walked in order. For each suite its own properties are
    checked first, then the properties of each of its cases.

    Args:
        document: Report document to check.

    Returns:
        The first conflict found, or None if every property is valid.
    """
    for testsuite in document.testsuites:
        for prop in testsuite.properties or ():
            if prop.has_value_conflict:
                return ModelPropertyConflict(
                    property_name=prop.name,
                    owner_kind="testsuite",
                    owner_name=testsuite.name,
                )
        for testcase in testsuite.testcases or ():
            for prop in testcase.properties or ():
                if prop.has_value_conflict:
                    return ModelPropertyConflict(
                        property_name=prop.name,
                        owner_kind="testcase",
                        owner_name=testcase.name,
                    )
    return None


def check_property_validity(document: ModelTestsuites) -> None:
    """Raise if any property in the document carries both value forms.

    Args:
        document: Report document to check.

    Raises:
        PropertyValueConflictError: Naming the first offending property and
            its owning testsuite or testcase.
    """
    conflict = find_property_conflict(document)
    if conflict is None:
        return

    message = str(conflict)
    logger.warning("Rejecting report: %s", message)
    raise PropertyValueConflictError(
        message,
        context=ModelReportErrorContext(
            operation="validate_properties",
            owner_kind=conflict.owner_kind,
            owner_name=conflict.owner_name,
            property_name=conflict.property_name,
        ),
    )


__all__ = ["check_property_validity", "find_property_conflict"]
