# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Recursive validation of typed properties and property lists."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any, List, Optional

from ..factories.data_type_handler_factory import DataTypeHandlerFactory
from ..factories.factory import Factory
from ..models.data_type_handler import DataTypeHandler
from ..models.validation_failure import FailureReason, ValidationFailure, ValidationResult
from ..utils.identifiers import Url
from . import guards

logger = logging.getLogger(__name__)

# ids of the records and lists currently being validated on this thread
_in_progress = threading.local()


def _active_ids() -> set:
    ids = getattr(_in_progress, "ids", None)
    if ids is None:
        ids = _in_progress.ids = set()
    return ids


def _circular(property_name: str, failures: List[ValidationFailure]) -> bool:
    failures.append(ValidationFailure(property=property_name, reason=FailureReason.CIRCULAR_REFERENCE))
    return False


class PropertyValidator:
    """Validate property records, delegating each value to its declared type.

    Both entry points return a structural flag and report every violation,
    including those found by delegated validators, through the ``failures``
    list. Callers must inspect the list to learn whether the value is
    admissible; :meth:`check_property` and :meth:`check_property_list` bundle
    both into a :class:`ValidationResult`.
    """

    def __init__(self, registry: Optional[Factory[DataTypeHandler]] = None):
        self.registry = registry if registry is not None else DataTypeHandlerFactory

    def validate_property(
        self,
        property_name: str,
        value: Any,
        failures: List[ValidationFailure],
        container: Any = None,
    ) -> bool:
        """Validate a single ``{key, type, value}`` record.

        Args:
            property_name: Path of the property being validated.
            value: The record to test.
            failures: The list of failures to add to.
            container: The object which contains this one.

        Returns:
            True if the record is well formed. Failures reported by the
            validator of the declared type do not affect the result.
        """
        if not guards.object_value(property_name, value, failures):
            return False

        active = _active_ids()
        if id(value) in active:
            return _circular(property_name, failures)

        active.add(id(value))
        try:
            has_key = guards.string_value(f"{property_name}.key", value.get("key"), failures)
            has_type = Url.validate(f"{property_name}.type", value.get("type"), failures)
            has_value = guards.not_empty(f"{property_name}.value", value.get("value"), failures)

            if has_type:
                handler = self.registry.get(value["type"])
                if handler is not None and handler.validate is not None:
                    logger.debug(f"Delegating '{property_name}' to data type '{value['type']}'")
                    handler.validate(property_name, value.get("value"), failures, container)
        finally:
            active.discard(id(value))

        return has_key and has_type and has_value

    def validate_property_list(
        self,
        property_name: str,
        values: Any,
        failures: List[ValidationFailure],
        container: Any = None,
    ) -> bool:
        """Validate a sequence of property records.

        An absent or empty list is valid. Repeated keys are reported at the
        later element and validation carries on with the remaining elements.
        A list or record that contains itself is reported once where the
        cycle closes instead of being walked again.

        Returns:
            True if ``values`` is a list of records (or nothing at all).
        """
        if values is None or (isinstance(values, (list, tuple)) and not values):
            return True

        if not guards.array_value(property_name, values, failures):
            return False

        active = _active_ids()
        if id(values) in active:
            return _circular(property_name, failures)

        active.add(id(values))
        try:
            keys: List[Any] = []
            for i, element in enumerate(values):
                element_name = f"{property_name}[{i}]"

                if isinstance(element, Mapping) and "key" in element:
                    key = element["key"]
                    if key in keys:
                        failures.append(
                            ValidationFailure(
                                property=f"{element_name}.key",
                                reason=FailureReason.DUPLICATE_KEY,
                                details={"key": key},
                            )
                        )
                    keys.append(key)

                self.validate_property(element_name, element, failures, container)
        finally:
            active.discard(id(values))

        return True

    def check_property(self, property_name: str, value: Any, container: Any = None) -> ValidationResult:
        failures: List[ValidationFailure] = []
        valid = self.validate_property(property_name, value, failures, container)
        return ValidationResult(structurally_valid=valid, failures=failures)

    def check_property_list(self, property_name: str, values: Any, container: Any = None) -> ValidationResult:
        failures: List[ValidationFailure] = []
        valid = self.validate_property_list(property_name, values, failures, container)
        return ValidationResult(structurally_valid=valid, failures=failures)


def validate_property(
    property_name: str,
    value: Any,
    failures: List[ValidationFailure],
    container: Any = None,
    registry: Optional[Factory[DataTypeHandler]] = None,
) -> bool:
    """Validate a property record against ``registry`` (the process-wide one by default)."""
    return PropertyValidator(registry).validate_property(property_name, value, failures, container)


def validate_property_list(
    property_name: str,
    values: Any,
    failures: List[ValidationFailure],
    container: Any = None,
    registry: Optional[Factory[DataTypeHandler]] = None,
) -> bool:
    """Validate a property list against ``registry`` (the process-wide one by default)."""
    return PropertyValidator(registry).validate_property_list(property_name, values, failures, container)
