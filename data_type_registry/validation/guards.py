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

"""Scalar predicates that record a failure when a value is rejected.

Each guard has the shape ``(property_name, value, failures) -> bool`` so the
property validator and the data type validators can compose them freely.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List

from ..models.validation_failure import FailureReason, ValidationFailure


MAX_TIMESTAMP_MILLISECONDS = 8_640_000_000_000_000
MAX_TIMESTAMP_SECONDS = MAX_TIMESTAMP_MILLISECONDS // 1000


def _fail(failures: List[ValidationFailure], property_name: str, reason: str, value: Any) -> bool:
    failures.append(ValidationFailure(property=property_name, reason=reason, details={"value": value}))
    return False


def is_empty(value: Any) -> bool:
    return value is None


def is_integer(value: Any) -> bool:
    # bool is an int subclass but never a valid integer value here
    return isinstance(value, int) and not isinstance(value, bool)


def object_value(property_name: str, value: Any, failures: List[ValidationFailure]) -> bool:
    if isinstance(value, Mapping):
        return True
    return _fail(failures, property_name, FailureReason.BE_OBJECT, value)


def array_value(property_name: str, value: Any, failures: List[ValidationFailure]) -> bool:
    if isinstance(value, (list, tuple)):
        return True
    return _fail(failures, property_name, FailureReason.BE_ARRAY, value)


def string_value(property_name: str, value: Any, failures: List[ValidationFailure]) -> bool:
    """Require a non-empty string."""
    if isinstance(value, str) and value:
        return True
    return _fail(failures, property_name, FailureReason.BE_TEXT, value)


def not_empty(property_name: str, value: Any, failures: List[ValidationFailure]) -> bool:
    if not is_empty(value):
        return True
    return _fail(failures, property_name, FailureReason.BE_NOT_EMPTY, value)


def timestamp_milliseconds(property_name: str, value: Any, failures: List[ValidationFailure]) -> bool:
    if is_integer(value) and 0 <= value <= MAX_TIMESTAMP_MILLISECONDS:
        return True
    return _fail(failures, property_name, FailureReason.BE_TIMESTAMP_MILLISECONDS, value)


def timestamp_seconds(property_name: str, value: Any, failures: List[ValidationFailure]) -> bool:
    if is_integer(value) and 0 <= value <= MAX_TIMESTAMP_SECONDS:
        return True
    return _fail(failures, property_name, FailureReason.BE_TIMESTAMP_SECONDS, value)
