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

"""Validation failure records and the result type wrapping them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class FailureReason:
    """Stable, machine-readable reason codes for validation failures."""

    BE_OBJECT = "validation.beObject"
    BE_ARRAY = "validation.beArray"
    BE_TEXT = "validation.beText"
    BE_NOT_EMPTY = "validation.beNotEmpty"
    BE_URL = "validation.beUrl"
    BE_URN = "validation.beUrn"
    BE_TIMESTAMP_MILLISECONDS = "validation.beTimestampMilliseconds"
    BE_TIMESTAMP_SECONDS = "validation.beTimestampSeconds"
    DUPLICATE_KEY = "validation.properties.keyAlreadyExists"
    CIRCULAR_REFERENCE = "validation.circularReference"


@dataclass(frozen=True)
class ValidationFailure:
    """A single soft failure found while validating caller-supplied data."""

    property: str
    reason: str
    details: Optional[Dict[str, Any]] = None


@dataclass
class ValidationResult:
    """Structural validity flag plus the ordered failures recorded alongside it.

    ``structurally_valid`` only says the top-level value had the right shape.
    Use ``is_valid`` to know whether the value is admissible as a whole.
    """

    structurally_valid: bool
    failures: List[ValidationFailure] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return self.structurally_valid and not self.failures

    def reasons_for(self, property_name: str) -> List[str]:
        """Return the reasons recorded for an exact property path."""
        return [f.reason for f in self.failures if f.property == property_name]

    def __bool__(self) -> bool:
        return self.is_valid
