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

"""URI, URN and hierarchical identifier primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Tuple
from urllib.parse import urlsplit

from ..exceptions import MalformedIdentifierError
from ..models.validation_failure import FailureReason, ValidationFailure


_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_URN_NID_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9\-]{0,31}$")
_WHITESPACE_RE = re.compile(r"\s")

DEFAULT_DELIMITER = ":"


class Url:
    """Absolute URI checks used for data type identifiers."""

    @staticmethod
    def is_valid(value: Any) -> bool:
        if not isinstance(value, str) or not value or _WHITESPACE_RE.search(value):
            return False
        scheme, sep, rest = value.partition(":")
        if not sep or not rest or not _SCHEME_RE.match(scheme):
            return False
        if rest.startswith("//"):
            try:
                parts = urlsplit(value)
            except ValueError:
                return False
            return bool(parts.netloc)
        return True

    @staticmethod
    def validate(property_name: str, value: Any, failures: List[ValidationFailure]) -> bool:
        """Append a failure when ``value`` is not an absolute URI."""
        if Url.is_valid(value):
            return True
        failures.append(
            ValidationFailure(property=property_name, reason=FailureReason.BE_URL, details={"value": value})
        )
        return False


@dataclass(frozen=True)
class Urn:
    """A parsed ``urn:<nid>:<nss>`` identifier."""

    namespace_identifier: str
    namespace_specific: str

    @classmethod
    def try_parse(cls, value: Any):
        if not isinstance(value, str) or _WHITESPACE_RE.search(value):
            return None
        parts = value.split(":", 2)
        if len(parts) != 3 or parts[0].lower() != "urn":
            return None
        nid, nss = parts[1], parts[2]
        if not _URN_NID_RE.match(nid) or not nss:
            return None
        return cls(nid, nss)

    @classmethod
    def parse(cls, value: Any) -> 'Urn':
        urn = cls.try_parse(value)
        if urn is None:
            raise MalformedIdentifierError(value, "expected 'urn:<nid>:<nss>'")
        return urn

    @classmethod
    def validate(cls, property_name: str, value: Any, failures: List[ValidationFailure]) -> bool:
        """Append a failure when ``value`` is not a URN."""
        if cls.try_parse(value) is not None:
            return True
        failures.append(
            ValidationFailure(property=property_name, reason=FailureReason.BE_URN, details={"value": value})
        )
        return False

    def parts(self) -> List[str]:
        """Namespace identifier followed by the colon separated specific parts."""
        return [self.namespace_identifier] + self.namespace_specific.split(":")

    def __str__(self) -> str:
        return f"urn:{self.namespace_identifier}:{self.namespace_specific}"


@dataclass(frozen=True)
class HierarchicalIdentifier:
    """Ordered, non-empty segments joined by a single delimiter."""

    segments: Tuple[str, ...]
    delimiter: str = DEFAULT_DELIMITER

    @classmethod
    def parse(cls, value: Any, delimiter: str = DEFAULT_DELIMITER) -> 'HierarchicalIdentifier':
        """Split ``value`` into segments.

        Raises:
            MalformedIdentifierError: If ``value`` is not a string, is empty, or
                has an empty or whitespace-bearing segment.
        """
        if not isinstance(delimiter, str) or not delimiter:
            raise ValueError(f"Delimiter must be a non-empty string, got: {delimiter!r}")
        if not isinstance(value, str):
            raise MalformedIdentifierError(value, f"expected a string, got {type(value).__name__}")
        if not value:
            raise MalformedIdentifierError(value, "identifier is empty")

        segments = value.split(delimiter)
        for index, segment in enumerate(segments):
            if not segment:
                raise MalformedIdentifierError(value, f"segment {index} is empty")
            if _WHITESPACE_RE.search(segment):
                raise MalformedIdentifierError(value, f"segment {index} contains whitespace")
        return cls(tuple(segments), delimiter)

    @classmethod
    def is_valid(cls, value: Any, delimiter: str = DEFAULT_DELIMITER) -> bool:
        try:
            cls.parse(value, delimiter)
        except MalformedIdentifierError:
            return False
        return True

    def join(self, start: int = 0, end: int = None) -> str:
        return self.delimiter.join(self.segments[start:end])

    def __len__(self) -> int:
        return len(self.segments)

    def __str__(self) -> str:
        return self.join()
