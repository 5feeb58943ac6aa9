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

"""Built-in framework data types: URN, timestamps, property and property list."""

import time
from typing import Any, List, Optional

from ..factories.data_type_handler_factory import DataTypeHandlerFactory
from ..factories.factory import Factory
from ..models.data_type_handler import DataTypeHandler
from ..models.validation_failure import ValidationFailure
from ..utils.identifiers import Urn
from ..validation import guards
from ..validation.property_validator import PropertyValidator


FRAMEWORK_CONTEXT_ROOT = "https://schema.twindev.org/framework/"


class FrameworkDataTypes:
    """Handle all the framework data types."""

    # A URN string, e.g. urn:example:resource
    TYPE_URN = f"{FRAMEWORK_CONTEXT_ROOT}URN"

    # Integer milliseconds since 1 Jan 1970
    TYPE_TIMESTAMP_MILLISECONDS = f"{FRAMEWORK_CONTEXT_ROOT}TimestampMilliseconds"

    # Integer seconds since 1 Jan 1970
    TYPE_TIMESTAMP_SECONDS = f"{FRAMEWORK_CONTEXT_ROOT}TimestampSeconds"

    TYPE_PROPERTY = f"{FRAMEWORK_CONTEXT_ROOT}Property"
    TYPE_PROPERTY_LIST = f"{FRAMEWORK_CONTEXT_ROOT}PropertyList"

    @classmethod
    def all_types(cls) -> List[str]:
        return [
            cls.TYPE_URN,
            cls.TYPE_TIMESTAMP_MILLISECONDS,
            cls.TYPE_TIMESTAMP_SECONDS,
            cls.TYPE_PROPERTY,
            cls.TYPE_PROPERTY_LIST,
        ]

    @classmethod
    def register_types(cls, registry: Optional[Factory[DataTypeHandler]] = None) -> None:
        """Register all the framework data types.

        Property and property list values are validated against the same
        registry the types are registered into.
        """
        registry = registry if registry is not None else DataTypeHandlerFactory
        property_validator = PropertyValidator(registry)

        def validate_urn(property_name: str, value: Any, failures: List[ValidationFailure], container: Any = None) -> bool:
            return Urn.validate(property_name, value, failures)

        def validate_timestamp_milliseconds(
            property_name: str, value: Any, failures: List[ValidationFailure], container: Any = None
        ) -> bool:
            return guards.timestamp_milliseconds(property_name, value, failures)

        def validate_timestamp_seconds(
            property_name: str, value: Any, failures: List[ValidationFailure], container: Any = None
        ) -> bool:
            return guards.timestamp_seconds(property_name, value, failures)

        registry.register(cls.TYPE_URN, lambda: DataTypeHandler(
            type=cls.TYPE_URN,
            default_value="",
            schema={"type": "string", "format": "uri"},
            validate=validate_urn,
        ))

        registry.register(cls.TYPE_TIMESTAMP_MILLISECONDS, lambda: DataTypeHandler(
            type=cls.TYPE_TIMESTAMP_MILLISECONDS,
            default_value=int(time.time() * 1000),
            schema={"type": "integer"},
            validate=validate_timestamp_milliseconds,
        ))

        registry.register(cls.TYPE_TIMESTAMP_SECONDS, lambda: DataTypeHandler(
            type=cls.TYPE_TIMESTAMP_SECONDS,
            default_value=int(time.time()),
            schema={"type": "integer"},
            validate=validate_timestamp_seconds,
        ))

        registry.register(cls.TYPE_PROPERTY_LIST, lambda: DataTypeHandler(
            type=cls.TYPE_PROPERTY_LIST,
            default_value=[],
            schema={
                "type": "array",
                "items": {"$ref": cls.TYPE_PROPERTY},
            },
            validate=property_validator.validate_property_list,
        ))

        registry.register(cls.TYPE_PROPERTY, lambda: DataTypeHandler(
            type=cls.TYPE_PROPERTY,
            default_value={},
            schema={
                "type": "object",
                "properties": {
                    "key": {"type": "string"},
                    "type": {"type": "string"},
                    "value": {},
                },
                "required": ["key", "type", "value"],
            },
            validate=property_validator.validate_property,
        ))
