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

"""Data type registry with namespace resolution and recursive property validation."""

__version__ = "0.1.0"

from .exceptions import (
    DataTypeRegistryError,
    DeclarationError,
    MalformedIdentifier,
    MalformedIdentifierError,
    RegistrationError,
    SchemaLoadError,
)
from .factories import (
    DataTypeHandlerFactory,
    Factory,
    IdentifierHandlerFactory,
    create_data_type_handler_factory,
    create_identifier_handler_factory,
)
from .models import (
    DataTypeHandler,
    FailureReason,
    Property,
    ValidationFailure,
    ValidationResult,
    make_property,
)
from .resolvers import resolve_namespace
from .validation import PropertyValidator, validate_property, validate_property_list
from .data_types import FrameworkDataTypes, JsonLdDataTypes, JsonLdTypes
from .bootstrap import register_all_types

__all__ = [
    "DataTypeRegistryError",
    "DeclarationError",
    "MalformedIdentifier",
    "MalformedIdentifierError",
    "RegistrationError",
    "SchemaLoadError",
    "DataTypeHandlerFactory",
    "Factory",
    "IdentifierHandlerFactory",
    "create_data_type_handler_factory",
    "create_identifier_handler_factory",
    "DataTypeHandler",
    "FailureReason",
    "Property",
    "ValidationFailure",
    "ValidationResult",
    "make_property",
    "resolve_namespace",
    "PropertyValidator",
    "validate_property",
    "validate_property_list",
    "FrameworkDataTypes",
    "JsonLdDataTypes",
    "JsonLdTypes",
    "register_all_types",
]
