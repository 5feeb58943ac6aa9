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

"""Custom exceptions for the data type registry."""


class DataTypeRegistryError(Exception):
    """Base exception for data-type-registry related errors."""
    pass


class RegistrationError(DataTypeRegistryError):
    """Exception raised for invalid registrations or unknown registered names."""
    pass


class MalformedIdentifierError(DataTypeRegistryError):
    """Exception raised when an identifier is not a valid hierarchical identifier."""

    def __init__(self, identifier, reason: str = None):
        self.identifier = identifier
        self.reason = reason
        message = f"Malformed identifier: {identifier!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


# Shorter name used by callers that guard on resolution input.
MalformedIdentifier = MalformedIdentifierError


class SchemaLoadError(DataTypeRegistryError):
    """Exception raised when a bundled schema document cannot be loaded."""
    pass


class DeclarationError(DataTypeRegistryError):
    """Exception raised for malformed data type declaration files."""
    pass
