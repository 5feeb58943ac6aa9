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

"""Handler entry describing one registered data type."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Mapping, Optional, Protocol, Union

from .validation_failure import ValidationFailure


class DataTypeValidator(Protocol):
    """Validator signature shared by every registered data type."""

    def __call__(
        self,
        property_name: str,
        value: Any,
        failures: List[ValidationFailure],
        container: Any = None,
    ) -> bool:
        ...


SchemaDescriptor = Mapping[str, Any]
SchemaSource = Union[
    SchemaDescriptor,
    Callable[[], SchemaDescriptor],
    Callable[[], Awaitable[SchemaDescriptor]],
]


@dataclass(frozen=True)
class DataTypeHandler:
    """Association between a type identifier and its schema, default and validator.

    ``schema`` may be given directly, or deferred behind a zero-argument callable
    (plain or ``async``). Registration and validation never touch it; only
    consumers that need the schema resolve it.
    """

    type: str
    schema: Optional[SchemaSource] = None
    default_value: Any = None
    validate: Optional[DataTypeValidator] = None

    @property
    def has_deferred_schema(self) -> bool:
        return callable(self.schema)

    def get_schema(self) -> Optional[SchemaDescriptor]:
        """Return the schema, calling a synchronous accessor if needed.

        Raises:
            TypeError: If the schema accessor is asynchronous; use
                :meth:`resolve_schema` instead.
        """
        if not callable(self.schema):
            return self.schema
        if inspect.iscoroutinefunction(self.schema):
            raise TypeError(f"Schema for '{self.type}' is asynchronous, use resolve_schema()")
        return self.schema()

    async def resolve_schema(self) -> Optional[SchemaDescriptor]:
        """Return the schema, awaiting a deferred accessor when it is asynchronous."""
        if not callable(self.schema):
            return self.schema
        schema = self.schema()
        if inspect.isawaitable(schema):
            schema = await schema
        return schema
