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

"""Schema-only data types for the JSON-LD document shapes."""

import logging
from typing import Optional

from ..factories.data_type_handler_factory import DataTypeHandlerFactory
from ..factories.factory import Factory
from ..models.data_type_handler import DataTypeHandler
from ..models.json_schema_loader import load_schema
from .json_ld_types import JsonLdTypes

logger = logging.getLogger(__name__)

SCHEMA_GROUP = "json_ld"


def _deferred_schema(type_name: str, use_cache: Optional[bool] = None):
    async def schema() -> dict:
        return load_schema(SCHEMA_GROUP, type_name, use_cache=use_cache)
    return schema


class JsonLdDataTypes:
    """Handle all the data types for JSON-LD."""

    @staticmethod
    def register_types(
        registry: Optional[Factory[DataTypeHandler]] = None,
        use_cache: Optional[bool] = None,
    ) -> None:
        """Register every JSON-LD shape; schemas are read on first resolution.

        ``use_cache`` overrides the configured schema caching for these handlers.
        """
        registry = registry if registry is not None else DataTypeHandlerFactory

        for type_name in JsonLdTypes.get_all_types():
            registry.register(
                JsonLdTypes.identifier(type_name),
                lambda type_name=type_name: DataTypeHandler(
                    type=type_name,
                    schema=_deferred_schema(type_name, use_cache),
                ),
            )

        logger.debug(f"Registered {len(JsonLdTypes.get_all_types())} JSON-LD data types")
