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

"""Populate a registry with the built-in and declared data types."""

import logging
from typing import Optional

from .config import RegistryConfig, registry_config
from .data_types.framework_data_types import FrameworkDataTypes
from .data_types.json_ld_data_types import JsonLdDataTypes
from .factories.data_type_handler_factory import DataTypeHandlerFactory
from .factories.factory import Factory
from .models.data_type_handler import DataTypeHandler
from .parsers.declaration_parser import load_declarations

logger = logging.getLogger(__name__)


def register_all_types(
    registry: Optional[Factory[DataTypeHandler]] = None,
    config: Optional[RegistryConfig] = None,
) -> Factory[DataTypeHandler]:
    """Register framework and JSON-LD types, then any declared in ``config.declarations_dir``.

    Declared types are registered last so they can replace built-in ones.
    """
    registry = registry if registry is not None else DataTypeHandlerFactory
    config = config if config is not None else registry_config

    FrameworkDataTypes.register_types(registry)
    JsonLdDataTypes.register_types(registry, use_cache=config.schema_cache_enabled)

    if config.declarations_dir:
        load_declarations(config.declarations_dir, registry)

    logger.debug(f"Registry '{registry.type_name}' holds {len(registry)} data types")
    return registry
