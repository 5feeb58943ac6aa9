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

"""JSON Schema loader for the schema documents bundled with the data types."""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

from ..config import registry_config
from ..exceptions import SchemaLoadError

logger = logging.getLogger(__name__)

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, dict] = {}


def get_schema_dir() -> Path:
    """Directory holding the bundled schema groups."""
    return Path(__file__).parent.parent / "schema"


def get_schema_path(group: str, name: str, schema_dir: Optional[Path] = None) -> Path:
    """Get the path to a JSON Schema file.

    Args:
        group: Schema group directory (e.g. "json_ld")
        name: Schema name without extension (e.g. "JsonLdDocument")
        schema_dir: Root directory, defaults to the bundled schemas

    Returns:
        Path to the schema file
    """
    return (schema_dir or get_schema_dir()) / group / f"{name}.json"


def list_schemas(group: str, schema_dir: Optional[Path] = None) -> List[str]:
    """Names of the schemas available in ``group``."""
    group_dir = (schema_dir or get_schema_dir()) / group
    if not group_dir.is_dir():
        return []
    return sorted(p.stem for p in group_dir.glob("*.json"))


def check_schema(schema: dict, source: str) -> dict:
    """Ensure ``schema`` is itself a valid JSON Schema (draft 7) document.

    Raises:
        SchemaLoadError: If the document is not a valid schema.
    """
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as e:
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else ""
        raise SchemaLoadError(f"Invalid JSON Schema in {source} at '{path}': {e.message}") from e
    return schema


def load_schema_file(schema_path: Path) -> dict:
    """Read and check a JSON Schema file.

    Raises:
        SchemaLoadError: If the file is missing, is not JSON or is not a schema.
    """
    if not schema_path.exists():
        raise SchemaLoadError(f"Schema file not found: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Invalid JSON in schema file {schema_path}: {e.msg} (line {e.lineno})") from e

    if not isinstance(schema, dict):
        raise SchemaLoadError(f"Schema file {schema_path} must contain a JSON object")

    return check_schema(schema, str(schema_path))


def load_schema(
    group: str,
    name: str,
    schema_dir: Optional[Path] = None,
    use_cache: Optional[bool] = None,
) -> dict:
    """Load a bundled JSON Schema by group and name.

    Args:
        group: Schema group directory (e.g. "json_ld")
        name: Schema name without extension
        schema_dir: Root directory, defaults to the bundled schemas
        use_cache: Overrides registry_config.schema_cache_enabled when given

    Returns:
        Schema dictionary

    Raises:
        SchemaLoadError: If the schema cannot be loaded
    """
    schema_path = get_schema_path(group, name, schema_dir)
    cache_key = str(schema_path)
    if use_cache is None:
        use_cache = registry_config.schema_cache_enabled

    if use_cache and cache_key in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[cache_key]

    logger.debug(f"Loading schema {group}/{name} from {schema_path}")
    schema = load_schema_file(schema_path)

    if use_cache:
        _SCHEMA_CACHE[cache_key] = schema

    return schema


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
