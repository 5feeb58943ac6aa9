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

"""YAML parser for data type declarations.

A declaration file holds either one declaration or a list under ``data_types``::

    data_types:
      - type: https://example.org/types/Temperature
        schema:
          type: number
        default: 0
      - type: https://example.org/types/Address
        schema_file: address.schema.json

``schema_file`` is resolved relative to the declaring file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..exceptions import DeclarationError, SchemaLoadError
from ..factories.data_type_handler_factory import DataTypeHandlerFactory
from ..factories.factory import Factory
from ..models.data_type_handler import DataTypeHandler
from ..models.json_schema_loader import check_schema, load_schema_file
from ..utils.identifiers import Url

logger = logging.getLogger(__name__)

DECLARATION_EXTENSIONS = (".yaml", ".yml")


@dataclass(frozen=True)
class DataTypeDeclaration:
    """A schema-only data type read from a declaration file."""

    type: str
    schema: Optional[Dict[str, Any]] = None
    default_value: Any = None
    source: Optional[Path] = None

    def to_handler(self) -> DataTypeHandler:
        return DataTypeHandler(type=self.type, schema=self.schema, default_value=self.default_value)


class DeclarationParser:
    """Parse data type declaration files."""

    def parse_file(self, file_path: Union[str, Path]) -> List[DataTypeDeclaration]:
        """Parse one YAML declaration file.

        Raises:
            DeclarationError: If the file cannot be read or a declaration is malformed.
        """
        path = Path(file_path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise DeclarationError(f"Declaration file not found: {path}") from e
        except yaml.YAMLError as e:
            raise DeclarationError(f"Invalid YAML in {path}: {e}") from e

        if content is None:
            return []
        if not isinstance(content, dict):
            raise DeclarationError(f"Declaration file must contain a mapping: {path}")

        if "data_types" in content:
            entries = content["data_types"]
            if not isinstance(entries, list):
                raise DeclarationError(f"'data_types' must be a list in {path}")
        else:
            entries = [content]

        return [self._parse_entry(entry, path, index) for index, entry in enumerate(entries)]

    def parse_directory(self, directory: Union[str, Path]) -> List[DataTypeDeclaration]:
        """Parse every declaration file in ``directory`` in file name order."""
        path = Path(directory)
        if not path.is_dir():
            raise DeclarationError(f"Declarations directory not found: {path}")

        declarations: List[DataTypeDeclaration] = []
        for file_path in sorted(p for p in path.iterdir() if p.suffix in DECLARATION_EXTENSIONS):
            declarations.extend(self.parse_file(file_path))
        return declarations

    def _parse_entry(self, entry: Any, path: Path, index: int) -> DataTypeDeclaration:
        where = f"{path} (entry {index})"
        if not isinstance(entry, dict):
            raise DeclarationError(f"Declaration must be a mapping: {where}")

        type_id = entry.get("type")
        if not Url.is_valid(type_id):
            raise DeclarationError(f"Declaration 'type' must be an absolute URI, got {type_id!r}: {where}")

        if "schema" in entry and "schema_file" in entry:
            raise DeclarationError(f"Use either 'schema' or 'schema_file', not both: {where}")

        schema = None
        try:
            if "schema_file" in entry:
                schema = load_schema_file(path.parent / str(entry["schema_file"]))
            elif entry.get("schema") is not None:
                schema = entry["schema"]
                if not isinstance(schema, dict):
                    raise DeclarationError(f"Declaration 'schema' must be a mapping: {where}")
                check_schema(schema, where)
        except SchemaLoadError as e:
            raise DeclarationError(str(e)) from e

        return DataTypeDeclaration(
            type=type_id,
            schema=schema,
            default_value=entry.get("default"),
            source=path,
        )


def register_declarations(
    declarations: List[DataTypeDeclaration],
    registry: Optional[Factory[DataTypeHandler]] = None,
) -> None:
    """Register schema-only handlers for ``declarations``; later ones win."""
    registry = registry if registry is not None else DataTypeHandlerFactory
    for declaration in declarations:
        registry.register(declaration.type, declaration.to_handler)


def load_declarations(
    path: Union[str, Path],
    registry: Optional[Factory[DataTypeHandler]] = None,
) -> List[DataTypeDeclaration]:
    """Parse a declaration file or directory and register what it declares."""
    path = Path(path)
    parser = DeclarationParser()
    declarations = parser.parse_directory(path) if path.is_dir() else parser.parse_file(path)
    register_declarations(declarations, registry)
    logger.info(f"Registered {len(declarations)} declared data types from {path}")
    return declarations
