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

"""Names of the JSON-LD document shapes."""

from typing import List


class JsonLdTypes:
    """JSON-LD 1.1 document shape names, registered under ``CONTEXT_ROOT``."""

    CONTEXT_ROOT = "https://schema.twindev.org/json-ld/"

    DOCUMENT = "JsonLdDocument"
    OBJECT = "JsonLdObject"
    NODE_OBJECT = "JsonLdNodeObject"
    NODE_PRIMITIVE = "JsonLdNodePrimitive"
    GRAPH_OBJECT = "JsonLdGraphObject"
    VALUE_OBJECT = "JsonLdValueObject"
    LIST_OBJECT = "JsonLdListObject"
    SET_OBJECT = "JsonLdSetObject"
    LANGUAGE_MAP = "JsonLdLanguageMap"
    INDEX_MAP = "JsonLdIndexMap"
    INDEX_MAP_ITEM = "JsonLdIndexMapItem"
    ID_MAP = "JsonLdIdMap"
    TYPE_MAP = "JsonLdTypeMap"
    INCLUDED_BLOCK = "JsonLdIncludedBlock"
    CONTEXT_DEFINITION = "JsonLdContextDefinition"
    EXPANDED_TERM_DEFINITION = "JsonLdExpandedTermDefinition"
    KEYWORD = "JsonLdKeyword"
    LIST_OR_SET_ITEM = "JsonLdListOrSetItem"
    CONTAINER_TYPE = "JsonLdContainerType"
    CONTAINER_TYPE_ARRAY = "JsonLdContainerTypeArray"
    JSON_PRIMITIVE = "JsonLdJsonPrimitive"
    JSON_ARRAY = "JsonLdJsonArray"
    JSON_OBJECT = "JsonLdJsonObject"
    JSON_VALUE = "JsonLdJsonValue"

    @classmethod
    def get_all_types(cls) -> List[str]:
        return [
            cls.DOCUMENT,
            cls.OBJECT,
            cls.NODE_OBJECT,
            cls.NODE_PRIMITIVE,
            cls.GRAPH_OBJECT,
            cls.VALUE_OBJECT,
            cls.LIST_OBJECT,
            cls.SET_OBJECT,
            cls.LANGUAGE_MAP,
            cls.INDEX_MAP,
            cls.INDEX_MAP_ITEM,
            cls.ID_MAP,
            cls.TYPE_MAP,
            cls.INCLUDED_BLOCK,
            cls.CONTEXT_DEFINITION,
            cls.EXPANDED_TERM_DEFINITION,
            cls.KEYWORD,
            cls.LIST_OR_SET_ITEM,
            cls.CONTAINER_TYPE,
            cls.CONTAINER_TYPE_ARRAY,
            cls.JSON_PRIMITIVE,
            cls.JSON_ARRAY,
            cls.JSON_OBJECT,
            cls.JSON_VALUE,
        ]

    @classmethod
    def identifier(cls, type_name: str) -> str:
        """Registry identifier for a shape name."""
        return f"{cls.CONTEXT_ROOT}{type_name}"
