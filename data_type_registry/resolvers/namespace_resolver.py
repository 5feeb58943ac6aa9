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

"""Resolve a hierarchical identifier to its most specific registered namespace."""

import logging
from typing import Collection, Iterator, Optional

from ..utils.identifiers import DEFAULT_DELIMITER, HierarchicalIdentifier

logger = logging.getLogger(__name__)


def namespace_candidates(identifier: HierarchicalIdentifier) -> Iterator[str]:
    """Yield candidate namespaces, most specific first.

    For each length, from the full identifier down to a single segment, the
    trailing run of segments is yielded before the leading run. A candidate
    already yielded at the same length is not repeated.
    """
    total = len(identifier)
    for length in range(total, 0, -1):
        suffix = identifier.join(total - length)
        yield suffix
        prefix = identifier.join(0, length)
        if prefix != suffix:
            yield prefix


def resolve_namespace(
    names: Collection[str],
    uri: str,
    delimiter: str = DEFAULT_DELIMITER,
) -> Optional[str]:
    """Find the longest registered namespace governing ``uri``.

    Args:
        names: Registered namespace names.
        uri: Hierarchical identifier, e.g. ``"did:iota:0x123"``.
        delimiter: Segment delimiter, ``":"`` or ``"/"``.

    Returns:
        The matching namespace, or None when no candidate is registered.

    Raises:
        MalformedIdentifierError: If ``uri`` is not a valid hierarchical identifier.
    """
    identifier = HierarchicalIdentifier.parse(uri, delimiter)

    registered = names if isinstance(names, (set, frozenset, dict)) else set(names)
    for candidate in namespace_candidates(identifier):
        if candidate in registered:
            logger.debug(f"Resolved namespace '{candidate}' for '{uri}'")
            return candidate

    logger.debug(f"No registered namespace for '{uri}'")
    return None


def namespace_matcher(names, name: str) -> Optional[str]:
    """Factory matcher resolving ``name`` to a registered namespace."""
    return resolve_namespace(names, name)
