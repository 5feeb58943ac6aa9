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

"""Process-wide registry of handlers keyed by identifier namespace.

Looking up a full identifier such as ``did:iota:0x1234`` returns the handler
registered for the most specific namespace that governs it (``did:iota``
before ``did``).
"""

from typing import Any

from ..resolvers.namespace_resolver import namespace_matcher
from .factory import Factory


def create_identifier_handler_factory() -> Factory[Any]:
    """Build an isolated namespace-resolving handler registry."""
    return Factory("namespace", matcher=namespace_matcher)


IdentifierHandlerFactory: Factory[Any] = create_identifier_handler_factory()
