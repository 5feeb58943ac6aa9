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

"""Generic keyed registry with lazily constructed entries."""

import logging
import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from ..exceptions import MalformedIdentifierError, RegistrationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Generator = Callable[[], T]
Matcher = Callable[[List[str], str], Optional[str]]


def exact_matcher(names: List[str], name: str) -> Optional[str]:
    """Default matcher: only an identical registered name matches."""
    return name if name in names else None


class Factory(Generic[T]):
    """Keyed store mapping a name to a generator and the entry it produced.

    The generator runs on the first ``get`` for its name and the entry is kept
    until the name is registered again, unregistered, or the factory is reset.
    Registering an existing name replaces it; the last registration wins.

    A ``matcher`` maps a requested name onto one of the registered names. The
    default only accepts identical names; the identifier handler factory plugs
    in namespace resolution instead.

    All operations are serialized by a re-entrant lock so the factory can be
    shared between threads once initialization is done.
    """

    def __init__(self, type_name: str, matcher: Optional[Matcher] = None):
        self.type_name = type_name
        self._matcher: Matcher = matcher or exact_matcher
        self._generators: Dict[str, Generator] = {}
        self._instances: Dict[str, T] = {}
        self._lock = threading.RLock()

    def register(self, name: str, generator: Callable[[], T]) -> None:
        """Register ``generator`` under ``name``.

        Raises:
            RegistrationError: If ``name`` is not a non-empty string or
                ``generator`` is not callable.
        """
        if not isinstance(name, str) or not name.strip():
            raise RegistrationError(f"{self.type_name} name must be a non-empty string, got: {name!r}")
        if not callable(generator):
            raise RegistrationError(
                f"{self.type_name} generator for '{name}' must be callable, got {type(generator).__name__}"
            )

        with self._lock:
            if name in self._generators:
                logger.debug(f"Replacing {self.type_name} registration '{name}'")
            else:
                logger.debug(f"Registering {self.type_name} '{name}'")
            self._generators[name] = generator
            self._instances.pop(name, None)

    def unregister(self, name: str) -> None:
        """Remove ``name`` and any entry built for it.

        Raises:
            RegistrationError: If nothing is registered under ``name``.
        """
        with self._lock:
            if name not in self._generators:
                raise RegistrationError(f"No {self.type_name} registered under '{name}'")
            del self._generators[name]
            self._instances.pop(name, None)
        logger.debug(f"Unregistered {self.type_name} '{name}'")

    def remove(self, name: str) -> None:
        self.unregister(name)

    def match(self, name: str) -> Optional[str]:
        """Return the registered name that ``name`` maps to, or None."""
        with self._lock:
            return self._matcher(list(self._generators), name)

    def get(self, name: str) -> Optional[T]:
        """Return the entry for ``name``, building it on first access.

        Absence is not an error: None is returned when no registered name
        matches.
        """
        with self._lock:
            matched = self._matcher(list(self._generators), name)
            if matched is None or matched not in self._generators:
                return None

            if matched not in self._instances:
                instance = self._generators[matched]()
                if instance is None:
                    raise RegistrationError(f"{self.type_name} generator for '{matched}' returned None")
                self._instances[matched] = instance
            return self._instances[matched]

    def exists(self, name: str) -> bool:
        with self._lock:
            matched = self._matcher(list(self._generators), name)
            return matched is not None and matched in self._generators

    def names(self) -> List[str]:
        """Registered names, in registration order."""
        with self._lock:
            return list(self._generators)

    def instances(self) -> Dict[str, T]:
        """Entries built so far, keyed by registered name."""
        with self._lock:
            return dict(self._instances)

    def reset(self) -> None:
        """Drop the built entries but keep the registrations."""
        with self._lock:
            self._instances.clear()

    def clear(self) -> None:
        """Drop every registration."""
        with self._lock:
            self._generators.clear()
            self._instances.clear()
        logger.debug(f"Cleared all {self.type_name} registrations")

    def __contains__(self, name: object) -> bool:
        # Membership never raises; exists() and get() still reject malformed names
        if not isinstance(name, str):
            return False
        try:
            return self.exists(name)
        except MalformedIdentifierError:
            return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._generators)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.type_name!r}, names={self.names()!r})"
