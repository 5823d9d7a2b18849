# MIT License
#
# Copyright (c) 2025 Democratize Technology
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Property sources feeding the configuration translator.

Two input shapes are supported and both normalize to a plain dict of
string keys before translation:
- A flat mapping, as loaded from a properties file or the environment
- A scoped accessor exposing get_property_names() and get(name), as handed
  out by the identity provider host
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigScope(Protocol):
    """Scoped configuration accessor provided by the host process."""

    def get_property_names(self) -> Iterable[str]:
        """Names of all properties visible in this scope."""

    def get(self, name: str) -> Any:
        """Value of a single property, or None when absent."""


class PropertySource(ABC):
    """Abstract base class for all property sources."""

    @abstractmethod
    def properties(self, prefix: str = "") -> dict[str, Any]:
        """Snapshot the source as a flat dict.

        Args:
            prefix: Namespace prefix; sources may skip keys outside it

        Returns:
            A new dict; the caller may mutate it freely
        """


class MappingPropertySource(PropertySource):
    """Property source backed by a flat key/value mapping."""

    def __init__(self, bag: Mapping[Any, Any]) -> None:
        self._bag = bag

    def properties(self, prefix: str = "") -> dict[str, Any]:
        snapshot: dict[str, Any] = {}
        for key, value in self._bag.items():
            if key is None:
                continue
            snapshot[str(key)] = value
        return snapshot


class ScopedPropertySource(PropertySource):
    """Property source backed by a host configuration scope.

    Only names under the namespace prefix are read, so unrelated scope
    entries are never resolved.
    """

    def __init__(self, scope: Any) -> None:
        self._scope = scope

    def _property_names(self) -> Iterable[str]:
        if hasattr(self._scope, "get_property_names"):
            return self._scope.get_property_names()
        return self._scope.getPropertyNames()

    def properties(self, prefix: str = "") -> dict[str, Any]:
        snapshot: dict[str, Any] = {}
        for name in self._property_names():
            if name is not None and name.startswith(prefix):
                snapshot[name] = self._scope.get(name)
        return snapshot


def as_property_source(source: Any) -> PropertySource:
    """Wrap a mapping or a scope in the matching PropertySource."""
    if isinstance(source, PropertySource):
        return source
    if isinstance(source, Mapping):
        return MappingPropertySource(source)
    if hasattr(source, "get") and (
        hasattr(source, "get_property_names") or hasattr(source, "getPropertyNames")
    ):
        return ScopedPropertySource(source)
    raise TypeError(f"Unsupported property source: {type(source).__name__}")
