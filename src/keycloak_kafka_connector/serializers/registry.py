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

"""Registry mapping configured serializer names to factories."""

from collections.abc import Callable
import logging

from ..exceptions import ConfigurationError, SerializerNotFoundError
from .base import Serializer
from .json import JsonSerializer
from .string import StringSerializer

logger = logging.getLogger(__name__)

SerializerFactory = Callable[[], Serializer]

# Class names found in existing Keycloak property files
JAVA_STRING_SERIALIZER = "org.apache.kafka.common.serialization.StringSerializer"
JAVA_JSON_SERIALIZER = "org.flcit.keycloak.connector.kafka.serializer.JsonSerializer"

DEFAULT_SERIALIZER = "string"


class SerializerRegistry:
    """Explicit name-to-factory registry for record serializers."""

    def __init__(self, defaults: bool = True) -> None:
        self._factories: dict[str, SerializerFactory] = {}
        if defaults:
            self.register("string", StringSerializer)
            self.register("json", JsonSerializer)
            self.register(JAVA_STRING_SERIALIZER, StringSerializer)
            self.register(JAVA_JSON_SERIALIZER, JsonSerializer)

    def register(self, name: str, factory: SerializerFactory) -> None:
        """Register a factory under a configuration name.

        Raises:
            ConfigurationError: If the name is blank or the factory is not callable
        """
        if not name or not name.strip():
            raise ConfigurationError("Serializer name must not be empty")
        if not callable(factory):
            raise ConfigurationError(
                f"Serializer factory for '{name}' is not callable",
                context={"serializer": name},
            )
        self._factories[name.strip()] = factory
        logger.debug("Registered serializer %s", name)

    def create(self, name: str | None = None) -> Serializer:
        """Instantiate the serializer registered under name.

        Args:
            name: Configured serializer name; None selects the string serializer

        Returns:
            A new serializer instance

        Raises:
            SerializerNotFoundError: If no factory is registered for name
            ConfigurationError: If the factory fails or returns a non-serializer
        """
        key = DEFAULT_SERIALIZER if name is None else str(name).strip()
        factory = self._factories.get(key)
        if factory is None:
            raise SerializerNotFoundError(key, self.names())

        try:
            serializer = factory()
        except Exception as e:
            raise ConfigurationError(
                f"Failed to create serializer '{key}': {e}",
                f"Serializer '{key}' could not be created",
                context={"serializer": key},
            ) from e

        if not isinstance(serializer, Serializer):
            raise ConfigurationError(
                f"Factory for '{key}' returned {type(serializer).__name__}, not a Serializer",
                context={"serializer": key},
            )
        return serializer

    def names(self) -> list[str]:
        """Registered serializer names."""
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories
