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

"""Abstract base class for record serializers."""

from abc import ABC, abstractmethod
from typing import Any

from kafka.serializer import Serializer as KafkaSerializer


class Serializer(KafkaSerializer, ABC):
    """Turns record keys or values into bytes.

    Subclasses kafka-python's Serializer so the producer calls serialize()
    with the destination topic.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry name of this serializer (e.g., "string", "json")."""

    @abstractmethod
    def serialize(self, topic: str | None, data: Any) -> bytes | None:
        """Encode one record key or value.

        Args:
            topic: Destination topic, when known
            data: Object to encode

        Returns:
            Encoded bytes, or None when data is None

        Raises:
            SerializationError: If the object cannot be encoded
        """

    def close(self) -> None:
        """Release resources; serializers here hold none."""
