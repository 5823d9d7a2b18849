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

"""String serializer, the default for both key and value slots."""

from typing import Any

from ..exceptions import SerializationError
from .base import Serializer


class StringSerializer(Serializer):
    """Encodes str(data) with a fixed text encoding."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    @property
    def name(self) -> str:
        return "string"

    def serialize(self, topic: str | None, data: Any) -> bytes | None:
        if data is None:
            return None
        if isinstance(data, bytes):
            return data
        try:
            return str(data).encode(self.encoding)
        except (UnicodeEncodeError, LookupError) as e:
            raise SerializationError(
                f"Error encoding string message as {self.encoding}",
                original_error=e,
                topic=topic,
            ) from e
