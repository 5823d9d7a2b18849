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

"""JSON serializer omitting empty fields.

Arbitrary objects (pydantic models, dataclasses, datetimes, UUIDs) are first
converted to JSON-compatible Python values with pydantic_core. Mapping
entries whose value is None, an empty string or an empty collection are then
dropped before encoding.
"""

import json
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..exceptions import SerializationError
from .base import Serializer


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and len(value) == 0)


def prune_empty(value: Any) -> Any:
    """Drop empty mapping entries at every nesting level."""
    if isinstance(value, dict):
        return {key: prune_empty(item) for key, item in value.items() if not _is_empty(item)}
    if isinstance(value, list):
        return [prune_empty(item) for item in value]
    return value


class JsonSerializer(Serializer):
    """Encodes objects as compact UTF-8 JSON."""

    def __init__(self, ensure_ascii: bool = False) -> None:
        self.ensure_ascii = ensure_ascii

    @property
    def name(self) -> str:
        return "json"

    def serialize(self, topic: str | None, data: Any) -> bytes | None:
        if data is None:
            return None
        try:
            payload = prune_empty(to_jsonable_python(data))
            return json.dumps(
                payload,
                ensure_ascii=self.ensure_ascii,
                separators=(",", ":"),
            ).encode("utf-8")
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise SerializationError(
                "Error serializing JSON message",
                original_error=e,
                topic=topic,
            ) from e
