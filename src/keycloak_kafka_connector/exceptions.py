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

"""Custom exceptions for the Keycloak Kafka connector."""

from datetime import datetime, timezone
from typing import Any


class ConnectorError(Exception):
    """Base exception for all connector errors."""

    ERROR_CATEGORY = "GENERAL"
    ERROR_CODE = "KKC_0000"

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
        recovery_suggestion: str | None = None,
    ) -> None:
        super().__init__(message)
        self.user_message = user_message or "An error occurred"
        self.error_code = error_code or self.ERROR_CODE
        self.error_category = self.ERROR_CATEGORY
        self.context = context or {}
        self.recovery_suggestion = recovery_suggestion
        self.timestamp = datetime.now(timezone.utc)


class ConfigurationError(ConnectorError):
    """Configuration or setup errors. Never transient, never retried."""

    ERROR_CATEGORY = "CONFIGURATION_ERROR"
    ERROR_CODE = "KKC_1000"


class SerializerNotFoundError(ConfigurationError):
    """A configured serializer name has no registered factory."""

    ERROR_CODE = "KKC_1001"

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        available = sorted(available or [])
        message = f"Unknown serializer: {name}"
        user_message = f"Serializer '{name}' is not registered"
        context = {"serializer": name, "available": available}
        recovery_suggestion = (
            f"Use one of the registered serializers ({', '.join(available)}) "
            "or register a factory for this name"
        )
        super().__init__(message, user_message, self.ERROR_CODE, context, recovery_suggestion)
        self.name = name
        self.available = available


class SerializationError(ConnectorError):
    """A record value could not be encoded to bytes."""

    ERROR_CATEGORY = "DATA_ERROR"
    ERROR_CODE = "KKC_2000"

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        topic: str | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if topic is not None:
            context["topic"] = topic
        if original_error:
            context["original_error"] = str(original_error)
        super().__init__(
            message,
            "Message could not be serialized",
            self.ERROR_CODE,
            context,
            "Check that the message only contains JSON-compatible values",
        )
        self.original_error = original_error
        self.topic = topic
