"""Tests for record serializers"""

from dataclasses import dataclass
from datetime import datetime, timezone
import json

from pydantic import BaseModel
import pytest

from keycloak_kafka_connector.exceptions import SerializationError
from keycloak_kafka_connector.serializers import JsonSerializer, StringSerializer
from keycloak_kafka_connector.serializers.json import prune_empty


class AdminEvent(BaseModel):
    """Sample event model"""

    realm_id: str
    resource_path: str | None = None
    details: dict[str, str] = {}


@dataclass
class LoginEvent:
    """Sample event dataclass"""

    user_id: str
    time: datetime
    error: str = ""


class TestStringSerializer:
    """Test the string serializer"""

    def test_encodes_utf8(self):
        """Test strings are UTF-8 encoded"""
        assert StringSerializer().serialize("t", "héllo") == "héllo".encode()

    def test_none_is_none(self):
        """Test None produces no output"""
        assert StringSerializer().serialize("t", None) is None

    def test_non_string_values(self):
        """Test other values are stringified"""
        assert StringSerializer().serialize("t", 42) == b"42"

    def test_bytes_pass_through(self):
        """Test bytes are returned unchanged"""
        assert StringSerializer().serialize("t", b"raw") == b"raw"

    def test_encoding_failure(self):
        """Test unencodable text raises SerializationError"""
        with pytest.raises(SerializationError) as exc_info:
            StringSerializer(encoding="ascii").serialize("events", "héllo")
        assert exc_info.value.topic == "events"
        assert isinstance(exc_info.value.original_error, UnicodeEncodeError)


class TestJsonSerializer:
    """Test the JSON serializer"""

    def test_none_is_none(self):
        """Test None produces no output"""
        assert JsonSerializer().serialize("t", None) is None

    def test_omits_empty_fields(self):
        """Test None, empty strings and empty collections are dropped"""
        data = {"a": 1, "b": None, "c": "", "d": [], "e": {}, "f": "x", "g": 0, "h": False}
        assert json.loads(JsonSerializer().serialize("t", data)) == {
            "a": 1,
            "f": "x",
            "g": 0,
            "h": False,
        }

    def test_nested_empty_fields(self):
        """Test pruning applies at every level"""
        data = {"outer": {"inner": None, "keep": "v"}, "items": [{"x": None, "y": 1}]}
        assert json.loads(JsonSerializer().serialize("t", data)) == {
            "outer": {"keep": "v"},
            "items": [{"y": 1}],
        }

    def test_pydantic_model(self):
        """Test pydantic models are encoded with empty fields omitted"""
        event = AdminEvent(realm_id="master")
        assert JsonSerializer().serialize("t", event) == b'{"realm_id":"master"}'

    def test_dataclass_with_datetime(self):
        """Test dataclasses and datetimes are supported"""
        event = LoginEvent(user_id="u1", time=datetime(2024, 1, 2, tzinfo=timezone.utc))
        assert json.loads(JsonSerializer().serialize("t", event)) == {
            "user_id": "u1",
            "time": "2024-01-02T00:00:00Z",
        }

    def test_non_ascii_kept(self):
        """Test non-ASCII characters are written as UTF-8"""
        assert JsonSerializer().serialize("t", {"n": "é"}) == '{"n":"é"}'.encode()

    def test_unserializable_object(self):
        """Test encoding failures are wrapped"""
        with pytest.raises(SerializationError) as exc_info:
            JsonSerializer().serialize("events", {"value": object()})
        assert "Error serializing JSON message" in str(exc_info.value)
        assert exc_info.value.original_error is not None
        assert exc_info.value.__cause__ is exc_info.value.original_error

    def test_prune_keeps_list_elements(self):
        """Test empty list elements are not removed"""
        assert prune_empty([None, "", 1]) == [None, "", 1]
