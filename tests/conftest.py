"""
Shared pytest configuration and fixtures for keycloak-kafka-connector tests.

This file contains:
- Common property bags used across test modules
- A fake host configuration scope
- Markers for different test categories
"""

from pathlib import Path
import sys
from unittest.mock import Mock

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from keycloak_kafka_connector.config import ConnectorSettings  # noqa: E402

PREFIX = "kafka."


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests that build producers end to end")


def pytest_collection_modifyitems(config, items):
    """Mark producer construction tests as integration tests."""
    for item in items:
        if "client" in str(item.path):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


class FakeScope:
    """Stand-in for the host's scoped configuration accessor."""

    def __init__(self, values):
        self._values = dict(values)
        self.requested = []

    def get_property_names(self):
        return list(self._values)

    def get(self, name):
        self.requested.append(name)
        return self._values.get(name)


class CamelCaseScope:
    """Scope exposing the host's camelCase accessor names."""

    def __init__(self, values):
        self._values = dict(values)

    def getPropertyNames(self):  # noqa: N802
        return list(self._values)

    def get(self, name):
        return self._values.get(name)


@pytest.fixture()
def prefix():
    """Namespace prefix used by most tests"""
    return PREFIX


@pytest.fixture()
def settings():
    """Default translation settings"""
    return ConnectorSettings()


@pytest.fixture()
def jaas_properties():
    """Property bag with JAAS authentication enabled"""
    return {
        "kafka.bootstrap.servers": "a:9092,b:9092",
        "kafka.security.protocol": "SASL_SSL",
        "kafka.sasl.mechanism": "PLAIN",
        "kafka.sasl.jaas.enabled": "true",
        "kafka.sasl.jaas.options.loginModule": "com.example.MyModule",
        "kafka.sasl.jaas.options.username": "alice",
        "kafka.sasl.jaas.options.password": "secret",
    }


@pytest.fixture()
def scope_factory():
    """Factory building fake host scopes"""
    return FakeScope


@pytest.fixture()
def producer_factory():
    """Mock producer constructor"""
    return Mock(name="KafkaProducer", return_value=Mock(name="producer"))


@pytest.fixture()
def camel_scope_factory():
    """Factory building scopes with camelCase accessors"""
    return CamelCaseScope
