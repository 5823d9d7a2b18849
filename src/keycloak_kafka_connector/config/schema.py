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

"""Settings schema for the Keycloak Kafka connector.

The settings control how property bags are translated into producer
configuration: which sub-prefixes are consulted, which defaults are applied
and which login module backs the JAAS configuration when none is given.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConnectorSettings(BaseModel):
    """Immutable translation settings, created once and shared by reference."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_acks: str = Field(
        default="1",
        pattern="^(all|-1|0|1)$",
        description="Value used for 'acks' when the property bag does not set it",
    )
    default_login_module: str = Field(
        default="com.sun.security.auth.module.Krb5LoginModule",
        min_length=1,
        description="Login module used when no 'loginModule' JAAS option is given",
    )
    jaas_prefix: str = Field(
        default="sasl.jaas.",
        description="Sub-prefix holding the 'enabled' flag and the JAAS option tree",
    )
    producer_prefix: str = Field(
        default="producer.",
        description="Sub-prefix for producer-specific overrides of the namespace",
    )
    bootstrap_servers_separator: str = Field(
        default=",",
        min_length=1,
        description="Delimiter used to split a scalar 'bootstrap.servers' value",
    )
    debug_mode: bool = Field(default=False, description="Raise the package logger to DEBUG")

    @field_validator("jaas_prefix", "producer_prefix")
    @classmethod
    def validate_sub_prefix(cls, v: str) -> str:
        """Sub-prefixes are dotted namespace segments."""
        if not v or not v.endswith("."):
            raise ValueError(f"prefix '{v}' must be non-empty and end with '.'")
        return v

    @property
    def jaas_enabled_key(self) -> str:
        """Relative key of the JAAS 'enabled' flag."""
        return f"{self.jaas_prefix}enabled"

    @property
    def jaas_options_prefix(self) -> str:
        """Relative prefix of the JAAS option tree."""
        return f"{self.jaas_prefix}options."
