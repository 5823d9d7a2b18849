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

"""Default settings and environment variable mapping for the connector."""

from .schema import ConnectorSettings

# Default settings instance
DEFAULT_SETTINGS = ConnectorSettings()

ENV_VAR_PREFIX = "KKC_"

# Environment variable mapping for easy reference
ENV_VAR_MAPPING = {
    "KKC_DEFAULT_ACKS": "default_acks",
    "KKC_DEFAULT_LOGIN_MODULE": "default_login_module",
    "KKC_JAAS_PREFIX": "jaas_prefix",
    "KKC_PRODUCER_PREFIX": "producer_prefix",
    "KKC_BOOTSTRAP_SERVERS_SEPARATOR": "bootstrap_servers_separator",
    "KKC_DEBUG_MODE": "debug_mode",
}

# Type mapping for environment variable conversion
ENV_VAR_TYPES = {
    "KKC_DEBUG_MODE": bool,
    # String types (default)
    "KKC_DEFAULT_ACKS": str,
    "KKC_DEFAULT_LOGIN_MODULE": str,
    "KKC_JAAS_PREFIX": str,
    "KKC_PRODUCER_PREFIX": str,
    "KKC_BOOTSTRAP_SERVERS_SEPARATOR": str,
}

TRUE_VALUES = ("true", "1", "yes", "on")
