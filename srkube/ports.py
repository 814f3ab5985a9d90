"""Port settings read from component configuration files."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# FE port keys
HTTP_PORT = "http_port"
RPC_PORT = "rpc_port"
QUERY_PORT = "query_port"
EDIT_LOG_PORT = "edit_log_port"

# BE / CN port keys. thrift_port is the older CN name of be_port, and
# webserver_port the older name of be_http_port.
THRIFT_PORT = "thrift_port"
BE_PORT = "be_port"
WEBSERVER_PORT = "webserver_port"
BE_HTTP_PORT = "be_http_port"
HEARTBEAT_SERVICE_PORT = "heartbeat_service_port"
BRPC_PORT = "brpc_port"

# FE proxy
FE_PROXY_HTTP_PORT = 8080
FE_PROXY_HTTP_PORT_NAME = "http-port"

DEFAULT_PORTS: dict[str, int] = {
    HTTP_PORT: 8030,
    RPC_PORT: 9020,
    QUERY_PORT: 9030,
    EDIT_LOG_PORT: 9010,
    THRIFT_PORT: 9060,
    BE_PORT: 9060,
    WEBSERVER_PORT: 8040,
    BE_HTTP_PORT: 8040,
    HEARTBEAT_SERVICE_PORT: 9050,
    BRPC_PORT: 8060,
}

# Where a key is unset, the port falls back to the value of its newer name.
_FALLBACK_KEYS = {
    THRIFT_PORT: BE_PORT,
    WEBSERVER_PORT: BE_HTTP_PORT,
}

_INTEGER = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _parse_port(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX or value == 0:
        return None
    return value


def get_port(config: Mapping[str, Any], key: str) -> int:
    """Return the port configured under ``key``, or its default.

    A value that is not a 32-bit integer, or is zero, counts as unset. An
    unset ``thrift_port`` falls back to ``be_port`` and an unset
    ``webserver_port`` to ``be_http_port``. Unknown keys default to 0.
    """
    if key in config:
        value = config[key]
        if not isinstance(value, str):
            raise TypeError(
                f"port {key!r} must be given as a string, not {type(value).__name__}"
            )
        port = _parse_port(value)
        if port is not None:
            return port

    fallback = _FALLBACK_KEYS.get(key)
    if fallback is not None:
        return get_port(config, fallback)
    return DEFAULT_PORTS.get(key, 0)