"""Connection settings for the Elasticsearch cluster.

Credential pattern:
  - Separate host / port / scheme (not combined URL)
  - One username / password pair used as HTTP basic auth

Host, port, scheme, username and password are required and have no
defaults.  They can be supplied via environment variables or by passing
values directly to ``load_config`` / ``ConnectionConfig``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Optional

from .errors import ConfigurationError

SCHEMES = ("http", "https")

_ENV_VARS = {
    "host": "ELASTICSEARCH_HOST",
    "port": "ELASTICSEARCH_PORT",
    "scheme": "ELASTICSEARCH_SCHEME",
    "username": "ELASTICSEARCH_USERNAME",
    "password": "ELASTICSEARCH_PASSWORD",
    "insecure_tls": "ELASTICSEARCH_INSECURE_TLS",
    "ca_certs": "ELASTICSEARCH_CA_CERTS",
    "request_timeout": "ELASTICSEARCH_REQUEST_TIMEOUT",
}

_REQUIRED = ("host", "port", "scheme", "username", "password")


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass(frozen=True)
class ConnectionConfig:
    """Connection configuration for a single Elasticsearch endpoint.

    ``insecure_tls`` trusts self-signed certificates and skips hostname
    verification for ``https``.  It is off unless explicitly requested.
    """

    host: str
    port: int
    scheme: str
    username: str
    password: str
    insecure_tls: bool = False
    ca_certs: Optional[str] = None
    request_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        missing = [
            name for name in _REQUIRED
            if getattr(self, name) in (None, "")
        ]
        if missing:
            raise ConfigurationError(f"Missing connection settings: {', '.join(missing)}")
        if self.scheme.lower() not in SCHEMES:
            raise ConfigurationError(f"Unsupported scheme: {self.scheme!r}")
        try:
            port = int(self.port)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid port: {self.port!r}") from exc
        if not 0 < port < 65536:
            raise ConfigurationError(f"Invalid port: {self.port!r}")

    @property
    def basic_auth(self) -> tuple[str, str]:
        return (self.username, self.password)

    @property
    def use_ssl(self) -> bool:
        return self.scheme.lower() == "https"

    @property
    def hosts(self) -> list[dict]:
        """Return hosts list in the format expected by elasticsearch-py."""
        return [{"host": self.host, "port": int(self.port), "scheme": self.scheme.lower()}]


def _coerce(key: str, value: Any) -> Any:
    if not isinstance(value, str):
        return value
    if key == "port":
        return int(value)
    if key == "insecure_tls":
        return _parse_bool(value)
    if key == "request_timeout":
        return float(value)
    return value


def load_config(**overrides) -> ConnectionConfig:
    """Build a ConnectionConfig from env vars and keyword overrides.

    Resolution order (later wins):
      1. Environment variables (``ELASTICSEARCH_HOST``, etc.)
      2. Explicit keyword arguments

    Supported env vars:
      - ELASTICSEARCH_HOST / ELASTICSEARCH_PORT / ELASTICSEARCH_SCHEME
      - ELASTICSEARCH_USERNAME / ELASTICSEARCH_PASSWORD
      - ELASTICSEARCH_INSECURE_TLS  ("true"/"false")
      - ELASTICSEARCH_CA_CERTS
      - ELASTICSEARCH_REQUEST_TIMEOUT

    Raises:
        ConfigurationError: a required setting is missing or invalid.
        TypeError: an override key is not a config field.
    """
    values: dict[str, Any] = {}

    # Env-var layer
    for key, env_name in _ENV_VARS.items():
        raw = os.getenv(env_name)
        if raw:
            values[key] = raw

    # Explicit overrides layer
    known = {f.name for f in fields(ConnectionConfig)}
    for key, value in overrides.items():
        if key not in known:
            raise TypeError(f"Unknown config key: {key!r}")
        values[key] = value

    missing = [key for key in _REQUIRED if values.get(key) in (None, "")]
    if missing:
        names = ", ".join(_ENV_VARS[key] for key in missing)
        raise ConfigurationError(f"Missing required connection settings: {names}")

    try:
        coerced = {key: _coerce(key, value) for key, value in values.items()}
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    return ConnectionConfig(**coerced)
