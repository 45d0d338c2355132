"""Default index, type and stored template used by callers of the handler."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError

_ENV_VARS = {
    "default_index": "QUERY_DEFAULT_INDEX",
    "default_type": "QUERY_DEFAULT_TYPE",
    "stored_template_id": "QUERY_STORED_TEMPLATE_ID",
}


@dataclass(frozen=True)
class QueryDefaults:
    default_index: str
    default_type: str
    stored_template_id: str

    def __post_init__(self) -> None:
        missing = [name for name in _ENV_VARS if not getattr(self, name)]
        if missing:
            raise ConfigurationError(f"Missing query defaults: {', '.join(missing)}")


def load_query_defaults(**overrides) -> QueryDefaults:
    """Build QueryDefaults from ``QUERY_*`` env vars, then keyword overrides."""
    values = {key: os.getenv(env_name, "") for key, env_name in _ENV_VARS.items()}

    for key, value in overrides.items():
        if key not in values:
            raise TypeError(f"Unknown query setting: {key!r}")
        values[key] = value

    missing = [_ENV_VARS[key] for key, value in values.items() if not value]
    if missing:
        raise ConfigurationError(f"Missing required query settings: {', '.join(missing)}")

    return QueryDefaults(**values)
