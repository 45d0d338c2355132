"""Client factory for the shared Elasticsearch connection."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from elasticsearch import Elasticsearch

from .connection_settings import ConnectionConfig, load_config

logger = logging.getLogger(__name__)


def create_client(
    config: Optional[ConnectionConfig] = None,
    **overrides,
) -> Elasticsearch:
    """Create and return an Elasticsearch client.

    Args:
        config: An explicit :class:`ConnectionConfig`.  When ``None``,
            one is built via :func:`load_config` (env vars + *overrides*).
        **overrides: Passed to :func:`load_config` when *config* is ``None``.

    Returns:
        A configured Elasticsearch client.  One instance is meant to be
        shared by every caller of the process.
    """
    if config is None:
        config = load_config(**overrides)

    kwargs: dict[str, Any] = {
        "hosts": config.hosts,
        "basic_auth": config.basic_auth,
    }

    # TLS options are only valid for https nodes.
    if config.use_ssl:
        if config.insecure_tls:
            logger.warning(
                "TLS verification disabled for %s:%s (self-signed certificates "
                "trusted, hostname not checked)",
                config.host,
                config.port,
            )
            kwargs["verify_certs"] = False
            kwargs["ssl_show_warn"] = False
        else:
            kwargs["verify_certs"] = True
            if config.ca_certs:
                kwargs["ca_certs"] = config.ca_certs

    if config.request_timeout is not None:
        kwargs["request_timeout"] = config.request_timeout

    logger.debug("Creating Elasticsearch client for %s", config.hosts)
    return Elasticsearch(**kwargs)


def close_client(client: Any) -> None:
    """Close the client's connection pool."""
    client.close()


@contextmanager
def managed_client(
    config: Optional[ConnectionConfig] = None,
    **overrides,
) -> Iterator[Elasticsearch]:
    """Yield a client for the duration of the block and close it afterwards."""
    client = create_client(config=config, **overrides)
    try:
        yield client
    finally:
        close_client(client)
