"""Index existence check."""

from __future__ import annotations

from elasticsearch import Elasticsearch

from .errors import translate_errors


def index_exists(client: Elasticsearch, name: str) -> bool:
    """Check whether an index exists."""
    with translate_errors(f"index exists check for {name!r}"):
        return bool(client.indices.exists(index=name))
