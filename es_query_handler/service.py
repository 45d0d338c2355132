"""Object façade over the module-level helpers, bound to one shared client."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from elasticsearch import Elasticsearch

from . import document, index, search, templates
from .client import close_client, create_client
from .connection_settings import ConnectionConfig
from .response import QueryResponse


class ElasticsearchApiService:
    """Document and query operations against one Elasticsearch cluster.

    The service holds no state besides the client handle, so a single
    instance can be used from several threads.  Construct it with an existing
    client to share one connection pool, or via :meth:`from_config` to let the
    service own (and close) its client.
    """

    def __init__(self, client: Elasticsearch, owns_client: bool = False):
        self.client = client
        self._owns_client = owns_client

    @classmethod
    def from_config(
        cls,
        config: Optional[ConnectionConfig] = None,
        **overrides,
    ) -> "ElasticsearchApiService":
        return cls(create_client(config=config, **overrides), owns_client=True)

    def close(self) -> None:
        if self._owns_client:
            close_client(self.client)

    def __enter__(self) -> "ElasticsearchApiService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- index ---------------------------------------------------------

    def has_index(self, index_name: str) -> bool:
        return index.index_exists(self.client, index_name)

    # -- documents -----------------------------------------------------

    def get_document_by_id(
        self, index_name: str, doc_type: str, doc_id: str
    ) -> Optional[QueryResponse]:
        return document.get_document_by_id(self.client, index_name, doc_type, doc_id)

    def update_document(
        self,
        index_name: str,
        doc_type: str,
        doc_id: str,
        json_source: str,
        refresh: Optional[str] = None,
    ) -> None:
        document.update_document(
            self.client, index_name, doc_type, doc_id, json_source, refresh=refresh
        )

    def save_document(
        self,
        index_name: str,
        doc_type: str,
        json_source: str,
        doc_id: Optional[str] = None,
        refresh: Optional[str] = None,
    ) -> QueryResponse:
        return document.save_document(
            self.client, index_name, doc_type, json_source, doc_id=doc_id, refresh=refresh
        )

    # -- search --------------------------------------------------------

    def search_all(self, index_name: str, size: Optional[int] = None) -> list[QueryResponse]:
        return search.search_all(self.client, index_name, size=size)

    def query_matches(self, index_name: str, field: str, value: Any) -> list[QueryResponse]:
        return search.match_search(self.client, index_name, field, value)

    def query_multi_matches(
        self, index_name: str, arguments: Mapping[str, Any]
    ) -> list[QueryResponse]:
        return search.multi_match_search(self.client, index_name, arguments)

    # -- stored templates ----------------------------------------------

    def query(
        self,
        index_name: str,
        template_id: str,
        parameters: Optional[Mapping[str, Any]] = None,
    ) -> list[QueryResponse]:
        """Run a stored search template with *parameters*."""
        return templates.template_search(self.client, index_name, template_id, parameters)

    def upsert_template(self, template_name: str, source: str) -> None:
        templates.upsert_template(self.client, template_name, source)

    def get_template_source(self, template_name: str) -> str:
        return templates.get_template_source(self.client, template_name)
