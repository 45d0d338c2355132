"""Thin Elasticsearch document and query handler."""

from .client import close_client, create_client, managed_client
from .connection_settings import ConnectionConfig, load_config
from .document import get_document_by_id, save_document, update_document
from .errors import (
    ConfigurationError,
    ElasticsearchServiceError,
    InvalidDocumentError,
    RemoteStatusError,
    TransportFailure,
)
from .index import index_exists
from .query_settings import QueryDefaults, load_query_defaults
from .response import QueryResponse
from .search import match_search, multi_match_search, search_all
from .service import ElasticsearchApiService
from .templates import get_template_source, template_search, upsert_template

__all__ = [
    # client
    "create_client",
    "close_client",
    "managed_client",
    # config
    "ConnectionConfig",
    "load_config",
    "QueryDefaults",
    "load_query_defaults",
    # errors
    "ElasticsearchServiceError",
    "ConfigurationError",
    "TransportFailure",
    "RemoteStatusError",
    "InvalidDocumentError",
    # response
    "QueryResponse",
    # index
    "index_exists",
    # document
    "get_document_by_id",
    "update_document",
    "save_document",
    # search
    "search_all",
    "match_search",
    "multi_match_search",
    # templates
    "upsert_template",
    "get_template_source",
    "template_search",
    # service
    "ElasticsearchApiService",
]
