"""Search helpers returning flat :class:`QueryResponse` lists."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from elasticsearch import Elasticsearch

from .errors import RemoteStatusError, translate_errors
from .index import index_exists
from .response import QueryResponse, convert_hits, response_body

logger = logging.getLogger(__name__)


def search_all(
    client: Elasticsearch,
    index: str,
    size: Optional[int] = None,
) -> list[QueryResponse]:
    """Return documents of *index*, or ``[]`` when the index does not exist.

    Without *size* the cluster's default page size applies.
    """
    if not index_exists(client, index):
        logger.info("Index %s does not exist, returning no documents", index)
        return []

    kwargs: dict[str, Any] = {"index": index, "query": {"match_all": {}}}
    if size is not None:
        kwargs["size"] = size

    with translate_errors(f"search all on {index!r}"):
        resp = client.search(**kwargs)
    return convert_hits(resp)


def match_search(
    client: Elasticsearch,
    index: str,
    field: str,
    value: Any,
) -> list[QueryResponse]:
    """Return documents whose *field* matches *value*."""
    with translate_errors(f"match search on {index!r}"):
        resp = client.search(index=index, query={"match": {field: value}})
    return convert_hits(resp)


def multi_match_search(
    client: Elasticsearch,
    index: str,
    arguments: Mapping[str, Any],
) -> list[QueryResponse]:
    """Run one match query per field in a single msearch request.

    Results of each sub-search are concatenated in the iteration order of
    *arguments*, so a document matching several fields appears once per
    field.
    """
    if not arguments:
        return []

    searches: list[dict[str, Any]] = []
    for field, value in arguments.items():
        searches.append({"index": index})
        searches.append({"query": {"match": {field: value}}})

    with translate_errors(f"multi search on {index!r}", payload=dict(arguments)):
        resp = client.msearch(searches=searches)

    result: list[QueryResponse] = []
    for field, item in zip(arguments, response_body(resp)["responses"]):
        if "error" in item:
            raise RemoteStatusError(
                f"multi search on {index!r} failed for field {field!r}",
                status=item.get("status"),
                payload=item["error"],
            )
        result.extend(convert_hits(item))
    return result
