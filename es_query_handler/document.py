"""Single-document get, update and save operations.

Documents go in and come out as raw JSON text.  ``doc_type`` completes the
(index, type, id) reference returned to callers; requests themselves use the
typeless document endpoints.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from elasticsearch import Elasticsearch, NotFoundError

from .errors import InvalidDocumentError, RemoteStatusError, translate_errors
from .response import QueryResponse, response_body

logger = logging.getLogger(__name__)

# (result, status) pairs accepted from the index API
_SAVED = {("created", 201), ("updated", 200)}


def _decode(json_source: str) -> dict[str, Any]:
    try:
        doc = json.loads(json_source)
    except (TypeError, ValueError) as exc:
        raise InvalidDocumentError(f"Invalid JSON document: {json_source!r}") from exc
    if not isinstance(doc, dict):
        raise InvalidDocumentError(f"Document must be a JSON object: {json_source!r}")
    return doc


def get_document_by_id(
    client: Elasticsearch,
    index: str,
    doc_type: str,
    doc_id: str,
) -> Optional[QueryResponse]:
    """Retrieve a document by ID, or ``None`` when the cluster reports it missing.

    A missing index is reported the same way as a missing document.
    """
    with translate_errors(f"get document index:{index}, type:{doc_type}, id:{doc_id}"):
        try:
            resp = client.get(index=index, id=doc_id)
        except NotFoundError as exc:
            logger.info(
                "get document by index:%s, type:%s, id:%s not found: %s",
                index, doc_type, doc_id, exc.message,
            )
            return None

    body = response_body(resp)
    if not body or not body.get("found", True):
        return None
    return QueryResponse.from_hit(body, default_type=doc_type)


def update_document(
    client: Elasticsearch,
    index: str,
    doc_type: str,
    doc_id: str,
    json_source: str,
    refresh: Optional[str] = None,
) -> None:
    """Partially update an existing document with the fields in *json_source*.

    Raises:
        RemoteStatusError: the document does not exist or the cluster did
            not answer 200.
    """
    kwargs: dict[str, Any] = {"index": index, "id": doc_id, "doc": _decode(json_source)}
    if refresh is not None:
        kwargs["refresh"] = refresh

    action = f"updating index:{index}, type:{doc_type}, id:{doc_id}"
    with translate_errors(action, payload=json_source):
        resp = client.update(**kwargs)

    if resp.meta.status != 200:
        raise RemoteStatusError(action, status=resp.meta.status, payload=json_source)


def save_document(
    client: Elasticsearch,
    index: str,
    doc_type: str,
    json_source: str,
    doc_id: Optional[str] = None,
    refresh: Optional[str] = None,
) -> QueryResponse:
    """Index (insert or replace) a single document.

    Without *doc_id* the cluster assigns one.  With *doc_id* an existing
    document is overwritten.  The returned response carries *json_source*
    as its source.
    """
    kwargs: dict[str, Any] = {"index": index, "document": _decode(json_source)}
    if doc_id is not None:
        kwargs["id"] = doc_id
    if refresh is not None:
        kwargs["refresh"] = refresh

    action = f"saving index:{index}, type:{doc_type}, id:{doc_id}"
    with translate_errors(action, payload=json_source):
        resp = client.index(**kwargs)

    body = response_body(resp)
    if (body.get("result"), resp.meta.status) not in _SAVED:
        raise RemoteStatusError(action, status=resp.meta.status, payload=json_source)

    logger.debug("Saved document %s/%s (%s)", body["_index"], body["_id"], body["result"])
    return QueryResponse(
        id=body["_id"],
        index=body["_index"],
        type=body.get("_type") or doc_type,
        source=json_source,
    )
