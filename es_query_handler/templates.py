"""Stored mustache search templates: upsert, fetch and execute."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional
from urllib.parse import quote

from elasticsearch import Elasticsearch

from .errors import RemoteStatusError, translate_errors
from .response import QueryResponse, convert_hits, response_body

logger = logging.getLogger(__name__)

TEMPLATE_LANG = "mustache"

_JSON_HEADERS = {"accept": "application/json", "content-type": "application/json"}


def _script_path(template_name: str) -> str:
    return f"/_scripts/{quote(template_name, safe='')}"


def upsert_template(client: Elasticsearch, template_name: str, source: str) -> None:
    """Create or replace the stored script *template_name* with *source*.

    *source* is stored verbatim, mustache placeholders included.
    """
    body = {"script": {"lang": TEMPLATE_LANG, "source": source}}
    action = f"upserting template:{template_name}"
    with translate_errors(action, payload=json.dumps(body)):
        resp = client.perform_request(
            "POST", _script_path(template_name), headers=_JSON_HEADERS, body=body
        )

    if resp.meta.status != 200:
        raise RemoteStatusError(action, status=resp.meta.status, payload=json.dumps(body))
    logger.info("Stored template %s", template_name)


def get_template_source(client: Elasticsearch, template_name: str) -> str:
    """Return the stored source of *template_name* (``""`` if it has none)."""
    action = f"getting template source, template name={template_name}"
    with translate_errors(action):
        resp = client.perform_request(
            "GET", _script_path(template_name), headers={"accept": "application/json"}
        )

    if resp.meta.status != 200:
        raise RemoteStatusError(action, status=resp.meta.status)

    script = response_body(resp).get("script") or {}
    return script.get("source") or ""


def template_search(
    client: Elasticsearch,
    index: str,
    template_id: str,
    params: Optional[Mapping[str, Any]] = None,
) -> list[QueryResponse]:
    """Execute the stored template *template_id* against *index*."""
    with translate_errors(f"executing template {template_id!r} on {index!r}", payload=params):
        resp = client.search_template(index=index, id=template_id, params=dict(params or {}))
    return convert_hits(resp)
