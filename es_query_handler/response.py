"""Flat response record returned by every read operation."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from pydantic import BaseModel

DEFAULT_TYPE = "_doc"


def dump_source(source: Any) -> Optional[str]:
    """Serialise a ``_source`` object back to compact JSON text."""
    if source is None:
        return None
    return json.dumps(source, separators=(",", ":"), ensure_ascii=False)


class QueryResponse(BaseModel):
    id: str
    index: str
    type: str = DEFAULT_TYPE
    source: Optional[str] = None

    @classmethod
    def from_hit(cls, hit: Mapping[str, Any], default_type: str = DEFAULT_TYPE) -> "QueryResponse":
        """Build a response from a search hit or a get response body."""
        return cls(
            id=str(hit["_id"]),
            index=hit["_index"],
            type=hit.get("_type") or default_type,
            source=dump_source(hit.get("_source")),
        )


def total_hits(hits: Mapping[str, Any]) -> int:
    """Return the hit count from either ``{"value": n}`` or a legacy integer."""
    total = hits.get("total")
    if total is None:
        return len(hits.get("hits", []))
    if isinstance(total, Mapping):
        return int(total.get("value", 0))
    return int(total)


def response_body(response: Any) -> Any:
    """Return the plain body of a client response (or the value itself)."""
    return getattr(response, "body", response)


def convert_hits(response: Any) -> list[QueryResponse]:
    """Translate a search response into responses, keeping cluster order."""
    body = response_body(response)
    if not body:
        return []
    hits = body.get("hits")
    if not hits or total_hits(hits) == 0:
        return []
    return [QueryResponse.from_hit(hit) for hit in hits.get("hits", [])]
