"""Exceptions raised by the query handler and translation from client errors.

Only two failure kinds reach callers: the cluster could not be reached (or a
body could not be (de)serialised), or the cluster answered with a non-success
status.  Both are fatal for the call that raised them.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from elastic_transport import SerializationError, TransportError
from elasticsearch import ApiError

logger = logging.getLogger(__name__)


class ElasticsearchServiceError(RuntimeError):
    """Base exception for query handler operations."""


class ConfigurationError(ElasticsearchServiceError, ValueError):
    """Raised when connection settings or query defaults are missing or invalid."""


class TransportFailure(ElasticsearchServiceError):
    """Raised when the cluster could not be reached or the exchange failed."""


class InvalidDocumentError(ElasticsearchServiceError):
    """Raised when a document body is not valid JSON."""


class RemoteStatusError(ElasticsearchServiceError):
    """Raised when the cluster answers with an unexpected status code."""

    def __init__(self, message: str, status: Optional[int] = None, payload: Any = None):
        self.status = status
        self.payload = payload
        details = message
        if status is not None:
            details = f"errors[{status}] {details}"
        if payload is not None:
            details = f"{details}, payload: {payload}"
        super().__init__(details)


@contextmanager
def translate_errors(action: str, payload: Any = None) -> Iterator[None]:
    """Re-raise client exceptions as :class:`ElasticsearchServiceError`.

    ``ApiError`` (the cluster answered) becomes :class:`RemoteStatusError`
    carrying the status and *payload*; anything from the transport layer
    becomes :class:`TransportFailure`.  The original exception is chained.
    """
    try:
        yield
    except ApiError as exc:
        raise RemoteStatusError(
            f"{action} failed: {exc.message}",
            status=exc.meta.status,
            payload=payload if payload is not None else exc.body,
        ) from exc
    except (TransportError, SerializationError) as exc:
        logger.error("%s failed: %s", action, exc)
        raise TransportFailure(f"{action} failed: {exc}") from exc
