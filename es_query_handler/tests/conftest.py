from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any

import pytest
from elastic_transport import ApiResponseMeta, HttpHeaders, NodeConfig, ObjectApiResponse

# Make package importable when running tests from the repository root.
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: tests that require a running Elasticsearch cluster",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.getenv("ES_RUN_INTEGRATION") == "1":
        return

    skip_integration = pytest.mark.skip(
        reason="Set ES_RUN_INTEGRATION=1 to run integration tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


def _meta(status: int) -> ApiResponseMeta:
    return ApiResponseMeta(
        status=status,
        http_version="1.1",
        headers=HttpHeaders(),
        duration=0.0,
        node=NodeConfig("http", "localhost", 9200),
    )


@pytest.fixture
def api_response():
    """Build a client response object with a body and status."""

    def build(body: Any, status: int = 200) -> ObjectApiResponse:
        return ObjectApiResponse(body=body, meta=_meta(status))

    return build


@pytest.fixture
def api_error():
    """Build an ``ApiError`` (or subclass) as raised by the client."""

    def build(cls: type, status: int, body: Any, message: str = "error") -> Exception:
        return cls(message, meta=_meta(status), body=body)

    return build
