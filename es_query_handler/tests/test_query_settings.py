from __future__ import annotations

import pytest

from es_query_handler.errors import ConfigurationError
from es_query_handler.query_settings import QueryDefaults, load_query_defaults


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("QUERY_DEFAULT_INDEX", "QUERY_DEFAULT_TYPE", "QUERY_STORED_TEMPLATE_ID"):
        monkeypatch.delenv(key, raising=False)


def test_load_query_defaults_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUERY_DEFAULT_INDEX", "customers")
    monkeypatch.setenv("QUERY_DEFAULT_TYPE", "_doc")
    monkeypatch.setenv("QUERY_STORED_TEMPLATE_ID", "find_customer")

    defaults = load_query_defaults()

    assert defaults == QueryDefaults("customers", "_doc", "find_customer")


def test_override_fills_missing_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUERY_DEFAULT_INDEX", "customers")
    monkeypatch.setenv("QUERY_DEFAULT_TYPE", "_doc")

    defaults = load_query_defaults(stored_template_id="tpl")
    assert defaults.stored_template_id == "tpl"


def test_missing_defaults_raise() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        load_query_defaults(default_index="customers")
    assert "QUERY_DEFAULT_TYPE" in str(excinfo.value)


def test_unknown_key_raises() -> None:
    with pytest.raises(TypeError):
        load_query_defaults(default_alias="x")
