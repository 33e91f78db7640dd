from __future__ import annotations

from collections.abc import Generator

import pytest

from bqprovider.config import reset_global_config
from bqprovider.parameters import BigQueryDbType, BigQueryParameter, BigQueryParameterCollection


@pytest.fixture(autouse=True)
def _fresh_global_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.delenv("BQPROVIDER_PARAMETER_NAME_PREFIX", raising=False)
    monkeypatch.delenv("BQPROVIDER_VALIDATE_ITEMS", raising=False)
    reset_global_config()
    yield
    reset_global_config()


@pytest.fixture
def collection() -> BigQueryParameterCollection:
    return BigQueryParameterCollection()


@pytest.fixture
def populated() -> BigQueryParameterCollection:
    """Collection holding ``id``, ``name`` and ``created`` in that order."""
    params = BigQueryParameterCollection()
    params.add(BigQueryParameter("id", BigQueryDbType.INT64, 1))
    params.add(BigQueryParameter("name", BigQueryDbType.STRING, "alice"))
    params.add(BigQueryParameter("created", BigQueryDbType.STRING, "today"))
    return params
