"""Global pytest fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from courtlens.main import app
from courtlens.models.schemas import CaseQuery


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def sample_query() -> CaseQuery:
    return CaseQuery(case_type="W.P.(C)", case_number="5", filing_year="2022")


@pytest.fixture
def sync_client() -> TestClient:
    """Synchronous TestClient; runs the app lifespan and clears overrides afterwards."""
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
