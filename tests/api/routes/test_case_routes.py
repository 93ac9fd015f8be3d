"""Tests for case lookup routes."""

from __future__ import annotations

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from courtlens.api.deps import get_lookup_service
from courtlens.core.case_lookup import CaseLookupService
from courtlens.core.errors import MESSAGES, ErrorKind
from courtlens.core.validation import QueryValidator
from courtlens.main import app
from courtlens.mock.factory import CaseGenerator, GeneratorConfig

TODAY = date(2025, 6, 15)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    """Async test client with a lookup service pinned to a fixed clock."""
    service = CaseLookupService(
        generator=CaseGenerator(config=GeneratorConfig(variant="extended"), today=lambda: TODAY),
        validator=QueryValidator(retry_after_seconds=30),
        today=lambda: TODAY,
    )
    app.dependency_overrides[get_lookup_service] = lambda: service
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
    app.dependency_overrides.pop(get_lookup_service, None)


def _body(case_number: str, filing_year: str = "2022", case_type: str = "W.P.(C)") -> dict:
    return {"case_type": case_type, "case_number": case_number, "filing_year": filing_year}


@pytest.mark.anyio
async def test_list_case_types(client: AsyncClient):
    response = await client.get("/api/v1/case-types")

    assert response.status_code == 200
    codes = [item["code"] for item in response.json()]
    assert codes[:4] == ["W.P.(C)", "CS(OS)", "FAO", "CRL.A"]


@pytest.mark.anyio
async def test_lookup_known_case(client: AsyncClient):
    response = await client.post("/api/v1/cases/lookup", json=_body("5"))

    assert response.status_code == 200
    data = response.json()
    assert data["case_number"] == "5"
    assert data["filing_year"] == "2022"
    assert data["parties"] == {
        "petitioner": "Ram Kumar Sharma",
        "respondent": "Central Bureau of Investigation",
    }
    assert data["case_id"] == "WP(C)/5/2022"
    assert data["filing_date"].endswith("-2022")
    assert 2 <= len(data["orders"]) <= 5


@pytest.mark.anyio
async def test_lookup_is_deterministic(client: AsyncClient):
    first = await client.post("/api/v1/cases/lookup", json=_body("314", "2019"))
    second = await client.post("/api/v1/cases/lookup", json=_body("314", "2019"))

    assert first.json() == second.json()


@pytest.mark.anyio
async def test_lookup_not_found_sentinel(client: AsyncClient):
    response = await client.post("/api/v1/cases/lookup", json=_body("999"))

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "CASE_NOT_FOUND"
    assert error["message"].startswith("Invalid Case Number.")
    assert "case_number" not in response.json()


@pytest.mark.anyio
async def test_lookup_service_down_sentinel(client: AsyncClient):
    response = await client.post("/api/v1/cases/lookup", json=_body("000", "24"))

    assert response.status_code == 503
    assert response.headers["retry-after"] == "30"
    error = response.json()["error"]
    assert error["code"] == "SERVICE_UNAVAILABLE"
    assert error["retry_after_seconds"] == 30


@pytest.mark.anyio
async def test_lookup_invalid_case_number(client: AsyncClient):
    response = await client.post("/api/v1/cases/lookup", json=_body("12a"))

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.anyio
async def test_lookup_invalid_filing_year(client: AsyncClient):
    response = await client.post("/api/v1/cases/lookup", json=_body("5", "24"))

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.anyio
async def test_lookup_unknown_case_type(client: AsyncClient):
    response = await client.post("/api/v1/cases/lookup", json=_body("5", case_type="XYZ"))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "UNKNOWN_CASE_TYPE"


@pytest.mark.anyio
async def test_lookup_missing_field_is_invalid_input(client: AsyncClient):
    response = await client.post(
        "/api/v1/cases/lookup", json={"case_type": "W.P.(C)", "case_number": "5"}
    )

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "INVALID_INPUT"
    assert error["message"] == MESSAGES[ErrorKind.INVALID_INPUT]
    assert error["retry_after_seconds"] is None


@pytest.mark.anyio
async def test_lookup_integer_fields_are_invalid_input(client: AsyncClient):
    response = await client.post(
        "/api/v1/cases/lookup",
        json={"case_type": "W.P.(C)", "case_number": 5, "filing_year": 2022},
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.anyio
async def test_lookup_non_object_body_is_invalid_input(client: AsyncClient):
    response = await client.post("/api/v1/cases/lookup", json=["W.P.(C)", "5", "2022"])

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_INPUT"
