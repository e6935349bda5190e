"""
Test suite for the /v1/vehicles routes.

- Query parameters are mapped to a search query and sort key
- Results come back as escaped display cards in pipeline order
- Notices replace cards for empty results and failed loads
- Detail lookup maps domain errors to 404, 422 and 503
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from vehicle_mart.domain.errors import CatalogLoadError
from vehicle_mart.domain.vehicle import NumericEngineSize, TextualEngineSize, VehicleRecord
from vehicle_mart.entrypoints.http.dependencies import get_catalog_context
from vehicle_mart.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_mart.entrypoints.http.routes.vehicles import router
from vehicle_mart.use_cases.catalog_pipeline import CatalogContext, CatalogDispatcher


@pytest.fixture
def vehicles() -> list[VehicleRecord]:
    return [
        VehicleRecord(
            id="1",
            make="Toyota",
            model="Corolla",
            year=2020,
            engine_size=NumericEngineSize(value=Decimal("1800")),
            price=Decimal("15000"),
            date_added="2024-03-01",
        ),
        VehicleRecord(
            id="2",
            make="Toyota",
            model="Yaris",
            year=2019,
            engine_size=NumericEngineSize(value=Decimal("1.8")),
            price=Decimal("12000"),
            date_added="2024-05-01",
        ),
        VehicleRecord(
            id="3",
            make="Honda",
            model="Civic",
            year="2021",
            engine_size=TextualEngineSize(label="2.0L Turbo"),
            price="call us",
        ),
    ]


@pytest.fixture
def context(vehicles: list[VehicleRecord]) -> CatalogContext:
    return CatalogDispatcher().on_load_complete(CatalogContext(), vehicles).context


@pytest.fixture
def app(context: CatalogContext) -> FastAPI:
    """Create a test FastAPI app with the vehicles router and a loaded catalog."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_catalog_context] = lambda: context
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def failed_client(app: FastAPI) -> TestClient:
    error = CatalogLoadError("Failed to fetch vehicle data: 500", status_code=500)
    failed = CatalogDispatcher().on_load_failed(CatalogContext(), error).context
    app.dependency_overrides[get_catalog_context] = lambda: failed
    return TestClient(app, raise_server_exceptions=False)


def _ids(response) -> list[str]:
    return [card["id"] for card in response.json()["cards"]]


# ==============================================================================
# GET /v1/vehicles
# ==============================================================================


def test_without_params_returns_all_in_source_order(client: TestClient) -> None:
    response = client.get("/v1/vehicles")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 3
    assert data["notice"] is None
    assert _ids(response) == ["1", "2", "3"]


def test_card_fields(client: TestClient) -> None:
    card = client.get("/v1/vehicles", params={"model": "corolla"}).json()["cards"][0]

    assert card == {
        "id": "1",
        "image_src": "images/placeholder.png",
        "fallback_image_src": "images/placeholder.png",
        "image_alt": "Toyota Corolla",
        "price": "$15,000",
        "heading": "Toyota Corolla",
        "summary": "2020 — 1800cc —  — ",
        "model_code": "",
        "engine": "1800cc",
        "detail_href": "vehicle.html?id=1",
    }


def test_filter_and_sort_by_price(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"make": "toyota", "sort": "price"})

    assert _ids(response) == ["2", "1"]


def test_engine_size_in_cc(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"enginesize": "1800"})

    assert _ids(response) == ["1"]


def test_engine_size_in_liters(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"enginesize": "1.8"})

    assert _ids(response) == ["2"]


def test_engine_size_text_match(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"enginesize": "turbo"})

    assert _ids(response) == ["3"]


def test_year_matches_numbers_and_strings(client: TestClient) -> None:
    assert _ids(client.get("/v1/vehicles", params={"year": "2020"})) == ["1"]
    assert _ids(client.get("/v1/vehicles", params={"year": "2021"})) == ["3"]


def test_sort_by_date_puts_undated_last(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"sort": "date"})

    assert _ids(response) == ["2", "1", "3"]


def test_sort_by_year_newest_first(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"sort": "year"})

    assert _ids(response) == ["3", "1", "2"]


def test_unknown_sort_keeps_source_order(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"sort": "mileage"})

    assert response.status_code == 200
    assert _ids(response) == ["1", "2", "3"]


def test_no_matches_returns_notice(client: TestClient) -> None:
    response = client.get("/v1/vehicles", params={"make": "Ferrari"})

    assert response.status_code == 200
    assert response.json() == {
        "cards": [],
        "notice": {"message": "No vehicles found.", "tone": "muted"},
        "total": 0,
    }


def test_price_beyond_default_precision_still_renders(app: FastAPI, client: TestClient) -> None:
    huge = CatalogDispatcher().on_load_complete(
        CatalogContext(), [VehicleRecord(id="big", price=Decimal("1e30"))]
    )
    app.dependency_overrides[get_catalog_context] = lambda: huge.context

    response = client.get("/v1/vehicles")

    assert response.status_code == 200
    assert response.json()["cards"][0]["price"] == "$1,000,000,000,000,000,000,000,000,000,000"


def test_failed_catalog_returns_failure_notice(failed_client: TestClient) -> None:
    response = failed_client.get("/v1/vehicles", params={"make": "toyota"})

    assert response.status_code == 200
    assert response.json()["notice"] == {
        "message": "Failed to load vehicle data.",
        "tone": "danger",
    }


# ==============================================================================
# GET /v1/vehicles/{vehicle_id}
# ==============================================================================


def test_get_vehicle_returns_card(client: TestClient) -> None:
    response = client.get("/v1/vehicles/3")

    assert response.status_code == 200
    data = response.json()
    assert data["heading"] == "Honda Civic"
    assert data["engine"] == "2.0L Turbo"
    assert data["price"] == "$0"


def test_get_vehicle_unknown_id_returns_404(client: TestClient) -> None:
    response = client.get("/v1/vehicles/veh-404")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Vehicle with identifier 'veh-404' not found",
        "code": "NOT_FOUND",
    }


def test_get_vehicle_blank_id_returns_422(client: TestClient) -> None:
    response = client.get("/v1/vehicles/%20")

    assert response.status_code == 422
    assert response.json()["errors"][0]["code"] == "BLANK_ID"


def test_get_vehicle_on_failed_catalog_returns_503(failed_client: TestClient) -> None:
    response = failed_client.get("/v1/vehicles/1")

    assert response.status_code == 503
    assert response.json() == {
        "detail": "Failed to fetch vehicle data: 500",
        "code": "CATALOG_LOAD_ERROR",
    }
