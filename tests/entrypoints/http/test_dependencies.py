"""
Unit tests for FastAPI dependency injection functions.

This test suite verifies the dependency wiring logic:
- build_vehicle_source() picks the source from configuration
- get_catalog_context() reads the context loaded at startup
- Use case providers return fresh, stateless instances
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from vehicle_mart.adapters.http_vehicle_source import HttpVehicleSource
from vehicle_mart.adapters.json_file_vehicle_source import JsonFileVehicleSource
from vehicle_mart.entrypoints.http.dependencies import (
    build_vehicle_source,
    get_browse_catalog_use_case,
    get_catalog_context,
    get_get_vehicle_by_id_use_case,
)
from vehicle_mart.use_cases.browse_catalog import BrowseCatalog
from vehicle_mart.use_cases.catalog_pipeline import CatalogContext, CatalogState
from vehicle_mart.use_cases.get_vehicle_by_id import GetVehicleById


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("VEHICLE_DATA_URL", "VEHICLE_DATA_PATH", "VEHICLE_DATA_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


# ==============================================================================
# build_vehicle_source() - Source Selection
# ==============================================================================


def test_defaults_to_local_json_file() -> None:
    source = build_vehicle_source()

    assert isinstance(source, JsonFileVehicleSource)
    assert str(source._path) == "vehicles.json"


def test_uses_configured_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_DATA_PATH", "/srv/data/vehicles.json")

    source = build_vehicle_source()

    assert isinstance(source, JsonFileVehicleSource)
    assert str(source._path) == "/srv/data/vehicles.json"


def test_url_takes_precedence_over_path(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_DATA_URL", "https://example.test/vehicles.json")
    monkeypatch.setenv("VEHICLE_DATA_PATH", "/srv/data/vehicles.json")

    source = build_vehicle_source()

    assert isinstance(source, HttpVehicleSource)
    assert source._url == "https://example.test/vehicles.json"


def test_invalid_timeout_fails_fast(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLE_DATA_URL", "https://example.test/vehicles.json")
    monkeypatch.setenv("VEHICLE_DATA_TIMEOUT", "soon")

    with pytest.raises(RuntimeError, match="VEHICLE_DATA_TIMEOUT"):
        build_vehicle_source()


# ==============================================================================
# get_catalog_context() - Startup State Provider
# ==============================================================================


def test_get_catalog_context_returns_loaded_context() -> None:
    context = CatalogContext(state=CatalogState.READY)
    request = Mock()
    request.app.state.catalog_context = context

    assert get_catalog_context(request) is context


def test_get_catalog_context_before_startup_is_unset() -> None:
    request = Mock()
    request.app.state = Mock(spec=[])  # no catalog_context attribute

    context = get_catalog_context(request)

    assert context.state is CatalogState.UNSET
    assert context.source == ()


# ==============================================================================
# Use Case Providers
# ==============================================================================


def test_use_case_providers_return_fresh_instances() -> None:
    assert isinstance(get_browse_catalog_use_case(), BrowseCatalog)
    assert isinstance(get_get_vehicle_by_id_use_case(), GetVehicleById)
    assert get_browse_catalog_use_case() is not get_browse_catalog_use_case()
