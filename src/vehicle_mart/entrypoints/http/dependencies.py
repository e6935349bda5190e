"""
Dependency injection for FastAPI routes.

Key principle: the catalog is loaded once at startup and kept on app.state.
Use cases are stateless and built per request.
"""

from __future__ import annotations

from fastapi import Request

from vehicle_mart.adapters.http_vehicle_source import HttpVehicleSource
from vehicle_mart.adapters.json_file_vehicle_source import JsonFileVehicleSource
from vehicle_mart.infra.config import vehicle_data_path, vehicle_data_timeout, vehicle_data_url
from vehicle_mart.ports.vehicle_source import VehicleSource
from vehicle_mart.use_cases.browse_catalog import BrowseCatalog
from vehicle_mart.use_cases.catalog_pipeline import CatalogContext
from vehicle_mart.use_cases.get_vehicle_by_id import GetVehicleById


def build_vehicle_source() -> VehicleSource:
    """
    Choose the data source from configuration.

    VEHICLE_DATA_URL wins over VEHICLE_DATA_PATH; the default is a local
    vehicles.json file.

    Returns:
        VehicleSource: HTTP or file-backed source
    """
    url = vehicle_data_url()
    if url:
        return HttpVehicleSource(url=url, timeout=vehicle_data_timeout())
    return JsonFileVehicleSource(path=vehicle_data_path())


def get_catalog_context(request: Request) -> CatalogContext:
    """
    Provides the pipeline context loaded at startup.

    Before the startup load has run, the context is Unset and renders as an
    empty catalog.
    """
    context = getattr(request.app.state, "catalog_context", None)
    return context if context is not None else CatalogContext()


def get_browse_catalog_use_case() -> BrowseCatalog:
    return BrowseCatalog()


def get_get_vehicle_by_id_use_case() -> GetVehicleById:
    return GetVehicleById()
