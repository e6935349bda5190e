from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from vehicle_mart.entrypoints.http.dependencies import (
    get_browse_catalog_use_case,
    get_catalog_context,
)
from vehicle_mart.entrypoints.http.dtos.catalog import VehicleSearchQueryDTO
from vehicle_mart.entrypoints.http.html import render_catalog_grid
from vehicle_mart.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from vehicle_mart.use_cases.browse_catalog import BrowseCatalog
from vehicle_mart.use_cases.catalog_pipeline import CatalogContext


router = APIRouter(tags=["Catalog"])


@router.get(
    "/catalog",
    response_class=HTMLResponse,
    summary="Render results grid",
    description="HTML fragment for the results grid: vehicle cards, or a single notice.",
)
def get_catalog(
    query: VehicleSearchQueryDTO = Depends(),
    context: CatalogContext = Depends(get_catalog_context),
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> HTMLResponse:
    view = use_case.execute(context, CatalogMapper.to_domain_request(query))

    return HTMLResponse(content=render_catalog_grid(view))
