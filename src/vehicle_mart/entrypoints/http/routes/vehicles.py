from fastapi import APIRouter, Depends

from vehicle_mart.entrypoints.http.dependencies import (
    get_browse_catalog_use_case,
    get_catalog_context,
    get_get_vehicle_by_id_use_case,
)
from vehicle_mart.entrypoints.http.dtos.catalog import (
    CatalogResponseDTO,
    VehicleCardDTO,
    VehicleSearchQueryDTO,
)
from vehicle_mart.entrypoints.http.error_responses import ErrorResponse
from vehicle_mart.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from vehicle_mart.use_cases.browse_catalog import BrowseCatalog
from vehicle_mart.use_cases.catalog_pipeline import CatalogContext
from vehicle_mart.use_cases.get_vehicle_by_id import GetVehicleById, GetVehicleByIdRequest
from vehicle_mart.use_cases.present_vehicles import PresentVehicles


router = APIRouter(tags=["Vehicles"])


@router.get(
    "/vehicles",
    response_model=CatalogResponseDTO,
    summary="Browse vehicle catalog",
    description="""
    Filter and sort the vehicle catalog and return display cards.

    ## Filters
    - All filters use AND semantics; blank values are ignored
    - make/model: case-insensitive partial match
    - year: exact match
    - enginesize: 1800 matches cc-scale engines exactly, 1.8 matches liter-scale
      engines within 0.01, anything else is a partial text match

    ## Sorting
    - price: ascending
    - date, year: newest first
    - anything else: source order

    ## Notices
    - No matches: `notice.message == "No vehicles found."`
    - Catalog failed to load: `notice.message == "Failed to load vehicle data."`

    ## Example
    ```
    GET /v1/vehicles?make=toyota&enginesize=1.8&sort=price
    ```
    """,
    responses={
        200: {
            "description": "Successful response",
            "content": {
                "application/json": {
                    "example": {
                        "cards": [
                            {
                                "id": "veh-001",
                                "image_src": "images/corolla.jpg",
                                "fallback_image_src": "images/placeholder.png",
                                "image_alt": "Toyota Corolla",
                                "price": "$12,000",
                                "heading": "Toyota Corolla",
                                "summary": "2019 — 1.8L — Automatic — Silver",
                                "model_code": "ZRE172",
                                "engine": "1.8L",
                                "detail_href": "vehicle.html?id=veh-001",
                            }
                        ],
                        "notice": None,
                        "total": 1,
                    }
                }
            },
        },
    },
)
def get_vehicles(
    query: VehicleSearchQueryDTO = Depends(),
    context: CatalogContext = Depends(get_catalog_context),
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogResponseDTO:
    """Browse endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = CatalogMapper.to_domain_request(query)

    # 2. Execute use case
    view = use_case.execute(context, request)

    # 3. Map to response
    return CatalogMapper.to_response(view)


@router.get(
    "/vehicles/{vehicle_id}",
    response_model=VehicleCardDTO,
    summary="Get vehicle by id",
    responses={
        404: {
            "model": ErrorResponse,
            "description": "Vehicle not found",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Vehicle with identifier 'veh-404' not found",
                        "code": "NOT_FOUND",
                    }
                }
            },
        },
        503: {
            "model": ErrorResponse,
            "description": "Catalog failed to load",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Failed to fetch vehicle data: 500",
                        "code": "CATALOG_LOAD_ERROR",
                    }
                }
            },
        },
    },
)
def get_vehicle(
    vehicle_id: str,
    context: CatalogContext = Depends(get_catalog_context),
    use_case: GetVehicleById = Depends(get_get_vehicle_by_id_use_case),
) -> VehicleCardDTO:
    result = use_case.execute(context, GetVehicleByIdRequest(vehicle_id=vehicle_id))

    return CatalogMapper.to_card_response(PresentVehicles.to_card(result.vehicle))
