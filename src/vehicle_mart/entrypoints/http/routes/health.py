from fastapi import APIRouter, Depends

from vehicle_mart.entrypoints.http.dependencies import get_catalog_context
from vehicle_mart.use_cases.catalog_pipeline import CatalogContext


router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness and catalog state")
def health(context: CatalogContext = Depends(get_catalog_context)) -> dict[str, str]:
    return {"status": "ok", "catalog": context.state.value}
