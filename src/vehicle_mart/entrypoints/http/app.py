from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vehicle_mart.entrypoints.http.dependencies import build_vehicle_source
from vehicle_mart.entrypoints.http.exception_handlers import register_exception_handlers
from vehicle_mart.entrypoints.http.routes.catalog import router as catalog_router
from vehicle_mart.entrypoints.http.routes.health import router as health_router
from vehicle_mart.entrypoints.http.routes.vehicles import router as vehicles_router
from vehicle_mart.ports.vehicle_source import VehicleSource
from vehicle_mart.use_cases.load_catalog import LoadCatalog


def build_app(source_factory: Callable[[], VehicleSource] = build_vehicle_source) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # One-shot load; a failure leaves the catalog in the Failed state until restart
        result = LoadCatalog(source_factory()).execute()
        app.state.catalog_context = result.context
        yield

    app = FastAPI(
        title="Vehicle Mart API",
        description="""
        Vehicle listings catalog: filter, sort and render display cards.

        ## Features
        - Filter by make, model, year and engine size
        - Sort by price, date added or year
        - HTML results grid and JSON cards

        ## Data
        The vehicle collection is loaded once at startup from VEHICLE_DATA_URL
        or VEHICLE_DATA_PATH. If loading fails, every catalog render shows
        "Failed to load vehicle data." until the service is restarted.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(catalog_router)
    app.include_router(vehicles_router, prefix="/v1")

    return app


app = build_app()
