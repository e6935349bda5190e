"""Get vehicle by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from vehicle_mart.domain.errors import CatalogLoadError, NotFoundError, ValidationError
from vehicle_mart.domain.vehicle import VehicleRecord
from vehicle_mart.use_cases.catalog_pipeline import CatalogContext, CatalogState


@dataclass(frozen=True, slots=True)
class GetVehicleByIdRequest:
    """Request to get a vehicle by ID."""

    vehicle_id: str


@dataclass(frozen=True, slots=True)
class GetVehicleByIdResponse:
    """Response containing the requested vehicle."""

    vehicle: VehicleRecord


class GetVehicleById:
    """
    Use case for resolving a detail link back to its vehicle.

    Responsibilities:
    - Reject blank ids
    - Look the id up in the loaded source collection (ids are opaque, exact match)
    - Raise NotFoundError if no vehicle has that id
    """

    def execute(self, context: CatalogContext, request: GetVehicleByIdRequest) -> GetVehicleByIdResponse:
        """
        Execute the lookup.

        Args:
            context: Pipeline context holding the loaded collection
            request: Request containing vehicle_id

        Returns:
            GetVehicleByIdResponse with the vehicle

        Raises:
            CatalogLoadError: If the catalog failed to load
            ValidationError: If vehicle_id is blank
            NotFoundError: If no vehicle has the given id
        """
        if context.state is CatalogState.FAILED:
            raise context.load_error or CatalogLoadError("Vehicle catalog is unavailable")

        if not request.vehicle_id.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "vehicle_id",
                        "message": "Must not be blank",
                        "code": "BLANK_ID",
                    }
                ]
            )

        for vehicle in context.source:
            if vehicle.id == request.vehicle_id:
                return GetVehicleByIdResponse(vehicle=vehicle)

        raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)
