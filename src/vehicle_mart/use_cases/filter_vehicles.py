from __future__ import annotations

from dataclasses import dataclass

from vehicle_mart.domain.matching import matches
from vehicle_mart.domain.vehicle import SearchQuery, VehicleRecord


@dataclass(frozen=True, slots=True)
class FilterVehiclesRequest:
    vehicles: list[VehicleRecord]
    query: SearchQuery | None = None  # None: no search mechanism, filtering is bypassed


@dataclass(frozen=True, slots=True)
class FilterVehiclesResponse:
    vehicles: list[VehicleRecord]


class FilterVehicles:
    """
    Filter stage: produces the working subset from the full collection.

    - AND semantics across make, model, year and engine size
    - Source order preserved
    - Always returns a new list; the input collection is never touched
    """

    def execute(self, request: FilterVehiclesRequest) -> FilterVehiclesResponse:
        if request.query is None or request.query.is_empty:
            return FilterVehiclesResponse(vehicles=list(request.vehicles))

        query = request.query
        return FilterVehiclesResponse(
            vehicles=[vehicle for vehicle in request.vehicles if matches(vehicle, query)]
        )
