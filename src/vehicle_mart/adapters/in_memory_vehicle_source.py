from __future__ import annotations

from vehicle_mart.domain.vehicle import VehicleRecord
from vehicle_mart.ports.vehicle_source import VehicleSource


class InMemoryVehicleSource(VehicleSource):
    """
    Canonical contract implementation for tests.

    - Returns records in insertion order
    - Hands out a copy, so callers can never reorder the stored collection
    """

    def __init__(self, vehicles: list[VehicleRecord]) -> None:
        self._vehicles = vehicles

    def load(self) -> list[VehicleRecord]:
        return list(self._vehicles)
