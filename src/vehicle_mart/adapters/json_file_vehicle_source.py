"""Local JSON file implementation of VehicleSource."""

from __future__ import annotations

from pathlib import Path

from vehicle_mart.adapters.json_payload import parse_vehicle_payload
from vehicle_mart.domain.errors import CatalogLoadError
from vehicle_mart.domain.vehicle import VehicleRecord
from vehicle_mart.ports.vehicle_source import VehicleSource


class JsonFileVehicleSource(VehicleSource):
    """Reads the vehicle collection from a JSON file on disk (e.g. vehicles.json)."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load(self) -> list[VehicleRecord]:
        try:
            payload = self._path.read_bytes()
        except OSError as exc:
            raise CatalogLoadError(
                f"Failed to read vehicle data: {exc.strerror or exc}",
                source=str(self._path),
            ) from exc

        return parse_vehicle_payload(payload, source=str(self._path))
