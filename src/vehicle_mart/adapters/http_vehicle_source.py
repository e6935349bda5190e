"""HTTP implementation of VehicleSource."""

from __future__ import annotations

import httpx

from vehicle_mart.adapters.json_payload import parse_vehicle_payload
from vehicle_mart.domain.errors import CatalogLoadError
from vehicle_mart.domain.vehicle import VehicleRecord
from vehicle_mart.ports.vehicle_source import VehicleSource


class HttpVehicleSource(VehicleSource):
    """
    Fetches the vehicle collection from a URL.

    - Single request, no retry
    - Any non-2xx status is a load failure
    - Connection and timeout errors are load failures
    """

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize source.

        Args:
            url: Location of the vehicle JSON document
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests inject httpx.MockTransport)
        """
        self._url = url
        self._timeout = httpx.Timeout(timeout)
        self._transport = transport

    def load(self) -> list[VehicleRecord]:
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.get(self._url)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogLoadError(
                f"Failed to fetch vehicle data: {exc.response.status_code}",
                source=self._url,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise CatalogLoadError(
                f"Failed to fetch vehicle data: {exc}",
                source=self._url,
            ) from exc

        return parse_vehicle_payload(response.content, source=self._url)
