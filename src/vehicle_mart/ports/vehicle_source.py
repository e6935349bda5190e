from __future__ import annotations

from abc import ABC, abstractmethod

from vehicle_mart.domain.vehicle import VehicleRecord


class VehicleSource(ABC):
    """
    Port for retrieving the vehicle collection.

    The collection is retrieved once per session. Implementations either
    return the full ordered collection or raise CatalogLoadError; they never
    return a partial collection.

    Contract (Postconditions):
        - Records are returned in source order
        - Engine sizes are already resolved to their tagged variant
    """

    @abstractmethod
    def load(self) -> list[VehicleRecord]:
        """
        Retrieve the full vehicle collection.

        Returns:
            Vehicle records in source order (possibly empty)

        Raises:
            CatalogLoadError: If the source is unreachable or malformed
        """
        ...
