from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from vehicle_mart.domain.normalize import date_value, price_value, year_value
from vehicle_mart.domain.vehicle import SortKey, VehicleRecord


@dataclass(frozen=True, slots=True)
class SortOrder:
    key: Callable[[VehicleRecord], Any]
    descending: bool


# price ascending, date and year newest first
SORT_ORDERS: dict[SortKey, SortOrder] = {
    SortKey.PRICE: SortOrder(key=lambda v: price_value(v.price), descending=False),
    SortKey.DATE: SortOrder(key=lambda v: date_value(v.date_added), descending=True),
    SortKey.YEAR: SortOrder(key=lambda v: year_value(v.year), descending=True),
}


@dataclass(frozen=True, slots=True)
class SortVehiclesRequest:
    vehicles: list[VehicleRecord]
    sort_key: SortKey | None = None


@dataclass(frozen=True, slots=True)
class SortVehiclesResponse:
    vehicles: list[VehicleRecord]


class SortVehicles:
    """
    Sorter: orders a subset by a single key.

    Ordering policy:
    - price: ascending, missing or non-numeric price counts as 0
    - date: descending, missing or unparseable date sorts last
    - year: descending, missing or non-numeric year counts as 0
    - no key or unrecognized key: input order unchanged

    Sorting is stable (ties keep their input order), so applying the same
    key twice gives the same result as applying it once.
    """

    def execute(self, request: SortVehiclesRequest) -> SortVehiclesResponse:
        order = SORT_ORDERS.get(request.sort_key) if request.sort_key else None
        if order is None:
            return SortVehiclesResponse(vehicles=list(request.vehicles))

        # sorted() with reverse=True is still stable for equal keys
        return SortVehiclesResponse(
            vehicles=sorted(request.vehicles, key=order.key, reverse=order.descending)
        )
