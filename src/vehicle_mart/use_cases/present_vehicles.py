from __future__ import annotations

import html
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any
from urllib.parse import quote

from vehicle_mart.domain.normalize import engine_label, price_value
from vehicle_mart.domain.vehicle import VehicleRecord

PLACEHOLDER_IMAGE = "images/placeholder.png"
DETAIL_PAGE = "vehicle.html"

NO_RESULTS_MESSAGE = "No vehicles found."
LOAD_FAILED_MESSAGE = "Failed to load vehicle data."

# Same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def escape_text(value: Any) -> str:
    """Escape &, <, >, " and ' for embedding in markup. None renders as ""."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def format_price(price: Any) -> str:
    """Currency display with grouping separators: 15000 → "$15,000", 1234.5 → "$1,234.5"."""
    amount = price_value(price)
    with localcontext() as ctx:
        # Room for every integer digit plus the three decimals kept
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        amount = amount.quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
        if amount == amount.to_integral_value():
            amount = amount.quantize(Decimal("1"))
        else:
            amount = amount.normalize()
    return f"${amount:,}"


def primary_image(vehicle: VehicleRecord) -> str:
    if vehicle.images and vehicle.images[0]:
        return vehicle.images[0]
    return PLACEHOLDER_IMAGE


def detail_href(vehicle_id: str) -> str:
    return f"{DETAIL_PAGE}?id={quote(vehicle_id, safe=_URI_COMPONENT_SAFE)}"


# ==============================================================================
# Projections
# ==============================================================================


@dataclass(frozen=True, slots=True)
class VehicleCard:
    """
    Display-safe projection of a vehicle.

    Every string here is already escaped and can be embedded in markup as-is.
    """

    id: str
    image_src: str
    image_alt: str
    price: str
    heading: str
    summary: str
    model_code: str
    engine: str
    detail_href: str
    fallback_image_src: str = PLACEHOLDER_IMAGE


@dataclass(frozen=True, slots=True)
class CatalogNotice:
    message: str
    tone: str = "muted"  # "muted" for empty results, "danger" for load failures


@dataclass(frozen=True, slots=True)
class CatalogView:
    """Rendered catalog: either cards or a single notice, never both."""

    cards: list[VehicleCard] = field(default_factory=list)
    notice: CatalogNotice | None = None


class PresentVehicles:
    """
    Presenter: maps ordered records to display-safe cards.

    - Empty input renders the "No vehicles found." notice
    - Records are read, never modified
    """

    def execute(self, vehicles: list[VehicleRecord]) -> CatalogView:
        if not vehicles:
            return CatalogView(notice=CatalogNotice(message=NO_RESULTS_MESSAGE))

        return CatalogView(cards=[self.to_card(vehicle) for vehicle in vehicles])

    def load_failed(self) -> CatalogView:
        return CatalogView(notice=CatalogNotice(message=LOAD_FAILED_MESSAGE, tone="danger"))

    @staticmethod
    def to_card(vehicle: VehicleRecord) -> VehicleCard:
        engine = escape_text(engine_label(vehicle.engine_size))
        make = escape_text(vehicle.make)
        model = escape_text(vehicle.model)

        return VehicleCard(
            id=escape_text(vehicle.id),
            image_src=escape_text(primary_image(vehicle)),
            image_alt=f"{make} {model}",
            price=escape_text(format_price(vehicle.price)),
            heading=f"{make} {model}",
            summary=" — ".join(
                [
                    escape_text(vehicle.year),
                    engine,
                    escape_text(vehicle.transmission),
                    escape_text(vehicle.color),
                ]
            ),
            model_code=escape_text(vehicle.model_code),
            engine=engine,
            detail_href=escape_text(detail_href(vehicle.id)),
        )
