"""Parsing of the raw vehicle payload (a top-level JSON array of vehicle objects)."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from vehicle_mart.domain.errors import CatalogLoadError
from vehicle_mart.domain.normalize import normalize_engine_size, normalize_year, to_decimal
from vehicle_mart.domain.vehicle import VehicleRecord


def _as_text(value: Any) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return json.dumps(value, default=str)


class VehicleRecordDTO(BaseModel):
    """
    One vehicle object as found in the payload.

    Polymorphic fields (year, engineSize, price, images) are accepted as-is
    and resolved by the normalize module. Text fields take any JSON value,
    and a numeric dateAdded is read as epoch milliseconds. Within a record,
    only a missing id rejects the payload.
    """

    id: str
    make: str | None = None
    model: str | None = None
    year: Any = None
    engine_size: Any = Field(default=None, alias="engineSize")
    transmission: str | None = None
    color: str | None = None
    price: Any = None
    date_added: str | None = Field(default=None, alias="dateAdded")
    images: Any = None
    model_code: str | None = Field(default=None, alias="modelCode")

    model_config = ConfigDict(
        populate_by_name=True,
        protected_namespaces=(),
        extra="ignore",
    )

    @field_validator("id", "make", "model", "transmission", "color", "model_code", mode="before")
    @classmethod
    def values_to_text(cls, value: Any) -> Any:
        # Display text: any JSON value renders (Mazda "3" sent as 3, stray booleans, objects)
        if value is None or isinstance(value, str):
            return value
        return _as_text(value)

    @field_validator("date_added", mode="before")
    @classmethod
    def epoch_millis_to_iso(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                instant = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                return str(value)
            return instant.isoformat()
        if value is None or isinstance(value, str):
            return value
        return _as_text(value)


_PAYLOAD_ADAPTER = TypeAdapter(list[VehicleRecordDTO])


def _images(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(str(image) for image in raw if image is not None)


def _price(raw: Any) -> Decimal | str | None:
    # Unusable values are kept as text and default to 0 downstream
    number = to_decimal(raw)
    if number is not None:
        return number
    if raw is None:
        return None
    return str(raw)


def to_vehicle_record(dto: VehicleRecordDTO) -> VehicleRecord:
    """Convert a payload DTO to a domain record, resolving the engine size variant."""
    return VehicleRecord(
        id=dto.id,
        make=dto.make,
        model=dto.model,
        year=normalize_year(dto.year),
        engine_size=normalize_engine_size(dto.engine_size),
        transmission=dto.transmission,
        color=dto.color,
        price=_price(dto.price),
        date_added=dto.date_added,
        images=_images(dto.images),
        model_code=dto.model_code,
    )


def parse_vehicle_payload(payload: str | bytes, source: str) -> list[VehicleRecord]:
    """
    Parse a JSON payload into vehicle records.

    Args:
        payload: Raw JSON document
        source: Where the payload came from (used in error context)

    Returns:
        Vehicle records in payload order

    Raises:
        CatalogLoadError: If the payload is not a JSON array of vehicle objects
    """
    try:
        dtos = _PAYLOAD_ADAPTER.validate_json(payload)
    except PydanticValidationError as exc:
        raise CatalogLoadError(
            "Vehicle data must be a JSON array of vehicle objects",
            source=source,
            error_count=exc.error_count(),
        ) from exc

    return [to_vehicle_record(dto) for dto in dtos]
