from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


# ==============================================================================
# Engine Size (tagged variant)
# ==============================================================================

# Numeric engine sizes at or above this magnitude are cubic centimeters,
# below it they are liters.
CC_SCALE_THRESHOLD = Decimal("100")


@dataclass(frozen=True, slots=True)
class NumericEngineSize:
    """Engine size given as a number (1800 → cc-scale, 1.8 → liter-scale)."""

    value: Decimal

    @property
    def is_cc_scale(self) -> bool:
        return self.value >= CC_SCALE_THRESHOLD


@dataclass(frozen=True, slots=True)
class TextualEngineSize:
    """Engine size given as free text that already carries its unit ("2.0L", "1600cc")."""

    label: str


EngineSize = NumericEngineSize | TextualEngineSize


# ==============================================================================
# Vehicle Record
# ==============================================================================


@dataclass(frozen=True, slots=True)
class VehicleRecord:
    """
    A vehicle listing as read from the data source.

    Numeric-like fields keep their upstream representation; the normalize
    module turns them into comparable values with a definite default.
    """

    id: str
    make: str | None = None
    model: str | None = None
    year: int | str | None = None
    engine_size: EngineSize | None = None
    transmission: str | None = None
    color: str | None = None
    price: Decimal | str | None = None
    date_added: str | None = None
    images: tuple[str, ...] = field(default_factory=tuple)
    model_code: str | None = None


# ==============================================================================
# Search Query
# ==============================================================================


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """
    Search criteria, all optional (AND semantics).

    Blank values are stored as None, meaning "no constraint".
    """

    make: str | None = None
    model: str | None = None
    year: str | None = None
    engine_size: str | None = None

    def __post_init__(self) -> None:
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "make", _clean(self.make))
        object.__setattr__(self, "model", _clean(self.model))
        object.__setattr__(self, "year", _clean(self.year))
        object.__setattr__(self, "engine_size", _clean(self.engine_size))

    @classmethod
    def from_form(cls, fields: Mapping[str, str | None]) -> SearchQuery:
        """Build a query from named search fields (make, model, year, enginesize)."""
        return cls(
            make=fields.get("make"),
            model=fields.get("model"),
            year=fields.get("year"),
            engine_size=fields.get("enginesize"),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.make or self.model or self.year or self.engine_size)


# ==============================================================================
# Sort Key
# ==============================================================================


class SortKey(str, Enum):
    PRICE = "price"
    DATE = "date"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str | None) -> SortKey | None:
        """Return the matching key, or None for empty and unrecognized values."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
