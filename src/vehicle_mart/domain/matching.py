from __future__ import annotations

from decimal import Decimal

from vehicle_mart.domain.normalize import engine_text, to_decimal, year_text
from vehicle_mart.domain.vehicle import (
    EngineSize,
    NumericEngineSize,
    SearchQuery,
    VehicleRecord,
)

# Liter-scale sizes compare within this tolerance.
# cc-scale sizes compare exactly.
LITER_TOLERANCE = Decimal("0.01")


def matches_text(value: str | None, term: str | None) -> bool:
    """Case-insensitive substring match. No term means no constraint."""
    if not term:
        return True
    if not value:
        return False
    return term.lower() in value.lower()


def matches_year(year: int | str | None, term: str | None) -> bool:
    """Exact textual match of the record year against the query."""
    if not term:
        return True
    return year_text(year) == term


def matches_engine_size(engine: EngineSize | None, term: str | None) -> bool:
    """
    Engine size match.

    - Numeric record and numeric query: cc-scale requires equality,
      liter-scale requires abs difference < LITER_TOLERANCE.
    - Anything else: case-insensitive substring of the query in the
      record's textual engine representation.
    """
    if not term:
        return True
    if engine is None:
        return False

    query_number = to_decimal(term)
    if isinstance(engine, NumericEngineSize) and query_number is not None:
        if engine.is_cc_scale:
            return engine.value == query_number
        return abs(engine.value - query_number) < LITER_TOLERANCE

    return term.lower() in engine_text(engine).lower()


def matches(record: VehicleRecord, query: SearchQuery) -> bool:
    """A record passes only if every supplied constraint matches (AND semantics)."""
    return (
        matches_text(record.make, query.make)
        and matches_text(record.model, query.model)
        and matches_year(record.year, query.year)
        and matches_engine_size(record.engine_size, query.engine_size)
    )
