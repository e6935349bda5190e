"""Field normalization.

Turns the loosely typed fields of a vehicle record into comparable values.
Every function here degrades permissively: a value that cannot be coerced
yields the documented default instead of raising.

Defaults:
    price → 0
    year  → 0
    date  → earliest representable instant
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from vehicle_mart.domain.vehicle import (
    EngineSize,
    NumericEngineSize,
    TextualEngineSize,
)

ZERO = Decimal("0")
EARLIEST_INSTANT = datetime.min.replace(tzinfo=timezone.utc)


def to_decimal(value: Any) -> Decimal | None:
    """Coerce a number or numeric string to a finite Decimal, or None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        # str() keeps the shortest repr, so 1.8 stays 1.8 and not 1.8000000000000000444
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        # Decimal() accepts "1_800"; digit separators are not numbers here
        if not text or "_" in text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not number.is_finite():
        return None
    return number


def format_number(value: Decimal) -> str:
    """Render a number without exponent or trailing zeros (1800, 1.8, 2)."""
    if value == value.to_integral_value():
        return format(value.to_integral_value(), "f")
    return format(value.normalize(), "f")


# ==============================================================================
# Engine Size
# ==============================================================================


def normalize_engine_size(raw: Any) -> EngineSize | None:
    """Resolve an upstream engine size into its tagged variant."""
    if raw is None:
        return None
    if isinstance(raw, (int, float, Decimal)) and not isinstance(raw, bool):
        number = to_decimal(raw)
        if number is None:
            return TextualEngineSize(label=str(raw))
        return NumericEngineSize(value=number)
    if isinstance(raw, bool):
        return TextualEngineSize(label=str(raw).lower())
    return TextualEngineSize(label=str(raw))


def engine_text(engine: EngineSize | None) -> str:
    """Unit-less textual form, used for substring matching."""
    if engine is None:
        return ""
    if isinstance(engine, NumericEngineSize):
        return format_number(engine.value)
    return engine.label


def engine_label(engine: EngineSize | None) -> str:
    """Display label: 1800 → "1800cc", 1.8 → "1.8L", text unchanged."""
    if engine is None:
        return ""
    if isinstance(engine, NumericEngineSize):
        unit = "cc" if engine.is_cc_scale else "L"
        return f"{format_number(engine.value)}{unit}"
    return engine.label


# ==============================================================================
# Year / Price / Date
# ==============================================================================


def normalize_year(raw: Any) -> int | str | None:
    """Keep integral years as int (2020.0 → 2020); anything else as text."""
    if raw is None:
        return None
    if isinstance(raw, bool):
        return str(raw).lower()
    if isinstance(raw, int):
        return raw
    if isinstance(raw, (float, Decimal)):
        number = to_decimal(raw)
        if number is not None and number == number.to_integral_value():
            return int(number)
        return format_number(number) if number is not None else str(raw)
    return str(raw)


def year_text(year: int | str | None) -> str:
    if year is None:
        return ""
    return str(year)


def year_value(year: int | str | None) -> Decimal:
    """Numeric year for ordering; non-numeric or missing → 0."""
    number = to_decimal(year)
    return ZERO if number is None else number


def price_value(price: Any) -> Decimal:
    """Numeric price for ordering and display; non-numeric or missing → 0."""
    number = to_decimal(price)
    return ZERO if number is None else number


def date_value(date_added: str | None) -> datetime:
    """Timestamp for ordering; missing or unparseable → EARLIEST_INSTANT."""
    if not date_added:
        return EARLIEST_INSTANT
    text = date_added.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return EARLIEST_INSTANT
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
