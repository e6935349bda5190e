#!/usr/bin/env python3
"""
Generate a vehicles.json catalog with deterministic random data.

Features:
- Deterministic: fixed seed → same catalog every run
- Idempotent: overwrites the output file
- Mixed field shapes, like real upstream feeds: engine sizes as cc (1800),
  liters (1.8) or text ("2.0L Turbo"); years as numbers or strings;
  some listings without images or dateAdded

Usage:
    python scripts/generate_vehicles.py [output_path]
"""

from __future__ import annotations

import json
import random
import sys
from datetime import date, timedelta
from pathlib import Path


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_VEHICLES = 50
DEFAULT_OUTPUT = Path("vehicles.json")
CURRENT_YEAR = 2024


# ==============================================================================
# Catalog Data
# ==============================================================================

# Base price bands (USD) by make category
MAKES = {
    "economy": {
        "makes": ["Nissan", "Kia", "Hyundai"],
        "base_price_min": 9000,
        "base_price_max": 16000,
    },
    "mid_range": {
        "makes": ["Toyota", "Honda", "Mazda"],
        "base_price_min": 14000,
        "base_price_max": 26000,
    },
    "premium": {
        "makes": ["BMW", "Audi", "Volvo"],
        "base_price_min": 25000,
        "base_price_max": 48000,
    },
}

# model → (model code, engine displacement in cc)
MODELS_BY_MAKE = {
    "Nissan": {"Sentra": ("B17", 1800), "X-Trail": ("T32", 2500)},
    "Kia": {"Rio": ("YB", 1400), "Sportage": ("QL", 2000)},
    "Hyundai": {"Elantra": ("AD", 2000), "Tucson": ("TL", 1600)},
    "Toyota": {"Corolla": ("ZRE172", 1800), "Camry": ("ASV50", 2500)},
    "Honda": {"Civic": ("FC1", 1500), "CR-V": ("RW1", 1500)},
    "Mazda": {"Mazda3": ("BM", 2000), "CX-5": ("KF", 2500)},
    "BMW": {"320i": ("G20", 2000), "X3": ("G01", 3000)},
    "Audi": {"A3": ("8V", 1400), "Q5": ("FY", 2000)},
    "Volvo": {"XC40": ("536", 2000), "S60": ("Z", 2000)},
}

TRANSMISSIONS = ["Manual", "Automatic", "CVT"]
COLORS = ["White", "Black", "Silver", "Grey", "Blue", "Red"]


# ==============================================================================
# Field Generation
# ==============================================================================


def calculate_price(category: dict, year: int) -> int:
    """
    Price from make category and age.

    - ~10% depreciation per year, capped at 70%
    - +/- 10% variance
    - Rounded to the nearest 100
    """
    base_price = random.randint(category["base_price_min"], category["base_price_max"])
    years_old = max(0, CURRENT_YEAR - year)
    depreciation = min(0.10 * years_old, 0.70)
    price = base_price * (1 - depreciation) * random.uniform(0.90, 1.10)

    return max(int(round(price / 100)) * 100, 2000)


def engine_size_value(displacement_cc: int) -> int | float | str:
    """Represent the engine the way different upstream feeds do."""
    shape = random.choices(["cc", "liters", "text"], weights=[4, 4, 2], k=1)[0]
    liters = round(displacement_cc / 1000, 1)

    if shape == "cc":
        return displacement_cc
    if shape == "liters":
        return liters
    return random.choice([f"{liters}L", f"{displacement_cc}cc", f"{liters}L Turbo"])


def generate_vehicle(index: int) -> dict:
    category = random.choice(list(MAKES.values()))
    make = random.choice(category["makes"])
    model, (model_code, displacement) = random.choice(list(MODELS_BY_MAKE[make].items()))

    year = random.choices(
        range(2015, 2025),
        weights=[1, 1, 2, 2, 3, 3, 4, 5, 6, 7],  # Favor newer years
        k=1,
    )[0]

    vehicle: dict = {
        "id": f"veh-{index:03d}",
        "make": make,
        "model": model,
        "year": year if random.random() < 0.8 else str(year),
        "engineSize": engine_size_value(displacement),
        "transmission": random.choice(TRANSMISSIONS),
        "color": random.choice(COLORS),
        "price": calculate_price(category, year),
        "modelCode": model_code,
        "images": [],
    }

    if random.random() < 0.85:
        added = date(CURRENT_YEAR, 1, 1) + timedelta(days=random.randint(0, 364))
        vehicle["dateAdded"] = added.isoformat()

    if random.random() < 0.7:
        slug = f"{make}-{model}".lower().replace(" ", "-")
        vehicle["images"] = [f"images/{slug}-{index:03d}.jpg"]

    return vehicle


def generate_vehicles(
    output: Path = DEFAULT_OUTPUT,
    num_vehicles: int = NUM_VEHICLES,
    seed: int = RANDOM_SEED,
) -> None:
    """
    Write a random catalog to output.

    Args:
        output: Destination JSON file
        num_vehicles: Number of vehicles to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"🚗 Generating {num_vehicles} vehicles (seed={seed})...")
    vehicles = [generate_vehicle(i) for i in range(1, num_vehicles + 1)]

    output.write_text(json.dumps(vehicles, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    print(f"✅ Wrote {len(vehicles)} vehicles to {output}")

    print("\n📊 Sample vehicles:")
    for i, vehicle in enumerate(vehicles[:5], 1):
        print(
            f"   {i}. {vehicle['year']} {vehicle['make']} {vehicle['model']} - "
            f"${vehicle['price']:,} ({vehicle['engineSize']}, {vehicle['transmission']})"
        )

    if len(vehicles) > 5:
        print(f"   ... and {len(vehicles) - 5} more")


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_OUTPUT
    try:
        generate_vehicles(output=target)
    except OSError as e:
        print(f"❌ Error writing catalog: {e}", file=sys.stderr)
        sys.exit(1)
