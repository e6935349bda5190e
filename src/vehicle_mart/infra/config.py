from __future__ import annotations

import os

DEFAULT_DATA_PATH = "vehicles.json"
DEFAULT_TIMEOUT_SECONDS = 10.0


def vehicle_data_url() -> str | None:
    """Remote vehicle JSON document. Takes precedence over the local path."""
    url = os.getenv("VEHICLE_DATA_URL")

    return url or None


def vehicle_data_path() -> str:
    return os.getenv("VEHICLE_DATA_PATH") or DEFAULT_DATA_PATH


def vehicle_data_timeout() -> float:
    raw = os.getenv("VEHICLE_DATA_TIMEOUT")

    if not raw:
        return DEFAULT_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"VEHICLE_DATA_TIMEOUT must be a number of seconds, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("VEHICLE_DATA_TIMEOUT must be > 0")

    return timeout
