"""Library-wide defaults, overridable through environment variables."""

import os


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


# Border cells of the 3x3 grid thinner than this (short side / long side)
# are merged into their neighbours.
MIN_ASPECT_RATIO = _env_float("RECTANGULATE_MIN_ASPECT_RATIO", 0.2)
