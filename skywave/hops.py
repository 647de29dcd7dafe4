"""Hop geometry and gain helpers for the long-path field strength."""

from __future__ import annotations

import math

from .gain import antenna_gain
from .models import D2R, R0, R2D, TINYDB, Antenna

# Winter-anomaly factor at 60 degrees latitude, by month (0 = January): (north, south)
_WINTER_ANOMALY = (
    (0.30, 0.00),
    (0.15, 0.00),
    (0.03, 0.00),
    (0.00, 0.03),
    (0.00, 0.15),
    (0.00, 0.30),
    (0.00, 0.30),
    (0.00, 0.15),
    (0.00, 0.03),
    (0.03, 0.00),
    (0.15, 0.00),
    (0.30, 0.00),
)

_MAX_FOCUS_GAIN = 15.0


def winter_anomaly(lat: float, month: int) -> float:
    """Return the winter-anomaly factor Aw at a latitude (radians) for month index 0 to 11."""
    if not 0 <= month <= 11:
        raise ValueError(f"month must be 0 to 11, not {month}")
    peak = _WINTER_ANOMALY[month][1 if lat < 0.0 else 0]
    lat = math.fabs(lat)
    if lat <= 30.0 * D2R or lat >= 90.0 * D2R:
        return 0.0
    if lat < 60.0 * D2R:
        return peak * (lat * R2D - 30.0) / 30.0
    return peak * (90.0 - lat * R2D) / 30.0


def hop_count(distance: float, max_hop: float) -> int:
    """Return n such that n + 1 equal hops of at most `max_hop` km span the distance."""
    if max_hop <= 0.0:
        raise ValueError("max_hop must be positive")
    n = 0
    while distance / (n + 1.0) > max_hop:
        n += 1
    return n


def slant_range(hop_distance: float, delta: float, hops: float) -> float:
    """Return the virtual slant range (km) of `hops` hops at elevation delta (radians)."""
    psi = hop_distance / (2.0 * R0)
    return math.fabs(2.0 * R0 * (math.sin(psi) / math.cos(delta + psi))) * hops


def focusing_gain(distance: float) -> float:
    """Return the long-distance focusing gain (dB), limited to 15 dB."""
    denominator = R0 * math.fabs(math.sin(distance / R0))
    if denominator == 0.0:
        return _MAX_FOCUS_GAIN
    return min(10.0 * math.log10(distance / denominator), _MAX_FOCUS_GAIN)


def antenna_gain_08(
    antenna: Antenna, frequency: float, bearing: float
) -> tuple[float, float | None]:
    """Return (largest gain, its elevation in radians) over 0 to 8 degrees elevation.

    The elevation is None when no gain exceeds the floor value TINYDB.
    """
    best = TINYDB
    elevation: float | None = None
    for degrees in range(9):
        delta = degrees * D2R
        gain = antenna_gain(antenna, frequency, bearing, delta)
        if gain > best:
            best = gain
            elevation = delta
    return best, elevation