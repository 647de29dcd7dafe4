"""Auroral and other signal losses, Lh, for the short-path field strength."""

from __future__ import annotations

import math

from .models import D2R, EQUINOX, SUMMER, WINTER

# Lh[transmission range][season][geomagnetic latitude row][mid-path local time column]
# Range 0 is for hops up to 2500 km, range 1 for longer hops.
# Rows run from 77.5 degrees geomagnetic latitude and above down to 42.5-47.5 degrees.
# Columns are 3-hour blocks of mid-path local time starting at 01:00.
_LH = (
    (
        (  # winter
            (2.0, 6.6, 6.2, 1.5, 0.5, 1.4, 1.5, 1.0),
            (3.4, 8.3, 8.6, 0.9, 0.5, 2.5, 3.0, 3.0),
            (6.2, 15.6, 12.8, 2.3, 1.5, 4.6, 7.0, 5.0),
            (7.0, 16.0, 14.0, 3.6, 2.0, 6.8, 9.8, 6.6),
            (2.0, 4.5, 6.6, 1.4, 0.8, 2.7, 3.0, 2.0),
            (1.3, 1.0, 3.2, 0.3, 0.4, 1.8, 2.3, 0.9),
            (0.9, 0.6, 2.2, 0.2, 0.2, 1.2, 1.5, 0.6),
            (0.4, 0.3, 1.1, 0.1, 0.1, 0.6, 0.7, 0.3),
        ),
        (  # equinox
            (1.4, 2.5, 7.4, 3.8, 1.0, 2.4, 2.4, 3.3),
            (3.3, 11.0, 11.6, 5.1, 2.6, 4.0, 6.0, 7.0),
            (6.5, 12.0, 21.4, 8.5, 4.8, 6.0, 10.0, 13.7),
            (6.7, 11.2, 17.0, 9.0, 7.2, 9.0, 10.9, 15.0),
            (2.4, 4.4, 7.5, 5.0, 2.6, 4.8, 5.5, 6.1),
            (1.7, 2.0, 5.0, 3.0, 2.2, 4.0, 3.0, 4.0),
            (1.1, 1.3, 3.3, 2.0, 1.4, 2.6, 2.0, 2.6),
            (0.5, 0.6, 1.6, 1.0, 0.7, 1.3, 1.0, 1.3),
        ),
        (  # summer
            (2.2, 2.7, 1.2, 2.3, 2.2, 3.8, 4.2, 3.8),
            (2.4, 3.0, 2.8, 3.0, 2.7, 4.2, 4.8, 4.5),
            (4.9, 4.2, 6.2, 4.5, 3.8, 5.4, 7.7, 7.2),
            (6.5, 4.8, 9.0, 6.0, 4.8, 9.1, 9.5, 8.9),
            (3.2, 2.7, 4.0, 3.0, 3.0, 6.5, 6.7, 5.0),
            (2.5, 1.8, 2.4, 2.3, 2.6, 5.0, 4.6, 4.0),
            (1.6, 1.2, 1.6, 1.5, 1.7, 3.3, 3.1, 2.6),
            (0.8, 0.6, 0.8, 0.7, 0.8, 1.6, 1.5, 1.3),
        ),
    ),
    (
        (  # winter
            (1.5, 2.7, 2.5, 0.8, 0.0, 0.9, 0.8, 1.6),
            (2.5, 4.5, 4.3, 0.8, 0.3, 1.6, 2.0, 4.8),
            (5.5, 5.0, 7.0, 1.9, 0.5, 3.0, 4.5, 9.6),
            (5.3, 7.0, 5.9, 2.0, 0.7, 4.0, 4.5, 10.0),
            (1.6, 2.4, 2.7, 0.6, 0.4, 1.7, 1.8, 3.5),
            (0.9, 1.0, 1.3, 0.1, 0.1, 1.0, 1.5, 1.4),
            (0.6, 0.6, 0.8, 0.1, 0.1, 0.6, 1.0, 0.5),
            (0.3, 0.3, 0.4, 0.0, 0.0, 0.3, 0.5, 0.4),
        ),
        (  # equinox
            (1.0, 1.2, 2.7, 3.0, 0.6, 2.0, 2.3, 1.6),
            (1.8, 2.9, 4.1, 5.7, 1.5, 3.2, 5.6, 3.6),
            (3.7, 5.6, 7.7, 8.1, 3.5, 5.0, 9.5, 7.3),
            (3.9, 5.2, 7.6, 9.0, 5.0, 7.5, 10.0, 7.9),
            (1.4, 2.0, 3.2, 3.8, 1.8, 4.0, 5.4, 3.4),
            (0.9, 0.9, 1.8, 2.0, 1.3, 3.1, 2.7, 2.0),
            (0.6, 0.6, 1.2, 1.3, 0.8, 2.0, 1.8, 1.3),
            (0.3, 0.3, 0.6, 0.6, 0.4, 1.0, 0.9, 0.6),
        ),
        (  # summer
            (1.9, 3.8, 2.2, 1.1, 2.1, 1.2, 2.3, 2.4),
            (1.9, 4.6, 2.9, 1.3, 2.2, 1.3, 2.8, 2.7),
            (4.4, 6.3, 5.9, 1.9, 3.3, 1.7, 4.4, 4.5),
            (5.5, 8.5, 7.6, 2.6, 4.2, 3.2, 5.5, 5.7),
            (2.8, 3.8, 3.7, 1.4, 2.7, 1.6, 4.5, 3.2),
            (2.2, 2.4, 2.2, 1.0, 2.2, 1.2, 4.4, 2.5),
            (1.4, 1.6, 1.4, 0.6, 1.4, 0.8, 2.9, 1.6),
            (0.7, 0.8, 0.7, 0.3, 0.7, 0.4, 1.4, 0.8),
        ),
    ),
)

# Lower edge (degrees) of each geomagnetic latitude row of the table
_ROW_EDGES = (77.5, 72.5, 67.5, 62.5, 57.5, 52.5, 47.5, 42.5)

# Season for each month (0 = January) in the northern hemisphere
_NORTH_SEASONS = (
    WINTER, WINTER, EQUINOX, EQUINOX, EQUINOX, SUMMER,
    SUMMER, SUMMER, EQUINOX, EQUINOX, EQUINOX, WINTER,
)
_SOUTHERN = {WINTER: SUMMER, SUMMER: WINTER, EQUINOX: EQUINOX}

_SHORT_RANGE_KM = 2500.0


def season_for_lh(lat: float, month: int) -> int:
    """Return the Lh table season for a latitude (radians) and month index 0 to 11."""
    if not 0 <= month <= 11:
        raise ValueError(f"month must be 0 to 11, not {month}")
    season = _NORTH_SEASONS[month]
    return season if lat >= 0 else _SOUTHERN[season]


def _time_column(hour: int) -> int:
    if 1 <= hour < 22:
        return (hour - 1) // 3
    return 7


def find_lh(geomagnetic_lat: float, lat: float, dh: float, hour: int, month: int) -> float:
    """Return Lh (dB), the auroral and other signal loss.

    geomagnetic_lat and lat are in radians, dh is the hop length in km and
    hour is the mid-path local hour.
    """
    season = season_for_lh(lat, month)
    table = _LH[0 if dh <= _SHORT_RANGE_KM else 1][season]
    column = _time_column(hour)
    glat = math.fabs(geomagnetic_lat)
    for row, edge in enumerate(_ROW_EDGES):
        if glat >= edge * D2R:
            return table[row][column]
    return 0.0