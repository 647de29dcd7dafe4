"""Within-the-month MUF variability and the operational MUF."""

from __future__ import annotations

import math
from enum import IntEnum

from .models import (
    D2R,
    MAX_E_MODES,
    MAX_F2_MODES,
    ControlPointIndex,
    Mode,
    PathData,
)

# Longest path handled by the mode-by-mode MUF calculation (km)
_MAX_MODE_DISTANCE = 9000.0

# Fixed E layer decile factors
_E_DELTAL = 0.95
_E_DELTAU = 1.05

# Ratio of median operational MUF to median basic MUF for an F2 mode,
# indexed [power][season][time of day], with time 0 = night and 1 = day.
_ROP = (
    ((1.20, 1.30), (1.15, 1.25), (1.10, 1.20)),
    ((1.15, 1.25), (1.20, 1.30), (1.25, 1.35)),
)
_NIGHT = 0
_DAY = 1

_LAT_ROWS = 19
_HOURS = 24


class Decile(IntEnum):
    """Index of the lower or upper decile in the foF2 variability table."""

    LOWER = 0
    UPPER = 1


def _div(a: float, b: float) -> float:
    """Divide with IEEE semantics for a zero divisor."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def bilinear_interpolation(ll: float, lr: float, ul: float, ur: float, r: float, c: float) -> float:
    """Interpolate between four neighbours given fractional row r and column c."""
    return (
        ll * (1.0 - r) * (1.0 - c)
        + ul * r * (1.0 - c)
        + lr * (1.0 - r) * c
        + ur * r * c
    )


def _ssn_index(ssn: float) -> int:
    if ssn < 50:
        return 0
    if ssn <= 100:
        return 1
    return 2


def find_fof2_var(path: PathData, hour: float, lat: float, decile: int) -> float:
    """Return the interpolated foF2 decile factor for the path's season and SSN."""
    row = math.fabs(lat / (5.0 * D2R))  # 5-degree latitude steps
    r = row - math.trunc(row)
    c = hour - math.trunc(hour)

    lat_low = math.floor(row)
    lat_high = math.ceil(row)
    if lat_low < 0:
        lat_low = _LAT_ROWS - 1
        r = 1.0 - r
    if lat_high > _LAT_ROWS - 1:
        lat_high = 0

    hour_low = math.floor(hour)
    hour_high = math.ceil(hour)
    if hour_low < 0:
        hour_low = _HOURS - 1
        c = 1.0 - c
    if hour_high > _HOURS - 1:
        hour_high = 0

    ssn = _ssn_index(path.ssn)
    table = path.fof2var[path.season]
    ll = table[hour_low][lat_low][ssn][decile]
    lr = table[hour_high][lat_low][ssn][decile]
    ul = table[hour_low][lat_high][ssn][decile]
    ur = table[hour_high][lat_high][ssn][decile]
    return float(bilinear_interpolation(ll, lr, ul, ur, r, c))


def _existing(modes: list[Mode]) -> list[Mode]:
    return [mode for mode in modes if mode.bmuf != 0.0]


def muf_variability(path: PathData) -> None:
    """Set the decile MUFs and the probability of support for each existing mode."""
    if path.distance > _MAX_MODE_DISTANCE:
        return

    path.muf50 = path.bmuf
    midpoint = path.cp[ControlPointIndex.MP]
    f = path.frequency

    for mode in _existing(path.md_f2[:MAX_F2_MODES]):
        mode.muf50 = mode.bmuf
        mode.deltal = find_fof2_var(path, midpoint.ltime, midpoint.location.lat, Decile.LOWER)
        mode.deltau = find_fof2_var(path, midpoint.ltime, midpoint.location.lat, Decile.UPPER)
        mode.muf10 = mode.deltau * mode.muf50
        mode.muf90 = mode.deltal * mode.muf50
        if f < mode.muf50:
            ratio = _div(1.0 - f / mode.muf50, 1.0 - mode.deltal)
            mode.fprob = min(1.3 - _div(0.8, 1.0 + ratio), 1.0)
        else:
            ratio = _div(f / mode.muf50 - 1.0, mode.deltau - 1.0)
            mode.fprob = max(_div(0.8, 1.0 + ratio) - 0.3, 0.0)

    for mode in _existing(path.md_e[:MAX_E_MODES]):
        mode.muf50 = mode.bmuf
        mode.deltal = _E_DELTAL
        mode.deltau = _E_DELTAU
        mode.muf10 = mode.deltau * mode.muf50
        mode.muf90 = mode.deltal * mode.muf50
        if f < mode.muf50:
            ratio = _div(1.0 - f / mode.muf50, 1.0 - mode.deltal)
            mode.fprob = min(1.3 - _div(0.8, ratio), 1.0)
        else:
            ratio = _div(f / mode.muf50 - 1.0, mode.deltau - 1.0)
            mode.fprob = max(_div(0.8, ratio) - 3.0, 0.0)

    e_modes = _existing(path.md_e[:MAX_E_MODES])
    f2_modes = _existing(path.md_f2[:MAX_F2_MODES])
    path.muf90 = max(
        max((m.muf90 for m in e_modes), default=0.0, key=float),
        max((m.muf90 for m in f2_modes), default=0.0, key=float),
        0.0,
    )
    path.muf10 = max(
        max((m.muf10 for m in e_modes), default=0.0, key=float),
        max((m.muf10 for m in f2_modes), default=0.0, key=float),
        0.0,
    )


def _is_day(path: PathData) -> bool:
    midpoint = path.cp[ControlPointIndex.MP]
    ltime, sunrise, sunset = midpoint.ltime, midpoint.sun.lsr, midpoint.sun.lss
    return (sunrise < ltime < sunset) and not (sunset < ltime < sunrise)


def muf_operational(path: PathData) -> None:
    """Set the operational MUFs for each existing mode and for the path."""
    if path.distance > _MAX_MODE_DISTANCE:
        return

    time = _DAY if _is_day(path) else _NIGHT
    power = 0  # the same table row is used whatever the EIRP
    rop = _ROP[power][path.season][time]

    f2_best = [0.0, 0.0, 0.0]
    for mode in _existing(path.md_f2[:MAX_F2_MODES]):
        mode.opmuf = mode.muf50 * rop
        mode.opmuf10 = mode.opmuf * mode.deltau
        mode.opmuf90 = mode.opmuf * mode.deltal
        f2_best = [max(a, b) for a, b in zip(f2_best, (mode.opmuf, mode.opmuf10, mode.opmuf90))]

    e_best = [0.0, 0.0, 0.0]
    for mode in _existing(path.md_e[:MAX_E_MODES]):
        mode.opmuf = mode.bmuf
        mode.opmuf10 = mode.opmuf * mode.deltau
        mode.opmuf90 = mode.opmuf * mode.deltal
        e_best = [max(a, b) for a, b in zip(e_best, (mode.opmuf, mode.opmuf10, mode.opmuf90))]

    path.opmuf = max(e_best[0], f2_best[0])
    path.opmuf10 = max(e_best[1], f2_best[1])
    path.opmuf90 = max(e_best[2], f2_best[2])