"""Losses and resultant field strength for paths up to 9000 km."""

from __future__ import annotations

import math

from .gain import smallest_cp_fof2
from .models import (
    MAX_E_MODES,
    MAX_F2_MODES,
    MAX_SSN,
    NO_LOWEST_MODE,
    TINYDB,
    ControlPointIndex,
    PathData,
)

# "Not otherwise included" loss (dB)
NOT_OTHERWISE_INCLUDED_LOSS = 9.14

# Longest path handled by the short-path method (km)
_MAX_SHORT_DISTANCE = 9000.0

# Longest hop for the lowest order E mode (km)
_MAX_E_HOP = 2000.0

# Upper limit on the F2 mirror reflection height (km)
_MAX_F2_HEIGHT = 500.0


def e_layer_above_muf_loss(frequency: float, bmuf: float) -> float:
    """Return the above-the-MUF loss (dB) for an E mode."""
    if frequency <= bmuf:
        return 0.0
    return min(46.0 * math.sqrt(frequency / bmuf - 1.0) + 5.0, 58.0)


def f2_layer_above_muf_loss(frequency: float, bmuf: float, distance: float) -> float:
    """Return the above-the-MUF loss (dB) for an F2 mode on a path of `distance` km."""
    if frequency <= bmuf:
        return 0.0
    if distance <= 3000:
        return min(36.0 * math.sqrt(frequency / bmuf - 1.0) + 5.0, 60.0)
    return min(70.0 * (frequency / bmuf - 1.0) + 8.0, 80.0)


def absorption_loss(
    hop_index: int, ssn: float, at: float, frequency: float, fl: float, aoi110: float
) -> float:
    """Return the absorption loss Li (dB) for the mode with `hop_index` + 1 hops.

    The sunspot number is limited to the largest value the method allows.
    """
    ssn = min(ssn, MAX_SSN)
    return ((hop_index + 1.0) * (1.0 + 0.0067 * ssn) * at) / (
        (frequency + fl) ** 2 * math.cos(aoi110)
    )


def mode_field_strength(
    frequency: float,
    ptick: float,
    li: float,
    lm: float,
    lg: float,
    lh: float,
    txpower: float,
    gain: float,
) -> tuple[float, float]:
    """Return (basic transmission loss Lb in dB, field strength Ew in dB(1 uV/m))."""
    lb = (
        32.45
        + 20.0 * math.log10(frequency)
        + 20.0 * math.log10(ptick)
        + li
        + lm
        + lg
        + lh
        + NOT_OTHERWISE_INCLUDED_LOSS
    )
    ew = 136.6 + txpower + gain + 20.0 * math.log10(frequency) - lb
    return lb, ew


def f2_reflection_height(path: PathData) -> float:
    """Return the F2 mirror reflection height (km) used by the short-path method."""
    if path.distance > path.dmax:
        m3kf2 = path.cp[smallest_cp_fof2(path.cp)].m3kf2
        if m3kf2 == 0.0:
            return _MAX_F2_HEIGHT
        return min(1490.0 / m3kf2 - 176.0, _MAX_F2_HEIGHT)
    return path.cp[ControlPointIndex.MP].hr


def _e_mode_considered(path: PathData, n: int) -> bool:
    if n == path.n0_e:
        return path.distance / (path.n0_e + 1.0) <= _MAX_E_HOP
    return path.md_e[n].bmuf != 0.0


def _f2_mode_considered(path: PathData, n: int) -> bool:
    mode = path.md_f2[n]
    if mode.fs >= path.frequency:
        return False
    if n == path.n0_f2:
        return path.distance / (path.n0_f2 + 1.0) <= path.dmax
    return mode.bmuf != 0.0


def resultant_field_strength(path: PathData) -> float:
    """Power-sum the field strengths of the modes considered and store it in path.es.

    Modes that take part are flagged with mc. With no modes the result stays at TINYDB.
    Paths longer than 9000 km are left untouched.
    """
    if path.distance > _MAX_SHORT_DISTANCE:
        return path.es

    path.es = TINYDB
    total = 0.0

    if path.n0_e != NO_LOWEST_MODE:
        for n in range(path.n0_e, MAX_E_MODES):
            if _e_mode_considered(path, n):
                total += 10.0 ** (path.md_e[n].ew / 10.0)
                path.md_e[n].mc = True

    if path.n0_f2 != NO_LOWEST_MODE:
        for n in range(path.n0_f2, MAX_F2_MODES):
            if _f2_mode_considered(path, n):
                total += 10.0 ** (path.md_f2[n].ew / 10.0)
                path.md_f2[n].mc = True

    if total != 0.0:
        path.es = 10.0 * math.log10(total)
    return path.es