"""Upper and lower reference frequencies for the long-path field strength."""

from __future__ import annotations

import math
from collections.abc import Sequence

from .hops import winter_anomaly
from .models import D2R, HR300KM, PI, ControlPoint, ControlPointIndex, PathData
from .muf import Decile, find_fof2_var

_HOURS = 24

# Longest path on which the mode-by-mode MUFs are used (km)
_MAX_MODE_DISTANCE = 9000.0

# Ceiling on the daily minimum of the basic MUF (MHz)
_FBM_MIN_START = 100.0

# Values used to find K, interpolated on the mid-path azimuth
_W = (0.1, 0.2)
_X = (1.2, 0.2)
_Y = (0.6, 0.4)

# Hourly decay of the lower reference frequency after sunset
_DECAY = 0.7945

# Distance reduction factor polynomial, highest power first (hop length in km)
_FD_COEFFICIENTS = (
    -2.40074637494790e-24,
    25.8520201885984e-21,
    -92.4986988833091e-18,
    102.342990689362e-15,
    22.0776941764705e-12,
    87.4376851991085e-9,
    29.1996868566837e-6,
)


def _hourly(values: Sequence, name: str) -> list:
    items = list(values)
    if len(items) != _HOURS:
        raise ValueError(f"{name} must hold {_HOURS} hours, got {len(items)}")
    return items


def _check_hour(path: PathData) -> int:
    if not 0 <= path.hour < _HOURS:
        raise ValueError(f"path hour must be 0 to 23, not {path.hour}")
    return path.hour


def _div(a: float, b: float) -> float:
    """Divide with IEEE semantics for a zero divisor."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _sqrt(x: float) -> float:
    if math.isnan(x) or x < 0.0:
        return math.nan
    return math.sqrt(x)


def _cube_root(x: float) -> float:
    if math.isnan(x) or x < 0.0:
        return math.nan
    return x ** (1.0 / 3.0)


def _larger(a: float, b: float) -> float:
    return a if a > b else b


def distance_reduction_factor(dm: float) -> float:
    """Return the distance reduction factor fD for a hop length in km."""
    value = 0.0
    for coefficient in _FD_COEFFICIENTS:
        value = (value + coefficient) * dm if value else coefficient * dm
    return value


def _basic_muf(cp: ControlPoint, fd: float) -> float:
    f4000 = 1.1 * cp.fof2 * cp.m3kf2
    fzero = cp.fof2 + 0.5 * cp.fh[HR300KM]
    return fzero + (f4000 - fzero) * fd


def _noon_index(cp: ControlPoint) -> int:
    return (int(12.0 - cp.location.lng / (15.0 * D2R)) - 1) % _HOURS


def _azimuth_weights(azimuth: float) -> tuple[float, float, float]:
    a = azimuth
    if a > PI:
        a -= PI
    a = a - PI / 2.0 if a >= PI / 2.0 else PI / 2.0 - a
    ew = a / (PI / 2.0)
    iw = _W[0] * (1.0 - ew) + _W[1] * ew
    ix = _X[0] * (1.0 - ew) + _X[1] * ew
    iy = _Y[0] * (1.0 - ew) + _Y[1] * ew
    return iw, ix, iy


def upper_reference_frequency(
    path: PathData,
    tx_end: Sequence[ControlPoint],
    rx_end: Sequence[ControlPoint],
    azimuth: float,
    dm: float,
) -> float:
    """Find fM from 24 hours of data at the control points T + dM/2 and R - dM/2.

    tx_end and rx_end hold one control point per UTC hour, azimuth is the
    forward azimuth (radians) at the path mid-point and dm the hop length (km).
    Sets path.k and path.fm; on paths longer than 9000 km also sets the basic,
    decile and operational MUFs of the path. Returns fM.
    """
    hour = _check_hour(path)
    ends = (_hourly(tx_end, "tx_end"), _hourly(rx_end, "rx_end"))
    fd = distance_reduction_factor(dm)

    fbm = [[_basic_muf(cp, fd) for cp in end] for end in ends]
    noon = [_noon_index(end[1]) for end in ends]
    fbm_min = [min(min(values), _FBM_MIN_START) for values in fbm]

    iw, ix, iy = _azimuth_weights(azimuth)
    k = []
    for values, noon_hour, lowest in zip(fbm, noon, fbm_min):
        now, at_noon = values[hour], values[noon_hour]
        k.append(
            1.2
            + iw * _div(now, at_noon)
            + ix * (_cube_root(_div(at_noon, now)) - 1.0)
            + iy * _div(lowest, at_noon) ** 2
        )
    path.k = k
    path.fm = min(k[0] * fbm[0][hour], k[1] * fbm[1][hour])

    if path.distance > _MAX_MODE_DISTANCE:
        if fbm[0][hour] < fbm[1][hour]:
            smaller = ends[0][hour]
            path.bmuf = fbm[0][hour]
        else:
            smaller = ends[1][hour]
            path.bmuf = fbm[1][hour]

        lat = smaller.location.lat
        deltal = find_fof2_var(path, smaller.ltime, lat, Decile.LOWER)
        deltau = find_fof2_var(path, smaller.ltime, lat, Decile.UPPER)

        path.muf50 = path.bmuf
        path.muf10 = path.muf50 * deltau
        path.muf90 = path.muf50 * deltal
        path.opmuf = path.fm
        path.opmuf10 = path.opmuf * deltau
        path.opmuf90 = path.opmuf * deltal

    return path.fm


def lower_reference_frequency(
    path: PathData,
    penetration_points: Sequence[Sequence[ControlPoint]],
    ptick: float,
    fh: float,
    i90: float,
) -> float:
    """Find fL from 24 hours of solar zenith angles at the 90 km penetration points.

    penetration_points is indexed [hour][point]. ptick is the slant range (km),
    fh the mean gyrofrequency (MHz) and i90 the incidence angle at 90 km
    (radians). Sets and returns path.fl for the hour after path.hour.
    """
    hour = _check_hour(path)
    hours = _hourly(penetration_points, "penetration_points")

    sums = [
        sum(
            math.sqrt(math.cos(cp.sun.sza))
            for cp in points
            if 0.0 < cp.sun.sza < PI / 2.0
        )
        for points in hours
    ]

    aw = winter_anomaly(path.cp[ControlPointIndex.MP].location.lat, path.month)
    fln = math.sqrt(path.distance / 3000.0)
    scale = math.cos(i90) * math.log(9.5e6 / ptick)

    fl = [
        _larger(
            (5.3 * _sqrt(_div((1.0 + 0.009 * path.ssn) * total, scale)) - fh) * (aw + 1.0),
            fln,
        )
        for total in sums
    ]

    # First day-to-night transition through twice the night value.
    threshold = 2.0 * fln
    transition = None
    for now in range(_HOURS):
        prev = (now - 1) % _HOURS
        if fl[prev] >= threshold and fl[now] <= threshold:
            transition = now
            dt = _div(threshold - fl[now], fl[prev] - fl[now])
            fl[now] = _DECAY * fl[prev] * (dt * (1.0 - _DECAY) + _DECAY)
            break

    if transition is not None:
        for step in range(1, 4):
            now = (transition + step) % _HOURS
            prev = (now - 1) % _HOURS
            fl[now] = _larger(fl[prev] * _DECAY, fl[now])

    path.fl = fl[(hour + 1) % _HOURS]
    return path.fl