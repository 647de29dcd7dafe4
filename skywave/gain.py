"""Antenna gain lookup and control-point helpers for the short-path calculation."""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence

from .models import AZIMUTHS, HR100KM, R2D, Antenna, ControlPoint
from .muf import bilinear_interpolation

_CONTROL_POINTS = 5


def _frequency_index(antenna: Antenna, frequency: float) -> int:
    if len(antenna.freqs) <= 1:
        return 0
    best, best_delta = 0, math.inf
    for index, freq in enumerate(antenna.freqs):
        delta = math.fabs(freq - frequency)
        if delta < best_delta:
            best, best_delta = index, delta
    return best


def antenna_gain(antenna: Antenna, frequency: float, bearing: float, delta: float) -> float:
    """Return the interpolated gain (dB) at an azimuth and elevation, both in radians.

    With patterns for several frequencies, the one nearest `frequency` is used.
    """
    if antenna.pattern is None:
        raise ValueError("antenna has no pattern")
    pattern = antenna.pattern[_frequency_index(antenna, frequency)]

    elevation = delta * R2D
    azimuth = bearing * R2D

    el_high = math.ceil(elevation)
    el_low = math.floor(elevation)
    az_right = math.ceil(azimuth) % AZIMUTHS
    az_left = math.floor(azimuth) % AZIMUTHS

    ll = pattern[az_left][el_low]
    lr = pattern[az_right][el_low]
    ul = pattern[az_left][el_high]
    ur = pattern[az_right][el_high]

    r = elevation - math.trunc(elevation)
    c = azimuth - math.trunc(azimuth)
    return float(bilinear_interpolation(ll, lr, ul, ur, r, c))


def smallest_cp_fof2(control_points: Sequence[ControlPoint]) -> int:
    """Return the index of the control point with the smallest foF2.

    The first five control points are ranked by descending foF2; the last
    ranked index other than 0 is returned.
    """
    points = list(control_points[:_CONTROL_POINTS])
    if len(points) < _CONTROL_POINTS:
        raise ValueError(f"need {_CONTROL_POINTS} control points, got {len(points)}")
    order = list(range(_CONTROL_POINTS))
    # Exchange pass over every pair of positions; leaves foF2 in descending order.
    for i, j in itertools.product(range(_CONTROL_POINTS), repeat=2):
        if points[order[i]].fof2 > points[order[j]].fof2:
            order[i], order[j] = order[j], order[i]
    return [index for index in order if index != 0][-1]


def longitudinal_gyrofrequency(control_points: Sequence[ControlPoint]) -> float:
    """Return the mean longitudinal gyrofrequency at 100 km over the control points."""
    if not control_points:
        raise ValueError("no control points given")
    values = [
        math.fabs(cp.fh[HR100KM] * math.sin(cp.dip[HR100KM])) for cp in control_points
    ]
    return sum(values) / len(values)