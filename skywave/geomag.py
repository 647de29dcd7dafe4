"""Magnetic dip and gyrofrequency from a sixth-order field model."""

from __future__ import annotations

import math

from .models import HR100KM, HR300KM, R0, ControlPoint

_ORDER = 6

_G = (
    (0.000000, 0.304112, 0.024035, -0.031518, -0.041794, 0.016256, -0.019523),
    (0.000000, 0.021474, -0.051253, 0.062130, -0.045298, -0.034407, -0.004853),
    (0.000000, 0.000000, -0.013381, -0.024898, -0.021795, -0.019447, 0.003212),
    (0.000000, 0.000000, 0.000000, -0.006496, 0.007008, -0.000608, 0.021413),
    (0.000000, 0.000000, 0.000000, 0.000000, -0.002044, 0.002775, 0.001051),
    (0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000697, 0.000227),
    (0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.001115),
)

_H = (
    (0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000),
    (0.000000, -0.057989, 0.033124, 0.014870, -0.011825, -0.000796, -0.005758),
    (0.000000, 0.000000, -0.001579, -0.004075, 0.010006, -0.002000, -0.008735),
    (0.000000, 0.000000, 0.000000, 0.000210, 0.000430, 0.004597, -0.003406),
    (0.000000, 0.000000, 0.000000, 0.000000, 0.001385, 0.002421, -0.000118),
    (0.000000, 0.000000, 0.000000, 0.000000, 0.000000, -0.001218, -0.001116),
    (0.000000, 0.000000, 0.000000, 0.000000, 0.000000, 0.000000, -0.000325),
)

_CT = (
    (0.0, 0.0, 0.33333333, 0.266666666, 0.25714286, 0.25396825, 0.25252525),
    (0.0, 0.0, 0.0, 0.200000000, 0.22857142, 0.23809523, 0.24242424),
    (0.0, 0.0, 0.0, 0.0, 0.14285714, 0.19047619, 0.21212121),
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.11111111, 0.16161616),
    (0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.09090909),
    (0.0,) * 7,
    (0.0,) * 7,
)

_HEIGHT_SLOTS = {100.0: HR100KM, 300.0: HR300KM}


def magfit(lat: float, lng: float, height: float) -> tuple[float, float]:
    """Return (magnetic dip in radians, gyrofrequency in MHz) at a height in km."""
    size = _ORDER + 1
    p = [[0.0] * size for _ in range(size)]
    dp = [[0.0] * size for _ in range(size)]
    p[0][0] = 1.0

    sin_lat, cos_lat = math.sin(lat), math.cos(lat)
    ar = R0 / (R0 + height)
    fx = fy = fz = 0.0

    for n in range(1, _ORDER + 1):
        sum_z = sum_x = sum_y = 0.0
        for m in range(n + 1):
            if n == m:
                p[m][n] = cos_lat * p[m - 1][n - 1]
                dp[m][n] = cos_lat * dp[m - 1][n - 1] + sin_lat * p[m - 1][n - 1]
            elif n != 1:
                p[m][n] = sin_lat * p[m][n - 1] - _CT[m][n] * p[m][n - 2]
                dp[m][n] = (
                    sin_lat * dp[m][n - 1] - cos_lat * p[m][n - 1] - _CT[m][n] * dp[m][n - 2]
                )
            else:
                p[m][n] = sin_lat * p[m][n - 1]
                dp[m][n] = sin_lat * dp[m][n - 1] - cos_lat * p[m][n - 1]

            cos_m, sin_m = math.cos(m * lng), math.sin(m * lng)
            sum_z += p[m][n] * (_G[m][n] * cos_m + _H[m][n] * sin_m)
            sum_x += dp[m][n] * (_G[m][n] * cos_m + _H[m][n] * sin_m)
            sum_y += m * p[m][n] * (_G[m][n] * sin_m - _H[m][n] * cos_m)

        scale = ar ** (n + 2)
        fz += scale * (n + 1) * sum_z
        fx -= scale * sum_x
        fy += scale * sum_y

    horizontal = fx**2 + (fy / cos_lat) ** 2
    dip = math.atan(fz / math.sqrt(horizontal))
    fh = 2.8 * math.sqrt(horizontal + fz**2)
    return dip, fh


def apply_magfit(cp: ControlPoint, height: float) -> ControlPoint:
    """Store dip and gyrofrequency at 100 or 300 km in the control point."""
    try:
        slot = _HEIGHT_SLOTS[float(height)]
    except KeyError:
        raise ValueError(f"height must be 100 or 300 km, not {height}") from None
    dip, fh = magfit(cp.location.lat, cp.location.lng, height)
    cp.dip[slot] = dip
    cp.fh[slot] = fh
    return cp