"""Field strength for paths longer than 7000 km."""

from __future__ import annotations

import math

# "Not otherwise included" loss for the long-path method (dB)
NOT_OTHERWISE_INCLUDED_LOSS = -0.17


def free_space_field_strength(ptick: float) -> float:
    """Return the free-space field strength E0 (dB(1 uV/m)) for a slant range in km."""
    return 139.6 - 20.0 * math.log10(ptick)


def long_path_field_strength(
    f: float,
    fl: float,
    fm: float,
    fh: float,
    e0: float,
    txpower: float,
    gtl: float,
    gap: float,
) -> tuple[float, float]:
    """Return (median field strength El in dB(1 uV/m), frequency factor F).

    f, fl, fm and fh are the operating, lower and upper reference and mean
    gyro frequencies (MHz); e0 the free-space field strength, txpower the
    transmitter power (dB(1 kW)), gtl the antenna gain and gap the focusing gain.
    """
    lower = (fl + fh) ** 2
    upper = (fm + fh) ** 2
    operating = (f + fh) ** 2
    etl = (lower / operating + operating / upper) * (upper / (upper + lower))
    factor = 1.0 - etl
    el = e0 * factor - 30.0 + txpower + gtl + gap - NOT_OTHERWISE_INCLUDED_LOSS
    return el, factor