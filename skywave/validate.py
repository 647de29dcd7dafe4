"""Checks that a PathData holds usable input."""

from __future__ import annotations

import math

from .models import PI, Modulation, PathData

# Man-made noise environment flags
_NOISE_FLAGS = frozenset({0.0, 1.0, 2.0, 3.0, 4.0, 5.0})


class PathValidationError(ValueError):
    """Raised when a path input parameter is out of range or missing."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


def _require(ok: bool, field: str, message: str) -> None:
    if not ok:
        raise PathValidationError(field, message)


def _in_range(value: float, low: float, high: float) -> bool:
    return low <= value <= high


def validate_path(path: PathData) -> PathData:
    """Check the path input; return it unchanged or raise PathValidationError."""
    _require(_in_range(path.year, 1900, 2100), "year", "must be 1900 to 2100")
    _require(_in_range(path.month, 0, 11), "month", "must be 0 to 11")
    _require(_in_range(path.hour, 0, 23), "hour", "must be 0 to 23")

    noise = path.man_made_noise
    if noise > 0.0:
        bad = (
            noise not in _NOISE_FLAGS
            and 6.0 < noise < 100.0
            and noise > 200.0
        )
        _require(not bad, "man_made_noise", "invalid man-made noise")

    _require(path.fof2 is not None, "fof2", "no foF2 data")
    _require(path.m3kf2 is not None, "m3kf2", "no M(3000)F2 data")
    _require(path.dud is not None, "dud", "no noise decile data")
    _require(path.fam is not None, "fam", "no atmospheric noise data")
    _require(path.fof2var is not None, "fof2var", "no foF2 variability data")
    _require(_in_range(path.ssn, 1, 311), "ssn", "must be 1 to 311")
    _require(
        path.modulation in (Modulation.DIGITAL, Modulation.ANALOG),
        "modulation",
        "must be analog or digital",
    )
    _require(_in_range(path.frequency, 1.0, 30.0), "frequency", "must be 1 to 30 MHz")
    _require(_in_range(path.bw, 0.005, 3e6), "bw", "bandwidth out of range")
    _require(_in_range(path.txpower, -30.0, 60.0), "txpower", "must be -30 to 60 dB(1 kW)")
    _require(_in_range(path.snrr, -30.0, 200.0), "snrr", "must be -30 to 200 dB")
    _require(_in_range(path.sirr, -30.0, 200.0), "sirr", "must be -30 to 200 dB")
    _require(_in_range(path.f0, 0.0, 1000.0), "f0", "must be 0 to 1000")
    _require(_in_range(path.t0, 0.0, 1000.0), "t0", "must be 0 to 1000")
    _require(_in_range(path.a, 0.0, 1000.0), "a", "must be 0 to 1000")
    _require(_in_range(path.tw, 0.0, 50.0), "tw", "must be 0 to 50")
    _require(_in_range(path.fw, 0.0, 1000.0), "fw", "must be 0 to 1000")
    _require(
        math.fabs(path.l_tx.lat) <= PI / 2.0 and math.fabs(path.l_tx.lng) <= PI,
        "l_tx",
        "transmitter location out of range",
    )
    _require(
        math.fabs(path.l_rx.lat) <= PI / 2.0 and math.fabs(path.l_rx.lng) <= PI,
        "l_rx",
        "receiver location out of range",
    )
    _require(path.a_rx.pattern is not None, "a_rx", "no receiver antenna pattern")
    _require(path.a_tx.pattern is not None, "a_tx", "no transmitter antenna pattern")
    _require(_in_range(path.snrxxp, 1, 99), "snrxxp", "must be 1 to 99")
    return path