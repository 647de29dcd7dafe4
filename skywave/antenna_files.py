"""Readers for antenna pattern files and helpers to build patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable

import numpy as np

from .models import AZIMUTHS, ELEVATIONS, R2D, Antenna, PathData

_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


class _LineReader:
    def __init__(self, stream: Iterable[str]) -> None:
        self._lines = iter(stream)

    def line(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise ValueError("unexpected end of antenna file") from None

    def numbers(self, count: int) -> list[float]:
        text = self.line()
        values = [float(token) for token in _NUMBER.findall(text)]
        if len(values) < count:
            raise ValueError(f"expected {count} numbers in antenna file line: {text!r}")
        return values[:count]

    def leading_number(self) -> float:
        match = _NUMBER.match(self.line().lstrip())
        return float(match.group()) if match else 0.0


def _new_antenna(name: str, freqs: list[float]) -> Antenna:
    pattern = np.zeros((len(freqs), AZIMUTHS, ELEVATIONS))
    return Antenna(name=name, freqs=freqs, pattern=pattern)


def _read_gain_block(reader: _LineReader, prefix: int) -> tuple[list[float], np.ndarray]:
    """Read one 91-value elevation block, preceded by `prefix` leading numbers."""
    first = reader.numbers(prefix + 10)
    gains = first[prefix:]
    for _ in range(8):
        gains.extend(reader.numbers(10))
    gains.extend(reader.numbers(1))
    return first[:prefix], np.array(gains, dtype=float)


def _read_name(reader: _LineReader) -> str:
    return reader.line().rstrip("\r\n")


def read_type11(stream: Iterable[str]) -> Antenna:
    """Read a type 11 file: one elevation gain table applied at every azimuth."""
    reader = _LineReader(stream)
    name = _read_name(reader)
    reader.line()  # number of parameters
    max_gain = reader.leading_number()
    reader.line()  # antenna type
    reader.line()  # efficiency
    antenna = _new_antenna(name, [0.0])
    _, gains = _read_gain_block(reader, 0)
    antenna.pattern[0, :, :] = gains + max_gain
    return antenna


def read_type13(stream: Iterable[str], bearing: float) -> Antenna:
    """Read a type 13 file: a 360 x 91 gain table rotated to the bearing (radians)."""
    reader = _LineReader(stream)
    name = _read_name(reader)
    reader.line()  # number of parameters
    reader.line()  # max gain
    reader.line()  # antenna type
    reader.line()  # efficiency
    frequency = reader.leading_number()
    antenna = _new_antenna(name, [frequency])
    offset = int(bearing * R2D)
    for i in range(AZIMUTHS):
        _, gains = _read_gain_block(reader, 1)
        antenna.pattern[0, (offset + i) % AZIMUTHS, :] = gains
    return antenna


def read_type14(stream: Iterable[str]) -> Antenna:
    """Read a type 14 file: 30 frequency blocks of elevation gains."""
    reader = _LineReader(stream)
    name = _read_name(reader)
    reader.line()  # number of parameters
    max_gain = reader.leading_number()
    reader.line()  # antenna type
    reader.line()  # frequency
    antenna = _new_antenna(name, [0.0] * 30)
    for i in range(30):
        (frequency, _efficiency), gains = _read_gain_block(reader, 2)
        antenna.freqs[i] = frequency
        antenna.pattern[i, :, :] = gains + max_gain
    return antenna


def isotropic_pattern(gain: float) -> Antenna:
    """Return an antenna with the same gain in every direction."""
    antenna = _new_antenna("", [0.0])
    antenna.pattern.fill(gain)
    return antenna


def set_antenna_pattern_value(
    path: PathData, tx_or_rx: int, azimuth: int, elevation: int, value: float
) -> None:
    """Set one gain value; 0 selects the transmitter, anything else the receiver."""
    antenna = path.a_tx if tx_or_rx == 0 else path.a_rx
    if antenna.pattern is None:
        antenna.freqs = [0.0]
        antenna.pattern = np.zeros((1, AZIMUTHS, ELEVATIONS))
    antenna.pattern[0, azimuth, elevation] = value