"""Readers for the monthly foF2 and M(3000)F2 ionospheric grid maps."""

from __future__ import annotations

import re
from pathlib import Path

import numpy as np

HOURS = 24
LONGITUDES = 241  # 1.5-degree steps from 180 degrees West
LATITUDES = 121  # 1.5-degree steps from 90 degrees South
SSN_LEVELS = 2  # 12-month smoothed sunspot numbers 0 and 100

# Numbers on each of the six text lines that hold one 24-hour block
_LINE_COUNTS = (5, 3, 5, 3, 5, 3)

# Record framing in the binary files
_HEADER_BYTES = 5
_GAP_BYTES = 10

_NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_BLOCKS = SSN_LEVELS * LONGITUDES * LATITUDES


def ion_map_filename(month: int, extension: str) -> str:
    """Return the map file name for a month index 0 to 11, e.g. 'ionos04.txt'."""
    if not 0 <= month <= 11:
        raise ValueError(f"month must be 0 to 11, not {month}")
    return f"ionos{month + 1:02d}.{extension.lstrip('.')}"


def _to_hour_major(blocks: np.ndarray) -> np.ndarray:
    """Reorder [ssn][lng][lat][hour] data to [hour][lng][lat][ssn]."""
    grid = blocks.reshape(SSN_LEVELS, LONGITUDES, LATITUDES, HOURS)
    return np.ascontiguousarray(grid.transpose(3, 1, 2, 0), dtype=np.float32)


def _read_text_blocks(handle) -> np.ndarray:
    blocks = np.empty((_BLOCKS, HOURS), dtype=np.float32)
    for index in range(_BLOCKS):
        values: list[float] = []
        for count in _LINE_COUNTS:
            text = handle.readline()
            if not text:
                raise ValueError("unexpected end of ionospheric map file")
            numbers = _NUMBER.findall(text)
            if len(numbers) < count:
                raise ValueError(f"expected {count} numbers in map line: {text!r}")
            values.extend(float(token) for token in numbers[:count])
        blocks[index] = values
    return blocks


def read_ion_parameters_txt(data_dir: str | Path, month: int) -> tuple[np.ndarray, np.ndarray]:
    """Read the text map for a month; return (foF2, M3kF2) indexed [hour][lng][lat][ssn]."""
    path = Path(data_dir) / ion_map_filename(month, "txt")
    with open(path, encoding="utf-8") as handle:
        fof2 = _to_hour_major(_read_text_blocks(handle))
        m3kf2 = _to_hour_major(_read_text_blocks(handle))
    return fof2, m3kf2


def read_ion_parameters_bin(data_dir: str | Path, month: int) -> tuple[np.ndarray, np.ndarray]:
    """Read the binary map for a month; return (foF2, M3kF2) indexed [hour][lng][lat][ssn]."""
    path = Path(data_dir) / ion_map_filename(month, "bin")
    data = path.read_bytes()
    count = _BLOCKS * HOURS
    record = count * 4
    needed = _HEADER_BYTES + record + _GAP_BYTES + record
    if len(data) < needed:
        raise ValueError(f"ionospheric map file is {len(data)} bytes, expected {needed}")
    fof2 = np.frombuffer(data, dtype="<f4", count=count, offset=_HEADER_BYTES)
    m3k_offset = _HEADER_BYTES + record + _GAP_BYTES
    m3kf2 = np.frombuffer(data, dtype="<f4", count=count, offset=m3k_offset)
    return _to_hour_major(fof2), _to_hour_major(m3kf2)