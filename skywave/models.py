"""Data structures and constants shared by the propagation calculations."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

import numpy as np

PI = math.pi
R0 = 6371.009  # km, mean Earth radius
D2R = 0.0174532925  # PI/180
R2D = 57.2957795  # 180/PI
VOFL = 299792458.0  # velocity of light (m/s)

DBL_MIN_10_EXP = -307
TINYDB = float(DBL_MIN_10_EXP)  # smallest number in dB
TOOBIG = sys.float_info.max  # large number, typically an error

MAX_F2_MODES = 6
MAX_E_MODES = 3
MAX_SSN = 160.0
NO_LOWEST_MODE = -1

# Indices into ControlPoint.fh and ControlPoint.dip
HR100KM = 0
HR300KM = 1

# Season indices
WINTER = 0
EQUINOX = 1
SUMMER = 2

# Antenna pattern dimensions (1-degree steps)
AZIMUTHS = 360
ELEVATIONS = 91


class Modulation(IntEnum):
    """Kind of modulation carried on the circuit."""

    ANALOG = 0
    DIGITAL = 1


class ControlPointIndex(IntEnum):
    """Position of each control point within PathData.cp."""

    T1K = 0
    TD02 = 1
    MP = 2
    RD02 = 3
    R1K = 4


@dataclass
class Location:
    """Geographic position in radians."""

    lat: float = 0.0
    lng: float = 0.0


@dataclass
class Sun:
    """Solar parameters at a control point (angles in radians, times in hours)."""

    sza: float = 0.0
    sha: float = 0.0
    decl: float = 0.0
    eot: float = 0.0
    ha: float = 0.0
    lsn: float = 0.0
    lsr: float = 0.0
    lss: float = 0.0


@dataclass
class ControlPoint:
    """Ionospheric and geometric data at one point along the path."""

    location: Location = field(default_factory=Location)
    distance: float = 0.0
    foe: float = 0.0
    fof2: float = 0.0
    m3kf2: float = 0.0
    fh: list[float] = field(default_factory=lambda: [0.0, 0.0])
    dip: list[float] = field(default_factory=lambda: [0.0, 0.0])
    sun: Sun = field(default_factory=Sun)
    ltime: float = 0.0
    hr: float = 0.0
    x: float = 0.0


@dataclass
class Mode:
    """Parameters of one E or F2 propagation mode."""

    bmuf: float = 0.0
    muf50: float = 0.0
    muf90: float = 0.0
    muf10: float = 0.0
    opmuf: float = 0.0
    opmuf10: float = 0.0
    opmuf90: float = 0.0
    deltal: float = 0.0
    deltau: float = 0.0
    fprob: float = 0.0
    fs: float = 0.0
    hr: float = 0.0
    ele: float = 0.0
    lb: float = 0.0
    ew: float = 0.0
    mc: bool = False


@dataclass
class Antenna:
    """Antenna gain pattern indexed as pattern[frequency][azimuth][elevation] in dB."""

    name: str = ""
    freqs: list[float] = field(default_factory=list)
    pattern: np.ndarray | None = None


def _control_points() -> list[ControlPoint]:
    return [ControlPoint() for _ in ControlPointIndex]


@dataclass
class PathData:
    """Input parameters and results for one circuit."""

    name: str = ""
    txname: str = ""
    rxname: str = ""

    year: int = 2000
    month: int = 0
    hour: int = 0
    season: int = WINTER
    ssn: float = 0.0
    modulation: Modulation = Modulation.ANALOG
    frequency: float = 0.0
    bw: float = 0.0
    txpower: float = 0.0
    snrr: float = 0.0
    sirr: float = 0.0
    f0: float = 0.0
    t0: float = 0.0
    a: float = 0.0
    tw: float = 0.0
    fw: float = 0.0
    snrxxp: float = 0.0
    man_made_noise: float = 0.0
    sorl: int = 0

    l_tx: Location = field(default_factory=Location)
    l_rx: Location = field(default_factory=Location)
    a_tx: Antenna = field(default_factory=Antenna)
    a_rx: Antenna = field(default_factory=Antenna)

    fof2: Any = None
    m3kf2: Any = None
    fof2var: Any = None
    dud: Any = None
    fam: Any = None

    distance: float = 0.0
    dmax: float = 0.0
    cp: list[ControlPoint] = field(default_factory=_control_points)
    md_f2: list[Mode] = field(default_factory=lambda: [Mode() for _ in range(MAX_F2_MODES)])
    md_e: list[Mode] = field(default_factory=lambda: [Mode() for _ in range(MAX_E_MODES)])
    n0_e: int = NO_LOWEST_MODE
    n0_f2: int = NO_LOWEST_MODE

    bmuf: float = 0.0
    muf50: float = 0.0
    muf90: float = 0.0
    muf10: float = 0.0
    opmuf: float = 0.0
    opmuf10: float = 0.0
    opmuf90: float = 0.0

    ele: float = 0.0
    ptick: float = 0.0
    e0: float = 0.0
    gtl: float = 0.0
    gap: float = 0.0
    ly: float = 0.0
    lz: float = 0.0
    fh: float = 0.0
    fl: float = 0.0
    fm: float = 0.0
    f: float = 0.0
    k: list[float] = field(default_factory=lambda: [0.0, 0.0])
    el: float = 0.0
    es: float = TINYDB