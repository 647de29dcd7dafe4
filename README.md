# skywave

Building blocks for predicting HF sky-wave propagation between two points on
the Earth. The package works out maximum usable frequencies and their
within-the-month spread, ionospheric absorption and auroral losses, antenna
gains, magnetic dip and gyrofrequency, and median field strengths for short
and long paths. It also reads the monthly ionospheric map files and antenna
pattern files those calculations use.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install .[test]
pytest
```

## Overview

Angles are in radians, distances in kilometres and frequencies in MHz.
Month indices run from 0 (January) to 11.

| Module | Purpose |
| --- | --- |
| `skywave.models` | Data types and constants: `Location`, `Sun`, `ControlPoint`, `Mode`, `Antenna`, `Modulation`, `ControlPointIndex`, `PathData` |
| `skywave.antenna_files` | Antenna patterns: `read_type11`, `read_type13`, `read_type14`, `isotropic_pattern`, `set_antenna_pattern_value` |
| `skywave.validate` | `validate_path`, which raises `PathValidationError` (a `ValueError`) naming the bad field |
| `skywave.muf` | `muf_variability`, `muf_operational`, `find_fof2_var`, `bilinear_interpolation`, `Decile` |
| `skywave.geomag` | Magnetic dip and gyrofrequency: `magfit`, `apply_magfit` (100 or 300 km only) |
| `skywave.ionmaps` | foF2 and M(3000)F2 maps: `ion_map_filename`, `read_ion_parameters_txt`, `read_ion_parameters_bin` |
| `skywave.absorption` | Absorption terms: `diurnal_absorption_exponent`, `absorption_factor`, `layer_penetration_factor`, `absorption_term` |
| `skywave.auroral` | Auroral and other losses: `season_for_lh`, `find_lh` |
| `skywave.gain` | `antenna_gain`, `smallest_cp_fof2`, `longitudinal_gyrofrequency` |
| `skywave.shortpath` | Per-mode losses and the resultant field strength on paths up to 9000 km: `e_layer_above_muf_loss`, `f2_layer_above_muf_loss`, `absorption_loss`, `mode_field_strength`, `f2_reflection_height`, `resultant_field_strength` |
| `skywave.hops` | Hop geometry for long paths: `hop_count`, `slant_range`, `focusing_gain`, `winter_anomaly`, `antenna_gain_08` |
| `skywave.reference` | Long-path reference frequencies: `distance_reduction_factor`, `upper_reference_frequency`, `lower_reference_frequency` |
| `skywave.longpath` | `free_space_field_strength`, `long_path_field_strength` |

The ionospheric map readers return numpy arrays indexed
`[hour][longitude][latitude][ssn]` (24 × 241 × 121 × 2). Antenna patterns are
numpy arrays indexed `[frequency][azimuth][elevation]` (360 azimuths, 91
elevations, 1-degree steps).

## Examples

Gyrofrequency and magnetic dip at a point 300 km above the ground:

```python
import math
from skywave.geomag import magfit

lat = math.radians(41.98)
lng = math.radians(-87.90)
dip, fh = magfit(lat, lng, 300.0)
```

Antenna patterns and gain:

```python
from skywave.antenna_files import read_type13, isotropic_pattern
from skywave.gain import antenna_gain

with open("antenna.13") as stream:
    antenna = read_type13(stream, bearing=0.0)

flat = isotropic_pattern(0.0)
gain = antenna_gain(flat, frequency=10.0, bearing=0.5, delta=0.1)
```

Checking a path before running the calculations:

```python
from skywave.validate import validate_path, PathValidationError

try:
    validate_path(path)
except PathValidationError as err:
    print(f"invalid path ({err.field}): {err}")
```

Ionospheric maps are read from a data directory holding `ionosMM.txt` or
`ionosMM.bin` files:

```python
from skywave.ionmaps import read_ion_parameters_bin

fof2, m3kf2 = read_ion_parameters_bin("data/", month=3)  # reads data/ionos04.bin
```

Long-path field strength from its parts:

```python
from skywave.hops import hop_count, slant_range
from skywave.longpath import free_space_field_strength, long_path_field_strength

n = hop_count(12000.0, 4000.0)
ptick = slant_range(12000.0 / (n + 1), 0.06, n + 1)
e0 = free_space_field_strength(ptick)
el, factor = long_path_field_strength(
    f=12.0, fl=5.0, fm=20.0, fh=1.2, e0=e0, txpower=0.0, gtl=5.0, gap=3.0
)
```

## What the package does not do

- There is no command-line program and no single routine that runs a whole
  circuit prediction; the functions are building blocks that the caller puts
  together.
- It does not work out control-point positions, solar parameters, foF2,
  M(3000)F2 or foE at a control point; these must be filled into
  `ControlPoint` by the caller.
- It has no reader for the foF2 decile-factor file. `PathData.fof2var` must be
  supplied as a nested sequence or array indexed
  `[season][hour][latitude][ssn][decile]` (3 × 24 × 19 × 3 × 2) before
  `find_fof2_var`, `muf_variability` or `upper_reference_frequency` is used.
- It does not calculate radio noise; `validate_path` only checks that noise
  data (`dud`, `fam`) have been set on the path.