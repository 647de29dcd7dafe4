import math

import numpy as np
import pytest

from skywave.antenna_files import isotropic_pattern
from skywave.gain import antenna_gain, longitudinal_gyrofrequency, smallest_cp_fof2
from skywave.models import HR100KM, R2D, Antenna, ControlPoint


def _linear_antenna():
    az = np.arange(360).reshape(360, 1)
    el = np.arange(91).reshape(1, 91)
    pattern = (az + 2.0 * el).astype(float)[np.newaxis, :, :]
    return Antenna(name="linear", freqs=[0.0], pattern=pattern)


def test_isotropic_gain_everywhere():
    ant = isotropic_pattern(5.0)
    for bearing, delta in [(0.0, 0.0), (1.0, 0.2), (4.5, 1.1)]:
        assert antenna_gain(ant, 10.0, bearing, delta) == pytest.approx(5.0)


def test_bilinear_interpolation_of_linear_pattern():
    ant = _linear_antenna()
    bearing, delta = 0.5, 0.1
    expected = bearing * R2D + 2.0 * delta * R2D
    assert antenna_gain(ant, 10.0, bearing, delta) == pytest.approx(expected)


def test_nearest_frequency_pattern_is_used():
    pattern = np.stack([np.full((360, 91), 1.0), np.full((360, 91), 2.0)])
    ant = Antenna(name="two", freqs=[5.0, 10.0], pattern=pattern)
    assert antenna_gain(ant, 9.0, 0.3, 0.1) == pytest.approx(2.0)
    assert antenna_gain(ant, 6.0, 0.3, 0.1) == pytest.approx(1.0)
    # A tie keeps the first frequency
    assert antenna_gain(ant, 7.5, 0.3, 0.1) == pytest.approx(1.0)


def test_missing_pattern_raises():
    with pytest.raises(ValueError):
        antenna_gain(Antenna(), 10.0, 0.0, 0.0)


def _points(values):
    return [ControlPoint(fof2=v) for v in values]


def test_smallest_fof2_index():
    assert smallest_cp_fof2(_points([5.0, 4.0, 3.0, 2.0, 6.0])) == 3


def test_index_zero_is_never_returned():
    assert smallest_cp_fof2(_points([1.0, 4.0, 3.0, 2.0, 6.0])) == 3


def test_too_few_control_points():
    with pytest.raises(ValueError):
        smallest_cp_fof2(_points([1.0, 2.0]))


def test_longitudinal_gyrofrequency_vertical_field():
    cp = ControlPoint()
    cp.fh[HR100KM] = 1.0
    cp.dip[HR100KM] = math.pi / 2.0
    assert longitudinal_gyrofrequency([cp]) == pytest.approx(1.0)


def test_longitudinal_gyrofrequency_is_mean_of_magnitudes():
    a = ControlPoint()
    a.fh[HR100KM] = 1.2
    a.dip[HR100KM] = -0.7
    b = ControlPoint()
    b.fh[HR100KM] = 0.9
    b.dip[HR100KM] = 0.4
    mean = longitudinal_gyrofrequency([a, b])
    assert mean == pytest.approx(
        (longitudinal_gyrofrequency([a]) + longitudinal_gyrofrequency([b])) / 2.0
    )
    assert mean > 0.0


def test_longitudinal_gyrofrequency_empty():
    with pytest.raises(ValueError):
        longitudinal_gyrofrequency([])