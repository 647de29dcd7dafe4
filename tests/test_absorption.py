import math

import pytest

from skywave.absorption import (
    absorption_factor,
    absorption_term,
    diurnal_absorption_exponent,
    layer_penetration_factor,
)
from skywave.models import D2R, HR100KM, ControlPoint, Location, Sun


def _cp(lat_deg=0.0, dip=0.3, sza_deg=30.0, foe=3.0):
    cp = ControlPoint(location=Location(lat=lat_deg * D2R, lng=0.0), foe=foe)
    cp.dip[HR100KM] = dip
    cp.sun = Sun(sza=sza_deg * D2R)
    return cp


def test_exponent_hemisphere_shift():
    north = _cp(lat_deg=40.0, dip=0.9)
    south = _cp(lat_deg=-40.0, dip=0.9)
    for month in range(12):
        assert diurnal_absorption_exponent(south, month) == pytest.approx(
            diurnal_absorption_exponent(north, (month + 6) % 12)
        )


def test_exponent_is_continuous_at_curve_change():
    dip = math.tan(30.0 * D2R)
    below = diurnal_absorption_exponent(_cp(dip=dip * (1 - 1e-9)), 0)
    above = diurnal_absorption_exponent(_cp(dip=dip * (1 + 1e-9)), 0)
    assert below == pytest.approx(above, abs=0.01)


def test_exponent_caps_modified_dip_at_70_degrees():
    a = diurnal_absorption_exponent(_cp(dip=5.0), 3)
    b = diurnal_absorption_exponent(_cp(dip=50.0), 3)
    assert a == pytest.approx(b)


def test_absorption_factor_table_values():
    assert absorption_factor(_cp(lat_deg=0.0), 0) == pytest.approx(323.9)
    assert absorption_factor(_cp(lat_deg=0.0), 11) == pytest.approx(323.9)
    assert absorption_factor(_cp(lat_deg=2.5), 0) == pytest.approx(297.5, rel=1e-6)


def test_absorption_factor_month_sharing():
    cp = _cp(lat_deg=33.0)
    assert absorption_factor(cp, 6) == absorption_factor(cp, 5)
    assert absorption_factor(cp, 7) == absorption_factor(cp, 4)
    assert absorption_factor(cp, 11) == absorption_factor(cp, 0)


def test_absorption_factor_symmetric_and_clamped():
    assert absorption_factor(_cp(lat_deg=-21.0), 2) == absorption_factor(_cp(lat_deg=21.0), 2)
    assert absorption_factor(_cp(lat_deg=80.0), 2) == absorption_factor(_cp(lat_deg=75.0), 2)


def test_penetration_factor_limits():
    assert layer_penetration_factor(-0.5) == 0.0
    assert layer_penetration_factor(20.0) == pytest.approx(1.0)
    assert layer_penetration_factor(10.0) == pytest.approx(1.0)


def test_penetration_factor_continuous_at_2_2():
    below = layer_penetration_factor(2.2)
    above = layer_penetration_factor(2.2 + 1e-9)
    assert below == pytest.approx(above, abs=1e-6)


@pytest.mark.parametrize("t", [0.0, 0.3, 0.9, 1.2, 1.65, 2.0, 5.0])
def test_penetration_factor_capped(t):
    assert 0.0 <= layer_penetration_factor(t) <= 0.53 / 0.34 + 1e-12


def test_absorption_term_at_noon_is_noon_factor():
    cp = _cp(lat_deg=45.0, dip=1.0, sza_deg=40.0, foe=2.0)
    expected = absorption_factor(cp, 4) * layer_penetration_factor(1.5)
    assert absorption_term(cp, 4, 3.0, cp.sun.sza) == pytest.approx(expected)


def test_absorption_term_high_frequency_ratio():
    cp = _cp(lat_deg=10.0, dip=0.2, sza_deg=20.0, foe=1.0)
    assert absorption_term(cp, 1, 50.0, cp.sun.sza) == pytest.approx(absorption_factor(cp, 1))


def test_absorption_term_decreases_with_zenith():
    noon = 20.0 * D2R
    low = absorption_term(_cp(sza_deg=30.0), 2, 5.0, noon)
    high = absorption_term(_cp(sza_deg=60.0), 2, 5.0, noon)
    assert high < low


def test_absorption_term_clamps_zenith():
    noon = 20.0 * D2R
    a = absorption_term(_cp(sza_deg=120.0), 2, 5.0, noon)
    b = absorption_term(_cp(sza_deg=102.0), 2, 5.0, noon)
    assert a == pytest.approx(b)


def test_absorption_term_zero_foe():
    cp = _cp(lat_deg=15.0, sza_deg=25.0, foe=0.0)
    assert absorption_term(cp, 0, 4.0, cp.sun.sza) == pytest.approx(absorption_factor(cp, 0))