import math

import pytest

from skywave.auroral import find_lh, season_for_lh
from skywave.models import D2R, EQUINOX, SUMMER, WINTER


@pytest.mark.parametrize("month", [11, 0, 1])
def test_northern_winter(month):
    assert season_for_lh(0.5, month) == WINTER
    assert season_for_lh(-0.5, month) == SUMMER


@pytest.mark.parametrize("month", [5, 6, 7])
def test_northern_summer(month):
    assert season_for_lh(0.5, month) == SUMMER
    assert season_for_lh(-0.5, month) == WINTER


@pytest.mark.parametrize("month", [2, 3, 4, 8, 9, 10])
def test_equinox_both_hemispheres(month):
    assert season_for_lh(0.5, month) == EQUINOX
    assert season_for_lh(-0.5, month) == EQUINOX


def test_equator_counts_as_north():
    assert season_for_lh(0.0, 6) == SUMMER


def test_invalid_month():
    with pytest.raises(ValueError):
        season_for_lh(0.1, 12)


def test_low_geomagnetic_latitude_has_no_loss():
    assert find_lh(30.0 * D2R, 0.5, 1000.0, 12, 0) == 0.0


def test_short_range_winter_pole():
    assert find_lh(80.0 * D2R, 0.5, 1000.0, 2, 0) == 2.0


def test_long_range_summer():
    assert find_lh(65.0 * D2R, 0.5, 3000.0, 5, 6) == 8.5


def test_short_range_boundary_at_2500():
    assert find_lh(45.0 * D2R, 0.5, 2500.0, 11, 3) == 1.0


def test_midnight_and_late_evening_share_block():
    assert find_lh(60.0 * D2R, 0.5, 1000.0, 23, 3) == find_lh(60.0 * D2R, 0.5, 1000.0, 0, 3)


def test_sign_of_geomagnetic_latitude_ignored():
    for hour in range(24):
        assert find_lh(-70.0 * D2R, 0.5, 3000.0, hour, 9) == find_lh(
            70.0 * D2R, 0.5, 3000.0, hour, 9
        )


def test_hemisphere_swaps_season():
    north_jan = find_lh(65.0 * D2R, 0.5, 1000.0, 5, 0)
    south_jul = find_lh(65.0 * D2R, -0.5, 1000.0, 5, 6)
    assert north_jan == south_jul


def test_loss_never_negative():
    for deg in range(0, 91, 5):
        for hour in range(24):
            value = find_lh(deg * D2R, 0.3, 1500.0, hour, 4)
            assert value >= 0.0 and not math.isnan(value)