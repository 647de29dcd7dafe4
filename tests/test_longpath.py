import pytest

from skywave.longpath import free_space_field_strength, long_path_field_strength


def test_free_space_at_unit_range():
    assert free_space_field_strength(1.0) == pytest.approx(139.6)


def test_free_space_falls_20_db_per_decade():
    near = free_space_field_strength(1500.0)
    far = free_space_field_strength(15000.0)
    assert near - far == pytest.approx(20.0)


@pytest.mark.parametrize("f", [4.0, 25.0])
def test_factor_vanishes_at_reference_frequencies(f):
    _, factor = long_path_field_strength(f, 4.0, 25.0, 1.0, 60.0, 0.0, 0.0, 0.0)
    assert factor == pytest.approx(0.0, abs=1e-12)


def test_field_strength_independent_of_e0_at_reference_frequency():
    low, _ = long_path_field_strength(25.0, 4.0, 25.0, 1.0, 40.0, 10.0, 3.0, 2.0)
    high, _ = long_path_field_strength(25.0, 4.0, 25.0, 1.0, 80.0, 10.0, 3.0, 2.0)
    assert low == pytest.approx(high)


def test_factor_positive_between_and_negative_above():
    _, inside = long_path_field_strength(12.0, 4.0, 25.0, 1.0, 60.0, 0.0, 0.0, 0.0)
    _, above = long_path_field_strength(50.0, 4.0, 25.0, 1.0, 60.0, 0.0, 0.0, 0.0)
    assert 0.0 < inside < 1.0
    assert above < 0.0


def test_power_and_gains_add_directly():
    base, factor = long_path_field_strength(12.0, 4.0, 25.0, 1.0, 60.0, 0.0, 0.0, 0.0)
    more, same_factor = long_path_field_strength(12.0, 4.0, 25.0, 1.0, 60.0, 10.0, 3.0, 2.0)
    assert more - base == pytest.approx(15.0)
    assert same_factor == pytest.approx(factor)


def test_field_strength_grows_with_e0_inside_band():
    weak, _ = long_path_field_strength(12.0, 4.0, 25.0, 1.0, 40.0, 0.0, 0.0, 0.0)
    strong, _ = long_path_field_strength(12.0, 4.0, 25.0, 1.0, 80.0, 0.0, 0.0, 0.0)
    assert strong > weak