import copy

from skywave.models import (
    MAX_E_MODES,
    MAX_F2_MODES,
    NO_LOWEST_MODE,
    Antenna,
    ControlPoint,
    ControlPointIndex,
    PathData,
)


def test_control_points_are_independent():
    path = PathData()
    path.cp[ControlPointIndex.MP].fof2 = 5.0
    others = [cp.fof2 for i, cp in enumerate(path.cp) if i != ControlPointIndex.MP]
    assert others == [0.0] * (len(path.cp) - 1)
    assert path.cp[ControlPointIndex.MP].fof2 == 5.0


def test_path_instances_do_not_share_state():
    first = PathData()
    second = PathData()
    first.md_f2[0].bmuf = 12.0
    first.k[0] = 3.0
    assert second.md_f2[0].bmuf == 0.0
    assert second.k[0] == 0.0


def test_mode_lists_sized_by_limits():
    path = PathData()
    assert len(path.md_f2) == MAX_F2_MODES
    assert len(path.md_e) == MAX_E_MODES
    assert len(path.cp) == len(ControlPointIndex)


def test_lowest_modes_start_unset():
    path = PathData()
    assert path.n0_e == NO_LOWEST_MODE
    assert path.n0_f2 == NO_LOWEST_MODE


def test_control_point_copy_is_deep():
    cp = ControlPoint()
    clone = copy.deepcopy(cp)
    clone.fh[1] = 1.5
    clone.location.lat = 0.3
    assert cp.fh == [0.0, 0.0]
    assert cp.location.lat == 0.0


def test_antenna_starts_without_pattern():
    antenna = Antenna()
    assert antenna.pattern is None
    assert antenna.freqs == []