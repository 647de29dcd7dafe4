import numpy as np
import pytest

from skywave.ionmaps import (
    HOURS,
    LATITUDES,
    LONGITUDES,
    SSN_LEVELS,
    ion_map_filename,
    read_ion_parameters_bin,
    read_ion_parameters_txt,
)

SHAPE = (HOURS, LONGITUDES, LATITUDES, SSN_LEVELS)


def _value(m, j, k, h):
    return h + 24 * (k % 7) + 200 * (j % 5) + 1000 * m


def _write_text_records(out, offset):
    splits = ((0, 5), (5, 8), (8, 13), (13, 16), (16, 21), (21, 24))
    for m in range(SSN_LEVELS):
        for j in range(LONGITUDES):
            for k in range(LATITUDES):
                base = _value(m, j, k, 0) + offset
                for start, stop in splits:
                    out.append("  " + "  ".join(f"{base + h:.1f}" for h in range(start, stop)))


@pytest.fixture(scope="module")
def text_dir(tmp_path_factory):
    directory = tmp_path_factory.mktemp("txt")
    lines = []
    _write_text_records(lines, 0.0)
    _write_text_records(lines, 0.5)
    (directory / "ionos04.txt").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return directory


def test_filename_pads_month_number():
    assert ion_map_filename(3, "txt") == "ionos04.txt"
    assert ion_map_filename(11, ".bin") == "ionos12.bin"


def test_filename_rejects_bad_month():
    with pytest.raises(ValueError):
        ion_map_filename(12, "txt")


def test_text_map_shape_and_order(text_dir):
    fof2, m3kf2 = read_ion_parameters_txt(text_dir, 3)
    assert fof2.shape == SHAPE
    assert m3kf2.shape == SHAPE
    for h, j, k, m in [(0, 0, 0, 0), (23, 240, 120, 1), (7, 13, 60, 1), (16, 4, 6, 0)]:
        assert fof2[h, j, k, m] == _value(m, j, k, h)
        assert m3kf2[h, j, k, m] == _value(m, j, k, h) + 0.5


def test_text_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ion_parameters_txt(tmp_path, 0)


def test_text_map_truncated(tmp_path):
    (tmp_path / "ionos01.txt").write_text("  1.0  2.0  3.0  4.0  5.0\n  6.0  7.0  8.0\n")
    with pytest.raises(ValueError):
        read_ion_parameters_txt(tmp_path, 0)


def _binary_records():
    count = SSN_LEVELS * LONGITUDES * LATITUDES * HOURS
    fof2 = (np.arange(count, dtype=np.float32) % 1000).reshape(
        SSN_LEVELS, LONGITUDES, LATITUDES, HOURS
    )
    m3kf2 = fof2 + np.float32(0.25)
    return fof2, m3kf2


def test_binary_map_round_trip(tmp_path):
    fof2, m3kf2 = _binary_records()
    data = (
        b"\x00" * 5
        + fof2.astype("<f4").tobytes()
        + b"\x00" * 10
        + m3kf2.astype("<f4").tobytes()
    )
    (tmp_path / "ionos07.bin").write_bytes(data)
    read_fof2, read_m3kf2 = read_ion_parameters_bin(tmp_path, 6)
    assert read_fof2.shape == SHAPE
    np.testing.assert_array_equal(read_fof2, fof2.transpose(3, 1, 2, 0))
    np.testing.assert_array_equal(read_m3kf2, m3kf2.transpose(3, 1, 2, 0))


def test_binary_map_truncated(tmp_path):
    (tmp_path / "ionos01.bin").write_bytes(b"\x00" * 100)
    with pytest.raises(ValueError):
        read_ion_parameters_bin(tmp_path, 0)


def test_binary_map_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_ion_parameters_bin(tmp_path, 1)