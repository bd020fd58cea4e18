import pytest

from astrolab.mandelbrot import (
    C_IMG_MAX,
    C_IMG_MIN,
    C_REAL_MAX,
    C_REAL_MIN,
    NMAX_ITER,
    compute,
    grid,
    main,
    mandelbrot_series,
    write_output,
)


def test_origin_never_diverges():
    assert mandelbrot_series(0.0, 0.0) == NMAX_ITER


def test_far_point_diverges_immediately():
    assert mandelbrot_series(10.0, 0.0) == 1


@pytest.mark.parametrize("cr,ci", [(0.3, 0.5), (-0.75, 0.1), (-1.5, 0.9), (0.25, 0.01)])
def test_conjugate_symmetry(cr, ci):
    assert mandelbrot_series(cr, ci) == mandelbrot_series(cr, -ci)


def test_grid_spans_window():
    c_real, c_img = grid(11, 7)
    assert len(c_real) == 11 and len(c_img) == 7
    assert c_real[0] == pytest.approx(C_REAL_MIN)
    assert c_real[-1] == pytest.approx(C_REAL_MAX)
    assert c_img[0] == pytest.approx(C_IMG_MIN)
    assert c_img[-1] == pytest.approx(C_IMG_MAX)
    assert all(a < b for a, b in zip(c_real, c_real[1:]))


def test_grid_needs_two_points():
    with pytest.raises(ValueError):
        grid(1, 5)


def test_compute_shape_and_range():
    c_real, c_img, converged = compute(9, 6)
    assert len(converged) == 9
    assert all(len(row) == 6 for row in converged)
    assert all(1 <= n <= NMAX_ITER for row in converged for n in row)
    assert converged[3][2] == mandelbrot_series(c_real[3], c_img[2])


def test_write_output_round_trip(tmp_path):
    c_real, c_img, converged = compute(5, 4)
    path = tmp_path / "out.dat"
    write_output(path, c_real, c_img, converged)
    rows = [line.split() for line in path.read_text().splitlines()]
    assert len(rows) == 20
    expected = [(cr, ci, n) for cr, row in zip(c_real, converged) for ci, n in zip(c_img, row)]
    for (a, b, c), (cr, ci, n) in zip(rows, expected):
        assert float(a) == pytest.approx(cr, abs=1e-5)
        assert float(b) == pytest.approx(ci, abs=1e-5)
        assert int(c) == n


def test_main_wrong_arguments():
    assert main(["10"]) == 1


def test_main_writes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["4", "3", "2"]) == 0
    lines = (tmp_path / "mandelbrot.dat").read_text().splitlines()
    assert len(lines) == 12
    assert all(len(line.split()) == 3 for line in lines)