import pytest

from astrolab.gravity import (
    acceleration,
    initial_configuration,
    main,
    simulate,
    write_positions,
)


def test_initial_configuration_spacing_and_masses():
    x, m = initial_configuration(13)
    assert len(x) == 13 and len(m) == 13
    assert x[0] == 0.0
    assert x[-1] == 1.0
    assert m[6] == 1.5
    assert all(mass == 1.0 for i, mass in enumerate(m) if i != 6)


def test_initial_configuration_needs_two_particles():
    with pytest.raises(ValueError):
        initial_configuration(1)


def test_pairwise_forces_balance():
    x, m = initial_configuration(7)
    total = sum(mass * acceleration(x, m, n) for n, mass in enumerate(m))
    assert total == pytest.approx(0.0, abs=1e-9)


def test_acceleration_points_towards_other_particle():
    x = [0.0, 1.0]
    m = [1.0, 3.0]
    assert acceleration(x, m, 0) > 0
    assert acceleration(x, m, 1) < 0
    assert acceleration(x, m, 0) == pytest.approx(3.0 * abs(acceleration(x, m, 1)))


def test_simulate_without_steps_is_at_rest():
    x, v = simulate(5, 0, 1e-4)
    assert x == initial_configuration(5)[0]
    assert v == [0.0] * 5


def test_simulate_conserves_momentum():
    _, m = initial_configuration(13)
    _, v = simulate(13, 50, 1e-4)
    assert sum(mass * vel for mass, vel in zip(m, v)) == pytest.approx(0.0, abs=1e-9)


def test_simulate_keeps_symmetry_and_contracts():
    x, _ = simulate(13, 100, 1e-4)
    assert x[6] == pytest.approx(0.5, abs=1e-12)
    for left, right in zip(x, reversed(x)):
        assert left + right == pytest.approx(1.0, abs=1e-9)
    assert x[0] > 0.0
    assert x[-1] < 1.0


def test_write_positions_format(tmp_path):
    path = tmp_path / "pos.txt"
    write_positions(path, [0.5, 0.25])
    assert path.read_text().splitlines() == ["0.500000 0", "0.250000 0"]


def test_main_writes_both_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    initial = (tmp_path / "posI.txt").read_text().splitlines()
    final = (tmp_path / "posF.txt").read_text().splitlines()
    assert len(initial) == 13 and len(final) == 13
    assert initial[0] == "0.000000 0"
    assert float(final[0].split()[0]) > 0.0