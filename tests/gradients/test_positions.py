import numpy as np
import pytest

from chromapix.gradients import compute_center, linear_positions, radial_positions


def test_linear_positions_horizontal():
    t = linear_positions(3, 2, (0, 0), (2, 0))
    np.testing.assert_allclose(t, [[0.0, 0.5, 1.0], [0.0, 0.5, 1.0]])


def test_linear_positions_diagonal_projection():
    t = linear_positions(3, 3, (0, 0), (2, 2))
    assert t[0, 0] == 0.0
    assert t[2, 2] == pytest.approx(1.0)
    assert t[0, 2] == pytest.approx(t[2, 0])
    assert t[0, 2] == pytest.approx(0.5)


def test_linear_positions_extend_past_ends():
    t = linear_positions(5, 1, (1, 0), (3, 0))
    np.testing.assert_allclose(t[0], [-0.5, 0.0, 0.5, 1.0, 1.5])


def test_linear_positions_need_distinct_points():
    with pytest.raises(ValueError):
        linear_positions(3, 3, (1, 1), (1, 1))


def test_radial_positions():
    t = radial_positions(5, 5, center=(2, 2), radius=2.0)
    assert t[2, 2] == 0.0
    assert t[2, 0] == pytest.approx(1.0)
    assert t[0, 0] == pytest.approx(np.sqrt(8) / 2)


def test_radial_defaults():
    t = radial_positions(4, 6)
    assert t.shape == (6, 4)
    assert t[3, 2] == 0.0
    assert t[3, 0] == pytest.approx(1.0)


def test_radial_positions_need_positive_radius():
    with pytest.raises(ValueError):
        radial_positions(3, 3, radius=0)


def test_compute_center():
    assert compute_center(10, 20) == (5.0, 10.0)
    assert compute_center(10, 20, center=(1, 2)) == (1.0, 2.0)
    assert compute_center(10, 20, relative_center=(0.25, 0.5)) == (2.5, 10.0)
