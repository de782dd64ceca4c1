import numpy as np
import pytest

from chromapix.whitepoint import (
    D50,
    D65,
    E,
    STANDARD_ILLUMINANTS,
    AdaptationMethod,
    WhitePoint,
    adapt,
    adaptation_matrix,
    get_white_point,
)


def test_d65_tristimulus():
    np.testing.assert_allclose(D65.xyz, [0.95047, 1.0, 1.08883], atol=5e-4)
    assert D65.xy == pytest.approx((0.3127, 0.3290))


def test_d50_tristimulus():
    np.testing.assert_allclose(D50.xyz, [0.96422, 1.0, 0.82521], atol=1e-3)


def test_from_xy_rejects_non_positive_y():
    with pytest.raises(ValueError):
        WhitePoint.from_xy(0.3, 0.0)


def test_lookup_by_name():
    assert get_white_point("d65") is D65
    assert set(STANDARD_ILLUMINANTS) >= {"A", "D50", "D65", "E"}
    with pytest.raises(ValueError):
        get_white_point("D93")


def test_same_white_is_identity():
    np.testing.assert_array_equal(adaptation_matrix(D65, D65), np.eye(3))
    xyz = np.array([[0.2, 0.3, 0.4], [0.9, 1.0, 1.1]])
    np.testing.assert_array_equal(adapt(xyz, D65, D65), xyz)


def test_same_as_ignores_name():
    renamed = WhitePoint("my-d65", D65.X, D65.Y, D65.Z)
    assert renamed.same_as(D65)
    assert renamed != D65


@pytest.mark.parametrize("method", list(AdaptationMethod))
def test_adapting_the_source_white_lands_on_the_destination_white(method):
    np.testing.assert_allclose(adapt(D65.xyz, D65, D50, method), D50.xyz, atol=1e-9)
    np.testing.assert_allclose(adapt(D50.xyz, D50, E, method), E.xyz, atol=1e-9)


def test_adaptation_round_trip():
    xyz = np.array([0.3, 0.4, 0.5])
    back = adapt(adapt(xyz, D65, D50), D50, D65)
    np.testing.assert_allclose(back, xyz, atol=1e-12)


def test_bradford_d65_to_d50_matches_published_matrix():
    expected = np.array([
        [1.0478112, 0.0228866, -0.0501270],
        [0.0295424, 0.9904844, -0.0170491],
        [-0.0092345, 0.0150436, 0.7521316],
    ])
    np.testing.assert_allclose(adaptation_matrix(D65, D50), expected, atol=1e-3)


def test_cached_matrix_is_read_only():
    matrix = adaptation_matrix(D65, D50)
    with pytest.raises(ValueError):
        matrix[0, 0] = 0.0
