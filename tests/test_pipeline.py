import numpy as np
import pytest

from trajectory_smoothing.smoothing import (
    DataQualityWarning,
    InvalidArgument,
    NumericalFailure,
    SmoothingConfig,
    SplineFitter,
    filter_channel,
    parametrize,
    smooth_trajectory,
)
from trajectory_smoothing.smoothing.pipeline import channel_rngs, prefilter


def test_shapes(helix):
    config = SmoothingConfig(coefficient_count=30, sample_count=150, seed=0)
    result = smooth_trajectory(helix, config)
    assert result.points.shape == (150, 3)
    assert result.dimensions == 3
    assert len(result) == 150
    assert len(result.parameters) == len(helix)
    assert len(result.curves) == 3
    np.testing.assert_array_equal(result.t, result.curves[0].t)


def test_default_sample_count(helix):
    result = smooth_trajectory(helix, SmoothingConfig(seed=0))
    assert len(result) == len(helix)


def test_parameters_shared_across_dimensions(helix):
    result = smooth_trajectory(helix, SmoothingConfig(coefficient_count=20, seed=0))
    np.testing.assert_allclose(result.parameters, parametrize(helix))
    for curve in result.curves:
        assert curve.t[-1] == pytest.approx(result.parameters[-1])


def test_circle_stays_on_radius(circle):
    result = smooth_trajectory(circle, SmoothingConfig(coefficient_count=20, sample_count=200, seed=0))
    radius = np.hypot(result.points[:, 0], result.points[:, 1])
    assert np.max(np.abs(radius - 10.0)) < 0.5


def test_seed_reproducible_regardless_of_workers(helix):
    serial = smooth_trajectory(helix, SmoothingConfig(coefficient_count=20, seed=9, workers=1))
    threaded = smooth_trajectory(helix, SmoothingConfig(coefficient_count=20, seed=9, workers=3))
    np.testing.assert_array_equal(serial.points, threaded.points)


def test_channel_rngs_are_independent():
    a, b = channel_rngs(0, 2)
    assert a.normal() != b.normal()


def test_boxcar_prefilter(helix):
    filtered = prefilter(helix, 4)
    for d in range(3):
        np.testing.assert_allclose(filtered[:, d], filter_channel(helix[:, d], 4))
    assert prefilter(helix, None) is helix
    assert prefilter(helix, 1) is helix

    result = smooth_trajectory(helix, SmoothingConfig(coefficient_count=20, boxcar_order=4, seed=0))
    np.testing.assert_allclose(result.parameters, parametrize(filtered))


def test_duplicate_points_reported():
    t = np.linspace(0, 1, 40)
    points = np.column_stack([t, t ** 2])
    points[10] = points[9]
    with pytest.warns(DataQualityWarning):
        result = smooth_trajectory(points, SmoothingConfig(coefficient_count=8, degeneracy_offset=0.01, seed=0))
    assert np.all(np.diff(result.parameters) > 0)


def test_invalid_basis_aborts(helix):
    with pytest.raises(InvalidArgument):
        smooth_trajectory(helix[:10], SmoothingConfig(coefficient_count=45))


def test_invalid_workers(helix):
    with pytest.raises(InvalidArgument):
        smooth_trajectory(helix, SmoothingConfig(workers=0))


@pytest.mark.parametrize("workers", [1, 3])
def test_failing_dimension_aborts_whole_call(helix, monkeypatch, workers):
    original_fit = SplineFitter.fit
    calls = []

    def failing_fit(self, parameters, values):
        calls.append(1)
        if len(calls) == 2:
            raise NumericalFailure("rank deficient")
        return original_fit(self, parameters, values)

    monkeypatch.setattr(SplineFitter, "fit", failing_fit)
    with pytest.raises(NumericalFailure):
        smooth_trajectory(helix, SmoothingConfig(coefficient_count=20, seed=0, workers=workers))
