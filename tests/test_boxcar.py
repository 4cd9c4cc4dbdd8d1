import numpy as np
import pytest

from trajectory_smoothing.smoothing import InvalidArgument, boxcar_filter, filter_channel


@pytest.fixture
def series():
    return [(0, 10), (1, 12), (2, 8), (3, 14), (4, 9)]


def test_order_two_window_shrinks_at_tail(series):
    result = boxcar_filter(series, order=2)
    np.testing.assert_array_equal(result[:, 0], [0, 1, 2, 3, 4])
    np.testing.assert_allclose(result[:, 1], [11.0, 10.0, 11.0, 11.5, 9.0])


def test_order_one_is_identity():
    rng = np.random.default_rng(3)
    values = rng.normal(size=50)
    series = np.column_stack([np.arange(50) * 0.01, values])
    np.testing.assert_array_equal(boxcar_filter(series, order=1), series)


@pytest.mark.parametrize("order", [1, 2, 3, 5, 20])
def test_output_length_matches_input(series, order):
    assert len(boxcar_filter(series, order=order)) == len(series)


def test_order_longer_than_series():
    result = boxcar_filter([(0, 1), (1, 2), (2, 3)], order=10)
    np.testing.assert_allclose(result[:, 1], [2.0, 2.5, 3.0])


def test_times_come_from_input():
    result = boxcar_filter([(0.5, 1), (0.7, 3), (1.3, 5)], order=2)
    np.testing.assert_array_equal(result[:, 0], [0.5, 0.7, 1.3])


def test_default_order_is_five():
    values = np.arange(10, dtype=float)
    result = boxcar_filter(np.column_stack([values, values]))
    assert result[0, 1] == pytest.approx(2.0)


def test_empty_series():
    assert boxcar_filter([], order=3).shape == (0, 2)


def test_filter_channel():
    np.testing.assert_allclose(filter_channel([10, 12, 8, 14, 9], 2), [11.0, 10.0, 11.0, 11.5, 9.0])


@pytest.mark.parametrize("series_arg, order", [(None, 2), ([(0, 1)], None), ([(0, 1)], 0), ([(0, 1)], 1.5)])
def test_invalid_arguments(series_arg, order):
    with pytest.raises(InvalidArgument):
        boxcar_filter(series_arg, order)


def test_rejects_wrong_shape():
    with pytest.raises(InvalidArgument):
        boxcar_filter([(0, 1, 2), (1, 2, 3)], 2)
