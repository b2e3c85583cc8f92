import numpy as np
from numpy.testing import assert_array_equal

from floatdsp.ops.differencing import derivative, nth_derivative


def test_derivative():
    assert_array_equal(derivative([]), [])
    assert_array_equal(derivative([1]), [0])
    assert_array_equal(derivative([1, 3]), [2])
    assert_array_equal(derivative([1, 3, 4]), [2, 1])
    assert_array_equal(derivative([1, 3, 4, 2]), [2, 1, -2])


def test_derivative_length_law():
    for n in range(0, 6):
        expected = 1 if n == 1 else max(0, n - 1)
        assert derivative(np.arange(n, dtype=float)).size == expected


def test_nth_derivative():
    a = [1, 3, 4, 2]
    assert_array_equal(nth_derivative(a, -1), [1, 3, 4, 2])
    assert_array_equal(nth_derivative(a, 0), [1, 3, 4, 2])
    assert_array_equal(nth_derivative(a, 1), [2, 1, -2])
    assert_array_equal(nth_derivative(a, 2), [-1, -3])
    assert_array_equal(nth_derivative(a, 3), [-2])
    assert_array_equal(nth_derivative(a, 4), [0])
    assert_array_equal(nth_derivative(a, 5), [0])


def test_nth_derivative_keeps_last_single_sample_difference():
    assert_array_equal(nth_derivative([1, 3], 1), [2])
    assert_array_equal(nth_derivative([1, 3], 2), [0])
    assert_array_equal(nth_derivative([1, 3, 4, 2], 3), [-2])
    assert_array_equal(nth_derivative([5], 1), [0])


def test_nth_derivative_saturates_for_large_orders():
    assert_array_equal(nth_derivative([1, 2, 3], 10**9), [0])
    assert nth_derivative([], 10**9).size == 0


def test_nth_derivative_with_non_positive_order_is_fresh_copy():
    a = np.array([1.0, 2.0])
    out = nth_derivative(a, 0)
    out[0] = 9
    assert_array_equal(a, [1, 2])
