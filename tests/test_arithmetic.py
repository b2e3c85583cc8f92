import numpy as np
from numpy.testing import assert_array_equal

from floatdsp.ops.arithmetic import add, sub
from floatdsp.ops.elementwise import negative


def test_add_uses_the_lowest_common_element_count():
    assert add().size == 0
    assert add(None, None).size == 0
    assert_array_equal(add([1, 2, 3]), [1, 2, 3])
    assert_array_equal(add([1, 2, 3], [4, 7, 9]), [5, 9, 12])
    assert_array_equal(add([1, 2], [4, 7, 9]), [5, 9])
    assert_array_equal(add([1, 2, 3], [4, 7]), [5, 9])
    assert_array_equal(add([1], [2], [3]), [6])


def test_sub_uses_the_lowest_common_element_count():
    assert sub().size == 0
    assert sub(None, None).size == 0
    assert_array_equal(sub([5, 2, 1]), [5, 2, 1])
    assert_array_equal(sub([9, 8, 3], [4, 7, 9]), [5, 1, -6])
    assert_array_equal(sub([9, 8], [4, 7, 9]), [5, 1])
    assert_array_equal(sub([9, 8, 3], [4, 7]), [5, 1])
    assert_array_equal(sub([5], [1], [2]), [2])


def test_empty_argument_truncates_everything():
    assert add([1, 2], []).size == 0
    assert sub([1, 2], [], [3]).size == 0


def test_add_of_negative_equals_sub():
    rng = np.random.default_rng(1)
    a = rng.normal(size=16)
    b = rng.normal(size=16)
    assert_array_equal(add(a, negative(b)), sub(a, b))


def test_results_do_not_alias_inputs():
    a = np.array([1.0, 2.0])
    for out in (add(a), sub(a)):
        out[0] = 100
        assert a[0] == 1
