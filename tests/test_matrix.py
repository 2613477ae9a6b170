import math
import random

import pytest

from xornets.matrix import Matrix, sigmoid, sigmoid_derivative


def test_sigmoid_at_zero():
    assert sigmoid(0) == 0.5


def test_sigmoid_derivative_at_zero():
    assert sigmoid_derivative(0) == 0.25


@pytest.mark.parametrize("x", [-30.0, -2.5, -0.1, 0.7, 4.0, 25.0])
def test_sigmoid_is_symmetric(x):
    assert math.isclose(sigmoid(x) + sigmoid(-x), 1.0)


def test_sigmoid_saturates_without_overflow():
    assert sigmoid(-1000.0) == 0.0
    assert sigmoid(1000.0) == 1.0


@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 1.2, 5.0])
def test_derivative_matches_numeric_slope(x):
    h = 1e-6
    slope = (sigmoid(x + h) - sigmoid(x - h)) / (2 * h)
    assert math.isclose(sigmoid_derivative(x), slope, rel_tol=1e-6)


def test_random_shape_and_range():
    m = Matrix.random(3, 4, random.Random(1))
    assert m.shape == (3, 4)
    assert all(-0.5 <= v < 1.5 for row in m.data for v in row)


def test_random_is_reproducible_with_seed():
    rng = random.Random(7)
    state = rng.getstate()
    first = Matrix.random(2, 3, rng)
    rng.setstate(state)
    second = Matrix.random(2, 3, rng)
    assert first.shape == (2, 3)
    assert second.shape == (2, 3)
    assert [list(row) for row in second.data] == [list(row) for row in first.data]
    assert len({v for row in first.data for v in row}) == 6


def test_random_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Matrix.random(-1, 2)


def test_column_builds_vector():
    v = Matrix.column([1, 2, 3])
    assert v.shape == (3, 1)
    assert [row[0] for row in v.data] == [1.0, 2.0, 3.0]


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])


def test_identity_product_is_unchanged():
    m = Matrix.random(2, 1, random.Random(3))
    identity = Matrix([[1, 0], [0, 1]])
    assert identity @ m == m


def test_scaling_product_equals_doubling():
    m = Matrix.random(2, 3, random.Random(4))
    assert Matrix([[2, 0], [0, 2]]).matmul(m) == m.add(m)


def test_product_shape():
    a = Matrix.random(3, 2, random.Random(5))
    b = Matrix.random(2, 1, random.Random(6))
    assert (a @ b).shape == (3, 1)


def test_product_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix.random(2, 3).matmul(Matrix.random(2, 1))


def test_add_is_commutative():
    a = Matrix.random(2, 2, random.Random(8))
    b = Matrix.random(2, 2, random.Random(9))
    assert a + b == b + a


def test_add_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix.random(2, 1).add(Matrix.random(3, 1))


def test_map_applies_function():
    m = Matrix.column([-1.0, 0.0, 2.0])
    assert m.map(sigmoid) == Matrix.column([sigmoid(-1.0), sigmoid(0.0), sigmoid(2.0)])


def test_format():
    assert Matrix([[1, 2]]).format() == "1.000000 2.000000 \n\n"