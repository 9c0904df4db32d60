import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.measures import euclidean_distance, matrix_multiply, population_std

floats = st.integers(-1000, 1000).map(float)


def test_population_std_known_value():
    assert population_std([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)


@given(st.lists(floats, min_size=1, max_size=10), floats)
def test_population_std_shift_and_scale(values, shift):
    base = population_std(values)
    assert base >= 0
    assert population_std([v + shift for v in values]) == pytest.approx(base, abs=1e-6)
    assert population_std([3 * v for v in values]) == pytest.approx(3 * base, abs=1e-6)


@given(floats, st.integers(1, 10))
def test_population_std_constant_is_zero(value, count):
    assert population_std([value] * count) == pytest.approx(0.0)


def test_population_std_empty():
    with pytest.raises(ValueError):
        population_std([])


def test_euclidean_distance_right_triangle():
    assert euclidean_distance((0, 0), (3, 4)) == pytest.approx(5.0)


points = st.tuples(floats, floats)


@given(points, points)
def test_euclidean_distance_symmetric(first, second):
    assert euclidean_distance(first, second) == pytest.approx(euclidean_distance(second, first))
    assert euclidean_distance(first, first) == 0.0


def test_euclidean_distance_dimension_mismatch():
    with pytest.raises(ValueError):
        euclidean_distance((1, 2), (1, 2, 3))


def test_matrix_multiply_two_by_two():
    assert matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def square(size):
    return st.lists(
        st.lists(st.integers(-9, 9), min_size=size, max_size=size), min_size=size, max_size=size
    )


def transpose(matrix):
    return [list(column) for column in zip(*matrix)]


@given(square(3))
def test_matrix_multiply_identity(matrix):
    identity = [[1 if i == j else 0 for j in range(3)] for i in range(3)]
    assert matrix_multiply(matrix, identity) == matrix
    assert matrix_multiply(identity, matrix) == matrix


@given(square(3), square(3), square(3))
def test_matrix_multiply_associative_and_transpose(a, b, c):
    assert matrix_multiply(matrix_multiply(a, b), c) == matrix_multiply(a, matrix_multiply(b, c))
    assert transpose(matrix_multiply(a, b)) == matrix_multiply(transpose(b), transpose(a))


def test_matrix_multiply_rectangular_shape():
    product = matrix_multiply([[1, 2, 3]], [[1], [1], [1]])
    assert len(product) == 1 and len(product[0]) == 1


@pytest.mark.parametrize(
    "left, right",
    [
        ([[1, 2]], [[1, 2]]),
        ([], [[1]]),
        ([[1, 2], [3]], [[1], [1]]),
    ],
)
def test_matrix_multiply_rejects_bad_shapes(left, right):
    with pytest.raises(ValueError):
        matrix_multiply(left, right)