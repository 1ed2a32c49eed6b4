import pytest

from puzzlekit.recurrences import (
    climb_stairs,
    fibonacci,
    is_happy,
    n_choose_r,
    pascal_triangle,
)


def test_climb_stairs_base_cases():
    assert climb_stairs(0) == 0
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2


@pytest.mark.parametrize("n", range(3, 30))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


@pytest.mark.parametrize("n", range(1, 30))
def test_climb_stairs_matches_fibonacci(n):
    assert climb_stairs(n) == fibonacci(n + 1)


def test_negative_inputs_raise():
    with pytest.raises(ValueError):
        climb_stairs(-1)
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@pytest.mark.parametrize("n", range(2, 40))
def test_fibonacci_recurrence(n):
    assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


@pytest.mark.parametrize("n", range(0, 15))
def test_n_choose_r_edges_and_symmetry(n):
    assert n_choose_r(n, 0) == 1
    assert n_choose_r(n, n) == 1
    for r in range(n + 1):
        assert n_choose_r(n, r) == n_choose_r(n, n - r)


def test_n_choose_r_above_n_is_zero():
    assert n_choose_r(3, 5) == 0


def test_pascal_triangle_shape_and_sums():
    rows = pascal_triangle(12)
    assert len(rows) == 12
    for i, row in enumerate(rows):
        assert len(row) == i + 1
        assert sum(row) == 2**i


def test_pascal_triangle_rule():
    rows = pascal_triangle(10)
    for upper, lower in zip(rows, rows[1:]):
        for j in range(1, len(lower) - 1):
            assert lower[j] == upper[j - 1] + upper[j]


def test_pascal_triangle_empty():
    assert pascal_triangle(0) == []


def test_is_happy_one():
    assert is_happy(1) is True


def test_is_happy_non_positive():
    assert is_happy(0) is False
    assert is_happy(-5) is False


def test_is_happy_examples():
    assert is_happy(19) is True
    assert is_happy(2) is False


@pytest.mark.parametrize("a, b", [(19, 91), (19, 910), (2, 20), (7, 70)])
def test_is_happy_depends_on_digits(a, b):
    assert is_happy(a) == is_happy(b)