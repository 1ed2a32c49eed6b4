"""Simple recurrences: stairs, Fibonacci, binomials and happy numbers."""

from __future__ import annotations


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    prev, cur = 1, 1
    for _ in range(n - 1):
        prev, cur = cur, prev + cur
    return cur


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number."""
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient C(n, r); 1 for r <= 0, 0 for r > n >= 0."""
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    return [[n_choose_r(row, col) for col in range(row + 1)] for row in range(num_rows)]


def _digit_square_sum(num: int) -> int:
    total = 0
    while num >= 1:
        num, digit = divmod(num, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Tell whether repeatedly summing squared digits of ``n`` reaches 1."""
    seen: set[int] = set()
    num = n
    while True:
        num = _digit_square_sum(num)
        if num == 1:
            return True
        if num in seen:
            return False
        seen.add(num)