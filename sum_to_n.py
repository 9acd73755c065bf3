"""Three ways to sum the integers from 1 to n.

All three return 0 for n = 0 and agree for every n >= 0. For negative n
they differ, exactly as their definitions imply.
"""


def sum_to_n_a(n: int) -> int:
    """Iterative: O(n) time, O(1) space. Returns 0 for n < 1."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_to_n_b(n: int) -> int:
    """Closed form n(n + 1) / 2: O(1) time and space."""
    return n * (n + 1) // 2


def sum_to_n_c(n: int) -> int:
    """Recursive: O(n) time and stack depth. Returns n itself for n <= 1.

    Deep inputs hit Python's recursion limit (about 1000 frames by default).
    """
    if n <= 1:
        return n
    return n + sum_to_n_c(n - 1)
