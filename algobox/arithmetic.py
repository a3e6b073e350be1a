"""Small number-theoretic helpers."""


def trailing_zeroes(n: int) -> int:
    """Number of trailing zeros in ``n!``, counted as factors of five."""
    count = 0
    for multiple in range(5, n + 1, 5):
        while multiple % 5 == 0:
            count += 1
            multiple //= 5
    return count


def _digit_square_sum(n: int) -> int:
    total = 0
    while n:
        n, digit = divmod(n, 10)
        total += digit * digit
    return total


def is_happy(n: int) -> bool:
    """Whether repeatedly summing squared digits of ``n`` reaches 1."""
    seen: set[int] = set()
    while True:
        n = _digit_square_sum(n)
        if n == 1:
            return True
        if n in seen:
            return False
        seen.add(n)