"""Enumeration of combinations and string variants by backtracking."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator

_PHONE_LETTERS = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def combination_sum(candidates: Iterable[int], target: int) -> list[list[int]]:
    """All multisets of positive candidates summing to ``target``.

    Each candidate may be used any number of times. Combinations come out
    in ascending order, each one sorted.
    """
    ordered = sorted(candidates)
    results: list[list[int]] = []

    def search(path: list[int], remaining: int, begin: int) -> None:
        if remaining < 0:
            return
        if remaining == 0:
            results.append(list(path))
        for index in range(begin, len(ordered)):
            value = ordered[index]
            if path and remaining < value:
                break
            path.append(value)
            search(path, remaining - value, index)
            path.pop()

    search([], target, 0)
    return results


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """All sets of ``k`` distinct digits 1-9 summing to ``n``, ascending."""
    results: list[list[int]] = []

    def search(path: list[int], total: int, start: int) -> None:
        if len(path) == k:
            if total == n:
                results.append(list(path))
            return
        for digit in range(start, 10):
            path.append(digit)
            search(path, total + digit, digit + 1)
            path.pop()

    search([], 0, 1)
    return results


def combine(n: int, k: int) -> list[list[int]]:
    """All ``k``-element combinations of ``1..n`` in lexicographic order."""
    return [list(combo) for combo in itertools.combinations(range(1, n + 1), k)]


def letter_case_permutation(s: str) -> list[str]:
    """Every string obtained by toggling the case of letters in ``s``.

    The input itself comes first; digits are left alone.
    """

    def variants(chars: list[str], begin: int) -> Iterator[str]:
        yield "".join(chars)
        for index in range(begin, len(chars)):
            if chars[index] < "A":
                continue
            original = chars[index]
            chars[index] = chr(ord(original) ^ 0x20)
            yield from variants(chars, index + 1)
            chars[index] = original

    return list(variants(list(s), 0))


def letter_combinations(digits: str) -> list[str]:
    """All letter strings a phone keypad digit sequence can spell.

    An empty input, or any digit without letters, gives no combinations.
    """
    if not digits:
        return []
    pools = [_PHONE_LETTERS.get(digit, "") for digit in digits]
    return ["".join(letters) for letters in itertools.product(*pools)]