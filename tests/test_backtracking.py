import math

import pytest

from algobox.backtracking import (
    combination_sum,
    combination_sum3,
    combine,
    letter_case_permutation,
    letter_combinations,
)


def test_combination_sum_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


@pytest.mark.parametrize(
    "candidates, target", [([2, 3, 6, 7], 7), ([2, 3, 5], 8), ([7, 3, 2], 18)]
)
def test_combination_sum_invariants(candidates, target):
    results = combination_sum(candidates, target)
    assert results
    assert results == sorted(results)
    assert len({tuple(r) for r in results}) == len(results)
    for combo in results:
        assert sum(combo) == target
        assert combo == sorted(combo)
        assert set(combo) <= set(candidates)


def test_combination_sum_impossible():
    assert combination_sum([2], 1) == []


def test_combination_sum_zero_target_gives_empty_combination():
    assert combination_sum([2, 3], 0) == [[]]


def test_combination_sum_leaves_input_untouched():
    candidates = [7, 3, 2]
    combination_sum(candidates, 7)
    assert candidates == [7, 3, 2]


def test_combination_sum3_example():
    assert combination_sum3(3, 7) == [[1, 2, 4]]


def test_combination_sum3_impossible():
    assert combination_sum3(4, 1) == []


@pytest.mark.parametrize("k, n", [(3, 9), (2, 10), (4, 20)])
def test_combination_sum3_invariants(k, n):
    results = combination_sum3(k, n)
    assert results
    assert results == sorted(results)
    for combo in results:
        assert len(combo) == k
        assert sum(combo) == n
        assert combo == sorted(set(combo))
        assert all(1 <= digit <= 9 for digit in combo)


@pytest.mark.parametrize("n, k", [(4, 2), (1, 1), (5, 3), (6, 0), (3, 5)])
def test_combine_counts_and_order(n, k):
    results = combine(n, k)
    assert len(results) == math.comb(n, k)
    assert results == sorted(results)
    for combo in results:
        assert len(combo) == k
        assert combo == sorted(set(combo))
        assert all(1 <= x <= n for x in combo)


def test_combine_single():
    assert combine(1, 1) == [[1]]


def test_letter_case_permutation_example():
    assert letter_case_permutation("a1b2") == ["a1b2", "A1b2", "A1B2", "a1B2"]


@pytest.mark.parametrize("s", ["a1b2", "3z4", "12345", "AbC"])
def test_letter_case_permutation_invariants(s):
    results = letter_case_permutation(s)
    letters = sum(ch.isalpha() for ch in s)
    assert len(results) == 2**letters
    assert len(set(results)) == len(results)
    assert results[0] == s
    assert {r.lower() for r in results} == {s.lower()}


def test_letter_combinations_empty():
    assert letter_combinations("") == []


def test_letter_combinations_single_digit():
    assert letter_combinations("2") == ["a", "b", "c"]


def test_letter_combinations_two_digits():
    results = letter_combinations("23")
    assert len(results) == len("abc") * len("def")
    assert results == sorted(results)
    assert all(r[0] in "abc" and r[1] in "def" for r in results)


def test_letter_combinations_without_letters():
    assert letter_combinations("1*#") == []


def test_letter_combinations_four_letter_keys():
    results = letter_combinations("79")
    assert len(results) == len("pqrs") * len("wxyz")
    assert len(set(results)) == len(results)