"""Sliding-window and counting problems over integer arrays."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Sequence


def find_max_consecutive_ones(nums: Iterable[int]) -> int:
    """Length of the longest run of ones."""
    best = run = 0
    for value in nums:
        run = run + 1 if value == 1 else 0
        best = max(best, run)
    return best


def find_max_consecutive_ones_with_flip(nums: Iterable[int]) -> int:
    """Longest run of ones when at most one zero may be turned into a one."""
    best = count = previous = 0
    for value in nums:
        count += 1
        if value == 0:
            previous, count = count, 0
        best = max(best, previous + count)
    return best


def longest_ones(nums: Sequence[int], k: int) -> int:
    """Longest run of ones when at most ``k`` zeros may be turned into ones."""
    best = left = 0
    zeros: deque[int] = deque()
    for right, value in enumerate(nums):
        if value == 0:
            zeros.append(right)
        if len(zeros) > k:
            left = zeros.popleft() + 1
        best = max(best, right - left + 1)
    return best


def find_lhs(nums: Iterable[int]) -> int:
    """Length of the longest subsequence whose maximum and minimum differ by one."""
    counts = Counter(nums)
    return max(
        (count + counts[value + 1] for value, count in counts.items() if counts[value + 1]),
        default=0,
    )