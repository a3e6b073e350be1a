"""Algorithms over integer arrays: sums, searching, selection and intervals."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence


def three_sum(nums: Iterable[int]) -> list[list[int]]:
    """All distinct sorted triplets summing to zero, in ascending order."""
    ordered = sorted(nums)
    length = len(ordered)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        target = -first
        left, right = i + 1, length - 1
        while left < right:
            total = ordered[left] + ordered[right]
            if total == target:
                result.append([first, ordered[left], ordered[right]])
                while left < right:
                    left += 1
                    if ordered[left - 1] != ordered[left]:
                        break
                while left < right:
                    right -= 1
                    if ordered[right] != ordered[right + 1]:
                        break
            elif total < target:
                left += 1
            else:
                right -= 1
    return result


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruplets summing to ``target``, in ascending order."""
    ordered = sorted(nums)
    length = len(ordered)
    result: list[list[int]] = []
    for i in range(length):
        if i > 0 and ordered[i] == ordered[i - 1]:
            continue
        for j in range(i + 1, length):
            if j > i + 1 and ordered[j] == ordered[j - 1]:
                continue
            left, right = j + 1, length - 1
            while left < right:
                if left > j + 1 and ordered[left] == ordered[left - 1]:
                    left += 1
                    continue
                if right < length - 1 and ordered[right] == ordered[right + 1]:
                    right -= 1
                    continue
                total = ordered[i] + ordered[j] + ordered[left] + ordered[right]
                if total == target:
                    result.append([ordered[i], ordered[j], ordered[left], ordered[right]])
                    left += 1
                    right -= 1
                elif total > target:
                    right -= 1
                else:
                    left += 1
    return result


def four_sum_count(
    nums1: Iterable[int], nums2: Iterable[int], nums3: Iterable[int], nums4: Iterable[int]
) -> int:
    """Number of index tuples, one from each list, whose values sum to zero."""
    second = list(nums2)
    pair_sums = Counter(a + b for a in nums1 for b in second)
    fourth = list(nums4)
    return sum(pair_sums[-(c + d)] for c in nums3 for d in fourth)


def binary_search(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in ascending ``nums``, or -1 if absent."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def find_kth_largest(nums: Iterable[int], k: int) -> int:
    """The ``k``-th largest value, counting duplicates, with ``k`` from 1."""
    values = list(nums)
    if not 1 <= k <= len(values):
        raise ValueError(f"k={k} out of range for {len(values)} values")
    return heapq.nlargest(k, values)[-1]


def intersection(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Distinct values present in both lists.

    They come in the order of first appearance in the shorter list (the
    first list when both are equally long).
    """
    short, long = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    pending = set(long)
    result: list[int] = []
    for value in short:
        if value in pending:
            result.append(value)
            pending.discard(value)
    return result


def first_missing_positive(nums: Iterable[int]) -> int:
    """The smallest positive integer not present."""
    present = set(nums)
    candidate = 1
    while candidate in present:
        candidate += 1
    return candidate


def find_repeat_document(documents: Iterable[int]) -> int:
    """The first value seen a second time, or -1 if all are distinct."""
    seen: set[int] = set()
    for value in documents:
        if value in seen:
            return value
        seen.add(value)
    return -1


def majority_element(nums: Sequence[int]) -> int:
    """The value occurring more than half the time."""
    counts: Counter[int] = Counter()
    half = len(nums) // 2
    for value in nums:
        counts[value] += 1
        if counts[value] > half:
            return value
    raise ValueError("no majority element")


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=lambda interval: interval[0]):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def get_max_matrix(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Bounds ``[top, left, bottom, right]`` of the submatrix with the largest sum.

    The top-left cell is the starting best; a candidate must end in a column
    after the first to replace it, and only a strictly larger sum does.
    """
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")
    rows = len(matrix)
    best = matrix[0][0]
    bounds = [0, 0, 0, 0]
    prefix: list[list[int]] = [[0] * len(matrix[0])]
    for row in matrix:
        prefix.append([above + cell for above, cell in zip(prefix[-1], row)])
    for top in range(rows):
        for bottom in range(top, rows):
            columns = [low - high for low, high in zip(prefix[bottom + 1], prefix[top])]
            start = 0
            total = columns[0]
            for index, value in enumerate(columns[1:], start=1):
                if total > 0:
                    total += value
                else:
                    total = value
                    start = index
                if total > best:
                    best = total
                    bounds = [top, start, bottom, index]
    return bounds


def last_stone_weight(stones: Iterable[int]) -> int:
    """Weight left after repeatedly smashing the two heaviest stones; 0 if none."""
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, second - heaviest)
    return -heap[0] if heap else 0


def maximum_product(nums: Iterable[int]) -> int:
    """Largest product of any three values."""
    ordered = sorted(nums)
    if len(ordered) < 3:
        raise ValueError("need at least three values")
    top_three = ordered[-1] * ordered[-2] * ordered[-3]
    return max(top_three, ordered[0] * ordered[1] * ordered[-1])


def find_content_children(g: Iterable[int], s: Iterable[int]) -> int:
    """Most children whose greed ``g`` can be met, one cookie of size ``s`` each."""
    cookies = sorted(s, reverse=True)
    if not cookies:
        return 0
    content = 0
    for greed in sorted(g, reverse=True):
        if content == len(cookies):
            break
        if cookies[content] >= greed:
            content += 1
    return content