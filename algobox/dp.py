"""Dynamic-programming solutions: stock trading, stairs, robbery and sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none gains."""
    if len(prices) <= 1:
        return 0
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit holding at most one share at a time, trading any number of times."""
    if not prices:
        return 0
    free, holding = 0, -prices[0]
    for price in prices[1:]:
        free, holding = max(free, holding + price), max(holding, free - price)
    return free


def max_profit_k_transactions(k: int, prices: Sequence[int]) -> int:
    """Best profit using at most ``k`` buy-and-sell transactions."""
    if len(prices) <= 1 or k <= 0:
        return 0
    # local[j]: best with at most j transactions, the last one selling today.
    # best[j]: best with at most j transactions by today.
    local = [0] * (k + 1)
    best = [0] * (k + 1)
    for previous, price in zip(prices, prices[1:]):
        change = price - previous
        for j in range(k, 0, -1):
            local[j] = max(best[j - 1] + change, local[j] + change)
            best[j] = max(local[j], best[j])
    return best[k]


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit using at most two buy-and-sell transactions."""
    return max_profit_k_transactions(2, prices)


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Best profit when each day either ends a sale or does nothing."""
    if len(prices) <= 1:
        return 0
    idle = sold = 0
    for previous, price in zip(prices, prices[1:]):
        idle, sold = max(idle, sold), max(sold + price - previous, idle)
    return max(sold, idle)


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    one_back, two_back = 2, 1
    for _ in range(3, n + 1):
        one_back, two_back = one_back + two_back, one_back
    return one_back


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number, with ``fib(0) == 0``."""
    if n < 2:
        return n
    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return b


def integer_break(n: int) -> int:
    """Largest product of at least two positive integers summing to ``n``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    best = [0] * (n + 1)
    best[2] = 1
    for i in range(3, n + 1):
        best[i] = max(max((i - j) * j, best[i - j] * j) for j in range(1, i))
    return best[n]


def _rob_line(nums: Sequence[int]) -> int:
    skip, take = 0, 0
    for value in nums:
        skip, take = max(skip, take), skip + value
    return max(skip, take)


def rob(nums: Sequence[int]) -> int:
    """Largest sum of values with no two adjacent ones taken."""
    if not nums:
        raise ValueError("no houses to rob")
    if len(nums) == 1:
        return nums[0]
    two_back, one_back = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        two_back, one_back = one_back, max(two_back + value, one_back)
    return one_back


def rob_circular(nums: Sequence[int]) -> int:
    """As :func:`rob`, but the first and last values count as adjacent."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[:-1]), rob(nums[1:]))


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest subsequence shared by both strings."""
    previous = [0] * (len(text2) + 1)
    for c1 in text1:
        current = [0]
        for j, c2 in enumerate(text2):
            if c1 == c2:
                current.append(previous[j] + 1)
            else:
                current.append(max(previous[j + 1], current[j]))
        previous = current
    return previous[-1]


def length_of_lis(nums: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in nums:
        index = bisect_left(tails, value)
        if index == len(tails):
            tails.append(value)
        else:
            tails[index] = value
    return len(tails)


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("array is empty")
    current = best = nums[0]
    for value in nums[1:]:
        current = max(current + value, value)
        best = max(best, current)
    return best


def last_stone_weight_ii(stones: Sequence[int]) -> int:
    """Smallest weight that can remain after smashing stones in pairs."""
    if len(stones) == 1:
        return stones[0]
    total = sum(stones)
    target = total // 2
    reachable = [0] * (target + 1)
    for stone in stones:
        for capacity in range(target, stone - 1, -1):
            reachable[capacity] = max(
                reachable[capacity], reachable[capacity - stone] + stone
            )
    return total - 2 * reachable[target]


def longest_palindrome(s: str) -> str:
    """The longest palindromic substring; the leftmost one on ties."""
    if len(s) < 2:
        return s
    best_start, best_length = 0, 1
    for centre in range(len(s)):
        for left, right in ((centre, centre), (centre, centre + 1)):
            while left >= 0 and right < len(s) and s[left] == s[right]:
                left -= 1
                right += 1
            start, length = left + 1, right - left - 1
            if length > best_length or (
                length == best_length and start < best_start
            ):
                best_start, best_length = start, length
    return s[best_start : best_start + best_length]