"""Parsing and evaluation of small textual formats."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from itertools import zip_longest


def add_binary(a: str, b: str) -> str:
    """Sum of two binary digit strings, as a binary digit string."""
    for text in (a, b):
        if any(ch not in "01" for ch in text):
            raise ValueError(f"not a binary string: {text!r}")
    digits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(carry + int(x) + int(y), 2)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings numerically: 1, -1 or 0.

    Leading zeros in a part are ignored and missing parts count as zero.
    """

    def parts(version: str) -> list[int]:
        return [int(part) if part else 0 for part in version.split(".")]

    for x, y in zip_longest(parts(version1), parts(version2), fillvalue=0):
        if x > y:
            return 1
        if x < y:
            return -1
    return 0


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, nested to any depth."""
    stack: list[tuple[list[str], int]] = []
    current: list[str] = []
    count = ""
    for ch in s:
        if ch.isdigit():
            count += ch
        elif ch == "[":
            stack.append((current, int(count) if count else 1))
            current, count = [], ""
        elif ch == "]":
            if not stack:
                raise ValueError("unbalanced ']'")
            outer, repeat = stack.pop()
            outer.append("".join(current) * repeat)
            current = outer
        else:
            current.append(ch)
    if stack:
        raise ValueError("unbalanced '['")
    return "".join(current)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATORS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer reverse Polish notation; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        op = _OPERATORS.get(token)
        if op is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(op(left, right))
    if not stack:
        raise ValueError("no value to return")
    return stack[-1]