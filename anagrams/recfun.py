"""Small recursive exercises: Pascal's triangle, parenthesis balance, coin change."""

from __future__ import annotations

from collections.abc import Iterable


def pascal(c: int, r: int) -> int:
    """Value at column *c* of row *r* of Pascal's triangle (both 0-based).

    Positions outside the triangle are 0.
    """
    if r < 0 or c < 0 or c > r:
        return 0
    if r == 0:
        return 1
    return pascal(c - 1, r - 1) + pascal(c, r - 1)


def balance(chars: Iterable[str]) -> bool:
    """True if the parentheses in *chars* are balanced.

    A closing parenthesis with no open one to match fails immediately,
    so ``")("`` is unbalanced even though the counts agree.
    """
    depth = 0
    for ch in chars:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def count_change(money: int, coins: Iterable[int]) -> int:
    """Number of ways to give *money* using any number of each coin.

    Duplicate and non-positive denominations are ignored.
    """
    denominations = sorted({coin for coin in coins if coin > 0}, reverse=True)

    def _count(amount: int, usable: list[int]) -> int:
        if amount == 0:
            return 1
        if amount < 0 or not usable:
            return 0
        # Either use the largest coin at least once, or never use it
        return _count(amount - usable[0], usable) + _count(amount, usable[1:])

    return _count(money, denominations)
