"""Solutions to competitive-programming problems that read text and return text."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Callable, Iterator

_NO_ANSWER = 10**9


class _Tokens:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def int(self) -> int:
        return int(self.word())

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]


def _trunc_div(lhs: int, rhs: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


def _each_case(text: str, solve: Callable[[_Tokens], list[str]]) -> str:
    """Read a test count, then solve that many cases and join their lines."""
    tokens = _Tokens(text)
    lines: list[str] = []
    for _ in range(tokens.int()):
        lines.extend(solve(tokens))
    return "\n".join(lines)


def solve_0004a(text: str) -> str:
    """Can a watermelon of weight ``w`` be split into two even parts."""
    weight = _Tokens(text).int()
    return "YES" if weight % 2 == 0 and weight != 2 else "NO"


def solve_0004b(text: str) -> str:
    """Fit daily study hours into given bounds so that they sum to a total."""
    tokens = _Tokens(text)
    days, total = tokens.int(), tokens.int()
    bounds = [(tokens.int(), tokens.int()) for _ in range(days)]
    lowest = sum(low for low, _ in bounds)
    highest = sum(high for _, high in bounds)
    if not lowest <= total <= highest:
        return "NO"
    spare = total - lowest
    hours = []
    for low, high in bounds:
        if spare + low >= high:
            spare -= high - low
            hours.append(high)
        elif spare:
            hours.append(low + spare)
            spare = 0
        else:
            hours.append(low)
    return "\n".join(["YES", " ".join(map(str, hours))])


def solve_0136a(text: str) -> str:
    """Invert a permutation: who gave a present to each friend."""
    tokens = _Tokens(text)
    count = tokens.int()
    givers = [0] * count
    for giver, receiver in enumerate(tokens.ints(count), start=1):
        givers[receiver - 1] = giver
    return " ".join(map(str, givers))


def solve_0263a(text: str) -> str:
    """Moves needed to bring the single one of a 5x5 matrix to its centre."""
    tokens = _Tokens(text)
    row = col = 0
    for i in range(5):
        for j in range(5):
            if tokens.int() == 1:
                row, col = i, j
    return str(abs(2 - row) + abs(2 - col))


def solve_0271a(text: str) -> str:
    """The first year after ``y`` whose four digits are all different."""
    year = _Tokens(text).int() + 1
    while len({year // 1000, year % 1000 // 100, year % 100 // 10, year % 10}) != 4:
        year += 1
    return str(year)


def solve_0276a(text: str) -> str:
    """Best joy among restaurants given a lunch-break limit."""
    tokens = _Tokens(text)
    count, limit = tokens.int(), tokens.int()
    best = -_NO_ANSWER
    for _ in range(count):
        joy, duration = tokens.int(), tokens.int()
        best = max(best, joy if duration <= limit else joy - (duration - limit))
    return str(best)


def solve_0276b(text: str) -> str:
    """Which player wins the palindrome-removal game."""
    word = _Tokens(text).word()
    counts = Counter(word)
    odd = sum(1 for letter in word if counts[letter] % 2 == 1)
    return "First" if odd <= 1 or odd % 2 == 1 else "Second"


def solve_0276c(text: str) -> str:
    """Largest total of range-sum queries after reordering the array."""
    tokens = _Tokens(text)
    size, queries = tokens.int(), tokens.int()
    values = tokens.ints(size)
    delta = [0] * (size + 1)
    for _ in range(queries):
        left, right = tokens.int() - 1, tokens.int() - 1
        delta[left] += 1
        delta[right + 1] -= 1
    coverage = []
    running = 0
    for change in delta[:size]:
        running += change
        coverage.append(running)
    values.sort(reverse=True)
    coverage.sort(reverse=True)
    return str(sum(value * times for value, times in zip(values, coverage)))


def solve_0339a(text: str) -> str:
    """Rewrite a sum of ones, twos and threes in non-decreasing order."""
    expression = _Tokens(text).word()
    return "+".join(sorted(ch for ch in expression if ch in "123"))


def solve_0339b(text: str) -> str:
    """Time to visit houses in order along a one-way ring road."""
    tokens = _Tokens(text)
    houses, tasks = tokens.int(), tokens.int()
    position = 1
    cost = 0
    for house in tokens.ints(tasks):
        cost += house - position if house >= position else houses - position + house
        position = house
    return str(cost)


def solve_0617a(text: str) -> str:
    """Fewest steps of length one to five to cover a distance."""
    distance = _Tokens(text).int()
    return str(_trunc_div(distance - 1, 5) + 1)


def solve_0915a(text: str) -> str:
    """Fewest hours to water a garden with a single bucket size."""
    tokens = _Tokens(text)
    count, length = tokens.int(), tokens.int()
    hours = [length // bucket for bucket in tokens.ints(count) if length % bucket == 0]
    return str(min(hours, default=_NO_ANSWER))


def solve_0935b(text: str) -> str:
    """Coins paid for crossing the diagonal along a walk."""
    tokens = _Tokens(text)
    steps, walk = tokens.int(), tokens.word()
    cost = 0
    touched = False
    below = True
    x = y = 0
    for move in walk[:steps]:
        if move == "R":
            x += 1
        else:
            y += 1
        if touched and ((below and x < y) or (not below and x > y)):
            cost += 1
        if x == y:
            touched = True
        else:
            below = x >= y
    return str(cost)


def solve_0978a(text: str) -> str:
    """Remove duplicates, keeping the rightmost occurrence of each value."""
    tokens = _Tokens(text)
    values = tokens.ints(tokens.int())
    remaining = Counter(values)
    kept = []
    for value in values:
        if remaining[value] > 1:
            remaining[value] -= 1
        else:
            kept.append(value)
    return "\n".join([str(len(kept)), " ".join(map(str, kept))])


def solve_0978b(text: str) -> str:
    """Letters to delete so that no three ``x`` stand in a row."""
    tokens = _Tokens(text)
    length, name = tokens.int(), tokens.word()
    runs = (len(list(group)) for key, group in groupby(name[:length]) if key == "x")
    return str(sum(max(0, run - 2) for run in runs))


def _place_1330a(tokens: _Tokens) -> list[str]:
    count, extra = tokens.int(), tokens.int()
    taken = set(tokens.ints(count))
    for place in range(1, 101):
        if place not in taken:
            if extra == 0:
                return [str(place - 1)]
            extra -= 1
    return [str(100 + extra)]


def solve_1330a(text: str) -> str:
    """Largest ``v`` such that all places 1..v can be collected."""
    return _each_case(text, _place_1330a)


def _permutation_prefixes(values: list[int]) -> list[bool]:
    """Flag for each prefix length whether the prefix is a permutation of 1..k."""
    flags = [False]
    seen: set[int] = set()
    duplicated = False
    largest = 0
    for value in values:
        duplicated = duplicated or value in seen
        seen.add(value)
        largest = max(largest, value)
        flags.append(not duplicated and len(seen) == largest)
    return flags


def _split_1330b(tokens: _Tokens) -> list[str]:
    values = tokens.ints(tokens.int())
    size = len(values)
    ones = [index for index, value in enumerate(values) if value == 1]
    if len(ones) != 2:
        return ["0"]
    first, second = ones
    prefix = _permutation_prefixes(values)
    suffix = _permutation_prefixes(values[::-1])[::-1]
    splits = [k for k in range(first + 1, second + 1) if prefix[k] and suffix[k]]
    return [str(len(splits))] + [f"{k} {size - k}" for k in splits]


def solve_1330b(text: str) -> str:
    """All ways to cut a sequence into two permutations."""
    return _each_case(text, _split_1330b)


def _round_1352a(tokens: _Tokens) -> list[str]:
    number = tokens.int()
    digits = [
        (number // 1000, 1000),
        (number % 1000 // 100, 100),
        (number % 100 // 10, 10),
        (number % 10, 1),
    ]
    parts = [digit * scale for digit, scale in digits if digit]
    return [str(len(parts)), " ".join(map(str, parts))]


def solve_1352a(text: str) -> str:
    """Write a number as a sum of round numbers."""
    return _each_case(text, _round_1352a)


def _balanced_1404a(tokens: _Tokens) -> list[str]:
    length, period = tokens.int(), tokens.int()
    line = tokens.word()
    pattern = ["?"] * period
    for index, char in enumerate(line[:length]):
        slot = index % period
        if char == "?":
            continue
        if pattern[slot] == "?":
            pattern[slot] = char
        elif pattern[slot] != char:
            return ["NO"]
    zeros = pattern.count("0")
    ones = pattern.count("1")
    if zeros > period // 2 or ones > period // 2:
        return ["NO"]
    return ["YES"]


def solve_1404a(text: str) -> str:
    """Can the ``?`` be filled so that every window of length k is balanced."""
    return _each_case(text, _balanced_1404a)


def _reverse_1405a(tokens: _Tokens) -> list[str]:
    values = tokens.ints(tokens.int())
    return [" ".join(map(str, reversed(values)))]


def solve_1405a(text: str) -> str:
    """A different permutation with the same fingerprint: the reverse."""
    return _each_case(text, _reverse_1405a)


def _coins_1405b(tokens: _Tokens) -> list[str]:
    balance = 0
    for value in tokens.ints(tokens.int()):
        balance = max(0, balance + value)
    return [str(balance)]


def solve_1405b(text: str) -> str:
    """Coins spent to bring a zero-sum array to all zeros."""
    return _each_case(text, _coins_1405b)


def _mex_1406a(tokens: _Tokens) -> list[str]:
    counts = Counter(tokens.ints(tokens.int()))
    first_single: int | None = None
    for value in range(101):
        if counts[value] == 0:
            return [str(2 * value if first_single is None else first_single + value)]
        if counts[value] == 1 and first_single is None:
            first_single = value
    return []


def solve_1406a(text: str) -> str:
    """Largest sum of the mex values of two subsets."""
    return _each_case(text, _mex_1406a)


def _product_1406b(tokens: _Tokens) -> list[str]:
    values = sorted(tokens.ints(tokens.int()))
    candidates = [
        values[0] * values[1] * values[2] * values[3] * values[-1],
        values[0] * values[1] * values[-3] * values[-2] * values[-1],
        values[-5] * values[-4] * values[-3] * values[-2] * values[-1],
    ]
    return [str(max(candidates))]


def solve_1406b(text: str) -> str:
    """Largest product of five elements."""
    return _each_case(text, _product_1406b)