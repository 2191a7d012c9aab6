"""More competitive-programming solutions, a dispatcher and a command line."""

from __future__ import annotations

import argparse
import math
import sys
from collections import Counter
from typing import Callable, Iterator, Sequence

from labkit import codeforces_a
from labkit.codeforces_a import _NO_ANSWER, _each_case, _Tokens, _trunc_div


def _chars(tokens: _Tokens, count: int) -> list[str]:
    """Read ``count`` non-blank characters, however they are split into words."""
    chars: list[str] = []
    while len(chars) < count:
        chars.extend(tokens.word())
    if len(chars) != count:
        raise ValueError("grid row does not end where expected")
    return chars


def _equal_parity_1407a(tokens: _Tokens) -> list[str]:
    counts = Counter(tokens.ints(tokens.int()))
    ones = counts[1]
    zeros = sum(count for value, count in counts.items() if value != 1)
    if zeros < ones:
        kept, digit = ones - ones % 2, "1"
    else:
        kept, digit = zeros, "0"
    return [str(kept), " ".join([digit] * kept)]


def solve_1407a(text: str) -> str:
    """Keep at least half of a 0/1 array so the alternating sum is zero."""
    return _each_case(text, _equal_parity_1407a)


def _gcd_order_1407b(tokens: _Tokens) -> list[str]:
    remaining = tokens.ints(tokens.int())
    current = max(remaining)
    remaining.remove(current)
    order = [current]
    while remaining:
        index, value = max(
            enumerate(remaining), key=lambda pair: math.gcd(current, pair[1])
        )
        del remaining[index]
        order.append(value)
        current = math.gcd(current, value)
    return [" ".join(map(str, order))]


def solve_1407b(text: str) -> str:
    """Order numbers so that the sequence of prefix gcds is largest."""
    return _each_case(text, _gcd_order_1407b)


def solve_1407c(n: int, ask: Callable[[int, int], int]) -> list[int]:
    """Recover a hidden permutation; ``ask(x, y)`` answers ``p[x] mod p[y]`` (1-based)."""
    values = [-1] * n
    candidate = 0
    for index in range(1, n):
        forward = ask(candidate + 1, index + 1)
        backward = ask(index + 1, candidate + 1)
        if forward > backward:
            values[candidate] = forward
            candidate = index
        else:
            values[index] = backward
    values[candidate] = n
    return values


def _arrival_1501a(tokens: _Tokens) -> list[str]:
    count = tokens.int()
    stations = [(tokens.int(), tokens.int()) for _ in range(count)]
    delays = tokens.ints(count)
    time = stations[0][0] + delays[0]
    for (arrive, depart), (next_arrive, _), delay in zip(
        stations, stations[1:], delays[1:]
    ):
        time = max(depart, time + _trunc_div(depart - arrive + 1, 2))
        time += next_arrive - depart + delay
    return [str(time)]


def solve_1501a(text: str) -> str:
    """Moment of arrival at the last station of a delayed train."""
    return _each_case(text, _arrival_1501a)


def _rectangle_1512b(tokens: _Tokens) -> list[str]:
    size = tokens.int()
    stars = [divmod(k, size) for k, ch in enumerate(_chars(tokens, size * size)) if ch == "*"]
    (row1, col1), (row2, col2) = stars[0], stars[-1]
    if row1 == row2:
        row1 = 0 if min(row1, row2) != 0 else size - 1
    if col1 == col2:
        col1 = 0 if min(col1, col2) != 0 else size - 1
    rows, cols = {row1, row2}, {col1, col2}
    return [
        "".join("*" if i in rows and j in cols else "." for j in range(size))
        for i in range(size)
    ]


def solve_1512b(text: str) -> str:
    """Add two stars so that four stars form a rectangle."""
    return _each_case(text, _rectangle_1512b)


def _palindrome_1512c(tokens: _Tokens) -> list[str]:
    zeros, ones = tokens.int(), tokens.int()
    total = zeros + ones
    chars = list(tokens.word()[:total])
    left = {"0": zeros - chars.count("0"), "1": ones - chars.count("1")}
    half = total // 2
    for i in range(half):
        j = total - 1 - i
        if chars[i] == chars[j]:
            continue
        if chars[i] != "?" and chars[j] != "?":
            return ["-1"]
        digit = chars[j] if chars[i] == "?" else chars[i]
        if left[digit] == 0:
            return ["-1"]
        left[digit] -= 1
        chars[i] = chars[j] = digit
    for i in range(half):
        if chars[i] != "?":
            continue
        if left["0"] >= 2:
            digit = "0"
        elif left["1"] >= 2:
            digit = "1"
        else:
            return ["-1"]
        left[digit] -= 2
        chars[i] = chars[total - 1 - i] = digit
    if total % 2 == 1 and chars[half] == "?":
        digit = "0" if left["0"] != 0 else "1"
        chars[half] = digit
        left[digit] -= 1
    if min(left.values()) < 0:
        return ["-1"]
    return ["".join(chars)]


def solve_1512c(text: str) -> str:
    """Fill ``?`` to get a palindrome with given numbers of zeros and ones."""
    return _each_case(text, _palindrome_1512c)


def _flower_1585a(tokens: _Tokens) -> list[str]:
    height = 1
    watered = False
    alive = True
    for day, item in enumerate(tokens.ints(tokens.int())):
        if item == 1:
            height += 5 if watered else 1
            watered = True
        elif watered or day == 0:
            watered = False
        else:
            alive = False
    return [str(height if alive else -1)]


def solve_1585a(text: str) -> str:
    """Height of a flower after watering days, or -1 if it dies."""
    return _each_case(text, _flower_1585a)


def _zeros_1649a(tokens: _Tokens) -> list[str]:
    values = tokens.ints(tokens.int())
    zeros = [index for index, value in enumerate(values) if value == 0]
    return [str(zeros[-1] - zeros[0] + 2 if zeros else 0)]


def solve_1649a(text: str) -> str:
    """Coins to jump over the stretch of water between the outermost zeros."""
    return _each_case(text, _zeros_1649a)


def _special_1670b(tokens: _Tokens) -> list[str]:
    length = tokens.int()
    password_text = tokens.word()
    special = set(_chars(tokens, tokens.int()))
    best = -_NO_ANSWER
    run = 0
    for following in reversed(password_text[1:length]):
        if following in special:
            run = 1
        elif run:
            run += 1
        best = max(best, run)
    return [str(best)]


def solve_1670b(text: str) -> str:
    """Longest time the special-letter deletion game can go on."""
    return _each_case(text, _special_1670b)


def _blocks_1671a(tokens: _Tokens) -> list[str]:
    word = tokens.word()
    if len(word) == 1 or word[0] != word[1] or word[-1] != word[-2]:
        return ["NO"]
    for before, middle, after in zip(word, word[1:], word[2:]):
        if before == after and middle != after:
            return ["NO"]
    return ["YES"]


def solve_1671a(text: str) -> str:
    """Can a string be built from blocks ``aa``, ``aaa``, ``bb`` and ``bbb``."""
    return _each_case(text, _blocks_1671a)


def _zero_out_1678a(tokens: _Tokens) -> list[str]:
    values = tokens.ints(tokens.int())
    count = len(values)
    zeros = values.count(0)
    if zeros:
        return [str(count - zeros)]
    if len(set(values)) < count:
        return [str(count)]
    return [str(count + 1)]


def solve_1678a(text: str) -> str:
    """Operations needed to make every element zero."""
    return _each_case(text, _zero_out_1678a)


def _robots_1680b(tokens: _Tokens) -> list[str]:
    rows, cols = tokens.int(), tokens.int()
    robots = [divmod(k, cols) for k, ch in enumerate(_chars(tokens, rows * cols)) if ch == "R"]
    if not robots:
        return ["NO"]
    corner = (min(r for r, _ in robots), min(c for _, c in robots))
    return ["YES" if corner in robots else "NO"]


def solve_1680b(text: str) -> str:
    """Can all robots move up-left so that one reaches the corner."""
    return _each_case(text, _robots_1680b)


def _bishop_1692c(tokens: _Tokens) -> list[str]:
    cells = _chars(tokens, 64)
    board = [cells[row * 8:row * 8 + 8] for row in range(8)]
    for i in range(1, 7):
        for j in range(1, 7):
            if all(
                board[i + di][j + dj] == "#"
                for di, dj in ((0, 0), (-1, -1), (1, 1), (-1, 1), (1, -1))
            ):
                return [f"{i + 1} {j + 1}"]
    return []


def solve_1692c(text: str) -> str:
    """Position of the bishop that attacks the marked cells."""
    return _each_case(text, _bishop_1692c)


def _grass_1701a(tokens: _Tokens) -> list[str]:
    amount = sum(tokens.ints(4))
    return [str(0 if amount == 0 else 2 if amount == 4 else 1)]


def solve_1701a(text: str) -> str:
    """Moves to mow a 2x2 lawn."""
    return _each_case(text, _grass_1701a)


def _pattern_1717b(tokens: _Tokens) -> list[str]:
    size, period, row, col = tokens.int(), tokens.int(), tokens.int(), tokens.int()
    colour = (col % period + row - 1) % period
    return [
        "".join(
            "X" if ((i + 1) % period + j) % period == colour else "."
            for j in range(size)
        )
        for i in range(size)
    ]


def solve_1717b(text: str) -> str:
    """A good grid with the fewest ``X`` that has ``X`` at a given cell."""
    return _each_case(text, _pattern_1717b)


def _increase_1717c(tokens: _Tokens) -> list[str]:
    count = tokens.int()
    old = tokens.ints(count)
    new = tokens.ints(count)
    following = new[1:] + new[:1]
    for before, after, neighbour in zip(old, new, following):
        if before > after or (after > neighbour + 1 and after != before):
            return ["no"]
    return ["yes"]


def solve_1717c(text: str) -> str:
    """Can one array be turned into another by allowed increments."""
    return _each_case(text, _increase_1717c)


def _within(point: tuple[int, int], laser: tuple[int, int], distance: int) -> bool:
    return abs(point[0] - laser[0]) + abs(point[1] - laser[1]) <= distance


def _laser_1721b(tokens: _Tokens) -> list[str]:
    height, width = tokens.int(), tokens.int()
    laser = (tokens.int(), tokens.int())
    distance = tokens.int()
    row, col = laser
    right = _within((row, width), laser, distance)
    bottom = _within((height, col), laser, distance)
    left = _within((row, 1), laser, distance)
    top = _within((1, col), laser, distance)
    blocked = (right and bottom) or (left and top) or (left and right) or (bottom and top)
    return [str(-1 if blocked else height + width - 2)]


def solve_1721b(text: str) -> str:
    """Shortest path across a grid that avoids a laser's reach, or -1."""
    return _each_case(text, _laser_1721b)


def _tanks_1872a(tokens: _Tokens) -> list[str]:
    first, second, cup = tokens.int(), tokens.int(), tokens.int()
    if first == second:
        return ["0"]
    return [str((abs(second - first) - 1) // (2 * cup) + 1)]


def solve_1872a(text: str) -> str:
    """Pourings needed to make two vessels equal."""
    return _each_case(text, _tanks_1872a)


def _target_1873c(tokens: _Tokens) -> list[str]:
    rows = [tokens.word() for _ in range(10)]
    score = 0
    for i, line in enumerate(rows):
        for j, ch in enumerate(line[:10]):
            if ch == "X":
                score += min((9 - j if j > 4 else j) + 1, (9 - i if i > 4 else i) + 1)
    return [str(score)]


def solve_1873c(text: str) -> str:
    """Score of arrows on a square target of five rings."""
    return _each_case(text, _target_1873c)


def _strip_1873d(tokens: _Tokens) -> list[str]:
    length, width = tokens.int(), tokens.int()
    strip = tokens.word()
    operations = 0
    i = 0
    while i < length:
        if strip[i] == "B":
            operations += 1
            i += width
        else:
            i += 1
    return [str(operations)]


def solve_1873d(text: str) -> str:
    """Fewest width-k whitening operations to remove every black cell."""
    return _each_case(text, _strip_1873d)


_SOLVERS: dict[str, Callable[[str], str]] = {
    "0004a": codeforces_a.solve_0004a,
    "0004b": codeforces_a.solve_0004b,
    "0136a": codeforces_a.solve_0136a,
    "0263a": codeforces_a.solve_0263a,
    "0271a": codeforces_a.solve_0271a,
    "0276a": codeforces_a.solve_0276a,
    "0276b": codeforces_a.solve_0276b,
    "0276c": codeforces_a.solve_0276c,
    "0339a": codeforces_a.solve_0339a,
    "0339b": codeforces_a.solve_0339b,
    "0617a": codeforces_a.solve_0617a,
    "0915a": codeforces_a.solve_0915a,
    "0935b": codeforces_a.solve_0935b,
    "0978a": codeforces_a.solve_0978a,
    "0978b": codeforces_a.solve_0978b,
    "1330a": codeforces_a.solve_1330a,
    "1330b": codeforces_a.solve_1330b,
    "1352a": codeforces_a.solve_1352a,
    "1404a": codeforces_a.solve_1404a,
    "1405a": codeforces_a.solve_1405a,
    "1405b": codeforces_a.solve_1405b,
    "1406a": codeforces_a.solve_1406a,
    "1406b": codeforces_a.solve_1406b,
    "1407a": solve_1407a,
    "1407b": solve_1407b,
    "1501a": solve_1501a,
    "1512b": solve_1512b,
    "1512c": solve_1512c,
    "1585a": solve_1585a,
    "1649a": solve_1649a,
    "1670b": solve_1670b,
    "1671a": solve_1671a,
    "1678a": solve_1678a,
    "1680b": solve_1680b,
    "1692c": solve_1692c,
    "1701a": solve_1701a,
    "1717b": solve_1717b,
    "1717c": solve_1717c,
    "1721b": solve_1721b,
    "1872a": solve_1872a,
    "1873c": solve_1873c,
    "1873d": solve_1873d,
}

_INTERACTIVE = "1407c"


def run(problem: str, text: str) -> str:
    """Solve ``problem`` (such as ``"1671a"``) for the given input text."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"no text solver for problem {problem!r}") from None
    return solver(text)


def _stream_tokens(stream) -> Iterator[str]:
    for line in iter(stream.readline, ""):
        yield from line.split()


def _interact() -> None:
    tokens = _stream_tokens(sys.stdin)
    size = int(next(tokens))

    def ask(first: int, second: int) -> int:
        print(f"? {first} {second}", flush=True)
        return int(next(tokens))

    values = solve_1407c(size, ask)
    print("! " + " ".join(map(str, values)), flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a problem's input from standard input and print its answer."""
    parser = argparse.ArgumentParser(prog="labkit-codeforces")
    parser.add_argument("problem", choices=sorted([*_SOLVERS, _INTERACTIVE]))
    args = parser.parse_args(argv)
    if args.problem == _INTERACTIVE:
        _interact()
    else:
        print(run(args.problem, sys.stdin.read()))
    return 0