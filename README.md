# labkit

Two number types, a few simple containers and a set of solvers for
competitive-programming problems. It uses only the standard library.

## Number types

`labkit.complexnum.Complex` is a mutable complex number with float parts
`re` and `im`. It prints as `{re,im}`. `Complex.parse` reads the same form
and allows whitespace around the parts. Arithmetic works with other
`Complex` values and with plain `int` or `float` operands on either side.
Two values are equal when both parts differ by less than twice the machine
epsilon. Instances are not hashable.

`labkit.rational.Rational` is an immutable fraction. It is always kept in
lowest terms with a positive denominator, which the `num` and `den`
properties expose. It prints as `num/den`. `Rational.parse` reads `num/den`
with no spaces around the slash and requires a positive denominator. It
supports arithmetic and ordering against other `Rational` values and plain
`int` values. `Rational.gcd(a, b)` is also available.

```python
from labkit.complexnum import Complex
from labkit.rational import Rational

str(Complex(1, 2) + Complex(3, 4))    # '{4,6}'
Complex.parse("{1, -3}")

str(Rational(1, 2) + Rational(1, 3))  # '5/6'
Rational.parse("-1/4") < 0            # True
```

Errors are raised as follows:

- Dividing by zero raises `ZeroDivisionError`.
- Giving `parse` malformed text raises `ValueError`.
- A zero denominator in `Rational(...)` raises `ValueError`.

## Containers

- `labkit.arrayd.ArrayD(size)` is a resizable array of floats. It supports
  `len()`, indexing, iteration, `resize`, `insert`, `remove` and `copy`.
  New slots hold `0.0`. A size given to the constructor must be positive.
  An index out of range raises `IndexError`.
- `labkit.arrayt.ArrayT(size, factory=int)` is the same kind of array for
  any values. New slots are made by calling `factory`. `capacity()` reports
  the largest length reached so far.
- `labkit.stackl.StackL` is a stack of byte values (0 to 255). It has
  `push`, `pop`, `top`, `is_empty`, `clear` and `copy`.
- `labkit.queuea.QueueA` is a FIFO queue of byte values with the same
  methods.
- `labkit.queuel.QueueL` is a FIFO queue that rounds values to single
  precision. It has `push`, `pop`, `top`, `is_empty` and `clear`.

These containers handle edge cases as follows:

- `pop` on an empty stack or queue does nothing.
- `top` on an empty stack or queue raises `IndexError`.
- Pushing a value outside 0 to 255 onto a byte container raises
  `ValueError`.

## Problem solvers

`labkit.codeforces_a` and `labkit.codeforces_b` hold functions named
`solve_<problem>`, for example `solve_0004a` or `solve_1873d`. Each one
takes the full input text of a problem and returns its output text.
`labkit.codeforces_b.run(problem, text)` selects a solver by its problem
code.

```python
from labkit.codeforces_a import solve_0004a
from labkit.codeforces_b import run

solve_0004a("8")       # 'YES'
run("0617a", "12")     # '3'
```

Problem 1407C is interactive. `solve_1407c(n, ask)` takes a callable
`ask(i, j)` that answers each query with a 1-based pair. It returns the
recovered list of values.

## Command line

`labkit-solve` reads a problem's input from standard input and prints the
answer:

```
echo 8 | labkit-solve 0004a
```

For `1407c` the command runs the interaction over standard input and
standard output:

1. It reads `n`.
2. It prints each query as `? i j` and reads the answer to it.
3. It prints the result as `! ...`.