# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of instructions. A companion checker replays an instruction list and
tells you whether it leaves the numbers sorted.

## Instructions

| Instruction | Effect |
|-------------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, `b`, or both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate up: the top element goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate down: the bottom element goes to the top |

An instruction with nothing to act on (swapping a stack of fewer than two
elements, pushing from an empty stack) leaves the stacks unchanged.

## Installing

```
pip install .
```

## Producing instructions

Give the numbers as separate arguments, as quoted space-separated groups, or a
mix of both. The first number is the top of stack `a`:

```
push-swap 3 2 1
push-swap "4 67 3" 87 23
```

The instructions are written to standard output, one per line. Nothing is
written if the input is already sorted or if no arguments are given. Input
that holds a stray character or sign, lies outside the 32-bit signed range,
or repeats a value prints `Error` to standard error and exits with status 1.

Two and three numbers are handled by fixed rules, four and five by parking
the smallest values on `b`. Six or more are pushed to `b` in widening bands
around the median and then brought back to `a` largest first.

## Checking instructions

The checker takes the same numbers and reads instructions from standard input,
one per line:

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

It prints `OK` when stack `a` ends sorted and stack `b` empty, and `KO`
otherwise. A line is accepted when it is the start of an instruction followed
by a newline, so a last line without its newline still counts. Any other line
prints `Error` to standard error and exits with status 1.

## From Python

```python
from pushswap.push_swap import solve
from pushswap.checker import run

ops = solve([3, 2, 1])
lines = [f"{op}\n" for op in ops]
print(run([3, 2, 1], lines))   # True
```

- `pushswap.stacks.Stacks` holds the two stacks as deques and applies
  operations (`swap`, `push`, `rotate`, `reverse`, their `_both` forms, and
  `apply` for an `Op` or its name). With `record=True` it collects the
  operations it carried out in `ops`.
- `pushswap.parsing.parse_args` turns command-line strings into integers,
  raising `pushswap.parsing.InputError` on bad input.
- `pushswap.small_sort` and `pushswap.big_sort` hold the sorting strategies;
  `pushswap.push_swap.is_sorted` and `pushswap.checker.check_sorted` test the
  result.
- `pushswap.lines.LineReader` reads a file descriptor or stream line by line
  through a fixed-size buffer; `LineReaderPool` keeps one reader per file
  descriptor.

The package also carries a few small helpers: `pushswap.text` (character
classes, `atoi`, `split`, `strtrim` and similar), `pushswap.cstrings`
(NUL-terminated string functions such as `strlen`, `strncmp` and `strlcpy`)
and `pushswap.printf` (`format_string` and `printf` for the `%d %i %u %c %s
%p %x %X %%` conversions).

## Running the tests

```
pip install .[test]
pytest
```