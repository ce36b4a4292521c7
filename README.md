# pushswap

Sorts a list of distinct integers using two stacks, **a** and **b**, and a
small fixed set of operations. The program prints the operations it performs,
one per line, so that the sequence can be replayed or checked.

## Operations

Each move is a method of `pushswap.stacks.Stacks`. The name written to the
output is the one in the second column.

| Method | Written as | Effect                                    |
|--------|------------|-------------------------------------------|
| `sa`   | `sa`       | swap the top two numbers of stack a       |
| `sb`   | `sb`       | swap the top two numbers of stack b       |
| `ss`   | `ss`       | `sa` and `sb` together                    |
| `pa`   | `pa`       | move the top of b onto a                  |
| `pb`   | `pb`       | move the top of a onto b                  |
| `ra`   | `ra`       | rotate a up (top goes to the bottom)      |
| `rb`   | `rb`       | rotate b up                               |
| `rr`   | `rs`       | `ra` and `rb` together                    |
| `rra`  | `rra`      | rotate a down (bottom goes to the top)    |
| `rrb`  | `rrb`      | rotate b down                             |
| `rrr`  | `rrs`      | `rra` and `rrb` together                  |

Swapping a stack with fewer than two numbers, or pushing from an empty stack,
raises `IndexError`. A stack holds at most 1024 numbers.

## Installation

```
pip install .
```

## Command line

Pass the numbers either as separate arguments or as one quoted string
(split on spaces):

```
push-swap 3 2 1
push-swap "3 2 1"
```

The first number given is the top of stack a. With six numbers or fewer a
hand-written small sort is used; larger inputs are split into value chunks
pushed to stack b and then moved back, largest first.

Each argument must consist of digits with an optional leading `+` or `-`,
lie within the 32-bit signed range, and no number may appear twice. On bad
input, or more than 1024 numbers, the program prints a usage message to
standard output and exits with status 1. With no arguments it does nothing
and exits with status 0.

## Library use

```python
import io
from pushswap.sorting import solve

out = io.StringIO()
operations = solve([3, 2, 1], out)
print(operations)        # the moves, also written to `out`
```

`solve` writes to standard output when `out` is omitted and raises
`ValueError` when numbers repeat. The individual strategies (`smallsort`,
`sort3`, `sort5`, `chunk_sort`, `supersort`) are in `pushswap.sorting` and
work on a `Stacks` object, whose `operations` list records every move and
whose `is_sorted()` tells whether b is empty and a ascends from top to bottom.

`pushswap.arguments.parse_arguments` checks and converts command-line strings,
raising `pushswap.arguments.ArgumentError` (a `ValueError`) on invalid input.

The package also carries small helper modules:
`pushswap.strings` (splitting, trimming, `atoi` with 32-bit wrap-around and
friends), `pushswap.output` (a minimal `printf` with `%s %c %d %i %u %p %x %X
%%`), `pushswap.lines` (`LineReader`, reading lines from a stream in
fixed-size chunks), `pushswap.linked_list` (`LinkedList`), `pushswap.memory`
(byte-buffer fill, copy, search and compare) and `pushswap.chars` (ASCII
classification and case conversion).

## What it does not do

There is no checker command that reads a sequence of moves and verifies that
it sorts a given input. To check a result in code, replay the moves on a
`Stacks` object and call `is_sorted()`.

## Running the tests

```
pip install .[test]
pytest
```