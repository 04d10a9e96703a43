# pushswap

The puzzle uses two stacks, `a` and `b`, and a small set of operations:

| op    | effect                                  |
|-------|-----------------------------------------|
| `sa` `sb` `ss` | swap the top two items of a, b, or both |
| `pa` `pb`      | move the top of b onto a, or the top of a onto b |
| `ra` `rb` `rr` | rotate a, b, or both (the top goes to the bottom) |
| `rra` `rrb` `rrr` | reverse-rotate a, b, or both (the bottom goes to the top) |

The first number given is the top of `a`. The goal is to leave `a` in
ascending order from the top, with `b` empty.

## Install

```
pip install .
```

This installs `pygame`, which the playback window uses.

## Finding a sequence of operations

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

You can give the numbers as separate arguments or as one quoted argument
separated by spaces. The command prints the operations one per line. Arguments
that start with a dash and no digit after it are read as option letters
(`c`, `v`, `o`, `g`). The command accepts them but does not act on them. If
no numbers can be read, it prints `Damn son !`.

## Checking a sequence of operations

```
push-swap 3 2 5 1 4 | push-swap-checker 3 2 5 1 4
```

`push-swap-checker` reads operations from standard input, one per line, and
applies them to the numbers given as arguments. Then it prints one of:

- `OK` if `a` is sorted and `b` is empty;
- `KO` otherwise;
- `Error` on standard error, with exit status 255, if a number is not a
  valid 32-bit integer, a number appears twice, or a line is not a known
  operation.

Run without arguments, it prints nothing.

## Using it from Python

```python
from pushswap.solver import solve
from pushswap.bench import Bench
from pushswap.display import render_stacks
from pushswap.graphics import Viewer

values = [3, 2, 5, 1, 4]
ops = solve(values)          # e.g. ["pb", "pb", ...]

bench = Bench(values)
bench.ops = ops
bench.step_forward()         # apply the next recorded operation
bench.step_backward()        # undo it
print(render_stacks(bench, show_op=True))  # coloured terminal picture

Viewer(bench).run()          # play the operations back in a pygame window
```

- `pushswap.stacks`: the `Stack` class, plus `move_top` and `format_stack`.
- `pushswap.args.parse_args` splits arguments into the numbers and the
  `Option` flags.
- `pushswap.checker` provides `parse_numbers`, `has_duplicates`,
  `apply_instruction`, `apply_instructions` and `is_sorted`. It raises
  `CheckerError` on invalid input.
- `pushswap.solver.insertion_sort` sorts a `Bench` in place and records the
  operations it uses. `record_op` cancels or merges the new operation with
  the previous one where it can: for example, `ra` then `rra` cancel out, and
  `sa` then `sb` become `ss`.
- `pushswap.printf.sprintf` and `printf` implement a printf-style formatter.
  On top of the usual conversions it has `%b` (binary), `%r` (escaped raw
  text), `%k` (a 24-bit colour style) and `%K` (reset).

The `Viewer` window starts paused. Keys:

| key | action |
|-----|--------|
| space | pause or resume |
| up / down | change the delay between steps |
| left / right | step one operation |
| `r` | reverse the direction |
| `q` / escape | quit |

## What it does not do

No command opens the playback window or the terminal display. Both are
available only from Python, as shown above. The option letters that
`push-swap` accepts do not change what it prints.