# syslab

A collection of small systems-programming exercises as a plain Python
package: a debugging memory allocator over a simulated heap, a terminal snake
game, a doubly linked list, CPU scheduling simulations, a threaded log writer
and a few text helpers.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library overview

- `syslab.dmalloc` — `DebugAllocator` tracks allocations on a simulated heap
  provided by `BaseAllocator`; pointers are plain integers. It counts active,
  total and failed allocations (`statistics()` returns a `DmallocStats`,
  including `heap_min` and `heap_max`), raises `MemoryBugError` for invalid
  and double frees, and lists blocks still allocated with `leak_report()`.
  `calloc` zeroes memory and rejects overflowing requests; `realloc` moves a
  block; `read` and `write` access simulated memory. `format_statistics()`
  and `print_statistics()` produce the `alloc count:` / `alloc size:` lines.

  ```python
  from syslab.dmalloc import DebugAllocator

  heap = DebugAllocator()
  ptrs = [heap.malloc(i + 1, "demo.py", 1) for i in range(10)]
  for ptr in ptrs[:5]:
      heap.free(ptr, "demo.py", 2)
  heap.print_statistics()
  # alloc count: active          5   total         10   fail          0
  # alloc size:  active         40   total         55   fail          0
  ```

- `syslab.linked_list` — `DoublyLinkedList` with `insert_first`,
  `insert_last`, `get`, `first`, `last`, `remove`, `remove_first`,
  `remove_last` and `reverse`; it supports `len()` and iteration. `None` is
  never stored, and accessors return `None` when there is nothing to return.

- `syslab.mbstrings` — `mbslen(data)` counts the UTF-8 code points in a byte
  string (up to the first NUL) and raises `ValueError` on invalid UTF-8.

- `syslab.common`, `syslab.board`, `syslab.game`, `syslab.render`,
  `syslab.snake` — the snake game. `decompress_board_str` reads board
  strings such as `B5x10|W10|W1E8W1|W1E8W1|W1E3S1E4W1|W10` (height, then
  width, then one `|`-separated row of letter-and-count runs each) and raises
  `BoardInitError` carrying a `BoardInitStatus` for malformed input.
  `initialize_default_board` builds the 20×10 walled board, and
  `initialize_game` also places the first piece of food. `GameState.update`
  advances the game by one step; `set_seed` makes food placement repeatable.

- `syslab.scheduler` — first-come-first-served and round-robin simulations
  (`first_come_first_served`, `round_robin`) over `Process` records, updating
  a lock-protected `SharedResource`. `calculate_metrics` returns average
  turnaround time, average waiting time and throughput as `Metrics`. Both
  schedulers accept a `sleep` callable so they can run without real delays.

- `syslab.threadlogs` — `run_threads` starts numbered worker threads that
  each write `thread<n>.txt` holding `n` and its factorial (reduced to 64
  bits) into a directory; `ensure_directory` creates that directory.

- `syslab.textutils` — `linebreaker` and `makewords` turn spaces into line
  breaks; `quick_sort` sorts a sequence and `sort_lines` sorts lines with
  their newlines cut off.

## Commands

| Command | What it does |
| --- | --- |
| `syslab-snake GROWS [BOARD]` | Ask for the player's name, then play snake in the terminal; `GROWS` is `0` or `1`, `BOARD` an optional board string |
| `syslab-schedule` | Run the FCFS and round-robin scheduling demo and print metrics (it sleeps for each process's burst time) |
| `syslab-threadlogs` | Write factorial logs from a random number (1–10) of threads into `logFolder`; given any argument it uses 3 threads |

Example:

```
syslab-snake 0 "B5x10|W10|W1E8W1|W1E8W1|W1E3S1E4W1|W10"
```

The snake game needs a terminal at least as wide as the board and two lines
taller than it. Use the arrow keys to steer; moving off an open edge wraps
around, and the game ends when the snake runs into a wall. The snake does
not grow.

## What this package does not do

The text helpers in `syslab.textutils` are library functions only: there are
no commands that filter standard input, copy it to a file or print a file.
There is no network server or client.