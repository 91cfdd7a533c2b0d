# integral

Building blocks for a bitboard chess engine, in plain Python with no
third-party dependencies.

## What is inside

- `integral.types`: the `Color`, `PieceType`, `PromotionType`,
  `MoveGenType`, `CastleRights` and `Direction` enums; `flip_color`; the
  `Square` type (`from_rank_file`, `rank`, `file`, `distance_to`,
  `relative_to`, `relative_rank`, `relative_file`); and `ScorePair`, a
  middle-game and end-game score packed into one 32-bit integer (built with
  `ScorePair(mg, eg)`, `pair(mg, eg)` or `ScorePair.from_packed`). Score
  constants such as `MATE_SCORE`, `INFINITE_SCORE` and `SCORE_NONE` live here
  too.
- `integral.strings`: `split_string`, `remove_whitespace`, `to_lowercase`,
  `bool_to_string` and `string_to_bool`.
- `integral.containers`: `BoundedList`, a fixed-capacity list whose `erase`
  moves the last item into the removed slot, and `multi_array(factory, *dims)`
  for nested lists.
- `integral.rng`: `MT19937_64`, a 64-bit Mersenne Twister with integer and
  seed-sequence seeding and unbiased `uniform(low, high)`, plus per-thread
  helpers `random_seed`, `random_u64` and `random_u64_between`.
- `integral.barrier`: `Barrier`, a reusable barrier for threads
  (`arrive_and_wait`, `reset`, `is_cleared`).
- `integral.hash_table`: `HashTable`, a table sized in megabytes from an
  entry size and indexed by 64-bit keys with a multiply-high mapping.
- `integral.zobrist`: `ZobristKeys`, `generate_keys(rng)` and `KEYS`, the
  keys drawn from the fixed default seed.
- `integral.magics.precomputed`: `MagicEntry` (mask, magic, shift) and its
  `index(occupied)` method.
- `integral.magics.attacks`: ray and mask generation
  (`sliding_attacks`, `sliding_occupancies`, `generate_rook_mask`,
  `generate_bishop_mask`, `generate_rook_moves`, `generate_bishop_moves`,
  `create_blockers`) and table-backed lookups `rook_attacks` and
  `bishop_attacks`. The lookup tables are built on first use and keyed by
  the masked occupancy.
- `integral.magics.finder`: `try_magic`, `find_magic` and `generate_magics`,
  which search for rook and bishop magic multipliers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from integral.types import Square
from integral.magics.attacks import rook_attacks, bishop_attacks

d4 = Square.from_rank_file(3, 3)
occupied = 1 << 35  # a piece on d5
print(hex(rook_attacks(d4, occupied)))
print(hex(bishop_attacks(d4, occupied)))
```

## Generating magic numbers

The package installs a command that searches for a rook and a bishop magic
entry for every square and prints them as two lists of `MagicEntry(...)`
lines:

```
integral-magics
```

The search is deterministic (fixed seed) but can take a while in Python.

## What it does not do

There is no board representation, FEN parsing, move generation, position
evaluation, search or protocol front end here, so it cannot play games or
run perft or benchmark suites on its own. It also ships no precomputed
magic tables; use `integral-magics` or `find_magic` to produce them.