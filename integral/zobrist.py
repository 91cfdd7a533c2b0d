"""Zobrist hashing keys."""

from __future__ import annotations

from dataclasses import dataclass

from .rng import RANDOM_SEED, MT19937_64

PIECE_KINDS = 12
SQUARE_COUNT = 64
CASTLE_RIGHTS_COUNT = 16
EN_PASSANT_FILES = 8


@dataclass(frozen=True)
class ZobristKeys:
    """Random keys for side to move, pieces on squares, castling and en passant."""

    turn: int
    pieces: tuple[tuple[int, ...], ...]
    castle_rights: tuple[int, ...]
    en_passant: tuple[int, ...]


def generate_keys(rng: MT19937_64 | None = None) -> ZobristKeys:
    """Draw all keys from rng, by default a generator with the fixed engine seed."""
    if rng is None:
        rng = MT19937_64(RANDOM_SEED)
    turn = rng.next_u64()
    pieces = tuple(
        tuple(rng.next_u64() for _ in range(SQUARE_COUNT)) for _ in range(PIECE_KINDS)
    )
    castle_rights = tuple(rng.next_u64() for _ in range(CASTLE_RIGHTS_COUNT))
    en_passant = tuple(rng.next_u64() for _ in range(EN_PASSANT_FILES))
    return ZobristKeys(turn, pieces, castle_rights, en_passant)


KEYS = generate_keys()