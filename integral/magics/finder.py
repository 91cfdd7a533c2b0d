"""Search for magic multipliers and print the resulting tables."""

from __future__ import annotations

import argparse

from ..rng import MASK64, MT19937_64
from ..types import SQUARE_COUNT, PieceType, Square
from . import attacks
from .precomputed import MagicEntry

FINDER_SEED = 123456789
MAX_ATTEMPTS = 1_000_000


def try_magic(
    magic: int, shift: int, size: int, blockers: list[int], moves: list[int]
) -> bool:
    """True if the magic maps every blocker set without a conflicting collision."""
    table = [0] * (1 << size)
    for blocker, move in zip(blockers, moves):
        index = ((blocker * magic) & MASK64) >> shift
        if table[index] != 0 and table[index] != move:
            return False
        table[index] = move
    return True


def find_magic(piece_type: PieceType, square: int) -> MagicEntry:
    """Find a magic entry for a rook or bishop on square; all-zero if none is found."""
    if piece_type not in (PieceType.ROOK, PieceType.BISHOP):
        raise ValueError("magics exist only for rooks and bishops")
    is_rook = piece_type == PieceType.ROOK
    sq = Square(square)
    mask = attacks.generate_rook_mask(sq) if is_rook else attacks.generate_bishop_mask(sq)
    blockers = attacks.create_blockers(mask)
    generate = attacks.generate_rook_moves if is_rook else attacks.generate_bishop_moves
    piece_attacks = [generate(sq, occupied) for occupied in blockers]

    rng = MT19937_64(FINDER_SEED)
    relevant_bits = bin(mask).count("1")
    shift = SQUARE_COUNT - relevant_bits
    for _ in range(MAX_ATTEMPTS):
        candidate = rng.next_u64() & rng.next_u64() & rng.next_u64()
        if try_magic(candidate, shift, relevant_bits, blockers, piece_attacks):
            return MagicEntry(mask, candidate, shift)
    return MagicEntry()


def generate_magics() -> str:
    """Render rook and bishop magic tables for every square."""
    lines = []
    for name, piece in (("ROOK_MAGICS", PieceType.ROOK), ("BISHOP_MAGICS", PieceType.BISHOP)):
        lines.append(f"{name} = [")
        for square in range(SQUARE_COUNT):
            entry = find_magic(piece, square)
            lines.append(
                f"    MagicEntry(0x{entry.mask:016x}, 0x{entry.magic:016x}, {entry.shift}),"
            )
        lines.append("]")
        lines.append("")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate magic bitboard tables.")
    parser.parse_args(argv)
    print(generate_magics())
    return 0