"""Sliding-piece attack generation and lookup tables."""

from __future__ import annotations

from functools import lru_cache

from ..types import SQUARE_COUNT, Direction, Square

BISHOP_BLOCKER_COMBINATIONS = 512
ROOK_BLOCKER_COMBINATIONS = 4096

_STEP = {
    Direction.NORTH: 8,
    Direction.SOUTH: -8,
    Direction.EAST: 1,
    Direction.WEST: -1,
    Direction.NORTH_EAST: 9,
    Direction.NORTH_WEST: 7,
    Direction.SOUTH_EAST: -7,
    Direction.SOUTH_WEST: -9,
}

_BISHOP_DIRECTIONS = (
    Direction.NORTH_WEST,
    Direction.NORTH_EAST,
    Direction.SOUTH_WEST,
    Direction.SOUTH_EAST,
)
_ROOK_DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


def distance_to_edge(square: int, direction: Direction) -> int:
    """Number of steps from square to the board edge in the given direction."""
    sq = Square(square)
    rank, file = sq.rank(), sq.file()
    return {
        Direction.EAST: 7 - file,
        Direction.NORTH: 7 - rank,
        Direction.WEST: file,
        Direction.SOUTH: rank,
        Direction.NORTH_EAST: min(7 - rank, 7 - file),
        Direction.NORTH_WEST: min(7 - rank, file),
        Direction.SOUTH_EAST: min(rank, 7 - file),
        Direction.SOUTH_WEST: min(rank, file),
    }[direction]


def sliding_attacks(square: int, direction: Direction, occupied: int) -> int:
    """Squares reached along a ray, stopping at (and including) the first blocker."""
    attacks = 0
    current = int(square)
    step = _STEP[direction]
    for _ in range(distance_to_edge(square, direction)):
        current += step
        bit = 1 << current
        attacks |= bit
        if occupied & bit:
            break
    return attacks


def sliding_occupancies(square: int, direction: Direction) -> int:
    """Ray squares whose occupancy matters (the edge square is excluded)."""
    attacks = 0
    current = int(square)
    step = _STEP[direction]
    for _ in range(1, distance_to_edge(square, direction)):
        current += step
        attacks |= 1 << current
    return attacks


def create_blockers(moves: int) -> list[int]:
    """Every subset of the mask, from the full mask down to empty, then the mask again."""
    blockers = []
    subset = moves
    for _ in range((1 << bin(moves).count("1")) + 1):
        blockers.append(subset)
        subset = (subset - 1) & moves
    return blockers


def generate_bishop_mask(square: int) -> int:
    mask = 0
    for direction in _BISHOP_DIRECTIONS:
        mask |= sliding_occupancies(square, direction)
    return mask


def generate_rook_mask(square: int) -> int:
    mask = 0
    for direction in _ROOK_DIRECTIONS:
        mask |= sliding_occupancies(square, direction)
    return mask


def generate_bishop_moves(square: int, occupied: int) -> int:
    moves = 0
    for direction in _BISHOP_DIRECTIONS:
        moves |= sliding_attacks(square, direction, occupied)
    return moves


def generate_rook_moves(square: int, occupied: int) -> int:
    moves = 0
    for direction in _ROOK_DIRECTIONS:
        moves |= sliding_attacks(square, direction, occupied)
    return moves


def _generate_table(mask_fn, moves_fn) -> list[tuple[int, dict[int, int]]]:
    table = []
    for square in range(SQUARE_COUNT):
        mask = mask_fn(square)
        table.append(
            (mask, {occ: moves_fn(square, occ) for occ in create_blockers(mask)})
        )
    return table


def generate_bishop_attacks() -> list[tuple[int, dict[int, int]]]:
    """Per square: the relevance mask and attacks for every masked occupancy."""
    return _generate_table(generate_bishop_mask, generate_bishop_moves)


def generate_rook_attacks() -> list[tuple[int, dict[int, int]]]:
    """Per square: the relevance mask and attacks for every masked occupancy."""
    return _generate_table(generate_rook_mask, generate_rook_moves)


@lru_cache(maxsize=None)
def _bishop_table() -> list[tuple[int, dict[int, int]]]:
    return generate_bishop_attacks()


@lru_cache(maxsize=None)
def _rook_table() -> list[tuple[int, dict[int, int]]]:
    return generate_rook_attacks()


def bishop_attacks(square: int, occupied: int) -> int:
    mask, attacks = _bishop_table()[int(square)]
    return attacks[occupied & mask]


def rook_attacks(square: int, occupied: int) -> int:
    mask, attacks = _rook_table()[int(square)]
    return attacks[occupied & mask]