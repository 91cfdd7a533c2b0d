import pytest

from integral.magics import attacks
from integral.types import Direction


def test_masks_match_precomputed_values():
    assert attacks.generate_rook_mask(0) == 0x000101010101017E
    assert attacks.generate_bishop_mask(0) == 0x0040201008040200
    assert attacks.generate_rook_mask(63) == 0x7E80808080808000


def test_distance_to_edge_corner():
    assert attacks.distance_to_edge(0, Direction.NORTH) == 7
    assert attacks.distance_to_edge(0, Direction.SOUTH_WEST) == 0


def test_create_blockers_enumerates_subsets():
    mask = attacks.generate_bishop_mask(0)
    blockers = attacks.create_blockers(mask)
    assert len(blockers) == (1 << bin(mask).count("1")) + 1
    assert blockers[0] == mask and blockers[-1] == mask
    assert len(set(blockers)) == len(blockers) - 1
    assert all(b & ~mask == 0 for b in blockers)


def test_blocker_stops_ray():
    moves = attacks.sliding_attacks(0, Direction.NORTH, 1 << 16)
    assert moves == (1 << 8) | (1 << 16)


def test_empty_board_rook_moves_count():
    for square in (0, 27, 63):
        assert bin(attacks.generate_rook_moves(square, 0)).count("1") == 14


@pytest.mark.parametrize("square", [0, 9, 27, 36, 63])
def test_table_lookup_matches_generation(square):
    occupied = 0x00FF00000000FF00 | (1 << 35)
    assert attacks.rook_attacks(square, occupied) == attacks.generate_rook_moves(
        square, occupied
    )
    assert attacks.bishop_attacks(square, occupied) == attacks.generate_bishop_moves(
        square, occupied
    )