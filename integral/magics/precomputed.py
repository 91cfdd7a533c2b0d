"""Magic bitboard entries used to index sliding-piece attack tables."""

from __future__ import annotations

from dataclasses import dataclass

MASK64 = 0xFFFFFFFFFFFFFFFF


@dataclass(frozen=True)
class MagicEntry:
    """Relevant-occupancy mask, magic multiplier and right shift for one square."""

    mask: int = 0
    magic: int = 0
    shift: int = 0

    def index(self, occupied: int) -> int:
        """Map an occupancy bitboard to a slot in this square's attack table."""
        return (((self.mask & occupied) * self.magic) & MASK64) >> self.shift