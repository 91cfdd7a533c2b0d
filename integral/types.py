"""Core chess value types: colours, pieces, squares and packed score pairs."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag

MAX_PLY_FROM_ROOT = 256
MAX_GAME_PLY = 512

NUM_RANKS = 8
NUM_FILES = 8
SQUARE_COUNT = 64
NO_SQUARE = 64

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF


class Color(IntEnum):
    WHITE = 0
    BLACK = 1
    NO_COLOR = 2


NUM_COLORS = 2


def flip_color(color: Color) -> Color:
    """Return the opposing colour (anything non-white flips to white)."""
    return Color(int(not color))


class PieceType(IntEnum):
    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5
    NONE = 6


NUM_PIECE_TYPES = int(PieceType.NONE)


class PromotionType(IntEnum):
    KNIGHT = 0
    BISHOP = 1
    ROOK = 2
    QUEEN = 3


class MoveGenType(IntFlag):
    QUIET = 0b01
    NOISY = 0b10
    ALL = QUIET | NOISY


class CastleRights(IntFlag):
    WHITE_KINGSIDE = 0b0001
    WHITE_QUEENSIDE = 0b0010
    BLACK_KINGSIDE = 0b0100
    BLACK_QUEENSIDE = 0b1000


class Direction(Enum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    NORTH_EAST = 4
    NORTH_WEST = 5
    SOUTH_EAST = 6
    SOUTH_WEST = 7


class Square(int):
    """A board square index stored as an unsigned byte (a1 = 0, h8 = 63)."""

    __slots__ = ()

    def __new__(cls, value: int = 0) -> Square:
        return super().__new__(cls, int(value) & 0xFF)

    @classmethod
    def from_rank_file(cls, rank: int, file: int) -> Square:
        return cls(rank * NUM_RANKS + file)

    def rank(self) -> int:
        return int(self) >> 3

    def file(self) -> int:
        return int(self) & 7

    def distance_to(self, other: int) -> int:
        """Chebyshev (king-move) distance to another square."""
        other = Square(other)
        return max(abs(self.file() - other.file()), abs(self.rank() - other.rank()))

    def relative_to(self, side: Color) -> Square:
        return Square(int(self) ^ (56 * int(not side)))

    def relative_rank(self, side: Color) -> int:
        rank = self.rank()
        return 7 - rank if side == Color.BLACK else rank

    def relative_file(self, side: Color) -> int:
        file = self.file()
        return 7 - file if side == Color.BLACK else file

    def __add__(self, other: int) -> Square:
        return Square(int(self) + int(other))

    def __sub__(self, other: int) -> Square:
        return Square(int(self) - int(other))

    def __mul__(self, other: int) -> Square:
        return Square(int(self) * int(other))

    def __repr__(self) -> str:
        return f"Square({int(self)})"


def _to_i32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _to_i16(value: int) -> int:
    value &= _MASK16
    return value - (1 << 16) if value & 0x8000 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class ScorePair:
    """Middle-game and end-game scores packed into one 32-bit integer."""

    __slots__ = ("_packed",)

    def __init__(self, middle_game: int = 0, end_game: int = 0) -> None:
        self._packed = _to_i32((int(end_game) << 16) + int(middle_game))

    @classmethod
    def from_packed(cls, value: int) -> ScorePair:
        result = cls.__new__(cls)
        result._packed = _to_i32(value)
        return result

    @property
    def packed(self) -> int:
        return self._packed

    def middle_game(self) -> int:
        return _to_i16(self._packed)

    def end_game(self) -> int:
        return _to_i16((_to_i32(self._packed + 0x8000) & _MASK32) >> 16)

    @staticmethod
    def _operand(other: ScorePair | int) -> int:
        if isinstance(other, ScorePair):
            return other._packed
        if isinstance(other, int):
            return other
        return NotImplemented

    def __add__(self, other: ScorePair) -> ScorePair:
        if not isinstance(other, ScorePair):
            return NotImplemented
        return ScorePair.from_packed(self._packed + other._packed)

    def __sub__(self, other: ScorePair) -> ScorePair:
        if not isinstance(other, ScorePair):
            return NotImplemented
        return ScorePair.from_packed(self._packed - other._packed)

    def __mul__(self, other: ScorePair | int) -> ScorePair:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return ScorePair.from_packed(self._packed * operand)

    def __rmul__(self, other: int) -> ScorePair:
        return self.__mul__(other)

    def __truediv__(self, other: ScorePair | int) -> ScorePair:
        operand = self._operand(other)
        if operand is NotImplemented:
            return NotImplemented
        return ScorePair.from_packed(_trunc_div(self._packed, operand))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScorePair):
            return NotImplemented
        return self._packed == other._packed

    def __hash__(self) -> int:
        return hash(self._packed)

    def __repr__(self) -> str:
        return f"ScorePair({self.middle_game()}, {self.end_game()})"


def pair(middle_game: int, end_game: int) -> ScorePair:
    return ScorePair(middle_game, end_game)


_I16_MAX = 32767

DRAW_SCORE = 0
MATE_SCORE = _I16_MAX - 1
MATE_IN_MAX_PLY_SCORE = MATE_SCORE - MAX_PLY_FROM_ROOT
INFINITE_SCORE = _I16_MAX
TB_WIN_SCORE = MATE_SCORE - MAX_PLY_FROM_ROOT - 1
TB_WIN_IN_MAX_PLY_SCORE = TB_WIN_SCORE - MAX_PLY_FROM_ROOT
SCORE_NONE = -INFINITE_SCORE