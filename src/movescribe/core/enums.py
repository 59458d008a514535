"""Core enumerations for the notation domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Color(IntEnum):
    """Side color. Uppercase letters in a serialized position are white."""

    WHITE = 0
    BLACK = 1


class PieceKind(StrEnum):
    """Base piece kinds, valued by their lowercase serialized letter."""

    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"
    # Shogi
    LANCE = "l"
    SILVER = "s"
    GOLD = "g"
    # Xiangqi
    ADVISOR = "a"
    CANNON = "c"
    ELEPHANT = "e"

    @property
    def letter(self) -> str:
        """Uppercase display letter, e.g. ``PieceKind.ROOK.letter == "R"``."""
        return self.value.upper()


class Family(StrEnum):
    """Board-game family a variant belongs to."""

    CHESS = "chess"
    SHOGI = "shogi"
    XIANGQI = "xiangqi"


class NotationStyle(StrEnum):
    """Output notation grammars understood by the dispatcher."""

    WXF = "wxf"
    USI = "usi"
    SAN = "san"
    UCI = "uci"


class MoveKind(StrEnum):
    """Classification of a move derived from a position diff."""

    CAPTURE = "capture"
    DROP = "drop"
    QUIET = "quiet"
