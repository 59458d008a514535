"""Coordinates, variant dimensions and wire-square translation.

Internal numbering is reversed on both axes relative to ascending
algebraic notation (shown for a 9x10 xiangqi board)::

    algebraic  a10 ... i10        internal  (9, 1) ... (1, 1)
               ...                          ...
               a1  ... i1                   (9, 10) ... (1, 10)

Files fall from ``width`` at the left edge of a placement row, ranks rise
from the first (top) row of the placement.
"""

from __future__ import annotations

from dataclasses import dataclass

from movescribe.core.enums import Family
from movescribe.core.errors import MalformedMove

DROP_MARKER = "@"
_PROMOTION_SUFFIX = "+"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A square in internal (file, rank) numbering, both 1-based."""

    file: int
    rank: int

    def __str__(self) -> str:
        return f"{self.file}{self.rank}"


@dataclass(frozen=True, slots=True)
class VariantDescriptor:
    """Family and board dimensions of the variant being rendered.

    Args:
        family: Notation family of the variant.
        width: Number of files.
        height: Number of ranks.
        promotion_zone_depth: Ranks counted from the far edge in which a
            piece may promote (shogi family only).
    """

    family: Family
    width: int
    height: int
    promotion_zone_depth: int = 3

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Invalid board size {self.width}x{self.height} for {self.family}"
            )
        if not (0 <= self.promotion_zone_depth <= self.height):
            raise ValueError(
                f"Invalid promotion zone depth: {self.promotion_zone_depth!r}"
            )

    # Common presets
    @classmethod
    def chess(cls) -> VariantDescriptor:
        return cls(Family.CHESS, 8, 8)

    @classmethod
    def shogi(cls) -> VariantDescriptor:
        return cls(Family.SHOGI, 9, 9)

    @classmethod
    def minishogi(cls) -> VariantDescriptor:
        return cls(Family.SHOGI, 5, 5, promotion_zone_depth=1)

    @classmethod
    def xiangqi(cls) -> VariantDescriptor:
        return cls(Family.XIANGQI, 9, 10)

    @classmethod
    def minixiangqi(cls) -> VariantDescriptor:
        return cls(Family.XIANGQI, 7, 7)


def parse_square(raw: str, width: int, height: int) -> Coordinate | None:
    """Translate an algebraic square (``e4``, ``a10``) to internal numbering.

    Returns ``None`` when *raw* is malformed or lands off the board.
    """
    if not (2 <= len(raw) <= 3) or not raw.isascii():
        return None
    if not raw[0].isalpha() or not raw[1:].isdigit():
        return None
    file = width - abs(ord(raw[0]) - ord("a"))
    rank = height + 1 - int(raw[1:])
    if not (1 <= file <= width and 1 <= rank <= height):
        return None
    return Coordinate(file, rank)


def square_name(coord: Coordinate, width: int, height: int) -> str:
    """Inverse of :func:`parse_square`, e.g. ``(9, 10)`` on 9x10 → ``'a1'``."""
    if not (1 <= coord.file <= width and 1 <= coord.rank <= height):
        raise ValueError(f"Coordinate {coord} is off a {width}x{height} board")
    return chr(ord("a") + width - coord.file) + str(height + 1 - coord.rank)


def parse_move(
    move: str, width: int, height: int
) -> tuple[Coordinate | None, Coordinate]:
    """Split a wire move into (origin, destination) internal coordinates.

    Squares are concatenated without a separator and widen to three
    characters when their rank has two digits (``a10a9``, ``b9b10``).
    A drop (``P@e5``) has no origin and yields ``None`` in its place.

    Raises:
        MalformedMove: if either half does not resolve to a square.
    """
    text = move.removesuffix(_PROMOTION_SUFFIX)

    if DROP_MARKER in text:
        piece_part, _, dest_part = text.partition(DROP_MARKER)
        if len(piece_part) != 1:
            raise MalformedMove(f"Invalid drop move: {move!r}")
        dest = parse_square(dest_part, width, height)
        if dest is None:
            raise MalformedMove(f"Invalid drop square in move: {move!r}")
        return None, dest

    if len(text) < 4:
        raise MalformedMove(f"Invalid move: {move!r}")

    orig_part = text[:3] if text[2] == "0" else text[:2]
    dest_part = text[-3:] if text[-1] == "0" else text[-2:]
    if len(orig_part) + len(dest_part) != len(text):
        raise MalformedMove(f"Invalid move: {move!r}")

    orig = parse_square(orig_part, width, height)
    dest = parse_square(dest_part, width, height)
    if orig is None or dest is None:
        raise MalformedMove(
            f"Move {move!r} is off a {width}x{height} board"
        )
    return orig, dest
