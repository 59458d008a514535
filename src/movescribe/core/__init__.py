"""Core domain layer: positions, coordinates and move diffs.

Quick start::

    from movescribe.core import VariantDescriptor, parse_move, read_position

    variant = VariantDescriptor.xiangqi()
    snapshot = read_position(fen, variant.width, variant.height)
    orig, dest = parse_move("h2e2", variant.width, variant.height)
    print(snapshot[orig])
"""

from movescribe.core.classifier import classify_move, friendly_ranks_on_file
from movescribe.core.enums import Color, Family, MoveKind, NotationStyle, PieceKind
from movescribe.core.errors import (
    AnomalousDelta,
    MalformedMove,
    MalformedPosition,
    NotationError,
    UnknownStyle,
)
from movescribe.core.piece import PROMOTION_MARKER, Piece
from movescribe.core.snapshot import PositionSnapshot, read_position
from movescribe.core.types import (
    DROP_MARKER,
    Coordinate,
    VariantDescriptor,
    parse_move,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "Family",
    "MoveKind",
    "NotationStyle",
    "PieceKind",
    # Errors
    "AnomalousDelta",
    "MalformedMove",
    "MalformedPosition",
    "NotationError",
    "UnknownStyle",
    # Types / helpers
    "DROP_MARKER",
    "PROMOTION_MARKER",
    "Coordinate",
    "VariantDescriptor",
    "parse_move",
    "parse_square",
    "square_name",
    # Domain objects
    "Piece",
    "PositionSnapshot",
    "read_position",
    # Diffing
    "classify_move",
    "friendly_ranks_on_file",
]
