"""Shogi-style move notation, e.g. ``P-76``, ``Bx22+``, ``S*53``, ``N-23=``."""

from __future__ import annotations

from movescribe.core.classifier import classify_move
from movescribe.core.enums import MoveKind, PieceKind
from movescribe.core.errors import MalformedMove, MalformedPosition
from movescribe.core.piece import PROMOTION_MARKER, Piece
from movescribe.core.snapshot import PositionSnapshot, read_position
from movescribe.core.types import Coordinate, VariantDescriptor, parse_move
from movescribe.notation.models import ExtendedMoveInfo

DECLINE_MARKER = "="

_CONNECTOR: dict[MoveKind, str] = {
    MoveKind.CAPTURE: "x",
    MoveKind.DROP: "*",
    MoveKind.QUIET: "-",
}
_NEVER_PROMOTES: frozenset[PieceKind] = frozenset({PieceKind.GOLD, PieceKind.KING})


def shogi_notation(move: ExtendedMoveInfo, variant: VariantDescriptor) -> str:
    """Render *move* in shogi-style notation.

    Raises:
        MalformedPosition: if a position is missing or cannot be decoded.
        MalformedMove: if the move does not resolve to occupied squares.
        AnomalousDelta: if the two positions are not one move apart.
    """
    if move.previous_position is None:
        raise MalformedPosition(f"Previous position required for {move.move!r}")

    width, height = variant.width, variant.height
    orig, dest = parse_move(move.move, width, height)
    board = read_position(move.resulting_position, width, height)
    prev_board = read_position(move.previous_position, width, height)

    kind = classify_move(prev_board, board)
    role = board[dest]
    if role is None:
        raise MalformedMove(f"No piece on destination of {move.move!r}")

    piece = (PROMOTION_MARKER if role.promoted else "") + role.letter
    origin = ""
    promotion = _promotion_symbol(kind, prev_board, board, orig, dest, role, variant)

    if promotion == PROMOTION_MARKER:
        piece = piece.removeprefix(PROMOTION_MARKER)

    return f"{piece}{origin}{_CONNECTOR[kind]}{dest}{promotion}"


def _promotion_symbol(
    kind: MoveKind,
    prev_board: PositionSnapshot,
    board: PositionSnapshot,
    orig: Coordinate | None,
    dest: Coordinate,
    role: Piece,
    variant: VariantDescriptor,
) -> str:
    """'+' for promoted, '=' for declined promotion, '' otherwise."""
    if kind == MoveKind.DROP:
        return ""
    if orig is None:
        raise MalformedMove(f"Drop move to {dest} did not add a piece")

    prev_role = prev_board[orig]
    if prev_role is None:
        raise MalformedMove(f"No piece on origin square {orig}")

    if prev_role != role:
        return PROMOTION_MARKER
    if prev_role.promoted:
        return ""
    if role.kind not in _NEVER_PROMOTES and _in_promotion_zone(
        dest, board.last_mover_was_white, variant
    ):
        return DECLINE_MARKER
    return ""


def _in_promotion_zone(
    dest: Coordinate, white_moved: bool, variant: VariantDescriptor
) -> bool:
    depth = variant.promotion_zone_depth
    if white_moved:
        return dest.rank <= depth
    return dest.rank > variant.height - depth
