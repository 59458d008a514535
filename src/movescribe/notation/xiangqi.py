"""Xiangqi WXF move notation, e.g. ``C2=5``, ``H8+7``, ``P+=4``, ``25+1``.

Files are counted from the mover's own right-hand side; ``+`` advances,
``-`` retreats and ``=`` moves along a rank.
"""

from __future__ import annotations

from movescribe.core.classifier import friendly_ranks_on_file
from movescribe.core.enums import PieceKind
from movescribe.core.errors import MalformedMove
from movescribe.core.piece import Piece
from movescribe.core.snapshot import read_position
from movescribe.core.types import Coordinate, VariantDescriptor, parse_move
from movescribe.notation.models import ExtendedMoveInfo

_WXF_LETTER: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "H",
    PieceKind.BISHOP: "E",
    PieceKind.ELEPHANT: "E",
}


def xiangqi_notation(move: ExtendedMoveInfo, variant: VariantDescriptor) -> str:
    """Render *move* in WXF notation.

    Pawn disambiguation reads the previous position when one is given and
    falls back to the resulting position otherwise.
    """
    width, height = variant.width, variant.height
    orig, dest = parse_move(move.move, width, height)
    if orig is None:
        raise MalformedMove(f"Drops are not valid in xiangqi: {move.move!r}")

    board = read_position(move.resulting_position, width, height)
    role = board[dest]
    if role is None:
        raise MalformedMove(f"No piece on destination of {move.move!r}")

    white_moved = board.last_mover_was_white

    def display_file(coord: Coordinate) -> int:
        return coord.file if white_moved else width + 1 - coord.file

    if dest.rank == orig.rank:
        direction = "="
    elif (white_moved and dest.rank < orig.rank) or (
        not white_moved and dest.rank > orig.rank
    ):
        direction = "+"
    else:
        direction = "-"

    is_diagonal = dest.rank != orig.rank and dest.file != orig.file
    movement = (
        display_file(dest)
        if direction == "=" or is_diagonal
        else abs(dest.rank - orig.rank)
    )
    piece = _WXF_LETTER.get(role.kind, role.letter)

    # Several pawns on one file: tandem pawns take +/-, three or more an ordinal.
    if role.kind == PieceKind.PAWN:
        snapshot = (
            read_position(move.previous_position, width, height)
            if move.previous_position is not None
            else board
        )
        pawn_ranks = friendly_ranks_on_file(
            snapshot,
            orig.file,
            Piece(role.color, PieceKind.PAWN),
            orig.rank,
            dest.rank if dest.file == orig.file else None,
        )
        index = pawn_ranks.index(orig.rank)
        if len(pawn_ranks) == 2:
            front = index == 0 if white_moved else index == 1
            return f"{piece}{'+' if front else '-'}{direction}{movement}"
        if len(pawn_ranks) > 2:
            ordinal = index + 1 if white_moved else len(pawn_ranks) - index
            return f"{ordinal}{display_file(orig)}{direction}{movement}"

    return f"{piece}{display_file(orig)}{direction}{movement}"
