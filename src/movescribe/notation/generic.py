"""Pass-through notations for Western-style variants."""

from __future__ import annotations

from movescribe.core.types import VariantDescriptor
from movescribe.notation.models import ExtendedMoveInfo

RESERVE_PIECE_MARKER = "P"


def san_notation(move: ExtendedMoveInfo, variant: VariantDescriptor) -> str:
    """SAN as given, without a leading reserve-piece marker (``P@e4`` → ``@e4``)."""
    san = move.san if move.san is not None else move.move
    return san.removeprefix(RESERVE_PIECE_MARKER)


def uci_notation(move: ExtendedMoveInfo, variant: VariantDescriptor) -> str:
    """The wire move, unchanged."""
    return move.move
