"""Notation package: family formatters, style dispatch and transcripts."""

from movescribe.notation.dispatch import move_from_notation_style, notation_style
from movescribe.notation.generic import san_notation, uci_notation
from movescribe.notation.models import ExtendedMoveInfo, MoveFormatter
from movescribe.notation.shogi import shogi_notation
from movescribe.notation.transcript import (
    TranscriptRenderer,
    build_movetext,
    ply_to_turn,
    render_index_text,
)
from movescribe.notation.xiangqi import xiangqi_notation

__all__ = [
    "ExtendedMoveInfo",
    "MoveFormatter",
    "move_from_notation_style",
    "notation_style",
    "shogi_notation",
    "xiangqi_notation",
    "san_notation",
    "uci_notation",
    "TranscriptRenderer",
    "build_movetext",
    "ply_to_turn",
    "render_index_text",
]
