"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from movescribe.core.enums import Color, PieceKind
from movescribe.core.errors import MalformedPosition

PROMOTION_MARKER = "+"


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable tagged record for a piece on the board."""

    color: Color
    kind: PieceKind
    promoted: bool = False

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Serialized form, e.g. ``+P`` for a promoted white pawn."""
        char = self.kind.value.upper() if self.color == Color.WHITE else self.kind.value
        return PROMOTION_MARKER + char if self.promoted else char

    @classmethod
    def from_char(cls, char: str, promoted: bool = False) -> Piece:
        """Create piece from a position letter, e.g. 'N' → white knight."""
        try:
            kind = PieceKind(char.lower())
        except ValueError:
            raise MalformedPosition(f"Invalid piece character: {char!r}") from None
        color = Color.WHITE if char.isupper() else Color.BLACK
        return cls(color, kind, promoted)

    @property
    def letter(self) -> str:
        """Uppercase base letter regardless of color or promotion."""
        return self.kind.letter
