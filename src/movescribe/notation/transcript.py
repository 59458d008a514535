"""Move-list rendering and record-export movetext."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from movescribe.core.errors import NotationError
from movescribe.core.types import VariantDescriptor
from movescribe.notation.dispatch import move_from_notation_style
from movescribe.notation.models import ExtendedMoveInfo
from movescribe.settings import NotationSettings

_LOGGER = logging.getLogger(__name__)


def ply_to_turn(ply: int) -> int:
    """Full-move number of a 1-based *ply*."""
    return (ply - 1) // 2 + 1


def render_index_text(ply: int, with_dots: bool = False) -> str:
    """Move-list index for *ply*, e.g. ``3.`` or ``3...`` with dots."""
    text = str(ply_to_turn(ply))
    if with_dots:
        text += "." if ply % 2 == 1 else "..."
    return text


def build_movetext(tokens: Iterable[str], result_token: str = "*") -> str:
    """Join notation tokens into numbered movetext for record export."""
    parts: list[str] = []
    for ply, token in enumerate(tokens):
        if ply % 2 == 0:
            parts.append(f"{(ply // 2) + 1}.")
        parts.append(token)
    parts.append(result_token)
    return " ".join(parts)


class TranscriptRenderer:
    """Renders the moves of one game in the configured notation style.

    The formatter is resolved on construction, so an unknown style fails
    once at setup rather than on every move.
    """

    __slots__ = ("_variant", "_settings", "_formatter")

    def __init__(
        self,
        variant: VariantDescriptor,
        settings: NotationSettings | None = None,
    ) -> None:
        self._variant = variant
        self._settings = settings or NotationSettings.for_family(variant.family)
        self._formatter = move_from_notation_style(self._settings.style)

    @property
    def settings(self) -> NotationSettings:
        return self._settings

    def render_move(self, move: ExtendedMoveInfo) -> str:
        """Notation token for a single move; raises on malformed input."""
        return self._formatter(move, self._variant)

    def render(self, moves: Iterable[ExtendedMoveInfo]) -> list[str]:
        """One token per move, with the placeholder for unrenderable moves."""
        tokens: list[str] = []
        for ply, move in enumerate(moves, start=1):
            try:
                tokens.append(self.render_move(move))
            except NotationError as exc:
                _LOGGER.warning("Cannot render ply %d (%s): %s", ply, move.move, exc)
                tokens.append(self._settings.placeholder)
        return tokens

    def render_indexed(self, moves: Iterable[ExtendedMoveInfo]) -> list[str]:
        """Tokens prefixed with their move-list index, e.g. ``1. P-76``."""
        with_dots = self._settings.with_dots
        return [
            f"{render_index_text(ply, with_dots)} {token}"
            for ply, token in enumerate(self.render(moves), start=1)
        ]
