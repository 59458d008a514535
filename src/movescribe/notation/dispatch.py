"""Selection of a move formatter for a configured notation style."""

from __future__ import annotations

from movescribe.core.enums import NotationStyle
from movescribe.core.errors import UnknownStyle
from movescribe.notation.generic import san_notation, uci_notation
from movescribe.notation.models import MoveFormatter
from movescribe.notation.shogi import shogi_notation
from movescribe.notation.xiangqi import xiangqi_notation


def notation_style(value: NotationStyle | str) -> NotationStyle:
    """Coerce *value* to :class:`NotationStyle`."""
    try:
        return NotationStyle(value)
    except ValueError:
        raise UnknownStyle(f"Unknown notation style: {value!r}") from None


def move_from_notation_style(style: NotationStyle | str) -> MoveFormatter:
    """Return the formatter for *style*.

    Raises:
        UnknownStyle: if *style* is not a :class:`NotationStyle` value.
    """
    match notation_style(style):
        case NotationStyle.WXF:
            return xiangqi_notation
        case NotationStyle.USI:
            return shogi_notation
        case NotationStyle.SAN:
            return san_notation
        case NotationStyle.UCI:
            return uci_notation
