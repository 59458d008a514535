"""movescribe: move notation for shogi, xiangqi and western variants.

Quick start::

    from movescribe import ExtendedMoveInfo, VariantDescriptor, move_from_notation_style

    to_wxf = move_from_notation_style("wxf")
    token = to_wxf(ExtendedMoveInfo("h3e3", fen_after), VariantDescriptor.xiangqi())
"""

from movescribe.core import (
    AnomalousDelta,
    Family,
    MalformedMove,
    MalformedPosition,
    NotationError,
    NotationStyle,
    UnknownStyle,
    VariantDescriptor,
)
from movescribe.notation import (
    ExtendedMoveInfo,
    TranscriptRenderer,
    move_from_notation_style,
)
from movescribe.settings import NotationSettings

__version__ = "0.1.0"

__all__ = [
    "AnomalousDelta",
    "ExtendedMoveInfo",
    "Family",
    "MalformedMove",
    "MalformedPosition",
    "NotationError",
    "NotationSettings",
    "NotationStyle",
    "TranscriptRenderer",
    "UnknownStyle",
    "VariantDescriptor",
    "move_from_notation_style",
]
