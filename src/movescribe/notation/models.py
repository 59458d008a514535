"""Shared notation-layer data models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from movescribe.core.types import VariantDescriptor


@dataclass(frozen=True, slots=True)
class ExtendedMoveInfo:
    """A played move plus the serialized positions around it.

    ``previous_position`` is required by the shogi-style formatter;
    ``san`` is the already-generated Western SAN, if the caller has one.
    """

    move: str
    resulting_position: str
    previous_position: str | None = None
    san: str | None = None


MoveFormatter = Callable[[ExtendedMoveInfo, VariantDescriptor], str]
