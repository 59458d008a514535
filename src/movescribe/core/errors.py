"""Exceptions raised by the notation engine.

Every error derives from :class:`ValueError` so callers that already
guard parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class NotationError(ValueError):
    """Base class for all move-notation failures."""


class MalformedPosition(NotationError):
    """A serialized position could not be decoded into a snapshot."""


class MalformedMove(NotationError):
    """A wire move could not be resolved into in-bounds squares."""


class AnomalousDelta(NotationError):
    """Piece counts of two snapshots differ by more than one piece."""

    def __init__(self, delta: int) -> None:
        super().__init__(
            f"Inconsistent position pair: piece count changed by {delta}"
        )
        self.delta = delta


class UnknownStyle(NotationError):
    """A notation style outside :class:`~movescribe.core.enums.NotationStyle`."""
