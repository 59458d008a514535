"""Move classification and like-piece disambiguation from position diffs."""

from __future__ import annotations

from bisect import insort

from movescribe.core.enums import MoveKind
from movescribe.core.errors import AnomalousDelta
from movescribe.core.piece import Piece
from movescribe.core.snapshot import PositionSnapshot
from movescribe.core.types import Coordinate

_KIND_BY_DELTA: dict[int, MoveKind] = {
    1: MoveKind.CAPTURE,
    -1: MoveKind.DROP,
    0: MoveKind.QUIET,
}


def classify_move(before: PositionSnapshot, after: PositionSnapshot) -> MoveKind:
    """Classify the move between *before* and *after* by piece count.

    Raises:
        AnomalousDelta: if the counts differ by more than one piece.
    """
    delta = len(before) - len(after)
    try:
        return _KIND_BY_DELTA[delta]
    except KeyError:
        raise AnomalousDelta(delta) from None


def friendly_ranks_on_file(
    snapshot: PositionSnapshot,
    file: int,
    piece: Piece,
    origin_rank: int,
    dest_rank: int | None = None,
) -> list[int]:
    """Ascending ranks on *file* holding *piece* before the move was played.

    *dest_rank* is the mover's destination when it stays on *file*; that
    square is skipped so a post-move *snapshot* still yields the pre-move
    configuration. The origin rank is always part of the result.
    """
    ranks = [
        rank
        for rank in range(1, snapshot.height + 1)
        if rank != dest_rank and snapshot[Coordinate(file, rank)] == piece
    ]
    if origin_rank not in ranks:
        insort(ranks, origin_rank)
    return ranks
