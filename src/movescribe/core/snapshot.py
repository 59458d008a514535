"""PositionSnapshot and the serialized-position decoder."""

from __future__ import annotations

import re

from movescribe.core.errors import MalformedPosition
from movescribe.core.piece import PROMOTION_MARKER, Piece
from movescribe.core.types import Coordinate

_RESERVE_START = "["
_ROW_SEPARATOR = "/"
_NO_OP_MARKER = "~"
_BLACK_TO_MOVE = "b"
_WHITE_TO_MOVE = "w"
# Consecutive digits form one empty-square run, e.g. "10".
_ROW_TOKEN_RE = re.compile(r"\d+|.", re.ASCII)


class PositionSnapshot:
    """Immutable piece grid of one position, indexed by :class:`Coordinate`.

    The grid is sized from the variant's dimensions; lookups outside the
    board raise :class:`IndexError` instead of reporting an empty square.
    """

    __slots__ = ("_width", "_height", "_grid", "_count", "_last_mover_was_white")

    def __init__(
        self,
        width: int,
        height: int,
        pieces: dict[Coordinate, Piece],
        last_mover_was_white: bool,
    ) -> None:
        grid: list[list[Piece | None]] = [[None] * height for _ in range(width)]
        for coord, piece in pieces.items():
            if not (1 <= coord.file <= width and 1 <= coord.rank <= height):
                raise IndexError(f"Coordinate {coord} is off a {width}x{height} board")
            grid[coord.file - 1][coord.rank - 1] = piece
        self._width = width
        self._height = height
        # [file-1][rank-1] -> piece
        self._grid: tuple[tuple[Piece | None, ...], ...] = tuple(
            tuple(column) for column in grid
        )
        self._count = len(pieces)
        self._last_mover_was_white = last_mover_was_white

    # -- Properties ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def last_mover_was_white(self) -> bool:
        """True when the side to move is black, i.e. white just moved."""
        return self._last_mover_was_white

    # -- Element access -----------------------------------------------------

    def __getitem__(self, coord: Coordinate) -> Piece | None:
        if not (1 <= coord.file <= self._width and 1 <= coord.rank <= self._height):
            raise IndexError(
                f"Coordinate {coord} is off a {self._width}x{self._height} board"
            )
        return self._grid[coord.file - 1][coord.rank - 1]

    def __len__(self) -> int:
        """Number of pieces on the board."""
        return self._count

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositionSnapshot):
            return NotImplemented
        return (
            self._grid == other._grid
            and self._last_mover_was_white == other._last_mover_was_white
        )

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(1, self._height + 1):
            row = []
            for file in range(self._width, 0, -1):
                p = self._grid[file - 1][rank - 1]
                row.append(str(p) if p else ".")
            rows.append(" ".join(row))
        return "\n".join(rows)


def read_position(position: str, width: int, height: int) -> PositionSnapshot:
    """Decode a serialized position into a :class:`PositionSnapshot`.

    Only the piece placement and side-to-move fields are read; a reserve
    suffix (``[...]``) and placement rows beyond *height* are ignored.
    """
    parts = position.split()
    if len(parts) < 2:
        raise MalformedPosition(
            f"Invalid position (need placement and side-to-move): {position!r}"
        )

    placement, side_part = parts[0], parts[1]
    if side_part not in (_WHITE_TO_MOVE, _BLACK_TO_MOVE):
        raise MalformedPosition(f"Invalid side-to-move field: {side_part!r}")

    rows = placement.split(_RESERVE_START)[0].split(_ROW_SEPARATOR)
    if len(rows) < height:
        raise MalformedPosition(
            f"Invalid position board (must contain {height} rows): {position!r}"
        )

    pieces: dict[Coordinate, Piece] = {}
    for row_idx, row_text in enumerate(rows[:height]):
        rank = row_idx + 1
        file = width
        promoted = False
        for token in _ROW_TOKEN_RE.findall(row_text):
            if token.isascii() and token.isdecimal():
                skip = int(token)
                if skip < 1 or promoted:
                    raise MalformedPosition(f"Invalid empty-square run: {position!r}")
                file -= skip
                if file < 0:
                    raise MalformedPosition(f"Invalid row width: {position!r}")
                continue
            if token == _NO_OP_MARKER:
                continue
            if token == PROMOTION_MARKER:
                promoted = True
                continue
            if file < 1:
                raise MalformedPosition(f"Invalid row width: {position!r}")
            pieces[Coordinate(file, rank)] = Piece.from_char(token, promoted)
            file -= 1
            promoted = False
        if promoted:
            raise MalformedPosition(f"Dangling promotion marker: {position!r}")
        if file != 0:
            raise MalformedPosition(f"Invalid row width: {position!r}")

    return PositionSnapshot(width, height, pieces, side_part == _BLACK_TO_MOVE)
