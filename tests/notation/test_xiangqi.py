"""Tests for xiangqi WXF move notation."""

import pytest

from movescribe.core.errors import MalformedMove
from movescribe.core.types import VariantDescriptor
from movescribe.notation.models import ExtendedMoveInfo
from movescribe.notation.xiangqi import xiangqi_notation

_AFTER_CENTRAL_CANNON = (
    "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C2C4/9/RNBAKABNR b - - 0 1"
)


def _fmt(
    move: str, after: str, variant: VariantDescriptor, before: str | None = None
) -> str:
    return xiangqi_notation(
        ExtendedMoveInfo(move=move, resulting_position=after, previous_position=before),
        variant,
    )


class TestXiangqiPieces:
    def test_central_cannon(self, xiangqi: VariantDescriptor, xiangqi_start: str) -> None:
        assert _fmt("h3e3", _AFTER_CENTRAL_CANNON, xiangqi, xiangqi_start) == "C2=5"

    def test_horse_uses_h_and_target_file(self, xiangqi: VariantDescriptor) -> None:
        after = "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1CN4C1/9/R1BAKABNR b - - 0 1"
        assert _fmt("b1c3", after, xiangqi) == "H8+7"

    def test_elephant_uses_e(self, xiangqi: VariantDescriptor) -> None:
        after = "4k4/9/9/9/9/9/9/4B4/9/4K4 b - - 0 1"
        assert _fmt("c1e3", after, xiangqi) == "E7+5"

    def test_advisor_diagonal(self, xiangqi: VariantDescriptor) -> None:
        after = "4k4/9/9/9/9/9/9/9/4A4/4K4 b - - 0 1"
        assert _fmt("d1e2", after, xiangqi) == "A6+5"

    def test_rook_retreat_counts_ranks(self, xiangqi: VariantDescriptor) -> None:
        after = "4k4/9/9/9/9/9/9/4R4/9/3K5 b - - 0 1"
        assert _fmt("e6e3", after, xiangqi) == "R5-3"

    def test_rook_advance_counts_ranks(self, xiangqi: VariantDescriptor) -> None:
        after = "4k4/4R4/9/9/9/9/9/9/9/3K5 b - - 0 1"
        assert _fmt("e6e9", after, xiangqi) == "R5+3"


class TestXiangqiBlackPerspective:
    def test_black_cannon_counts_from_own_right(self, xiangqi: VariantDescriptor) -> None:
        after = "rnbakabnr/9/1c2c4/p1p1p1p1p/9/9/P1P1P1P1P/1C2C4/9/RNBAKABNR w - - 0 1"
        assert _fmt("h8e8", after, xiangqi, _AFTER_CENTRAL_CANNON) == "C8=5"

    def test_black_pawn_advance(self, xiangqi: VariantDescriptor, xiangqi_start: str) -> None:
        after = "rnbakabnr/9/1c5c1/p3p1p1p/2p6/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w - - 0 1"
        before = xiangqi_start.replace(" w ", " b ")
        assert _fmt("c7c6", after, xiangqi, before) == "P3+1"

    def test_black_sideways(self, xiangqi: VariantDescriptor) -> None:
        after = "5k3/9/9/9/9/9/9/9/9/4K4 w - - 0 1"
        assert _fmt("e10f10", after, xiangqi) == "K5=6"


class TestXiangqiTandemPawns:
    # Red pawns on file 5 at internal ranks 5 (front) and 7 (rear).
    BEFORE = "4k4/9/9/9/4P4/9/4P4/9/9/4K4 w - - 0 1"

    def test_front_pawn_sideways(self, xiangqi: VariantDescriptor) -> None:
        after = "4k4/9/9/9/5P3/9/4P4/9/9/4K4 b - - 0 1"
        assert _fmt("e6f6", after, xiangqi, self.BEFORE) == "P+=4"

    def test_rear_pawn_sideways(self, xiangqi: VariantDescriptor) -> None:
        after = "4k4/9/9/9/4P4/9/5P3/9/9/4K4 b - - 0 1"
        token = _fmt("e4f4", after, xiangqi, self.BEFORE)
        assert token == "P-=4"
        assert token.count("+") + token.count("-") == 1

    def test_rear_pawn_forward(self, xiangqi: VariantDescriptor) -> None:
        after = "4k4/9/9/9/4P4/4P4/9/9/9/4K4 b - - 0 1"
        assert _fmt("e4e5", after, xiangqi, self.BEFORE) == "P-+1"

    @pytest.mark.parametrize(
        "move, after",
        [
            ("e4f4", "4k4/9/9/9/4P4/9/5P3/9/9/4K4 b - - 0 1"),
            ("e4e5", "4k4/9/9/9/4P4/4P4/9/9/9/4K4 b - - 0 1"),
            ("e6f6", "4k4/9/9/9/5P3/9/4P4/9/9/4K4 b - - 0 1"),
        ],
    )
    def test_same_token_without_previous_position(
        self, xiangqi: VariantDescriptor, move: str, after: str
    ) -> None:
        assert _fmt(move, after, xiangqi) == _fmt(move, after, xiangqi, self.BEFORE)

    def test_black_rear_pawn_sideways(self, xiangqi: VariantDescriptor) -> None:
        before = "4k4/9/9/4p4/9/4p4/9/9/9/4K4 b - - 0 1"
        after = "4k4/9/9/5p3/9/4p4/9/9/9/4K4 w - - 0 1"
        assert _fmt("e7f7", after, xiangqi, before) == "P-=6"

    def test_pawns_on_other_files_ignored(self, xiangqi: VariantDescriptor) -> None:
        before = "4k4/9/9/9/3PP4/9/9/9/9/4K4 w - - 0 1"
        after = "4k4/9/9/3P5/4P4/9/9/9/9/4K4 b - - 0 1"
        assert _fmt("d6d7", after, xiangqi, before) == "P6+1"


class TestXiangqiThreePawns:
    def test_red_middle_pawn_uses_ordinal(self, xiangqi: VariantDescriptor) -> None:
        before = "4k4/9/9/4P4/4P4/9/4P4/9/9/4K4 w - - 0 1"
        after = "4k4/9/9/4P4/3P5/9/4P4/9/9/4K4 b - - 0 1"
        token = _fmt("e6d6", after, xiangqi, before)
        assert token == "25=6"
        assert "P" not in token

    def test_black_front_pawn_uses_ordinal(self, xiangqi: VariantDescriptor) -> None:
        before = "4k4/9/9/4p4/9/4p4/4p4/9/9/4K4 b - - 0 1"
        after = "4k4/9/9/4p4/9/4p4/9/4p4/9/4K4 w - - 0 1"
        assert _fmt("e4e3", after, xiangqi, before) == "15+1"


class TestXiangqiErrors:
    def test_drop_rejected(self, xiangqi: VariantDescriptor, xiangqi_start: str) -> None:
        with pytest.raises(MalformedMove, match="Drops"):
            _fmt("P@e5", xiangqi_start, xiangqi)

    def test_empty_destination_raises(
        self, xiangqi: VariantDescriptor, xiangqi_start: str
    ) -> None:
        with pytest.raises(MalformedMove, match="destination"):
            _fmt("h3e3", xiangqi_start, xiangqi)

    def test_idempotent(self, xiangqi: VariantDescriptor, xiangqi_start: str) -> None:
        move = ExtendedMoveInfo("h3e3", _AFTER_CENTRAL_CANNON, xiangqi_start)
        assert xiangqi_notation(move, xiangqi) == xiangqi_notation(move, xiangqi)
