"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from movescribe.core.types import VariantDescriptor

SHOGI_START = "lnsgkgsnl/1r5b1/ppppppppp/9/9/9/PPPPPPPPP/1B5R1/LNSGKGSNL[-] w - - 0 1"
XIANGQI_START = "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w - - 0 1"


@pytest.fixture
def shogi_start() -> str:
    return SHOGI_START


@pytest.fixture
def xiangqi_start() -> str:
    return XIANGQI_START


@pytest.fixture
def shogi() -> VariantDescriptor:
    return VariantDescriptor.shogi()


@pytest.fixture
def xiangqi() -> VariantDescriptor:
    return VariantDescriptor.xiangqi()


@pytest.fixture
def chess() -> VariantDescriptor:
    return VariantDescriptor.chess()
