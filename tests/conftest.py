"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pathviewer.document import PathDocument


# Sample path data

ARC_PATH = "M10,20 A90,90 0 0 0 180,90"

SQUARE_PATH = "M0,0 L100,0 L100,100 L0,100 Z"

RELATIVE_PATH = "m10,10 l20,0 l0,20 l-20,0 z"

# One of every kind, absolute, in declaration order.
ALL_KINDS_PATH = (
    "M1,2 L3,4 H5 V6 C7,8,9,10,11,12 Q13,14,15,16 "
    "S17,18,19,20 T21,22 A23,24,25,1,0,26,27 Z"
)

# Second chunk has an unknown designator.
BROKEN_PATH = "M10,20 X5 L1,2"

TWO_EYES_PATH = (
    "M-50,90 A90,90 0 0 0 180,90 "
    "M30,30 A15,15 0 0 0 60,30 M30,30 A15,15 0 0 1 60,30 "
    "M120,30 A15,15 0 0 0 150,30 M120,30 A15,15 0 0 1 150,30"
)


@pytest.fixture
def square_doc() -> PathDocument:
    return PathDocument(SQUARE_PATH)


@pytest.fixture
def relative_doc() -> PathDocument:
    return PathDocument(RELATIVE_PATH)
