"""Shared test fixtures."""

from __future__ import annotations

import pytest


# L-shaped source (length 2) and a vertical target (length 1)
L_SOURCE = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0)]
VERTICAL_TARGET = [(0.0, 5.0), (0.0, 6.0)]

# 3-4-5 triangle leg, length 5 with only 2 vertices
DIAGONAL = [(0.0, 0.0), (3.0, 4.0)]

# Length 2.5 + 2.5 + 7.5 = 12.5 (non-integer, larger than its 4 vertices)
ZIGZAG = [(0.0, 0.0), (1.5, 2.0), (3.0, 0.0), (7.5, 6.0)]


@pytest.fixture
def l_source() -> list[tuple[float, float]]:
    return list(L_SOURCE)


@pytest.fixture
def vertical_target() -> list[tuple[float, float]]:
    return list(VERTICAL_TARGET)


@pytest.fixture
def diagonal() -> list[tuple[float, float]]:
    return list(DIAGONAL)


@pytest.fixture
def zigzag() -> list[tuple[float, float]]:
    return list(ZIGZAG)
