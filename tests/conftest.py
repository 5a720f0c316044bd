"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from chessrules.core.board import Board
from chessrules.core.notation import board_from_fen


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def fools_mate() -> Board:
    """After 1.f3 e5 2.g4 Qh4# — White is mated."""
    return board_from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")


@pytest.fixture(autouse=True)
def _debug_logging(caplog: pytest.LogCaptureFixture) -> Iterator[None]:
    """Capture library debug records so tests can assert on them."""
    with caplog.at_level(logging.DEBUG, logger="chessrules"):
        yield
