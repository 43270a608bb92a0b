"""Square indexing for the 8x8 board.

A square is a plain ``int``, ``rank * 8 + file``: a1=0, h1=7, a8=56, h8=63.
Only the two back ranks are named; castling is the one rule that needs
fixed squares.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

BOARD_WIDTH = 8
NUM_SQUARES = BOARD_WIDTH * BOARD_WIDTH

_FILE_LETTERS = "abcdefgh"


def file_of(sq: Square) -> int:
    return sq % BOARD_WIDTH


def rank_of(sq: Square) -> int:
    return sq // BOARD_WIDTH


def make_square(file: int, rank: int) -> Square:
    return rank * BOARD_WIDTH + file


def on_board(file: int, rank: int) -> bool:
    """Whether a file/rank pair (possibly off the edge) names a square."""
    return 0 <= file < BOARD_WIDTH and 0 <= rank < BOARD_WIDTH


def is_valid_square(sq: int) -> bool:
    return 0 <= sq < NUM_SQUARES


def square_name(sq: Square) -> str:
    """Algebraic name for log lines, e.g. 28 -> 'e4'."""
    return f"{_FILE_LETTERS[file_of(sq)]}{rank_of(sq) + 1}"


A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
