"""Core rule engine: pure chess logic with zero external dependencies.

Quick start::

    from gambit.core import Board, CheckDetector, MoveValidator, PieceKind, Side

    board = Board.initial()
    validator = MoveValidator(board)
    validator.is_legal(PieceKind.PAWN, 12, 28, Side.LIGHT)   # e2-e4 → True
    CheckDetector(board, validator).is_in_check(Side.LIGHT)  # → False
"""

from gambit.core.board import Board
from gambit.core.castling import CASTLE_ROUTES, CastleRoute, CastlingRights
from gambit.core.check import CheckDetector
from gambit.core.enums import PieceKind, PromotionOutcome, Side
from gambit.core.piece import PROMOTION_KINDS, Piece, glyph_for, transform
from gambit.core.types import (
    Square,
    file_of,
    make_square,
    rank_of,
    square_name,
)
from gambit.core.validator import MoveValidator, RuleOptions

__all__ = [
    # Enums
    "PieceKind",
    "PromotionOutcome",
    "Side",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "CastleRoute",
    "CastlingRights",
    "CheckDetector",
    "MoveValidator",
    "Piece",
    "RuleOptions",
    # Glyphs
    "CASTLE_ROUTES",
    "PROMOTION_KINDS",
    "glyph_for",
    "transform",
]
