"""Check detection by replaying enemy move legality onto the king square."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gambit.core.enums import Side
from gambit.core.types import Square

if TYPE_CHECKING:
    from gambit.core.board import Board
    from gambit.core.validator import MoveValidator


class CheckDetector:
    """Read-only check test over a board.

    A side without a king is never in check; the controller's game-over
    path deals with the missing king.
    """

    __slots__ = ("_board", "_validator")

    def __init__(self, board: Board, validator: MoveValidator) -> None:
        self._board = board
        self._validator = validator

    def is_in_check(self, side: Side) -> bool:
        king_sq = self._board.king_square(side)
        if king_sq is None:
            return False
        enemy = side.opposite
        for sq, piece in self._board.occupied(enemy):
            if self._validator.is_legal(piece.kind, sq, king_sq, enemy):
                return True
        return False

    def attackers_of(self, side: Side) -> list[Square]:
        """Squares of every enemy piece that reaches *side*'s king."""
        king_sq = self._board.king_square(side)
        if king_sq is None:
            return []
        enemy = side.opposite
        return [
            sq
            for sq, piece in self._board.occupied(enemy)
            if self._validator.is_legal(piece.kind, sq, king_sq, enemy)
        ]
