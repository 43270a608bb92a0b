"""Per-kind move legality, built around a shared sliding-piece ray scan."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gambit.core.enums import PieceKind, Side
from gambit.core.types import (
    Square,
    file_of,
    is_valid_square,
    make_square,
    on_board,
    rank_of,
)

if TYPE_CHECKING:
    from gambit.core.board import Board


@dataclass(frozen=True, slots=True)
class RuleOptions:
    """Switches for the two known geometry gaps of the classic rules.

    Both default to off, which keeps the historical behaviour:
    knight offsets and pawn captures are raw index arithmetic that can wrap
    across the a/h file edge, and a pawn's double step only looks at the
    destination square.
    """

    strict_geometry: bool = False
    check_double_step_path: bool = False


HORIZONTAL_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0))
VERTICAL_DIRS: tuple[tuple[int, int], ...] = ((0, 1), (0, -1))
DIAGONAL_DIRS: tuple[tuple[int, int], ...] = ((-1, 1), (1, 1), (-1, -1), (1, -1))

KNIGHT_OFFSETS: tuple[int, ...] = (6, -6, 10, -10, 15, -15, 17, -17)

SLIDING_SEQUENCE = 8
KING_SEQUENCE = 2
CASTLE_REACH_SEQUENCE = 3

_PAWN_START_RANK: dict[Side, int] = {Side.LIGHT: 1, Side.DARK: 6}


class MoveValidator:
    """Answers "may a *kind* of *side* go from *from_sq* to *to_sq*?".

    Reads the board it was given and never mutates it. Turn order,
    self-check and castling are the controller's business.
    """

    __slots__ = ("_board", "_options")

    def __init__(self, board: Board, options: RuleOptions | None = None) -> None:
        self._board = board
        self._options = options or RuleOptions()

    @property
    def options(self) -> RuleOptions:
        return self._options

    # -- Public API ---------------------------------------------------------

    def is_legal(
        self, kind: PieceKind, from_sq: Square, to_sq: Square, side: Side
    ) -> bool:
        if kind == PieceKind.PAWN:
            return self.pawn(from_sq, to_sq, side)
        if kind == PieceKind.KNIGHT:
            return self.knight(from_sq, to_sq, side)
        if kind == PieceKind.BISHOP:
            return self.bishop(from_sq, to_sq, side)
        if kind == PieceKind.ROOK:
            return self.rook(from_sq, to_sq, side)
        if kind == PieceKind.QUEEN:
            return self.queen(from_sq, to_sq, side)
        return self.king(from_sq, to_sq, side)

    def rook(self, from_sq: Square, to_sq: Square, side: Side) -> bool:
        return self.scan(
            from_sq, to_sq, side, SLIDING_SEQUENCE, horizontal=True, vertical=True
        )

    def bishop(self, from_sq: Square, to_sq: Square, side: Side) -> bool:
        return self.scan(from_sq, to_sq, side, SLIDING_SEQUENCE, diagonal=True)

    def queen(self, from_sq: Square, to_sq: Square, side: Side) -> bool:
        return self.scan(
            from_sq,
            to_sq,
            side,
            SLIDING_SEQUENCE,
            horizontal=True,
            vertical=True,
            diagonal=True,
        )

    def king(
        self,
        from_sq: Square,
        to_sq: Square,
        side: Side,
        sequence: int = KING_SEQUENCE,
    ) -> bool:
        """Single step by default; ``sequence=3`` gives the castling reach."""
        return self.scan(
            from_sq, to_sq, side, sequence, horizontal=True, vertical=True, diagonal=True
        )

    def knight(self, from_sq: Square, to_sq: Square, side: Side) -> bool:
        if from_sq == to_sq or not is_valid_square(to_sq):
            return False
        if to_sq - from_sq not in KNIGHT_OFFSETS:
            return False
        if self._options.strict_geometry:
            df = abs(file_of(to_sq) - file_of(from_sq))
            dr = abs(rank_of(to_sq) - rank_of(from_sq))
            if (df, dr) not in ((1, 2), (2, 1)):
                return False
        return self._can_land(to_sq, side)

    def pawn(self, from_sq: Square, to_sq: Square, side: Side) -> bool:
        if from_sq == to_sq or not is_valid_square(to_sq):
            return False

        step = 8 if side == Side.LIGHT else -8

        # Diagonal captures
        if to_sq in (from_sq + step - 1, from_sq + step + 1):
            if self._options.strict_geometry and (
                abs(file_of(to_sq) - file_of(from_sq)) != 1
            ):
                return False
            target = self._board.get(to_sq)
            return target is not None and target.side != side

        if to_sq == from_sq + step:
            return self._board.is_empty(to_sq)

        if to_sq == from_sq + 2 * step and rank_of(from_sq) == _PAWN_START_RANK[side]:
            if self._options.check_double_step_path and not self._board.is_empty(
                from_sq + step
            ):
                return False
            return self._board.is_empty(to_sq)

        return False

    # -- Ray scan -----------------------------------------------------------

    def scan(
        self,
        from_sq: Square,
        to_sq: Square,
        side: Side,
        sequence: int,
        *,
        horizontal: bool = False,
        vertical: bool = False,
        diagonal: bool = False,
    ) -> bool:
        """Walk all enabled directions outward in lockstep, up to
        ``sequence - 1`` steps.

        A direction drops out when it leaves the board or hits an occupied
        square that is not *to_sq*. Reaching *to_sq* ends the scan: the move
        is legal iff that square is empty or holds an enemy piece.
        """
        if from_sq == to_sq:
            return False

        active: list[tuple[int, int]] = []
        if horizontal:
            active.extend(HORIZONTAL_DIRS)
        if vertical:
            active.extend(VERTICAL_DIRS)
        if diagonal:
            active.extend(DIAGONAL_DIRS)

        f0, r0 = file_of(from_sq), rank_of(from_sq)
        for i in range(1, sequence):
            for direction in tuple(active):
                df, dr = direction
                f, r = f0 + df * i, r0 + dr * i
                if not on_board(f, r):
                    active.remove(direction)
                    continue
                sq = make_square(f, r)
                if sq == to_sq:
                    return self._can_land(sq, side)
                if self._board[sq] is not None:
                    active.remove(direction)
            if not active:
                break
        return False

    # -- Internal -----------------------------------------------------------

    def _can_land(self, sq: Square, side: Side) -> bool:
        """Empty or enemy-occupied."""
        piece = self._board.get(sq)
        return piece is None or piece.side != side
