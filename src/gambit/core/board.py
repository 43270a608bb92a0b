"""Board - 64 optional piece slots addressed by a linear index."""

from __future__ import annotations

from collections.abc import Iterator

from gambit.core.enums import PieceKind, Side
from gambit.core.piece import BACK_RANK, Piece
from gambit.core.types import NUM_SQUARES, Square, is_valid_square, make_square


class Board:
    """Plain mutable array of 64 slots. No legality is enforced here."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * NUM_SQUARES

    # -- Element access -----------------------------------------------------

    def get(self, sq: int) -> Piece | None:
        """Piece at *sq*, or ``None`` for empty or out-of-range squares."""
        if not is_valid_square(sq):
            return None
        return self._squares[sq]

    def place(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self.get(sq) is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, side: Side | None = None) -> Iterator[tuple[Square, Piece]]:
        """Yield ``(square, piece)`` for occupied slots, optionally by *side*."""
        for sq, piece in enumerate(self._squares):
            if piece is not None and (side is None or piece.side == side):
                yield sq, piece

    def king_square(self, side: Side) -> Square | None:
        """First square holding *side*'s king, or ``None`` when it is gone."""
        for sq, piece in self.occupied(side):
            if piece.kind == PieceKind.KING:
                return sq
        return None

    # -- Copying ----------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, light_filled: bool = False, dark_filled: bool = True) -> Board:
        """Standard starting layout with each side's fill-variant."""
        b = cls()
        for f, kind in enumerate(BACK_RANK):
            b[make_square(f, 0)] = Piece.of(kind, Side.LIGHT, light_filled)
            b[make_square(f, 1)] = Piece.of(PieceKind.PAWN, Side.LIGHT, light_filled)
            b[make_square(f, 6)] = Piece.of(PieceKind.PAWN, Side.DARK, dark_filled)
            b[make_square(f, 7)] = Piece.of(kind, Side.DARK, dark_filled)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
