"""Per-side castling rights and the fixed castling routes."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import Side
from gambit.core.types import (
    A1,
    A8,
    B1,
    B8,
    C1,
    C8,
    D1,
    D8,
    E1,
    E8,
    F1,
    F8,
    G1,
    G8,
    H1,
    H8,
    Square,
)


@dataclass
class CastlingRights:
    """Monotonic flags recording what has permanently ruled castling out.

    "First" rook is the a-file rook, "second" the h-file rook.
    """

    first_rook_moved: bool = False
    second_rook_moved: bool = False
    king_moved: bool = False
    castled: bool = False

    def mark_first_rook_moved(self) -> None:
        self.first_rook_moved = True

    def mark_second_rook_moved(self) -> None:
        self.second_rook_moved = True

    def mark_king_moved(self) -> None:
        self.king_moved = True

    def mark_castled(self) -> None:
        self.castled = True

    def kingside_available(self) -> bool:
        return not (self.king_moved or self.second_rook_moved or self.castled)

    def queenside_available(self) -> bool:
        return not (self.king_moved or self.first_rook_moved or self.castled)


@dataclass(frozen=True, slots=True)
class CastleRoute:
    """Squares involved in one castling move."""

    side: Side
    kingside: bool
    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square
    between: tuple[Square, ...]  # strictly between king and rook


CASTLE_ROUTES: dict[tuple[Side, Square], CastleRoute] = {
    (Side.LIGHT, G1): CastleRoute(Side.LIGHT, True, E1, G1, H1, F1, (F1, G1)),
    (Side.LIGHT, C1): CastleRoute(Side.LIGHT, False, E1, C1, A1, D1, (B1, C1, D1)),
    (Side.DARK, G8): CastleRoute(Side.DARK, True, E8, G8, H8, F8, (F8, G8)),
    (Side.DARK, C8): CastleRoute(Side.DARK, False, E8, C8, A8, D8, (B8, C8, D8)),
}

# Rook origin square -> (owner, is first rook)
ROOK_HOMES: dict[Square, tuple[Side, bool]] = {
    A1: (Side.LIGHT, True),
    H1: (Side.LIGHT, False),
    A8: (Side.DARK, True),
    H8: (Side.DARK, False),
}


def castle_route(side: Side, from_sq: Square, to_sq: Square) -> CastleRoute | None:
    """Route for a king move from its home square onto a castle target."""
    route = CASTLE_ROUTES.get((side, to_sq))
    if route is None or route.king_from != from_sq:
        return None
    return route
