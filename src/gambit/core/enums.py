"""Core enumerations for the rule engine."""

from __future__ import annotations

from enum import IntEnum, auto


class Side(IntEnum):
    """Ownership tag driving whose turn it is."""

    LIGHT = 0
    DARK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class PromotionOutcome(IntEnum):
    """Result of resolving a pending promotion request."""

    PROMOTED = auto()
    CANCELLED = auto()
    STALE = auto()  # request no longer matches the board
