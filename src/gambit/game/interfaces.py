"""Game-layer state values shared by the controller and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from gambit.core.enums import PieceKind, Side
from gambit.core.piece import PROMOTION_KINDS, glyph_for
from gambit.core.types import Square

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    AWAITING_MOVE = auto()
    PROMOTION_PENDING = auto()  # turn already passed, choice outstanding
    GAME_OVER = auto()


@dataclass(frozen=True, slots=True)
class GameOver:
    """Terminal state reached when a king is captured."""

    winner: Side


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """An accepted move, as reported to listeners."""

    side: Side
    from_sq: Square
    to_sq: Square
    glyph: str
    captured: str | None = None
    castled: bool = False


# ── Promotion protocol ───────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PromotionRequest:
    """Phase one of a promotion: the choice a collaborator must resolve.

    *candidates* holds the four glyphs (queen, rook, bishop, knight) in the
    promoting side's fill-variant.
    """

    square: Square
    side: Side
    filled: bool

    @property
    def candidates(self) -> tuple[str, ...]:
        return tuple(glyph_for(kind, self.filled) for kind in PROMOTION_KINDS)

    def kind_of(self, glyph: str) -> PieceKind:
        """Kind offered under *glyph*."""
        if glyph not in self.candidates:
            raise ValueError(f"{glyph!r} is not a promotion candidate")
        return PROMOTION_KINDS[self.candidates.index(glyph)]
