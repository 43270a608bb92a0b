"""Piece value object and the glyph tables it is drawn from."""

from __future__ import annotations

from dataclasses import dataclass

from gambit.core.enums import PieceKind, Side

# (kind, filled) ↔ glyph
_GLYPHS: dict[tuple[PieceKind, bool], str] = {
    (PieceKind.KING, True): "♚",
    (PieceKind.QUEEN, True): "♛",
    (PieceKind.ROOK, True): "♜",
    (PieceKind.BISHOP, True): "♝",
    (PieceKind.KNIGHT, True): "♞",
    (PieceKind.PAWN, True): "♟",
    (PieceKind.KING, False): "♔",
    (PieceKind.QUEEN, False): "♕",
    (PieceKind.ROOK, False): "♖",
    (PieceKind.BISHOP, False): "♗",
    (PieceKind.KNIGHT, False): "♘",
    (PieceKind.PAWN, False): "♙",
}

_KINDS: dict[str, tuple[PieceKind, bool]] = {v: k for k, v in _GLYPHS.items()}

PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)

BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


def glyph_for(kind: PieceKind, filled: bool) -> str:
    """Glyph of *kind* in the requested fill-variant, e.g. (QUEEN, True) → ♛."""
    return _GLYPHS[(kind, filled)]


def transform(symbol: str) -> str:
    """Toggle the fill-variant of *symbol*, keeping its kind.

    Symbols outside the 12-glyph table are returned unchanged.
    """
    entry = _KINDS.get(symbol)
    if entry is None:
        return symbol
    kind, filled = entry
    return _GLYPHS[(kind, not filled)]


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable glyph plus side tag.

    The glyph encodes kind and the cosmetic fill-variant; *side* is what the
    rules key on.
    """

    glyph: str
    side: Side

    def __post_init__(self) -> None:
        if self.glyph not in _KINDS:
            raise ValueError(f"Invalid piece glyph: {self.glyph!r}")

    @classmethod
    def of(cls, kind: PieceKind, side: Side, filled: bool) -> Piece:
        return cls(glyph_for(kind, filled), side)

    @property
    def kind(self) -> PieceKind:
        return _KINDS[self.glyph][0]

    @property
    def filled(self) -> bool:
        return _KINDS[self.glyph][1]

    def promoted(self, kind: PieceKind) -> Piece:
        """New piece of *kind* with the same side and fill-variant."""
        return Piece(glyph_for(kind, self.filled), self.side)

    def __str__(self) -> str:
        return self.glyph
