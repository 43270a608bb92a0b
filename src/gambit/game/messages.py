"""User-facing notice texts emitted by the controller."""

from __future__ import annotations

from gambit.core.enums import PieceKind

NOT_YOUR_TURN = "It's not your turn!"
SELF_CHECK = "Illegal move: You must get out of check and can't put your King in danger."
CASTLE_INTO_CHECK = "Illegal move: Your King would be in check."
CASTLED = "The King has castled."

ILLEGAL_BY_KIND: dict[PieceKind, str] = {
    PieceKind.PAWN: "The Pawn can only move one square forward.",
    PieceKind.KNIGHT: "The Knight can only move in an L shape.",
    PieceKind.BISHOP: "The Bishop can only move diagonally.",
    PieceKind.ROOK: "The Rook can only move horizontally or vertically.",
    PieceKind.QUEEN: "The Queen can move horizontally, vertically, or diagonally.",
    PieceKind.KING: "The King can only move one square in any direction.",
}


def capture(attacker: str, victim: str) -> str:
    return f"{attacker} attacks and captures {victim}"


def promoted(glyph: str) -> str:
    return f"The Pawn was promoted to {glyph}"
