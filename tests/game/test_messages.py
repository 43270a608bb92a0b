"""Tests for notice texts."""

from gambit.core.enums import PieceKind
from gambit.game import messages


def test_every_kind_has_a_message() -> None:
    assert set(messages.ILLEGAL_BY_KIND) == set(PieceKind)


def test_capture_text() -> None:
    assert messages.capture("♘", "♝") == "♘ attacks and captures ♝"


def test_promoted_text() -> None:
    assert messages.promoted("♕") == "The Pawn was promoted to ♕"
