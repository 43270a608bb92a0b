"""Tests for GameSetup validation and lookups."""

import pytest

from gambit.core.enums import Side
from gambit.game.config import GameSetup


class TestGameSetup:
    def test_defaults(self) -> None:
        setup = GameSetup()
        assert not setup.filled(Side.LIGHT)
        assert setup.filled(Side.DARK)
        assert setup.color_of(Side.LIGHT) == "#FFFFFF"
        assert setup.color_of(Side.DARK) == "#000000"

    @pytest.mark.parametrize("color", ["red", "#FFF", "#GGGGGG", "FFFFFF", ""])
    def test_rejects_malformed_colour(self, color: str) -> None:
        with pytest.raises(ValueError):
            GameSetup(light_color=color)

    def test_rejects_identical_colours(self) -> None:
        with pytest.raises(ValueError):
            GameSetup(light_color="#1a2a5a", dark_color="#1A2A5A")

    def test_both_sides_may_share_a_fill(self) -> None:
        setup = GameSetup(light_filled=True, dark_filled=True)
        assert setup.filled(Side.LIGHT) and setup.filled(Side.DARK)
