"""Construction-time configuration for a game."""

from __future__ import annotations

import re
from dataclasses import dataclass

from gambit.core.enums import Side
from gambit.core.validator import RuleOptions

_COLOR_RE = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True, slots=True)
class GameSetup:
    """Immutable per-game cosmetic setup.

    Args:
        light_filled: Light side draws filled glyphs (♚) instead of outline (♔).
        dark_filled: Same choice for the dark side.
        light_color: ``#RRGGBB`` colour used to render light pieces.
        dark_color: ``#RRGGBB`` colour used to render dark pieces.

    None of this feeds into rule logic; it only resolves glyphs and colours.
    """

    light_filled: bool = False
    dark_filled: bool = True
    light_color: str = "#FFFFFF"
    dark_color: str = "#000000"

    def __post_init__(self) -> None:
        for name in ("light_color", "dark_color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not _COLOR_RE.match(value):
                raise ValueError(f"{name} must look like '#RRGGBB', got {value!r}")
        if self.light_color.lower() == self.dark_color.lower():
            raise ValueError("light_color and dark_color must differ")

    def filled(self, side: Side) -> bool:
        return self.light_filled if side == Side.LIGHT else self.dark_filled

    def color_of(self, side: Side) -> str:
        return self.light_color if side == Side.LIGHT else self.dark_color


__all__ = ["GameSetup", "RuleOptions"]
