"""Game management layer: controller, setup, promotion protocol.

Quick start::

    from gambit.game import GameController, GameSetup

    ctrl = GameController(GameSetup(light_filled=False, dark_filled=True))
    ctrl.events.on_notice.append(print)
    ctrl.swap_to(12, 28)  # e2-e4
"""

from gambit.game.config import GameSetup, RuleOptions
from gambit.game.controller import GameController, GameEvents
from gambit.game.interfaces import GameOver, GamePhase, MoveRecord, PromotionRequest

__all__ = [
    # Configuration
    "GameSetup",
    "RuleOptions",
    # State values
    "GameOver",
    "GamePhase",
    "MoveRecord",
    "PromotionRequest",
    # Concrete
    "GameController",
    "GameEvents",
]
