"""Mod-M カードゲーム — whoever makes the running sum a multiple of M loses."""

from minigame_ai.game.mod_m.display import state_to_str
from minigame_ai.game.mod_m.moves import deal, legal_moves
from minigame_ai.game.mod_m.state import ModMState
from minigame_ai.game.mod_m.types import SOURCE_CONFIG, HandMode, ModMConfig, Player

__all__ = [
    "HandMode",
    "ModMConfig",
    "ModMState",
    "Player",
    "SOURCE_CONFIG",
    "deal",
    "legal_moves",
    "state_to_str",
]
