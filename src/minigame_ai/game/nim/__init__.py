"""駒取りゲーム (misère Nim) — three coloured heaps, last to move loses."""

from minigame_ai.game.nim.display import heaps_to_str
from minigame_ai.game.nim.moves import decode_move, encode_move, legal_moves
from minigame_ai.game.nim.state import NimState
from minigame_ai.game.nim.strategy import is_losing_position, nim_sum, winning_moves
from minigame_ai.game.nim.types import DEFAULT_NIM_CONFIG, Heap, NimConfig, Player

__all__ = [
    "DEFAULT_NIM_CONFIG",
    "Heap",
    "NimConfig",
    "NimState",
    "Player",
    "decode_move",
    "encode_move",
    "heaps_to_str",
    "is_losing_position",
    "legal_moves",
    "nim_sum",
    "winning_moves",
]
