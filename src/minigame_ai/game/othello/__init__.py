"""ストレンジオセロ (Othello variant) — 6x6 board, parallel opening."""

from minigame_ai.game.othello.board import Board
from minigame_ai.game.othello.display import board_to_str
from minigame_ai.game.othello.moves import legal_moves
from minigame_ai.game.othello.state import OthelloState
from minigame_ai.game.othello.types import SIZE, Player

__all__ = [
    "Board",
    "OthelloState",
    "Player",
    "SIZE",
    "board_to_str",
    "legal_moves",
]
