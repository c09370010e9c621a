"""Static evaluation for the 6x6 Othello variant.

オセロ変種の静的評価関数。
深さ制限で探索を打ち切った局面の良し悪しを近似する。

Scoring (player 視点、正なら player 有利):
- 石数の差 × 3
- 隅 1つにつき ±10
- 隅以外の外周 1マスにつき ±2
- 着手可能数（モビリティ）の差 × 2
"""

from __future__ import annotations

from minigame_ai.game.othello.board import Board
from minigame_ai.game.othello.moves import legal_moves
from minigame_ai.game.othello.types import (
    CORNER_WEIGHT,
    CORNERS,
    EDGE_WEIGHT,
    EDGES,
    MOBILITY_WEIGHT,
    PIECE_WEIGHT,
    Player,
)


def _square_score(board: Board, player: Player, squares: frozenset[int], weight: int) -> int:
    score = 0
    for idx in squares:
        owner = board.squares[idx]
        if owner is None:
            continue
        score += weight if owner == player else -weight
    return score


def evaluate_board(board: Board, player: Player) -> int:
    """Evaluate a board from player's perspective."""
    opponent = player.opponent
    piece_diff = board.count(player) - board.count(opponent)
    mobility_diff = len(legal_moves(board, player)) - len(legal_moves(board, opponent))

    return (
        PIECE_WEIGHT * piece_diff
        + _square_score(board, player, CORNERS, CORNER_WEIGHT)
        + _square_score(board, player, EDGES, EDGE_WEIGHT)
        + MOBILITY_WEIGHT * mobility_diff
    )
