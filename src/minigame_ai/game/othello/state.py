"""GameState implementation for the 6x6 Othello variant.

オセロ変種の対局状態（ゲームツリーのノード）。
Board クラスが盤面データを持ち、OthelloState が手番の受け渡し・勝敗判定を担当する。
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from minigame_ai.game.othello.board import Board
from minigame_ai.game.othello.evaluation import evaluate_board
from minigame_ai.game.othello.moves import apply_move as _apply_move
from minigame_ai.game.othello.moves import has_legal_move
from minigame_ai.game.othello.moves import legal_moves as _legal_moves
from minigame_ai.game.othello.types import Player


def side_to_move(board: Board, preferred: Player) -> Player:
    """Apply the pass rule to decide who moves on board.

    手番の決定ルール:
    1. preferred（通常は直前に打ったプレイヤーの相手）に合法手があればその手番
    2. なければ相手側に合法手があれば相手がもう一度打つ（パス）
    3. どちらも打てなければ終局。手番は preferred のままにしておく
    """
    if has_legal_move(board, preferred):
        return preferred
    if has_legal_move(board, preferred.opponent):
        return preferred.opponent
    return preferred


@dataclass(frozen=True)  # イミュータブル: apply_move() は新しいオブジェクトを返す
class OthelloState:
    """Immutable game state for the 6x6 Othello variant.

    Terminal conditions（終局条件）:
    - 両者とも合法手がない → 石数の多い方の勝ち、同数は引き分け

    片方だけ打てない場合はパスとなり、もう片方が続けて打つ。
    """

    board: Board = field(default_factory=Board)
    _current_player: Player = Player.BLACK  # 黒から開始
    _move_count: int = 0

    @classmethod
    def from_board(cls, board: Board, preferred: Player = Player.BLACK) -> OthelloState:
        """Build a state for an arbitrary board, applying the pass rule."""
        return cls(board=board, _current_player=side_to_move(board, preferred))

    @property
    def current_player(self) -> int:
        """現在の手番プレイヤー（0=黒, 1=白）。"""
        return self._current_player.value

    @property
    def is_terminal(self) -> bool:
        """両者とも合法手がなければ True。"""
        return not has_legal_move(self.board, self._current_player) and not has_legal_move(
            self.board, self._current_player.opponent
        )

    @property
    def winner(self) -> int | None:
        """勝者を返す。対局中または引き分けは None。"""
        if not self.is_terminal:
            return None
        black = self.board.count(Player.BLACK)
        white = self.board.count(Player.WHITE)
        if black > white:
            return Player.BLACK.value
        if white > black:
            return Player.WHITE.value
        return None  # 同数 → 引き分け

    @property
    def transposition_key(self) -> Hashable:
        return (self.board.squares, self._current_player)

    def legal_moves(self) -> list[int]:
        """合法手のリストを返す。"""
        return _legal_moves(self.board, self._current_player)

    def apply_move(self, move: int) -> OthelloState:
        """手を適用して新しい対局状態を返す。

        手番はパスのルールに従って決まる（相手が打てなければ自分がもう一度打つ）。
        """
        new_board = _apply_move(self.board, self._current_player, move)
        return OthelloState(
            board=new_board,
            _current_player=side_to_move(new_board, self._current_player.opponent),
            _move_count=self._move_count + 1,
        )

    def evaluate(self, player: int) -> int:
        return evaluate_board(self.board, Player(player))
