"""GameState protocol — all games implement this interface.

ゲーム状態の共通インタフェース（プロトコル）。

オセロ変種・三山崩し（ニム）・Mod-M カードゲームがこのプロトコルを実装することで、
ミニマックス探索やターン管理がゲームに依存せず動作できる。
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Protocol, runtime_checkable


@runtime_checkable  # isinstance() でのランタイムチェックを有効にする
class GameState(Protocol):
    """Common interface for all two-player game states.

    すべてのゲームが実装すべき共通インタフェース。

    重要: apply_move() は新しい状態を返す（イミュータブル設計）。
    current_player / is_terminal / winner は局面から導出される値であり、
    外部から書き換えてはならない。
    """

    @property
    def current_player(self) -> int:
        """現在手番のプレイヤー（0 or 1）を返す。"""
        ...

    @property
    def is_terminal(self) -> bool:
        """ゲームが終了していれば True を返す。"""
        ...

    @property
    def winner(self) -> int | None:
        """勝者（0 or 1）を返す。対局中や引き分けは None。"""
        ...

    @property
    def transposition_key(self) -> Hashable:
        """探索の置換表で使うキー。同じ将来を持つ局面は同じキーになる。"""
        ...

    def legal_moves(self) -> list[int]:
        """手番プレイヤーの合法手リストを返す。手がなければ空リスト。"""
        ...

    def apply_move(self, move: int) -> GameState:
        """手を適用した新しい状態を返す（元の状態は変化しない）。

        合法手でなければ IllegalMoveError を送出する。
        """
        ...

    def evaluate(self, player: int) -> int:
        """player から見た静的評価値（深さ制限で探索を打ち切ったときに使う）。"""
        ...
