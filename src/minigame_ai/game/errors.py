"""Error taxonomy shared by all games and the engine.

ゲームエンジン全体で使う例外クラス。
"""

from __future__ import annotations


class IllegalMoveError(ValueError):
    """Raised when a move is not in the legal set for the state and side.

    合法手ではない手を適用しようとした。
    コントローラはこの例外を捕捉して入力を拒否する（クラッシュさせない）。
    """


class InvalidConfigurationError(ValueError):
    """Raised when new-game parameters are invalid (e.g. modulus <= 0).

    対局設定が不正。対局開始前に検出して開始を止める。
    """


class EngineInvariantViolation(RuntimeError):
    """Raised when the rules or the search reach a state that should not exist.

    ルール実装のバグを示す（実行時に回復すべき状況ではない）。
    例: 終局していないのに手番側に合法手がない局面。
    """
