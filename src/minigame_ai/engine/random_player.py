"""Random player — selects a legal move uniformly at random.

ランダムプレイヤー: 合法手の中からランダムに手を選ぶ。

用途:
- 負けが確定した局面でのコンピュータの手（どの手でも結果が同じなので一様に選ぶ）
- ミニマックスとの対戦テスト

乱数生成器は呼び出し側から渡す（シードを固定すればテストで再現できる）。
"""

from __future__ import annotations

import random

from minigame_ai.game.protocol import GameState


def random_move(
    state: GameState,
    rng: random.Random | None = None,
    candidates: list[int] | None = None,
) -> int:
    """Return a random legal move.

    candidates を渡すとその中から選ぶ（例: 即負けにならない手だけに絞った候補）。
    合法手がない場合は ValueError を送出する（終局局面では呼ばれないはず）。
    """
    moves = state.legal_moves() if candidates is None else candidates
    if not moves:
        raise ValueError("No legal moves available")
    chooser = rng if rng is not None else random.Random()
    return chooser.choice(moves)  # 一様ランダムサンプリング
