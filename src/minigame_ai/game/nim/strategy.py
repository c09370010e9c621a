"""Exact misère Nim theory (Bouton).

ミゼール・ニムの必勝法。

通常のニム: ニム和（各山の個数の XOR）が 0 の局面は手番側の負け。
ミゼール版（最後の1個を取った方が負け）は終盤だけ異なる:
- 全ての山が 1 個以下 → 1個の山が奇数個なら手番側の負け
- それ以外            → ニム和が 0 なら手番側の負け
"""

from __future__ import annotations

from functools import reduce
from operator import xor

from minigame_ai.game.nim.moves import Heaps, apply_move, legal_moves


def nim_sum(heaps: Heaps) -> int:
    """Bitwise XOR of the heap sizes."""
    return reduce(xor, heaps, 0)


def is_losing_position(heaps: Heaps) -> bool:
    """True if the side to move loses against perfect misère play.

    全ての山が空の局面は「直前に最後の1個を取った相手が負けた」状態なので、
    手番側（= 勝者）にとって負け局面ではない。
    """
    if all(h <= 1 for h in heaps):
        return sum(heaps) % 2 == 1
    return nim_sum(heaps) == 0


def winning_moves(heaps: Heaps) -> list[int]:
    """All moves that leave the opponent in a losing position (列挙順を保つ)。"""
    return [m for m in legal_moves(heaps) if is_losing_position(apply_move(heaps, m))]
