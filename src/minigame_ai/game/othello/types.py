"""Types and constants for the 6x6 Othello variant.

ストレンジオセロ（6×6 オセロ変種）の基本型・定数定義。
"""

from __future__ import annotations

from enum import IntEnum, unique

# 盤面のサイズ: 6 × 6（36マス）
SIZE = 6
NUM_SQUARES = SIZE * SIZE


@unique
class Player(IntEnum):
    """Player identifiers.

    黒（BLACK）が先手、白（WHITE）が後手。
    """

    BLACK = 0  # 先手 (moves first)
    WHITE = 1  # 後手

    @property
    def opponent(self) -> Player:
        """相手プレイヤーを返す。0↔1 の切り替え。"""
        return Player(1 - self.value)


# 8方向: (行の変化, 列の変化)
# この順序で挟める石を探索する（結果は全方向の和集合なので順序は結果に影響しない）
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

# 四隅のマスインデックス
CORNERS: frozenset[int] = frozenset({0, SIZE - 1, NUM_SQUARES - SIZE, NUM_SQUARES - 1})

# 隅を除く外周のマス
EDGES: frozenset[int] = frozenset(
    idx
    for idx in range(NUM_SQUARES)
    if (idx // SIZE in (0, SIZE - 1) or idx % SIZE in (0, SIZE - 1)) and idx not in CORNERS
)

# 評価関数の重み
PIECE_WEIGHT = 3
CORNER_WEIGHT = 10
EDGE_WEIGHT = 2
MOBILITY_WEIGHT = 2
