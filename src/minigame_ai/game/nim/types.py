"""Types and configuration for misère three-heap Nim.

駒取りゲーム（三山崩し・ミゼール版）の基本型・設定。
青・黄・赤の3色の山から、1色を選んで1個以上取る。最後の1個を取った方が負け。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, unique

from minigame_ai.game.errors import InvalidConfigurationError


@unique
class Player(IntEnum):
    """Player identifiers. FIRST が先手。"""

    FIRST = 0
    SECOND = 1

    @property
    def opponent(self) -> Player:
        """相手プレイヤーを返す。"""
        return Player(1 - self.value)


@unique
class Heap(IntEnum):
    """Heap colours. 値は heaps タプルのインデックスと手のエンコードに使う。"""

    BLUE = 0
    YELLOW = 1
    RED = 2


NUM_HEAPS = len(Heap)


@dataclass(frozen=True)
class NimConfig:
    """Initial heap sizes.

    Attributes:
        blue:   青の駒の数
        yellow: 黄の駒の数
        red:    赤の駒の数
    """

    blue: int = 7
    yellow: int = 6
    red: int = 2

    def validate(self) -> None:
        """Raise InvalidConfigurationError for negative or all-empty heaps."""
        heaps = self.heaps()
        if any(not isinstance(h, int) or h < 0 for h in heaps):
            msg = f"Heap sizes must be non-negative integers, got {heaps}"
            raise InvalidConfigurationError(msg)
        if sum(heaps) == 0:
            msg = "At least one heap must contain tokens"
            raise InvalidConfigurationError(msg)

    def heaps(self) -> tuple[int, int, int]:
        return (self.blue, self.yellow, self.red)


# 元のゲームの初期配置（青7・黄6・赤2）
DEFAULT_NIM_CONFIG = NimConfig()
