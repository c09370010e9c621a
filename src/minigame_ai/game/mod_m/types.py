"""Types and configuration for the Mod-M card game.

Mod-M ゲームの基本型・設定。
1〜N のカードを交互に場に出し、場の合計が M の倍数になったら、
そのカードを出したプレイヤーの負け。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, unique

from minigame_ai.game.errors import InvalidConfigurationError


@unique
class Player(IntEnum):
    """Player identifiers."""

    ALICE = 0
    BOB = 1

    @property
    def opponent(self) -> Player:
        """相手プレイヤーを返す。"""
        return Player(1 - self.value)


@unique
class HandMode(str, Enum):
    """How the cards 1..N are dealt.

    FULL:  両プレイヤーがそれぞれ 1〜N を全部持つ
    SPLIT: 1〜N を1組だけ用意し、先手から交互に配る（先手 1, 3, 5, ... / 後手 2, 4, ...）
    """

    FULL = "full"
    SPLIT = "split"


@dataclass(frozen=True)
class ModMConfig:
    """Configuration for one Mod-M game.

    Attributes:
        card_count:        カードの最大値 N（1〜N を使う）
        modulus:           割る数 M
        first_mover:       先手プレイヤー
        exhaustion_winner: 全カードを出し切っても M の倍数にならなかった場合の勝者。
                           版によってルールが異なるため、既定値を持たせず必ず明示する。
        hand_mode:         手札の配り方
    """

    card_count: int
    modulus: int
    first_mover: Player
    exhaustion_winner: Player
    hand_mode: HandMode = HandMode.FULL

    def validate(self) -> None:
        """Raise InvalidConfigurationError if the game cannot start."""
        if not isinstance(self.card_count, int) or self.card_count < 1:
            msg = f"card_count must be a positive integer, got {self.card_count!r}"
            raise InvalidConfigurationError(msg)
        if not isinstance(self.modulus, int) or self.modulus < 1:
            msg = f"modulus must be a positive integer, got {self.modulus!r}"
            raise InvalidConfigurationError(msg)
        for name in ("first_mover", "exhaustion_winner"):
            value = getattr(self, name)
            if not isinstance(value, Player):
                msg = f"{name} must be a player (0 or 1), got {value!r}"
                raise InvalidConfigurationError(msg)
        if not isinstance(self.hand_mode, HandMode):
            msg = f"hand_mode must be a HandMode, got {self.hand_mode!r}"
            raise InvalidConfigurationError(msg)


# 元のゲームの設定: N=5, M=7、プレイヤー（Alice）先手、出し切ったら Alice の勝ち
SOURCE_CONFIG = ModMConfig(
    card_count=5,
    modulus=7,
    first_mover=Player.ALICE,
    exhaustion_winner=Player.ALICE,
)
