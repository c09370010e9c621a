"""GameState implementation for misère three-heap Nim."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from minigame_ai.game.nim.moves import Heaps
from minigame_ai.game.nim.moves import apply_move as _apply_move
from minigame_ai.game.nim.moves import legal_moves as _legal_moves
from minigame_ai.game.nim.strategy import is_losing_position
from minigame_ai.game.nim.types import DEFAULT_NIM_CONFIG, NimConfig, Player

# 静的評価値の大きさ（ミゼール理論で勝敗が確定するので ±定数のみ）
EXACT_SCORE = 100


@dataclass(frozen=True)
class NimState:
    """Immutable game state for misère Nim.

    Terminal conditions（終局条件）:
    - 全ての山が空 → 最後の1個を取ったプレイヤーの負け（= 手番側の勝ち）

    山の合計は1手ごとに必ず1以上減るので、対局は必ず終わる。
    """

    heaps: Heaps = DEFAULT_NIM_CONFIG.heaps()
    _current_player: Player = Player.FIRST

    @classmethod
    def initial(cls, config: NimConfig = DEFAULT_NIM_CONFIG) -> NimState:
        """Validate config and return the starting state."""
        config.validate()
        return cls(heaps=config.heaps())

    @property
    def current_player(self) -> int:
        return self._current_player.value

    @property
    def is_terminal(self) -> bool:
        return sum(self.heaps) == 0

    @property
    def winner(self) -> int | None:
        """最後の1個を取った側の相手（= 空の局面で手番の側）が勝ち。"""
        if not self.is_terminal:
            return None
        return self._current_player.value

    @property
    def transposition_key(self) -> Hashable:
        return (self.heaps, self._current_player)

    def legal_moves(self) -> list[int]:
        return _legal_moves(self.heaps)

    def apply_move(self, move: int) -> NimState:
        """山から駒を取り、手番を相手に渡した新しい状態を返す。"""
        return NimState(
            heaps=_apply_move(self.heaps, move),
            _current_player=self._current_player.opponent,
        )

    def evaluate(self, player: int) -> int:
        """Exact value from misère theory (ヒューリスティックではなく厳密値)。"""
        if self.is_terminal:
            mover_wins = True
        else:
            mover_wins = not is_losing_position(self.heaps)
        score = EXACT_SCORE if mover_wins else -EXACT_SCORE
        return score if player == self.current_player else -score
