"""GameState implementation for the Mod-M card game.

Mod-M ゲームの対局状態。

Terminal conditions（終局条件、この順序で判定する）:
1. 即死判定: 出した直後に場の合計が M の倍数 → 出したプレイヤーの負け
2. 出し切り: 両者の手札が空 → 設定の exhaustion_winner の勝ち
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from minigame_ai.game.errors import IllegalMoveError
from minigame_ai.game.mod_m.moves import Hands, deal
from minigame_ai.game.mod_m.moves import apply_move as _apply_move
from minigame_ai.game.mod_m.moves import legal_moves as _legal_moves
from minigame_ai.game.mod_m.types import SOURCE_CONFIG, ModMConfig, Player


@dataclass(frozen=True)
class ModMState:
    """Immutable game state for Mod-M.

    played: 場に出されたカードと出したプレイヤーの組 (card, owner) の列。
    場の合計 total は played から常に計算する（別フィールドで持たない）。
    """

    config: ModMConfig = SOURCE_CONFIG
    hands: Hands = field(default_factory=lambda: deal(SOURCE_CONFIG))
    played: tuple[tuple[int, Player], ...] = ()
    _current_player: Player = SOURCE_CONFIG.first_mover

    @classmethod
    def initial(cls, config: ModMConfig = SOURCE_CONFIG) -> ModMState:
        """Validate config, deal the hands and return the starting state."""
        config.validate()
        return cls(config=config, hands=deal(config), _current_player=config.first_mover)

    @property
    def total(self) -> int:
        """場に出たカードの合計。"""
        return sum(card for card, _ in self.played)

    @property
    def current_player(self) -> int:
        return self._current_player.value

    @property
    def loser_by_multiple(self) -> Player | None:
        """直前の一手で合計が M の倍数になっていれば、その手を出したプレイヤー。"""
        if self.played and self.total % self.config.modulus == 0:
            return self.played[-1][1]
        return None

    @property
    def is_terminal(self) -> bool:
        if self.loser_by_multiple is not None:
            return True
        return not self.hands[0] and not self.hands[1]

    @property
    def winner(self) -> int | None:
        loser = self.loser_by_multiple
        if loser is not None:
            return loser.opponent.value
        if not self.hands[0] and not self.hands[1]:
            return self.config.exhaustion_winner.value
        return None

    @property
    def transposition_key(self) -> Hashable:
        # 将来の展開は手札・合計の剰余・手番・直前の即死判定だけで決まる
        return (
            self.hands,
            self.total % self.config.modulus,
            self._current_player,
            self.loser_by_multiple,
        )

    def legal_moves(self) -> list[int]:
        if self.is_terminal:
            return []
        return _legal_moves(self.hands, self._current_player)

    def apply_move(self, move: int) -> ModMState:
        """カードを出した新しい状態を返す。

        相手に手札が残っていれば相手の手番、なければ自分がもう一度出す。
        """
        if self.is_terminal:
            msg = "The game is already over"
            raise IllegalMoveError(msg)
        player = self._current_player
        hands = _apply_move(self.hands, player, move)
        if hands[player.opponent.value] or not hands[player.value]:
            next_player = player.opponent
        else:
            next_player = player
        return ModMState(
            config=self.config,
            hands=hands,
            played=(*self.played, (move, player)),
            _current_player=next_player,
        )

    def safe_cards(self, player: Player) -> list[int]:
        """Cards player could play now without hitting a multiple of M."""
        total = self.total
        return [c for c in self.hands[player.value] if (total + c) % self.config.modulus != 0]

    def evaluate(self, player: int) -> int:
        """安全に出せるカード枚数の差（深さ制限時のみ使う近似値）。"""
        me = Player(player)
        return len(self.safe_cards(me)) - len(self.safe_cards(me.opponent))
