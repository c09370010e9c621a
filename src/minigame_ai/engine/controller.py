"""Turn controller — alternating turns, computer moves and undo history.

ターン管理。人間とコンピュータの手番を交互に進め、局面の履歴を保持する。

- 履歴 history は不変な局面のリスト。history[i+1] は history[i] から合法手1手で到達する
- 現在局面は常に history[-1]（別の変数で持たない）
- 手番・終局・勝者・合法手は derive() で局面から導出する（手で書き換えない）
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any

from minigame_ai.engine.minimax import MinimaxConfig, is_forced_loss, search
from minigame_ai.engine.random_player import random_move
from minigame_ai.game.errors import IllegalMoveError
from minigame_ai.game.protocol import GameState
from minigame_ai.game.registry import create_state

logger = logging.getLogger(__name__)


class Phase(str, Enum):
    """Controller state machine."""

    HUMAN_TURN = "human_turn"
    COMPUTER_TURN = "computer_turn"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Derived:
    """Fields derived from a state (手番・終局フラグ・勝者・合法手)."""

    current_player: int
    is_terminal: bool
    winner: int | None
    legal_moves: tuple[int, ...]


def derive(state: GameState) -> Derived:
    """Derive every turn-dependent field of state in one place."""
    terminal = state.is_terminal
    return Derived(
        current_player=state.current_player,
        is_terminal=terminal,
        winner=state.winner,
        legal_moves=() if terminal else tuple(state.legal_moves()),
    )


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the current position for a front-end."""

    state: GameState
    derived: Derived
    phase: Phase
    human_player: int
    can_undo: bool


class TurnController:
    """Owns the current state and the history of one game.

    Args:
        state:        初期局面
        human_player: 人間側のプレイヤー番号（0 or 1）
        search_config: コンピュータの探索設定
        rng:          負け確定局面でのランダム着手に使う乱数生成器。
                      None なら常に探索の最善手（列挙順で最初の手）を指す
    """

    def __init__(
        self,
        state: GameState,
        human_player: int = 0,
        search_config: MinimaxConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if human_player not in (0, 1):
            msg = f"human_player must be 0 or 1, got {human_player}"
            raise ValueError(msg)
        self.human_player = human_player
        self.search_config = search_config or MinimaxConfig()
        self.rng = rng
        self._history: list[GameState] = [state]
        self._derived: list[Derived] = [derive(state)]

    # --- 参照系 ---

    @property
    def state(self) -> GameState:
        return self._history[-1]

    @property
    def history(self) -> tuple[GameState, ...]:
        return tuple(self._history)

    @property
    def derived(self) -> Derived:
        return self._derived[-1]

    @property
    def phase(self) -> Phase:
        derived = self.derived
        if derived.is_terminal:
            return Phase.GAME_OVER
        if derived.current_player == self.human_player:
            return Phase.HUMAN_TURN
        return Phase.COMPUTER_TURN

    def snapshot(self) -> Snapshot:
        """現在局面の読み取り専用ビューを返す。"""
        return Snapshot(
            state=self.state,
            derived=self.derived,
            phase=self.phase,
            human_player=self.human_player,
            can_undo=self._undo_index() is not None,
        )

    # --- 着手 ---

    def _push(self, state: GameState) -> None:
        derived = derive(state)
        self._history.append(state)
        self._derived.append(derived)
        if derived.is_terminal:
            logger.info(
                "game over: winner=%s after %d moves", derived.winner, len(self._history) - 1
            )

    def submit_human_move(self, move: int) -> bool:
        """Apply a human move. 不正な手・手番違いは状態を変えずに False を返す。"""
        if self.phase != Phase.HUMAN_TURN:
            logger.warning("rejected move %d: phase is %s", move, self.phase.value)
            return False
        if move not in self.derived.legal_moves:
            logger.warning("rejected illegal move %d", move)
            return False
        try:
            new_state = self.state.apply_move(move)
        except IllegalMoveError:
            logger.warning("rejected move %d", move, exc_info=True)
            return False
        logger.debug("human played %d", move)
        self._push(new_state)
        return True

    def choose_computer_move(self) -> int:
        """Pick the computer's move for the current state (状態は変えない)。

        探索で負けが確定していて rng が与えられていれば、即負けにならない手から一様に選ぶ。
        そのような手がなければ合法手全体から選ぶ。
        """
        result = search(
            self.state,
            self.search_config.depth,
            use_table=self.search_config.use_table,
        )
        if self.rng is not None and is_forced_loss(result.score):
            return random_move(self.state, self.rng, self.safe_moves() or None)
        return result.move

    def safe_moves(self) -> list[int]:
        """Legal moves that do not end the game in an immediate loss for the mover."""
        state = self.state
        player = state.current_player
        safe: list[int] = []
        for move in state.legal_moves():
            child = state.apply_move(move)
            if child.is_terminal and child.winner is not None and child.winner != player:
                continue
            safe.append(move)
        return safe

    def play_computer_turn(self) -> int | None:
        """Play one computer move if it is the computer's turn.

        探索は同期的に実行し、完了するまで戻らない。
        Returns the move played, or None when it is not the computer's turn.
        """
        if self.phase != Phase.COMPUTER_TURN:
            return None
        move = self.choose_computer_move()
        logger.debug("computer played %d", move)
        self._push(self.state.apply_move(move))
        return move

    def advance(self) -> list[int]:
        """Play computer moves until the human is to move or the game ends.

        オセロ変種では人間がパスになるとコンピュータが続けて指す。
        """
        moves: list[int] = []
        while True:
            move = self.play_computer_turn()
            if move is None:
                return moves
            moves.append(move)

    # --- 待った ---

    def _undo_index(self) -> int | None:
        """Index of the last human-turn state that a move was played from."""
        for i in range(len(self._history) - 2, -1, -1):
            derived = self._derived[i]
            if not derived.is_terminal and derived.current_player == self.human_player:
                return i
        return None

    def undo(self) -> bool:
        """Take back the last human move and any computer replies after it.

        人間の最後の手と、その後のコンピュータの応手をまとめて取り消す。
        戻れる局面がなければ False。
        """
        idx = self._undo_index()
        if idx is None:
            return False
        del self._history[idx + 1 :]
        del self._derived[idx + 1 :]
        logger.debug("undo to ply %d", idx)
        return True

    def new_game(self, state: GameState) -> None:
        """Discard the history and start again from state."""
        self._history = [state]
        self._derived = [derive(state)]


# ゲーム種別ごとの探索設定: オセロ変種は深さ4、ニムと Mod-M は読み切り
SEARCH_CONFIGS: dict[str, MinimaxConfig] = {
    "othello": MinimaxConfig(depth=4),
    "nim": MinimaxConfig(depth=None),
    "mod_m": MinimaxConfig(depth=None),
}


def create_controller(
    game_type: str,
    human_player: int = 0,
    seed: int | None = None,
    **options: Any,
) -> TurnController:
    """Start a new game of game_type with the computer using its preset search.

    seed を指定すると、負け確定局面でのランダム着手が再現可能になる。
    """
    state = create_state(game_type, **options)
    rng = random.Random(seed) if seed is not None else None
    logger.info("new %s game: human=%d options=%s", game_type, human_player, options)
    return TurnController(
        state,
        human_player=human_player,
        search_config=SEARCH_CONFIGS[game_type],
        rng=rng,
    )
