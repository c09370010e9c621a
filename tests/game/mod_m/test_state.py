"""Tests for ModMState."""

import pytest

from minigame_ai.engine.minimax import search
from minigame_ai.game.errors import IllegalMoveError, InvalidConfigurationError
from minigame_ai.game.mod_m import state_to_str
from minigame_ai.game.mod_m.state import ModMState
from minigame_ai.game.mod_m.types import SOURCE_CONFIG, HandMode, ModMConfig, Player
from minigame_ai.game.protocol import GameState


def _config(**overrides: object) -> ModMConfig:
    values: dict[str, object] = {
        "card_count": 5,
        "modulus": 7,
        "first_mover": Player.ALICE,
        "exhaustion_winner": Player.ALICE,
    }
    values.update(overrides)
    return ModMConfig(**values)  # type: ignore[arg-type]


class TestProtocolCompliance:
    def test_implements_game_state(self) -> None:
        assert isinstance(ModMState(), GameState)


class TestInitialState:
    def test_source_config(self) -> None:
        state = ModMState.initial(SOURCE_CONFIG)
        assert state.current_player == Player.ALICE.value
        assert state.total == 0
        assert state.legal_moves() == [1, 2, 3, 4, 5]
        assert not state.is_terminal

    def test_bob_first(self) -> None:
        state = ModMState.initial(_config(first_mover=Player.BOB))
        assert state.current_player == Player.BOB.value


class TestConfigValidation:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"card_count": 0},
            {"modulus": 0},
            {"modulus": -7},
            {"first_mover": 0},
            {"exhaustion_winner": 2},
            {"hand_mode": "full"},
        ],
    )
    def test_invalid_config(self, overrides: dict[str, object]) -> None:
        with pytest.raises(InvalidConfigurationError):
            ModMState.initial(_config(**overrides))


class TestSuddenDeath:
    def test_sum_multiple_of_m_loses(self) -> None:
        """Alice が 2、Bob が 5 を出すと合計 7 で Bob の負け。"""
        state = ModMState.initial(SOURCE_CONFIG)
        state = state.apply_move(2)
        assert state.current_player == Player.BOB.value
        state = state.apply_move(5)
        assert state.total == 7
        assert state.is_terminal
        assert state.winner == Player.ALICE.value
        assert state.legal_moves() == []

    def test_modulus_one_first_card_loses(self) -> None:
        state = ModMState.initial(_config(modulus=1)).apply_move(3)
        assert state.is_terminal
        assert state.winner == Player.BOB.value

    def test_play_after_game_over(self) -> None:
        state = ModMState.initial(SOURCE_CONFIG).apply_move(2).apply_move(5)
        with pytest.raises(IllegalMoveError):
            state.apply_move(1)


class TestExhaustion:
    @pytest.mark.parametrize("winner", [Player.ALICE, Player.BOB])
    def test_exhaustion_winner(self, winner: Player) -> None:
        """合計 1, 2, 4, 6 はどれも 7 の倍数でないので出し切りで決着する。"""
        state = ModMState.initial(_config(card_count=2, exhaustion_winner=winner))
        for card in (1, 1, 2):
            state = state.apply_move(card)
            assert not state.is_terminal
        state = state.apply_move(2)
        assert state.total == 6
        assert state.is_terminal
        assert state.winner == winner.value


class TestPassRule:
    def test_mover_continues_when_opponent_empty(self) -> None:
        """相手の手札が空なら、同じプレイヤーが続けて出す。"""
        config = _config(card_count=3, modulus=100, hand_mode=HandMode.SPLIT)
        state = ModMState(
            config=config,
            hands=((1, 3), ()),
            played=((2, Player.BOB),),
            _current_player=Player.ALICE,
        )
        state = state.apply_move(1)
        assert not state.is_terminal
        assert state.current_player == Player.ALICE.value
        assert state.legal_moves() == [3]
        state = state.apply_move(3)
        assert state.is_terminal
        assert state.winner == Player.ALICE.value


class TestIllegalMoves:
    def test_card_not_in_hand(self) -> None:
        state = ModMState.initial(SOURCE_CONFIG).apply_move(2)
        with pytest.raises(IllegalMoveError):
            state.apply_move(6)

    def test_card_already_played(self) -> None:
        state = ModMState(
            config=SOURCE_CONFIG,
            hands=((1, 3, 4, 5), (1, 2, 3, 4, 5)),
            played=((2, Player.ALICE), (1, Player.BOB)),
            _current_player=Player.ALICE,
        )
        with pytest.raises(IllegalMoveError):
            state.apply_move(2)


class TestEvaluate:
    def test_safe_card_difference(self) -> None:
        # 合計 5: Alice は 2 が危険、Bob は何を出しても安全
        state = ModMState(
            config=SOURCE_CONFIG,
            hands=((1, 2), (3, 4)),
            played=((5, Player.BOB),),
            _current_player=Player.ALICE,
        )
        assert state.safe_cards(Player.ALICE) == [1]
        assert state.safe_cards(Player.BOB) == [3, 4]
        assert state.evaluate(Player.ALICE.value) == -1
        assert isinstance(state.evaluate(Player.ALICE.value), int)


class TestSearch:
    def test_avoids_sudden_death(self) -> None:
        """2 を出すと合計 7 で即負け。1 を出せば出し切りで Alice の勝ち。"""
        state = ModMState(
            config=SOURCE_CONFIG,
            hands=((1, 2), (4,)),
            played=((5, Player.BOB),),
            _current_player=Player.ALICE,
        )
        assert search(state, depth=None).move == 1


class TestDisplay:
    def test_state_to_str(self) -> None:
        state = ModMState.initial(SOURCE_CONFIG).apply_move(2)
        assert state_to_str(state).splitlines() == [
            "N=5 M=7",
            "BOB hand: 1 2 3 4 5",
            "played: 2(A)  sum=2",
            "ALICE hand: 1 3 4 5",
        ]
