"""Tests for Mod-M dealing and card play."""

import pytest

from minigame_ai.game.errors import IllegalMoveError
from minigame_ai.game.mod_m.moves import apply_move, deal, legal_moves
from minigame_ai.game.mod_m.types import SOURCE_CONFIG, HandMode, ModMConfig, Player


def _config(**overrides: object) -> ModMConfig:
    values: dict[str, object] = {
        "card_count": 5,
        "modulus": 7,
        "first_mover": Player.ALICE,
        "exhaustion_winner": Player.ALICE,
    }
    values.update(overrides)
    return ModMConfig(**values)  # type: ignore[arg-type]


class TestDeal:
    def test_full_hands(self) -> None:
        """FULL: 両者とも 1〜N を全部持つ。"""
        assert deal(SOURCE_CONFIG) == ((1, 2, 3, 4, 5), (1, 2, 3, 4, 5))

    def test_split_hands_alice_first(self) -> None:
        hands = deal(_config(hand_mode=HandMode.SPLIT))
        assert hands == ((1, 3, 5), (2, 4))

    def test_split_hands_bob_first(self) -> None:
        hands = deal(_config(hand_mode=HandMode.SPLIT, first_mover=Player.BOB))
        assert hands == ((2, 4), (1, 3, 5))


class TestCardPlay:
    def test_legal_moves_sorted(self) -> None:
        assert legal_moves(((5, 1, 3), ()), Player.ALICE) == [1, 3, 5]

    def test_apply_removes_card(self) -> None:
        hands = apply_move(((1, 2), (1, 2)), Player.BOB, 2)
        assert hands == ((1, 2), (1,))

    def test_card_not_held(self) -> None:
        with pytest.raises(IllegalMoveError):
            apply_move(((1, 2), (1, 2)), Player.ALICE, 3)
