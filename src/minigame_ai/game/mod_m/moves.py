"""Dealing and card play for the Mod-M card game.

手のエンコード: 出すカードの値そのもの（1〜N）。
"""

from __future__ import annotations

from minigame_ai.game.errors import IllegalMoveError
from minigame_ai.game.mod_m.types import HandMode, ModMConfig, Player

Hand = tuple[int, ...]
Hands = tuple[Hand, Hand]


def deal(config: ModMConfig) -> Hands:
    """Deal the starting hands (hands[player.value] がそのプレイヤーの手札)。"""
    cards = range(1, config.card_count + 1)
    if config.hand_mode == HandMode.FULL:
        return (tuple(cards), tuple(cards))

    first = config.first_mover
    hands: list[list[int]] = [[], []]
    for i, card in enumerate(cards):
        owner = first if i % 2 == 0 else first.opponent
        hands[owner.value].append(card)
    return (tuple(hands[0]), tuple(hands[1]))


def legal_moves(hands: Hands, player: Player) -> list[int]:
    """Cards player may play, ascending (小さいカードから順に列挙)。"""
    return sorted(hands[player.value])


def apply_move(hands: Hands, player: Player, move: int) -> Hands:
    """Remove the played card from player's hand. 持っていないカードは IllegalMoveError。"""
    hand = hands[player.value]
    if move not in hand:
        msg = f"{player.name} does not hold card {move}"
        raise IllegalMoveError(msg)
    new_hand = list(hand)
    new_hand.remove(move)
    if player == Player.ALICE:
        return (tuple(new_hand), hands[1])
    return (hands[0], tuple(new_hand))
