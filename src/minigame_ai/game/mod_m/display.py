"""Terminal display for Mod-M game states."""

from __future__ import annotations

from minigame_ai.game.mod_m.state import ModMState
from minigame_ai.game.mod_m.types import Player


def hand_to_str(hand: tuple[int, ...]) -> str:
    """手札を文字列に変換する。手札なしの場合は "-"。"""
    if not hand:
        return "-"
    return " ".join(str(card) for card in sorted(hand))


def state_to_str(state: ModMState) -> str:
    """Convert a state to a human-readable string.

    Example output:
        N=5 M=7
        BOB hand: 1 2 3 4 5
        played: 2(A) 4(B)  sum=6
        ALICE hand: 1 3 4 5
    """
    played = " ".join(f"{card}({owner.name[0]})" for card, owner in state.played) or "-"
    lines = [
        f"N={state.config.card_count} M={state.config.modulus}",
        f"BOB hand: {hand_to_str(state.hands[Player.BOB.value])}",
        f"played: {played}  sum={state.total}",
        f"ALICE hand: {hand_to_str(state.hands[Player.ALICE.value])}",
    ]
    return "\n".join(lines)
