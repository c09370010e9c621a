"""Tests for random player."""

import random

import pytest

from minigame_ai.engine.random_player import random_move
from minigame_ai.game.nim.state import NimState
from minigame_ai.game.othello.state import OthelloState


class TestRandomPlayer:
    def test_returns_legal_move(self) -> None:
        state = OthelloState()
        for _ in range(20):
            assert random_move(state) in state.legal_moves()

    def test_seeded_rng_is_reproducible(self) -> None:
        state = NimState.initial()
        first = [random_move(state, random.Random(42)) for _ in range(5)]
        second = [random_move(state, random.Random(42)) for _ in range(5)]
        assert first == second

    def test_covers_all_moves(self) -> None:
        state = OthelloState()
        rng = random.Random(0)
        seen = {random_move(state, rng) for _ in range(200)}
        assert seen == set(state.legal_moves())

    def test_no_legal_moves(self) -> None:
        with pytest.raises(ValueError):
            random_move(NimState(heaps=(0, 0, 0)))

    def test_candidates_restrict_choice(self) -> None:
        state = NimState.initial()
        rng = random.Random(1)
        for _ in range(20):
            assert random_move(state, rng, candidates=[3, 8]) in (3, 8)
