"""Tests for Nim move encoding and generation."""

import pytest

from minigame_ai.game.errors import IllegalMoveError
from minigame_ai.game.nim.moves import (
    apply_move,
    decode_move,
    encode_move,
    legal_moves,
    move_to_str,
)
from minigame_ai.game.nim.types import Heap


class TestEncoding:
    def test_encode_red_one(self) -> None:
        assert encode_move(Heap.RED, 1) == 5

    def test_decode(self) -> None:
        assert decode_move(encode_move(Heap.YELLOW, 4)) == (Heap.YELLOW, 4)

    def test_move_to_str(self) -> None:
        assert move_to_str(encode_move(Heap.RED, 2)) == "red -2"


class TestLegalMoves:
    def test_enumeration_order(self) -> None:
        """青 → 黄 → 赤、各色で取る個数の少ない順。"""
        moves = legal_moves((1, 0, 2))
        assert moves == [
            encode_move(Heap.BLUE, 1),
            encode_move(Heap.RED, 1),
            encode_move(Heap.RED, 2),
        ]

    def test_move_count(self) -> None:
        assert len(legal_moves((7, 6, 2))) == 15

    def test_empty_heaps(self) -> None:
        assert legal_moves((0, 0, 0)) == []


class TestApplyMove:
    def test_removes_tokens(self) -> None:
        assert apply_move((7, 6, 2), encode_move(Heap.BLUE, 3)) == (4, 6, 2)

    def test_take_whole_heap(self) -> None:
        assert apply_move((7, 6, 2), encode_move(Heap.RED, 2)) == (7, 6, 0)

    def test_too_many_tokens(self) -> None:
        with pytest.raises(IllegalMoveError):
            apply_move((7, 6, 2), encode_move(Heap.RED, 3))

    def test_zero_tokens(self) -> None:
        with pytest.raises(IllegalMoveError):
            apply_move((7, 6, 2), Heap.RED.value)
