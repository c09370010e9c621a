"""Tests for Othello-variant move generation and capture."""

from __future__ import annotations

import random

import pytest

from minigame_ai.game.errors import IllegalMoveError
from minigame_ai.game.othello.board import Board
from minigame_ai.game.othello.moves import (
    apply_move,
    decode_move,
    encode_move,
    flips,
    has_legal_move,
    legal_moves,
    move_to_str,
)
from minigame_ai.game.othello.state import OthelloState
from minigame_ai.game.othello.types import NUM_SQUARES, SIZE, Player


def _board(pieces: dict[tuple[int, int], Player]) -> Board:
    squares: list[Player | None] = [None] * NUM_SQUARES
    for (r, c), p in pieces.items():
        squares[r * SIZE + c] = p
    return Board(squares=tuple(squares))


def _reference_flips(board: Board, player: Player, idx: int) -> set[int]:
    """Independent capture scan: walk each direction and keep runs closed by player."""
    row, col = divmod(idx, SIZE)
    result: set[int] = set()
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            if dr == 0 and dc == 0:
                continue
            run = []
            r, c = row + dr, col + dc
            closed = False
            while 0 <= r < SIZE and 0 <= c < SIZE:
                cell = board.piece_at(r, c)
                if cell is None:
                    break
                if cell == player:
                    closed = True
                    break
                run.append(r * SIZE + c)
                r += dr
                c += dc
            if closed:
                result.update(run)
    return result


def _reachable_states(num_games: int = 8, seed: int = 7) -> list[OthelloState]:
    rng = random.Random(seed)
    states: list[OthelloState] = []
    for _ in range(num_games):
        state = OthelloState()
        while not state.is_terminal:
            states.append(state)
            state = state.apply_move(rng.choice(state.legal_moves()))
    return states


class TestEncoding:
    def test_encode_decode(self) -> None:
        move = encode_move(4, 2)
        assert move == 26
        assert decode_move(move) == (4, 2)

    def test_move_to_str(self) -> None:
        assert move_to_str(encode_move(4, 1)) == "b5"
        assert move_to_str(encode_move(0, 0)) == "a1"


class TestInitialMoves:
    def test_black_opening_moves(self) -> None:
        """初期局面の黒の合法手は b5, c5, d5, e5 の4つ。"""
        moves = legal_moves(Board(), Player.BLACK)
        assert [move_to_str(m) for m in moves] == ["b5", "c5", "d5", "e5"]

    def test_white_opening_moves(self) -> None:
        moves = legal_moves(Board(), Player.WHITE)
        assert [move_to_str(m) for m in moves] == ["b2", "c2", "d2", "e2"]

    def test_straight_capture(self) -> None:
        new_board = apply_move(Board(), Player.BLACK, encode_move(4, 2))
        assert new_board.piece_at(4, 2) == Player.BLACK
        assert new_board.piece_at(3, 2) == Player.BLACK
        assert new_board.piece_at(3, 3) == Player.WHITE

    def test_diagonal_capture(self) -> None:
        new_board = apply_move(Board(), Player.BLACK, encode_move(4, 1))
        assert new_board.piece_at(3, 2) == Player.BLACK
        assert new_board.count(Player.BLACK) == 4
        assert new_board.count(Player.WHITE) == 1


class TestCaptureRule:
    def test_multiple_directions_unioned(self) -> None:
        """全方向の挟んだ石がまとめて裏返る。"""
        board = _board(
            {
                (0, 2): Player.BLACK,
                (1, 2): Player.WHITE,
                (2, 0): Player.BLACK,
                (2, 1): Player.WHITE,
                (4, 4): Player.BLACK,
                (3, 3): Player.WHITE,
            }
        )
        captured = flips(board, Player.BLACK, encode_move(2, 2))
        assert captured == frozenset({1 * SIZE + 2, 2 * SIZE + 1, 3 * SIZE + 3})

    def test_long_run_flipped_completely(self) -> None:
        board = _board(
            {
                (0, 0): Player.BLACK,
                (0, 1): Player.WHITE,
                (0, 2): Player.WHITE,
                (0, 3): Player.WHITE,
            }
        )
        new_board = apply_move(board, Player.BLACK, encode_move(0, 4))
        assert all(new_board.piece_at(0, c) == Player.BLACK for c in range(5))

    def test_unclosed_run_not_flipped(self) -> None:
        """自分の石で閉じていない方向は裏返らない。"""
        board = _board(
            {
                (0, 0): Player.BLACK,
                (0, 1): Player.WHITE,
                (1, 2): Player.WHITE,
                (2, 2): Player.WHITE,
            }
        )
        captured = flips(board, Player.BLACK, encode_move(0, 2))
        assert captured == frozenset({1})

    def test_run_to_edge_not_flipped(self) -> None:
        board = _board({(0, 4): Player.WHITE, (0, 5): Player.WHITE})
        assert flips(board, Player.BLACK, encode_move(0, 3)) == frozenset()

    def test_flips_match_reference_on_reachable_states(self) -> None:
        """到達可能な局面の全合法手で、裏返る石が独立実装の結果と一致する。"""
        for state in _reachable_states():
            player = Player(state.current_player)
            for move in state.legal_moves():
                expected = _reference_flips(state.board, player, move)
                new_board = apply_move(state.board, player, move)
                changed = {
                    i
                    for i in range(NUM_SQUARES)
                    if state.board.squares[i] != new_board.squares[i] and i != move
                }
                assert changed == expected
                assert all(state.board.squares[i] == player.opponent for i in changed)


class TestIllegalMoves:
    def test_occupied_square(self) -> None:
        with pytest.raises(IllegalMoveError):
            apply_move(Board(), Player.BLACK, encode_move(2, 2))

    def test_no_capture(self) -> None:
        with pytest.raises(IllegalMoveError):
            apply_move(Board(), Player.BLACK, encode_move(0, 0))

    def test_off_board(self) -> None:
        with pytest.raises(IllegalMoveError):
            apply_move(Board(), Player.BLACK, NUM_SQUARES)

    def test_no_moves_on_empty_board(self) -> None:
        assert legal_moves(Board.empty(), Player.BLACK) == []
        assert not has_legal_move(Board.empty(), Player.WHITE)
