"""Legal move generation for the 6x6 Othello variant.

合法手の生成と手のエンコード/デコード。

手のエンコード: 石を置くマスのインデックス row * 6 + col (0〜35)
"""

from __future__ import annotations

from minigame_ai.game.errors import IllegalMoveError
from minigame_ai.game.othello.board import Board
from minigame_ai.game.othello.types import DIRECTIONS, NUM_SQUARES, SIZE, Player

ACTION_SPACE = NUM_SQUARES  # オセロ変種の全行動数


def encode_move(row: int, col: int) -> int:
    """Encode a placement as an integer."""
    return row * SIZE + col


def decode_move(move: int) -> tuple[int, int]:
    """Decode a move integer into (row, col)."""
    return move // SIZE, move % SIZE


def move_to_str(move: int) -> str:
    """Format a move as a coordinate such as "c5" (列 a〜f、行 1〜6)。"""
    row, col = decode_move(move)
    return f"{chr(ord('a') + col)}{row + 1}"


def _run_in_direction(board: Board, player: Player, idx: int, dr: int, dc: int) -> list[int]:
    """Return the opponent run captured in one direction, or [] if not closed.

    (dr, dc) 方向に相手の石が1個以上連続し、その直後に自分の石があれば、
    その連続した相手の石のリストを返す。自分の石で閉じていなければ空リスト。
    """
    row, col = idx // SIZE + dr, idx % SIZE + dc
    run: list[int] = []
    while 0 <= row < SIZE and 0 <= col < SIZE:
        piece = board.squares[row * SIZE + col]
        if piece is None:
            return []  # 空マスで途切れた → 挟めない
        if piece == player:
            return run  # 自分の石で閉じた（run が空なら挟む石なし）
        run.append(row * SIZE + col)
        row += dr
        col += dc
    return []  # 盤外に出た → 挟めない


def flips(board: Board, player: Player, idx: int) -> frozenset[int]:
    """Return every square flipped by player placing at idx.

    8方向それぞれで挟める石を独立に求め、その和集合を返す。
    空集合ならその手は非合法。
    """
    if board.squares[idx] is not None:
        return frozenset()
    captured: set[int] = set()
    for dr, dc in DIRECTIONS:
        captured.update(_run_in_direction(board, player, idx, dr, dc))
    return frozenset(captured)


def legal_moves(board: Board, player: Player) -> list[int]:
    """Generate all legal placements for player in row-major order.

    行優先の順で合法手を返す（この順序が探索の同点時の優先順位になる）。
    """
    return [idx for idx in range(NUM_SQUARES) if flips(board, player, idx)]


def has_legal_move(board: Board, player: Player) -> bool:
    """True if player has at least one legal placement (最初の1手で打ち切る)。"""
    return any(flips(board, player, idx) for idx in range(NUM_SQUARES))


def apply_move(board: Board, player: Player, move: int) -> Board:
    """Apply a placement and return the new board state.

    石を置いて挟んだ石を裏返す。挟める石がなければ IllegalMoveError。
    """
    if not 0 <= move < NUM_SQUARES:
        msg = f"Move {move} is off the board"
        raise IllegalMoveError(msg)
    captured = flips(board, player, move)
    if not captured:
        msg = f"{player.name} cannot play {move_to_str(move)}"
        raise IllegalMoveError(msg)
    return board.place(move, player, captured)
