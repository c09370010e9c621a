"""Terminal display for Othello-variant boards."""

from __future__ import annotations

from minigame_ai.game.othello.board import Board
from minigame_ai.game.othello.types import SIZE, Player

# 石の表示文字: X=黒、O=白
PIECE_CHARS: dict[Player, str] = {
    Player.BLACK: "X",
    Player.WHITE: "O",
}


def board_to_str(board: Board) -> str:
    """Convert a board to a human-readable string.

    Example output:
          a b c d e f
        1 . . . . . .
        2 . . . . . .
        3 . . X X . .
        4 . . O O . .
        5 . . . . . .
        6 . . . . . .
        X: 2  O: 2
    """
    lines: list[str] = []
    col_labels = " ".join(chr(ord("a") + c) for c in range(SIZE))
    lines.append(f"  {col_labels}")

    for r in range(SIZE):
        row_chars: list[str] = []
        for c in range(SIZE):
            piece = board.piece_at(r, c)
            row_chars.append("." if piece is None else PIECE_CHARS[piece])
        lines.append(f"{r + 1} {' '.join(row_chars)}")

    lines.append(f"X: {board.count(Player.BLACK)}  O: {board.count(Player.WHITE)}")
    return "\n".join(lines)
