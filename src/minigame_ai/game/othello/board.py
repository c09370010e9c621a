"""Board representation for the 6x6 Othello variant.

盤面のデータ構造。イミュータブル（frozen=True）設計で、
盤面を変更するメソッドはすべて新しい Board オブジェクトを返す。
"""

from __future__ import annotations

from dataclasses import dataclass, field

from minigame_ai.game.othello.types import NUM_SQUARES, SIZE, Player


@dataclass(frozen=True)
class Board:
    """Immutable 6x6 board.

    squares: 36要素のタプル（行優先）。各要素は Player | None。
             squares[row * SIZE + col] でマス(row, col)にアクセス。
    """

    squares: tuple[Player | None, ...] = field(default_factory=lambda: Board._initial_squares())

    def __post_init__(self) -> None:
        if len(self.squares) != NUM_SQUARES:
            msg = f"Board needs {NUM_SQUARES} squares, got {len(self.squares)}"
            raise ValueError(msg)

    @staticmethod
    def _initial_squares() -> tuple[Player | None, ...]:
        """Return the variant's starting position.

        通常のオセロ（対角配置）ではなく、同色が横に並ぶ「平行配置」から始める。

          a b c d e f
        1 . . . . . .
        2 . . . . . .
        3 . . X X . .   ← 黒
        4 . . O O . .   ← 白
        5 . . . . . .
        6 . . . . . .
        """
        squares: list[Player | None] = [None] * NUM_SQUARES
        squares[2 * SIZE + 2] = Player.BLACK
        squares[2 * SIZE + 3] = Player.BLACK
        squares[3 * SIZE + 2] = Player.WHITE
        squares[3 * SIZE + 3] = Player.WHITE
        return tuple(squares)

    @classmethod
    def empty(cls) -> Board:
        """Return a board with no discs (テスト用の局面作成に使う)。"""
        return cls(squares=(None,) * NUM_SQUARES)

    def piece_at(self, row: int, col: int) -> Player | None:
        """Return the disc at (row, col), or None."""
        return self.squares[row * SIZE + col]

    def place(self, idx: int, player: Player, flipped: frozenset[int]) -> Board:
        """Return a new Board with a disc at idx and every flipped square turned.

        石を置き、挟んだ石をすべて裏返した新しい Board を返す。
        元の Board は変更されない。
        """
        squares = list(self.squares)
        squares[idx] = player
        for f in flipped:
            squares[f] = player
        return Board(squares=tuple(squares))

    def count(self, player: Player) -> int:
        """Number of discs owned by player."""
        return sum(1 for s in self.squares if s == player)
