"""Legal move generation for misère three-heap Nim.

手のエンコード: count * 3 + heap
  heap:  0=青, 1=黄, 2=赤
  count: 取る個数（1 以上）
"""

from __future__ import annotations

from minigame_ai.game.errors import IllegalMoveError
from minigame_ai.game.nim.types import NUM_HEAPS, Heap

Heaps = tuple[int, int, int]


def encode_move(heap: Heap, count: int) -> int:
    """Encode "take count tokens from heap" as an integer."""
    return count * NUM_HEAPS + heap.value


def decode_move(move: int) -> tuple[Heap, int]:
    """Decode a move integer into (heap, count)."""
    return Heap(move % NUM_HEAPS), move // NUM_HEAPS


def move_to_str(move: int) -> str:
    heap, count = decode_move(move)
    return f"{heap.name.lower()} -{count}"


def legal_moves(heaps: Heaps) -> list[int]:
    """Generate all legal moves.

    列挙順: 青 → 黄 → 赤、各色で取る個数の少ない順。
    両プレイヤーとも同じ山を共有するので、手番に依存しない。
    """
    moves: list[int] = []
    for heap in Heap:
        for count in range(1, heaps[heap.value] + 1):
            moves.append(encode_move(heap, count))
    return moves


def apply_move(heaps: Heaps, move: int) -> Heaps:
    """Return the heaps after the move. 不正な手は IllegalMoveError。"""
    if move < NUM_HEAPS:
        msg = f"Move {move} removes no tokens"
        raise IllegalMoveError(msg)
    heap, count = decode_move(move)
    if count > heaps[heap.value]:
        msg = f"Cannot take {count} from {heap.name.lower()} (only {heaps[heap.value]} left)"
        raise IllegalMoveError(msg)
    new_heaps = list(heaps)
    new_heaps[heap.value] -= count
    return (new_heaps[0], new_heaps[1], new_heaps[2])
