"""Terminal display for Nim heaps."""

from __future__ import annotations

from minigame_ai.game.nim.moves import Heaps
from minigame_ai.game.nim.types import Heap

TOKEN_CHAR = "o"


def heaps_to_str(heaps: Heaps) -> str:
    """Convert heaps to a human-readable string.

    Example output:
        blue   (7) o o o o o o o
        yellow (6) o o o o o o
        red    (2) o o
    """
    width = max(len(h.name) for h in Heap)
    lines: list[str] = []
    for heap in Heap:
        count = heaps[heap.value]
        tokens = " ".join(TOKEN_CHAR * count)
        lines.append(f"{heap.name.lower():<{width}} ({count}) {tokens}".rstrip())
    return "\n".join(lines)
