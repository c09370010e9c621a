"""Minimax search with alpha-beta pruning for any GameState."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple

from minigame_ai.game.errors import EngineInvariantViolation
from minigame_ai.game.protocol import GameState

logger = logging.getLogger(__name__)

# 勝敗が決まった局面の評価値。どの静的評価値よりも十分大きくとる
WIN_SCORE = 10_000.0

# 置換表エントリの種類
EXACT = "exact"
LOWERBOUND = "lowerbound"
UPPERBOUND = "upperbound"


@dataclass(frozen=True)
class MinimaxConfig:
    """Configuration for minimax search.

    depth:     探索深さ。None なら終局まで読み切る（厳密探索）
    use_table: 置換表（同一局面の結果の再利用）を使うか
    """

    depth: int | None = 4
    use_table: bool = True


class SearchResult(NamedTuple):
    """Best move, its score for the side to move, and nodes visited."""

    move: int
    score: float
    nodes: int


class _Entry(NamedTuple):
    flag: str
    score: float
    move: int


@dataclass
class SearchStats:
    """探索ノード数の集計（探索が有限で止まることの確認にも使う）。"""

    nodes: int = 0
    table_hits: int = 0


def evaluate(state: GameState) -> float:
    """Evaluate a position from the current player's perspective.

    局面を現在のプレイヤーの視点から数値評価する（静的評価関数）。
    終局なら ±WIN_SCORE（引き分けは 0）、それ以外はゲームごとの評価関数に任せる。
    """
    if state.is_terminal:
        if state.winner is None:
            return 0.0
        if state.winner == state.current_player:
            return WIN_SCORE
        return -WIN_SCORE
    return state.evaluate(state.current_player)


def negamax(
    state: GameState,
    depth: int | None,
    alpha: float,
    beta: float,
    table: dict[object, _Entry] | None = None,
    stats: SearchStats | None = None,
) -> tuple[int, float]:
    """Negamax search with alpha-beta pruning.

    ネガマックス法 + αβ枝刈りによる探索。

    常に「現在のプレイヤーにとっての評価値」を返す。
    子局面の手番が相手に移ったときだけ符号を反転する。
    パスで同じプレイヤーが続けて打つ局面（オセロ変種・Mod-M）では反転しない。

    alpha: 現在のプレイヤーが保証できる最低スコア
    beta:  現在のプレイヤーにとってのスコアの上限（相手が許す範囲）

    depth=None は深さ無制限。

    Returns (best_move, score) from the current player's perspective.
    best_move is -1 when depth=0 or at terminal states.
    """
    if stats is not None:
        stats.nodes += 1

    # 終局状態の評価
    if state.is_terminal:
        if state.winner is None:
            return -1, 0.0
        # 残り深さを加算して「より速い勝利」を優先する（無制限探索では加算しない）
        bonus = depth or 0
        if state.winner == state.current_player:
            return -1, WIN_SCORE + bonus
        return -1, -(WIN_SCORE + bonus)

    # 探索深さ0に達したら静的評価を返す（葉ノード）
    if depth == 0:
        return -1, evaluate(state)

    alpha_orig = alpha
    key = None
    if table is not None:
        key = (state.transposition_key, depth)
        entry = table.get(key)
        if entry is not None:
            if stats is not None:
                stats.table_hits += 1
            if entry.flag == EXACT:
                return entry.move, entry.score
            if entry.flag == LOWERBOUND:
                alpha = max(alpha, entry.score)
            elif entry.flag == UPPERBOUND:
                beta = min(beta, entry.score)
            if alpha >= beta:
                return entry.move, entry.score

    moves = state.legal_moves()
    if not moves:
        msg = f"Non-terminal state has no legal moves for player {state.current_player}"
        raise EngineInvariantViolation(msg)

    player = state.current_player
    next_depth = None if depth is None else depth - 1
    best_move = moves[0]
    best_score = float("-inf")

    # 列挙順に調べ、最初に最善値へ到達した手を採用する（同点時の再現可能な優先順位）
    for move in moves:
        child = state.apply_move(move)
        if child.current_player == player:
            # パス: 同じプレイヤーが続けて指すので視点はそのまま
            _, score = negamax(child, next_depth, alpha, beta, table, stats)
        else:
            _, score = negamax(child, next_depth, -beta, -alpha, table, stats)
            score = -score

        if score > best_score:
            best_score = score
            best_move = move

        alpha = max(alpha, score)
        if alpha >= beta:
            break  # βカットオフ: 相手はこの枝を選ばないので探索打ち切り

    if table is not None:
        flag = EXACT
        if best_score <= alpha_orig:
            flag = UPPERBOUND
        elif best_score >= beta:
            flag = LOWERBOUND
        table[key] = _Entry(flag, best_score, best_move)

    return best_move, best_score


def search(state: GameState, depth: int | None = 4, *, use_table: bool = True) -> SearchResult:
    """Search from state and return the best move for its side to move.

    終局した局面では探索できない（EngineInvariantViolation）。
    """
    if depth is not None and depth < 1:
        msg = f"Search depth must be >= 1 or None, got {depth}"
        raise ValueError(msg)
    if state.is_terminal:
        msg = "Cannot search a finished game"
        raise EngineInvariantViolation(msg)

    stats = SearchStats()
    table: dict[object, _Entry] | None = {} if use_table else None
    move, score = negamax(state, depth, float("-inf"), float("inf"), table, stats)
    logger.debug(
        "search player=%d depth=%s move=%d score=%.1f nodes=%d hits=%d",
        state.current_player,
        depth,
        move,
        score,
        stats.nodes,
        stats.table_hits,
    )
    return SearchResult(move, score, stats.nodes)


def minimax_move(state: GameState, depth: int | None = 4) -> int:
    """Return the best move for the current player using minimax search.

    ミニマックス探索で最善手を返す。
    オセロ変種は depth=4、ニムと Mod-M は depth=None（読み切り）で使う。
    """
    return search(state, depth).move


def is_forced_loss(score: float) -> bool:
    """True if score means the side to move loses against best play."""
    return score <= -WIN_SCORE
