"""FastAPI web application for playing the mini games against the computer.

FastAPI を使った Web API。ブラウザなどのフロントエンドから対局できる。

エンドポイント:
  POST /api/new-game        — 新規対局を開始（ゲームIDを返す）
  POST /api/move            — 人間が手を指す（コンピュータが応答して次局面を返す）
  POST /api/undo/{game_id}  — 待った（人間の最後の手とコンピュータの応手を取り消す）
  GET  /api/state/{game_id} — 現在の局面情報を取得
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from minigame_ai.engine.controller import Phase, TurnController, create_controller
from minigame_ai.game.errors import InvalidConfigurationError
from minigame_ai.game.mod_m import ModMState, state_to_str
from minigame_ai.game.nim import NimState, heaps_to_str
from minigame_ai.game.nim.moves import move_to_str as nim_move_to_str
from minigame_ai.game.nim.types import Heap
from minigame_ai.game.othello import OthelloState, board_to_str
from minigame_ai.game.othello.moves import move_to_str as othello_move_to_str
from minigame_ai.game.protocol import GameState

logger = logging.getLogger(__name__)

app = FastAPI(title="Minigame AI")

# 対局情報のインメモリストレージ（サーバ再起動で消える）
_games: dict[str, dict[str, Any]] = {}


class NewGameRequest(BaseModel):
    """新規対局リクエストのスキーマ。ゲーム種別に関係のない項目は無視される。"""

    game_type: str = "othello"  # "othello", "nim", "mod_m"
    human_player: int = 0  # 人間側のプレイヤー番号
    seed: int | None = None  # 負け確定時のランダム着手のシード
    delay_ms: int = Field(default=0, ge=0)  # コンピュータの「考えている」演出の待ち時間

    # nim
    blue: int = 7
    yellow: int = 6
    red: int = 2

    # mod_m
    card_count: int = 5
    modulus: int = 7
    first_mover: int = 0
    exhaustion_winner: int | None = None  # mod_m では必須（版によって異なるので既定値を持たない）
    hand_mode: str = "full"


class MoveRequest(BaseModel):
    """指し手リクエストのスキーマ。"""

    game_id: str
    move: int


def _game_options(req: NewGameRequest) -> dict[str, Any]:
    if req.game_type == "nim":
        return {"blue": req.blue, "yellow": req.yellow, "red": req.red}
    if req.game_type == "mod_m":
        options: dict[str, Any] = {
            "card_count": req.card_count,
            "modulus": req.modulus,
            "first_mover": req.first_mover,
            "hand_mode": req.hand_mode,
        }
        if req.exhaustion_winner is not None:
            options["exhaustion_winner"] = req.exhaustion_winner
        return options
    return {}


def _move_label(state: GameState, move: int) -> str:
    """手を表示用の文字列に変換する。"""
    if isinstance(state, OthelloState):
        return othello_move_to_str(move)
    if isinstance(state, NimState):
        return nim_move_to_str(move)
    return str(move)


def _board_payload(state: GameState) -> dict[str, Any]:
    """ゲーム固有の盤面情報を JSON 形式に変換する。"""
    if isinstance(state, OthelloState):
        return {
            "squares": [None if s is None else s.value for s in state.board.squares],
            "board_display": board_to_str(state.board),
        }
    if isinstance(state, NimState):
        return {
            "heaps": {heap.name.lower(): state.heaps[heap.value] for heap in Heap},
            "board_display": heaps_to_str(state.heaps),
        }
    if isinstance(state, ModMState):
        return {
            "hands": [list(state.hands[0]), list(state.hands[1])],
            "played": [{"card": card, "owner": owner.value} for card, owner in state.played],
            "sum": state.total,
            "modulus": state.config.modulus,
            "board_display": state_to_str(state),
        }
    msg = f"Unsupported state type: {type(state).__name__}"
    raise TypeError(msg)


def _state_to_dict(controller: TurnController) -> dict[str, Any]:
    """Convert the controller's snapshot to a JSON-serializable dict."""
    snap = controller.snapshot()
    derived = snap.derived
    return {
        "current_player": derived.current_player,
        "is_terminal": derived.is_terminal,
        "winner": derived.winner,
        "legal_moves": list(derived.legal_moves),
        "move_labels": [_move_label(snap.state, m) for m in derived.legal_moves],
        "phase": snap.phase.value,
        "human_player": snap.human_player,
        "can_undo": snap.can_undo,
        **_board_payload(snap.state),
    }


async def _computer_reply(game: dict[str, Any]) -> list[int]:
    """コンピュータの手番が続く限り指させる（演出用の待ち時間を入れてから探索する）。"""
    controller: TurnController = game["controller"]
    if controller.phase != Phase.COMPUTER_TURN:
        return []
    delay = game["delay_ms"] / 1000
    if delay > 0:
        await asyncio.sleep(delay)
    return controller.advance()


def _get_game(game_id: str) -> dict[str, Any]:
    game = _games.get(game_id)
    if game is None:
        raise HTTPException(404, "Game not found")
    return game


@app.post("/api/new-game")
async def new_game(req: NewGameRequest) -> dict[str, Any]:
    """新規対局を開始する。コンピュータが先手なら初手まで進めて返す。"""
    try:
        controller = create_controller(
            req.game_type,
            human_player=req.human_player,
            seed=req.seed,
            **_game_options(req),
        )
    except (InvalidConfigurationError, ValueError) as e:
        raise HTTPException(400, str(e)) from e

    game_id = str(uuid.uuid4())[:8]  # 短いIDを生成
    game = {"controller": controller, "game_type": req.game_type, "delay_ms": req.delay_ms}
    _games[game_id] = game
    logger.info("created game %s (%s)", game_id, req.game_type)

    ai_moves = await _computer_reply(game)
    return {
        "game_id": game_id,
        "ai_moves": ai_moves,
        "state": _state_to_dict(controller),
    }


@app.post("/api/move")
async def make_move(req: MoveRequest) -> dict[str, Any]:
    """人間の手を受け取り、コンピュータが応答して次の局面を返す。"""
    game = _get_game(req.game_id)
    controller: TurnController = game["controller"]

    if controller.phase == Phase.GAME_OVER:
        raise HTTPException(400, "Game is already over")
    if not controller.submit_human_move(req.move):
        raise HTTPException(400, f"Illegal move: {req.move}")

    ai_moves = await _computer_reply(game)
    return {
        "state": _state_to_dict(controller),
        "player_move": req.move,
        "ai_moves": ai_moves,
    }


@app.post("/api/undo/{game_id}")
async def undo(game_id: str) -> dict[str, Any]:
    """待った: 人間が最後に指す前の局面に戻す。"""
    game = _get_game(game_id)
    controller: TurnController = game["controller"]
    if not controller.undo():
        raise HTTPException(400, "Nothing to undo")
    return _state_to_dict(controller)


@app.get("/api/state/{game_id}")
async def get_state(game_id: str) -> dict[str, Any]:
    """現在の局面情報を取得する（ページ再読み込み時などに使用）。"""
    game = _get_game(game_id)
    return _state_to_dict(game["controller"])


def main() -> None:
    """Run the web server.

    `minigame-web` または `python -m minigame_ai.web.app` で起動する。
    """
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
