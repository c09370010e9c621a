"""CLI entry point for minigame-ai — Human vs minimax AI.

コマンドラインで動く対局プログラム。
オセロ変種・駒取りゲーム（ニム）・Mod-M ゲームから1つ選び、コンピュータと対局する。

起動方法: `uv run minigame-cli`
"""

from __future__ import annotations

import time

from minigame_ai.engine.controller import Phase, TurnController, create_controller
from minigame_ai.game.mod_m import SOURCE_CONFIG, ModMState, state_to_str
from minigame_ai.game.nim import NimState, heaps_to_str
from minigame_ai.game.nim.moves import move_to_str as nim_move_to_str
from minigame_ai.game.othello import OthelloState, board_to_str
from minigame_ai.game.othello.moves import move_to_str as othello_move_to_str
from minigame_ai.game.protocol import GameState

GAMES = {
    "1": ("othello", "ストレンジオセロ (6x6 Othello variant)"),
    "2": ("nim", "駒取りゲーム (misère Nim: last token loses)"),
    "3": ("mod_m", "Mod-M ゲーム (sum divisible by M loses)"),
}


def _render(state: GameState) -> str:
    """局面をゲームに応じた文字列に変換する。"""
    if isinstance(state, OthelloState):
        return board_to_str(state.board)
    if isinstance(state, NimState):
        return heaps_to_str(state.heaps)
    if isinstance(state, ModMState):
        return state_to_str(state)
    return repr(state)


def _format_move(state: GameState, move: int) -> str:
    """手を人間が読みやすい文字列に変換する。例: "c5", "red -2", "4"。"""
    if isinstance(state, OthelloState):
        return othello_move_to_str(move)
    if isinstance(state, NimState):
        return nim_move_to_str(move)
    return str(move)


def _new_controller(game_type: str) -> TurnController:
    if game_type == "mod_m":
        return create_controller(
            game_type,
            seed=0,
            card_count=SOURCE_CONFIG.card_count,
            modulus=SOURCE_CONFIG.modulus,
            first_mover=SOURCE_CONFIG.first_mover.value,
            exhaustion_winner=SOURCE_CONFIG.exhaustion_winner.value,
        )
    return create_controller(game_type, seed=0)


def _human_turn(controller: TurnController) -> bool:
    """Ask for a move until one is accepted. Returns False if the game is aborted."""
    state = controller.state
    moves = controller.derived.legal_moves
    print("Legal moves:")
    for i, m in enumerate(moves):
        print(f"  {i}: {_format_move(state, m)}")
    print("  u: undo")
    print()

    # 入力検証ループ（正しい番号が入力されるまで繰り返す）
    while True:
        try:
            choice = input("Your move (number): ").strip()
            if choice == "u":
                if controller.undo():
                    return True
                print("Nothing to undo.")
                continue
            idx = int(choice)
            if 0 <= idx < len(moves):
                controller.submit_human_move(moves[idx])
                return True
            print(f"Invalid: choose 0-{len(moves) - 1}")
        except ValueError:
            print("Enter a number.")
        except (EOFError, KeyboardInterrupt):
            print("\nGame aborted.")
            return False


def main(delay: float = 0.5) -> None:
    """Run a Human (player 0) vs minimax AI (player 1) game.

    ゲームの流れ:
    1. ゲームを選ぶ
    2. 局面と合法手一覧を表示して番号入力を求める（"u" で待った）
    3. コンピュータが応答する（delay 秒待ってから探索）
    4. 終局まで繰り返す
    """
    print("=== minigame-ai ===")
    for key, (_, title) in GAMES.items():
        print(f"  {key}: {title}")

    try:
        choice = input("Game (number): ").strip()
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return
    if choice not in GAMES:
        print(f"Unknown game: {choice}")
        return

    controller = _new_controller(GAMES[choice][0])
    print()

    while controller.phase != Phase.GAME_OVER:
        print(_render(controller.state))
        print()

        if controller.phase == Phase.HUMAN_TURN:
            if not _human_turn(controller):
                return
        else:
            if delay > 0:
                time.sleep(delay)  # 「考えている」演出
            state = controller.state
            move = controller.play_computer_turn()
            if move is not None:
                print(f"AI plays: {_format_move(state, move)}")

        print()

    # 終局: 結果を表示
    print(_render(controller.state))
    print()
    winner = controller.derived.winner
    if winner == controller.human_player:
        print("You win!")
    elif winner is None:
        print("Draw!")
    else:
        print("AI wins!")


if __name__ == "__main__":
    main()
