"""Game registry — build the starting state of any game from options.

ゲーム種別と設定値から初期局面を作る（newGame に相当）。

ゲーム種別ごとの設定:
  othello: なし（盤面は固定）
  nim:     blue, yellow, red（各山の初期個数）
  mod_m:   card_count, modulus, first_mover, exhaustion_winner, hand_mode
"""

from __future__ import annotations

from typing import Any

from minigame_ai.game.errors import InvalidConfigurationError
from minigame_ai.game.mod_m import SOURCE_CONFIG, HandMode, ModMConfig, ModMState
from minigame_ai.game.mod_m import Player as ModMPlayer
from minigame_ai.game.nim import NimConfig, NimState
from minigame_ai.game.othello import OthelloState
from minigame_ai.game.protocol import GameState

GAME_TYPES = ("othello", "nim", "mod_m")


def _mod_m_config(options: dict[str, Any]) -> ModMConfig:
    """Convert raw option values (ints / strings) to a ModMConfig."""
    if "exhaustion_winner" not in options:
        msg = "mod_m requires an explicit exhaustion_winner"
        raise InvalidConfigurationError(msg)
    values = dict(options)
    try:
        for name in ("first_mover", "exhaustion_winner"):
            if name in values:
                values[name] = ModMPlayer(values[name])
        if "hand_mode" in values:
            values["hand_mode"] = HandMode(values["hand_mode"])
    except ValueError as e:
        raise InvalidConfigurationError(str(e)) from e
    values.setdefault("card_count", SOURCE_CONFIG.card_count)
    values.setdefault("modulus", SOURCE_CONFIG.modulus)
    values.setdefault("first_mover", SOURCE_CONFIG.first_mover)
    try:
        return ModMConfig(**values)
    except TypeError as e:
        raise InvalidConfigurationError(str(e)) from e


def create_state(game_type: str, **options: Any) -> GameState:
    """Return the validated starting state for game_type.

    不明なゲーム種別・不正な設定は InvalidConfigurationError。
    """
    if game_type == "othello":
        if options:
            msg = f"othello takes no options, got {sorted(options)}"
            raise InvalidConfigurationError(msg)
        return OthelloState()
    if game_type == "nim":
        try:
            config = NimConfig(**options)
        except TypeError as e:
            raise InvalidConfigurationError(str(e)) from e
        return NimState.initial(config)
    if game_type == "mod_m":
        return ModMState.initial(_mod_m_config(options))
    msg = f"Unknown game type: {game_type}"
    raise InvalidConfigurationError(msg)
