"""The time loop, which starts over in the cells whenever the player dies or runs out of time."""
from __future__ import annotations

import logging
from typing import Any, Optional

from timeloop.cli.menu import Menu, Screen
from timeloop.content.loader import build_room_graph
from timeloop.engine.battle import EnemyPolicy, battle
from timeloop.engine.player_turns import print_room, show_win_screen, take_passive_action
from timeloop.mechanics.enemy_ai import choose_combat_action
from timeloop.models.character import Player
from timeloop.models.combat import BattleResult, TurnCounter
from timeloop.models.health import Health
from timeloop.models.location import Room

logger = logging.getLogger(__name__)

DEFAULT_GAME_CONFIG: dict[str, Any] = {
    "max_turns": 30,
    "player_start_health": 10,
    "player_max_health": 10,
    "starting_room": "cells",
}

DEFEAT_SCREEN = Screen(
    title="Everything goes dark",
    content=(
        "You hit the floor and the world fades away.\n"
        "Then you're blinking at the ceiling of your cell, the door still busted open. "
        "You've been here before."
    ),
)
OUT_OF_TIME_SCREEN = Screen(
    title="The ship lurches",
    content=(
        "The engines roar as the ship drops out of warp to pick up its troops. It's too late.\n"
        "There's a flash, and you're back in your cell as if nothing happened."
    ),
)


def init_player(game_config: Optional[dict[str, Any]] = None) -> Player:
    """A fresh player in a fresh world, as at the start of every loop."""
    cfg = {**DEFAULT_GAME_CONFIG, **(game_config or {})}
    return Player(
        room=Room(cfg["starting_room"]),
        health=Health(cfg["player_start_health"]),
        max_health=Health(cfg["player_max_health"]),
        remaining_turns=cfg["max_turns"],
        room_graph=build_room_graph(),
    )


class GameLoop:
    """Runs the game until the player escapes the ship."""

    def __init__(
        self,
        menu: Menu,
        game_config: Optional[dict[str, Any]] = None,
        enemy_ai: EnemyPolicy = choose_combat_action,
    ):
        self.menu = menu
        self.game_config = game_config or {}
        self.enemy_ai = enemy_ai
        self.loops = 0
        self.turn_counter = TurnCounter()
        self.player = init_player(self.game_config)

    def reset(self, screen: Screen) -> None:
        """Start the loop over: new player, new world, turn count from zero."""
        self.menu.show_screen(screen)
        self.loops += 1
        self.turn_counter = TurnCounter()
        self.player = init_player(self.game_config)
        logger.info("Time loop reset (%d so far)", self.loops)

    def step(self) -> bool:
        """Play one turn. Returns True once the game has been won."""
        player = self.player
        if player.room == Room.ESCAPE:
            show_win_screen(player, self.menu)
            logger.info("Escaped after %d loop resets", self.loops)
            return True

        print_room(player, self.menu)
        state = player.get_room_state()

        if state.enemy is not None:
            result = battle(player, state.enemy, self.turn_counter, self.menu, self.enemy_ai)
            if result == BattleResult.PLAYER_LOSS:
                self.reset(DEFEAT_SCREEN)
            else:
                state.enemy = None
            return False

        take_passive_action(player, self.menu)
        if player.remaining_turns <= 0 and player.room != Room.ESCAPE:
            self.reset(OUT_OF_TIME_SCREEN)
        return False

    def run(self) -> None:
        while not self.step():
            pass
