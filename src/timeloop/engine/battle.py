"""Runs battle turns between the player and one enemy until someone drops."""
from __future__ import annotations

import logging
from typing import Callable

from timeloop.cli.menu import Menu, Screen
from timeloop.engine.player_turns import choose_combat_action as choose_player_action
from timeloop.mechanics.enemy_ai import choose_combat_action
from timeloop.mechanics.turn_resolution import execute_actions
from timeloop.models.character import Player
from timeloop.models.combat import Action, BattleResult, TurnCounter
from timeloop.models.enemy import Enemy

logger = logging.getLogger(__name__)

EnemyPolicy = Callable[[Enemy, int], Action]


def battle(
    player: Player,
    enemy: Enemy,
    turn_counter: TurnCounter,
    menu: Menu,
    enemy_ai: EnemyPolicy = choose_combat_action,
) -> BattleResult:
    """Fight *enemy* until the player or the enemy is at zero health.

    The turn counter goes up after every turn that doesn't end the battle.
    If both sides drop on the same turn the player loses. On a win the
    enemy's remaining inventory goes to the player.
    """
    menu.show_screen(Screen(
        title=f"You are spotted by {enemy.name}",
        content=f"The {enemy.name} sees you and blocks your path.\n{enemy.description}",
    ))
    logger.info("Battle started against %s on turn %d", enemy.name, turn_counter.value)

    while True:
        player_action = choose_player_action(player, menu)
        enemy_action = enemy_ai(enemy, turn_counter.value)

        turn_text = execute_actions(player, enemy, player_action, enemy_action)
        menu.show_screen(Screen(
            title="Turn Result",
            content=(
                f"{turn_text}\n"
                f"You are now at {player.health}/{player.max_health} HP.\n"
                f"The {enemy.name} is now at {enemy.health}/{enemy.max_health} HP"
            ),
        ))

        if player.health.is_zero():
            logger.info("Player lost against %s on turn %d", enemy.name, turn_counter.value)
            return BattleResult.PLAYER_LOSS
        if enemy.health.is_zero():
            logger.info("Player beat %s on turn %d", enemy.name, turn_counter.value)
            win_battle(player, enemy, menu)
            return BattleResult.PLAYER_WIN

        turn_counter.advance()


def win_battle(player: Player, enemy: Enemy, menu: Menu) -> None:
    """Show the victory screen and hand the enemy's items to the player."""
    text = "You won the battle!\n\n"
    if enemy.inventory:
        text += f"You pick up the items that the {enemy.name} was carrying:\n"
    for item in enemy.inventory:
        text += f"• {item.name} - {item.description}\n"

    menu.show_screen(Screen(title="Battle Result", content=text))

    for item in enemy.inventory:
        player.pick_up_item(item)
    enemy.inventory = []
