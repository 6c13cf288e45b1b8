"""Tests for src/timeloop/engine/battle.py."""
from __future__ import annotations

from conftest import MockMenu, make_food, make_weapon
from timeloop.engine.battle import battle
from timeloop.models.combat import Action, BattleResult, TurnCounter
from timeloop.models.health import Health

# Player option indices with a single weapon in the inventory
DO_NOTHING = 0
ATTACK = 3
STRAIGHT = 1


def _always(action: Action):
    return lambda enemy, turn: action


class TestBattle:
    def test_player_wins_and_takes_items(self, player, cook, enemy_blaster):
        menu = MockMenu([ATTACK, STRAIGHT, ATTACK, STRAIGHT])
        counter = TurnCounter()

        result = battle(player, cook, counter, menu, enemy_ai=_always(Action.nothing()))

        assert result == BattleResult.PLAYER_WIN
        assert cook.health == Health(0)
        assert cook.inventory == []
        assert player.inventory[-1] == enemy_blaster
        # The final turn doesn't advance the counter
        assert counter.value == 1
        assert menu.screens[0].title == "You are spotted by Cook"
        assert menu.last_screen.title == "Battle Result"
        assert "Standard Issue Blaster" in menu.last_screen.content

    def test_player_loses(self, player, cook):
        menu = MockMenu([DO_NOTHING, DO_NOTHING])
        counter = TurnCounter(5)

        result = battle(player, cook, counter, menu, enemy_ai=_always(Action.attack_straight(0)))

        assert result == BattleResult.PLAYER_LOSS
        assert player.health.is_zero()
        assert counter.value == 6
        assert menu.last_screen.title == "Turn Result"

    def test_both_dropping_is_a_loss(self, player, cook):
        player.inventory = [make_weapon(straight=5, speed=4)]
        player.health = Health(5)
        cook.health = Health(5)
        menu = MockMenu([ATTACK, STRAIGHT])

        result = battle(player, cook, TurnCounter(), menu, enemy_ai=_always(Action.attack_straight(0)))

        assert result == BattleResult.PLAYER_LOSS
        assert player.health.is_zero()
        assert cook.health.is_zero()
        assert cook.inventory != []

    def test_enemy_ai_sees_the_turn_counter(self, player, cook):
        seen = []

        def policy(enemy, turn):
            seen.append(turn)
            return Action.nothing()

        menu = MockMenu([ATTACK, STRAIGHT, ATTACK, STRAIGHT])
        battle(player, cook, TurnCounter(10), menu, enemy_ai=policy)
        assert seen == [10, 11]

    def test_turn_result_shows_health(self, player, cook):
        menu = MockMenu([ATTACK, STRAIGHT, ATTACK, STRAIGHT])
        battle(player, cook, TurnCounter(), menu, enemy_ai=_always(Action.nothing()))
        turn_screen = menu.screens[1]
        assert turn_screen.title == "Turn Result"
        assert "You are now at 10/10 HP." in turn_screen.content
        assert "The Cook is now at 2/7 HP" in turn_screen.content

    def test_combat_options_list_inventory(self, player, cook):
        player.inventory.append(make_food(name="Bread roll"))
        menu = MockMenu([ATTACK, STRAIGHT, ATTACK, STRAIGHT])
        battle(player, cook, TurnCounter(), menu, enemy_ai=_always(Action.nothing()))
        assert list(menu.lists[0].options) == [
            "Do nothing",
            "Dodge to the left",
            "Dodge to the right",
            "Attack with your Intruders Blaster",
            "Eat your Bread roll",
        ]
        assert list(menu.lists[1].options) == ["Attack Left", "Attack Straight", "Attack Right"]
