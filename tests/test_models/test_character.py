"""Tests for src/timeloop/models/character.py and enemy.py."""
from __future__ import annotations

import pytest

from timeloop.models.character import Player
from timeloop.models.combat import Action
from timeloop.models.enemy import Enemy
from timeloop.models.health import Health


class TestRemainingTime:
    @pytest.mark.parametrize("turns, expected", [
        (0, "0:00"), (1, "0:20"), (3, "1:00"), (5, "1:40"), (10, "3:20"), (30, "10:00"),
    ])
    def test_format(self, turns, expected):
        assert Player(remaining_turns=turns).remaining_time() == expected


class TestDescribeCombatAction:
    def test_player_attack_names_weapon(self, player):
        assert player.describe_combat_action(Action.attack_left(0)) == "You attack to the left with your Intruders Blaster"
        assert player.describe_combat_action(Action.attack_straight(0)) == (
            "You attack in front of you with your Intruders Blaster"
        )

    def test_player_defensive(self, player):
        assert player.describe_combat_action(Action.nothing()) == "You do nothing"
        assert player.describe_combat_action(Action.dodge_right()) == "You dodge to the right"

    def test_enemy_descriptions(self, cook):
        assert cook.describe_combat_action(Action.attack_right(0)) == (
            "The Cook attacks to the right with their Standard Issue Blaster"
        )
        assert cook.describe_combat_action(Action.dodge_left()) == "The Cook dodges to the left"
        assert cook.describe_combat_action(Action.nothing()) == "The Cook does nothing"


class TestAction:
    def test_indexed_kinds_need_index(self):
        with pytest.raises(ValueError):
            Action(kind=Action.eat_food(0).kind)

    def test_unindexed_kinds_reject_index(self):
        with pytest.raises(ValueError):
            Action(kind=Action.nothing().kind, index=2)

    def test_classification(self):
        assert Action.attack_left(0).is_attack
        assert not Action.eat_food(0).is_attack
        assert Action.dodge_left().is_defensive
        assert not Action.eat_food(0).is_defensive


class TestEnemyState:
    def test_state_bytes_are_stable(self, cook):
        assert cook.state_bytes() == cook.model_copy(deep=True).state_bytes()

    def test_state_bytes_track_health(self, cook):
        hurt = cook.model_copy(deep=True)
        hurt.health = Health(3)
        assert hurt.state_bytes() != cook.state_bytes()

    def test_int_health_is_coerced(self):
        enemy = Enemy(name="Skipper", health=15, max_health=15)
        assert enemy.health == Health(15)
