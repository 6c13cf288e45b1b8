"""Tests for src/timeloop/mechanics/enemy_ai.py."""
from __future__ import annotations

from conftest import make_food, make_weapon

from timeloop.mechanics.enemy_ai import choose_combat_action, fmix64, fnv1a_64, hash_with_turn
from timeloop.models.combat import Action, ActionKind
from timeloop.models.enemy import Enemy
from timeloop.models.health import Health


class TestHashing:
    def test_fnv1a_known_values(self):
        assert fnv1a_64(b"") == 0xCBF29CE484222325
        assert fnv1a_64(b"a") == 0xAF63DC4C8601EC8C

    def test_fmix64_zero_is_fixed_point(self):
        assert fmix64(0) == 0

    def test_hash_is_deterministic(self, cook):
        assert hash_with_turn(cook, 4) == hash_with_turn(cook.model_copy(deep=True), 4)

    def test_hash_depends_on_turn(self, cook):
        assert len({hash_with_turn(cook, t) for t in range(20)}) == 20

    def test_hash_fits_64_bits(self, cook):
        assert 0 <= hash_with_turn(cook, 123) < 2**64


class TestChooseCombatAction:
    def test_hurt_enemy_eats_regardless_of_turn(self):
        enemy = Enemy(name="Cook", inventory=[make_food(heals=5)], health=Health(3), max_health=Health(7))
        for turn in range(50):
            assert choose_combat_action(enemy, turn) == Action.eat_food(0)

    def test_eats_first_food_after_weapon(self):
        enemy = Enemy(
            name="Cook",
            inventory=[make_weapon(), make_food(name="Roll"), make_food(name="Bar")],
            health=Health(5),
            max_health=Health(10),
        )
        assert choose_combat_action(enemy, 0) == Action.eat_food(1)

    def test_healthy_enemy_does_not_eat(self):
        enemy = Enemy(name="Cook", inventory=[make_food()], health=Health(4), max_health=Health(7))
        for turn in range(50):
            assert choose_combat_action(enemy, turn).kind != ActionKind.EAT_FOOD

    def test_unarmed_enemy_never_attacks(self):
        enemy = Enemy(name="Skipper", health=Health(15), max_health=Health(15))
        kinds = {choose_combat_action(enemy, turn).kind for turn in range(200)}
        assert kinds <= {ActionKind.DODGE_LEFT, ActionKind.DODGE_RIGHT, ActionKind.NOTHING}

    def test_armed_enemy_attacks_with_its_weapon(self, cook):
        actions = [choose_combat_action(cook, turn) for turn in range(200)]
        attacks = [a for a in actions if a.is_attack]
        assert attacks
        assert all(a.index == 0 for a in attacks)

    def test_armed_enemy_favours_straight_attacks(self, cook):
        kinds = [choose_combat_action(cook, turn).kind for turn in range(800)]
        straight = kinds.count(ActionKind.ATTACK_STRAIGHT)
        assert straight > kinds.count(ActionKind.ATTACK_LEFT)
        assert straight > kinds.count(ActionKind.NOTHING)

    def test_same_state_same_choice(self, cook):
        assert choose_combat_action(cook, 7) == choose_combat_action(cook.model_copy(deep=True), 7)
