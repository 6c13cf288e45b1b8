"""Deterministic pseudo-random enemy action choice, no I/O.

The choice is a pure function of the enemy's full state and the turn number,
so replaying the same turns of a loop replays the same fight.
"""
from __future__ import annotations

import logging
from typing import Callable

from timeloop.models.combat import Action
from timeloop.models.enemy import Enemy
from timeloop.models.item import Food, Weapon

logger = logging.getLogger(__name__)

_MASK_64 = 0xFFFFFFFFFFFFFFFF
_FNV_OFFSET_BASIS = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3

# h % 8 when the enemy has a weapon; 3/8 of turns are straight attacks
_ARMED_POLICY: tuple[Callable[[int], Action], ...] = (
    Action.attack_left,
    Action.attack_straight,
    Action.attack_straight,
    Action.attack_straight,
    Action.attack_right,
    lambda _: Action.dodge_left(),
    lambda _: Action.dodge_right(),
    lambda _: Action.nothing(),
)

# h % 7 when the enemy is unarmed
_UNARMED_POLICY = (
    Action.dodge_left,
    Action.dodge_left,
    Action.nothing,
    Action.nothing,
    Action.nothing,
    Action.dodge_right,
    Action.dodge_right,
)


def fnv1a_64(data: bytes, seed: int = _FNV_OFFSET_BASIS) -> int:
    h = seed
    for byte in data:
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK_64
    return h


def fmix64(h: int) -> int:
    """Murmur3 finaliser. FNV's low bits are weak on their own."""
    h ^= h >> 33
    h = (h * 0xFF51AFD7ED558CCD) & _MASK_64
    h ^= h >> 33
    h = (h * 0xC4CEB9FE1A85EC53) & _MASK_64
    h ^= h >> 33
    return h


def hash_with_turn(enemy: Enemy, turn_number: int) -> int:
    """Stable 64-bit hash of the enemy's state combined with the turn number."""
    h = fnv1a_64(enemy.state_bytes())
    h = fnv1a_64(str(turn_number).encode("ascii"), seed=h)
    return fmix64(h)


def choose_combat_action(enemy: Enemy, turn_number: int) -> Action:
    """Decide what *enemy* does on *turn_number*.

    An enemy at half health or below eats the first food it carries.
    Otherwise the action is picked from the hash of its state and the turn.
    """
    if enemy.health.points * 2 <= enemy.max_health.points:
        for i, item in enumerate(enemy.inventory):
            if isinstance(item, Food):
                logger.debug("%s is hurt and eats %s", enemy.name, item.name)
                return Action.eat_food(i)

    weapon_index = next(
        (i for i, item in enumerate(enemy.inventory) if isinstance(item, Weapon)),
        None,
    )
    h = hash_with_turn(enemy, turn_number)

    if weapon_index is None:
        action = _UNARMED_POLICY[h % len(_UNARMED_POLICY)]()
    else:
        action = _ARMED_POLICY[h % len(_ARMED_POLICY)](weapon_index)

    logger.debug("%s chose %s on turn %d", enemy.name, action.kind.value, turn_number)
    return action
