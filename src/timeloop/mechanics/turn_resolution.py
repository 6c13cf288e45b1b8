"""Turn resolution: applies both combatants' simultaneous actions.

Branches are checked in order; an action pair that fits several of them is
resolved by the first one that matches:

1. straight attacks (one side, or both compared on weapon speed)
2. both sides eat
3. one side eats
4. a flank attack meets a dodge in the same direction
5. neither side attacks or eats
6. any remaining attack misses
"""
from __future__ import annotations

import logging

from timeloop.errors import CombatContractError
from timeloop.models.character import Player
from timeloop.models.combat import Action, ActionKind, NarratableCombatant
from timeloop.models.enemy import Enemy
from timeloop.models.item import Food, Weapon

logger = logging.getLogger(__name__)

# Actions a straight attack always lands against
_OPEN_TO_STRAIGHT = frozenset({
    ActionKind.NOTHING,
    ActionKind.ATTACK_LEFT,
    ActionKind.ATTACK_RIGHT,
    ActionKind.EAT_FOOD,
})

_MATCHING_DODGE = {
    ActionKind.ATTACK_LEFT: ActionKind.DODGE_LEFT,
    ActionKind.ATTACK_RIGHT: ActionKind.DODGE_RIGHT,
}


def _item(combatant: NarratableCombatant, action: Action, expected: type) -> Weapon | Food:
    inventory = combatant.inventory
    item = inventory[action.index] if 0 <= action.index < len(inventory) else None
    if not isinstance(item, expected):
        raise CombatContractError(
            f"{action.kind.value} at inventory index {action.index} needs a {expected.__name__}, found {item!r}"
        )
    return item


def _validate(combatant: NarratableCombatant, action: Action) -> None:
    if action.kind == ActionKind.EAT_FOOD:
        _item(combatant, action, Food)
    elif action.is_attack:
        _item(combatant, action, Weapon)


def _weapon(combatant: NarratableCombatant, action: Action) -> Weapon:
    return _item(combatant, action, Weapon)


def _take_food(combatant: NarratableCombatant, action: Action) -> Food:
    item = _item(combatant, action, Food)
    del combatant.inventory[action.index]
    return item


def _eat(combatant: NarratableCombatant, food: Food) -> int:
    combatant.health, increase = combatant.health.heal_to_max(food.heals_for, combatant.max_health)
    return increase.points


def _hit(defender: NarratableCombatant, weapon: Weapon, *, dodged: bool) -> int:
    """Apply a weapon hit and return the health actually lost."""
    before = defender.health
    defender.health = before - (weapon.dodge_damage if dodged else weapon.straight_damage)
    return (before - defender.health).points


def _resolve(player: Player, enemy: Enemy, p_action: Action, e_action: Action) -> str:
    p_kind, e_kind = p_action.kind, e_action.kind

    # 1. Straight attacks
    if p_kind == ActionKind.ATTACK_STRAIGHT and e_kind in _OPEN_TO_STRAIGHT:
        weapon = _weapon(player, p_action)
        dealt = _hit(enemy, weapon, dodged=False)
        return f"You hit the {enemy.name} with your {weapon.name} and dealt {dealt} damage."

    if e_kind == ActionKind.ATTACK_STRAIGHT and p_kind in _OPEN_TO_STRAIGHT:
        weapon = _weapon(enemy, e_action)
        dealt = _hit(player, weapon, dodged=False)
        return f"The {enemy.name} hit you with their {weapon.name} and dealt {dealt} damage."

    if p_kind == ActionKind.ATTACK_STRAIGHT and e_kind == ActionKind.ATTACK_STRAIGHT:
        p_weapon = _weapon(player, p_action)
        e_weapon = _weapon(enemy, e_action)
        # Lower speed value strikes first
        if p_weapon.speed < e_weapon.speed:
            _hit(enemy, p_weapon, dodged=False)
            return "You both attacked, and you were faster and got away unscathed."
        if p_weapon.speed > e_weapon.speed:
            _hit(player, e_weapon, dodged=False)
            return f"You both attacked, but the {enemy.name} was faster and you couldn't get a hit in."
        _hit(enemy, p_weapon, dodged=False)
        _hit(player, e_weapon, dodged=False)
        return "You both attacked with the same speed, and you both got hit."

    # 2. Both eat; both items leave the inventories before anyone heals
    if p_kind == ActionKind.EAT_FOOD and e_kind == ActionKind.EAT_FOOD:
        p_food = _take_food(player, p_action)
        e_food = _take_food(enemy, e_action)
        p_inc = _eat(player, p_food)
        e_inc = _eat(enemy, e_food)
        return (
            "You both took some time out of the fight to eat some food - how peaceful.\n"
            f"You ate your {p_food.name} and were healed {p_inc} HP. "
            f"The {enemy.name} ate their {e_food.name} and was healed {e_inc} HP."
        )

    # 3. One side eats, the other side's action has no effect
    if p_kind == ActionKind.EAT_FOOD:
        food = _take_food(player, p_action)
        return f"You ate your {food.name} and were healed by {_eat(player, food)} HP."

    if e_kind == ActionKind.EAT_FOOD:
        food = _take_food(enemy, e_action)
        return f"The {enemy.name} ate their {food.name} and was healed by {_eat(enemy, food)} HP."

    # 4. Flank attack into a dodge the same way lands with reduced damage
    if _MATCHING_DODGE.get(p_kind) == e_kind:
        dealt = _hit(enemy, _weapon(player, p_action), dodged=True)
        return f"The {enemy.name} dodged, but you caught them and dealt {dealt} damage."

    if _MATCHING_DODGE.get(e_kind) == p_kind:
        dealt = _hit(player, _weapon(enemy, e_action), dodged=True)
        return f"You dodged, but the {enemy.name} caught you and dealt {dealt} damage."

    # 5. Nobody attacked
    if p_action.is_defensive and e_action.is_defensive:
        return "Neither of you attacked. What a waste of time."

    # 6. Misses
    if p_action.is_attack and e_action.is_attack:
        return "You both attacked, but neither of you connected."
    if p_action.is_attack:
        return "You attacked but it didn't connect."
    return f"The {enemy.name} attacked but it didn't connect."


def execute_actions(player: Player, enemy: Enemy, player_action: Action, enemy_action: Action) -> str:
    """Carry out one turn and return its narration.

    Mutates both combatants' health and inventories. The narration is the
    player's action, the enemy's action, then the outcome, one per line.
    """
    _validate(player, player_action)
    _validate(enemy, enemy_action)

    # Describe first: eating removes the item the description names
    player_text = player.describe_combat_action(player_action)
    enemy_text = enemy.describe_combat_action(enemy_action)

    outcome = _resolve(player, enemy, player_action, enemy_action)
    logger.debug(
        "Resolved %s vs %s: player %s/%s, %s %s/%s",
        player_action.kind.value, enemy_action.kind.value,
        player.health, player.max_health, enemy.name, enemy.health, enemy.max_health,
    )
    return f"{player_text}\n{enemy_text}\n{outcome}"
