from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from timeloop.models.health import Health


class ActionKind(str, Enum):
    NOTHING = "nothing"
    EAT_FOOD = "eat_food"
    ATTACK_STRAIGHT = "attack_straight"
    ATTACK_LEFT = "attack_left"
    ATTACK_RIGHT = "attack_right"
    DODGE_LEFT = "dodge_left"
    DODGE_RIGHT = "dodge_right"


_INDEXED_KINDS = frozenset({
    ActionKind.EAT_FOOD,
    ActionKind.ATTACK_STRAIGHT,
    ActionKind.ATTACK_LEFT,
    ActionKind.ATTACK_RIGHT,
})
_ATTACK_KINDS = frozenset({ActionKind.ATTACK_STRAIGHT, ActionKind.ATTACK_LEFT, ActionKind.ATTACK_RIGHT})
_DEFENSIVE_KINDS = frozenset({ActionKind.NOTHING, ActionKind.DODGE_LEFT, ActionKind.DODGE_RIGHT})


@dataclass(frozen=True)
class Action:
    """One combatant's choice for a turn.

    Attacks and eating carry the inventory index of the weapon or food used.
    Straight attacks connect unless dodged or out-sped; left/right attacks
    only connect against a dodge in the same direction.
    """

    kind: ActionKind
    index: int | None = None

    def __post_init__(self) -> None:
        if (self.kind in _INDEXED_KINDS) != (self.index is not None):
            raise ValueError(f"{self.kind.value} action has invalid inventory index {self.index!r}")

    @classmethod
    def nothing(cls) -> Action:
        return cls(ActionKind.NOTHING)

    @classmethod
    def eat_food(cls, index: int) -> Action:
        return cls(ActionKind.EAT_FOOD, index)

    @classmethod
    def attack_straight(cls, index: int) -> Action:
        return cls(ActionKind.ATTACK_STRAIGHT, index)

    @classmethod
    def attack_left(cls, index: int) -> Action:
        return cls(ActionKind.ATTACK_LEFT, index)

    @classmethod
    def attack_right(cls, index: int) -> Action:
        return cls(ActionKind.ATTACK_RIGHT, index)

    @classmethod
    def dodge_left(cls) -> Action:
        return cls(ActionKind.DODGE_LEFT)

    @classmethod
    def dodge_right(cls) -> Action:
        return cls(ActionKind.DODGE_RIGHT)

    @property
    def is_attack(self) -> bool:
        return self.kind in _ATTACK_KINDS

    @property
    def is_defensive(self) -> bool:
        """Nothing or a dodge: no weapon or food involved."""
        return self.kind in _DEFENSIVE_KINDS


class BattleResult(str, Enum):
    """Outcome of a battle. A PLAYER_LOSS must reset the time loop."""

    PLAYER_WIN = "player_win"
    PLAYER_LOSS = "player_loss"


@dataclass
class TurnCounter:
    """The game's turn number, shared between battles and passive turns.

    It seeds the enemy AI, so replaying the same turns replays the same fight.
    """

    value: int = 0

    def advance(self) -> int:
        self.value += 1
        return self.value


class NarratableCombatant(Protocol):
    """Anything that can take part in a battle: the player or an enemy."""

    inventory: list
    health: Health
    max_health: Health

    def describe_combat_action(self, action: Action) -> str: ...
