from __future__ import annotations

import json

from pydantic import BaseModel, Field

from timeloop.models.combat import Action, ActionKind
from timeloop.models.health import Health, HealthField
from timeloop.models.item import Item


class Enemy(BaseModel):
    """An enemy which can be battled.

    Items left in the inventory at the end of a battle go to the player.
    """

    id: str = ""
    name: str
    description: str = ""
    inventory: list[Item] = Field(default_factory=list)
    health: HealthField = Field(default_factory=lambda: Health(10))
    max_health: HealthField = Field(default_factory=lambda: Health(10))

    def state_bytes(self) -> bytes:
        """Canonical serialisation of the full enemy state, stable across runs."""
        state = self.model_dump(mode="json")
        return json.dumps(state, sort_keys=True, separators=(",", ":")).encode("utf-8")

    def describe_combat_action(self, action: Action) -> str:
        """Describe the enemy carrying out *action*, naming the item it uses."""
        kind = action.kind
        if kind == ActionKind.ATTACK_LEFT:
            return f"The {self.name} attacks to the left with their {self.inventory[action.index].name}"
        if kind == ActionKind.ATTACK_RIGHT:
            return f"The {self.name} attacks to the right with their {self.inventory[action.index].name}"
        if kind == ActionKind.ATTACK_STRAIGHT:
            return f"The {self.name} attacks in front of you with their {self.inventory[action.index].name}"
        if kind == ActionKind.EAT_FOOD:
            return f"The {self.name} attempts to eat their {self.inventory[action.index].name}"
        if kind == ActionKind.DODGE_LEFT:
            return f"The {self.name} dodges to the left"
        if kind == ActionKind.DODGE_RIGHT:
            return f"The {self.name} dodges to the right"
        return f"The {self.name} does nothing"
