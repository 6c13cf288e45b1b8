from __future__ import annotations

from pydantic import BaseModel, Field

from timeloop.models.combat import Action, ActionKind
from timeloop.models.health import Health, HealthField
from timeloop.models.item import Item
from timeloop.models.location import Room, RoomGraph, RoomState

# One turn of the loop is 20 seconds of in-game time
SECONDS_PER_TURN = 20


class Player(BaseModel):
    """The player's state for one pass through the time loop."""

    room: Room = Room.CELLS
    inventory: list[Item] = Field(default_factory=list)
    health: HealthField = Field(default_factory=lambda: Health(10))
    max_health: HealthField = Field(default_factory=lambda: Health(10))
    # Turns left before the loop resets
    remaining_turns: int = 30
    room_graph: RoomGraph = Field(default_factory=RoomGraph)

    def get_room_state(self) -> RoomState:
        return self.room_graph.get_state(self.room)

    def pick_up_item(self, item: Item) -> None:
        self.inventory.append(item)

    def remaining_time(self) -> str:
        """Remaining turns as m:ss."""
        total_seconds = self.remaining_turns * SECONDS_PER_TURN
        return f"{total_seconds // 60}:{total_seconds % 60:02d}"

    def describe_combat_action(self, action: Action) -> str:
        kind = action.kind
        if kind == ActionKind.ATTACK_LEFT:
            return f"You attack to the left with your {self.inventory[action.index].name}"
        if kind == ActionKind.ATTACK_RIGHT:
            return f"You attack to the right with your {self.inventory[action.index].name}"
        if kind == ActionKind.ATTACK_STRAIGHT:
            return f"You attack in front of you with your {self.inventory[action.index].name}"
        if kind == ActionKind.EAT_FOOD:
            return f"You attempt to eat your {self.inventory[action.index].name}"
        if kind == ActionKind.DODGE_LEFT:
            return "You dodge to the left"
        if kind == ActionKind.DODGE_RIGHT:
            return "You dodge to the right"
        return "You do nothing"
