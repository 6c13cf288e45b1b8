from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from timeloop.models.enemy import Enemy
from timeloop.models.item import Item


class Room(str, Enum):
    """Room identifiers. The state of a room lives in its RoomState."""

    CELLS = "cells"
    BRIDGE = "bridge"
    UPPER_CORRIDOR = "upper_corridor"
    STRATEGY_ROOM = "strategy_room"
    MESS_HALL = "mess_hall"
    KITCHEN = "kitchen"
    STAIRWELL = "stairwell"
    CREW_AREA = "crew_area"
    STORE_ROOM = "store_room"
    LOWER_CORRIDOR = "lower_corridor"
    WASH_ROOM = "wash_room"
    BUNKS = "bunks"
    ENGINE_ROOM = "engine_room"
    ESCAPE_POD = "escape_pod"
    # Reaching this room wins the game
    ESCAPE = "escape"


class RoomAction(str, Enum):
    STRATEGY_ROOM_TAKE_MAPS = "strategy_room_take_maps"
    ENGINE_ROOM_TAKE_KEYS = "engine_room_take_keys"
    ESCAPE_POD_TAKE_OFF = "escape_pod_take_off"
    STORE_ROOM_FIND_CHOCOLATE = "store_room_find_chocolate"
    BUNKS_GET_DIARY = "bunks_get_diary"


class RoomTransition(BaseModel):
    to: Room
    message: str
    # Shown in the option list instead of the destination's name
    prompt_text: Optional[str] = None


class RoomState(BaseModel):
    room: Room
    name: str
    description: str = ""
    items: list[Item] = Field(default_factory=list)
    enemy: Optional[Enemy] = None
    connections: list[RoomTransition] = Field(default_factory=list)
    actions: list[RoomAction] = Field(default_factory=list)


class RoomGraph(BaseModel):
    rooms: dict[Room, RoomState] = Field(default_factory=dict)

    def get_state(self, room: Room) -> RoomState:
        return self.rooms[room]

    def get_name(self, room: Room) -> str:
        state = self.rooms.get(room)
        return state.name if state else room.value.replace("_", " ").title()
