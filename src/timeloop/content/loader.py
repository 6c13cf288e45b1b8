"""Loads the ship's static world tables from the TOML files beside this module.

Every call to `build_room_graph` returns a brand new world; nothing it
returns is shared with earlier calls, so a time-loop reset can simply
throw the old graph away.
"""
from __future__ import annotations

import logging
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from timeloop.errors import ContentError
from timeloop.models.enemy import Enemy
from timeloop.models.health import Health
from timeloop.models.item import Food, Item, KeyItem, KeyItemType, Weapon
from timeloop.models.location import Room, RoomAction, RoomGraph, RoomState, RoomTransition

logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).parent


def load_toml(filepath: Path) -> dict[str, Any]:
    try:
        with open(filepath, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as exc:
        raise ContentError(f"Missing content file: {filepath}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ContentError(f"Malformed content file {filepath}: {exc}") from exc


def _validated(model: type, data: dict[str, Any], source: str):
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ContentError(f"Invalid entry {data.get('id', '?')!r} in {source}: {exc}") from exc


@lru_cache(maxsize=None)
def load_all_weapons() -> dict[str, Weapon]:
    data = load_toml(CONTENT_DIR / "items" / "weapons.toml")
    return {w["id"]: _validated(Weapon, w, "weapons.toml") for w in data.get("weapons", [])}


@lru_cache(maxsize=None)
def load_all_food() -> dict[str, Food]:
    data = load_toml(CONTENT_DIR / "items" / "food.toml")
    return {f["id"]: _validated(Food, f, "food.toml") for f in data.get("food", [])}


@lru_cache(maxsize=None)
def load_all_key_items() -> dict[str, KeyItem]:
    data = load_toml(CONTENT_DIR / "items" / "key_items.toml")
    return {k["id"]: _validated(KeyItem, k, "key_items.toml") for k in data.get("key_items", [])}


@lru_cache(maxsize=None)
def load_all_enemies() -> dict[str, dict[str, Any]]:
    """Raw enemy templates; `build_enemy` turns one into a fresh Enemy."""
    data = load_toml(CONTENT_DIR / "enemies.toml")
    return {e["id"]: e for e in data.get("enemies", [])}


@lru_cache(maxsize=None)
def load_all_rooms() -> dict[str, dict[str, Any]]:
    data = load_toml(CONTENT_DIR / "rooms.toml")
    return {r["id"]: r for r in data.get("rooms", [])}


@lru_cache(maxsize=None)
def load_diary() -> dict[str, Any]:
    """The captain's diary: ``pages`` in reading order, then ``last_page``."""
    data = load_toml(CONTENT_DIR / "diary.toml")
    if not data.get("pages") or "last_page" not in data:
        raise ContentError("diary.toml needs at least one [[pages]] entry and a [last_page]")
    return data


def get_weapon(item_id: str) -> Weapon:
    try:
        return load_all_weapons()[item_id].model_copy()
    except KeyError as exc:
        raise ContentError(f"Unknown weapon: {item_id}") from exc


def get_food(item_id: str) -> Food:
    try:
        return load_all_food()[item_id].model_copy()
    except KeyError as exc:
        raise ContentError(f"Unknown food: {item_id}") from exc


def get_key_item(key: KeyItemType) -> KeyItem:
    """A new copy of the key item, so per-copy state such as diary pages starts fresh."""
    for item in load_all_key_items().values():
        if item.key == key:
            return item.model_copy(deep=True)
    raise ContentError(f"No key item defined for {key.value}")


def get_item(item_id: str) -> Item:
    """Look *item_id* up across weapons, food and key items."""
    for table in (load_all_weapons(), load_all_food(), load_all_key_items()):
        if item_id in table:
            return table[item_id].model_copy(deep=True)
    raise ContentError(f"Unknown item: {item_id}")


def build_enemy(enemy_id: str) -> Enemy:
    try:
        template = load_all_enemies()[enemy_id]
    except KeyError as exc:
        raise ContentError(f"Unknown enemy: {enemy_id}") from exc

    health = template.get("health", 10)
    data = {
        "id": enemy_id,
        "name": template.get("name", ""),
        "description": template.get("description", ""),
        "inventory": [get_item(i) for i in template.get("items", [])],
        "health": Health(health),
        "max_health": Health(template.get("max_health", health)),
    }
    return _validated(Enemy, data, "enemies.toml")


def _build_room(room_id: str, data: dict[str, Any]) -> RoomState:
    try:
        room = Room(room_id)
        actions = [RoomAction(a) for a in data.get("actions", [])]
    except ValueError as exc:
        raise ContentError(f"Invalid room {room_id!r}: {exc}") from exc

    connections = [
        _validated(RoomTransition, c, f"rooms.toml ({room_id})") for c in data.get("connections", [])
    ]
    enemy_id = data.get("enemy")
    return RoomState(
        room=room,
        name=data.get("name", ""),
        description=data.get("description", ""),
        items=[get_item(i) for i in data.get("items", [])],
        enemy=build_enemy(enemy_id) if enemy_id else None,
        connections=connections,
        actions=actions,
    )


def build_room_graph() -> RoomGraph:
    """A fresh world: every room, item and enemy in its starting state."""
    rooms = {}
    for room_id, data in load_all_rooms().items():
        state = _build_room(room_id, data)
        rooms[state.room] = state

    graph = RoomGraph(rooms=rooms)
    for state in graph.rooms.values():
        for connection in state.connections:
            if connection.to != Room.ESCAPE and connection.to not in graph.rooms:
                raise ContentError(f"{state.room.value} connects to undefined room {connection.to.value}")
    logger.debug("Built room graph with %d rooms", len(graph.rooms))
    return graph


def reachable_rooms(graph: RoomGraph, start: Room) -> set[Room]:
    """Rooms reachable from *start* by following connections."""
    seen = {start}
    frontier = [start]
    while frontier:
        for connection in graph.get_state(frontier.pop()).connections:
            if connection.to not in seen and connection.to in graph.rooms:
                seen.add(connection.to)
                frontier.append(connection.to)
    return seen
