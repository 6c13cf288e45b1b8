"""Tests for src/timeloop/content/loader.py against the shipped content files."""
from __future__ import annotations

from pathlib import Path

import pytest

from timeloop.content import loader
from timeloop.content.loader import (
    build_enemy,
    build_room_graph,
    get_food,
    get_item,
    get_key_item,
    get_weapon,
    load_all_enemies,
    load_all_food,
    load_all_weapons,
    load_diary,
    load_toml,
    reachable_rooms,
)
from timeloop.errors import ContentError
from timeloop.models.health import Health
from timeloop.models.item import KeyItem, KeyItemType, Weapon
from timeloop.models.location import Room


class TestItems:
    def test_weapons(self):
        weapons = load_all_weapons()
        assert len(weapons) == 8
        blaster = weapons["intruders_blaster"]
        assert (blaster.straight_damage.points, blaster.dodge_damage.points, blaster.speed) == (5, 3, 3)

    def test_food(self):
        assert load_all_food()["bread_roll"].heals_for.points == 5

    def test_every_key_item_type_defined(self):
        for key in KeyItemType:
            assert isinstance(get_key_item(key), KeyItem)

    def test_key_items_are_fresh_copies(self):
        diary = get_key_item(KeyItemType.CAPTAINS_DIARY)
        diary.page = 3
        assert get_key_item(KeyItemType.CAPTAINS_DIARY).page == 0

    def test_get_item_across_tables(self):
        assert isinstance(get_item("wrench"), Weapon)
        assert get_item("chocolate_bar").name == "Chocolate bar"

    def test_unknown_items(self):
        with pytest.raises(ContentError):
            get_weapon("lightsaber")
        with pytest.raises(ContentError):
            get_food("soup")
        with pytest.raises(ContentError):
            get_item("nothing")


class TestEnemies:
    def test_build_enemy(self):
        cook = build_enemy("cook")
        assert cook.health == Health(7)
        assert cook.max_health == Health(7)
        assert [i.id for i in cook.inventory] == ["standard_blaster"]

    def test_all_enemies_build(self):
        for enemy_id in load_all_enemies():
            assert build_enemy(enemy_id).health.points > 0

    def test_unknown_enemy(self):
        with pytest.raises(ContentError):
            build_enemy("stowaway")


class TestRoomGraph:
    def test_every_room_but_escape_defined(self):
        graph = build_room_graph()
        assert set(graph.rooms) == set(Room) - {Room.ESCAPE}

    def test_escape_pod_locked_at_start(self):
        graph = build_room_graph()
        assert reachable_rooms(graph, Room.CELLS) == set(Room) - {Room.ESCAPE, Room.ESCAPE_POD}

    def test_placements(self):
        graph = build_room_graph()
        assert graph.get_state(Room.MESS_HALL).enemy.id == "cook"
        assert graph.get_state(Room.ENGINE_ROOM).enemy.id == "mechanic"
        assert graph.get_state(Room.STRATEGY_ROOM).enemy.id == "skipper"
        assert [i.id for i in graph.get_state(Room.BRIDGE).items] == ["intruders_blaster"]

    def test_each_call_builds_a_fresh_world(self):
        first = build_room_graph()
        first.get_state(Room.KITCHEN).items.clear()
        first.get_state(Room.MESS_HALL).enemy = None
        second = build_room_graph()
        assert second.get_state(Room.KITCHEN).items
        assert second.get_state(Room.MESS_HALL).enemy is not None


class TestDiary:
    def test_pages(self):
        diary = load_diary()
        assert len(diary["pages"]) == 8
        assert diary["last_page"]["title"] == "There's no more pages"


class TestLoadToml:
    def test_missing_file(self, tmp_path):
        with pytest.raises(ContentError):
            load_toml(tmp_path / "nope.toml")

    def test_malformed_file(self, tmp_path: Path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[[rooms]\nid = ", encoding="utf-8")
        with pytest.raises(ContentError):
            load_toml(bad)

    def test_invalid_weapon_entry(self, tmp_path, monkeypatch):
        items = tmp_path / "items"
        items.mkdir()
        (items / "weapons.toml").write_text(
            '[[weapons]]\nid = "spoon"\nname = "Spoon"\nstraight_damage = -1\ndodge_damage = 0\n',
            encoding="utf-8",
        )
        monkeypatch.setattr(loader, "CONTENT_DIR", tmp_path)
        loader.load_all_weapons.cache_clear()
        try:
            with pytest.raises(ContentError):
                load_all_weapons()
        finally:
            loader.load_all_weapons.cache_clear()
