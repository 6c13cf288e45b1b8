"""Shared fixtures for the timeloop test suite."""
from __future__ import annotations

from collections import deque
from typing import Iterable, Optional

import pytest

from timeloop.cli.menu import Menu, OptionList, Screen
from timeloop.models.character import Player
from timeloop.models.enemy import Enemy
from timeloop.models.health import Health
from timeloop.models.item import Food, Weapon
from timeloop.models.location import Room, RoomGraph, RoomState


class MockMenu(Menu):
    """Answers option lists from a script and records everything shown."""

    def __init__(self, choices: Iterable[int] = ()):
        self.choices = deque(choices)
        self.lists: list[OptionList] = []
        self.screens: list[Screen] = []

    def show_option_list(self, option_list: OptionList) -> int:
        self.lists.append(option_list)
        return self.choices.popleft()

    def show_screen(self, screen: Screen) -> None:
        self.screens.append(screen)

    @property
    def last_screen(self) -> Optional[Screen]:
        return self.screens[-1] if self.screens else None

    @property
    def last_list(self) -> Optional[OptionList]:
        return self.lists[-1] if self.lists else None


def make_weapon(straight: int = 5, dodge: int = 3, speed: int = 3, name: str = "Blaster") -> Weapon:
    return Weapon(name=name, description=f"A {name.lower()}", straight_damage=straight, dodge_damage=dodge, speed=speed)


def make_food(heals: int = 5, name: str = "Bread roll") -> Food:
    return Food(name=name, description=f"A {name.lower()}", heals_for=heals)


@pytest.fixture
def mock_menu() -> MockMenu:
    return MockMenu()


@pytest.fixture
def player_blaster() -> Weapon:
    return make_weapon(straight=5, dodge=3, speed=3, name="Intruders Blaster")


@pytest.fixture
def enemy_blaster() -> Weapon:
    return make_weapon(straight=5, dodge=2, speed=4, name="Standard Issue Blaster")


@pytest.fixture
def bare_graph() -> RoomGraph:
    return RoomGraph(rooms={
        Room.CELLS: RoomState(room=Room.CELLS, name="Cells", description="A cell."),
    })


@pytest.fixture
def player(bare_graph, player_blaster) -> Player:
    return Player(
        inventory=[player_blaster],
        health=Health(10),
        max_health=Health(10),
        room_graph=bare_graph,
    )


@pytest.fixture
def cook(enemy_blaster) -> Enemy:
    return Enemy(
        id="cook",
        name="Cook",
        description="ship's cook",
        inventory=[enemy_blaster],
        health=Health(7),
        max_health=Health(7),
    )
