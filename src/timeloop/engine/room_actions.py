"""One-off things the player can do in particular rooms."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from timeloop.cli.menu import Screen
from timeloop.content.loader import get_key_item, get_food
from timeloop.models.character import Player
from timeloop.models.item import KeyItem, KeyItemType
from timeloop.models.location import Room, RoomAction, RoomTransition

logger = logging.getLogger(__name__)

# The crew area's exit to the escape pod until the key card is found
ESCAPE_POD_PROMPT = "Escape Pod"

ESCAPE_POD_UNLOCKED_MESSAGE = (
    "You walk up to the door, the same as any other. This time, it detects the key card in your "
    "pocket and slides open. It clearly hasn't opened in scores and makes a grating sound. "
    "You would worry if there were anyone left alive."
)


@dataclass
class RoomActionResult:
    message: Optional[Screen] = None
    # Whether the action stays listed in the room afterwards
    show_again: bool = False


DESCRIPTIONS: dict[RoomAction, str] = {
    RoomAction.STRATEGY_ROOM_TAKE_MAPS: "Take the drive from the computer",
    RoomAction.ENGINE_ROOM_TAKE_KEYS: "Check out the cabinet in the corner",
    RoomAction.ESCAPE_POD_TAKE_OFF: "Take off",
    RoomAction.STORE_ROOM_FIND_CHOCOLATE: "Feel around on the shelves",
    RoomAction.BUNKS_GET_DIARY: "Look under the captain's pillow",
}


def describe(action: RoomAction) -> str:
    """Text shown for *action* in the player's option list."""
    return DESCRIPTIONS[action]


def has_key_item(player: Player, key: KeyItemType) -> bool:
    return any(isinstance(item, KeyItem) and item.key == key for item in player.inventory)


def _take_maps(player: Player) -> RoomActionResult:
    player.pick_up_item(get_key_item(KeyItemType.MAPS))
    return RoomActionResult(Screen(
        title="You take the drive",
        content="You take the drive, and read its description - 'Galactic Maps 2168 Edition'",
    ))


def _take_keys(player: Player) -> RoomActionResult:
    crew_area = player.room_graph.get_state(Room.CREW_AREA)
    for i, transition in enumerate(crew_area.connections):
        if transition.prompt_text == ESCAPE_POD_PROMPT:
            crew_area.connections[i] = RoomTransition(
                to=Room.ESCAPE_POD,
                message=ESCAPE_POD_UNLOCKED_MESSAGE,
            )
            logger.info("Escape pod door unlocked")
            break
    else:
        logger.warning("Crew area has no locked escape pod door to unlock")

    player.pick_up_item(get_key_item(KeyItemType.ESCAPE_POD_KEYS))
    return RoomActionResult(Screen(
        title="You look through the drawers",
        content=(
            "You search every drawer. You don't find anything interesting until you get to the "
            "second-last one, which has a key card in it. You flip it over and it is labelled 'escape pod'."
        ),
    ))


def _take_off(player: Player) -> RoomActionResult:
    if not has_key_item(player, KeyItemType.MAPS):
        return RoomActionResult(
            Screen(
                title="You try to launch, but there's an error.",
                content=(
                    "\"Maps out of date: pod cannot launch without in-date maps\". "
                    "You try to override the message but you can't figure it out."
                ),
            ),
            show_again=True,
        )

    player.room = Room.ESCAPE
    logger.info("Escape pod launched")
    return RoomActionResult(Screen(
        title="You plug in the maps and blast off",
        content=(
            "It's a bit anticlimactic at first but then the thrusters kick in "
            "and you feel yourself shuddering home."
        ),
    ))


def _find_chocolate(player: Player) -> RoomActionResult:
    player.pick_up_item(get_food("chocolate_bar"))
    return RoomActionResult(Screen(
        title="You find a chocolate bar",
        content=(
            "You run your hands along the dusty shelves. Behind a crate of spare fuses "
            "your fingers close around something wrapped in foil. Real chocolate, "
            "hidden away by someone who didn't want to share."
        ),
    ))


def _get_diary(player: Player) -> RoomActionResult:
    player.pick_up_item(get_key_item(KeyItemType.CAPTAINS_DIARY))
    return RoomActionResult(Screen(
        title="You find the captain's diary",
        content=(
            "Under the pillow of the only made bed is a battered paper notebook. "
            "The cover reads 'Property of the Skipper - hands off'."
        ),
    ))


_HANDLERS: dict[RoomAction, Callable[[Player], RoomActionResult]] = {
    RoomAction.STRATEGY_ROOM_TAKE_MAPS: _take_maps,
    RoomAction.ENGINE_ROOM_TAKE_KEYS: _take_keys,
    RoomAction.ESCAPE_POD_TAKE_OFF: _take_off,
    RoomAction.STORE_ROOM_FIND_CHOCOLATE: _find_chocolate,
    RoomAction.BUNKS_GET_DIARY: _get_diary,
}


def execute(action: RoomAction, player: Player) -> RoomActionResult:
    """Run *action* for *player* and report what to show and whether it stays available."""
    logger.debug("Running room action %s in %s", action.value, player.room.value)
    return _HANDLERS[action](player)
