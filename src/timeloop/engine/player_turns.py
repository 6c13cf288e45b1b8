"""What the player does in a fight and between fights.

Every question goes through the Menu; every result is shown as a Screen.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from timeloop.cli.menu import Menu, OptionList, Screen
from timeloop.content.loader import load_diary
from timeloop.engine import room_actions
from timeloop.models.character import Player
from timeloop.models.combat import Action, ActionKind
from timeloop.models.item import Food, KeyItem, KeyItemType, Weapon
from timeloop.models.location import RoomTransition

logger = logging.getLogger(__name__)

ATTACK_DIRECTIONS = ("Attack Left", "Attack Straight", "Attack Right")

WIN_TITLE = "Freedom at long last"
WIN_CONTENT = (
    "Or maybe not so long - it's only been a few minutes, after all. "
    "You buckle in for the long ride and allow yourself to relax, finally."
)
WIN_FOOD_SUFFIX = " You won't get back to New Arnith for a cycle and a half, but at least you brought some food."


class PassiveActionKind(str, Enum):
    CHECK_STATE = "check_state"
    GO_TO_ROOM = "go_to_room"
    PICK_UP_ITEM = "pick_up_item"
    ROOM_ACTION = "room_action"
    USE_ITEM = "use_item"


@dataclass(frozen=True)
class PassiveAction:
    """Something the player does outside a battle.

    ``index`` points into the room's connections, items or actions, or into
    the player's inventory, depending on ``kind``.
    """

    kind: PassiveActionKind
    index: Optional[int] = None


# -- combat --

def choose_combat_action(player: Player, menu: Menu) -> Action:
    """Ask the player for this turn's combat action.

    Attacks get a second question for the direction.
    """
    actions = [Action.nothing(), Action.dodge_left(), Action.dodge_right()]
    options = ["Do nothing", "Dodge to the left", "Dodge to the right"]

    for i, item in enumerate(player.inventory):
        if isinstance(item, Food):
            actions.append(Action.eat_food(i))
            options.append(f"Eat your {item.name}")
        elif isinstance(item, Weapon):
            actions.append(Action.attack_straight(i))
            options.append(f"Attack with your {item.name}")

    choice = menu.show_option_list(OptionList(options, f"{player.remaining_time()} - What do you do?"))
    action = actions[choice]
    if action.kind != ActionKind.ATTACK_STRAIGHT:
        return action

    direction = menu.show_option_list(OptionList(ATTACK_DIRECTIONS, "Which way do you attack?"))
    return (Action.attack_left, Action.attack_straight, Action.attack_right)[direction](action.index)


# -- screens --

def transition_name(player: Player, transition: RoomTransition) -> str:
    return transition.prompt_text or player.room_graph.get_name(transition.to)


def print_room(player: Player, menu: Menu) -> None:
    state = player.get_room_state()
    menu.show_screen(Screen(title=f"You are in the {state.name}.", content=state.description))


def print_room_transition(player: Player, transition: RoomTransition, menu: Menu) -> None:
    destination = player.room_graph.get_state(transition.to)
    menu.show_screen(Screen(
        title=f"You go to the {transition_name(player, transition)}",
        content=f"{transition.message}\nYou are now in the {destination.name} - {destination.description}",
    ))


def print_state(player: Player, menu: Menu) -> None:
    state = player.get_room_state()
    items = "".join(f"• {item.name} - {item.description}\n" for item in player.inventory)
    menu.show_screen(Screen(
        title="You take a moment to rest and check your body for injuries",
        content=(
            f"You are in the {state.name} - {state.description}\n"
            f"You are at {player.health}/{player.max_health} HP\n"
            f"You have:\n{items}• {player.remaining_time()} to get off the ship\n"
        ),
    ))


def show_win_screen(player: Player, menu: Menu) -> None:
    content = WIN_CONTENT
    if any(isinstance(item, Food) for item in player.inventory):
        content += WIN_FOOD_SUFFIX
    menu.show_screen(Screen(title=WIN_TITLE, content=content))


# -- passive actions --

def choose_passive_action(player: Player, menu: Menu) -> PassiveAction:
    state = player.get_room_state()
    actions = [PassiveAction(PassiveActionKind.CHECK_STATE)]
    options = ["Check how you're doing"]

    for i, connection in enumerate(state.connections):
        actions.append(PassiveAction(PassiveActionKind.GO_TO_ROOM, i))
        options.append(f"Go to the {transition_name(player, connection)}")

    for i, item in enumerate(state.items):
        actions.append(PassiveAction(PassiveActionKind.PICK_UP_ITEM, i))
        options.append(f"Pick up the {item.name} - {item.description}")

    for i, room_action in enumerate(state.actions):
        actions.append(PassiveAction(PassiveActionKind.ROOM_ACTION, i))
        options.append(room_actions.describe(room_action))

    for i, item in enumerate(player.inventory):
        if isinstance(item, Food):
            actions.append(PassiveAction(PassiveActionKind.USE_ITEM, i))
            options.append(f"Eat your {item.name}")
        elif isinstance(item, KeyItem) and item.key == KeyItemType.CAPTAINS_DIARY:
            actions.append(PassiveAction(PassiveActionKind.USE_ITEM, i))
            options.append("Read the captain's diary")

    choice = menu.show_option_list(OptionList(options, f"{player.remaining_time()} - What do you do?"))
    return actions[choice]


def take_passive_action(player: Player, menu: Menu) -> None:
    """Spend one turn of the loop on an action chosen by the player."""
    player.remaining_turns -= 1
    action = choose_passive_action(player, menu)
    logger.debug("Passive action %s (%s) in %s", action.kind.value, action.index, player.room.value)
    state = player.get_room_state()

    if action.kind == PassiveActionKind.CHECK_STATE:
        print_state(player, menu)
    elif action.kind == PassiveActionKind.GO_TO_ROOM:
        transition = state.connections[action.index]
        print_room_transition(player, transition, menu)
        player.room = transition.to
        logger.info("Moved to %s", player.room.value)
    elif action.kind == PassiveActionKind.PICK_UP_ITEM:
        player.pick_up_item(state.items.pop(action.index))
    elif action.kind == PassiveActionKind.ROOM_ACTION:
        # Taken out while it runs; put back only if it should stay listed
        room_action = state.actions.pop(action.index)
        result = room_actions.execute(room_action, player)
        if result.message is not None:
            menu.show_screen(result.message)
        if result.show_again:
            state.actions.insert(action.index, room_action)
    elif action.kind == PassiveActionKind.USE_ITEM:
        use_item(player, menu, action.index)


def use_item(player: Player, menu: Menu, index: int) -> None:
    """Eat a food or read the next page of the diary."""
    item = player.inventory[index]

    if isinstance(item, Food):
        before = player.health
        player.health, _ = player.health.heal_to_max(item.heals_for, player.max_health)
        menu.show_screen(Screen(
            title=f"You ate your {item.name}",
            content=(
                f"You are healed by {player.health - before} HP.\n"
                f"You are now at {player.health}/{player.max_health} HP."
            ),
        ))
        del player.inventory[index]
        return

    if isinstance(item, KeyItem) and item.key == KeyItemType.CAPTAINS_DIARY:
        diary = load_diary()
        pages = diary["pages"]
        if item.page < len(pages):
            page = pages[item.page]
            item.page += 1
        else:
            page = diary["last_page"]
        menu.show_screen(Screen(title=page["title"], content=page["content"]))
        return

    raise ValueError(f"{item.name} can't be used outside of combat")
