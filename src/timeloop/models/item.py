from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from timeloop.models.health import DamageField


class ItemKind(str, Enum):
    WEAPON = "weapon"
    FOOD = "food"
    KEY = "key"


class KeyItemType(str, Enum):
    MAPS = "maps"
    ESCAPE_POD_KEYS = "escape_pod_keys"
    CAPTAINS_DIARY = "captains_diary"


class Weapon(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["weapon"] = "weapon"
    id: str = ""
    name: str
    description: str = ""
    straight_damage: DamageField
    dodge_damage: DamageField
    speed: int = Field(default=3, ge=0)


class Food(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["food"] = "food"
    id: str = ""
    name: str
    description: str = ""
    heals_for: DamageField


class KeyItem(BaseModel):
    """A story item. Only usable outside of combat, if at all."""

    kind: Literal["key"] = "key"
    id: str = ""
    key: KeyItemType
    name: str
    description: str = ""
    # Captain's diary only: the next page to read
    page: int = 0


Item = Annotated[Union[Weapon, Food, KeyItem], Field(discriminator="kind")]