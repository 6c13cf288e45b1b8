"""Hit point arithmetic for Health levels and Damage magnitudes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Callable

from pydantic import BeforeValidator


@dataclass(frozen=True, order=True)
class Damage:
    """A change in Health. Unsigned: it may be harm or healing depending on context."""

    points: int = 0

    def __post_init__(self) -> None:
        if self.points < 0:
            raise ValueError(f"Damage cannot be negative: {self.points}")

    def __str__(self) -> str:
        return str(self.points)


@dataclass(frozen=True, order=True)
class Health:
    """The health of the player or an enemy. Never negative."""

    points: int = 0

    def __post_init__(self) -> None:
        if self.points < 0:
            raise ValueError(f"Health cannot be negative: {self.points}")

    def is_zero(self) -> bool:
        return self.points == 0

    def heal_to_max(self, heal_by: Damage, max_health: Health) -> tuple[Health, Damage]:
        """Heal by *heal_by* without passing *max_health*.

        Returns (new_health, how much the health actually went up).
        """
        new_points = min(max_health.points, self.points + heal_by.points)
        increase = max(new_points - self.points, 0)
        return Health(self.points + increase), Damage(increase)

    def __sub__(self, other: Damage | Health) -> Health | Damage:
        if isinstance(other, Damage):
            return Health(max(self.points - other.points, 0))
        if isinstance(other, Health):
            # Only called with the pre-hit value on the left
            return Damage(self.points - other.points)
        return NotImplemented

    def __add__(self, other: Damage) -> Health:
        if isinstance(other, Damage):
            return Health(self.points + other.points)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.points)


def _coerce_points(cls: type) -> Callable[[Any], Any]:
    def coerce(value: Any) -> Any:
        # Content files and tests give plain ints
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return value
    return coerce


HealthField = Annotated[Health, BeforeValidator(_coerce_points(Health))]
DamageField = Annotated[Damage, BeforeValidator(_coerce_points(Damage))]
