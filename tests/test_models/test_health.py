"""Tests for src/timeloop/models/health.py."""
from __future__ import annotations

import pytest

from timeloop.models.health import Damage, Health


class TestHealthArithmetic:
    def test_damage_subtracts(self):
        assert Health(10) - Damage(3) == Health(7)

    def test_damage_saturates_at_zero(self):
        assert Health(2) - Damage(5) == Health(0)
        assert (Health(2) - Damage(5)).is_zero()

    def test_health_difference_is_damage(self):
        assert Health(10) - Health(4) == Damage(6)

    def test_negative_difference_rejected(self):
        with pytest.raises(ValueError):
            Health(4) - Health(10)

    def test_add_damage_is_unclamped(self):
        assert Health(9) + Damage(5) == Health(14)

    def test_str_is_plain_number(self):
        assert str(Health(7)) == "7"
        assert str(Damage(0)) == "0"

    @pytest.mark.parametrize("cls", [Health, Damage])
    def test_negative_values_rejected(self, cls):
        with pytest.raises(ValueError):
            cls(-1)


class TestHealToMax:
    def test_heals_full_amount_below_max(self):
        health, increase = Health(5).heal_to_max(Damage(3), Health(10))
        assert health == Health(8)
        assert increase == Damage(3)

    def test_clamps_at_max(self):
        health, increase = Health(5).heal_to_max(Damage(10), Health(10))
        assert health == Health(10)
        assert increase == Damage(5)

    def test_at_max_heals_nothing(self):
        health, increase = Health(10).heal_to_max(Damage(4), Health(10))
        assert health == Health(10)
        assert increase == Damage(0)

    def test_above_max_is_left_alone(self):
        health, increase = Health(12).heal_to_max(Damage(4), Health(10))
        assert health == Health(12)
        assert increase == Damage(0)
