"""Tests for equipment module."""
import pytest

from studiosim.catalog import EQUIPMENT, EquipmentSlot
from studiosim.equipment import (
    available_upgrades,
    can_afford,
    next_upgrade,
    upgrade_equipment,
)
from studiosim.errors import InsufficientFunds, MaxLevelReached


def test_catalog_has_five_levels_per_slot():
    for slot in EquipmentSlot:
        definition = EQUIPMENT[slot]
        assert definition.max_level == 5
        assert [lvl.level for lvl in definition.levels] == [1, 2, 3, 4, 5]
        assert definition.level(1).cost == 0


def test_scenario_a_camera_upgrade(channel):
    channel.subscribers = 500
    channel.watch_hours = 500
    channel.money = 1000
    result = upgrade_equipment(channel, EquipmentSlot.CAMERA)

    assert channel.equipment.camera == 2
    assert channel.money == pytest.approx(950)
    assert result.old_level == 1
    assert result.new_level == 2
    assert result.cost == 50
    assert result.max_energy_delta == 0


def test_slot_by_name(channel):
    channel.money = 100
    upgrade_equipment(channel, "editing_software")
    assert channel.equipment.editing_software == 2


def test_insufficient_funds_leaves_channel_alone(channel):
    channel.money = 49.99
    with pytest.raises(InsufficientFunds):
        upgrade_equipment(channel, EquipmentSlot.CAMERA)
    assert channel.money == pytest.approx(49.99)
    assert channel.equipment.camera == 1


def test_max_level(channel):
    channel.money = 1_000_000
    channel.equipment.microphone = 5
    with pytest.raises(MaxLevelReached):
        upgrade_equipment(channel, EquipmentSlot.MICROPHONE)
    assert channel.money == 1_000_000


def test_max_level_checked_before_funds(channel):
    channel.equipment.camera = 5
    with pytest.raises(MaxLevelReached):
        upgrade_equipment(channel, EquipmentSlot.CAMERA)


def test_unknown_slot(channel):
    with pytest.raises(ValueError):
        upgrade_equipment(channel, "tripod")


class TestDecoration:
    def test_raises_max_energy_not_energy(self, channel):
        channel.money = 30
        result = upgrade_equipment(channel, EquipmentSlot.DECORATION)
        assert channel.max_energy == 110
        assert channel.energy == 100
        assert result.max_energy_delta == 10

    def test_adds_level_difference(self, channel):
        channel.money = 230
        upgrade_equipment(channel, EquipmentSlot.DECORATION)
        upgrade_equipment(channel, EquipmentSlot.DECORATION)
        assert channel.equipment.decoration == 3
        assert channel.max_energy == 120
        assert channel.money == 0

    def test_energy_within_cap(self, channel):
        channel.money = 30
        channel.energy = 150
        upgrade_equipment(channel, EquipmentSlot.DECORATION)
        assert channel.energy == 110


def test_next_upgrade_and_available(channel):
    assert next_upgrade(channel, EquipmentSlot.CAMERA).level == 2
    channel.equipment.camera = 5
    assert next_upgrade(channel, EquipmentSlot.CAMERA) is None
    assert EquipmentSlot.CAMERA not in available_upgrades(channel)
    assert len(available_upgrades(channel)) == 3


def test_can_afford(channel):
    channel.money = 30
    assert can_afford(channel, EquipmentSlot.DECORATION)
    assert not can_afford(channel, EquipmentSlot.CAMERA)
