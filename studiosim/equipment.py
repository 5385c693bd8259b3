from __future__ import annotations

import logging
from dataclasses import dataclass

from studiosim.catalog import EQUIPMENT, EquipmentLevel, EquipmentSlot
from studiosim.channel import Channel
from studiosim.errors import InsufficientFunds, MaxLevelReached

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpgradeResult:
    slot: EquipmentSlot
    old_level: int
    new_level: int
    cost: float
    max_energy_delta: float = 0.0


def next_upgrade(channel: Channel, slot: EquipmentSlot) -> EquipmentLevel | None:
    """The level the slot would be upgraded to, or None at max level."""
    return EQUIPMENT[slot].next_level(channel.equipment.get(slot))


def available_upgrades(channel: Channel) -> dict[EquipmentSlot, EquipmentLevel]:
    """Next level for every slot that is not maxed out."""
    result = {}
    for slot in EquipmentSlot:
        nxt = next_upgrade(channel, slot)
        if nxt is not None:
            result[slot] = nxt
    return result


def can_afford(channel: Channel, slot: EquipmentSlot) -> bool:
    nxt = next_upgrade(channel, slot)
    return nxt is not None and channel.money >= nxt.cost


def upgrade_equipment(channel: Channel, slot: EquipmentSlot | str) -> UpgradeResult:
    """Buy the next level of *slot*.

    Decoration boosts are flat max energy, so the difference between the
    two levels goes into ``max_energy`` and current energy is clamped to it.
    """
    slot = EquipmentSlot(slot)
    definition = EQUIPMENT[slot]
    current = channel.equipment.get(slot)
    nxt = definition.next_level(current)
    if nxt is None:
        raise MaxLevelReached(slot.value)
    if channel.money < nxt.cost:
        raise InsufficientFunds(nxt.cost, channel.money)

    channel.money = round(channel.money - nxt.cost, 2)
    channel.equipment.set(slot, nxt.level)

    energy_delta = 0.0
    if slot is EquipmentSlot.DECORATION:
        energy_delta = nxt.stat_boost - definition.level(current).stat_boost
        channel.max_energy += energy_delta
        channel.energy = min(channel.energy, channel.max_energy)

    logger.info(
        "Channel %s upgraded %s to level %d for $%.2f",
        channel.id,
        slot.value,
        nxt.level,
        nxt.cost,
    )
    return UpgradeResult(
        slot=slot,
        old_level=current,
        new_level=nxt.level,
        cost=nxt.cost,
        max_energy_delta=energy_delta,
    )
