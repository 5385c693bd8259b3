from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from studiosim.catalog import ACHIEVEMENTS, AchievementDef, MilestoneType, get_achievement
from studiosim.channel import Channel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AchievementReward:
    """Totals paid out by one ``grant_achievements`` call."""

    unlocked: tuple[str, ...] = ()
    money: float = 0.0
    max_energy: float = 0.0


def metric_value(channel: Channel, milestone_type: MilestoneType) -> float:
    """Current value of the channel metric an achievement tracks."""
    if milestone_type is MilestoneType.VIDEOS_UPLOADED:
        return channel.videos_uploaded
    return getattr(channel, milestone_type.value)


def is_reached(channel: Channel, achievement: AchievementDef) -> bool:
    return metric_value(channel, achievement.milestone_type) >= achievement.milestone_value


def evaluate_achievements(
    channel: Channel,
    catalog: Iterable[AchievementDef] = ACHIEVEMENTS,
) -> set[str]:
    """Ids of achievements reached but not yet unlocked. Does not mutate."""
    return {
        a.id
        for a in catalog
        if a.id not in channel.achievements and is_reached(channel, a)
    }


def grant_achievements(channel: Channel, ids: Iterable[str]) -> AchievementReward:
    """Unlock *ids* and pay their rewards.

    Reward money goes to ``money`` only (it is not earnings). Reward energy
    raises ``max_energy`` for good and tops up ``energy`` by the same
    amount. Already unlocked ids are skipped, so each reward is paid at
    most once.
    """
    unlocked: list[str] = []
    money = 0.0
    max_energy = 0.0
    for achievement_id in sorted(ids):
        if achievement_id in channel.achievements:
            continue
        achievement = get_achievement(achievement_id)
        if achievement is None:
            raise ValueError(f"Unknown achievement: {achievement_id!r}")

        channel.achievements.add(achievement_id)
        unlocked.append(achievement_id)
        if achievement.reward_money:
            channel.money = round(channel.money + achievement.reward_money, 2)
            money += achievement.reward_money
        if achievement.reward_energy:
            channel.max_energy += achievement.reward_energy
            channel.energy = min(channel.max_energy, channel.energy + achievement.reward_energy)
            max_energy += achievement.reward_energy
        logger.info("Channel %s unlocked achievement %r", channel.id, achievement.name)

    return AchievementReward(unlocked=tuple(unlocked), money=money, max_energy=max_energy)


def achievement_progress(
    channel: Channel, achievement: AchievementDef
) -> tuple[float, float, float]:
    """Return ``(current, target, percentage)`` with percentage capped at 100."""
    current = metric_value(channel, achievement.milestone_type)
    target = achievement.milestone_value
    if target <= 0:
        return current, target, 100.0
    return current, target, min(100.0, current / target * 100)
