from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

from studiosim.channel import Channel
from studiosim.definition import DEFAULT_CONFIG, StudioConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayReport:
    """What happened overnight."""

    day: int
    energy_gained: float
    views_gained: int
    subscribers_gained: int


def _jitter(rng: random.Random, config: StudioConfig) -> float:
    return rng.uniform(1 - config.daily_jitter, 1 + config.daily_jitter)


def advance_day(
    channel: Channel,
    rng: random.Random,
    config: StudioConfig = DEFAULT_CONFIG,
) -> DayReport:
    """Move the channel to the next day.

    Energy regenerates up to the cap and every existing video picks up
    organic views and subscribers. Channel totals grow by exactly the sum
    of the per-video gains.
    """
    channel.day += 1

    before = channel.energy
    channel.energy = min(channel.max_energy, channel.energy + config.energy_regen_per_day)

    total_views = 0
    total_subs = 0
    for video in channel.videos:
        daily_views = math.floor(video.views * config.daily_view_growth * _jitter(rng, config))
        daily_subs = math.floor(daily_views * config.daily_sub_rate * _jitter(rng, config))
        video.views += daily_views
        video.subscribers_gained += daily_subs
        total_views += daily_views
        total_subs += daily_subs

    channel.views += total_views
    channel.subscribers += total_subs

    report = DayReport(
        day=channel.day,
        energy_gained=max(0, channel.energy - before),
        views_gained=total_views,
        subscribers_gained=total_subs,
    )
    logger.info(
        "Channel %s advanced to day %d: +%d views, +%d subs",
        channel.id,
        channel.day,
        total_views,
        total_subs,
    )
    return report
