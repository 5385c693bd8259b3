from __future__ import annotations

import logging
import random

from studiosim.channel import Channel
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import AlreadyPlayedToday, InsufficientEnergy
from studiosim.minigames.base import (
    MinigameKind,
    MinigameSession,
    SessionPhase,
    can_play_today,
)
from studiosim.minigames.community import CommunitySession
from studiosim.minigames.stream import StreamSession
from studiosim.minigames.thumbnail import ThumbnailSession

logger = logging.getLogger(__name__)

SESSION_TYPES: dict[MinigameKind, type[MinigameSession]] = {
    MinigameKind.COMMUNITY: CommunitySession,
    MinigameKind.THUMBNAIL: ThumbnailSession,
    MinigameKind.STREAM: StreamSession,
}


def start_minigame(
    kind: MinigameKind | str,
    channel: Channel,
    rng: random.Random,
    config: StudioConfig = DEFAULT_CONFIG,
) -> MinigameSession:
    """Pay the energy cost, lock the minigame for today and open a session.

    The day lock is checked before energy. Both checks happen before the
    channel is touched.
    """
    kind = MinigameKind(kind)
    session_cls = SESSION_TYPES[kind]
    if not can_play_today(channel, kind):
        raise AlreadyPlayedToday(kind.value, channel.day)
    cost = session_cls.energy_cost(config)
    if channel.energy < cost:
        raise InsufficientEnergy(cost, channel.energy)

    channel.energy -= cost
    channel.last_played_day[kind.value] = channel.day
    logger.info("Started %s minigame on channel %s (day %d)", kind.value, channel.id, channel.day)
    return session_cls(channel.id, channel.day, rng, config)


__all__ = [
    "CommunitySession",
    "MinigameKind",
    "MinigameSession",
    "SESSION_TYPES",
    "SessionPhase",
    "StreamSession",
    "ThumbnailSession",
    "can_play_today",
    "start_minigame",
]
