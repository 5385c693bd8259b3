from __future__ import annotations

import logging

from studiosim.channel import Channel
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import NotEligible

logger = logging.getLogger(__name__)


def evaluate_monetization(channel: Channel, config: StudioConfig = DEFAULT_CONFIG) -> bool:
    """Whether the channel meets the subscriber and watch-hour requirements."""
    return (
        channel.subscribers >= config.monetization_subscribers
        and channel.watch_hours >= config.monetization_watch_hours
    )


def latch_monetization(channel: Channel, config: StudioConfig = DEFAULT_CONFIG) -> bool:
    """Turn monetization on if eligible. Returns True only on the transition.

    The flag is never switched back off.
    """
    if channel.is_monetized or not evaluate_monetization(channel, config):
        return False
    channel.is_monetized = True
    logger.info("Channel %s is now monetized (day %d)", channel.id, channel.day)
    return True


def activate_monetization(channel: Channel, config: StudioConfig = DEFAULT_CONFIG) -> bool:
    """Explicit player request to enable monetization."""
    if channel.is_monetized:
        return False
    if not evaluate_monetization(channel, config):
        raise NotEligible(
            f"Monetization requires {config.monetization_subscribers:g} subscribers and "
            f"{config.monetization_watch_hours:g} watch hours "
            f"(have {channel.subscribers} and {channel.watch_hours:g})"
        )
    return latch_monetization(channel, config)
