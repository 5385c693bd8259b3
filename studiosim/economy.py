from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from studiosim.catalog import (
    EQUIPMENT,
    GENRES,
    QUALITY_SLOTS,
    EquipmentSlot,
    get_recording_method,
)
from studiosim.channel import Channel, EquipmentLevels, Video
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import (
    InsufficientEnergy,
    InvalidGenre,
    InvalidRecordingMethod,
    InvalidSubGenre,
    InvalidTitle,
)
from studiosim.ledger import BoostKind
from studiosim.monetization import latch_monetization

logger = logging.getLogger(__name__)


def round2(value: float) -> float:
    return round(value, 2)


@dataclass(frozen=True)
class UploadChoices:
    """What the player picked in the upload form."""

    title: str
    genre: str | None
    recording_method: str
    sub_genre: str | None = None


@dataclass(frozen=True)
class ChannelDelta:
    """Changes an upload makes to its channel."""

    energy: float = 0.0
    subscribers: int = 0
    views: int = 0
    money: float = 0.0
    watch_hours: float = 0.0
    total_earnings: float = 0.0
    consumed_boosts: frozenset[BoostKind] = field(default_factory=frozenset)


@dataclass(frozen=True)
class UploadOutcome:
    video: Video
    delta: ChannelDelta
    energy_cost: float
    viral: bool = False


def upload_energy_cost(channel: Channel, config: StudioConfig = DEFAULT_CONFIG) -> float:
    return config.upload_energy_cost(channel.premium)


def quality_multiplier(equipment: EquipmentLevels) -> float:
    """Sum of the camera, microphone and editing stat boosts."""
    return sum(
        EQUIPMENT[slot].level(equipment.get(slot)).stat_boost for slot in QUALITY_SLOTS
    )


def validate_upload(
    channel: Channel,
    choices: UploadChoices,
    config: StudioConfig = DEFAULT_CONFIG,
    genres: dict[str, tuple[str, ...]] = GENRES,
) -> None:
    """Raise the first failing upload precondition, in a fixed order."""
    cost = upload_energy_cost(channel, config)
    if channel.energy < cost:
        raise InsufficientEnergy(cost, channel.energy)
    if not choices.title or not choices.title.strip():
        raise InvalidTitle()
    if not choices.genre or choices.genre not in genres:
        raise InvalidGenre(choices.genre)
    sub_genres = genres[choices.genre]
    if sub_genres:
        if not choices.sub_genre:
            raise InvalidSubGenre(choices.genre, None)
        if choices.sub_genre not in sub_genres:
            raise InvalidSubGenre(choices.genre, choices.sub_genre)
    if get_recording_method(choices.recording_method) is None:
        raise InvalidRecordingMethod(choices.recording_method)


def compute_upload(
    channel: Channel,
    choices: UploadChoices,
    rng: random.Random,
    config: StudioConfig = DEFAULT_CONFIG,
    genres: dict[str, tuple[str, ...]] = GENRES,
) -> UploadOutcome:
    """Work out the video an upload produces. Does not touch *channel*.

    Boosts are applied at different stages, so the step order matters:
    CTR boost on raw views, community boost on views and subscribers,
    watch hours and money from those, and the stream bonus last.
    """
    validate_upload(channel, choices, config, genres)

    cost = upload_energy_cost(channel, config)
    quality = quality_multiplier(channel.equipment)
    editing_boost = EQUIPMENT[EquipmentSlot.EDITING_SOFTWARE].level(
        channel.equipment.editing_software
    ).stat_boost
    method = get_recording_method(choices.recording_method)
    premium_views = config.premium_views_multiplier if channel.premium else 1.0
    boosts = channel.boosts
    consumed: set[BoostKind] = set()

    spread = channel.subscribers * config.views_per_subscriber + config.base_views_spread
    base_views = config.base_views + math.floor(rng.random() * spread)

    viral = rng.random() < config.viral_chance
    viral_multiplier = 1.0
    if viral:
        viral_multiplier = rng.uniform(config.viral_multiplier_min, config.viral_multiplier_max)
        logger.debug("Viral roll hit: x%.2f", viral_multiplier)

    views = math.floor(
        base_views * (1 + quality) * method.multiplier * premium_views * viral_multiplier
    )

    if boosts.thumbnail_ctr > 0:
        views = math.floor(views * (1 + boosts.thumbnail_ctr))
        consumed.add(BoostKind.THUMBNAIL_CTR)

    views = max(views, math.floor(rng.random() * config.min_views_spread) + config.min_views_floor)

    sub_rate = rng.uniform(config.sub_rate_min, config.sub_rate_max)
    subscribers = math.floor(views * sub_rate * (1 + quality * 0.5))

    if boosts.community > 0:
        factor = 1 + boosts.community * config.community_boost_per_point
        views = math.floor(views * factor)
        subscribers = math.floor(subscribers * factor)
        consumed.add(BoostKind.COMMUNITY)

    watch_hours = round2(views * config.watch_hours_per_view * (1 + editing_boost * 0.5))

    money = 0.0
    if channel.is_monetized:
        premium_earnings = config.premium_earnings_multiplier if channel.premium else 1.0
        money = round2(views / 1000 * config.money_per_1000_views * premium_earnings)

    if boosts.stream is not None:
        bonus = boosts.stream
        views = math.floor(views * bonus.views_multiplier)
        subscribers = math.floor(subscribers * bonus.subs_multiplier)
        if channel.is_monetized:
            money = round2(money * bonus.money_multiplier)
        consumed.add(BoostKind.STREAM)

    sub_genre = choices.sub_genre if genres[choices.genre] else None
    video = Video(
        id=f"{channel.id}-v{channel.videos_uploaded + 1}",
        title=choices.title.strip(),
        genre=choices.genre,
        sub_genre=sub_genre,
        recording_method=method.name,
        upload_day=channel.day,
        views=views,
        subscribers_gained=subscribers,
        money_gained=money,
        watch_hours_gained=watch_hours,
    )
    delta = ChannelDelta(
        energy=-cost,
        subscribers=subscribers,
        views=views,
        money=money,
        watch_hours=watch_hours,
        total_earnings=money,
        consumed_boosts=frozenset(consumed),
    )
    return UploadOutcome(video=video, delta=delta, energy_cost=cost, viral=viral)


def apply_upload(
    channel: Channel,
    outcome: UploadOutcome,
    config: StudioConfig = DEFAULT_CONFIG,
) -> bool:
    """Write *outcome* into *channel*. Returns True if monetization switched on."""
    delta = outcome.delta
    channel.energy = max(0, channel.energy + delta.energy)
    channel.videos.insert(0, outcome.video)
    channel.subscribers += delta.subscribers
    channel.views += delta.views
    channel.money = round2(channel.money + delta.money)
    channel.watch_hours = round2(channel.watch_hours + delta.watch_hours)
    channel.total_earnings = round2(channel.total_earnings + delta.total_earnings)
    for kind in delta.consumed_boosts:
        channel.boosts.clear(kind)

    logger.info(
        "Uploaded %r on channel %s: %d views, %d subs, $%.2f%s",
        outcome.video.title,
        channel.id,
        outcome.video.views,
        outcome.video.subscribers_gained,
        outcome.video.money_gained,
        " (viral)" if outcome.viral else "",
    )
    return latch_monetization(channel, config)
