from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any


@dataclass
class StudioConfig:
    """Every tunable number of the simulation."""

    name: str = "Studio Simulator"

    # Energy
    initial_max_energy: float = 100
    energy_per_video: float = 25
    energy_regen_per_day: float = 50

    # Premium benefits
    premium_energy_discount: float = 0.2
    premium_views_multiplier: float = 1.2
    premium_earnings_multiplier: float = 1.5

    # Upload outcome
    base_views: int = 50
    base_views_spread: float = 100
    views_per_subscriber: float = 0.1
    viral_chance: float = 0.05
    viral_multiplier_min: float = 2.0
    viral_multiplier_max: float = 5.0
    min_views_floor: int = 10
    min_views_spread: int = 50
    sub_rate_min: float = 0.005
    sub_rate_max: float = 0.015
    community_boost_per_point: float = 0.001
    watch_hours_per_view: float = 0.05
    money_per_1000_views: float = 1.0

    # Organic growth on day advance
    daily_view_growth: float = 0.05
    daily_sub_rate: float = 0.01
    daily_jitter: float = 0.25

    # Monetization
    monetization_subscribers: float = 1000
    monetization_watch_hours: float = 1000

    # Channel slots
    max_channels: int = 3
    max_channels_premium: int = 4

    # Community responder
    community_energy_cost: float = 10
    community_rounds: int = 5
    community_max_points: int = 25

    # Thumbnail optimizer
    thumbnail_energy_cost: float = 15
    thumbnail_duration: int = 45
    thumbnail_max_points: int = 50
    thumbnail_max_ctr_boost: float = 0.05
    thumbnail_reel_size: int = 5
    thumbnail_reel_interval: int = 3

    # Streamer sensation
    stream_energy_cost: float = 20
    stream_countdown: int = 3
    stream_duration: int = 60
    hype_max: float = 100
    hype_initial: float = 50
    hype_fail_threshold: float = 25
    hype_decay_per_second: float = 1
    prompt_spawn_min: float = 5
    prompt_spawn_max: float = 10
    stream_max_views_multiplier: float = 1.20
    stream_max_subs_multiplier: float = 1.15
    stream_max_money_multiplier: float = 1.10

    def upload_energy_cost(self, premium: bool) -> float:
        if premium:
            return self.energy_per_video * (1 - self.premium_energy_discount)
        return self.energy_per_video

    def max_channel_slots(self, premium: bool) -> int:
        return self.max_channels_premium if premium else self.max_channels

    def validate(self) -> list[str]:
        """Check for inconsistent settings. Returns list of error messages."""
        errors: list[str] = []

        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                if value < 0:
                    errors.append(f"{f.name} must be non-negative, got {value!r}")

        if not 0.0 <= self.viral_chance <= 1.0:
            errors.append(f"viral_chance must be within [0, 1], got {self.viral_chance!r}")
        if not 0.0 <= self.premium_energy_discount < 1.0:
            errors.append(
                f"premium_energy_discount must be within [0, 1), got {self.premium_energy_discount!r}"
            )

        ranges = [
            ("viral_multiplier_min", "viral_multiplier_max"),
            ("sub_rate_min", "sub_rate_max"),
            ("prompt_spawn_min", "prompt_spawn_max"),
        ]
        for low, high in ranges:
            if getattr(self, low) > getattr(self, high):
                errors.append(f"{low} must not exceed {high}")

        if self.initial_max_energy <= 0:
            errors.append("initial_max_energy must be positive")
        if self.energy_per_video <= 0:
            errors.append("energy_per_video must be positive")
        if self.community_rounds < 1:
            errors.append("community_rounds must be at least 1")
        if self.thumbnail_max_points <= 0:
            errors.append("thumbnail_max_points must be positive")
        if self.thumbnail_reel_interval < 1:
            errors.append("thumbnail_reel_interval must be at least 1")
        if self.stream_duration < 1:
            errors.append("stream_duration must be at least 1")
        if not self.hype_fail_threshold <= self.hype_initial <= self.hype_max:
            errors.append("hype_initial must lie between hype_fail_threshold and hype_max")
        if self.hype_max <= 0:
            errors.append("hype_max must be positive")
        if self.max_channels_premium < self.max_channels:
            errors.append("max_channels_premium must not be lower than max_channels")

        return errors

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StudioConfig:
        """Build a config from defaults overridden by *data*."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**data)


DEFAULT_CONFIG = StudioConfig()
