from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from studiosim.channel import Channel
    from studiosim.economy import UploadOutcome
    from studiosim.equipment import UpgradeResult
    from studiosim.ledger import BoostGrant
    from studiosim.minigames import MinigameSession


@dataclass
class DaySnapshot:
    day: int
    subscribers: int
    views: int
    money: float
    watch_hours: float
    total_earnings: float
    energy: float
    max_energy: float
    videos: int
    is_monetized: bool


@dataclass
class UploadEvent:
    day: int
    video_id: str
    views: int
    subscribers: int
    money: float
    watch_hours: float
    viral: bool
    boosts_consumed: list[str] = field(default_factory=list)


@dataclass
class PurchaseEvent:
    day: int
    slot: str
    level: int
    cost: float
    money_after: float


@dataclass
class AchievementEvent:
    day: int
    achievement_id: str


@dataclass
class MinigameEvent:
    day: int
    kind: str
    outcome: str  # complete | failed | abandoned
    score: float = 0.0
    boost: dict[str, float] = field(default_factory=dict)


class MetricsCollector:
    """Collects per-day channel snapshots and action events."""

    def __init__(self) -> None:
        self.snapshots: list[DaySnapshot] = []
        self.uploads: list[UploadEvent] = []
        self.purchases: list[PurchaseEvent] = []
        self.achievements: list[AchievementEvent] = []
        self.minigames: list[MinigameEvent] = []
        self._achievements_seen: set[str] = set()

    def record_day(self, channel: Channel) -> None:
        self.snapshots.append(
            DaySnapshot(
                day=channel.day,
                subscribers=channel.subscribers,
                views=channel.views,
                money=channel.money,
                watch_hours=channel.watch_hours,
                total_earnings=channel.total_earnings,
                energy=channel.energy,
                max_energy=channel.max_energy,
                videos=channel.videos_uploaded,
                is_monetized=channel.is_monetized,
            )
        )

    def record_upload(self, channel: Channel, outcome: UploadOutcome) -> None:
        video = outcome.video
        self.uploads.append(
            UploadEvent(
                day=channel.day,
                video_id=video.id,
                views=video.views,
                subscribers=video.subscribers_gained,
                money=video.money_gained,
                watch_hours=video.watch_hours_gained,
                viral=outcome.viral,
                boosts_consumed=sorted(k.name.lower() for k in outcome.delta.consumed_boosts),
            )
        )

    def record_purchase(self, channel: Channel, result: UpgradeResult) -> None:
        self.purchases.append(
            PurchaseEvent(
                day=channel.day,
                slot=result.slot.value,
                level=result.new_level,
                cost=result.cost,
                money_after=channel.money,
            )
        )

    def record_minigame(
        self, channel: Channel, session: MinigameSession, grant: BoostGrant | None
    ) -> None:
        boost: dict[str, float] = {}
        if grant is not None:
            if grant.stream_bonus is not None:
                boost = grant.stream_bonus.to_dict()
            else:
                boost = {grant.kind.name.lower(): grant.amount}
        self.minigames.append(
            MinigameEvent(
                day=channel.day,
                kind=session.kind.value,
                outcome=session.phase.name.lower(),
                score=getattr(session, "score", getattr(session, "hype", 0.0)),
                boost=boost,
            )
        )

    def record_achievements(self, channel: Channel) -> None:
        """Log achievements unlocked since the previous call."""
        for achievement_id in sorted(channel.achievements - self._achievements_seen):
            self.achievements.append(AchievementEvent(day=channel.day, achievement_id=achievement_id))
            self._achievements_seen.add(achievement_id)
