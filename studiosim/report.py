from __future__ import annotations

from dataclasses import dataclass, field

from studiosim.metrics import (
    AchievementEvent,
    DaySnapshot,
    MetricsCollector,
    MinigameEvent,
    PurchaseEvent,
    UploadEvent,
)


@dataclass
class SimulationReport:
    """Container for simulation results and derived metrics."""

    strategy_description: str = ""
    outcome: str = ""
    days: int = 0
    premium: bool = False

    # Raw metrics
    snapshots: list[DaySnapshot] = field(default_factory=list)
    uploads: list[UploadEvent] = field(default_factory=list)
    purchases: list[PurchaseEvent] = field(default_factory=list)
    achievements: list[AchievementEvent] = field(default_factory=list)
    minigames: list[MinigameEvent] = field(default_factory=list)

    # Derived metrics
    monetized_day: int | None = None
    achievement_days: dict[str, int] = field(default_factory=dict)
    viral_uploads: int = 0
    mean_views_per_upload: float = 0.0
    uploads_per_day: float = 0.0
    minigame_success_rate: float = 0.0

    @property
    def final(self) -> DaySnapshot | None:
        return self.snapshots[-1] if self.snapshots else None

    def achievement_day(self, achievement_id: str) -> int | None:
        return self.achievement_days.get(achievement_id)

    def metric_series(self, metric: str) -> list[tuple[int, float]]:
        """Return (day, value) series for a snapshot field."""
        return [(s.day, getattr(s, metric)) for s in self.snapshots]


def build_report(
    collector: MetricsCollector,
    strategy_description: str,
    outcome: str,
    days: int,
    premium: bool = False,
) -> SimulationReport:
    """Build a SimulationReport from collected metrics."""
    monetized_day = next((s.day for s in collector.snapshots if s.is_monetized), None)

    achievement_days: dict[str, int] = {}
    for a in collector.achievements:
        achievement_days.setdefault(a.achievement_id, a.day)

    uploads = collector.uploads
    viral = sum(1 for u in uploads if u.viral)
    mean_views = sum(u.views for u in uploads) / len(uploads) if uploads else 0.0
    per_day = len(uploads) / days if days > 0 else 0.0

    games = collector.minigames
    completed = sum(1 for g in games if g.outcome == "complete")
    success_rate = completed / len(games) if games else 0.0

    return SimulationReport(
        strategy_description=strategy_description,
        outcome=outcome,
        days=days,
        premium=premium,
        snapshots=collector.snapshots,
        uploads=uploads,
        purchases=collector.purchases,
        achievements=collector.achievements,
        minigames=games,
        monetized_day=monetized_day,
        achievement_days=achievement_days,
        viral_uploads=viral,
        mean_views_per_upload=mean_views,
        uploads_per_day=per_day,
        minigame_success_rate=success_rate,
    )
