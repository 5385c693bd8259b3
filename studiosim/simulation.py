from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable

from studiosim.channel import new_channel
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import ValidationError
from studiosim.metrics import MetricsCollector
from studiosim.report import SimulationReport, build_report
from studiosim.runtime import StudioRuntime
from studiosim.strategy import Strategy

logger = logging.getLogger(__name__)

# Upper bound on purchases per simulated day
MAX_PURCHASES_PER_DAY = 20


class Simulation:
    """Orchestrates a headless autoplay run of one channel."""

    def __init__(
        self,
        strategy: Strategy,
        days: int,
        config: StudioConfig | None = None,
        seed: int | None = None,
        premium: bool = False,
        channel_name: str = "Autoplay",
    ) -> None:
        if days < 1:
            raise ValueError("days must be at least 1")
        config = config if config is not None else DEFAULT_CONFIG
        self.strategy = strategy
        self.days = days
        self.premium = premium

        self.rng = random.Random(seed)
        channel = new_channel(channel_name, premium=premium, config=config, channel_id="sim")
        self.runtime = StudioRuntime(channel, config=config, rng=self.rng)
        self.collector = MetricsCollector()

    def run(self) -> SimulationReport:
        channel = self.runtime.channel
        for _ in range(self.days):
            self._play_day()
            self.collector.record_achievements(channel)
            self.collector.record_day(channel)
            self.runtime.advance_day()
            self.collector.record_achievements(channel)

        return build_report(
            collector=self.collector,
            strategy_description=self.strategy.describe(),
            outcome=f"Completed {self.days} days",
            days=self.days,
            premium=self.premium,
        )

    def _play_day(self) -> None:
        runtime = self.runtime
        channel = runtime.channel

        # 1. Claim monetization as soon as it is offered
        if not channel.is_monetized and runtime.is_eligible_for_monetization():
            runtime.activate_monetization()

        # 2. Minigames, so their boosts land on today's uploads
        skill = self.strategy.skill
        if skill is not None:
            for kind in self.strategy.minigames_to_play(runtime):
                if not runtime.can_play(kind):
                    continue
                session = runtime.start_minigame(kind)
                skill.play(session, self.rng)
                grant = runtime.finish_minigame()
                self.collector.record_minigame(channel, session, grant)

        # 3. Upgrades
        for _ in range(MAX_PURCHASES_PER_DAY):
            slots = self.strategy.decide_upgrades(runtime)
            if not slots:
                break
            for slot in slots:
                try:
                    result = runtime.upgrade_equipment(slot)
                except ValidationError as exc:
                    logger.debug("Strategy upgrade of %s rejected: %s", slot, exc)
                    continue
                self.collector.record_purchase(channel, result)

        # 4. Uploads until energy runs out
        while self.strategy.should_upload(runtime):
            choices = self.strategy.choose_upload(runtime)
            outcome = runtime.upload_video(
                title=choices.title,
                genre=choices.genre,
                recording_method=choices.recording_method,
                sub_genre=choices.sub_genre,
            )
            self.collector.record_upload(channel, outcome)


@dataclass
class MonteCarloSummary:
    """Aggregates over repeated runs with consecutive seeds."""

    runs: int
    days: int
    monetized_days: list[int] = field(default_factory=list)
    final_subscribers: list[int] = field(default_factory=list)
    final_earnings: list[float] = field(default_factory=list)
    achievement_days: dict[str, list[int]] = field(default_factory=dict)

    @property
    def monetized_rate(self) -> float:
        return len(self.monetized_days) / self.runs if self.runs else 0.0


def run_monte_carlo(
    strategy_factory: Callable[[], Strategy],
    days: int,
    runs: int,
    config: StudioConfig | None = None,
    seed: int | None = None,
    premium: bool = False,
) -> MonteCarloSummary:
    """Run *runs* simulations, each with a fresh strategy."""
    if runs < 1:
        raise ValueError("runs must be at least 1")
    summary = MonteCarloSummary(runs=runs, days=days)
    for i in range(runs):
        sim = Simulation(
            strategy=strategy_factory(),
            days=days,
            config=config,
            seed=(seed + i) if seed is not None else None,
            premium=premium,
        )
        report = sim.run()
        if report.monetized_day is not None:
            summary.monetized_days.append(report.monetized_day)
        final = report.final
        summary.final_subscribers.append(final.subscribers)
        summary.final_earnings.append(final.total_earnings)
        for aid, day in report.achievement_days.items():
            summary.achievement_days.setdefault(aid, []).append(day)
    return summary
