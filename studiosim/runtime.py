from __future__ import annotations

import logging
import random

from studiosim import achievement, day, economy, equipment, minigames, monetization
from studiosim.achievement import AchievementReward
from studiosim.catalog import ACHIEVEMENTS, EquipmentLevel, EquipmentSlot
from studiosim.channel import Channel, new_channel
from studiosim.day import DayReport
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.economy import UploadChoices, UploadOutcome
from studiosim.equipment import UpgradeResult
from studiosim.errors import SessionStateError
from studiosim.ledger import BoostGrant
from studiosim.minigames import MinigameKind, MinigameSession

logger = logging.getLogger(__name__)


class StudioRuntime:
    """Player-facing facade over one channel.

    Owns the random source and the active minigame session, and checks
    achievements after every action that can move a metric.
    """

    def __init__(
        self,
        channel: Channel | None = None,
        config: StudioConfig | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        config = config if config is not None else DEFAULT_CONFIG
        errors = config.validate()
        if errors:
            raise ValueError(
                "Invalid StudioConfig:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self.config = config
        self.channel = channel if channel is not None else new_channel("My Channel", config=config)
        self.rng = rng if rng is not None else random.Random(seed)
        self.session: MinigameSession | None = None
        self.last_reward = AchievementReward()

    # ── Player actions ───────────────────────────────────────────────

    def upload_video(
        self,
        title: str,
        genre: str | None,
        recording_method: str,
        sub_genre: str | None = None,
    ) -> UploadOutcome:
        choices = UploadChoices(
            title=title, genre=genre, recording_method=recording_method, sub_genre=sub_genre
        )
        outcome = economy.compute_upload(self.channel, choices, self.rng, self.config)
        economy.apply_upload(self.channel, outcome, self.config)
        self._check_achievements()
        return outcome

    def advance_day(self) -> DayReport:
        report = day.advance_day(self.channel, self.rng, self.config)
        self._check_achievements()
        return report

    def upgrade_equipment(self, slot: EquipmentSlot | str) -> UpgradeResult:
        result = equipment.upgrade_equipment(self.channel, slot)
        self._check_achievements()
        return result

    def activate_monetization(self) -> bool:
        return monetization.activate_monetization(self.channel, self.config)

    # ── Minigames ────────────────────────────────────────────────────

    def start_minigame(self, kind: MinigameKind | str) -> MinigameSession:
        """Open a new session and close the previous one.

        A previous session that already finished is finalized first, so its
        boost is kept. One still running is abandoned.
        """
        session = minigames.start_minigame(kind, self.channel, self.rng, self.config)
        self.close_minigame()
        self.session = session
        return session

    def _active_session(self) -> MinigameSession:
        if self.session is None:
            raise SessionStateError("No minigame in progress")
        return self.session

    def tick_minigame(self, seconds: float) -> MinigameSession:
        session = self._active_session()
        session.tick(seconds)
        return session

    def finish_minigame(self) -> BoostGrant | None:
        """Finalize the completed session into the boost ledger."""
        session = self._active_session()
        grant = session.finalize(self.channel)
        self.session = None
        return grant

    def abandon_minigame(self) -> None:
        session = self._active_session()
        session.abandon()
        session.finalize(self.channel)
        self.session = None

    def close_minigame(self) -> BoostGrant | None:
        """Settle the current session, if any, and clear it."""
        session = self.session
        if session is None:
            return None
        if not session.is_complete:
            session.abandon()
        grant = None if session.finalized else session.finalize(self.channel)
        self.session = None
        return grant

    # ── Queries ──────────────────────────────────────────────────────

    @property
    def upload_cost(self) -> float:
        return economy.upload_energy_cost(self.channel, self.config)

    def can_upload(self) -> bool:
        return self.channel.energy >= self.upload_cost

    def can_play(self, kind: MinigameKind | str) -> bool:
        kind = MinigameKind(kind)
        cost = minigames.SESSION_TYPES[kind].energy_cost(self.config)
        return minigames.can_play_today(self.channel, kind) and self.channel.energy >= cost

    def available_upgrades(self) -> dict[EquipmentSlot, EquipmentLevel]:
        return equipment.available_upgrades(self.channel)

    def affordable_upgrades(self) -> dict[EquipmentSlot, EquipmentLevel]:
        return {
            slot: level
            for slot, level in self.available_upgrades().items()
            if self.channel.money >= level.cost
        }

    def is_eligible_for_monetization(self) -> bool:
        return monetization.evaluate_monetization(self.channel, self.config)

    def achievement_progress(self) -> list[dict]:
        rows = []
        for a in ACHIEVEMENTS:
            current, target, pct = achievement.achievement_progress(self.channel, a)
            rows.append(
                {
                    "id": a.id,
                    "name": a.name,
                    "unlocked": a.id in self.channel.achievements,
                    "current": current,
                    "target": target,
                    "percentage": round(pct, 1),
                }
            )
        return rows

    # ── Private helpers ──────────────────────────────────────────────

    def _check_achievements(self) -> AchievementReward:
        """Grant achievements whose milestones are now met."""
        new_ids = achievement.evaluate_achievements(self.channel)
        self.last_reward = achievement.grant_achievements(self.channel, new_ids)
        return self.last_reward
