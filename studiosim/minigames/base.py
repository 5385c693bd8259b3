from __future__ import annotations

import logging
import random
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any, ClassVar

from studiosim.channel import Channel
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import SessionStateError
from studiosim.ledger import BoostGrant

logger = logging.getLogger(__name__)


class MinigameKind(str, Enum):
    COMMUNITY = "community"
    THUMBNAIL = "thumbnail"
    STREAM = "stream"


class SessionPhase(Enum):
    COUNTDOWN = auto()
    ACTIVE = auto()
    COMPLETE = auto()  # finished normally, a boost will be granted
    FAILED = auto()  # finished without a boost
    ABANDONED = auto()  # left early, energy is not refunded


TERMINAL_PHASES = frozenset(
    {SessionPhase.COMPLETE, SessionPhase.FAILED, SessionPhase.ABANDONED}
)


def can_play_today(channel: Channel, kind: MinigameKind | str) -> bool:
    """Each minigame can be started once per simulated day."""
    return channel.last_played_day.get(MinigameKind(kind).value) != channel.day


class MinigameSession(ABC):
    """One play-through of a minigame.

    Sessions are created by ``start_minigame`` after the energy cost and
    day lock have been booked on the channel. They are driven with
    ``tick(seconds)`` plus kind-specific inputs and, once complete, write
    their boost into the channel with ``finalize``.

    Time is processed in whole seconds; fractions carry over between ticks.
    """

    kind: ClassVar[MinigameKind]
    energy_cost_field: ClassVar[str]

    def __init__(
        self,
        channel_id: str,
        day: int,
        rng: random.Random,
        config: StudioConfig = DEFAULT_CONFIG,
    ) -> None:
        self.channel_id = channel_id
        self.day = day
        self.rng = rng
        self.config = config
        self.phase = SessionPhase.ACTIVE
        self.seconds_elapsed = 0
        self._carry = 0.0
        self._finalized = False

    @classmethod
    def energy_cost(cls, config: StudioConfig = DEFAULT_CONFIG) -> float:
        return getattr(config, cls.energy_cost_field)

    # ── State ────────────────────────────────────────────────────────

    @property
    def is_complete(self) -> bool:
        return self.phase in TERMINAL_PHASES

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _require_active(self) -> None:
        if self.phase is not SessionPhase.ACTIVE:
            raise SessionStateError(
                f"{self.kind.value} session is {self.phase.name.lower()}, not active"
            )

    # ── Driving ──────────────────────────────────────────────────────

    def tick(self, seconds: float) -> None:
        """Advance the session clock by *seconds*."""
        if seconds < 0:
            raise ValueError("Cannot tick backwards")
        if self.is_complete:
            raise SessionStateError(f"{self.kind.value} session is already over")
        self._carry += seconds
        while self._carry >= 1 and not self.is_complete:
            self._carry -= 1
            self.seconds_elapsed += 1
            self._step()

    def _step(self) -> None:
        """Process one second of game time. Untimed games do nothing."""

    def abandon(self) -> None:
        if self.is_complete:
            raise SessionStateError(f"{self.kind.value} session is already over")
        self.phase = SessionPhase.ABANDONED
        logger.info("Abandoned %s minigame on channel %s", self.kind.value, self.channel_id)

    # ── Completion ───────────────────────────────────────────────────

    @abstractmethod
    def _grant(self) -> BoostGrant | None:
        """The boost earned by a completed session."""

    def preview_grant(self) -> BoostGrant | None:
        if self.phase is not SessionPhase.COMPLETE:
            return None
        return self._grant()

    def finalize(self, channel: Channel) -> BoostGrant | None:
        """Write the earned boost into *channel*'s ledger.

        Failed and abandoned sessions finalize to ``None`` without touching
        the channel. Finalizing twice is an error.
        """
        if not self.is_complete:
            raise SessionStateError(f"{self.kind.value} session is still running")
        if self._finalized:
            raise SessionStateError(f"{self.kind.value} session was already finalized")
        if channel.id != self.channel_id:
            raise SessionStateError(
                f"Session belongs to channel {self.channel_id}, not {channel.id}"
            )

        self._finalized = True
        grant = self.preview_grant()
        if grant is not None:
            channel.boosts.apply(grant)
        logger.info(
            "Finished %s minigame on channel %s: %s",
            self.kind.value,
            channel.id,
            self.phase.name.lower(),
        )
        return grant

    @abstractmethod
    def snapshot(self) -> dict[str, Any]:
        """Serializable view of the session for UIs and tool results."""

    def _base_snapshot(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "phase": self.phase.name.lower(),
            "seconds_elapsed": self.seconds_elapsed,
            "finalized": self._finalized,
        }
