from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from studiosim.catalog import EQUIPMENT, QUALITY_SLOTS, EquipmentSlot, StreamPrompt, StreamPromptType
from studiosim.economy import UploadChoices
from studiosim.minigames import (
    CommunitySession,
    MinigameKind,
    MinigameSession,
    StreamSession,
    ThumbnailSession,
)

if TYPE_CHECKING:
    from studiosim.runtime import StudioRuntime

# Decoration is scored as if 10 extra max energy were worth one quality point
DECORATION_VALUE_PER_ENERGY = 0.001


@dataclass
class SkillProfile:
    """Scripted minigame play for strategies.

    ``accuracy`` is the chance of picking the best community reply, the
    best thumbnail component on the reel, or the right stream reaction.
    ``reaction_seconds`` is how long a stream prompt shows before it is
    answered.
    """

    games: tuple[MinigameKind, ...] = (
        MinigameKind.COMMUNITY,
        MinigameKind.THUMBNAIL,
        MinigameKind.STREAM,
    )
    accuracy: float = 0.9
    reaction_seconds: int = 2

    def play(self, session: MinigameSession, rng: random.Random) -> None:
        """Drive *session* until it is over."""
        if isinstance(session, CommunitySession):
            self._play_community(session, rng)
        elif isinstance(session, ThumbnailSession):
            self._play_thumbnail(session, rng)
        elif isinstance(session, StreamSession):
            self._play_stream(session, rng)
        else:
            raise TypeError(f"Don't know how to play {type(session).__name__}")

    def _skilled(self, rng: random.Random) -> bool:
        return rng.random() < self.accuracy

    def _play_community(self, session: CommunitySession, rng: random.Random) -> None:
        while not session.is_complete:
            options = session.current_comment.options
            if self._skilled(rng):
                index = max(range(len(options)), key=lambda i: options[i].points)
            else:
                index = int(rng.random() * len(options))
            session.respond(index)

    def _play_thumbnail(self, session: ThumbnailSession, rng: random.Random) -> None:
        interval = session.config.thumbnail_reel_interval
        while not session.is_complete:
            if self._skilled(rng):
                best = None
                best_gain = 0
                for component in session.reel:
                    old = session.selected[component.component_type]
                    gain = component.points - (old.points if old else 0)
                    if gain > best_gain:
                        best, best_gain = component, gain
                if best is not None:
                    session.select(best.id)
            session.tick(interval)

    def _play_stream(self, session: StreamSession, rng: random.Random) -> None:
        missed = -1
        while not session.is_complete:
            prompt = session.current_prompt
            answered = session.successful_interactions + session.failed_interactions
            ready = (
                prompt is not None
                and answered != missed
                and prompt.duration_seconds - session.prompt_time_left >= self.reaction_seconds
            )
            if ready:
                if self._skilled(rng):
                    session.react(_right_answer(prompt))
                    continue
                if prompt.type is not StreamPromptType.QUICK_CLICK:
                    session.react(_wrong_answer(prompt))
                    continue
                # a missed click is left to expire
                missed = answered
            session.tick(1)


def _right_answer(prompt: StreamPrompt) -> str | None:
    if prompt.type is StreamPromptType.KEYWORD_TYPE:
        return prompt.keyword
    if prompt.type is StreamPromptType.EMOJI_SELECT:
        return prompt.correct_emoji
    return None


def _wrong_answer(prompt: StreamPrompt) -> str:
    if prompt.type is StreamPromptType.EMOJI_SELECT:
        return next(e for e in prompt.emojis if e != prompt.correct_emoji)
    # a typo
    return prompt.keyword[:-1]


class Strategy(ABC):
    """Base class for autoplay strategies."""

    def __init__(
        self,
        skill: SkillProfile | None = None,
        genre: str = "Gaming",
        sub_genre: str | None = "Minecraft",
        recording_method: str = "Professional (High Quality)",
    ) -> None:
        self.skill = skill
        self.genre = genre
        self.sub_genre = sub_genre
        self.recording_method = recording_method

    @abstractmethod
    def decide_upgrades(self, runtime: StudioRuntime) -> list[EquipmentSlot]:
        """Return ordered list of slots to upgrade now."""
        ...

    def minigames_to_play(self, runtime: StudioRuntime) -> list[MinigameKind]:
        if self.skill is None:
            return []
        return [k for k in self.skill.games if runtime.can_play(k)]

    def should_upload(self, runtime: StudioRuntime) -> bool:
        return runtime.can_upload()

    def choose_upload(self, runtime: StudioRuntime) -> UploadChoices:
        channel = runtime.channel
        return UploadChoices(
            title=f"Day {channel.day} upload #{channel.videos_uploaded + 1}",
            genre=self.genre,
            sub_genre=self.sub_genre,
            recording_method=self.recording_method,
        )

    @abstractmethod
    def describe(self) -> str: ...

    def _describe_skill(self, name: str) -> str:
        if self.skill is None:
            return name
        games = ", ".join(k.value for k in self.skill.games)
        return f"{name} (minigames: {games} @ {self.skill.accuracy:.0%})"


def upgrade_value(runtime: StudioRuntime, slot: EquipmentSlot) -> float:
    """Boost gained by the next level of *slot*, in quality-multiplier units."""
    definition = EQUIPMENT[slot]
    current = runtime.channel.equipment.get(slot)
    nxt = definition.next_level(current)
    if nxt is None:
        return 0.0
    gain = nxt.stat_boost - definition.level(current).stat_boost
    if slot in QUALITY_SLOTS:
        return gain
    return gain * DECORATION_VALUE_PER_ENERGY


class GreedyUploader(Strategy):
    """Upload whenever energy allows and buy the cheapest affordable upgrade."""

    def decide_upgrades(self, runtime: StudioRuntime) -> list[EquipmentSlot]:
        affordable = runtime.affordable_upgrades()
        if not affordable:
            return []
        return [min(affordable, key=lambda s: affordable[s].cost)]

    def describe(self) -> str:
        return self._describe_skill("GreedyUploader")


class SaveForBest(Strategy):
    """Save for the upgrade with the best boost per dollar, then buy it."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._saving_for: EquipmentSlot | None = None

    def decide_upgrades(self, runtime: StudioRuntime) -> list[EquipmentSlot]:
        if self._saving_for is None:
            available = runtime.available_upgrades()
            if not available:
                return []
            self._saving_for = max(
                available,
                key=lambda s: upgrade_value(runtime, s) / max(available[s].cost, 1.0),
            )

        target = self._saving_for
        if target in runtime.affordable_upgrades():
            self._saving_for = None
            return [target]
        return []

    def describe(self) -> str:
        return self._describe_skill("SaveForBest")


STRATEGY_REGISTRY: dict[str, type[Strategy]] = {
    "greedy": GreedyUploader,
    "save_for_best": SaveForBest,
}
