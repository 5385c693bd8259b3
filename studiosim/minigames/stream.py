from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from studiosim.catalog import STREAM_PROMPTS, StreamPrompt, StreamPromptType
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import SessionStateError
from studiosim.ledger import BoostGrant, BoostKind, StreamBonus
from studiosim.minigames.base import MinigameKind, MinigameSession, SessionPhase


class StreamSession(MinigameSession):
    """Streamer sensation: keep the hype meter up until the stream ends.

    After a short countdown the hype decays every second while chat prompts
    spawn one at a time. Answering a prompt moves the hype by its success
    or failure points; letting it expire counts as a failure. Dropping
    below the fail threshold ends the stream at once with no bonus.
    """

    kind = MinigameKind.STREAM
    energy_cost_field = "stream_energy_cost"

    def __init__(
        self,
        channel_id: str,
        day: int,
        rng: random.Random,
        config: StudioConfig = DEFAULT_CONFIG,
        prompts: Sequence[StreamPrompt] = STREAM_PROMPTS,
    ) -> None:
        super().__init__(channel_id, day, rng, config)
        self.prompts = list(prompts)
        self.phase = SessionPhase.COUNTDOWN
        self.countdown = config.stream_countdown
        self.time_left = config.stream_duration
        self.hype = config.hype_initial
        self.current_prompt: StreamPrompt | None = None
        self.prompt_time_left = 0
        self.next_prompt_in = 0.0
        self.successful_interactions = 0
        self.failed_interactions = 0
        self._hype_total = 0.0
        if self.countdown <= 0:
            self._go_live()

    # ── Clock ────────────────────────────────────────────────────────

    def _go_live(self) -> None:
        self.phase = SessionPhase.ACTIVE
        self.hype = self.config.hype_initial
        self.time_left = self.config.stream_duration
        self._schedule_prompt()

    def _schedule_prompt(self) -> None:
        self.next_prompt_in = self.rng.uniform(
            self.config.prompt_spawn_min, self.config.prompt_spawn_max
        )

    def _spawn_prompt(self) -> None:
        self.current_prompt = self.prompts[int(self.rng.random() * len(self.prompts))]
        self.prompt_time_left = self.current_prompt.duration_seconds

    def _check_hype(self) -> bool:
        """End the stream if hype fell below the threshold. Returns True if it did."""
        if self.hype < self.config.hype_fail_threshold:
            self.phase = SessionPhase.FAILED
            self.current_prompt = None
            self.prompt_time_left = 0
            return True
        return False

    def _step(self) -> None:
        if self.phase is SessionPhase.COUNTDOWN:
            self.countdown -= 1
            if self.countdown <= 0:
                self._go_live()
            return

        self.hype = max(0.0, self.hype - self.config.hype_decay_per_second)
        if self._check_hype():
            return

        if self.current_prompt is not None:
            self.prompt_time_left -= 1
            if self.prompt_time_left <= 0:
                self._resolve(False, self.current_prompt.points_for_failure)
                if self.is_complete:
                    return
        else:
            self.next_prompt_in -= 1
            if self.next_prompt_in <= 0:
                self._spawn_prompt()

        self.time_left -= 1
        if self.time_left <= 0:
            self.time_left = 0
            self.current_prompt = None
            self.phase = SessionPhase.COMPLETE

    # ── Chat interaction ─────────────────────────────────────────────

    def _resolve(self, success: bool, points: float) -> None:
        if success:
            # averaged before the meter is clamped
            self._hype_total += self.hype + points
            self.successful_interactions += 1
        else:
            self.failed_interactions += 1
        self.hype = min(self.config.hype_max, max(0.0, self.hype + points))
        self.current_prompt = None
        self.prompt_time_left = 0
        self._schedule_prompt()
        self._check_hype()

    def _require_prompt(self, prompt_type: StreamPromptType) -> StreamPrompt:
        self._require_active()
        prompt = self.current_prompt
        if prompt is None:
            raise SessionStateError("No chat prompt is waiting for a reaction")
        if prompt.type is not prompt_type:
            raise SessionStateError(
                f"Prompt {prompt.id} expects {prompt.type.value}, not {prompt_type.value}"
            )
        return prompt

    def click(self) -> bool:
        prompt = self._require_prompt(StreamPromptType.QUICK_CLICK)
        self._resolve(True, prompt.points_for_success)
        return True

    def type_keyword(self, text: str) -> bool:
        prompt = self._require_prompt(StreamPromptType.KEYWORD_TYPE)
        success = text.strip().lower() == prompt.keyword.lower()
        self._resolve(success, prompt.points_for_success if success else prompt.points_for_failure)
        return success

    def choose_emoji(self, emoji: str) -> bool:
        prompt = self._require_prompt(StreamPromptType.EMOJI_SELECT)
        success = emoji == prompt.correct_emoji
        self._resolve(success, prompt.points_for_success if success else prompt.points_for_failure)
        return success

    def react(self, answer: str | None = None) -> bool:
        """Answer whatever prompt is showing. Returns whether it counted as a success."""
        self._require_active()
        if self.current_prompt is None:
            raise SessionStateError("No chat prompt is waiting for a reaction")
        prompt_type = self.current_prompt.type
        if prompt_type is StreamPromptType.QUICK_CLICK:
            return self.click()
        if answer is None:
            raise SessionStateError(f"Prompt {self.current_prompt.id} needs an answer")
        if prompt_type is StreamPromptType.KEYWORD_TYPE:
            return self.type_keyword(answer)
        return self.choose_emoji(answer)

    # ── Result ───────────────────────────────────────────────────────

    @property
    def average_hype(self) -> float:
        if self.successful_interactions == 0:
            return self.config.hype_initial
        return self._hype_total / self.successful_interactions

    def stream_bonus(self) -> StreamBonus:
        c = self.config
        ratio = max(0.0, min(self.average_hype / c.hype_max, 1.0))
        return StreamBonus(
            views_multiplier=round(1 + (c.stream_max_views_multiplier - 1) * ratio, 2),
            subs_multiplier=round(1 + (c.stream_max_subs_multiplier - 1) * ratio, 2),
            money_multiplier=round(1 + (c.stream_max_money_multiplier - 1) * ratio, 2),
        )

    def _grant(self) -> BoostGrant:
        return BoostGrant(BoostKind.STREAM, stream_bonus=self.stream_bonus())

    def snapshot(self) -> dict[str, Any]:
        data = self._base_snapshot()
        data.update(
            countdown=max(0, self.countdown),
            time_left=self.time_left,
            hype=self.hype,
            hype_fail_threshold=self.config.hype_fail_threshold,
            successful_interactions=self.successful_interactions,
            failed_interactions=self.failed_interactions,
        )
        prompt = self.current_prompt
        if prompt is not None:
            data["prompt"] = {
                "id": prompt.id,
                "type": prompt.type.value,
                "text": prompt.display_text,
                "time_left": self.prompt_time_left,
                "button_text": prompt.button_text or None,
                "emojis": list(prompt.emojis) or None,
            }
        if self.phase is SessionPhase.COMPLETE:
            data["bonus"] = self.stream_bonus().to_dict()
        return data
