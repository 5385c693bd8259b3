from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from studiosim.catalog import COMMENTS, CommentOption, GameComment
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import SessionStateError
from studiosim.ledger import BoostGrant, BoostKind
from studiosim.minigames.base import MinigameKind, MinigameSession, SessionPhase


class CommunitySession(MinigameSession):
    """Community responder: answer a handful of comments, one per round.

    Points accumulate with an upper cap only. The final score becomes the
    pending community boost, stacking with any unconsumed one.
    """

    kind = MinigameKind.COMMUNITY
    energy_cost_field = "community_energy_cost"

    def __init__(
        self,
        channel_id: str,
        day: int,
        rng: random.Random,
        config: StudioConfig = DEFAULT_CONFIG,
        comments: Sequence[GameComment] = COMMENTS,
    ) -> None:
        super().__init__(channel_id, day, rng, config)
        rounds = min(config.community_rounds, len(comments))
        self.comments: list[GameComment] = rng.sample(list(comments), rounds)
        self.round = 0
        self.score = 0
        self.answers: list[CommentOption] = []

    @property
    def rounds(self) -> int:
        return len(self.comments)

    @property
    def current_comment(self) -> GameComment | None:
        if self.phase is not SessionPhase.ACTIVE:
            return None
        return self.comments[self.round]

    def respond(self, option_index: int) -> CommentOption:
        """Pick a reply for the current comment and move to the next round."""
        self._require_active()
        comment = self.comments[self.round]
        if not 0 <= option_index < len(comment.options):
            raise SessionStateError(
                f"Comment {comment.id} has no option {option_index} "
                f"(choose 0-{len(comment.options) - 1})"
            )
        option = comment.options[option_index]
        self.score = min(self.score + option.points, self.config.community_max_points)
        self.answers.append(option)
        self.round += 1
        if self.round >= self.rounds:
            self.phase = SessionPhase.COMPLETE
        return option

    def _grant(self) -> BoostGrant:
        return BoostGrant(BoostKind.COMMUNITY, amount=self.score)

    def snapshot(self) -> dict[str, Any]:
        data = self._base_snapshot()
        data.update(
            round=self.round + 1 if self.phase is SessionPhase.ACTIVE else self.round,
            rounds=self.rounds,
            score=self.score,
            max_score=self.config.community_max_points,
        )
        comment = self.current_comment
        if comment is not None:
            data["comment"] = {
                "id": comment.id,
                "author": comment.author,
                "text": comment.text,
                "options": [o.text for o in comment.options],
            }
        return data
