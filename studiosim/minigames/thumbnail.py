from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any

from studiosim.catalog import THUMBNAIL_CATEGORIES, THUMBNAIL_COMPONENTS, ThumbnailComponent
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import SessionStateError
from studiosim.ledger import BoostGrant, BoostKind
from studiosim.minigames.base import MinigameKind, MinigameSession, SessionPhase


class ThumbnailSession(MinigameSession):
    """Thumbnail optimizer: build the best thumbnail before time runs out.

    A reel of random components rotates every few seconds. Picking one
    replaces the current pick of the same category, and the score moves by
    the points difference, clamped to ``[0, thumbnail_max_points]``.
    """

    kind = MinigameKind.THUMBNAIL
    energy_cost_field = "thumbnail_energy_cost"

    def __init__(
        self,
        channel_id: str,
        day: int,
        rng: random.Random,
        config: StudioConfig = DEFAULT_CONFIG,
        components: Sequence[ThumbnailComponent] = THUMBNAIL_COMPONENTS,
    ) -> None:
        super().__init__(channel_id, day, rng, config)
        self._by_category: dict[str, list[ThumbnailComponent]] = {
            category: [c for c in components if c.component_type == category]
            for category in THUMBNAIL_CATEGORIES
        }
        self.time_left = config.thumbnail_duration
        self.score = 0
        self.selected: dict[str, ThumbnailComponent | None] = {
            category: None for category in THUMBNAIL_CATEGORIES
        }
        self.reel: list[ThumbnailComponent] = []
        self.refresh_reel()

    def refresh_reel(self) -> None:
        """Draw one or two components per category, shuffled, capped in size."""
        items: list[ThumbnailComponent] = []
        for category, pool in self._by_category.items():
            if not pool:
                continue
            count = 2 if self.rng.random() > 0.5 else 1
            for _ in range(count):
                pick = pool[int(self.rng.random() * len(pool))]
                current = self.selected[category]
                if current is not None and current.id == pick.id and len(pool) > 1:
                    pick = pool[int(self.rng.random() * len(pool))]
                items.append(pick)
        self.rng.shuffle(items)
        self.reel = items[: self.config.thumbnail_reel_size]

    def _step(self) -> None:
        self.time_left -= 1
        if self.time_left <= 0:
            self.time_left = 0
            self.phase = SessionPhase.COMPLETE
        elif self.seconds_elapsed % self.config.thumbnail_reel_interval == 0:
            self.refresh_reel()

    def select(self, component_id: str) -> ThumbnailComponent:
        """Put a component from the reel on the thumbnail."""
        self._require_active()
        component = next((c for c in self.reel if c.id == component_id), None)
        if component is None:
            raise SessionStateError(f"Component {component_id!r} is not on the reel")

        old = self.selected[component.component_type]
        change = component.points - (old.points if old is not None else 0)
        self.score = max(0, min(self.score + change, self.config.thumbnail_max_points))
        self.selected[component.component_type] = component
        self.refresh_reel()
        return component

    @property
    def final_boost(self) -> float:
        boost = self.score / self.config.thumbnail_max_points * self.config.thumbnail_max_ctr_boost
        return max(0.0, min(boost, self.config.thumbnail_max_ctr_boost))

    def _grant(self) -> BoostGrant:
        return BoostGrant(BoostKind.THUMBNAIL_CTR, amount=self.final_boost)

    def snapshot(self) -> dict[str, Any]:
        data = self._base_snapshot()
        data.update(
            time_left=self.time_left,
            score=self.score,
            max_score=self.config.thumbnail_max_points,
            ctr_boost=round(self.final_boost, 4),
            selected={k: v.id if v else None for k, v in self.selected.items()},
            reel=[
                {"id": c.id, "category": c.component_type, "name": c.display_name}
                for c in self.reel
            ],
        )
        return data
