from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class BoostKind(Enum):
    COMMUNITY = auto()
    THUMBNAIL_CTR = auto()
    STREAM = auto()


class CombineRule(Enum):
    ADDITIVE = auto()  # new grant is added to the pending amount
    REPLACE = auto()  # new grant overwrites the pending value


# Each grant is capped by its minigame; the stacked pending total is not.
COMBINE_RULES: dict[BoostKind, CombineRule] = {
    BoostKind.COMMUNITY: CombineRule.ADDITIVE,
    BoostKind.THUMBNAIL_CTR: CombineRule.ADDITIVE,
    BoostKind.STREAM: CombineRule.REPLACE,
}


@dataclass(frozen=True)
class StreamBonus:
    """Multipliers granted by a successful stream."""

    views_multiplier: float = 1.0
    subs_multiplier: float = 1.0
    money_multiplier: float = 1.0

    def to_dict(self) -> dict[str, float]:
        return {
            "views_multiplier": self.views_multiplier,
            "subs_multiplier": self.subs_multiplier,
            "money_multiplier": self.money_multiplier,
        }


@dataclass(frozen=True)
class BoostGrant:
    """What a finished minigame writes into the ledger."""

    kind: BoostKind
    amount: float = 0.0
    stream_bonus: StreamBonus | None = None


@dataclass
class BoostLedger:
    """Pending one-shot boosts waiting for the next upload."""

    community: float = 0.0
    thumbnail_ctr: float = 0.0
    stream: StreamBonus | None = None

    def is_pending(self, kind: BoostKind) -> bool:
        if kind is BoostKind.COMMUNITY:
            return self.community > 0
        if kind is BoostKind.THUMBNAIL_CTR:
            return self.thumbnail_ctr > 0
        return self.stream is not None

    def apply(self, grant: BoostGrant) -> None:
        """Combine *grant* with the pending value according to COMBINE_RULES."""
        if grant.kind is BoostKind.STREAM:
            if grant.stream_bonus is None:
                raise ValueError("Stream grant carries no bonus")
            self.stream = grant.stream_bonus
            return

        attr = "community" if grant.kind is BoostKind.COMMUNITY else "thumbnail_ctr"
        if COMBINE_RULES[grant.kind] is CombineRule.ADDITIVE:
            setattr(self, attr, getattr(self, attr) + grant.amount)
        else:
            setattr(self, attr, grant.amount)

    def clear(self, kind: BoostKind) -> None:
        if kind is BoostKind.COMMUNITY:
            self.community = 0.0
        elif kind is BoostKind.THUMBNAIL_CTR:
            self.thumbnail_ctr = 0.0
        else:
            self.stream = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "community": self.community,
            "thumbnail_ctr": self.thumbnail_ctr,
            "stream": self.stream.to_dict() if self.stream else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoostLedger:
        stream = data.get("stream")
        return cls(
            community=data.get("community", 0.0),
            thumbnail_ctr=data.get("thumbnail_ctr", 0.0),
            stream=StreamBonus(**stream) if stream else None,
        )
