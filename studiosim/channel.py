from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from typing import Any

from studiosim.catalog import EquipmentSlot
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.ledger import BoostLedger


@dataclass
class Video:
    """An uploaded video.

    Only ``views`` and ``subscribers_gained`` change after creation, when a
    day advance adds organic growth.
    """

    id: str
    title: str
    genre: str
    recording_method: str
    upload_day: int
    views: int = 0
    subscribers_gained: int = 0
    money_gained: float = 0.0
    watch_hours_gained: float = 0.0
    sub_genre: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Video:
        return cls(**data)


@dataclass
class EquipmentLevels:
    camera: int = 1
    microphone: int = 1
    editing_software: int = 1
    decoration: int = 1

    def get(self, slot: EquipmentSlot) -> int:
        return getattr(self, slot.value)

    def set(self, slot: EquipmentSlot, level: int) -> None:
        setattr(self, slot.value, level)


@dataclass
class Channel:
    """Mutable aggregate holding everything about one simulated channel."""

    id: str
    name: str
    subscribers: int = 0
    views: int = 0
    money: float = 0.0
    watch_hours: float = 0.0
    total_earnings: float = 0.0
    energy: float = 100
    max_energy: float = 100
    day: int = 1
    is_monetized: bool = False
    premium: bool = False
    equipment: EquipmentLevels = field(default_factory=EquipmentLevels)
    achievements: set[str] = field(default_factory=set)
    videos: list[Video] = field(default_factory=list)  # most recent first
    boosts: BoostLedger = field(default_factory=BoostLedger)
    last_played_day: dict[str, int] = field(default_factory=dict)  # minigame kind -> day

    @property
    def videos_uploaded(self) -> int:
        return len(self.videos)

    def get_video(self, video_id: str) -> Video | None:
        for v in self.videos:
            if v.id == video_id:
                return v
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "subscribers": self.subscribers,
            "views": self.views,
            "money": self.money,
            "watch_hours": self.watch_hours,
            "total_earnings": self.total_earnings,
            "energy": self.energy,
            "max_energy": self.max_energy,
            "day": self.day,
            "is_monetized": self.is_monetized,
            "premium": self.premium,
            "equipment": asdict(self.equipment),
            "achievements": sorted(self.achievements),
            "videos": [v.to_dict() for v in self.videos],
            "boosts": self.boosts.to_dict(),
            "last_played_day": dict(self.last_played_day),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Channel:
        return cls(
            id=data["id"],
            name=data["name"],
            subscribers=data.get("subscribers", 0),
            views=data.get("views", 0),
            money=data.get("money", 0.0),
            watch_hours=data.get("watch_hours", 0.0),
            total_earnings=data.get("total_earnings", 0.0),
            energy=data.get("energy", 100),
            max_energy=data.get("max_energy", 100),
            day=data.get("day", 1),
            is_monetized=data.get("is_monetized", False),
            premium=data.get("premium", False),
            equipment=EquipmentLevels(**data.get("equipment", {})),
            achievements=set(data.get("achievements", [])),
            videos=[Video.from_dict(v) for v in data.get("videos", [])],
            boosts=BoostLedger.from_dict(data.get("boosts") or {}),
            last_played_day=dict(data.get("last_played_day", {})),
        )


def new_channel(
    name: str,
    premium: bool = False,
    config: StudioConfig = DEFAULT_CONFIG,
    channel_id: str | None = None,
) -> Channel:
    """Create a fresh day-1 channel with basic equipment and full energy."""
    return Channel(
        id=channel_id or uuid.uuid4().hex[:12],
        name=name,
        energy=config.initial_max_energy,
        max_energy=config.initial_max_energy,
        premium=premium,
    )
