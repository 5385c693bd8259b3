from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from studiosim.channel import Channel, new_channel
from studiosim.definition import DEFAULT_CONFIG, StudioConfig
from studiosim.errors import ChannelLimitReached, UnknownChannel

logger = logging.getLogger(__name__)

CHANNEL_PREFIX = "channels/"
GLOBAL_STATS_KEY = "global_stats"
LAST_ACTIVE_KEY = "last_active"


@dataclass
class GlobalStats:
    """Totals across every stored channel."""

    channels_created: int = 0
    total_subscribers: int = 0
    total_views: int = 0
    total_money_earned: float = 0.0

    @classmethod
    def from_channels(cls, channels: list[Channel]) -> GlobalStats:
        return cls(
            channels_created=len(channels),
            total_subscribers=sum(c.subscribers for c in channels),
            total_views=sum(c.views for c in channels),
            total_money_earned=round(sum(c.total_earnings for c in channels), 2),
        )


class ChannelStore:
    """Channels and global stats kept in a single JSON file.

    Keys are opaque strings: ``channels/<id>``, ``global_stats`` and
    ``last_active``. Every write rewrites the whole file through a temp
    file and an atomic rename.
    """

    def __init__(self, path: str | Path, config: StudioConfig = DEFAULT_CONFIG) -> None:
        self.path = Path(path)
        self.config = config

    # ── Raw key-value access ─────────────────────────────────────────

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            return json.load(f)

    def _write(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def get(self, key: str) -> Any:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    # ── Channels ─────────────────────────────────────────────────────

    def list_channels(self) -> list[Channel]:
        data = self._read()
        return [
            Channel.from_dict(value)
            for key, value in sorted(data.items())
            if key.startswith(CHANNEL_PREFIX)
        ]

    def load_channel(self, channel_id: str) -> Channel:
        raw = self.get(CHANNEL_PREFIX + channel_id)
        if raw is None:
            raise UnknownChannel(channel_id)
        return Channel.from_dict(raw)

    def save_channel(self, channel: Channel) -> None:
        """Replace the stored channel and refresh the global stats."""
        data = self._read()
        data[CHANNEL_PREFIX + channel.id] = channel.to_dict()
        self._refresh_stats(data)
        self._write(data)

    def create_channel(self, name: str, premium: bool = False) -> Channel:
        data = self._read()
        existing = sum(1 for key in data if key.startswith(CHANNEL_PREFIX))
        limit = self.config.max_channel_slots(premium)
        if existing >= limit:
            raise ChannelLimitReached(limit)

        channel = new_channel(name, premium=premium, config=self.config)
        data[CHANNEL_PREFIX + channel.id] = channel.to_dict()
        data[LAST_ACTIVE_KEY] = channel.id
        self._refresh_stats(data)
        self._write(data)
        logger.info("Created channel %s (%r)", channel.id, name)
        return channel

    def delete_channel(self, channel_id: str) -> None:
        data = self._read()
        if data.pop(CHANNEL_PREFIX + channel_id, None) is None:
            raise UnknownChannel(channel_id)
        if data.get(LAST_ACTIVE_KEY) == channel_id:
            data.pop(LAST_ACTIVE_KEY)
        self._refresh_stats(data)
        self._write(data)
        logger.info("Deleted channel %s", channel_id)

    # ── Aggregates ───────────────────────────────────────────────────

    def load_global_stats(self) -> GlobalStats:
        raw = self.get(GLOBAL_STATS_KEY)
        return GlobalStats(**raw) if raw else GlobalStats()

    @property
    def last_active(self) -> str | None:
        return self.get(LAST_ACTIVE_KEY)

    @last_active.setter
    def last_active(self, channel_id: str | None) -> None:
        data = self._read()
        if channel_id is None:
            data.pop(LAST_ACTIVE_KEY, None)
        else:
            data[LAST_ACTIVE_KEY] = channel_id
        self._write(data)

    @staticmethod
    def _refresh_stats(data: dict[str, Any]) -> None:
        channels = [
            Channel.from_dict(value)
            for key, value in data.items()
            if key.startswith(CHANNEL_PREFIX)
        ]
        data[GLOBAL_STATS_KEY] = asdict(GlobalStats.from_channels(channels))
