"""MCP server wrapping StudioRuntime for interactive AI playtesting."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from studiosim.catalog import (
    EQUIPMENT,
    GENRES,
    RECORDING_METHODS,
    EquipmentSlot,
)
from studiosim.channel import Channel
from studiosim.definition import StudioConfig
from studiosim.errors import SessionStateError, ValidationError
from studiosim.minigames import SESSION_TYPES, MinigameKind
from studiosim.minigames.community import CommunitySession
from studiosim.minigames.stream import StreamSession
from studiosim.minigames.thumbnail import ThumbnailSession
from studiosim.runtime import StudioRuntime
from studiosim.storage import ChannelStore

logger = logging.getLogger(__name__)

# Maximum seconds per minigame_wait() call
_MAX_WAIT = 120


@dataclass
class _StudioHolder:
    """Holds the store and the runtime of the selected channel."""

    store: ChannelStore
    config: StudioConfig
    rng: random.Random
    runtime: StudioRuntime | None = None

    def select(self, channel: Channel) -> None:
        if self.runtime is not None and self.runtime.session is not None:
            self.runtime.close_minigame()
            self.save()
        self.runtime = StudioRuntime(channel, config=self.config, rng=self.rng)
        self.store.last_active = channel.id

    def save(self) -> None:
        if self.runtime is not None:
            self.store.save_channel(self.runtime.channel)


def _no_channel() -> dict[str, Any]:
    return {"error": "No channel selected. Use create_channel or select_channel first."}


def _channel_summary(channel: Channel) -> dict[str, Any]:
    return {
        "id": channel.id,
        "name": channel.name,
        "day": channel.day,
        "subscribers": channel.subscribers,
        "views": channel.views,
        "money": round(channel.money, 2),
        "total_earnings": round(channel.total_earnings, 2),
        "watch_hours": round(channel.watch_hours, 2),
        "energy": channel.energy,
        "max_energy": channel.max_energy,
        "is_monetized": channel.is_monetized,
        "premium": channel.premium,
        "videos_uploaded": channel.videos_uploaded,
    }


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_game_info(holder: _StudioHolder) -> dict[str, Any]:
    config = holder.config
    return {
        "name": config.name,
        "genres": {genre: list(subs) for genre, subs in GENRES.items()},
        "recording_methods": [
            {"name": m.name, "multiplier": m.multiplier} for m in RECORDING_METHODS
        ],
        "equipment": {
            slot.value: [
                {"level": lvl.level, "cost": lvl.cost, "description": lvl.description}
                for lvl in d.levels
            ]
            for slot, d in EQUIPMENT.items()
        },
        "minigames": {
            kind.value: {"energy_cost": cls.energy_cost(config)}
            for kind, cls in SESSION_TYPES.items()
        },
        "upload_energy_cost": config.energy_per_video,
        "monetization": {
            "subscribers": config.monetization_subscribers,
            "watch_hours": config.monetization_watch_hours,
        },
    }


def _tool_list_channels(holder: _StudioHolder) -> dict[str, Any]:
    active = holder.runtime.channel.id if holder.runtime else None
    return {
        "channels": [
            {"id": c.id, "name": c.name, "day": c.day, "subscribers": c.subscribers}
            for c in holder.store.list_channels()
        ],
        "active": active,
    }


def _tool_create_channel(holder: _StudioHolder, name: str, premium: bool = False) -> dict[str, Any]:
    if not name.strip():
        return {"success": False, "reason": "Channel name cannot be empty"}
    try:
        channel = holder.store.create_channel(name.strip(), premium=premium)
    except ValidationError as exc:
        return {"success": False, "reason": str(exc)}
    holder.select(channel)
    return {"success": True, "channel": _channel_summary(channel)}


def _tool_select_channel(holder: _StudioHolder, channel_id: str) -> dict[str, Any]:
    try:
        channel = holder.store.load_channel(channel_id)
    except ValidationError as exc:
        return {"success": False, "reason": str(exc)}
    holder.select(channel)
    return {"success": True, "channel": _channel_summary(channel)}


def _tool_delete_channel(holder: _StudioHolder, channel_id: str) -> dict[str, Any]:
    try:
        holder.store.delete_channel(channel_id)
    except ValidationError as exc:
        return {"success": False, "reason": str(exc)}
    if holder.runtime is not None and holder.runtime.channel.id == channel_id:
        holder.runtime = None
    return {"success": True, "deleted": channel_id}


def _tool_get_channel_state(holder: _StudioHolder) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    runtime = holder.runtime
    channel = runtime.channel
    result = _channel_summary(channel)
    result.update(
        equipment={slot.value: channel.equipment.get(slot) for slot in EquipmentSlot},
        pending_boosts=channel.boosts.to_dict(),
        achievements=sorted(channel.achievements),
        eligible_for_monetization=runtime.is_eligible_for_monetization(),
        minigames_available={k.value: runtime.can_play(k) for k in MinigameKind},
        recent_videos=[v.to_dict() for v in channel.videos[:5]],
    )
    return result


def _tool_upload_video(
    holder: _StudioHolder,
    title: str,
    genre: str,
    recording_method: str,
    sub_genre: str | None = None,
) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    runtime = holder.runtime
    before = set(runtime.channel.achievements)
    was_monetized = runtime.channel.is_monetized
    try:
        outcome = runtime.upload_video(title, genre, recording_method, sub_genre)
    except ValidationError as exc:
        return {"success": False, "reason": str(exc)}
    holder.save()

    result: dict[str, Any] = {
        "success": True,
        "video": outcome.video.to_dict(),
        "viral": outcome.viral,
        "boosts_consumed": sorted(k.name.lower() for k in outcome.delta.consumed_boosts),
        "energy": runtime.channel.energy,
    }
    new_achievements = sorted(runtime.channel.achievements - before)
    if new_achievements:
        result["new_achievements"] = new_achievements
    if runtime.channel.is_monetized and not was_monetized:
        result["monetized"] = True
    return result


def _tool_next_day(holder: _StudioHolder) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    runtime = holder.runtime
    before = set(runtime.channel.achievements)
    report = runtime.advance_day()
    holder.save()
    result: dict[str, Any] = {
        "day": report.day,
        "energy": runtime.channel.energy,
        "views_gained": report.views_gained,
        "subscribers_gained": report.subscribers_gained,
    }
    new_achievements = sorted(runtime.channel.achievements - before)
    if new_achievements:
        result["new_achievements"] = new_achievements
    return result


def _tool_upgrade_equipment(holder: _StudioHolder, slot: str) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    try:
        slot_enum = EquipmentSlot(slot)
    except ValueError:
        return {"error": f"Unknown equipment slot: {slot!r}"}
    try:
        result = holder.runtime.upgrade_equipment(slot_enum)
    except ValidationError as exc:
        return {"success": False, "reason": str(exc)}
    holder.save()
    return {
        "success": True,
        "slot": result.slot.value,
        "new_level": result.new_level,
        "cost": result.cost,
        "money": round(holder.runtime.channel.money, 2),
        "max_energy": holder.runtime.channel.max_energy,
    }


def _tool_activate_monetization(holder: _StudioHolder) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    try:
        changed = holder.runtime.activate_monetization()
    except ValidationError as exc:
        return {"success": False, "reason": str(exc)}
    holder.save()
    return {"success": True, "already_monetized": not changed}


def _tool_get_achievements(holder: _StudioHolder) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    return {"achievements": holder.runtime.achievement_progress()}


def _tool_get_global_stats(holder: _StudioHolder) -> dict[str, Any]:
    stats = holder.store.load_global_stats()
    return {
        "channels_created": stats.channels_created,
        "total_subscribers": stats.total_subscribers,
        "total_views": stats.total_views,
        "total_money_earned": stats.total_money_earned,
    }


# ── Minigame tools ──────────────────────────────────────────────────


def _tool_start_minigame(holder: _StudioHolder, kind: str) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    try:
        kind_enum = MinigameKind(kind)
    except ValueError:
        return {"error": f"Unknown minigame: {kind!r}"}
    try:
        session = holder.runtime.start_minigame(kind_enum)
    except ValidationError as exc:
        return {"success": False, "reason": str(exc)}
    holder.save()
    return {"success": True, "session": session.snapshot()}


def _tool_minigame_state(holder: _StudioHolder) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    if holder.runtime.session is None:
        return {"error": "No minigame in progress"}
    return {"session": holder.runtime.session.snapshot()}


def _tool_minigame_wait(holder: _StudioHolder, seconds: float) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    if seconds <= 0:
        return {"error": "Seconds must be positive"}
    if seconds > _MAX_WAIT:
        return {"error": f"Cannot wait more than {_MAX_WAIT} seconds per call"}
    try:
        session = holder.runtime.tick_minigame(seconds)
    except SessionStateError as exc:
        return {"error": str(exc)}
    return {"session": session.snapshot()}


def _session_input(holder: _StudioHolder, expected: type, action) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    session = holder.runtime.session
    if not isinstance(session, expected):
        return {"error": f"No {expected.kind.value} minigame in progress"}
    try:
        outcome = action(session)
    except SessionStateError as exc:
        return {"error": str(exc)}
    return {"result": outcome, "session": session.snapshot()}


def _tool_community_respond(holder: _StudioHolder, option_index: int) -> dict[str, Any]:
    def respond(session: CommunitySession) -> dict[str, Any]:
        option = session.respond(option_index)
        return {"points": option.points, "feedback": option.feedback}

    return _session_input(holder, CommunitySession, respond)


def _tool_thumbnail_select(holder: _StudioHolder, component_id: str) -> dict[str, Any]:
    def select(session: ThumbnailSession) -> dict[str, Any]:
        component = session.select(component_id)
        return {"selected": component.id, "points": component.points}

    return _session_input(holder, ThumbnailSession, select)


def _tool_stream_react(holder: _StudioHolder, answer: str | None = None) -> dict[str, Any]:
    def react(session: StreamSession) -> dict[str, Any]:
        return {"success": session.react(answer)}

    return _session_input(holder, StreamSession, react)


def _tool_finish_minigame(holder: _StudioHolder) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    session = holder.runtime.session
    try:
        grant = holder.runtime.finish_minigame()
    except SessionStateError as exc:
        return {"error": str(exc)}
    holder.save()
    result: dict[str, Any] = {"outcome": session.phase.name.lower(), "boost": None}
    if grant is not None:
        if grant.stream_bonus is not None:
            result["boost"] = grant.stream_bonus.to_dict()
        else:
            result["boost"] = {grant.kind.name.lower(): grant.amount}
    result["pending_boosts"] = holder.runtime.channel.boosts.to_dict()
    return result


def _tool_abandon_minigame(holder: _StudioHolder) -> dict[str, Any]:
    if holder.runtime is None:
        return _no_channel()
    try:
        holder.runtime.abandon_minigame()
    except SessionStateError as exc:
        return {"error": str(exc)}
    holder.save()
    return {"success": True, "message": "Minigame abandoned; its energy is not refunded"}


# ── Server factory ──────────────────────────────────────────────────


def create_server(
    store: ChannelStore,
    config: StudioConfig | None = None,
    seed: int | None = None,
) -> FastMCP:
    """Create an MCP server playing the channels kept in *store*."""
    config = config if config is not None else store.config
    holder = _StudioHolder(store=store, config=config, rng=random.Random(seed))
    last = store.last_active
    if last is not None:
        try:
            holder.select(store.load_channel(last))
        except ValidationError:
            logger.warning("Last active channel %s no longer exists", last)

    mcp = FastMCP(name=f"Studio: {config.name}")

    @mcp.tool()
    def get_game_info() -> dict[str, Any]:
        """Get static game overview: genres, recording methods, equipment ladders, minigame costs."""
        return _tool_get_game_info(holder)

    @mcp.tool()
    def list_channels() -> dict[str, Any]:
        """List stored channels and the one currently selected."""
        return _tool_list_channels(holder)

    @mcp.tool()
    def create_channel(name: str, premium: bool = False) -> dict[str, Any]:
        """Create a new channel and select it."""
        return _tool_create_channel(holder, name, premium)

    @mcp.tool()
    def select_channel(channel_id: str) -> dict[str, Any]:
        """Switch to another stored channel."""
        return _tool_select_channel(holder, channel_id)

    @mcp.tool()
    def delete_channel(channel_id: str) -> dict[str, Any]:
        """Delete a stored channel permanently."""
        return _tool_delete_channel(holder, channel_id)

    @mcp.tool()
    def get_channel_state() -> dict[str, Any]:
        """Get the selected channel: metrics, equipment, pending boosts, achievements, recent videos."""
        return _tool_get_channel_state(holder)

    @mcp.tool()
    def upload_video(
        title: str, genre: str, recording_method: str, sub_genre: str | None = None
    ) -> dict[str, Any]:
        """Upload a video. Costs energy and consumes pending boosts."""
        return _tool_upload_video(holder, title, genre, recording_method, sub_genre)

    @mcp.tool()
    def next_day() -> dict[str, Any]:
        """Advance to the next day: regenerate energy and grow existing videos."""
        return _tool_next_day(holder)

    @mcp.tool()
    def upgrade_equipment(slot: str) -> dict[str, Any]:
        """Buy the next level of camera, microphone, editing_software or decoration."""
        return _tool_upgrade_equipment(holder, slot)

    @mcp.tool()
    def activate_monetization() -> dict[str, Any]:
        """Turn on monetization once the channel is eligible."""
        return _tool_activate_monetization(holder)

    @mcp.tool()
    def get_achievements() -> dict[str, Any]:
        """Get progress towards every achievement."""
        return _tool_get_achievements(holder)

    @mcp.tool()
    def get_global_stats() -> dict[str, Any]:
        """Get totals across all stored channels."""
        return _tool_get_global_stats(holder)

    @mcp.tool()
    def start_minigame(kind: str) -> dict[str, Any]:
        """Start the community, thumbnail or stream minigame (once per day, costs energy)."""
        return _tool_start_minigame(holder, kind)

    @mcp.tool()
    def minigame_state() -> dict[str, Any]:
        """Get the current minigame session."""
        return _tool_minigame_state(holder)

    @mcp.tool()
    def minigame_wait(seconds: float) -> dict[str, Any]:
        """Let minigame time pass (max 120 seconds per call)."""
        return _tool_minigame_wait(holder, seconds)

    @mcp.tool()
    def community_respond(option_index: int) -> dict[str, Any]:
        """Answer the current community comment with the option at this index."""
        return _tool_community_respond(holder, option_index)

    @mcp.tool()
    def thumbnail_select(component_id: str) -> dict[str, Any]:
        """Put a component from the reel on the thumbnail."""
        return _tool_thumbnail_select(holder, component_id)

    @mcp.tool()
    def stream_react(answer: str | None = None) -> dict[str, Any]:
        """React to the current stream prompt (keyword or emoji when asked; nothing for a click)."""
        return _tool_stream_react(holder, answer)

    @mcp.tool()
    def finish_minigame() -> dict[str, Any]:
        """Collect the boost of a finished minigame."""
        return _tool_finish_minigame(holder)

    @mcp.tool()
    def abandon_minigame() -> dict[str, Any]:
        """Leave the current minigame. Its energy is not refunded."""
        return _tool_abandon_minigame(holder)

    return mcp
