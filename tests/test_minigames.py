"""Tests for minigame session lifecycle and start_minigame."""
import random

import pytest

from studiosim.channel import new_channel
from studiosim.errors import AlreadyPlayedToday, InsufficientEnergy, SessionStateError
from studiosim.minigames import (
    CommunitySession,
    MinigameKind,
    SessionPhase,
    StreamSession,
    ThumbnailSession,
    can_play_today,
    start_minigame,
)


class TestStart:
    @pytest.mark.parametrize(
        "kind,cls,cost",
        [
            (MinigameKind.COMMUNITY, CommunitySession, 10),
            (MinigameKind.THUMBNAIL, ThumbnailSession, 15),
            (MinigameKind.STREAM, StreamSession, 20),
        ],
    )
    def test_pays_energy_and_locks_day(self, channel, kind, cls, cost):
        session = start_minigame(kind, channel, random.Random(1))
        assert isinstance(session, cls)
        assert channel.energy == 100 - cost
        assert channel.last_played_day == {kind.value: 1}
        assert not can_play_today(channel, kind)

    def test_kind_by_name(self, channel):
        session = start_minigame("thumbnail", channel, random.Random(1))
        assert session.kind is MinigameKind.THUMBNAIL

    def test_scenario_e_twice_same_day(self, channel):
        start_minigame(MinigameKind.COMMUNITY, channel, random.Random(1))
        before = channel.to_dict()

        with pytest.raises(AlreadyPlayedToday):
            start_minigame(MinigameKind.COMMUNITY, channel, random.Random(2))
        assert channel.to_dict() == before

    def test_other_kinds_still_playable(self, channel):
        start_minigame(MinigameKind.COMMUNITY, channel, random.Random(1))
        assert can_play_today(channel, MinigameKind.STREAM)

    def test_playable_again_next_day(self, channel):
        start_minigame(MinigameKind.COMMUNITY, channel, random.Random(1))
        channel.day += 1
        assert can_play_today(channel, MinigameKind.COMMUNITY)

    def test_insufficient_energy(self, channel):
        channel.energy = 14
        with pytest.raises(InsufficientEnergy):
            start_minigame(MinigameKind.THUMBNAIL, channel, random.Random(1))
        assert channel.energy == 14
        assert channel.last_played_day == {}

    def test_day_lock_checked_before_energy(self, channel):
        start_minigame(MinigameKind.STREAM, channel, random.Random(1))
        channel.energy = 0
        with pytest.raises(AlreadyPlayedToday):
            start_minigame(MinigameKind.STREAM, channel, random.Random(1))


class TestLifecycle:
    def test_negative_tick(self, channel):
        session = start_minigame(MinigameKind.THUMBNAIL, channel, random.Random(1))
        with pytest.raises(ValueError):
            session.tick(-1)

    def test_fractional_ticks_carry(self, channel):
        session = start_minigame(MinigameKind.THUMBNAIL, channel, random.Random(1))
        session.tick(0.4)
        assert session.seconds_elapsed == 0
        session.tick(0.7)
        assert session.seconds_elapsed == 1
        assert session.time_left == 44

    def test_tick_after_end(self, channel):
        session = start_minigame(MinigameKind.THUMBNAIL, channel, random.Random(1))
        session.tick(100)
        assert session.phase is SessionPhase.COMPLETE
        assert session.seconds_elapsed == 45
        with pytest.raises(SessionStateError):
            session.tick(1)

    def test_finalize_requires_completion(self, channel):
        session = start_minigame(MinigameKind.COMMUNITY, channel, random.Random(1))
        with pytest.raises(SessionStateError):
            session.finalize(channel)

    def test_finalize_once(self, channel):
        session = start_minigame(MinigameKind.THUMBNAIL, channel, random.Random(1))
        session.tick(45)
        session.finalize(channel)
        assert session.finalized
        with pytest.raises(SessionStateError):
            session.finalize(channel)

    def test_finalize_other_channel(self, channel):
        session = start_minigame(MinigameKind.THUMBNAIL, channel, random.Random(1))
        session.tick(45)
        with pytest.raises(SessionStateError):
            session.finalize(new_channel("Other", channel_id="other"))

    def test_abandon_grants_nothing(self, channel):
        session = start_minigame(MinigameKind.COMMUNITY, channel, random.Random(1))
        session.respond(0)
        session.abandon()

        assert session.phase is SessionPhase.ABANDONED
        assert session.preview_grant() is None
        assert session.finalize(channel) is None
        assert channel.boosts.community == 0
        # energy stays spent
        assert channel.energy == 90

    def test_abandon_twice(self, channel):
        session = start_minigame(MinigameKind.COMMUNITY, channel, random.Random(1))
        session.abandon()
        with pytest.raises(SessionStateError):
            session.abandon()

    def test_snapshot_base_fields(self, channel):
        session = start_minigame(MinigameKind.STREAM, channel, random.Random(1))
        snap = session.snapshot()
        assert snap["kind"] == "stream"
        assert snap["phase"] == "countdown"
        assert snap["finalized"] is False
