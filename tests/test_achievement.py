"""Tests for achievement module."""
import pytest

from studiosim.achievement import (
    achievement_progress,
    evaluate_achievements,
    grant_achievements,
)
from studiosim.catalog import ACHIEVEMENTS, get_achievement
from studiosim.channel import Video


def _upload(channel, n=1):
    for _ in range(n):
        channel.videos.insert(
            0,
            Video(
                id=f"v{channel.videos_uploaded + 1}",
                title="t",
                genre="Gaming",
                recording_method="Live (Low Quality)",
                upload_day=channel.day,
            ),
        )


def test_catalog_ids_unique():
    ids = [a.id for a in ACHIEVEMENTS]
    assert len(ids) == len(set(ids)) == 19


def test_get_achievement():
    assert get_achievement("subs_1000").reward_energy == 10
    assert get_achievement("nope") is None


class TestEvaluate:
    def test_fresh_channel_has_none(self, channel):
        assert evaluate_achievements(channel) == set()

    def test_first_video(self, channel):
        _upload(channel)
        assert evaluate_achievements(channel) == {"videos_1"}

    def test_reaches_several_at_once(self, channel):
        channel.subscribers = 120
        channel.views = 1500
        assert evaluate_achievements(channel) == {"subs_10", "subs_100", "views_1000"}

    def test_skips_unlocked(self, channel):
        channel.subscribers = 120
        channel.achievements.add("subs_10")
        assert evaluate_achievements(channel) == {"subs_100"}

    def test_does_not_mutate(self, channel):
        channel.subscribers = 50
        evaluate_achievements(channel)
        assert channel.achievements == set()
        assert channel.money == 0

    def test_earnings_not_money(self, channel):
        channel.money = 500
        assert "money_100" not in evaluate_achievements(channel)
        channel.total_earnings = 100
        assert "money_100" in evaluate_achievements(channel)


class TestGrant:
    def test_pays_money_once(self, channel):
        channel.subscribers = 10
        reward = grant_achievements(channel, evaluate_achievements(channel))
        assert reward.unlocked == ("subs_10",)
        assert channel.money == 10
        assert channel.total_earnings == 0

        again = grant_achievements(channel, {"subs_10"})
        assert again.unlocked == ()
        assert channel.money == 10

    def test_energy_reward_raises_max_energy(self, channel):
        reward = grant_achievements(channel, {"subs_1000"})
        assert channel.max_energy == 110
        assert channel.energy == 110
        assert reward.max_energy == 10
        assert reward.money == 200

    def test_energy_reward_on_drained_channel(self, channel):
        channel.energy = 30
        grant_achievements(channel, {"subs_1000", "subs_10000"})
        assert channel.max_energy == 130
        assert channel.energy == 60

    def test_reward_free_achievement(self, channel):
        reward = grant_achievements(channel, {"videos_1"})
        assert reward.unlocked == ("videos_1",)
        assert channel.money == 0

    def test_unknown_id(self, channel):
        with pytest.raises(ValueError):
            grant_achievements(channel, {"subs_7"})

    def test_sorted_unlock_order(self, channel):
        reward = grant_achievements(channel, {"watch_100", "subs_10", "views_1000"})
        assert reward.unlocked == ("subs_10", "views_1000", "watch_100")
        assert channel.money == 60


def test_progress(channel):
    channel.watch_hours = 50
    assert achievement_progress(channel, get_achievement("watch_100")) == (50, 100, 50.0)

    channel.watch_hours = 250
    _, _, pct = achievement_progress(channel, get_achievement("watch_100"))
    assert pct == 100.0


def test_progress_counts_videos(channel):
    _upload(channel, 5)
    current, target, pct = achievement_progress(channel, get_achievement("videos_10"))
    assert (current, target) == (5, 10)
    assert pct == pytest.approx(50.0)
