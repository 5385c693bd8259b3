"""Tests for the thumbnail optimizer minigame."""
import random

import pytest

from studiosim.catalog import ThumbnailComponent
from studiosim.errors import SessionStateError
from studiosim.ledger import BoostKind
from studiosim.minigames import SessionPhase, ThumbnailSession

# One component per category so every reel holds all three ids.
SIMPLE = (
    ThumbnailComponent("bg", "background", "Background", "good", 10),
    ThumbnailComponent("obj", "object", "Object", "bad", -5),
    ThumbnailComponent("txt", "text", "Text", "good", 30),
)


def _session(components=SIMPLE, seed=1) -> ThumbnailSession:
    return ThumbnailSession("test", 1, random.Random(seed), components=components)


def test_initial_state():
    session = _session()
    assert session.time_left == 45
    assert session.score == 0
    assert set(session.selected) == {"background", "object", "text"}
    assert {c.id for c in session.reel} == {"bg", "obj", "txt"}


def test_reel_size_capped():
    session = ThumbnailSession("test", 1, random.Random(3))
    for _ in range(10):
        assert 1 <= len(session.reel) <= 5
        session.tick(3)


class TestSelect:
    def test_adds_points(self):
        session = _session()
        session.select("bg")
        assert session.score == 10
        assert session.selected["background"].id == "bg"

    def test_replacing_uses_difference(self):
        components = SIMPLE + (ThumbnailComponent("bg2", "background", "Other", "neutral", 3),)
        session = _session(components=components)
        session.score = 10
        session.selected["background"] = components[0]
        session.reel = [components[3]]
        session.select("bg2")
        assert session.score == 3

    def test_floor_at_zero(self):
        session = _session()
        session.select("obj")
        assert session.score == 0

    def test_ceiling(self):
        session = _session()
        session.score = 45
        session.select("bg")
        assert session.score == 50

    def test_not_on_reel(self):
        session = _session()
        with pytest.raises(SessionStateError):
            session.select("obj_rocket")

    def test_after_time_is_up(self):
        session = _session()
        session.tick(45)
        with pytest.raises(SessionStateError):
            session.select("bg")


def test_ends_after_45_seconds():
    session = _session()
    session.tick(44)
    assert session.phase is SessionPhase.ACTIVE
    assert session.time_left == 1
    session.tick(1)
    assert session.phase is SessionPhase.COMPLETE
    assert session.time_left == 0


@pytest.mark.parametrize("score,boost", [(0, 0.0), (10, 0.01), (25, 0.025), (50, 0.05)])
def test_final_boost(score, boost):
    session = _session()
    session.score = score
    assert session.final_boost == pytest.approx(boost)


def test_scenario_d_additive_ctr(channel):
    channel.boosts.thumbnail_ctr = 0.01
    session = _session()
    session.score = 25
    session.tick(45)

    grant = session.finalize(channel)
    assert grant.kind is BoostKind.THUMBNAIL_CTR
    assert grant.amount == pytest.approx(0.025)
    assert channel.boosts.thumbnail_ctr == pytest.approx(0.035)


def test_snapshot():
    session = _session()
    session.select("txt")
    snap = session.snapshot()
    assert snap["score"] == 30
    assert snap["ctr_boost"] == pytest.approx(0.03)
    assert snap["selected"]["text"] == "txt"
    assert snap["selected"]["background"] is None
