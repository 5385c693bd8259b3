"""Tests for the streamer sensation minigame."""
import random

import pytest

from studiosim.catalog import STREAM_PROMPTS
from studiosim.definition import StudioConfig
from studiosim.errors import SessionStateError
from studiosim.ledger import BoostKind, StreamBonus
from studiosim.minigames import MinigameKind, SessionPhase, StreamSession, start_minigame

PROMPTS = {p.id: p for p in STREAM_PROMPTS}


def _session(fixed_rng, *prompt_ids, config=None) -> StreamSession:
    prompts = [PROMPTS[i] for i in prompt_ids] or STREAM_PROMPTS
    return StreamSession(
        "test", 1, fixed_rng(), config=config or StudioConfig(), prompts=prompts
    )


def _until_prompt(session: StreamSession) -> None:
    while session.current_prompt is None:
        session.tick(1)


def test_countdown_then_live(fixed_rng):
    session = _session(fixed_rng)
    assert session.phase is SessionPhase.COUNTDOWN
    session.tick(2)
    assert session.phase is SessionPhase.COUNTDOWN
    session.tick(1)
    assert session.phase is SessionPhase.ACTIVE
    assert session.hype == 50
    assert session.time_left == 60
    # spawn delay uniform(5, 10) at 0.5
    assert session.next_prompt_in == pytest.approx(7.5)


def test_input_during_countdown(fixed_rng):
    session = _session(fixed_rng, "qc1")
    with pytest.raises(SessionStateError):
        session.click()


def test_hype_decays(fixed_rng):
    session = _session(fixed_rng, "qc1")
    session.tick(3 + 4)
    assert session.hype == 46
    assert session.time_left == 56


def test_prompt_spawns(fixed_rng):
    session = _session(fixed_rng, "qc1")
    session.tick(3 + 8)
    assert session.current_prompt.id == "qc1"
    assert session.prompt_time_left == 5
    assert session.hype == 42


def test_click_success(fixed_rng):
    session = _session(fixed_rng, "qc1")
    _until_prompt(session)
    assert session.react() is True
    assert session.hype == 54
    assert session.successful_interactions == 1
    assert session.current_prompt is None
    assert session.average_hype == 54


def test_no_prompt_waiting(fixed_rng):
    session = _session(fixed_rng, "qc1")
    session.tick(4)
    with pytest.raises(SessionStateError):
        session.click()


class TestKeyword:
    def test_match_ignores_case_and_spaces(self, fixed_rng):
        session = _session(fixed_rng, "kw1")
        _until_prompt(session)
        hype = session.hype
        assert session.type_keyword("  giveaway ") is True
        assert session.hype == hype + 15

    def test_typo_fails(self, fixed_rng):
        session = _session(fixed_rng, "kw1")
        _until_prompt(session)
        hype = session.hype
        assert session.react("giveway") is False
        assert session.hype == hype - 10
        assert session.failed_interactions == 1

    def test_react_needs_answer(self, fixed_rng):
        session = _session(fixed_rng, "kw1")
        _until_prompt(session)
        with pytest.raises(SessionStateError):
            session.react()


class TestEmoji:
    def test_correct(self, fixed_rng):
        session = _session(fixed_rng, "em1")
        _until_prompt(session)
        assert session.choose_emoji("🥳") is True

    def test_wrong(self, fixed_rng):
        session = _session(fixed_rng, "em1")
        _until_prompt(session)
        hype = session.hype
        assert session.react("😢") is False
        assert session.hype == hype - 5


def test_wrong_input_type(fixed_rng):
    session = _session(fixed_rng, "qc1")
    _until_prompt(session)
    with pytest.raises(SessionStateError):
        session.type_keyword("hi")
    assert session.current_prompt is not None


def test_expired_prompt_counts_as_failure(fixed_rng):
    session = _session(fixed_rng, "qc1", config=StudioConfig(hype_decay_per_second=0))
    _until_prompt(session)
    session.tick(5)
    assert session.current_prompt is None
    assert session.failed_interactions == 1
    assert session.hype == 42


def test_failure_on_interaction(fixed_rng):
    session = _session(fixed_rng, "qc1", config=StudioConfig(hype_decay_per_second=0))
    _until_prompt(session)
    session.hype = 30
    session.tick(5)
    assert session.phase is SessionPhase.FAILED


def test_hype_capped(fixed_rng):
    session = _session(fixed_rng, "qc2")
    _until_prompt(session)
    session.hype = 95
    session.click()
    assert session.hype == 100
    assert session.average_hype == 110
    assert session.stream_bonus().views_multiplier == pytest.approx(1.2)


def test_scenario_c_hype_collapse(channel, fixed_rng):
    previous = StreamBonus(1.1, 1.05, 1.02)
    channel.boosts.stream = previous
    session = start_minigame(MinigameKind.STREAM, channel, fixed_rng())
    session.tick(3)
    session.hype = 10
    session.tick(1)

    assert session.phase is SessionPhase.FAILED
    assert session.is_complete
    assert session.finalize(channel) is None
    assert channel.boosts.stream == previous


def test_full_stream_grants_bonus(channel, fixed_rng):
    config = StudioConfig(hype_decay_per_second=0)
    session = StreamSession("test", 1, fixed_rng(), config=config, prompts=[PROMPTS["qc1"]])
    while not session.is_complete:
        session.tick(1)
        if session.current_prompt is not None:
            session.click()

    assert session.phase is SessionPhase.COMPLETE
    assert session.successful_interactions > 0
    grant = session.finalize(channel)
    assert grant.kind is BoostKind.STREAM
    bonus = channel.boosts.stream
    assert 1.0 < bonus.views_multiplier <= 1.2
    assert 1.0 < bonus.subs_multiplier <= 1.15
    assert 1.0 < bonus.money_multiplier <= 1.1


def test_bonus_without_interactions(fixed_rng):
    session = _session(fixed_rng)
    bonus = session.stream_bonus()
    assert bonus.views_multiplier == pytest.approx(1.1)
    assert bonus.money_multiplier == pytest.approx(1.05)


def test_bonus_from_average_hype(fixed_rng):
    session = _session(fixed_rng, "qc1")
    _until_prompt(session)
    session.click()
    # average hype 54
    bonus = session.stream_bonus()
    assert bonus.views_multiplier == pytest.approx(1.11)
    assert bonus.subs_multiplier == pytest.approx(1.08)
    assert bonus.money_multiplier == pytest.approx(1.05)


def test_snapshot_prompt(fixed_rng):
    session = _session(fixed_rng, "em1")
    _until_prompt(session)
    snap = session.snapshot()
    assert snap["phase"] == "active"
    assert snap["prompt"]["type"] == "emoji_select"
    assert snap["prompt"]["emojis"] == ["🥳", "😢", "😠"]
