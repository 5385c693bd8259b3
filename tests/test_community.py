"""Tests for the community responder minigame."""
import random

import pytest

from studiosim.catalog import COMMENTS, CommentOption, GameComment
from studiosim.errors import SessionStateError
from studiosim.ledger import BoostKind
from studiosim.minigames import CommunitySession, SessionPhase


def _comment(n: int, points: int) -> GameComment:
    return GameComment(
        f"c{n}",
        "Viewer",
        "Nice video",
        "positive",
        (
            CommentOption("Thanks!", points, "Good", True),
            CommentOption("Whatever", -points, "Bad"),
        ),
    )


def _best_index(comment: GameComment) -> int:
    return max(range(len(comment.options)), key=lambda i: comment.options[i].points)


def _session(comments=COMMENTS, seed=1) -> CommunitySession:
    return CommunitySession("test", 1, random.Random(seed), comments=comments)


def test_draws_distinct_comments():
    session = _session()
    assert session.rounds == 5
    assert len({c.id for c in session.comments}) == 5


def test_rounds_limited_by_pool():
    session = _session(comments=[_comment(1, 3), _comment(2, 3)])
    assert session.rounds == 2


def test_best_answers_score():
    session = _session(seed=7)
    expected = 0
    while not session.is_complete:
        comment = session.current_comment
        option = session.respond(_best_index(comment))
        expected = min(expected + option.points, 25)
        assert option.is_correct
    assert session.phase is SessionPhase.COMPLETE
    assert session.score == expected
    assert session.current_comment is None


def test_score_capped():
    session = _session(comments=[_comment(i, 10) for i in range(5)])
    for _ in range(5):
        session.respond(0)
    assert session.score == 25


def test_cap_applies_while_playing():
    # 10 + 10 + 10 is capped at 25, then -10 drops to 15
    comments = [_comment(0, 10), _comment(1, 10), _comment(2, 10), _comment(3, 10), _comment(4, 10)]
    session = _session(comments=comments)
    for _ in range(3):
        session.respond(0)
    session.respond(1)
    assert session.score == 15


def test_negative_score_is_granted_as_is(channel):
    session = _session(comments=[_comment(i, 2) for i in range(5)])
    for _ in range(5):
        session.respond(1)
    grant = session.finalize(channel)
    assert grant.kind is BoostKind.COMMUNITY
    assert grant.amount == -10
    assert channel.boosts.community == -10


def test_bad_option_index():
    session = _session()
    with pytest.raises(SessionStateError):
        session.respond(3)
    with pytest.raises(SessionStateError):
        session.respond(-1)
    assert session.round == 0


def test_respond_after_complete():
    session = _session(comments=[_comment(0, 1)])
    session.respond(0)
    with pytest.raises(SessionStateError):
        session.respond(0)


def test_grant_stacks_with_pending(channel):
    channel.boosts.community = 20
    session = _session(comments=[_comment(i, 5) for i in range(5)])
    for _ in range(5):
        session.respond(0)
    session.finalize(channel)
    assert channel.boosts.community == 45


def test_ticking_does_not_end_round():
    session = _session()
    session.tick(30)
    assert session.phase is SessionPhase.ACTIVE
    assert session.round == 0


def test_snapshot_shows_comment():
    session = _session()
    snap = session.snapshot()
    assert snap["round"] == 1
    assert snap["rounds"] == 5
    assert snap["comment"]["id"] == session.comments[0].id
    assert len(snap["comment"]["options"]) == 3
