"""Tests for monetization module."""
import pytest

from studiosim.definition import StudioConfig
from studiosim.errors import NotEligible
from studiosim.monetization import (
    activate_monetization,
    evaluate_monetization,
    latch_monetization,
)


@pytest.mark.parametrize(
    "subs,hours,expected",
    [
        (0, 0, False),
        (1000, 999.99, False),
        (999, 1000, False),
        (1000, 1000, True),
        (25000, 4000.5, True),
    ],
)
def test_evaluate(channel, subs, hours, expected):
    channel.subscribers = subs
    channel.watch_hours = hours
    assert evaluate_monetization(channel) is expected
    assert not channel.is_monetized


def test_latch_fires_once(channel):
    channel.subscribers = 1000
    channel.watch_hours = 1000
    assert latch_monetization(channel) is True
    assert channel.is_monetized
    assert latch_monetization(channel) is False


def test_latch_never_reverts(channel):
    channel.is_monetized = True
    assert latch_monetization(channel) is False
    assert channel.is_monetized


def test_latch_ignores_ineligible(channel):
    channel.subscribers = 5000
    assert latch_monetization(channel) is False
    assert not channel.is_monetized


def test_activate_requires_eligibility(channel):
    channel.subscribers = 1000
    with pytest.raises(NotEligible):
        activate_monetization(channel)
    assert not channel.is_monetized


def test_activate(channel):
    channel.subscribers = 1000
    channel.watch_hours = 1200
    assert activate_monetization(channel) is True
    assert activate_monetization(channel) is False


def test_custom_thresholds(channel):
    config = StudioConfig(monetization_subscribers=10, monetization_watch_hours=1)
    channel.subscribers = 10
    channel.watch_hours = 1
    assert activate_monetization(channel, config)
