"""Tests for definition module."""
import pytest

from studiosim.definition import DEFAULT_CONFIG, StudioConfig


def test_default_config_is_valid():
    assert DEFAULT_CONFIG.validate() == []


def test_upload_energy_cost():
    config = StudioConfig()
    assert config.upload_energy_cost(False) == 25
    assert config.upload_energy_cost(True) == pytest.approx(20)


def test_channel_slots():
    assert DEFAULT_CONFIG.max_channel_slots(False) == 3
    assert DEFAULT_CONFIG.max_channel_slots(True) == 4


@pytest.mark.parametrize(
    "overrides,fragment",
    [
        ({"base_views": -1}, "base_views must be non-negative"),
        ({"viral_chance": 1.5}, "viral_chance"),
        ({"premium_energy_discount": 1.0}, "premium_energy_discount"),
        ({"sub_rate_min": 0.05}, "sub_rate_min must not exceed sub_rate_max"),
        ({"energy_per_video": 0}, "energy_per_video must be positive"),
        ({"community_rounds": 0}, "community_rounds"),
        ({"hype_initial": 10}, "hype_initial"),
        ({"max_channels_premium": 1}, "max_channels_premium"),
    ],
)
def test_validate_reports(overrides, fragment):
    errors = StudioConfig(**overrides).validate()
    assert any(fragment in e for e in errors), errors


def test_dict_round_trip():
    config = StudioConfig(name="Tuned", viral_chance=0.1)
    assert StudioConfig.from_dict(config.to_dict()) == config


def test_from_dict_partial():
    config = StudioConfig.from_dict({"energy_per_video": 30})
    assert config.energy_per_video == 30
    assert config.energy_regen_per_day == 50


def test_from_dict_unknown_key():
    with pytest.raises(ValueError, match="Unknown config keys: bogus"):
        StudioConfig.from_dict({"bogus": 1})
