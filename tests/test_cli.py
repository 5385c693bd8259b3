"""Tests for the command line interface."""
import json

import pytest

from studiosim.cli import build_strategy, load_config, main
from studiosim.storage import ChannelStore
from studiosim.strategy import GreedyUploader, SaveForBest


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 0
    assert "simulate" in capsys.readouterr().out


def test_simulate(capsys):
    main(["simulate", "--days", "3", "--seed", "1"])
    out = capsys.readouterr().out
    assert "Studio Simulation Report" in out
    assert "Strategy: GreedyUploader" in out


def test_simulate_with_minigames_and_export(tmp_path, capsys):
    json_path = tmp_path / "report.json"
    main([
        "simulate", "--days", "2", "--seed", "4", "--strategy", "save_for_best",
        "--minigames", "--accuracy", "0.5", "--export-json", str(json_path),
    ])
    out = capsys.readouterr().out
    assert "MINIGAMES:" in out
    assert json.loads(json_path.read_text())["days"] == 2


def test_monte_carlo(capsys):
    main(["simulate", "--days", "2", "--seed", "1", "--monte-carlo", "2"])
    assert "Monte Carlo: 2 runs of 2 days" in capsys.readouterr().out


def test_build_strategy():
    strategy = build_strategy("save_for_best", minigames=True, accuracy=0.7)
    assert isinstance(strategy, SaveForBest)
    assert strategy.skill.accuracy == 0.7
    assert isinstance(build_strategy("greedy", False, 1.0), GreedyUploader)
    assert build_strategy("greedy", False, 1.0).skill is None


class TestLoadConfig:
    def test_default(self):
        assert load_config(None).energy_per_video == 25

    def test_overrides(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"name": "Fast", "monetization_subscribers": 100}))
        config = load_config(str(path))
        assert config.name == "Fast"
        assert config.monetization_subscribers == 100

    def test_unknown_key_exits(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"nope": 1}))
        with pytest.raises(SystemExit) as exc:
            load_config(str(path))
        assert exc.value.code == 1
        assert "nope" in capsys.readouterr().err

    def test_invalid_value_exits(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"viral_chance": 3}))
        with pytest.raises(SystemExit):
            load_config(str(path))
        assert "viral_chance" in capsys.readouterr().err


class TestPlay:
    def _play(self, store_path, *args):
        main(["play", "--store", str(store_path), "--seed", "1", *args])

    def test_turn_by_turn(self, tmp_path, capsys):
        store_path = tmp_path / "save.json"
        self._play(store_path, "new", "Pixel Plays")
        self._play(store_path, "upload", "First video", "--genre", "Gaming", "--sub-genre", "Minecraft")
        out = capsys.readouterr().out
        assert "Pixel Plays" in out
        assert "Uploaded 'First video'" in out
        assert "Achievement unlocked: videos_1" in out

        self._play(store_path, "next-day")
        assert "Day 2:" in capsys.readouterr().out

        channel = ChannelStore(store_path).list_channels()[0]
        assert channel.day == 2
        assert channel.videos_uploaded == 1

    def test_list_and_status(self, tmp_path, capsys):
        store_path = tmp_path / "save.json"
        self._play(store_path, "new", "A")
        self._play(store_path, "list")
        self._play(store_path, "status")
        out = capsys.readouterr().out
        assert "* " in out
        assert "Energy: 100/100" in out

    def test_validation_error_exits(self, tmp_path, capsys):
        store_path = tmp_path / "save.json"
        self._play(store_path, "new", "Broke")
        with pytest.raises(SystemExit) as exc:
            self._play(store_path, "upgrade", "camera")
        assert exc.value.code == 1
        assert "Cannot afford" in capsys.readouterr().err

    def test_missing_sub_genre(self, tmp_path, capsys):
        store_path = tmp_path / "save.json"
        self._play(store_path, "new", "Music")
        with pytest.raises(SystemExit):
            self._play(store_path, "upload", "Song", "--genre", "Music")
        assert "requires a sub-genre" in capsys.readouterr().err

    def test_no_channel(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            self._play(tmp_path / "save.json", "status")
        assert exc.value.code == 1
