"""Tests for YAML configuration (config/settings.py)."""

import pytest
import yaml

from config.settings import Config, PlayConfig, load_config, save_config


class TestConfig:
    def test_defaults(self):
        config = Config()
        assert config.play.turn_delay == 1.0
        assert config.play.seed is None
        assert config.simulation.num_games == 1000
        assert config.logging.level == "WARNING"

    def test_save_and_load(self, tmp_path):
        config = Config()
        config.play = PlayConfig(turn_delay=0.0, seed=7, show_computer_hand=True)
        config.logging.log_file = "logs/go_fish.log"
        path = tmp_path / "nested" / "config.yaml"

        save_config(config, path)
        assert load_config(path) == config

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"simulation": {"num_games": 10}}))

        config = load_config(path)
        assert config.simulation.num_games == 10
        assert config.play == PlayConfig()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_unknown_section(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"rules": {"hand_size": 5}}))
        with pytest.raises(ValueError, match="rules"):
            load_config(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"play": {"hand_size": 5}}))
        with pytest.raises(ValueError, match="hand_size"):
            load_config(path)
