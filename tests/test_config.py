"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from config import AppConfig, GameConfig, SoundConfig, _parse_bool, _parse_seed


class TestGameConfig:
    """Tests for table rules."""

    def test_defaults(self):
        assert GameConfig().dealer_stands_on == 17

    def test_threshold_may_equal_blackjack(self):
        assert GameConfig(dealer_stands_on=21).dealer_stands_on == 21

    def test_rejects_threshold_above_blackjack(self):
        with pytest.raises(ValueError):
            GameConfig(dealer_stands_on=22)

    def test_rejects_non_positive_threshold(self):
        with pytest.raises(ValueError):
            GameConfig(dealer_stands_on=0)


class TestSoundConfig:
    """Tests for audio settings."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = SoundConfig()
        assert settings.enabled
        assert settings.volume == pytest.approx(0.8)
        assert settings.sample_rate == 44100

    def test_reads_env(self):
        with patch.dict(os.environ, {"BLACKJACK_SOUND": "off", "BLACKJACK_VOLUME": "0.25"}):
            settings = SoundConfig()
        assert not settings.enabled
        assert settings.volume == pytest.approx(0.25)

    def test_rejects_bad_volume(self):
        with pytest.raises(ValueError):
            SoundConfig(volume=1.5)


class TestAppConfig:
    """Tests for application settings."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = AppConfig()
        assert not settings.debug
        assert settings.log_level == "INFO"
        assert settings.seed is None
        assert settings.dealer_delay == pytest.approx(0.6)
        assert settings.game == GameConfig()

    def test_reads_env(self):
        env = {
            "DEBUG": "true",
            "LOG_LEVEL": "warning",
            "BLACKJACK_SEED": "1234",
            "BLACKJACK_DEALER_DELAY": "0",
        }
        with patch.dict(os.environ, env):
            settings = AppConfig()
        assert settings.debug
        assert settings.log_level == "WARNING"
        assert settings.seed == 1234
        assert settings.dealer_delay == 0

    def test_rejects_negative_delay(self):
        with pytest.raises(ValueError):
            AppConfig(dealer_delay=-1)

    def test_bad_seed_raises(self):
        with patch.dict(os.environ, {"BLACKJACK_SEED": "abc"}):
            with pytest.raises(ValueError):
                _parse_seed()


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("no", False), ("", False)],
)
def test_parse_bool(raw, expected):
    with patch.dict(os.environ, {"FLAG": raw}):
        assert _parse_bool("FLAG", "false") is expected
