"""Tests for settings defaults, environment overrides and validation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from badger.config import ADDRESS_WETH, AppSettings, BadgeSettings, TrackerSettings


class TestBadgeSettings:
    def test_defaults(self) -> None:
        settings = BadgeSettings()
        assert settings.badge_id == "1"
        assert settings.name == "Winter"
        assert settings.delta_threshold == Decimal("-0.05")
        assert settings.minimum_streak_length == 3
        assert settings.active_from == 18385
        assert settings.active_until == -1

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BADGE_DELTA_THRESHOLD", "0.1")
        monkeypatch.setenv("BADGE_MINIMUM_STREAK_LENGTH", "5")
        settings = BadgeSettings()
        assert settings.delta_threshold == Decimal("0.1")
        assert settings.minimum_streak_length == 5

    def test_minimum_streak_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            BadgeSettings(minimum_streak_length=0)


class TestTrackerSettings:
    def test_defaults_to_weth(self) -> None:
        assert TrackerSettings().asset_id == ADDRESS_WETH

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TRACKER_ASSET_ID", "0xabc")
        assert TrackerSettings().asset_id == "0xabc"


class TestAppSettings:
    def test_composes_sub_settings(self) -> None:
        settings = AppSettings()
        assert settings.log_level == "INFO"
        assert isinstance(settings.badge, BadgeSettings)
        assert settings.storage.db_path == "data/badger.db"
