"""
Unit tests for engine/config/settings.py
"""

import pytest
from pydantic import ValidationError

from engine.config import PROJECT_ROOT, Settings
from engine.fitting import FitMode


class TestSettingsDefaults:

    def test_default_height_fit_mode(self):
        assert Settings().height_fit_mode is FitMode.INSIDE

    def test_default_radius_fit_mode(self):
        assert Settings().radius_fit_mode is FitMode.INSIDE

    def test_default_log_level(self):
        assert Settings().log_level == "INFO"

    def test_project_root_holds_engine_package(self):
        assert (PROJECT_ROOT / "engine").is_dir()


class TestSettingsEnvironment:

    def test_env_overrides_radius_mode(self, monkeypatch):
        monkeypatch.setenv("COLLIDER_RADIUS_FIT_MODE", "outside")
        assert Settings().radius_fit_mode is FitMode.OUTSIDE

    def test_env_overrides_log_level(self, monkeypatch):
        monkeypatch.setenv("COLLIDER_LOG_LEVEL", "DEBUG")
        assert Settings().log_level == "DEBUG"

    def test_env_fit_mode_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("COLLIDER_RADIUS_FIT_MODE", "Outside")
        monkeypatch.setenv("COLLIDER_HEIGHT_FIT_MODE", "MIDWAY")
        s = Settings()
        assert s.radius_fit_mode is FitMode.OUTSIDE
        assert s.height_fit_mode is FitMode.MIDWAY

    def test_unknown_env_fit_mode_rejected(self, monkeypatch):
        monkeypatch.setenv("COLLIDER_RADIUS_FIT_MODE", "sideways")
        with pytest.raises(ValidationError):
            Settings()
