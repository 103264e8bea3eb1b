"""Tests for settings resolution."""

from pocketnotes_app.config import get_settings


class TestSettings:
    def test_defaults_under_data_dir(self, isolated_env):
        settings = get_settings()
        assert settings.data_dir == isolated_env.resolve()
        assert settings.data_dir.is_dir()
        assert settings.notes_dir == isolated_env.resolve() / "notes"
        assert settings.log_file == isolated_env.resolve() / "pocketnotes.log"
        assert settings.log_level == "WARNING"
        assert not settings.json_logs

    def test_relative_notes_dir_resolves_against_data_dir(self, isolated_env, monkeypatch):
        monkeypatch.setenv("NOTES_DIR", "3ds.md")
        get_settings.cache_clear()
        assert get_settings().notes_dir == isolated_env.resolve() / "3ds.md"

    def test_absolute_notes_dir(self, isolated_env, monkeypatch, tmp_path):
        monkeypatch.setenv("NOTES_DIR", str(tmp_path / "elsewhere"))
        get_settings.cache_clear()
        assert get_settings().notes_dir == (tmp_path / "elsewhere").resolve()

    def test_log_options(self, isolated_env, monkeypatch):
        monkeypatch.setenv("LOG_FILE", "-")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")
        get_settings.cache_clear()
        settings = get_settings()
        assert settings.log_file is None
        assert settings.log_level == "DEBUG"
        assert settings.json_logs

    def test_settings_are_cached(self, isolated_env):
        assert get_settings() is get_settings()
