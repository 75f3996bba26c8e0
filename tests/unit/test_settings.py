"""
Configuration and environment loader tests.
"""
import pytest
from app.config.loader import ConfigLoader, load_config_for_environment
from app.config.settings import (
    DEFAULT_ZOOM_RADIUS_TABLE,
    Environment,
    LogFormat,
    MapSettings,
    Settings,
    get_settings,
    reload_settings,
)
from run import export_runtime_environment


def test_default_map_settings():
    map_settings = MapSettings()
    assert map_settings.zoom_radius_table == DEFAULT_ZOOM_RADIUS_TABLE
    assert map_settings.default_zoom == 13


def test_default_table_is_copied():
    map_settings = MapSettings()
    map_settings.zoom_radius_table[99] = 1
    assert 99 not in DEFAULT_ZOOM_RADIUS_TABLE


def test_zoom_table_from_env_json(monkeypatch):
    monkeypatch.setenv("MAP_ZOOM_RADIUS_TABLE", '{"5": 80000, "10": 5000}')
    assert MapSettings().zoom_radius_table == {5: 80000, 10: 5000}


def test_map_defaults_from_env(monkeypatch):
    monkeypatch.setenv("MAP_DEFAULT_ZOOM", "11")
    monkeypatch.setenv("MAP_DEFAULT_LATITUDE", "48.1")
    map_settings = Settings().map
    assert map_settings.default_zoom == 11
    assert map_settings.default_latitude == 48.1


def test_environment_is_case_insensitive():
    assert Settings(environment="PRODUCTION").is_production()
    assert Settings(environment="development").is_development()


def test_cors_origins_parsed_from_string(monkeypatch):
    monkeypatch.setenv("SECURITY_CORS_ORIGINS", "http://localhost:4200, http://localhost:5000")
    cors = Settings().get_cors_config()
    assert cors["allow_origins"] == ["http://localhost:4200", "http://localhost:5000"]
    assert cors["allow_methods"] == ["GET"]


def test_reload_settings_replaces_global(monkeypatch):
    monkeypatch.setenv("APP_NAME", "Reloaded Map Service")
    try:
        assert reload_settings().app_name == "Reloaded Map Service"
        assert get_settings().app_name == "Reloaded Map Service"
    finally:
        monkeypatch.delenv("APP_NAME")
        reload_settings()


class TestConfigLoader:

    def test_missing_env_file_falls_back_to_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = load_config_for_environment("staging")
        assert settings.environment == Environment.STAGING
        assert settings.port == 8000

    def test_environment_from_env_var(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ENVIRONMENT", "testing")
        assert ConfigLoader.load_environment_config().environment == Environment.TESTING

    def test_env_file_is_read(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env.production").write_text("PORT=9100\nDEBUG=false\n")
        settings = ConfigLoader.load_environment_config("production")
        assert settings.port == 9100
        assert settings.environment == Environment.PRODUCTION

    def test_env_file_reaches_nested_settings(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env.staging").write_text(
            "APP_NAME=Staging Map Service\n"
            "LOG_FORMAT=text\n"
            "MAP_DEFAULT_ZOOM=5\n"
            'MAP_ZOOM_RADIUS_TABLE={"5": 80000, "10": 5000}\n'
            "SECURITY_CORS_ORIGINS=*\n"
        )
        settings = ConfigLoader.load_environment_config("staging")
        assert settings.app_name == "Staging Map Service"
        assert settings.log_format == LogFormat.TEXT
        assert settings.map.default_zoom == 5
        assert settings.map.zoom_radius_table == {5: 80000, 10: 5000}
        assert settings.security.cors_origins == ["*"]

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValueError):
            ConfigLoader.load_environment_config("qa")

    def test_available_environments(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env.staging").write_text("")
        (tmp_path / ".env.development").write_text("")
        (tmp_path / ".env.production.sample").write_text("")
        assert ConfigLoader.get_available_environments() == ["development", "staging"]

    def test_validate_environment_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert not ConfigLoader.validate_environment_config("staging")
        (tmp_path / ".env.staging").write_text("PORT=8100\n")
        assert ConfigLoader.validate_environment_config("staging")
        assert not ConfigLoader.validate_environment_config("qa")

    def test_create_sample_env_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = ConfigLoader.create_sample_env_file("production")
        assert path == ".env.production.sample"
        content = (tmp_path / path).read_text()
        assert "ENVIRONMENT=production" in content
        assert "WORKERS=4" in content
        assert 'MAP_ZOOM_RADIUS_TABLE={"9": 50000' in content


def test_exported_environment_is_loaded_by_worker_processes(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    # registered first so teardown restores the original values
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("DEBUG", "false")

    export_runtime_environment(Settings(environment="production", debug=True))

    settings = load_config_for_environment()
    assert settings.environment == Environment.PRODUCTION
    assert settings.debug is True
