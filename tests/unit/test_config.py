import pytest
from PyQt6.QtCore import QSettings
from core.config import AppConfig


@pytest.fixture
def config():
    # Dedicated org/app name keeps the real configuration untouched
    settings = QSettings("EstateBook", "TestConfig")
    settings.clear()

    app_config = AppConfig()
    app_config.settings = settings
    return app_config


def test_defaults(config):
    assert config.get_log_level() == "INFO"
    assert config.get_log_components() == {}
    assert config.get_user_prefs_path().name == "preferences.json"
    assert config.get_user_prefs_path().parent == config.get_config_dir()


def test_set_get_values(config, tmp_path):
    config.set_log_level("debug")
    assert config.get_log_level() == "DEBUG"

    config.set_log_components({"storage": "DEBUG", "logic.parser": "WARNING"})
    assert config.get_log_components() == {"storage": "DEBUG", "logic.parser": "WARNING"}

    config.set_user_prefs_path(f"  {tmp_path / 'prefs.json'}  ")
    assert config.get_user_prefs_path() == tmp_path / "prefs.json"


def test_broken_components_fall_back_to_empty(config):
    config.settings.setValue("Logging/log_components", "{broken")
    assert config.get_log_components() == {}


def test_profile_isolates_directories():
    dev = AppConfig(profile="dev")
    assert dev.active_id == "estatebook-dev"
    assert dev.get_config_dir().name == "estatebook-dev"
    assert dev.get_data_dir().name == "estatebook-dev"
    assert dev.get_log_file_path() == dev.get_data_dir() / "estatebook.log"
    assert AppConfig().active_id == "estatebook"
