# tests/test_config.py

import json

import pytest

from core.config import Config
from core.response import ErrorCode
from models.student import Grade
from models.user_prefs import GuiSettings, UserPrefs

# === config ===


def test_config_defaults():
    config = Config()

    assert config.log_level == "INFO"
    assert config.user_prefs_file_path == "preferences.json"
    assert config.starting_view == "all"


def test_missing_config_file_uses_defaults(tmp_path):
    response = Config.load(str(tmp_path / "config.json"))

    assert response.success
    assert response.data["config"] == Config()


def test_config_save_then_load(tmp_path):
    path = str(tmp_path / "config.json")
    config = Config(log_level="debug", starting_view="Weak")

    assert config.save(path).success

    loaded = Config.load(path).data["config"]
    assert loaded == config
    assert loaded.log_level == "DEBUG"
    assert loaded.starting_view == "weak"


def test_partial_config_file_fills_in_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"starting_view": "weak"}), encoding="utf-8")

    config = Config.load(str(path)).data["config"]

    assert config.starting_view == "weak"
    assert config.log_level == "INFO"


@pytest.mark.parametrize(
    "data",
    [{"log_level": "LOUD"}, {"starting_view": "archived"}, {"user_prefs_file_path": " "}],
)
def test_invalid_config_value_fails(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")

    response = Config.load(str(path))

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE


def test_config_file_that_is_not_an_object_fails(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[]", encoding="utf-8")

    response = Config.load(str(path))

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT


# === gui settings ===


def test_gui_settings_position():
    assert GuiSettings().position is None
    assert GuiSettings(100, 30, 5, 10).position == (5, 10)


def test_gui_settings_too_small_rejected():
    with pytest.raises(ValueError):
        GuiSettings(width=20)


# === user prefs ===


def test_user_prefs_in_directory(tmp_path):
    prefs = UserPrefs.in_directory(str(tmp_path))

    assert prefs.students_file_path == str(tmp_path / "students.json")
    assert prefs.archive_file_path == str(tmp_path / "archive.json")
    assert prefs.weak_threshold is Grade.C


def test_user_prefs_save_then_load(tmp_path):
    path = str(tmp_path / "preferences.json")
    prefs = UserPrefs(
        gui_settings=GuiSettings(120, 40, 0, 0),
        weak_threshold="b-",
    )

    assert prefs.save(path).success

    loaded = UserPrefs.load(path).data["prefs"]
    assert loaded == prefs
    assert loaded.weak_threshold is Grade.B_MINUS
    assert loaded.gui_settings.width == 120


def test_missing_prefs_file_uses_given_default(tmp_path):
    default = UserPrefs.in_directory(str(tmp_path))

    response = UserPrefs.load(str(tmp_path / "preferences.json"), default)

    assert response.success
    assert response.data["prefs"] is default


def test_prefs_with_invalid_threshold_fails(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text(json.dumps({"weak_threshold": "Q"}), encoding="utf-8")

    response = UserPrefs.load(str(path))

    assert not response.success
    assert response.error is ErrorCode.INVALID_FIELD_VALUE


def test_prefs_with_corrupt_json_fails(tmp_path):
    path = tmp_path / "preferences.json"
    path.write_text("{", encoding="utf-8")

    response = UserPrefs.load(str(path))

    assert not response.success
    assert response.error is ErrorCode.INVALID_INPUT
