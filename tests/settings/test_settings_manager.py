import json

import pytest
from jsonschema import ValidationError

from filePreview.errors import SettingsLoadError, SettingsValidationError
from filePreview.settings.manager import SettingsManager, default_settings_path
from filePreview.settings.schema import DEFAULT_SETTINGS, merge_with_defaults


def test_load_creates_defaults(tmp_path):
    path = tmp_path / "settings.json"
    manager = SettingsManager(path)

    manager.load()

    assert json.loads(path.read_text()) == DEFAULT_SETTINGS
    assert manager.get("gallery.page_size") == 3
    assert manager.get("gallery.missing", "x") == "x"


def test_partial_file_is_merged(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"gallery": {"page_size": 6}}))
    manager = SettingsManager(path)

    manager.load()

    assert manager.get("gallery.page_size") == 6
    assert manager.get("gallery.empty_filter_policy") == "pass_through"


def test_invalid_values_are_rejected(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"gallery": {"empty_filter_policy": "show_some"}}))

    with pytest.raises(SettingsValidationError):
        SettingsManager(path).load()


def test_unreadable_file_raises_load_error(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{broken")

    with pytest.raises(SettingsLoadError):
        SettingsManager(path).load()


def test_set_validates_persists_and_notifies(tmp_path):
    path = tmp_path / "settings.json"
    manager = SettingsManager(path)
    manager.load()
    changes = []
    manager.settings_changed.connect(lambda key, value: changes.append((key, value)))

    manager.set("gallery.page_size", 9)
    with pytest.raises(SettingsValidationError):
        manager.set("gallery.page_size", 0)

    assert json.loads(path.read_text())["gallery"]["page_size"] == 9
    assert manager.get("gallery.page_size") == 9
    assert changes == [("gallery.page_size", 9)]


def test_set_without_persist_leaves_disk_alone(tmp_path):
    path = tmp_path / "settings.json"
    manager = SettingsManager(path)

    manager.set("gallery.size_decimals", 1, persist=False)

    assert manager.get("gallery.size_decimals") == 1
    assert not path.exists()


def test_merge_rejects_wrong_schema_tag():
    with pytest.raises(ValidationError):
        merge_with_defaults({"schema": "other@2"})


def test_default_path_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("filePreview.settings.manager.os.name", "posix")
    monkeypatch.setattr("filePreview.settings.manager.sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert default_settings_path() == tmp_path / "filePreview" / "settings.json"
