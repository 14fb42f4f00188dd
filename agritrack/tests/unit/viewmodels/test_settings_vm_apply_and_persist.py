from __future__ import annotations

import json
from pathlib import Path

import pytest

from agritrack.adapters.storage_local import StorageLocal
from agritrack.viewmodels.settings_vm import SettingsVM, default_settings_payload


def test_apply_dict_updates_flat_keys() -> None:
    vm = SettingsVM()
    vm.apply_dict(
        {
            "app_title": "  FarmDesk ",
            "remember_username": "no",
            "last_username": " seller ",
            "debug_logging": "true",
        }
    )

    assert vm.app_title == "FarmDesk"
    assert vm.remember_username is False
    assert vm.last_username == "seller"
    assert vm.debug_logging is True


def test_apply_dict_rejects_unknown_keys() -> None:
    vm = SettingsVM()
    with pytest.raises(ValueError, match="Unsupported settings keys: window_size"):
        vm.apply_dict({"window_size": "800x600"})


def test_apply_dict_rejects_non_mapping_and_bad_title() -> None:
    vm = SettingsVM()
    with pytest.raises(ValueError):
        vm.apply_dict(["app_title"])  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        vm.apply_dict({"app_title": 42})


def test_blank_title_falls_back_to_default() -> None:
    vm = SettingsVM()
    vm.app_title = "   "
    assert vm.app_title == "AgriTrack"


def test_record_login_honours_preference() -> None:
    vm = SettingsVM()
    vm.record_login("buyer")
    assert vm.last_username == "buyer"

    vm.remember_username = False
    vm.record_login("admin")
    assert vm.last_username == ""


def test_cmd_save_hands_snapshot_to_callback() -> None:
    saved = []
    vm = SettingsVM(on_save=saved.append)
    vm.last_username = "admin"
    vm.cmd_save()
    assert saved == [vm.to_dict()]
    assert saved[0]["last_username"] == "admin"


def test_storage_local_defaults_and_roundtrip(tmp_path: Path) -> None:
    storage = StorageLocal(root_dir=str(tmp_path))
    assert storage.load_user_settings() == default_settings_payload()
    settings_path = tmp_path / "user_settings.json"
    assert not settings_path.exists()

    vm = SettingsVM()
    vm.apply_dict({"app_title": "FarmDesk", "last_username": "seller", "debug_logging": False})
    storage.save_user_settings(vm.to_dict())

    with settings_path.open("r", encoding="utf-8") as fh:
        persisted = json.load(fh)
    assert persisted == vm.to_dict()

    restored = SettingsVM()
    storage.load_into(restored)
    assert restored.to_dict() == vm.to_dict()
