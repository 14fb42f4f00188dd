from __future__ import annotations

import json
import logging
import os
from typing import Dict

from agritrack.viewmodels.settings_vm import SettingsVM, default_settings_payload


class StorageLocal:
    """Local filesystem storage for persisted user settings (JSON)."""

    SETTINGS_FILE = "user_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir
        self._log = logging.getLogger(__name__)

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, self.SETTINGS_FILE)

    def save_user_settings(self, payload: Dict) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self.settings_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)

    def load_user_settings(self) -> Dict:
        """Return persisted settings, or the defaults when nothing is saved."""
        path = self.settings_path
        if not os.path.exists(path):
            return default_settings_payload()
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object.")
        return data

    def load_into(self, settings_vm: SettingsVM) -> None:
        """Apply stored settings; a broken file is logged and defaults kept."""
        try:
            settings_vm.apply_dict(self.load_user_settings())
        except (OSError, ValueError) as exc:
            self._log.warning("Ignoring unreadable settings at %s: %s", self.settings_path, exc)
