from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Mapping, Optional

from ..utils.logging import env_requests_debug


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    app_title: str = "AgriTrack"
    remember_username: bool = True
    last_username: str = ""


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig()
        self.on_save = on_save
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def app_title(self) -> str:
        return self.config.app_title

    @app_title.setter
    def app_title(self, value: str) -> None:
        self.config = replace(self.config, app_title=self._coerce_title(value))

    @property
    def remember_username(self) -> bool:
        return self.config.remember_username

    @remember_username.setter
    def remember_username(self, value: bool) -> None:
        self.config = replace(self.config, remember_username=self._coerce_bool(value))

    @property
    def last_username(self) -> str:
        return self.config.last_username

    @last_username.setter
    def last_username(self, value: str) -> None:
        self.config = replace(self.config, last_username=self._coerce_optional_str(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_flat_keys = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_flat_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])
        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    def record_login(self, username: str) -> None:
        """Remember the last username when the preference is enabled."""
        if self.remember_username:
            self.last_username = username
        else:
            self.last_username = ""

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "app_title":
            return self._coerce_title(raw)
        if key == "remember_username":
            return self._coerce_bool(raw)
        if key == "last_username":
            return self._coerce_optional_str(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_title(value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("app_title must be a string.")
        return value.strip() or "AgriTrack"

    @staticmethod
    def _coerce_optional_str(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()


__all__ = ["SettingsConfig", "SettingsVM", "default_settings_payload"]
