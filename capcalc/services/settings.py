import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
from ..core.constants import DEFAULT_CONSTANTS, CapacityConstants
from ..version import SETTINGS_FILENAME
from ..utils.paths import app_data_dir
from .logger import get_logger


class SettingsManager:
    """JSON-backed settings: regional constant overrides and form preferences."""

    DEFAULTS: Dict[str, Any] = {
        "constants": {},
        "use_dimensions": False,
    }

    def __init__(self, path: Optional[Path] = None) -> None:
        self._log = get_logger()
        self._path: Path = Path(path) if path is not None else app_data_dir() / SETTINGS_FILENAME
        self._data: Dict[str, Any] = {}
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> None:
        if self._path.exists():
            try:
                self._data = json.loads(self._path.read_text(encoding="utf-8"))
                self._log.debug("Settings loaded: %s", self._data)
            except (OSError, ValueError) as e:
                self._log.exception("Failed to load settings, using defaults: %s", e)
                self._data = json.loads(json.dumps(self.DEFAULTS))
        else:
            self._data = json.loads(json.dumps(self.DEFAULTS))
            self.save()

    def save(self) -> None:
        try:
            self._path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
            self._log.debug("Settings saved to %s", self._path)
        except OSError as e:
            self._log.exception("Failed to save settings: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    # Convenience
    @property
    def use_dimensions(self) -> bool:
        return bool(self._data.get("use_dimensions", False))

    @use_dimensions.setter
    def use_dimensions(self, val: bool) -> None:
        self._data["use_dimensions"] = bool(val)
        self.save()

    def constants(self) -> CapacityConstants:
        """Default constants with the stored overrides applied.

        A broken override table is logged and ignored.
        """
        overrides = self._data.get("constants") or {}
        if not isinstance(overrides, Mapping):
            self._log.error("Ignoring constants overrides, expected an object: %r", overrides)
            return DEFAULT_CONSTANTS
        try:
            return DEFAULT_CONSTANTS.with_overrides(overrides)
        except (KeyError, ValueError) as e:
            self._log.error("Ignoring invalid constants overrides: %s", e)
            return DEFAULT_CONSTANTS

    def set_constant_overrides(self, overrides: Mapping[str, Any]) -> CapacityConstants:
        # Validate before persisting; raises KeyError/ValueError
        table = DEFAULT_CONSTANTS.with_overrides(overrides)
        self._data["constants"] = dict(overrides)
        self.save()
        self._log.info("Constants overrides updated: %s", dict(overrides))
        return table
