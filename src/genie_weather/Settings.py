from typing import Dict, Any, Optional
from pathlib import Path
import copy

import tomllib
import tomli_w


class Settings:
    DEFAULTS: Dict[str, Any] = {
        "display": {
            "port": "/dev/ttyAMA0",
            "baudrate": 115200,
            "read_timeout_ms": 100,
            "start_form": 0,
        },
        "timing": {
            "sample_interval_ms": 100,
            "event_timeout_ms": 100,
            "write_failure_log_interval_s": 5,
        },
        "widgets": {
            "temperature_history": 0,
            "minimum_history": 7,
            "maximum_history": 14,
            "pressure_history": 21,
            "temperature_thermometer": 0,
            "minimum_thermometer": 1,
            "maximum_thermometer": 2,
            "pressure_gauge": 0,
            "reset_minimum_button": 2,
            "reset_maximum_button": 6,
        },
    }

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = Path(path) if path else None
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if self.path is not None and self.path.exists():
            with self.path.open("rb") as file:
                raw = tomllib.load(file)
                self.settings = self._merge(copy.deepcopy(self.DEFAULTS), raw)
        else:
            self.settings = copy.deepcopy(self.DEFAULTS)

    def save(self) -> None:
        if self.path is None:
            raise ValueError("No settings path configured")

        with self.path.open("wb") as f:
            f.write(tomli_w.dumps(self._remove_none(self.settings)).encode("utf-8"))

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    def section(self, key: str) -> Dict[str, Any]:
        """Return a settings section, falling back to the defaults."""
        return self.settings.get(key, copy.deepcopy(self.DEFAULTS.get(key, {})))

    def _merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        for key, value in override.items():
            if (
                key in base
                and isinstance(base[key], dict)
                and isinstance(value, dict)
            ):
                base[key] = self._merge(base[key], value)
            else:
                base[key] = value
        return base

    def _remove_none(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._remove_none(v) for k, v in obj.items() if v is not None}
        elif isinstance(obj, list):
            return [self._remove_none(v) for v in obj if v is not None]
        else:
            return obj
