from typing import Dict, Any, Optional
from pathlib import Path
import copy

import tomllib
import tomli_w


class Settings:
    DEFAULTS: Dict[str, Any] = {
        "ports": {
            "command": 5002,
            "discovery": 5003,
        },
        "broadcast_address": "255.255.255.255",
        "bind_address": "0.0.0.0",
        "guide_rate": {
            "ra": 0.7,
            "dec": 0.7,
        },
        "receive_timeout_ms": 100,
    }

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = Path(path) if path else None
        self.settings: Dict[str, Any] = {}
        self.load()

    def load(self) -> None:
        if self.path is not None and self.path.exists():
            with self.path.open("rb") as file:
                loaded = tomllib.load(file)
                self.settings = self._merge(copy.deepcopy(self.DEFAULTS), loaded)
        else:
            self.settings = copy.deepcopy(self.DEFAULTS)

    def dumps(self) -> str:
        """Effective settings as TOML, defaults included."""
        return tomli_w.dumps(self.settings)

    def get(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.settings[key] = value

    @property
    def command_port(self) -> int:
        return int(self.settings["ports"]["command"])

    @property
    def discovery_port(self) -> int:
        return int(self.settings["ports"]["discovery"])

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
