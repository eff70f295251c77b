"""Settings loading: TOML file, then environment overrides."""
from __future__ import annotations

import copy
import os
import tomllib
from pathlib import Path
from typing import Any, Dict

DEFAULT_SETTINGS_PATH = Path("config/settings.toml")
DEFAULT_LOGGING_PATH = Path("config/logging.yaml")

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "upstream": {
        "base_url": "https://goout.net",
        "timeout_seconds": 10.0,
        "user_agent": "venuecal/0.1 (+https://github.com/venuecal/venuecal)",
    },
    "server": {
        "host": "0.0.0.0",
        "port": 3000,
    },
    "cli": {
        "default_language": "en",
    },
}

# env var -> (section, key, type)
ENV_OVERRIDES = {
    "VENUECAL_BASE_URL": ("upstream", "base_url", str),
    "VENUECAL_TIMEOUT_SECONDS": ("upstream", "timeout_seconds", float),
    "VENUECAL_USER_AGENT": ("upstream", "user_agent", str),
    "VENUECAL_HOST": ("server", "host", str),
    "VENUECAL_PORT": ("server", "port", int),
}


def load_settings(path: Path = DEFAULT_SETTINGS_PATH) -> Dict[str, Dict[str, Any]]:
    """Read the TOML configuration file merged over the built-in defaults."""
    settings = copy.deepcopy(DEFAULTS)
    if path.exists():
        with path.open("rb") as handle:
            loaded = tomllib.load(handle)
        for section, values in loaded.items():
            if isinstance(values, dict):
                settings.setdefault(section, {}).update(values)

    for name, (section, key, cast) in ENV_OVERRIDES.items():
        raw = os.environ.get(name)
        if raw:
            settings[section][key] = cast(raw)
    return settings
