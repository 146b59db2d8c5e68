"""Logic for loading and merging scan configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from analysis_core.deep_merge import deep_merge
from analysis_core.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "scan": {
        "pattern": "",
        "module_name": "",
        "maven_build": False,
        "ant_build": False,
        "use_module_index": False,
    },
    "excludes": [],
    "logging": {
        "level": "INFO",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                msg = f"Invalid YAML in configuration file {p}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"Configuration file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    return config
