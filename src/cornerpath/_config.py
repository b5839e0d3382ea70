from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

HOME_ENV_VAR = "CORNERPATH_HOME"
CONFIG_NAME = "cornerpath.cfg"
DEFAULT_CONFIG: Dict[str, Any] = {
    "_comment": "segments_per_circle controls arc flattening (>= 3); svg_precision is the decimal places written to SVG.",
    "segments_per_circle": 64,
    "svg_precision": 4,
}


@dataclass(frozen=True)
class OutputSettings:
    """Resolved sampling and output defaults from cornerpath.cfg."""

    segments_per_circle: int
    svg_precision: int


def config_dir() -> Path:
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".cornerpath"


def config_file() -> Path:
    return config_dir() / CONFIG_NAME


def ensure_user_config() -> None:
    """Ensure the config file exists with sane defaults."""

    directory = config_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    path = directory / CONFIG_NAME
    if path.exists():
        return

    try:
        path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        data = json.loads(config_file().read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(data, dict):
        return DEFAULT_CONFIG.copy()
    return data


def _int_setting(raw_config: Dict[str, Any], key: str, minimum: int) -> int:
    default = int(DEFAULT_CONFIG[key])
    try:
        value = int(raw_config.get(key, default))
    except (TypeError, ValueError):
        return default
    if value < minimum:
        return default
    return value


def get_output_settings() -> OutputSettings:
    """Return the configured sampling resolution and SVG precision."""

    raw_config = _load_user_config()
    return OutputSettings(
        segments_per_circle=_int_setting(raw_config, "segments_per_circle", 3),
        svg_precision=_int_setting(raw_config, "svg_precision", 0),
    )
