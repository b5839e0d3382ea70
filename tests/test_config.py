from __future__ import annotations

import json
from pathlib import Path

from cornerpath._config import CONFIG_NAME, DEFAULT_CONFIG, get_output_settings


def test_defaults_written_on_first_read(isolated_config_home: Path):
    settings = get_output_settings()
    assert settings.segments_per_circle == DEFAULT_CONFIG["segments_per_circle"]
    assert settings.svg_precision == DEFAULT_CONFIG["svg_precision"]
    written = json.loads((isolated_config_home / CONFIG_NAME).read_text())
    assert written["segments_per_circle"] == 64


def test_user_values_respected(isolated_config_home: Path):
    isolated_config_home.mkdir(parents=True)
    (isolated_config_home / CONFIG_NAME).write_text(json.dumps({"segments_per_circle": 128, "svg_precision": 2}))
    settings = get_output_settings()
    assert settings.segments_per_circle == 128
    assert settings.svg_precision == 2


def test_invalid_values_fall_back(isolated_config_home: Path):
    isolated_config_home.mkdir(parents=True)
    (isolated_config_home / CONFIG_NAME).write_text(json.dumps({"segments_per_circle": 2, "svg_precision": "many"}))
    settings = get_output_settings()
    assert settings.segments_per_circle == 64
    assert settings.svg_precision == 4


def test_corrupt_file_falls_back(isolated_config_home: Path):
    isolated_config_home.mkdir(parents=True)
    (isolated_config_home / CONFIG_NAME).write_text("{not json")
    assert get_output_settings().svg_precision == 4
