from __future__ import annotations

import os
from pathlib import Path

import pytest

from cornerpath._config import HOME_ENV_VAR

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def pytest_configure():
    os.environ.setdefault("PYVISTA_OFF_SCREEN", "true")


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep cornerpath.cfg reads and writes out of the real home directory."""

    home = tmp_path / "cornerpath-home"
    monkeypatch.setenv(HOME_ENV_VAR, str(home))
    return home


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT
