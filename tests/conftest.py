from __future__ import annotations

from pathlib import Path

import pytest

from svgpath import _config

PROJECT_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(autouse=True)
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config at a throwaway directory."""
    config_dir = tmp_path / ".svgpath"
    monkeypatch.setattr(_config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(_config, "CONFIG_FILE", config_dir / "svgpath.cfg")
    return config_dir / "svgpath.cfg"


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT
