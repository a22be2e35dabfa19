from __future__ import annotations

import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

CONFIG_DIR = Path.home() / ".svgpath"
CONFIG_FILE = CONFIG_DIR / "svgpath.cfg"
DEFAULT_CONFIG = {
    "_comment": "Valid angle_units: radians (default), degrees, turns. Value is case-insensitive.",
    "angle_units": "radians",
}
_UNIT_INFO: Dict[str, Dict[str, Any]] = {
    "radians": {"label": "rad", "scale_to_radians": 1.0},
    "degrees": {"label": "deg", "scale_to_radians": math.pi / 180.0},
    "turns": {"label": "turn", "scale_to_radians": 2.0 * math.pi},
}
_UNIT_ALIASES = {
    "rad": "radians",
    "radian": "radians",
    "radians": "radians",
    "deg": "degrees",
    "degree": "degrees",
    "degrees": "degrees",
    "turn": "turns",
    "turns": "turns",
}


@dataclass(frozen=True)
class UnitSettings:
    """Resolved angle units from svgpath.cfg."""

    name: str
    label: str
    scale_to_radians: float

    def to_radians(self, value: float) -> float:
        return value * self.scale_to_radians


def ensure_user_config() -> None:
    """Ensure ~/.svgpath/svgpath.cfg exists with sane defaults."""

    try:
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if CONFIG_FILE.exists():
        return

    try:
        CONFIG_FILE.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n")
    except OSError:
        return


def _load_user_config() -> Dict[str, Any]:
    ensure_user_config()
    try:
        loaded = json.loads(CONFIG_FILE.read_text())
    except (OSError, json.JSONDecodeError):
        return DEFAULT_CONFIG.copy()
    if not isinstance(loaded, dict):
        return DEFAULT_CONFIG.copy()
    return loaded


def normalize_units(value: str) -> str | None:
    key = value.strip().lower()
    if key in _UNIT_INFO:
        return key
    return _UNIT_ALIASES.get(key)


def unit_settings_for(name: str) -> UnitSettings:
    info = _UNIT_INFO[name]
    return UnitSettings(name=name, label=info["label"], scale_to_radians=info["scale_to_radians"])


def get_unit_settings() -> UnitSettings:
    """Return the configured angle units and their conversion to radians."""

    raw_config = _load_user_config()
    raw_units = str(raw_config.get("angle_units", DEFAULT_CONFIG["angle_units"]))
    normalized = normalize_units(raw_units)
    if normalized is None:
        normalized = DEFAULT_CONFIG["angle_units"]

    return unit_settings_for(normalized)
