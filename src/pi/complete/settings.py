"""Completion settings loaded from the global and project ``settings.json``.

Settings live under the ``"completion"`` key. Project settings override
global ones field by field:

    {
      "completion": {
        "columnMargin": 2,
        "maxHeight": 10,
        "selectedStyle": "7",
        "modeLineStyle": "1;7",
        "keybindings": {"completionCancel": ["escape", "ctrl+c"]}
      }
    }
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pi.complete.grid import COLUMN_MARGIN, STYLE_FOR_SELECTED
from pi.complete.keybindings import (
    DEFAULT_COMPLETION_KEYBINDINGS,
    CompletionKeybindingsConfig,
)

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pi"
SETTINGS_SECTION = "completion"


class SettingsError(ValueError):
    """A completion setting has an unusable value."""


@dataclass
class CompletionSettings:
    column_margin: int = COLUMN_MARGIN
    max_height: int = 10
    selected_style: str = STYLE_FOR_SELECTED
    mode_line_style: str = "1;7"
    keybindings: CompletionKeybindingsConfig = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CompletionSettings:
        """Build settings from the camelCase JSON object, validating types."""
        settings = cls()
        if "columnMargin" in data:
            settings.column_margin = _non_negative_int(data, "columnMargin")
        if "maxHeight" in data:
            settings.max_height = _non_negative_int(data, "maxHeight")
        if "selectedStyle" in data:
            settings.selected_style = _style(data, "selectedStyle")
        if "modeLineStyle" in data:
            settings.mode_line_style = _style(data, "modeLineStyle")
        if "keybindings" in data:
            settings.keybindings = _keybindings(data["keybindings"])
        return settings


def _non_negative_int(data: dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SettingsError(f"{key} must be a non-negative integer, got {value!r}")
    return value


def _style(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str) or not all(part.isdigit() for part in value.split(";") if part):
        raise SettingsError(f"{key} must be SGR parameters like '1;34', got {value!r}")
    return value


def _keybindings(value: Any) -> CompletionKeybindingsConfig:
    if not isinstance(value, dict):
        raise SettingsError(f"keybindings must be an object, got {value!r}")

    config: CompletionKeybindingsConfig = {}
    for action, keys in value.items():
        if action not in DEFAULT_COMPLETION_KEYBINDINGS:
            raise SettingsError(f"unknown completion action {action!r}")
        if isinstance(keys, str):
            config[action] = keys
        elif isinstance(keys, list) and all(isinstance(k, str) for k in keys):
            config[action] = list(keys)
        else:
            raise SettingsError(f"keys for {action} must be a string or list of strings")
    return config


def _load_section(path: str) -> dict[str, Any]:
    """Read the completion section of a settings file.

    A missing file gives an empty section. A file that cannot be read or
    parsed is logged and ignored.
    """
    if not os.path.exists(path):
        return {}
    try:
        content = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("ignoring settings file %s: %s", path, e)
        return {}

    section = content.get(SETTINGS_SECTION) if isinstance(content, dict) else None
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise SettingsError(f"{path}: {SETTINGS_SECTION!r} must be an object")
    return section


def _default_config_dir() -> str:
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)


def load_settings(cwd: str | None = None, config_dir: str | None = None) -> CompletionSettings:
    """Load completion settings, project values overriding global ones."""
    global_path = os.path.join(config_dir or _default_config_dir(), "settings.json")
    project_path = os.path.join(cwd or os.getcwd(), CONFIG_DIR_NAME, "settings.json")

    merged = dict(_load_section(global_path))
    if os.path.abspath(project_path) != os.path.abspath(global_path):
        merged.update(_load_section(project_path))
    return CompletionSettings.from_dict(merged)
