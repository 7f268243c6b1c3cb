"""Editor settings with JSON persistence.

Two files are read, global (``~/.thor/settings.json``) then project
(``<cwd>/.thor/settings.json``); later sources win, and CLI overrides win
over both. Unknown keys are ignored, and so are values of the wrong type
or range, which fall back to the defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".thor"
SETTINGS_FILE_NAME = "settings.json"


@dataclass
class EditorSettings:
    """Resolved editor options."""

    tab_stop: int = 8
    soft_tab_width: int = 4
    message_timeout: float = 5.0
    key_timeout: float = 0.1
    auto_pairs: bool = True
    # mode name -> {action: key id or list of key ids}
    keybindings: dict[str, dict[str, Any]] = field(default_factory=dict)


# --- Deep merge ---


def deep_merge_settings(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge overrides into base settings.

    For nested dicts, merge recursively. For primitives and arrays,
    override value wins completely.
    """
    result = dict(base)
    for key, value in overrides.items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge_settings(result[key], value)
        else:
            result[key] = value
    return result


# --- Validation ---


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _positive_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _key_list(value: Any) -> bool:
    if isinstance(value, str):
        return True
    return isinstance(value, list) and all(isinstance(k, str) for k in value)


_VALIDATORS: dict[str, Callable[[Any], bool]] = {
    "tab_stop": _positive_int,
    "soft_tab_width": _positive_int,
    "message_timeout": _positive_number,
    "key_timeout": _positive_number,
    "auto_pairs": lambda value: isinstance(value, bool),
}


def _clean_keybindings(value: Any) -> dict[str, dict[str, Any]]:
    """Keep the well-formed ``mode -> {action: keys}`` tables of *value*."""
    if not isinstance(value, dict):
        logger.warning("setting 'keybindings' ignored: expected an object, got %r", value)
        return {}
    cleaned: dict[str, dict[str, Any]] = {}
    for mode, table in value.items():
        if not isinstance(table, dict) or not all(_key_list(keys) for keys in table.values()):
            logger.warning("keybindings for mode %r ignored: %r", mode, table)
            continue
        cleaned[mode] = table
    return cleaned


def _load_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("ignoring settings file %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: top level is not an object", path)
        return {}
    return data


class SettingsManager:
    """Loads and merges the settings sources."""

    def __init__(
        self,
        global_settings: dict[str, Any] | None = None,
        project_settings: dict[str, Any] | None = None,
    ) -> None:
        self._global = global_settings or {}
        self._project = project_settings or {}

    @classmethod
    def create(cls, cwd: str | Path, home: str | Path | None = None) -> SettingsManager:
        """Read the global and project settings files for *cwd*."""
        home_dir = Path(home) if home is not None else Path.home()
        global_path = home_dir / CONFIG_DIR_NAME / SETTINGS_FILE_NAME
        project_path = Path(cwd) / CONFIG_DIR_NAME / SETTINGS_FILE_NAME
        manager = cls(_load_file(global_path), _load_file(project_path))
        logger.debug("settings loaded from %s and %s", global_path, project_path)
        return manager

    def resolve(self, overrides: dict[str, Any] | None = None) -> EditorSettings:
        """Merge global < project < *overrides* into :class:`EditorSettings`."""
        merged = deep_merge_settings(self._global, self._project)
        merged = deep_merge_settings(merged, overrides or {})

        known = {f.name for f in fields(EditorSettings)}
        kwargs: dict[str, Any] = {}
        for key, value in merged.items():
            if key not in known:
                logger.debug("unknown setting %r ignored", key)
            elif key == "keybindings":
                kwargs[key] = _clean_keybindings(value)
            elif _VALIDATORS[key](value):
                kwargs[key] = value
            else:
                logger.warning("setting %r ignored: invalid value %r", key, value)
        return EditorSettings(**kwargs)
