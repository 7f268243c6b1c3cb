"""Per-mode key dispatch tables."""

from __future__ import annotations

from enum import Enum
from typing import Literal, Mapping

from thor.keys import KeyId


class Mode(str, Enum):
    COMMAND = "command"
    INSERT = "insert"


EditorAction = Literal[
    # Cursor movement
    "cursorUp",
    "cursorDown",
    "cursorLeft",
    "cursorRight",
    "fastUp",
    "fastDown",
    "fastLeft",
    "fastRight",
    "jumpLeft",
    "jumpRight",
    "cursorLineStart",
    "cursorLineEnd",
    "firstRow",
    "lastRow",
    "pageUp",
    "pageDown",
    "scrollUp",
    "scrollDown",
    # Editing
    "deleteCharBackward",
    "deleteCharForward",
    "newLine",
    "tab",
    # Registers
    "deletePrompt",
    "yankPrompt",
    "paste",
    # Prompts
    "search",
    "colonCommand",
    # Mode changes
    "insertMode",
    "openBelow",
    "openAbove",
    "commandMode",
]

KeybindingsConfig = Mapping[str, "KeyId | list[KeyId]"]

_MOVEMENT_KEYBINDINGS: dict[EditorAction, KeyId | list[KeyId]] = {
    "cursorUp": "up",
    "cursorDown": "down",
    "cursorLeft": "left",
    "cursorRight": "right",
    "cursorLineStart": "home",
    "cursorLineEnd": "end",
    "pageUp": "pageUp",
    "pageDown": "pageDown",
    "scrollUp": "ctrl+y",
    "scrollDown": "ctrl+e",
}

DEFAULT_COMMAND_KEYBINDINGS: dict[EditorAction, KeyId | list[KeyId]] = {
    **_MOVEMENT_KEYBINDINGS,
    "fastUp": "shift+up",
    "fastDown": "shift+down",
    "fastLeft": "shift+left",
    "fastRight": "shift+right",
    "jumpLeft": ",",
    "jumpRight": ".",
    "firstRow": "g",
    "lastRow": "G",
    "deleteCharForward": ["x", "delete"],
    "deleteCharBackward": "X",
    "deletePrompt": "d",
    "yankPrompt": "y",
    "paste": "p",
    "search": "/",
    "colonCommand": ":",
    "insertMode": "i",
    "openBelow": "o",
    "openAbove": "O",
}

DEFAULT_INSERT_KEYBINDINGS: dict[EditorAction, KeyId | list[KeyId]] = {
    **_MOVEMENT_KEYBINDINGS,
    "newLine": "enter",
    "deleteCharBackward": "backspace",
    "deleteCharForward": "delete",
    "tab": "tab",
    "commandMode": ["escape", "ctrl+l"],
}

DEFAULT_KEYBINDINGS: dict[Mode, dict[EditorAction, KeyId | list[KeyId]]] = {
    Mode.COMMAND: DEFAULT_COMMAND_KEYBINDINGS,
    Mode.INSERT: DEFAULT_INSERT_KEYBINDINGS,
}


class KeybindingsManager:
    """Resolves key ids to editor actions for each mode."""

    def __init__(self, config: Mapping[Mode | str, KeybindingsConfig] | None = None) -> None:
        self._key_to_action: dict[Mode, dict[KeyId, str]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: Mapping[Mode | str, KeybindingsConfig]) -> None:
        for mode, defaults in DEFAULT_KEYBINDINGS.items():
            # User config replaces the default keys action by action.
            actions: dict[str, KeyId | list[KeyId]] = {
                **defaults,
                **config.get(mode.value, config.get(mode, {})),
            }
            self._key_to_action[mode] = {
                key: action
                for action, keys in actions.items()
                for key in (keys if isinstance(keys, list) else [keys])
            }

    def action_for(self, mode: Mode, key: KeyId | None) -> str | None:
        """Return the action bound to *key* in *mode*, if any."""
        if key is None:
            return None
        return self._key_to_action[mode].get(key)
