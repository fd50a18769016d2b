"""Keybindings for the insert and completion modes."""

from __future__ import annotations

from typing import Literal

from pi.complete.keys import Key, KeyId, matches_key

CompletionAction = Literal[
    # Insert mode
    "completeOrStart",
    "startCompletion",
    # Completion mode
    "completionUp",
    "completionDown",
    "completionLeft",
    "completionRight",
    "completionCycle",
    "completionAccept",
    "completionCancel",
]

CompletionKeybindingsConfig = dict[CompletionAction, KeyId | list[KeyId]]

DEFAULT_COMPLETION_KEYBINDINGS: dict[CompletionAction, KeyId | list[KeyId]] = {
    # Insert mode
    "completeOrStart": Key.tab,
    "startCompletion": Key.shift(Key.tab),
    # Completion mode
    "completionUp": Key.up,
    "completionDown": Key.down,
    "completionLeft": Key.left,
    "completionRight": Key.right,
    "completionCycle": Key.tab,
    "completionAccept": Key.enter,
    "completionCancel": [Key.escape, Key.ctrl("g")],
}


class CompletionKeybindingsManager:
    """Maps completion actions to the keys that trigger them."""

    def __init__(
        self, config: CompletionKeybindingsConfig | None = None
    ) -> None:
        self._action_to_keys: dict[CompletionAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: CompletionKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_COMPLETION_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # User config replaces the defaults of each action it names
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: CompletionAction) -> bool:
        """Check if input matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        return any(matches_key(data, key) for key in keys)

    def get_keys(self, action: CompletionAction) -> list[KeyId]:
        return self._action_to_keys.get(action, [])

    def set_config(self, config: CompletionKeybindingsConfig) -> None:
        self._build_maps(config)
