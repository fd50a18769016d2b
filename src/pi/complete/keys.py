"""Matching raw terminal input against named keys.

Key identifiers look like ``"tab"``, ``"shift+tab"``, ``"ctrl+g"`` or
``"alt+left"``. Only legacy (xterm/VT) input sequences are understood.
"""

from __future__ import annotations

KeyId = str


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    home = "home"
    end = "end"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


MODIFIERS: dict[str, int] = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

# Unmodified sequences for named keys.
LEGACY_SEQUENCES: dict[str, tuple[str, ...]] = {
    "escape": ("\x1b",),
    "enter": ("\r", "\n"),
    "tab": ("\t",),
    "space": (" ",),
    "backspace": ("\x7f", "\x08"),
    "delete": ("\x1b[3~",),
    "home": ("\x1b[H", "\x1bOH", "\x1b[1~", "\x1b[7~"),
    "end": ("\x1b[F", "\x1bOF", "\x1b[4~", "\x1b[8~"),
    "up": ("\x1b[A", "\x1bOA"),
    "down": ("\x1b[B", "\x1bOB"),
    "right": ("\x1b[C", "\x1bOC"),
    "left": ("\x1b[D", "\x1bOD"),
}

_ARROW_FINALS: dict[str, str] = {"up": "A", "down": "B", "right": "C", "left": "D"}

_SHIFT_SEQUENCES: dict[str, str] = {"tab": "\x1b[Z"}

_ALIASES: dict[str, str] = {"esc": "escape", "return": "enter"}


def raw_ctrl_char(key: str) -> str | None:
    """Return the control character for a key, or ``None`` if not applicable.

    For example, ``raw_ctrl_char("a")`` returns ``"\\x01"``.
    """
    if len(key) != 1:
        return None
    code = ord(key.lower())
    if ord("a") <= code <= ord("z"):
        return chr(code & 0x1F)
    ctrl_map: dict[str, str] = {
        "[": chr(27),
        "\\": chr(28),
        "]": chr(29),
        "^": chr(30),
        "_": chr(31),
        "@": chr(0),
        "?": chr(127),
    }
    return ctrl_map.get(key)


def parse_key_id(key_id: str) -> tuple[int, str] | None:
    """Split ``"ctrl+shift+a"`` into a modifier bitmask and the base key.

    Returns ``None`` if the key_id is empty.
    """
    if not key_id:
        return None

    modifier = 0
    key_parts: list[str] = []
    for part in key_id.split("+"):
        lower = part.lower()
        if lower in MODIFIERS:
            modifier |= MODIFIERS[lower]
        else:
            key_parts.append(part)

    key = "+".join(key_parts) if key_parts else ""
    return modifier, _ALIASES.get(key.lower(), key)


def _xterm_modifier(mod: int) -> str:
    return str(mod + 1)


def matches_key(data: str, key_id: KeyId) -> bool:
    """Return ``True`` if *data* (raw terminal input) matches the named *key_id*."""
    parsed = parse_key_id(key_id)
    if parsed is None:
        return False
    mod, key = parsed

    has_ctrl = bool(mod & MODIFIERS["ctrl"])
    has_shift = bool(mod & MODIFIERS["shift"])
    has_alt = bool(mod & MODIFIERS["alt"])

    if key in LEGACY_SEQUENCES:
        if not mod:
            return data in LEGACY_SEQUENCES[key]
        if mod == MODIFIERS["shift"] and key in _SHIFT_SEQUENCES:
            return data == _SHIFT_SEQUENCES[key]
        if key in _ARROW_FINALS:
            # CSI 1 ; <modifier> <final>
            return data == f"\x1b[1;{_xterm_modifier(mod)}{_ARROW_FINALS[key]}"
        if mod == MODIFIERS["alt"]:
            return any(data == "\x1b" + seq for seq in LEGACY_SEQUENCES[key])
        if key == "space" and mod == MODIFIERS["ctrl"]:
            return data == "\x00"
        return False

    if len(key) != 1:
        return False

    if has_ctrl and not has_shift:
        ctrl = raw_ctrl_char(key)
        if ctrl is None:
            return False
        return data == ("\x1b" + ctrl if has_alt else ctrl)

    if has_ctrl:
        return False

    expected = key.upper() if has_shift else key
    if has_alt:
        return data == "\x1b" + expected
    return data == expected


def is_printable(data: str) -> bool:
    """Return ``True`` if *data* is plain text rather than a control sequence."""
    return bool(data) and data.isprintable()
