"""
Key Combination Normalization

Reduce differently written key combinations to one comparable form:
"Cmd+Shift+T", "⌘⇧T" and "command-shift-t" all become "shift+cmd+t".
"""

import re

# Unicode key glyphs -> canonical words
KEY_GLYPHS = {
    "⌘": "cmd",
    "⌥": "alt",
    "⇧": "shift",
    "⌃": "ctrl",
    "↩": "enter",
    "⏎": "enter",
    "⌤": "enter",
    "⌫": "backspace",
    "⌦": "delete",
    "⎋": "escape",
    "␣": "space",
    "⇥": "tab",
    "⇪": "capslock",
    "←": "left",
    "→": "right",
    "↑": "up",
    "↓": "down",
    "⇞": "pageup",
    "⇟": "pagedown",
    "↖": "home",
    "↘": "end",
}

# Long-form modifier names -> canonical tokens (meta/super/win map to cmd)
MODIFIER_ALIASES = {
    "command": "cmd",
    "control": "ctrl",
    "option": "alt",
    "opt": "alt",
    "meta": "cmd",
    "super": "cmd",
    "win": "cmd",
}

# Emission order for modifiers
MODIFIER_ORDER = ("ctrl", "alt", "shift", "cmd")

_GLYPH_PATTERN = re.compile("|".join(re.escape(g) for g in KEY_GLYPHS))
_SEPARATOR_PATTERN = re.compile(r"[\s\-_]+")
_PLUS_RUN_PATTERN = re.compile(r"\++")


def normalize_keys(raw: str | None) -> str:
    """
    Canonicalize a key combination string.

    Lowercases, expands key glyphs, shortens modifier names, treats spaces,
    hyphens and underscores as separators, then emits modifiers in the fixed
    order ctrl, alt, shift, cmd followed by the remaining keys in their
    original order. Normalizing the output again yields the same string.

    Args:
        raw: Key combination as written by a user or a catalog

    Returns:
        Canonical "+"-joined form, or "" for empty input
    """
    if not raw:
        return ""

    text = raw.lower().strip()
    text = _GLYPH_PATTERN.sub(lambda m: f"+{KEY_GLYPHS[m.group(0)]}+", text)
    text = _SEPARATOR_PATTERN.sub("+", text)
    text = _PLUS_RUN_PATTERN.sub("+", text)

    # Aliases only replace whole tokens, so "windows" stays "windows"
    tokens = [MODIFIER_ALIASES.get(t, t) for t in text.split("+") if t]

    present = set()
    others = []
    for token in tokens:
        if token in MODIFIER_ORDER:
            present.add(token)
        else:
            others.append(token)

    modifiers = [m for m in MODIFIER_ORDER if m in present]
    return "+".join(modifiers + others)
