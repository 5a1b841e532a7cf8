from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

# name -> (legacy code, hex value)
NAMED_COLORS: Dict[str, Tuple[str, str]] = {
    "black": ("0", "#000000"),
    "dark_blue": ("1", "#0000aa"),
    "dark_green": ("2", "#00aa00"),
    "dark_aqua": ("3", "#00aaaa"),
    "dark_red": ("4", "#aa0000"),
    "dark_purple": ("5", "#aa00aa"),
    "gold": ("6", "#ffaa00"),
    "gray": ("7", "#aaaaaa"),
    "dark_gray": ("8", "#555555"),
    "blue": ("9", "#5555ff"),
    "green": ("a", "#55ff55"),
    "aqua": ("b", "#55ffff"),
    "red": ("c", "#ff5555"),
    "light_purple": ("d", "#ff55ff"),
    "yellow": ("e", "#ffff55"),
    "white": ("f", "#ffffff"),
}

# Spellings accepted by the tag decoder in addition to the canonical names.
COLOR_ALIASES: Dict[str, str] = {
    "grey": "gray",
    "dark_grey": "dark_gray",
}

# decoration attribute -> legacy code
DECORATION_CODES: Dict[str, str] = {
    "obfuscated": "k",
    "bold": "l",
    "strikethrough": "m",
    "underlined": "n",
    "italic": "o",
}

CODE_TO_COLOR: Dict[str, str] = {code: name for name, (code, _) in NAMED_COLORS.items()}
CODE_TO_DECORATION: Dict[str, str] = {code: name for name, code in DECORATION_CODES.items()}
RESET_CODE = "r"

_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")


def is_hex_color(value: str) -> bool:
    return bool(value) and _HEX_RE.fullmatch(value) is not None


def normalize_color(value: Optional[str]) -> Optional[str]:
    """Return the canonical spelling of a colour, or ``None`` if unrecognised.

    Named colours are lower-cased and de-aliased; hex colours are lower-cased.
    """
    if not value:
        return None
    v = value.strip().lower()
    v = COLOR_ALIASES.get(v, v)
    if v in NAMED_COLORS or is_hex_color(v):
        return v
    return None


def legacy_code_for(color: str) -> Optional[str]:
    entry = NAMED_COLORS.get(color)
    return entry[0] if entry else None
