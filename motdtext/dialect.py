from __future__ import annotations

import enum
import re
from typing import Optional

from loguru import logger


class Dialect(str, enum.Enum):
    MINI_MESSAGE = "mini_message"
    HEX_AMPERSAND = "hex_ampersand"
    JSON = "json"
    LEGACY_SECTION = "legacy_section"
    LEGACY_AMPERSAND = "legacy_ampersand"
    AUTO = "auto"

    @classmethod
    def from_name(cls, raw: Optional[str]) -> Optional["Dialect"]:
        """Case-insensitive lookup by member name; ``None`` when nothing matches."""
        if raw is None:
            return None
        normalized = raw.strip(_TRIM_CHARS).upper()
        return cls.__members__.get(normalized)


AMPERSAND_HEX_PATTERN = re.compile(r"&#([0-9a-fA-F]{6})")

SECTION_SIGN = "§"

# Space and the ASCII control characters; Unicode spaces such as NBSP are kept.
_TRIM_CHARS = "".join(chr(c) for c in range(0x21))

_JSON_KEYS = ('"text"', '"extra"', '"color"')


def _looks_like_json(trimmed: str) -> bool:
    if not trimmed.startswith("{") or not trimmed.endswith("}"):
        return False
    return any(k in trimmed for k in _JSON_KEYS)


def detect_dialect(text: Optional[str]) -> Dialect:
    """Guess the markup dialect of ``text``.

    Rules are checked in a fixed order and the first match wins. Structural
    markers come first, then compact hex forms, then the bare escape
    characters. ``AUTO`` means the text is treated as plain.
    """
    if not text:
        return Dialect.AUTO

    trimmed = text.strip(_TRIM_CHARS)

    if _looks_like_json(trimmed):
        return Dialect.JSON
    if "<" in trimmed and ">" in trimmed:
        return Dialect.MINI_MESSAGE
    if AMPERSAND_HEX_PATTERN.search(trimmed):
        return Dialect.HEX_AMPERSAND
    # The x-repeated hex markers must win over the bare escape of the other dialect.
    if f"{SECTION_SIGN}x{SECTION_SIGN}" in trimmed:
        return Dialect.LEGACY_SECTION
    if "&x&" in trimmed:
        return Dialect.LEGACY_AMPERSAND
    if SECTION_SIGN in trimmed:
        return Dialect.LEGACY_SECTION
    if "&" in trimmed:
        return Dialect.LEGACY_AMPERSAND

    return Dialect.AUTO


def resolve_dialect(dialect: Optional[Dialect], text: Optional[str]) -> Dialect:
    """Use ``dialect`` as given unless it is missing or ``AUTO``."""
    if dialect is None or dialect == Dialect.AUTO:
        detected = detect_dialect(text)
        logger.debug(f"Detected dialect {detected.value} for {text!r:.60}")
        return detected
    return dialect
