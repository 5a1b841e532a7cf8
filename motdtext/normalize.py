from __future__ import annotations

import re
from typing import Optional

from motdtext.dialect import AMPERSAND_HEX_PATTERN


def _hex_repl(m: re.Match) -> str:
    return "<#" + m.group(1) + ">"


def ampersand_hex_to_minimessage(text: Optional[str]) -> Optional[str]:
    """Rewrite every ``&#RRGGBB`` into the ``<#RRGGBB>`` tag form.

    Text without ``&`` is returned as is. Digits are copied verbatim.
    """
    if text is None or "&" not in text:
        return text
    return AMPERSAND_HEX_PATTERN.sub(_hex_repl, text)
