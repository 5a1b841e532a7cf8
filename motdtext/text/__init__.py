"""Rich-text tree used as the decoded form of every markup dialect."""
from __future__ import annotations

from motdtext.text.component import (
    Component,
    MarkupDecodeError,
    Style,
    join_newlines,
)

__all__ = ["Component", "MarkupDecodeError", "Style", "join_newlines"]
