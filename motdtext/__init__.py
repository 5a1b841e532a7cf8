"""Detect, decode and normalize colour markup in operator-authored text.

Supported dialects are tag markup (``<red>hi</red>``), ampersand hex
(``&#ff00ffhi``), JSON text components and the legacy ``§``/``&`` colour
codes. Everything decodes into :class:`~motdtext.text.component.Component`
and can be written back as legacy ``§`` codes.
"""
from __future__ import annotations

from motdtext.dialect import Dialect, detect_dialect, resolve_dialect
from motdtext.normalize import ampersand_hex_to_minimessage
from motdtext.service import (
    ParseResult,
    TextFormatService,
    default_service,
    parse_lines_detailed,
    parse_text_detailed,
    serialize_legacy,
)
from motdtext.text.component import Component, MarkupDecodeError, join_newlines

__all__ = [
    "Component",
    "Dialect",
    "MarkupDecodeError",
    "ParseResult",
    "TextFormatService",
    "ampersand_hex_to_minimessage",
    "default_service",
    "detect_dialect",
    "join_newlines",
    "parse_lines_detailed",
    "parse_text_detailed",
    "resolve_dialect",
    "serialize_legacy",
]
