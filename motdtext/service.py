from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from loguru import logger

from motdtext import config
from motdtext.codecs.json_codec import deserialize_json
from motdtext.codecs.legacy import ampersand_serializer, section_serializer
from motdtext.codecs.minimessage import MiniMessageDecoder
from motdtext.dialect import Dialect, resolve_dialect
from motdtext.normalize import ampersand_hex_to_minimessage
from motdtext.text.component import Component, join_newlines


@dataclass(frozen=True)
class ParseResult:
    component: Component
    used_dialect: Optional[Dialect]
    fallback_used: bool


def split_lines(text: str) -> List[str]:
    # str.split keeps empty leading/trailing segments, unlike splitlines().
    return text.split("\n")


class TextFormatService:
    """Turns operator-authored text in any supported dialect into components.

    Parsing never raises: when the decoder for the resolved dialect rejects the
    input, the original text is returned as a literal component and the result
    is flagged with ``fallback_used``.
    """

    def __init__(self):
        self.mini_message = MiniMessageDecoder()
        self.legacy_section = section_serializer()
        self.legacy_ampersand = ampersand_serializer()

    def parse(self, text: Optional[str], dialect: Optional[Dialect] = None) -> Component:
        return self.parse_detailed(text, dialect).component

    def parse_lines(self, lines: Optional[Sequence[str]], dialect: Optional[Dialect] = None) -> Component:
        return self.parse_lines_detailed(lines, dialect).component

    def parse_detailed(self, text: Optional[str], dialect: Optional[Dialect] = None) -> ParseResult:
        if text is None:
            return ParseResult(Component.empty(), dialect, False)
        if "\n" in text:
            return self.parse_lines_detailed(split_lines(text), dialect)
        return self._parse_single_line(text, dialect)

    def parse_lines_detailed(
        self, lines: Optional[Sequence[str]], dialect: Optional[Dialect] = None
    ) -> ParseResult:
        """Parse a block of lines under one dialect resolved from the whole block."""
        if not lines:
            return ParseResult(Component.empty(), dialect, False)

        combined = "\n".join(lines)
        resolved = resolve_dialect(dialect, combined)

        components = []
        fallback = False
        for line in lines:
            result = self._parse_single_line(line, resolved)
            components.append(result.component)
            fallback = fallback or result.fallback_used

        return ParseResult(join_newlines(components), resolved, fallback)

    def serialize_legacy(self, component: Optional[Component]) -> str:
        if component is None:
            return ""
        return self.legacy_section.serialize(component)

    def _decode(self, text: str, dialect: Dialect) -> Component:
        if dialect == Dialect.MINI_MESSAGE:
            return self.mini_message.deserialize(text)
        if dialect == Dialect.HEX_AMPERSAND:
            return self.mini_message.deserialize(ampersand_hex_to_minimessage(text))
        if dialect == Dialect.JSON:
            return deserialize_json(text)
        if dialect == Dialect.LEGACY_SECTION:
            return self.legacy_section.deserialize(text)
        if dialect == Dialect.LEGACY_AMPERSAND:
            return self.legacy_ampersand.deserialize(text)
        return Component.literal(text)

    def _parse_single_line(self, text: str, dialect: Optional[Dialect]) -> ParseResult:
        resolved = resolve_dialect(dialect, text)
        try:
            component = self._decode(text, resolved)
        except Exception as e:
            logger.warning(
                f"Failed to decode {text!r:.80} as {resolved.value}, using plain text: {e}"
            )
            return ParseResult(Component.literal(text), resolved, True)
        return ParseResult(component, resolved, False)


_default_service: Optional[TextFormatService] = None


def default_service() -> TextFormatService:
    global _default_service
    if _default_service is None:
        _default_service = TextFormatService()
    return _default_service


def parse_text_detailed(text: Optional[str], dialect: Optional[Dialect] = None) -> ParseResult:
    """Parse with the shared service, defaulting to ``MOTDTEXT_DEFAULT_DIALECT``.

    Missing input keeps the hint as given, like the service methods.
    """
    if text is not None:
        dialect = dialect or config.DEFAULT_DIALECT
    return default_service().parse_detailed(text, dialect)


def parse_lines_detailed(lines: Optional[Sequence[str]], dialect: Optional[Dialect] = None) -> ParseResult:
    if lines:
        dialect = dialect or config.DEFAULT_DIALECT
    return default_service().parse_lines_detailed(lines, dialect)


def serialize_legacy(component: Optional[Component]) -> str:
    return default_service().serialize_legacy(component)
