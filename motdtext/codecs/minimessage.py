from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from loguru import logger

from motdtext.text.colors import normalize_color
from motdtext.text.component import Component, MarkupDecodeError


class TagMarkupError(MarkupDecodeError):
    """Raised when tag markup is structurally broken."""
    pass


_DECORATION_TAGS: Dict[str, str] = {
    "bold": "bold",
    "b": "bold",
    "italic": "italic",
    "i": "italic",
    "em": "italic",
    "underlined": "underlined",
    "u": "underlined",
    "strikethrough": "strikethrough",
    "st": "strikethrough",
    "obfuscated": "obfuscated",
    "obf": "obfuscated",
}

_COLOR_TAGS = ("color", "colour", "c")
_NEWLINE_TAGS = ("newline", "br")
_ESCAPABLE = "<\\"

# Stack entries are (closing key, node). The root has no key.
_Frame = Tuple[Optional[str], Component]


def _is_tag_start(ch: str) -> bool:
    return ch.isalpha() or ch in "/#!"


class MiniMessageDecoder:
    """Decoder for the ``<tag>text</tag>`` inline styling convention.

    Unknown tags are kept as literal text. Tags left open at the end of the
    input are closed implicitly. Structural problems raise
    :class:`TagMarkupError`:

    * a ``<`` that starts a tag but is never closed by ``>``
    * a closing tag with no matching open tag
    * a colour tag with a missing or invalid argument
    """

    def deserialize(self, text: str) -> Component:
        root = Component()
        stack: List[_Frame] = [(None, root)]
        buf: List[str] = []

        def flush():
            if buf:
                stack[-1][1].extra.append(Component(text="".join(buf)))
                buf.clear()

        i, n = 0, len(text)
        while i < n:
            ch = text[i]
            if ch == "\\" and i + 1 < n and text[i + 1] in _ESCAPABLE:
                buf.append(text[i + 1])
                i += 2
                continue
            if ch == "<" and i + 1 < n and _is_tag_start(text[i + 1]):
                end = text.find(">", i + 1)
                if end == -1:
                    raise TagMarkupError(f"Unterminated tag at position {i}: {text[i:i + 20]!r}")
                raw = text[i + 1 : end]  # noqa E203
                if "<" in raw:
                    buf.append(ch)
                    i += 1
                    continue
                flush()
                if not self._apply_tag(raw, stack):
                    buf.append(text[i : end + 1])  # noqa E203
                i = end + 1
                continue
            buf.append(ch)
            i += 1

        flush()
        return root

    def _apply_tag(self, raw: str, stack: List[_Frame]) -> bool:
        """Apply a single tag to the open-tag stack.

        Returns ``False`` when the tag is not recognised and should be kept as
        literal text.
        """
        closing = raw.startswith("/")
        body = raw[1:] if closing else raw
        name, _, arg = body.partition(":")
        name = name.strip().lower()
        negated = name.startswith("!")
        if negated:
            name = name[1:]

        if closing:
            key = self._closing_key(name)
            if key is None:
                return False
            for depth in range(len(stack) - 1, 0, -1):
                if stack[depth][0] == key:
                    del stack[depth:]
                    return True
            raise TagMarkupError(f"Closing tag </{body}> has no matching opening tag")

        if name == "reset":
            del stack[1:]
            return True

        if name in _NEWLINE_TAGS:
            stack[-1][1].extra.append(Component.newline())
            return True

        fields = self._opening_fields(name, arg, negated)
        if fields is None:
            logger.debug(f"Keeping unknown tag <{raw}> as literal text")
            return False
        key, values = fields
        node = Component(**values)
        stack[-1][1].extra.append(node)
        stack.append((key, node))
        return True

    @staticmethod
    def _closing_key(name: str) -> Optional[str]:
        if name in _DECORATION_TAGS:
            return _DECORATION_TAGS[name]
        if name in _COLOR_TAGS or normalize_color(name) is not None:
            return "color"
        return None

    @staticmethod
    def _opening_fields(name: str, arg: str, negated: bool):
        if name in _DECORATION_TAGS:
            deco = _DECORATION_TAGS[name]
            return deco, {deco: not negated}

        if name in _COLOR_TAGS:
            color = normalize_color(arg)
            if color is None:
                raise TagMarkupError(f"Invalid color argument in <{name}:{arg}>")
            return "color", {"color": color}

        color = normalize_color(name)
        if color is not None and not negated:
            return "color", {"color": color}
        return None


_DEFAULT_DECODER = MiniMessageDecoder()


def deserialize_minimessage(text: str) -> Component:
    return _DEFAULT_DECODER.deserialize(text)
