from __future__ import annotations

import string
from dataclasses import replace
from typing import List, Tuple

from motdtext.text.colors import (
    CODE_TO_COLOR,
    CODE_TO_DECORATION,
    DECORATION_CODES,
    NAMED_COLORS,
    RESET_CODE,
    legacy_code_for,
)
from motdtext.text.component import Component, Style

LEGACY_SECTION = "§"
LEGACY_AMPERSAND = "&"

_HEX_DIGITS = set(string.hexdigits)


def _nearest_named(hex_color: str) -> str:
    rgb = tuple(int(hex_color[i : i + 2], 16) for i in (1, 3, 5))  # noqa E203

    def dist(item):
        _, (_, value) = item
        other = tuple(int(value[i : i + 2], 16) for i in (1, 3, 5))  # noqa E203
        return sum((a - b) ** 2 for a, b in zip(rgb, other))

    return min(NAMED_COLORS.items(), key=dist)[0]


class LegacySerializer:
    """Encoder/decoder for single-escape-character colour codes.

    ``character`` is the escape (``§`` or ``&``). With ``hex_colors`` enabled
    the decoder understands both ``<c>#rrggbb`` and the repeated form
    ``<c>x<c>r<c>r<c>g<c>g<c>b<c>b``; the encoder writes the repeated form
    when ``x_repeated_hex`` is set. Decoding is best-effort and never fails:
    anything that is not a known code stays literal.
    """

    def __init__(self, character: str, hex_colors: bool = True, x_repeated_hex: bool = True):
        if len(character) != 1:
            raise ValueError("Legacy escape must be a single character")
        self.character = character
        self.hex_colors = hex_colors
        self.x_repeated_hex = x_repeated_hex

    def __repr__(self) -> str:
        return (
            f"LegacySerializer(character={self.character!r}, "
            f"hex_colors={self.hex_colors}, x_repeated_hex={self.x_repeated_hex})"
        )

    # ----- decoding -----

    def _read_repeated_hex(self, text: str, start: int) -> str | None:
        """Read ``<c>h`` six times from ``start``; return the digits or None."""
        end = start + 12
        if end > len(text):
            return None
        digits = []
        for pos in range(start, end, 2):
            if text[pos] != self.character or text[pos + 1] not in _HEX_DIGITS:
                return None
            digits.append(text[pos + 1])
        return "".join(digits)

    def _tokenize(self, text: str) -> List[Tuple[str, Style]]:
        runs: List[Tuple[str, Style]] = []
        style = Style()
        buf: List[str] = []

        def set_style(new_style: Style):
            nonlocal style
            if buf:
                runs.append(("".join(buf), style))
                buf.clear()
            style = new_style

        i, n = 0, len(text)
        while i < n:
            ch = text[i]
            if ch != self.character or i + 1 >= n:
                buf.append(ch)
                i += 1
                continue

            code = text[i + 1].lower()
            if self.hex_colors and code == "x":
                digits = self._read_repeated_hex(text, i + 2)
                if digits is not None:
                    set_style(Style(color="#" + digits.lower()))
                    i += 14
                    continue
            if self.hex_colors and code == "#":
                digits = text[i + 2 : i + 8]  # noqa E203
                if len(digits) == 6 and set(digits) <= _HEX_DIGITS:
                    set_style(Style(color="#" + digits.lower()))
                    i += 8
                    continue
            if code in CODE_TO_COLOR:
                set_style(Style(color=CODE_TO_COLOR[code]))
            elif code in CODE_TO_DECORATION:
                set_style(replace(style, **{CODE_TO_DECORATION[code]: True}))
            elif code == RESET_CODE:
                set_style(Style())
            else:
                buf.append(ch)
                i += 1
                continue
            i += 2

        set_style(style)
        return runs

    def deserialize(self, text: str) -> Component:
        children = []
        for run_text, style in self._tokenize(text or ""):
            fields = {d: True for d in style.decorations()}
            children.append(Component(text=run_text, color=style.color, **fields))
        return Component(extra=children)

    # ----- encoding -----

    def _color_code(self, color: str) -> str:
        c = self.character
        code = legacy_code_for(color)
        if code is not None:
            return c + code
        if not self.hex_colors:
            return c + legacy_code_for(_nearest_named(color))
        digits = color[1:]
        if self.x_repeated_hex:
            return c + "x" + "".join(c + d for d in digits)
        return c + "#" + digits

    def serialize(self, component: Component) -> str:
        c = self.character
        out: List[str] = []
        current = Style()
        for run_text, style in component.iter_styled_runs():
            if style != current:
                dropped = any(getattr(current, d) and not getattr(style, d) for d in current.decorations())
                if style.color != current.color or dropped:
                    # A colour code clears decorations, so they are re-emitted.
                    out.append(self._color_code(style.color) if style.color else c + RESET_CODE)
                    added = style.decorations()
                else:
                    added = tuple(d for d in style.decorations() if not getattr(current, d))
                out.extend(c + DECORATION_CODES[d] for d in added)
                current = style
            out.append(run_text)
        return "".join(out)


_SECTION = LegacySerializer(LEGACY_SECTION, hex_colors=True, x_repeated_hex=True)
_AMPERSAND = LegacySerializer(LEGACY_AMPERSAND, hex_colors=True, x_repeated_hex=True)


def section_serializer() -> LegacySerializer:
    return _SECTION


def ampersand_serializer() -> LegacySerializer:
    return _AMPERSAND
