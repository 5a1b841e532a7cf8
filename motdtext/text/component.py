from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from motdtext.text.colors import DECORATION_CODES, normalize_color


class MarkupDecodeError(Exception):
    """Base exception for every decoder failure on malformed input."""
    pass


DECORATIONS = tuple(DECORATION_CODES)


@dataclass(frozen=True)
class Style:
    """Effective (inherited) style of a text run."""
    color: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underlined: bool = False
    strikethrough: bool = False
    obfuscated: bool = False

    def decorations(self) -> Tuple[str, ...]:
        return tuple(d for d in DECORATIONS if getattr(self, d))


class Component(BaseModel):
    """A node of the rich-text tree.

    The field layout follows the structured-data (JSON) text format so that the
    same model validates decoded JSON. ``None`` style fields inherit from the
    parent.
    """

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    color: Optional[str] = None
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underlined: Optional[bool] = None
    strikethrough: Optional[bool] = None
    obfuscated: Optional[bool] = None
    extra: List["Component"] = Field(default_factory=list)

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        normalized = normalize_color(value)
        if normalized is None:
            raise ValueError(f"unknown color: {value!r}")
        return normalized

    @classmethod
    def literal(cls, text: Optional[str]) -> "Component":
        return cls(text=text or "")

    @classmethod
    def empty(cls) -> "Component":
        return cls()

    @classmethod
    def newline(cls) -> "Component":
        return cls(text="\n")

    def is_empty(self) -> bool:
        return not self.text and all(child.is_empty() for child in self.extra)

    def plain_text(self) -> str:
        return self.text + "".join(child.plain_text() for child in self.extra)

    def own_style(self, parent: Style) -> Style:
        """Apply this node's explicit style fields on top of ``parent``."""
        changes = {}
        if self.color is not None:
            changes["color"] = self.color
        for deco in DECORATIONS:
            value = getattr(self, deco)
            if value is not None:
                changes[deco] = value
        return replace(parent, **changes) if changes else parent

    def iter_styled_runs(self, parent: Optional[Style] = None) -> Iterator[Tuple[str, Style]]:
        """Depth-first flattening into ``(text, effective style)`` runs.

        Empty runs are skipped.
        """
        style = self.own_style(parent or Style())
        if self.text:
            yield self.text, style
        for child in self.extra:
            yield from child.iter_styled_runs(style)


Component.model_rebuild()


def join_newlines(components: Iterable[Component]) -> Component:
    """Join components under an unstyled parent, separated by newline nodes."""
    children: List[Component] = []
    for i, component in enumerate(components):
        if i:
            children.append(Component.newline())
        children.append(component)
    return Component(extra=children)
