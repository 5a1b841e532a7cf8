from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from motdtext.text.component import Component, MarkupDecodeError


class StructuredDataError(MarkupDecodeError):
    """Raised when JSON text is not valid or does not match the component schema."""
    pass


def _to_component(data: Any) -> Component:
    if isinstance(data, str):
        return Component.literal(data)
    if isinstance(data, dict):
        # "extra" entries may themselves be bare strings.
        if isinstance(data.get("extra"), list):
            data = {**data, "extra": [_to_component(e) for e in data["extra"]]}
        return Component.model_validate(data)
    if isinstance(data, list):
        if not data:
            raise StructuredDataError("Empty JSON array is not a text component")
        first = _to_component(data[0])
        rest = [_to_component(e) for e in data[1:]]
        return first.model_copy(update={"extra": first.extra + rest})
    raise StructuredDataError(f"Unsupported JSON value of type {type(data).__name__}")


def deserialize_json(text: str) -> Component:
    """Decode the JSON text-component format into a :class:`Component`."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StructuredDataError(f"Invalid JSON: {e}") from e
    try:
        return _to_component(data)
    except ValidationError as e:
        raise StructuredDataError(f"JSON does not match the component schema: {e}") from e


def serialize_json(component: Component) -> str:
    return component.model_dump_json(exclude_none=True, exclude_defaults=True)
