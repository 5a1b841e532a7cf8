"""Decoders and encoders for the concrete markup dialects."""
from __future__ import annotations

from motdtext.codecs.json_codec import (
    StructuredDataError,
    deserialize_json,
    serialize_json,
)
from motdtext.codecs.legacy import (
    LEGACY_AMPERSAND,
    LEGACY_SECTION,
    LegacySerializer,
    ampersand_serializer,
    section_serializer,
)
from motdtext.codecs.minimessage import (
    MiniMessageDecoder,
    TagMarkupError,
    deserialize_minimessage,
)

__all__ = [
    "LEGACY_AMPERSAND",
    "LEGACY_SECTION",
    "LegacySerializer",
    "MiniMessageDecoder",
    "StructuredDataError",
    "TagMarkupError",
    "ampersand_serializer",
    "deserialize_json",
    "deserialize_minimessage",
    "section_serializer",
    "serialize_json",
]
