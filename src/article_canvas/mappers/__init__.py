"""Mappers between template layouts and article content."""

from .id_mapper import IdContentMapper, MappingMismatch, MappingResult
from .mapper import ContentMapper
from .positional_mapper import PositionalContentMapper
from .skeleton import (
    build_editable_skeleton,
    content_entries,
    serialize_skeleton,
    set_field_value,
)

__all__ = [
    "ContentMapper",
    "IdContentMapper",
    "MappingMismatch",
    "MappingResult",
    "PositionalContentMapper",
    "build_editable_skeleton",
    "content_entries",
    "serialize_skeleton",
    "set_field_value",
]
