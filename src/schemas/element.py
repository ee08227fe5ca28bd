"""Template element schemas.

An element is one positioned, typed unit on a template canvas. Elements are
immutable: the property map is a read-only copy taken at construction, and
every mutator returns a new ElementSchema with its own copy, so two views
holding the same element never share state.
"""

import copy
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping
from uuid import uuid4

from pydantic import BaseModel, Field, field_serializer, field_validator


class ElementType(str, Enum):
    """Closed set of element types a template may contain."""

    TEXT = "TEXT"
    IMAGE = "IMAGE"
    HEADER = "HEADER"
    DIVIDER = "DIVIDER"
    QUOTE = "QUOTE"

    @classmethod
    def parse(cls, value: "str | ElementType") -> "ElementType":
        """Parse an element type name case-insensitively.

        Raises:
            ValueError: If the name is not one of the known types
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Unknown element type: {value!r}")

    @property
    def is_text_bearing(self) -> bool:
        return self in (ElementType.TEXT, ElementType.HEADER, ElementType.QUOTE)


def _new_element_id() -> str:
    return str(uuid4())


def _frozen(properties: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(copy.deepcopy(dict(properties)))


class ElementSchema(BaseModel):
    """A positioned element inside a template layout.

    Attributes:
        id: Opaque unique identifier, stable for the element's lifetime
        type: Element type (TEXT, IMAGE, HEADER, DIVIDER, QUOTE)
        x: Horizontal canvas position
        y: Vertical canvas position
        width: Element width, never negative
        height: Element height, never negative
        z_index: Stacking order, serialized as ``zIndex``
        properties: Free-form properties (text, placeholder, imageUri, ...)
    """

    id: str = Field(default_factory=_new_element_id)
    type: ElementType
    x: int = 0
    y: int = 0
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    z_index: int = Field(default=0, alias="zIndex")
    properties: Mapping[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> ElementType:
        return ElementType.parse(value)

    @field_validator("properties", mode="before")
    @classmethod
    def _default_properties(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value

    @field_validator("properties")
    @classmethod
    def _freeze_properties(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _frozen(value)

    @field_serializer("properties")
    def _serialize_properties(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)

    def get_property(self, key: str, default: Any = None) -> Any:
        """Return a property value, or ``default`` when it is not set."""
        return self.properties.get(key, default)

    def set_property(self, key: str, value: Any) -> "ElementSchema":
        """Return a copy of this element with ``key`` set to ``value``."""
        properties = dict(self.properties)
        properties[key] = value
        return self.model_copy(update={"properties": _frozen(properties)})

    def remove_property(self, key: str) -> "ElementSchema":
        """Return a copy of this element without ``key``."""
        properties = {k: v for k, v in self.properties.items() if k != key}
        return self.model_copy(update={"properties": _frozen(properties)})

    def duplicate(self) -> "ElementSchema":
        """Return a copy of this element under a freshly generated id."""
        return self.model_copy(
            update={"id": _new_element_id(), "properties": _frozen(self.properties)}
        )

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase keys of the stored layout format."""
        return self.model_dump(mode="json", by_alias=True)
