"""Construction of template elements."""

import logging
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from article_canvas.exceptions import InvalidArgumentError
from schemas.element import ElementSchema, ElementType

logger = logging.getLogger(__name__)


def resolve_element_type(value: "str | ElementType") -> ElementType:
    """Resolve an element type name, rejecting anything outside the closed set.

    Raises:
        InvalidArgumentError: If the name is not a known element type
    """
    try:
        return ElementType.parse(value)
    except ValueError as e:
        raise InvalidArgumentError(str(e)) from e


def create_element(
    element_type: "str | ElementType",
    x: int,
    y: int,
    width: int,
    height: int,
    z_index: int = 0,
    properties: Mapping[str, Any] | None = None,
) -> ElementSchema:
    """Create a new element with a freshly generated id.

    Args:
        element_type: One of TEXT, IMAGE, HEADER, DIVIDER, QUOTE
        x: Horizontal canvas position
        y: Vertical canvas position
        width: Element width (must not be negative)
        height: Element height (must not be negative)
        z_index: Stacking order (default: 0)
        properties: Initial properties; copied, never shared

    Returns:
        The new ElementSchema

    Raises:
        InvalidArgumentError: For an unknown type or negative dimensions
    """
    resolved_type = resolve_element_type(element_type)

    if width < 0 or height < 0:
        raise InvalidArgumentError(
            f"Element dimensions must not be negative (got {width}x{height})"
        )

    try:
        element = ElementSchema(
            type=resolved_type,
            x=x,
            y=y,
            width=width,
            height=height,
            z_index=z_index,
            properties=dict(properties or {}),
        )
    except PydanticValidationError as e:
        raise InvalidArgumentError(
            "Invalid element definition",
            errors=[str(err) for err in e.errors()],
        ) from e

    logger.debug(f"Created {resolved_type.value} element {element.id}")
    return element


def element_from_json(data: Mapping[str, Any]) -> ElementSchema:
    """Build an element from its stored JSON form.

    Unlike the lenient layout readers, this is strict: it is meant for
    elements coming from an editing surface, not from historical storage.

    Raises:
        InvalidArgumentError: If the data does not describe a valid element
    """
    try:
        return ElementSchema.model_validate(data)
    except PydanticValidationError as e:
        raise InvalidArgumentError(
            f"Invalid element {data.get('id', '<no id>')!r}",
            errors=[str(err) for err in e.errors()],
        ) from e
