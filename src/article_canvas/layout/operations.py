"""Layout operations.

Every function here is pure: it returns a new TemplateLayout (or a new list)
and never mutates its input. Callers editing the same template concurrently
must serialize their writes through the storage backend.

Reads of stored layouts are lenient: historical templates with missing or
malformed data still load, with defaults substituted and broken elements
skipped. Edits are strict and raise on bad input.
"""

import json
import logging
from typing import Any, Iterable, Mapping

from pydantic import ValidationError as PydanticValidationError

from article_canvas.exceptions import ElementNotFoundError, InvalidArgumentError
from schemas.element import ElementSchema
from schemas.layout import (
    CanvasProperties,
    TemplateLayout,
    sort_by_z_index,
)
from schemas.template import Template

logger = logging.getLogger(__name__)

LayoutSource = TemplateLayout | Template | Mapping[str, Any] | str | None

_CANVAS_KEYS = {
    "width": ("canvasWidth", "canvas_width", "width"),
    "height": ("canvasHeight", "canvas_height", "height"),
    "background_color": ("backgroundColor", "background_color"),
}


def create_empty_layout() -> TemplateLayout:
    """Create a layout with default canvas properties and no elements."""
    return TemplateLayout()


def parse_layout(source: LayoutSource) -> TemplateLayout:
    """Read a stored layout, substituting defaults for anything unusable.

    Args:
        source: A TemplateLayout, a Template record, the raw layout mapping,
            a JSON string, or None

    Returns:
        A TemplateLayout; never raises on malformed data
    """
    if isinstance(source, TemplateLayout):
        return source

    data = _layout_data(source)
    if data is None:
        return create_empty_layout()

    canvas = _read_canvas(data, CanvasProperties())
    return TemplateLayout(
        canvas_width=canvas.width,
        canvas_height=canvas.height,
        background_color=canvas.background_color,
        elements=_read_elements(data.get("elements")),
    )


def extract_elements(source: LayoutSource) -> list[ElementSchema]:
    """Return the layout's elements in ascending z-index order.

    Elements with equal z-index keep their original order. Missing or
    malformed element data yields an empty list.
    """
    return list(parse_layout(source).elements)


def find_element(layout: LayoutSource, element_id: str) -> ElementSchema | None:
    """Look up an element by id, returning None when absent."""
    for element in extract_elements(layout):
        if element.id == element_id:
            return element
    return None


def add_element(layout: LayoutSource, element: ElementSchema) -> TemplateLayout:
    """Return a copy of the layout with ``element`` appended and re-sorted."""
    current = parse_layout(layout)
    return _with_elements(current, [*current.elements, element])


def update_element(
    layout: LayoutSource,
    element_id: str,
    element: ElementSchema,
) -> TemplateLayout:
    """Return a copy of the layout with the element ``element_id`` replaced.

    Raises:
        ElementNotFoundError: If no element has ``element_id``
    """
    current = parse_layout(layout)
    elements = list(current.elements)

    for index, existing in enumerate(elements):
        if existing.id == element_id:
            elements[index] = element
            return _with_elements(current, elements)

    raise ElementNotFoundError(element_id)


def remove_element(layout: LayoutSource, element_id: str) -> TemplateLayout:
    """Return a copy of the layout without the element ``element_id``.

    Raises:
        ElementNotFoundError: If no element has ``element_id``
    """
    current = parse_layout(layout)
    remaining = [e for e in current.elements if e.id != element_id]

    if len(remaining) == len(current.elements):
        raise ElementNotFoundError(element_id)

    return _with_elements(current, remaining)


def replace_elements(
    layout: LayoutSource, elements: Iterable[ElementSchema]
) -> TemplateLayout:
    """Return a copy of the layout holding exactly ``elements``, re-sorted."""
    return _with_elements(parse_layout(layout), list(elements))


def get_canvas_properties(layout: LayoutSource) -> CanvasProperties:
    """Return the canvas properties, with defaults for missing values."""
    return parse_layout(layout).canvas


def set_canvas_properties(
    layout: LayoutSource,
    properties: CanvasProperties | Mapping[str, Any],
) -> TemplateLayout:
    """Return a copy of the layout with canvas properties overridden.

    Keys absent from ``properties`` keep the layout's current values. Both the
    stored camelCase keys (``canvasWidth``) and the short names (``width``)
    are accepted.

    Raises:
        InvalidArgumentError: If a value is not a valid canvas property
    """
    current = parse_layout(layout)

    if isinstance(properties, CanvasProperties):
        updates = properties.model_dump()
    else:
        updates = {}
        for field, keys in _CANVAS_KEYS.items():
            for key in keys:
                if key in properties:
                    updates[field] = properties[key]
                    break

    merged = {**current.canvas.model_dump(), **updates}
    try:
        canvas = CanvasProperties.model_validate(merged)
    except PydanticValidationError as e:
        raise InvalidArgumentError(
            "Invalid canvas properties",
            errors=[str(err) for err in e.errors()],
        ) from e

    return current.model_copy(
        update={
            "canvas_width": canvas.width,
            "canvas_height": canvas.height,
            "background_color": canvas.background_color,
        }
    )


def _with_elements(
    layout: TemplateLayout, elements: list[ElementSchema]
) -> TemplateLayout:
    return layout.model_copy(update={"elements": sort_by_z_index(elements)})


def _layout_data(source: LayoutSource) -> Mapping[str, Any] | None:
    if isinstance(source, Template):
        source = source.layout

    if isinstance(source, str):
        try:
            source = json.loads(source)
        except json.JSONDecodeError:
            logger.warning("Layout is not valid JSON, using an empty layout")
            return None

    if source is None:
        return None

    if not isinstance(source, Mapping):
        logger.warning(
            f"Layout has unexpected type {type(source).__name__}, "
            "using an empty layout"
        )
        return None

    return source


def _read_canvas(data: Mapping[str, Any], defaults: CanvasProperties) -> CanvasProperties:
    values = {}
    for field, keys in _CANVAS_KEYS.items():
        for key in keys[:2]:
            if key in data:
                values[field] = data[key]
                break

    try:
        return CanvasProperties.model_validate({**defaults.model_dump(), **values})
    except PydanticValidationError:
        logger.warning("Layout has invalid canvas properties, using defaults")

    # Keep whichever values are individually valid
    canvas = defaults
    for field, value in values.items():
        try:
            canvas = CanvasProperties.model_validate(
                {**canvas.model_dump(), field: value}
            )
        except PydanticValidationError:
            logger.debug(f"Ignoring invalid canvas {field}: {value!r}")
    return canvas


def _read_elements(raw_elements: Any) -> list[ElementSchema]:
    if raw_elements is None:
        return []

    if not isinstance(raw_elements, list):
        logger.warning("Layout elements is not a list, treating as empty")
        return []

    elements: list[ElementSchema] = []
    for index, raw in enumerate(raw_elements):
        if not isinstance(raw, Mapping):
            logger.warning(f"Skipping layout element {index}: not an object")
            continue
        try:
            elements.append(ElementSchema.model_validate(raw))
        except PydanticValidationError as e:
            logger.warning(
                f"Skipping layout element {raw.get('id', index)!r}: "
                f"{e.error_count()} validation error(s)"
            )
    return elements

