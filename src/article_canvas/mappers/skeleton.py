"""Editable skeletons built from template layouts.

A skeleton is a list of EditableField, one per template element in z-index
order. It is the in-memory form an editor fills in before the values are
serialized into an article's content payload.
"""

import json
import logging
from typing import Any, Iterable, Mapping

from article_canvas.exceptions import ElementNotFoundError, InvalidArgumentError
from article_canvas.layout.operations import LayoutSource, extract_elements
from schemas.content import ContentElement, ContentPayload, EditableField
from schemas.element import ElementSchema, ElementType

logger = logging.getLogger(__name__)

TEXT_VALUE_KEYS = ("text", "content")
IMAGE_VALUE_KEYS = ("url", "imageUri")

PayloadSource = ContentPayload | Mapping[str, Any] | str | None


def initial_value(element: ElementSchema) -> str | None:
    """Derive a field's starting value from an element's properties."""
    if element.type is ElementType.DIVIDER:
        return None

    keys = IMAGE_VALUE_KEYS if element.type is ElementType.IMAGE else TEXT_VALUE_KEYS
    for key in keys:
        value = element.get_property(key)
        if isinstance(value, str):
            return value
    return None


def build_editable_skeleton(layout: LayoutSource) -> list[EditableField]:
    """Build one editable field per element, in z-index order."""
    return [
        EditableField(
            element_id=element.id,
            type=element.type,
            initial_value=initial_value(element),
        )
        for element in extract_elements(layout)
    ]


def serialize_skeleton(skeleton: Iterable[EditableField]) -> ContentPayload:
    """Serialize a skeleton into a content payload, in skeleton order.

    Text-bearing fields always emit ``content`` (empty string when unset).
    Image fields emit ``url`` only when an image was set. Dividers are
    regenerated from the template and are not stored.
    """
    elements: list[ContentElement] = []
    for field in skeleton:
        if field.type is ElementType.DIVIDER:
            continue
        if field.type is ElementType.IMAGE:
            elements.append(
                ContentElement(id=field.element_id, type=field.type, url=field.value or None)
            )
        else:
            elements.append(
                ContentElement(id=field.element_id, type=field.type, content=field.value or "")
            )
    return ContentPayload(elements=elements)


def set_field_value(
    skeleton: Iterable[EditableField],
    element_id: str,
    value: str | None,
) -> list[EditableField]:
    """Return a copy of the skeleton with one field's value replaced.

    Raises:
        ElementNotFoundError: If no field edits ``element_id``
        InvalidArgumentError: If the field is a divider
    """
    fields = list(skeleton)
    for index, field in enumerate(fields):
        if field.element_id != element_id:
            continue
        if not field.editable:
            raise InvalidArgumentError(f"Element {element_id} is not editable")
        fields[index] = field.with_value(value)
        return fields

    raise ElementNotFoundError(element_id)


def content_entries(payload: PayloadSource) -> list[Any]:
    """Return the raw ``elements`` list of a stored payload.

    Anything unusable (invalid JSON, wrong shape, missing key) yields an empty
    list, so the caller falls back to template defaults. Entries themselves
    are returned as-is and may still be malformed.
    """
    if isinstance(payload, ContentPayload):
        return payload.to_json_dict()["elements"]

    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError:
            logger.warning("Content payload is not valid JSON, using template defaults")
            return []

    if payload is None:
        return []

    if not isinstance(payload, Mapping):
        logger.warning(
            f"Content payload has unexpected type {type(payload).__name__}, "
            "using template defaults"
        )
        return []

    entries = payload.get("elements")
    if not isinstance(entries, list):
        logger.warning("Content payload has no elements list, using template defaults")
        return []

    return entries


def entry_value(field: EditableField, entry: Any) -> str | None:
    """Pick the value an entry holds for ``field``, or None if it holds none.

    Text fields read ``content``, image fields read ``url``; an entry without
    the matching key (or with a non-string value) leaves the field alone.
    """
    if not field.editable or not isinstance(entry, Mapping):
        return None

    key = "url" if field.type is ElementType.IMAGE else "content"
    value = entry.get(key)
    return value if isinstance(value, str) else None
