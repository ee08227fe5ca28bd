"""Template layouts and their elements."""

from .catalog import PREDEFINED_TEMPLATE_TYPES, create_empty_template, create_predefined_template
from .elements import create_element, element_from_json, resolve_element_type
from .operations import (
    LayoutSource,
    add_element,
    create_empty_layout,
    extract_elements,
    find_element,
    get_canvas_properties,
    parse_layout,
    remove_element,
    replace_elements,
    set_canvas_properties,
    update_element,
)

__all__ = [
    "PREDEFINED_TEMPLATE_TYPES",
    "LayoutSource",
    "add_element",
    "create_element",
    "create_empty_layout",
    "create_empty_template",
    "create_predefined_template",
    "element_from_json",
    "extract_elements",
    "find_element",
    "get_canvas_properties",
    "parse_layout",
    "remove_element",
    "replace_elements",
    "resolve_element_type",
    "set_canvas_properties",
    "update_element",
]
