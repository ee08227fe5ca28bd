"""Schema definitions for Article Canvas."""

from .article import Article, ArticleState
from .content import ContentElement, ContentPayload, EditableField
from .element import ElementSchema, ElementType
from .layout import (
    DEFAULT_BACKGROUND_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    CanvasProperties,
    TemplateLayout,
)
from .template import Template

__all__ = [
    "Article",
    "ArticleState",
    "CanvasProperties",
    "ContentElement",
    "ContentPayload",
    "DEFAULT_BACKGROUND_COLOR",
    "DEFAULT_CANVAS_HEIGHT",
    "DEFAULT_CANVAS_WIDTH",
    "EditableField",
    "ElementSchema",
    "ElementType",
    "Template",
    "TemplateLayout",
]
