"""Article editing on top of the layout, mapper and workflow modules."""

from .article_editor import ArticleEditor
from .collaborators import ArticleStore, ImageHost, TemplateStore

__all__ = [
    "ArticleEditor",
    "ArticleStore",
    "ImageHost",
    "TemplateStore",
]
