"""Interfaces of the services the editor depends on.

The engine never talks to storage or image hosting directly; it is handed
objects satisfying these protocols. The HTTP clients in
``article_canvas.clients`` are the production implementations.
"""

from pathlib import Path
from typing import Protocol

from schemas.article import Article
from schemas.template import Template


class TemplateStore(Protocol):
    """Retrieves templates by id."""

    def fetch(self, template_id: int) -> Template: ...


class ArticleStore(Protocol):
    """Persists articles, returning the stored record."""

    def save(self, article: Article) -> Article: ...


class ImageHost(Protocol):
    """Turns a user-picked image into a stable URL."""

    def upload(self, image_path: Path) -> str: ...
