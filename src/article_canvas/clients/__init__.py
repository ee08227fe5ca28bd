"""Clients for the article backend (storage and image hosting)."""

from .article_client import ArticleClient
from .client import Client
from .exceptions import (
    APIError,
    AuthenticationError,
    ClientError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)
from .media_client import MediaClient
from .template_client import TemplateClient

__all__ = [
    "Client",
    "ArticleClient",
    "MediaClient",
    "TemplateClient",
    "ClientError",
    "ConnectionError",
    "APIError",
    "AuthenticationError",
    "ConflictError",
    "RateLimitError",
    "NotFoundError",
    "ValidationError",
]
