"""Article domain objects."""

import json
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)


class ArticleState(str, Enum):
    """Lifecycle states of an article.

    Each member's value is the lowercase code used at the storage boundary.
    """

    DRAFT = "draft"
    SAVED = "saved"
    PENDING_REVIEW = "pending_review"
    PUBLISHED = "published"
    ARCHIVED = "archived"
    DELETED = "deleted"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, value: "str | ArticleState | None") -> "ArticleState":
        """Parse a state code case-insensitively, falling back to DRAFT."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for state in cls:
                if state.value == normalized:
                    return state
        logger.debug(f"Unrecognized article state {value!r}, using draft")
        return cls.DRAFT


class Article(BaseModel):
    """An article as exchanged with the backend.

    Only ``template_id``, ``content`` and ``status`` are interpreted by the
    engine; everything else is carried through untouched.

    Attributes:
        id: Backend identifier (None until persisted)
        title: Article title
        template_id: Id of the template the content was shaped by
        content: Serialized content payload (``{"elements": [...]}``)
        status: Workflow state
        preview_text: Teaser text for listings
        thumbnail_url: Preview image URL
        published_at: Timestamp of the last publish
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: int | None = None
    title: str = ""
    template_id: int | None = None
    content: dict[str, Any] | None = None
    status: ArticleState = ArticleState.DRAFT
    preview_text: str | None = None
    thumbnail_url: str | None = None
    published_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = {"extra": "allow"}

    @field_validator("content", mode="before")
    @classmethod
    def _parse_content(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError:
                logger.warning("Article content is not valid JSON, ignoring it")
                return None
        if value is not None and not isinstance(value, dict):
            logger.warning(f"Article content has unexpected shape {type(value).__name__}, ignoring it")
            return None
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> ArticleState:
        return ArticleState.from_code(value)
