"""Article editing session: template -> skeleton -> content -> workflow."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from article_canvas.exceptions import (
    ElementNotFoundError,
    InvalidArgumentError,
    InvalidTransitionError,
)
from article_canvas.layout.operations import create_empty_layout, parse_layout
from article_canvas.mappers import ContentMapper, PositionalContentMapper, set_field_value
from article_canvas.workflow import (
    INITIAL_STATE,
    can_edit,
    can_publish,
    can_submit_for_review,
    validate_transition,
)
from schemas.article import Article, ArticleState
from schemas.content import EditableField
from schemas.element import ElementType
from schemas.template import Template

from .collaborators import ArticleStore, ImageHost, TemplateStore

logger = logging.getLogger(__name__)


class ArticleEditor:
    """Drives editing and lifecycle changes of articles built from templates.

    The editor owns no state between calls: skeletons and articles are passed
    in and new values are returned. Persisting a transition happens right
    after validating it, but the check is against the article as passed in;
    the storage backend must reject writes based on a stale state.

    Example:
        with TemplateClient(config) as templates, ArticleClient(config) as articles:
            editor = ArticleEditor(templates, articles)
            skeleton = editor.open(article)
            skeleton = editor.set_text(skeleton, header_id, "Hello")
            article = editor.save(article, skeleton)
    """

    def __init__(
        self,
        template_store: TemplateStore,
        article_store: ArticleStore,
        image_host: ImageHost | None = None,
        mapper: ContentMapper | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize the editor.

        Args:
            template_store: Source of templates by id
            article_store: Destination for saved articles
            image_host: Uploader for images (required for attach_image)
            mapper: Content mapper (default: PositionalContentMapper)
            clock: Time source for publish timestamps
        """
        self.template_store = template_store
        self.article_store = article_store
        self.image_host = image_host
        self.mapper = mapper or PositionalContentMapper()
        self.clock = clock

    def start(self, template: Template, title: str = "") -> tuple[Article, list[EditableField]]:
        """Begin a new article from a template.

        Returns:
            The unsaved draft article and its skeleton of template defaults
        """
        article = Article(title=title, template_id=template.id, status=INITIAL_STATE)
        return article, self.mapper.build_skeleton(template)

    def open(self, article: Article) -> list[EditableField]:
        """Build the skeleton for an existing article, filled with its content."""
        if article.template_id is None:
            logger.warning(f"Article {article.id} has no template, opening empty")
            layout = create_empty_layout()
        else:
            layout = parse_layout(self.template_store.fetch(article.template_id))

        return self.mapper.load(layout, article.content)

    def set_text(
        self, skeleton: list[EditableField], element_id: str, text: str
    ) -> list[EditableField]:
        """Set the text of a TEXT, HEADER or QUOTE field.

        Raises:
            ElementNotFoundError: If no field edits ``element_id``
            InvalidArgumentError: If the field does not hold text
        """
        field = self._field(skeleton, element_id)
        if not field.type.is_text_bearing:
            raise InvalidArgumentError(
                f"Element {element_id} is a {field.type.value} element, not text"
            )
        return set_field_value(skeleton, element_id, text)

    def attach_image(
        self, skeleton: list[EditableField], element_id: str, image_path: Path
    ) -> list[EditableField]:
        """Upload an image and store its URL in an IMAGE field.

        Raises:
            ElementNotFoundError: If no field edits ``element_id``
            InvalidArgumentError: If the field is not an image or no image
                host is configured
        """
        if self.image_host is None:
            raise InvalidArgumentError("No image host configured")

        field = self._field(skeleton, element_id)
        if field.type is not ElementType.IMAGE:
            raise InvalidArgumentError(
                f"Element {element_id} is a {field.type.value} element, not an image"
            )
        url = self.image_host.upload(image_path)
        logger.debug(f"Attached {url} to element {element_id}")
        return set_field_value(skeleton, element_id, url)

    def save(self, article: Article, skeleton: list[EditableField]) -> Article:
        """Serialize the skeleton into the article and persist it as saved.

        Raises:
            InvalidTransitionError: If the article is not editable
        """
        if not can_edit(article.status):
            raise InvalidTransitionError(
                article.status,
                ArticleState.SAVED,
                f"Cannot save an article in state {article.status.code}",
            )

        validate_transition(article.status, ArticleState.SAVED)
        content = self.mapper.serialize(skeleton).to_json_dict()
        updated = article.model_copy(
            update={"content": content, "status": ArticleState.SAVED}
        )
        return self.article_store.save(updated)

    def transition(self, article: Article, new_state: ArticleState) -> Article:
        """Validate and persist a state change.

        Entering PUBLISHED stamps ``published_at``.

        Raises:
            InvalidTransitionError: If the workflow forbids the change
        """
        validate_transition(article.status, new_state)

        update: dict = {"status": new_state}
        if new_state == ArticleState.PUBLISHED and article.status != new_state:
            update["published_at"] = self.clock().isoformat(timespec="seconds")

        logger.info(f"Article {article.id}: {article.status.code} -> {new_state.code}")
        return self.article_store.save(article.model_copy(update=update))

    def submit_for_review(self, article: Article) -> Article:
        if not can_submit_for_review(article.status):
            raise InvalidTransitionError(article.status, ArticleState.PENDING_REVIEW)
        return self.transition(article, ArticleState.PENDING_REVIEW)

    def publish(self, article: Article) -> Article:
        """Publish a reviewed article."""
        if not can_publish(article.status):
            raise InvalidTransitionError(
                article.status,
                ArticleState.PUBLISHED,
                f"Cannot publish an article in state {article.status.code}",
            )
        return self.transition(article, ArticleState.PUBLISHED)

    def archive(self, article: Article) -> Article:
        return self.transition(article, ArticleState.ARCHIVED)

    def unarchive(self, article: Article) -> Article:
        """Put an archived article back online."""
        if article.status != ArticleState.ARCHIVED:
            raise InvalidTransitionError(article.status, ArticleState.PUBLISHED)
        return self.transition(article, ArticleState.PUBLISHED)

    def delete(self, article: Article) -> Article:
        """Soft-delete an article."""
        return self.transition(article, ArticleState.DELETED)

    def restore(self, article: Article) -> Article:
        """Bring a deleted article back as a draft."""
        return self.transition(article, ArticleState.DRAFT)

    def _field(self, skeleton: list[EditableField], element_id: str) -> EditableField:
        for field in skeleton:
            if field.element_id == element_id:
                return field
        raise ElementNotFoundError(element_id)
