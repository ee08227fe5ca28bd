"""Article API client."""

import logging

from schemas.article import Article

from .client import Client

logger = logging.getLogger(__name__)


class ArticleClient(Client):
    """Client for the backend's article endpoints.

    Only persists what it is given: state transitions must be validated
    (see ``article_canvas.workflow``) before an article is saved.

    Example:
        config = {"base_url": "http://localhost:8080"}
        with ArticleClient(config) as client:
            article = client.fetch(7)
    """

    API_PATH = "/api/articles"

    def fetch(self, article_id: int) -> Article:
        """Fetch a single article.

        Raises:
            NotFoundError: If the article does not exist
            ValidationError: If the response is not a valid article
        """
        response = self.get(f"{self.API_PATH}/{article_id}")
        return self._validate(Article, self._json(response))

    def save(self, article: Article) -> Article:
        """Create the article if it has no id yet, otherwise replace it."""
        body = article.model_dump(mode="json", exclude_none=True)

        if article.id is None:
            response = self.post(self.API_PATH, json=body)
        else:
            response = self.put(f"{self.API_PATH}/{article.id}", json=body)

        saved = self._validate(Article, self._json(response))
        logger.debug(f"Saved article {saved.id} in state {saved.status.code}")
        return saved
