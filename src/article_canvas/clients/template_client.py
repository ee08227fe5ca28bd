"""Template API client."""

import logging
from typing import Any

from article_canvas.layout.operations import parse_layout
from schemas.layout import TemplateLayout
from schemas.template import Template

from .client import Client
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class TemplateClient(Client):
    """Client for the backend's template endpoints.

    Templates are returned with their raw layout JSON; use ``fetch_layout``
    (or ``parse_layout`` on the record) to get a TemplateLayout.

    Example:
        config = {"base_url": "http://localhost:8080"}
        with TemplateClient(config) as client:
            layout = client.fetch_layout(42)
    """

    API_PATH = "/api/templates"

    def fetch(self, template_id: int) -> Template:
        """Fetch a single template.

        Raises:
            NotFoundError: If the template does not exist
            ValidationError: If the response is not a valid template
        """
        response = self.get(f"{self.API_PATH}/{template_id}")
        return self._validate(Template, self._json(response))

    def fetch_layout(self, template_id: int) -> TemplateLayout:
        """Fetch a template and read its layout leniently."""
        return parse_layout(self.fetch(template_id))

    def list_templates(self) -> list[Template]:
        """Fetch all templates.

        The backend answers either with a plain list or with a page object
        holding the list under ``content``; only the first page is read.
        """
        data = self._json(self.get(self.API_PATH))
        items = data.get("content") if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise ValidationError(
                f"Unexpected template list response: {type(data).__name__}",
                resource=self.API_PATH,
            )
        return [self._validate(Template, item) for item in items]

    def create(self, template: Template) -> Template:
        """Persist a new template and return the stored record."""
        response = self.post(self.API_PATH, json=self._body(template))
        created = self._validate(Template, self._json(response))
        logger.info(f"Created template {created.id}: {created.name}")
        return created

    def update(self, template: Template) -> Template:
        """Replace a stored template.

        Raises:
            ValueError: If the template has no id
            ConflictError: If the backend saw a newer version
        """
        if template.id is None:
            raise ValueError("template must have an id to be updated")
        response = self.put(f"{self.API_PATH}/{template.id}", json=self._body(template))
        return self._validate(Template, self._json(response))

    def save_layout(self, template: Template, layout: TemplateLayout) -> Template:
        """Store a new layout on an existing template."""
        return self.update(template.model_copy(update={"layout": layout.to_json_dict()}))

    def remove(self, template_id: int) -> None:
        """Delete a template."""
        self.delete(f"{self.API_PATH}/{template_id}")
        logger.info(f"Deleted template {template_id}")

    def _body(self, template: Template) -> dict[str, Any]:
        return template.model_dump(mode="json", exclude_none=True)
