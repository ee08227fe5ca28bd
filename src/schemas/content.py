"""Article content schemas.

The content payload is what gets persisted per article:

    {"elements": [{"id": "...", "type": "TEXT", "content": "..."},
                  {"id": "...", "type": "IMAGE", "url": "https://..."}]}

Text-bearing entries always carry ``content``; image entries carry ``url``
only when an image was set, so "no image" stays distinguishable from
"emptied text".
"""

from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from .element import ElementType


class ContentElement(BaseModel):
    """One filled-in element of an article's content.

    Attributes:
        id: Id of the template element this value belongs to
        type: Element type name
        content: Text value for TEXT, HEADER and QUOTE elements
        url: Hosted image URL for IMAGE elements
    """

    id: str
    type: ElementType
    content: str | None = None
    url: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: Any) -> ElementType:
        return ElementType.parse(value)


class ContentPayload(BaseModel):
    """Serialized content of an article, in skeleton order."""

    elements: list[ContentElement] = []

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize, omitting ``content``/``url`` keys that were never set."""
        return self.model_dump(mode="json", exclude_none=True)


class EditableField(BaseModel):
    """One entry of an editable skeleton.

    Attributes:
        element_id: Id of the template element this field edits
        type: Element type
        initial_value: Value derived from the template element's properties
        value: Current value; starts out equal to ``initial_value``
    """

    element_id: str
    type: ElementType
    initial_value: str | None = None
    value: str | None = None

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _default_value(cls, data: Any) -> Any:
        if isinstance(data, dict) and "value" not in data:
            data = {**data, "value": data.get("initial_value")}
        return data

    @property
    def editable(self) -> bool:
        return self.type is not ElementType.DIVIDER

    @property
    def modified(self) -> bool:
        return self.value != self.initial_value

    def with_value(self, value: str | None) -> "EditableField":
        """Return a copy of this field holding ``value``."""
        return self.model_copy(update={"value": value})
