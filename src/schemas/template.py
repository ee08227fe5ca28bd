"""Template records as kept by the storage backend."""

from typing import Any

from pydantic import BaseModel


class Template(BaseModel):
    """A reusable template as stored and exchanged with the backend.

    The layout is kept exactly as the backend returned it: usually a JSON
    mapping, sometimes a JSON string, and for corrupt historical records
    anything at all. It is never validated here; read it through
    ``parse_layout`` which falls back to defaults instead of failing.

    Attributes:
        id: Backend identifier (None until persisted)
        name: Display name
        description: Short description
        layout: Raw stored layout (canvas properties and elements)
        version: Template version, starting at 1
        thumbnail_url: Preview image URL
        created_at: Creation timestamp as returned by the backend
        updated_at: Last update timestamp as returned by the backend
    """

    id: int | None = None
    name: str
    description: str | None = None
    layout: Any = None
    version: int = 1
    thumbnail_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    model_config = {"extra": "allow"}
