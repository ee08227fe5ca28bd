"""Base class for content mappers.

A content mapper translates between a template layout and an article's
content payload:

- build_skeleton: layout -> editable fields, seeded from element properties
- populate: editable fields + stored payload -> fields holding stored values
- serialize: editable fields -> content payload for persistence

Only ``populate`` differs between mappers; it decides how stored entries are
correlated with template elements.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from article_canvas.layout.operations import LayoutSource
from schemas.content import ContentPayload, EditableField

from .skeleton import PayloadSource, build_editable_skeleton, serialize_skeleton


class ContentMapper(ABC):
    """Abstract base class for layout/content mappers."""

    def build_skeleton(self, layout: LayoutSource) -> list[EditableField]:
        """Build the editable skeleton for a layout. Never fails."""
        return build_editable_skeleton(layout)

    @abstractmethod
    def populate(
        self,
        skeleton: Iterable[EditableField],
        payload: PayloadSource,
    ) -> list[EditableField]:
        """Fill a skeleton with the values of a stored content payload.

        Must not raise on malformed payloads; unusable data leaves the
        template-derived values in place.

        Args:
            skeleton: Fields produced by build_skeleton
            payload: Stored content (model, mapping, JSON string, or None)

        Returns:
            A new list of fields
        """
        pass

    def serialize(self, skeleton: Iterable[EditableField]) -> ContentPayload:
        """Serialize a skeleton into a content payload."""
        return serialize_skeleton(skeleton)

    def load(self, layout: LayoutSource, payload: PayloadSource) -> list[EditableField]:
        """Build a layout's skeleton and populate it from stored content."""
        return self.populate(self.build_skeleton(layout), payload)
