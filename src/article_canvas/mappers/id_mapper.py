"""Id-based content mapper."""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Literal, Mapping

from schemas.content import EditableField

from .mapper import ContentMapper
from .skeleton import PayloadSource, content_entries, entry_value

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MappingMismatch:
    """A stored entry or template element that could not be correlated.

    Attributes:
        element_id: Id involved (None for entries stored without an id)
        reason: Why the correlation failed
        index: Position of the entry in the payload, when it came from one
    """

    element_id: str | None
    reason: Literal["unknown_element", "missing_id", "missing_content"]
    index: int | None = None

    def describe(self) -> str:
        if self.reason == "unknown_element":
            return f"Content entry {self.index} refers to unknown element {self.element_id}"
        if self.reason == "missing_id":
            return f"Content entry {self.index} has no element id"
        return f"Element {self.element_id} has no stored content"


@dataclass
class MappingResult:
    """Fields produced by a mapping plus everything that failed to match."""

    fields: list[EditableField]
    mismatches: list[MappingMismatch] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.mismatches


class IdContentMapper(ContentMapper):
    """Correlates stored content with template elements by element id.

    Stored entries whose id no longer exists in the template, entries with no
    id, and editable template elements with no stored entry are reported as
    MappingMismatch records instead of being silently realigned.
    """

    def match(
        self,
        skeleton: Iterable[EditableField],
        payload: PayloadSource,
    ) -> MappingResult:
        """Populate a skeleton by id and report every mismatch.

        Args:
            skeleton: Fields produced by build_skeleton
            payload: Stored content (model, mapping, JSON string, or None)

        Returns:
            MappingResult with the new fields and any mismatches
        """
        fields = list(skeleton)
        positions = {f.element_id: i for i, f in enumerate(fields)}
        mismatches: list[MappingMismatch] = []
        seen: set[str] = set()

        for index, entry in enumerate(content_entries(payload)):
            element_id = _entry_id(entry)
            if element_id is None:
                mismatches.append(MappingMismatch(None, "missing_id", index))
                continue
            if element_id not in positions:
                mismatches.append(MappingMismatch(element_id, "unknown_element", index))
                continue

            seen.add(element_id)
            position = positions[element_id]
            value = entry_value(fields[position], entry)
            if value is not None:
                fields[position] = fields[position].with_value(value)

        for f in fields:
            if f.editable and f.element_id not in seen:
                mismatches.append(MappingMismatch(f.element_id, "missing_content"))

        return MappingResult(fields=fields, mismatches=mismatches)

    def populate(
        self,
        skeleton: Iterable[EditableField],
        payload: PayloadSource,
    ) -> list[EditableField]:
        result = self.match(skeleton, payload)
        for mismatch in result.mismatches:
            logger.warning(mismatch.describe())
        return result.fields


def _entry_id(entry: Any) -> str | None:
    if not isinstance(entry, Mapping):
        return None
    element_id = entry.get("id")
    return element_id if isinstance(element_id, str) and element_id else None
