"""Positional content mapper."""

import logging
from typing import Iterable

from schemas.content import EditableField

from .mapper import ContentMapper
from .skeleton import PayloadSource, content_entries, entry_value

logger = logging.getLogger(__name__)


class PositionalContentMapper(ContentMapper):
    """Correlates stored content with template elements by position.

    Skeleton field ``i`` takes its value from payload entry ``i`` for
    ``i < min(len(skeleton), len(entries))``. Divider fields count toward the
    index even though dividers are never stored, which is how existing
    articles were written and must be read back.

    Trailing skeleton fields without an entry keep their template value.
    Trailing entries without a field are dropped. If a template is edited
    after articles were written against it, stored values can land on the
    wrong element; IdContentMapper avoids that for payloads carrying ids.
    """

    def populate(
        self,
        skeleton: Iterable[EditableField],
        payload: PayloadSource,
    ) -> list[EditableField]:
        fields = list(skeleton)
        entries = content_entries(payload)

        matched = min(len(fields), len(entries))
        for index in range(matched):
            value = entry_value(fields[index], entries[index])
            if value is not None:
                fields[index] = fields[index].with_value(value)

        if len(entries) > len(fields):
            logger.debug(
                f"Dropped {len(entries) - len(fields)} content entries "
                "with no matching template element"
            )

        return fields
