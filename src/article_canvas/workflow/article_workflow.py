"""Article workflow state machine.

States and their allowed successors:

    draft          -> saved, deleted
    saved          -> draft, pending_review, deleted
    pending_review -> saved, published, deleted
    published      -> archived, deleted
    archived       -> published, deleted
    deleted        -> draft

Staying in the same state is always allowed. Deletion is soft: a deleted
article can only be restored to draft.

These are pure predicates. Callers must check and persist a transition
atomically against the stored state; nothing here locks.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from article_canvas.exceptions import InvalidTransitionError
from schemas.article import ArticleState

logger = logging.getLogger(__name__)

INITIAL_STATE = ArticleState.DRAFT

VALID_TRANSITIONS: Mapping[ArticleState, frozenset[ArticleState]] = MappingProxyType(
    {
        ArticleState.DRAFT: frozenset({ArticleState.SAVED, ArticleState.DELETED}),
        ArticleState.SAVED: frozenset(
            {ArticleState.DRAFT, ArticleState.PENDING_REVIEW, ArticleState.DELETED}
        ),
        ArticleState.PENDING_REVIEW: frozenset(
            {ArticleState.SAVED, ArticleState.PUBLISHED, ArticleState.DELETED}
        ),
        ArticleState.PUBLISHED: frozenset({ArticleState.ARCHIVED, ArticleState.DELETED}),
        ArticleState.ARCHIVED: frozenset({ArticleState.PUBLISHED, ArticleState.DELETED}),
        ArticleState.DELETED: frozenset({ArticleState.DRAFT}),
    }
)

EDITABLE_STATES = frozenset({ArticleState.DRAFT, ArticleState.SAVED})


def is_valid_transition(current: ArticleState, new: ArticleState) -> bool:
    """Check whether an article may move from ``current`` to ``new``."""
    if current == new:
        return True
    return new in VALID_TRANSITIONS.get(current, frozenset())


def validate_transition(current: ArticleState, new: ArticleState) -> None:
    """Raise if an article may not move from ``current`` to ``new``.

    Raises:
        InvalidTransitionError: If the transition is not in the table
    """
    if not is_valid_transition(current, new):
        logger.debug(f"Rejected transition {current} -> {new}")
        raise InvalidTransitionError(current, new)


def get_valid_next_states(current: ArticleState) -> frozenset[ArticleState]:
    """Return the states reachable from ``current`` in one step.

    Unrecognized states have no successors.
    """
    return VALID_TRANSITIONS.get(current, frozenset())


def can_edit(state: ArticleState) -> bool:
    return state in EDITABLE_STATES


def can_publish(state: ArticleState) -> bool:
    return state == ArticleState.PENDING_REVIEW


def can_submit_for_review(state: ArticleState) -> bool:
    return state == ArticleState.SAVED
