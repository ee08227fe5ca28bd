"""Article lifecycle workflow."""

from .article_workflow import (
    EDITABLE_STATES,
    INITIAL_STATE,
    VALID_TRANSITIONS,
    can_edit,
    can_publish,
    can_submit_for_review,
    get_valid_next_states,
    is_valid_transition,
    validate_transition,
)

__all__ = [
    "EDITABLE_STATES",
    "INITIAL_STATE",
    "VALID_TRANSITIONS",
    "can_edit",
    "can_publish",
    "can_submit_for_review",
    "get_valid_next_states",
    "is_valid_transition",
    "validate_transition",
]
