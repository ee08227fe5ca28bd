"""Tests for the article workflow state machine."""

import pytest

from article_canvas import InvalidTransitionError
from article_canvas.workflow import (
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
from schemas.article import ArticleState

DRAFT = ArticleState.DRAFT
SAVED = ArticleState.SAVED
PENDING_REVIEW = ArticleState.PENDING_REVIEW
PUBLISHED = ArticleState.PUBLISHED
ARCHIVED = ArticleState.ARCHIVED
DELETED = ArticleState.DELETED

ALLOWED = {
    (DRAFT, SAVED),
    (DRAFT, DELETED),
    (SAVED, DRAFT),
    (SAVED, PENDING_REVIEW),
    (SAVED, DELETED),
    (PENDING_REVIEW, SAVED),
    (PENDING_REVIEW, PUBLISHED),
    (PENDING_REVIEW, DELETED),
    (PUBLISHED, ARCHIVED),
    (PUBLISHED, DELETED),
    (ARCHIVED, PUBLISHED),
    (ARCHIVED, DELETED),
    (DELETED, DRAFT),
}


class TestTransitionTable:
    """Tests for the transition table."""

    def test_initial_state(self):
        """New articles start as drafts."""
        assert INITIAL_STATE is DRAFT

    def test_every_state_has_an_entry(self):
        """The table covers the whole state set."""
        assert set(VALID_TRANSITIONS) == set(ArticleState)

    def test_table_is_read_only(self):
        """The table cannot be changed at runtime."""
        with pytest.raises(TypeError):
            VALID_TRANSITIONS[DRAFT] = frozenset({PUBLISHED})

    @pytest.mark.parametrize("current", list(ArticleState))
    @pytest.mark.parametrize("new", list(ArticleState))
    def test_is_valid_transition_matches_table(self, current, new):
        """Exactly the listed pairs and self-transitions are allowed."""
        expected = current == new or (current, new) in ALLOWED

        assert is_valid_transition(current, new) is expected

    @pytest.mark.parametrize("state", list(ArticleState))
    def test_self_transition_allowed(self, state):
        """Staying in a state is always allowed."""
        validate_transition(state, state)

    @pytest.mark.parametrize("state", [SAVED, PENDING_REVIEW, PUBLISHED, ARCHIVED])
    def test_deleted_only_restores_to_draft(self, state):
        """A deleted article can only go back to draft."""
        assert not is_valid_transition(DELETED, state)
        assert is_valid_transition(DELETED, DRAFT)

    @pytest.mark.parametrize("state", [s for s in ArticleState if s is not DELETED])
    def test_any_state_can_be_deleted(self, state):
        """Every live state can be soft-deleted."""
        assert is_valid_transition(state, DELETED)


class TestValidateTransition:
    """Tests for validate_transition."""

    def test_published_cannot_revert_to_draft(self):
        """Published articles must be archived, not reverted."""
        with pytest.raises(InvalidTransitionError) as exc_info:
            validate_transition(PUBLISHED, DRAFT)

        assert exc_info.value.from_state is PUBLISHED
        assert exc_info.value.to_state is DRAFT
        assert str(exc_info.value) == "Invalid state transition from PUBLISHED to DRAFT"

    def test_draft_cannot_skip_review(self):
        """Drafts cannot be published directly."""
        with pytest.raises(InvalidTransitionError):
            validate_transition(DRAFT, PUBLISHED)

    def test_valid_transition_returns_none(self):
        """Allowed transitions pass silently."""
        assert validate_transition(SAVED, PENDING_REVIEW) is None


class TestNextStates:
    """Tests for get_valid_next_states."""

    def test_next_states(self):
        """Successors are read from the table."""
        assert get_valid_next_states(SAVED) == {DRAFT, PENDING_REVIEW, DELETED}
        assert get_valid_next_states(DELETED) == {DRAFT}

    def test_self_not_listed(self):
        """The current state is not listed as a successor."""
        for state in ArticleState:
            assert state not in get_valid_next_states(state)

    def test_unknown_state_has_no_successors(self):
        """Values outside the state set have no successors."""
        assert get_valid_next_states("bogus") == frozenset()
        assert not is_valid_transition("bogus", DRAFT)


class TestPredicates:
    """Tests for the workflow predicates."""

    @pytest.mark.parametrize("state", list(ArticleState))
    def test_can_edit(self, state):
        """Only drafts and saved articles are editable."""
        assert can_edit(state) is (state in {DRAFT, SAVED})
        assert EDITABLE_STATES == {DRAFT, SAVED}

    @pytest.mark.parametrize("state", list(ArticleState))
    def test_can_publish(self, state):
        """Only articles pending review can be published."""
        assert can_publish(state) is (state is PENDING_REVIEW)

    @pytest.mark.parametrize("state", list(ArticleState))
    def test_can_submit_for_review(self, state):
        """Only saved articles can be submitted for review."""
        assert can_submit_for_review(state) is (state is SAVED)
