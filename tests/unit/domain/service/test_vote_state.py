"""Unit tests for vote state resolution and transition planning."""

from uuid import uuid4

import pytest

from agora.domain.error import AlreadyVotedError, NotVotedError, VoteStateCorruptedError
from agora.domain.service import VoteStep, plan_vote_transition, resolve_vote_state
from agora.domain.service.vote_state import final_state
from agora.domain.value import VotableType, VoteIntent, VoteSets, VoteState, VoteType
from tests.conftest import make_user

UP_CAST = VoteStep(vote_type=VoteType.UP, cast=True)
UP_RETRACT = VoteStep(vote_type=VoteType.UP, cast=False)
DOWN_CAST = VoteStep(vote_type=VoteType.DOWN, cast=True)
DOWN_RETRACT = VoteStep(vote_type=VoteType.DOWN, cast=False)


class TestResolveVoteState:
    """Tests for resolve_vote_state."""

    def test_no_vote(self):
        user = make_user()
        assert resolve_vote_state(user, uuid4(), VotableType.POST) is VoteState.NONE

    def test_upvoted(self):
        post_id = uuid4()
        user = make_user(post_votes=VoteSets(upvoted=frozenset({post_id})))
        assert resolve_vote_state(user, post_id, VotableType.POST) is VoteState.UPVOTED

    def test_downvoted(self):
        comment_id = uuid4()
        user = make_user(comment_votes=VoteSets(downvoted=frozenset({comment_id})))
        assert (
            resolve_vote_state(user, comment_id, VotableType.COMMENT)
            is VoteState.DOWNVOTED
        )

    def test_kind_selects_vote_sets(self):
        """A post vote is invisible when resolving a comment with the same id."""
        document_id = uuid4()
        user = make_user(post_votes=VoteSets(upvoted=frozenset({document_id})))

        assert (
            resolve_vote_state(user, document_id, VotableType.COMMENT) is VoteState.NONE
        )

    def test_id_in_both_sets_is_corruption(self):
        post_id = uuid4()
        user = make_user(
            post_votes=VoteSets(
                upvoted=frozenset({post_id}), downvoted=frozenset({post_id})
            )
        )

        with pytest.raises(VoteStateCorruptedError):
            resolve_vote_state(user, post_id, VotableType.POST)


class TestPlanVoteTransition:
    """Tests for plan_vote_transition, one per row of the transition table."""

    def test_none_upvote(self):
        assert plan_vote_transition(VoteState.NONE, VoteIntent.UPVOTE) == [UP_CAST]

    def test_none_downvote(self):
        assert plan_vote_transition(VoteState.NONE, VoteIntent.DOWNVOTE) == [DOWN_CAST]

    def test_upvoted_upvote_fails(self):
        with pytest.raises(AlreadyVotedError, match="already upvoted"):
            plan_vote_transition(VoteState.UPVOTED, VoteIntent.UPVOTE)

    def test_downvoted_downvote_fails(self):
        with pytest.raises(AlreadyVotedError, match="already downvoted"):
            plan_vote_transition(VoteState.DOWNVOTED, VoteIntent.DOWNVOTE)

    def test_downvoted_upvote_switches(self):
        assert plan_vote_transition(VoteState.DOWNVOTED, VoteIntent.UPVOTE) == [
            DOWN_RETRACT,
            UP_CAST,
        ]

    def test_upvoted_downvote_switches(self):
        assert plan_vote_transition(VoteState.UPVOTED, VoteIntent.DOWNVOTE) == [
            UP_RETRACT,
            DOWN_CAST,
        ]

    def test_upvoted_remove_upvote(self):
        assert plan_vote_transition(VoteState.UPVOTED, VoteIntent.REMOVE_UPVOTE) == [
            UP_RETRACT
        ]

    def test_downvoted_remove_downvote(self):
        assert plan_vote_transition(
            VoteState.DOWNVOTED, VoteIntent.REMOVE_DOWNVOTE
        ) == [DOWN_RETRACT]

    @pytest.mark.parametrize("state", [VoteState.NONE, VoteState.DOWNVOTED])
    def test_remove_upvote_without_upvote_fails(self, state):
        with pytest.raises(NotVotedError, match="not upvoted"):
            plan_vote_transition(state, VoteIntent.REMOVE_UPVOTE)

    @pytest.mark.parametrize("state", [VoteState.NONE, VoteState.UPVOTED])
    def test_remove_downvote_without_downvote_fails(self, state):
        with pytest.raises(NotVotedError, match="not downvoted"):
            plan_vote_transition(state, VoteIntent.REMOVE_DOWNVOTE)


class TestStepDeltas:
    """Karma and counter deltas of the planned steps."""

    def test_single_step_deltas(self):
        assert (UP_CAST.counter_delta, UP_CAST.karma_delta) == (1, 1)
        assert (UP_RETRACT.counter_delta, UP_RETRACT.karma_delta) == (-1, -1)
        assert (DOWN_CAST.counter_delta, DOWN_CAST.karma_delta) == (1, -1)
        assert (DOWN_RETRACT.counter_delta, DOWN_RETRACT.karma_delta) == (-1, 1)

    def test_switch_moves_karma_by_two(self):
        to_up = plan_vote_transition(VoteState.DOWNVOTED, VoteIntent.UPVOTE)
        to_down = plan_vote_transition(VoteState.UPVOTED, VoteIntent.DOWNVOTE)

        assert sum(step.karma_delta for step in to_up) == 2
        assert sum(step.karma_delta for step in to_down) == -2

    @pytest.mark.parametrize(
        "state,intent,expected",
        [
            (VoteState.NONE, VoteIntent.UPVOTE, VoteState.UPVOTED),
            (VoteState.NONE, VoteIntent.DOWNVOTE, VoteState.DOWNVOTED),
            (VoteState.DOWNVOTED, VoteIntent.UPVOTE, VoteState.UPVOTED),
            (VoteState.UPVOTED, VoteIntent.DOWNVOTE, VoteState.DOWNVOTED),
            (VoteState.UPVOTED, VoteIntent.REMOVE_UPVOTE, VoteState.NONE),
            (VoteState.DOWNVOTED, VoteIntent.REMOVE_DOWNVOTE, VoteState.NONE),
        ],
    )
    def test_final_state(self, state, intent, expected):
        assert final_state(plan_vote_transition(state, intent), state) is expected
