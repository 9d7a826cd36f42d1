"""Vote state resolution and transition planning.

Pure functions, no I/O. The vote engine resolves where a user currently
stands on a document, then asks for the list of primitive steps that moves
them to the requested state. Switching direction is two steps: take the old
vote back, then cast the new one.
"""

from dataclasses import dataclass
from uuid import UUID

from agora.domain.error import AlreadyVotedError, NotVotedError, VoteStateCorruptedError
from agora.domain.model.user import User
from agora.domain.value import VotableType, VoteIntent, VoteState, VoteType


@dataclass(frozen=True)
class VoteStep:
    """Cast (``cast=True``) or retract one vote of a given direction.

    Every step touches the same three places: the voter's vote set, the
    document's counter for ``vote_type``, and the creator's karma.
    """

    vote_type: VoteType
    cast: bool

    @property
    def counter_delta(self) -> int:
        return 1 if self.cast else -1

    @property
    def karma_delta(self) -> int:
        return self.vote_type.karma_delta * self.counter_delta


def resolve_vote_state(user: User, votable_id: UUID, kind: VotableType) -> VoteState:
    """Determine the user's current vote on a document.

    Args:
        user: Loaded voter
        votable_id: Document ID
        kind: Document kind, selects which vote sets to consult

    Returns:
        NONE, UPVOTED or DOWNVOTED

    Raises:
        VoteStateCorruptedError: If the id is in both opposing sets
    """
    votes = user.votes_for(kind)
    upvoted = votable_id in votes.upvoted
    downvoted = votable_id in votes.downvoted

    if upvoted and downvoted:
        raise VoteStateCorruptedError(str(user.id), str(votable_id))
    if upvoted:
        return VoteState.UPVOTED
    if downvoted:
        return VoteState.DOWNVOTED
    return VoteState.NONE


def plan_vote_transition(state: VoteState, intent: VoteIntent) -> list[VoteStep]:
    """Steps that move a voter from ``state`` as requested by ``intent``.

    Raises:
        AlreadyVotedError: Casting the vote the user already holds
        NotVotedError: Removing a vote the user does not hold
    """
    wanted = intent.vote_type
    current = state.vote_type

    if intent.is_removal:
        if current is not wanted:
            raise NotVotedError(wanted.verb)
        return [VoteStep(vote_type=wanted, cast=False)]

    if current is wanted:
        raise AlreadyVotedError(wanted.verb)

    steps = []
    if current is not None:
        steps.append(VoteStep(vote_type=current, cast=False))
    steps.append(VoteStep(vote_type=wanted, cast=True))
    return steps


def final_state(steps: list[VoteStep], state: VoteState) -> VoteState:
    """State reached after applying ``steps`` to ``state``."""
    for step in steps:
        if not step.cast:
            state = VoteState.NONE
        elif step.vote_type is VoteType.UP:
            state = VoteState.UPVOTED
        else:
            state = VoteState.DOWNVOTED
    return state
