"""Vote domain service.

Applies vote intents across three records: the voter's vote sets, the
document's counters and the creator's karma.
"""

from uuid import UUID

import logfire

from agora.domain.error import ConcurrentVoteError, NotFoundError
from agora.domain.model.votable import VotableDocument
from agora.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VotableRepository,
)
from agora.domain.value import UserId, VotableType, VoteIntent

from .base import Service
from .vote_state import VoteStep, final_state, plan_vote_transition, resolve_vote_state


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        user_repository: UserRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            user_repository: User repository
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.user_repository = user_repository
        self.documents: dict[VotableType, VotableRepository] = {
            VotableType.POST: post_repository,
            VotableType.COMMENT: comment_repository,
        }

    async def apply_vote(
        self,
        intent: VoteIntent,
        user_id: UserId,
        kind: VotableType,
        votable_id: UUID,
    ) -> VotableDocument:
        """Apply a vote intent and return the updated document.

        All checks run before the first write. Each planned step then writes
        the voter's vote set first (conditionally), the document counter,
        and finally the creator's karma.

        Args:
            intent: Requested transition
            user_id: Acting user
            kind: Document kind
            votable_id: Document ID

        Returns:
            The document as stored after the vote

        Raises:
            NotFoundError: If the document, voter or creator does not exist
            AlreadyVotedError: If casting a vote the user already holds
            NotVotedError: If removing a vote the user does not hold
            ConcurrentVoteError: If another request changed the vote meanwhile
            VoteStateCorruptedError: If the voter's vote sets are inconsistent
        """
        with logfire.span(
            "vote_service.apply_vote",
            intent=intent.value,
            kind=kind.value,
            votable_id=str(votable_id),
            user_id=str(user_id),
        ):
            repository = self.documents[kind]

            document = await repository.find_by_id(votable_id)
            if not document:
                logfire.warn(
                    "Vote on non-existent document",
                    kind=kind.value,
                    votable_id=str(votable_id),
                )
                raise NotFoundError(kind.value.capitalize(), str(votable_id))

            voter = self.require(
                await self.user_repository.find_by_id(user_id), "User", user_id
            )
            self.require(
                await self.user_repository.find_by_id(document.creator_id),
                "User",
                document.creator_id,
            )

            state = resolve_vote_state(voter, document.id, kind)
            steps = plan_vote_transition(state, intent)

            for step in steps:
                await self._apply_step(step, user_id, document)

            logfire.info(
                "Vote applied",
                votable_id=str(votable_id),
                previous_state=state.value,
                new_state=final_state(steps, state).value,
                karma_delta=sum(step.karma_delta for step in steps),
            )

            updated = await repository.find_by_id(votable_id)
            if not updated:
                # Deleted while the vote was being applied
                raise NotFoundError(kind.value.capitalize(), str(votable_id))
            return updated

    async def _apply_step(
        self, step: VoteStep, user_id: UserId, document: VotableDocument
    ) -> None:
        """Write one cast/retract step to the voter, document and creator."""
        if step.cast:
            written = await self.user_repository.push_vote(
                user_id, document.kind, step.vote_type, document.id
            )
        else:
            written = await self.user_repository.pull_vote(
                user_id, document.kind, step.vote_type, document.id
            )

        if not written:
            logfire.warn(
                "Conditional vote write failed",
                user_id=str(user_id),
                votable_id=str(document.id),
                vote_type=step.vote_type.value,
                cast=step.cast,
            )
            raise ConcurrentVoteError(str(document.id))

        await self.documents[document.kind].adjust_votes(
            document.id, step.vote_type, step.counter_delta
        )
        await self.user_repository.adjust_karma(document.creator_id, step.karma_delta)
