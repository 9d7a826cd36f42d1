"""Domain layer errors.

``DomainError`` subclasses are operational: expected, user-facing failures of
a request. ``ConsistencyError`` subclasses signal corrupted stored state and
must never be rendered as a client mistake.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


# ---------------------------------------------------------------------------
# Voting
# ---------------------------------------------------------------------------


class AlreadyVotedError(BusinessRuleViolationError):
    """Raised when repeating the vote a user has already cast."""

    def __init__(self, direction: str):
        self.direction = direction
        super().__init__(f"You have already {direction}d")


class NotVotedError(BusinessRuleViolationError):
    """Raised when removing a vote the user never cast."""

    def __init__(self, direction: str):
        self.direction = direction
        super().__init__(f"You have not {direction}d")


class ConcurrentVoteError(DomainError):
    """Raised when a conditional vote write loses a race with another request.

    Nothing from the failed step has been written; the caller may retry.
    """

    def __init__(self, votable_id: str):
        self.votable_id = votable_id
        super().__init__(
            f"Vote on {votable_id} changed concurrently, please retry"
        )


# ---------------------------------------------------------------------------
# Communities
# ---------------------------------------------------------------------------


class InvalidCommunityNameError(ValidationError):
    """Raised when a community name contains disallowed characters."""

    def __init__(self) -> None:
        super().__init__(
            "Community name can only contain letters, numbers and underscores"
        )


class CommunityNameTakenError(BusinessRuleViolationError):
    """Raised when creating a community whose name already exists."""

    def __init__(self, name: str):
        super().__init__(f"Community name already taken: {name}")


class InsufficientKarmaError(BusinessRuleViolationError):
    """Raised when a user lacks the karma for a privileged action."""

    def __init__(self, karma: int, required: int):
        self.karma = karma
        self.required = required
        super().__init__(f"You need at least {required} karma to create a community")


class BannedFromCommunityError(DomainError):
    """Raised when a banned user tries to author content in a community."""

    def __init__(self, community_id: str):
        self.community_id = community_id
        super().__init__("You are banned from this community")


class NotAuthorizedError(DomainError):
    """Raised when a user may not modify a resource."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"You are not authorized to delete this {resource}")


class CommunityDeletionForbiddenError(DomainError):
    """Raised when someone other than the creator or an admin deletes a community."""

    def __init__(self) -> None:
        super().__init__("You are not the creator of this community nor the Admin")


class NotCommunityCreatorError(BusinessRuleViolationError):
    """Raised when someone other than the creator updates a community."""

    def __init__(self) -> None:
        super().__init__("You are not the creator of this community")


class NotModeratorError(BusinessRuleViolationError):
    """Raised when a non-moderator performs a moderation action."""

    def __init__(self) -> None:
        super().__init__("You are not a moderator of this community")


class CannotBanCreatorError(BusinessRuleViolationError):
    """Raised when a moderator tries to ban the community creator."""

    def __init__(self) -> None:
        super().__init__("The community creator cannot be banned")


class AlreadyBannedError(BusinessRuleViolationError):
    """Raised when banning a user who is already banned."""

    def __init__(self) -> None:
        super().__init__("User is already banned from this community")


class NotBannedError(BusinessRuleViolationError):
    """Raised when unbanning a user who is not banned."""

    def __init__(self) -> None:
        super().__init__("User is not banned from this community")


class AlreadySubscribedError(BusinessRuleViolationError):
    """Raised when subscribing twice to the same community."""

    def __init__(self) -> None:
        super().__init__("User is already subscribed to this community")


class NotSubscribedError(BusinessRuleViolationError):
    """Raised when unsubscribing from a community the user never joined."""

    def __init__(self) -> None:
        super().__init__("User not subscribed to this community")


# ---------------------------------------------------------------------------
# Internal consistency
# ---------------------------------------------------------------------------


class ConsistencyError(Exception):
    """Stored state violates an invariant. Not caused by the request."""

    pass


class VoteStateCorruptedError(ConsistencyError):
    """A document id is present in both of a user's opposing vote sets."""

    def __init__(self, user_id: str, votable_id: str):
        self.user_id = user_id
        self.votable_id = votable_id
        super().__init__(
            f"User {user_id} has both upvoted and downvoted {votable_id}"
        )


class NegativeCounterError(ConsistencyError):
    """A vote counter would drop below zero."""

    def __init__(self, votable_id: str, field: str):
        self.votable_id = votable_id
        self.field = field
        super().__init__(f"{field} of {votable_id} would become negative")
