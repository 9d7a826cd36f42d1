"""Karma-gated privileges."""

from agora.domain.error import InsufficientKarmaError

COMMUNITY_CREATION_KARMA = 50


def assert_can_create_community(
    karma: int, threshold: int = COMMUNITY_CREATION_KARMA
) -> None:
    """Require enough karma to create a community.

    Raises:
        InsufficientKarmaError: If ``karma`` is below ``threshold``
    """
    if karma < threshold:
        raise InsufficientKarmaError(karma=karma, required=threshold)
