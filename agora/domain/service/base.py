"""Shared behaviour of domain services."""

from typing import TypeVar

import logfire

from agora.domain.error import NotFoundError

E = TypeVar("E")


class Service:
    """Base class for domain services.

    Services coordinate repositories and enforce the rules that span more
    than one aggregate.
    """

    @staticmethod
    def require(entity: E | None, resource: str, identifier: object) -> E:
        """Return a looked-up entity, or raise if the lookup found nothing.

        Raises:
            NotFoundError: If ``entity`` is None
        """
        if entity is None:
            logfire.warn(
                "Lookup found nothing", resource=resource, identifier=str(identifier)
            )
            raise NotFoundError(resource, str(identifier))
        return entity
