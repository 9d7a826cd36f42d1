"""Shared base for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic entity.

    Services never mutate entities in place; they build a changed copy with
    ``model_copy(update=...)`` and hand it to a repository.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
