"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable pydantic base for entities.

    Changes are made with ``model_copy(update=...)`` or by reloading from
    the repository.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
