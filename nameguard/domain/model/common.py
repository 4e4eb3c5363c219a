"""Base model for bindings, login events and decisions."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen model; unknown fields are rejected rather than dropped."""

    model_config = ConfigDict(frozen=True, extra="forbid")
