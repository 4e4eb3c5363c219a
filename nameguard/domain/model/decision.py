"""Decision returned for a login event.

A tagged union discriminated on ``kind``:

- Allow: the identity may use the name; the binding was recorded.
- Deny: the name belongs to another identity; the host must reject the session.
- Unresolved: the event could not be decided (invalid input or store failure);
  the host leaves the session untouched.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from nameguard.domain.model.common import DomainModel
from nameguard.domain.value import DecisionKind

NAME_BOUND_TO_OTHER_IDENTITY = "name already bound to a different identity"


class Allow(DomainModel):
    """Login accepted."""

    kind: Literal[DecisionKind.ALLOW] = DecisionKind.ALLOW
    claimed: bool = False  # True when the name was free and is now bound


class Deny(DomainModel):
    """Login rejected because the name is bound to another identity key."""

    kind: Literal[DecisionKind.DENY] = DecisionKind.DENY
    reason: str = NAME_BOUND_TO_OTHER_IDENTITY
    bound_identity_key: str | None = None


class Unresolved(DomainModel):
    """Login neither accepted nor rejected."""

    kind: Literal[DecisionKind.UNRESOLVED] = DecisionKind.UNRESOLVED
    error: str
    error_type: Literal["invalid_event", "store_unavailable"]


Decision = Annotated[Union[Allow, Deny, Unresolved], Field(discriminator="kind")]
