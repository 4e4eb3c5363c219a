"""Binding entity.

The durable association between a display name and an identity key.
"""

from typing import Optional

from nameguard.domain.model.common import DomainModel
from nameguard.domain.value import IdentityKey, PlayerName


class Binding(DomainModel):
    """A name bound to exactly one identity key.

    Keyed by identity key; the name is a unique secondary key. An identity
    that logs in under a new, unbound name keeps its row and has the name
    replaced.
    """

    identity_key: IdentityKey
    name: PlayerName
    first_seen_address: Optional[str] = None  # Set on insert, never overwritten
    last_seen_address: Optional[str] = None  # Refreshed on every accepted login
