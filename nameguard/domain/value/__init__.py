"""Domain value objects for nameguard."""

from nameguard.domain.value.identifiers import MAX_IDENTITY_KEY_LENGTH, IdentityKey
from nameguard.domain.value.types import (
    MAX_ADDRESS_LENGTH,
    MAX_NAME_LENGTH,
    DecisionKind,
    OriginAddress,
    PlayerName,
)

__all__ = [
    # Identifiers
    "IdentityKey",
    "MAX_IDENTITY_KEY_LENGTH",
    # Types
    "DecisionKind",
    "OriginAddress",
    "PlayerName",
    "MAX_ADDRESS_LENGTH",
    "MAX_NAME_LENGTH",
]
