"""Domain value objects for name bindings."""

from enum import Enum

from pydantic import field_validator

from nameguard.domain.value.common import RootValueObject

# Platform-imposed display name limit
MAX_NAME_LENGTH = 16

# Longest textual IPv6 address (with embedded IPv4)
MAX_ADDRESS_LENGTH = 45


class DecisionKind(str, Enum):
    """Outcome of evaluating a login event."""

    ALLOW = "allow"
    DENY = "deny"
    UNRESOLVED = "unresolved"


class PlayerName(RootValueObject[str]):
    """Display name chosen by a player.

    Compared exactly; the name is the unique lookup key of a binding.
    """

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is non-empty, trimmed and within the platform limit."""
        if len(v) < 1 or len(v) > MAX_NAME_LENGTH:
            raise ValueError(f"Name must be 1-{MAX_NAME_LENGTH} characters")
        if v != v.strip():
            raise ValueError("Name must not have surrounding whitespace")
        return v


class OriginAddress(RootValueObject[str]):
    """Network address a login event originated from."""

    @field_validator("root")
    @classmethod
    def validate_address(cls, v: str) -> str:
        """Validate address is non-empty and fits the address columns."""
        v = v.strip()
        if len(v) < 1 or len(v) > MAX_ADDRESS_LENGTH:
            raise ValueError(f"Address must be 1-{MAX_ADDRESS_LENGTH} characters")
        return v
