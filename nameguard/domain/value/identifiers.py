"""Identity key value object.

The identity key is the platform-assigned token trusted as the true identity
of a player (a UUID on Minecraft-style servers). It is the primary key of the
players table.
"""

from uuid import UUID

from pydantic import field_validator

from nameguard.domain.value.common import RootValueObject

# Canonical UUID text is 36 characters; opaque keys must fit the same column
MAX_IDENTITY_KEY_LENGTH = 36


class IdentityKey(RootValueObject[str]):
    """Opaque, globally unique identity token.

    Keys that parse as UUIDs are normalised to canonical lowercase
    hyphenated form, so "0F8FAD5B..." and "0f8fad5b-..." compare equal.
    """

    @field_validator("root")
    @classmethod
    def validate_identity_key(cls, v: str) -> str:
        """Validate key length and canonicalise UUIDs."""
        v = v.strip()
        if len(v) < 1 or len(v) > MAX_IDENTITY_KEY_LENGTH:
            raise ValueError(
                f"Identity key must be 1-{MAX_IDENTITY_KEY_LENGTH} characters"
            )
        try:
            return str(UUID(v))
        except ValueError:
            return v
