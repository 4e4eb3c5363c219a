"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from nameguard.domain.model import Binding
from nameguard.domain.value import IdentityKey, PlayerName


def row_to_binding(row: Dict[str, Any]) -> Binding:
    """Convert database row to Binding domain model.

    Args:
        row: Database row as dict

    Returns:
        Binding domain model
    """
    return Binding(
        identity_key=IdentityKey(row["identity_key"]),
        name=PlayerName(row["name"]),
        first_seen_address=row.get("first_seen_address"),
        last_seen_address=row.get("last_seen_address"),
    )


def binding_to_dict(binding: Binding) -> Dict[str, Any]:
    """Convert Binding domain model to database dict.

    Args:
        binding: Binding domain model

    Returns:
        Dictionary for database insert/update
    """
    return {
        "identity_key": binding.identity_key.root,
        "name": binding.name.root,
        "first_seen_address": binding.first_seen_address,
        "last_seen_address": binding.last_seen_address,
    }
